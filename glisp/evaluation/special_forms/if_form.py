from glisp import EvaluatorFn, SExpression
from glisp.errors import GlispArityError
from glisp.types.environment import Environment
from glisp.types.nil import Nil, is_truthy
from glisp.types.tail_call import TailCall


def if_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> TailCall:
    if len(exp) < 3:
        raise GlispArityError("if requires a condition and a then-expression")

    if is_truthy(evaluate_fn(exp[1], env, save_eval)):
        return TailCall(exp[2], env)
    return TailCall(exp[3] if len(exp) > 3 else Nil, env)
