from glisp import EvaluatorFn, SExpression, LispValue
from glisp.types.environment import Environment
from glisp.types.nil import Nil
from glisp.types.tail_call import TailCall


def do_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> LispValue | TailCall:
    if len(exp) == 1:
        return Nil
    for form in exp[1:-1]:
        evaluate_fn(form, env, save_eval)
    return TailCall(exp[-1], env)
