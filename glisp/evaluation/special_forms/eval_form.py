from glisp import EvaluatorFn, SExpression
from glisp.errors import GlispArityError
from glisp.types.environment import Environment
from glisp.types.tail_call import TailCall


def eval_when_execute_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> TailCall:
    """(eval-when-execute form): evaluate `form`, then evaluate its result."""
    if len(exp) != 2:
        raise GlispArityError("eval-when-execute expects exactly one argument")
    return TailCall(evaluate_fn(exp[1], env, save_eval), env)
