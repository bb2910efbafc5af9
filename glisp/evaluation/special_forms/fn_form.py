from glisp import EvaluatorFn, SExpression
from glisp.errors import GlispArityError
from glisp.types.environment import Environment
from glisp.types.lambda_fn import Lambda
from glisp.types.symbol import Symbol

DO = Symbol("do")


def fn_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> Lambda:
    """(fn [params] body...) closes over `env`. Extra body forms run as a `do`."""
    if len(exp) < 3:
        raise GlispArityError("fn requires a parameter list and a body")
    body = exp[2] if len(exp) == 3 else [DO, *exp[2:]]
    return Lambda(exp[1], body, env)
