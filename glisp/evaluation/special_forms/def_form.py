from glisp import EvaluatorFn, SExpression, LispValue
from glisp.errors import GlispArityError, GlispTypeError
from glisp.types.environment import Environment
from glisp.types.symbol import Symbol


def def_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost environment only and returns the bound value.
    """
    if len(exp) != 3:
        raise GlispArityError("def requires exactly 2 arguments")
    name = exp[1]
    if not isinstance(name, Symbol):
        raise GlispTypeError(f"def expects a symbol name, got {name!r}")
    return env.set(name, evaluate_fn(exp[2], env, save_eval))
