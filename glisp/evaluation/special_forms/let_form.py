from glisp import EvaluatorFn, SExpression, LispValue
from glisp.errors import GlispArityError, GlispTypeError
from glisp.types.environment import Environment
from glisp.types.nil import Nil
from glisp.types.symbol import Symbol
from glisp.types.tail_call import TailCall

DO = Symbol("do")


def let_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> LispValue | TailCall:
    """(let [name expr ...] body...)

    Bindings are evaluated left to right inside the new scope, so later ones
    see earlier ones. A name may be a parameter list, which destructures the
    value. Several body forms run as an implicit `do`.
    """
    if len(exp) < 2:
        raise GlispArityError("let requires a binding vector")
    binds = exp[1]
    if not isinstance(binds, list):
        raise GlispTypeError(f"let bindings must be a vector, got {binds!r}")
    if len(binds) % 2 != 0:
        raise GlispArityError("let bindings must come in name/value pairs")

    let_env = Environment(env, name="let")
    for i in range(0, len(binds), 2):
        let_env.bind_all(binds[i], evaluate_fn(binds[i + 1], let_env, save_eval))

    body = exp[2:]
    if not body:
        return Nil
    if len(body) == 1:
        return TailCall(body[0], let_env)
    return TailCall([DO, *body], let_env)
