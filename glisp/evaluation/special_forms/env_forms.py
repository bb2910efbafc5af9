"""Special forms for inspecting the scope chain.

(env-chain)      => "let <- fn <- global"
(which-env name) => names of the scopes that bind `name` directly,
                    or "not defined"
"""

from glisp import EvaluatorFn, SExpression
from glisp.errors import GlispArityError, GlispTypeError
from glisp.types.environment import Environment
from glisp.types.symbol import Symbol


def env_chain_form(
    exp: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, save_eval: bool = False
) -> str:
    return " <- ".join(e.name for e in env.chain())


def which_env_form(
    exp: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, save_eval: bool = False
) -> str:
    if len(exp) != 2:
        raise GlispArityError("which-env expects exactly 1 argument")
    name = exp[1]
    if not isinstance(name, Symbol):
        raise GlispTypeError(f"which-env expects a symbol, got {name!r}")
    owners = [e.name for e in env.chain() if e.has_own(name)]
    return " <- ".join(owners) or "not defined"
