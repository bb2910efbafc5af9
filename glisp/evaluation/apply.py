"""Non-tail function application.

The evaluator applies functions inline so it can loop on closure bodies; this
module is for everything else that needs to call a Glisp callable and get a
value back: the macro expander and native functions taking callbacks.
"""

from __future__ import annotations

from typing import Sequence

from glisp import LispValue
from glisp.errors import GlispNotCallable
from glisp.printer import print_exp
from glisp.types.environment import Environment
from glisp.types.lambda_fn import Lambda
from glisp.types.symbol import Keyword


def not_callable_message(fn: LispValue) -> str:
    if isinstance(fn, Keyword):
        typename = "Keyword "
    elif isinstance(fn, list):
        typename = "List "
    else:
        typename = ""
    return (
        f"[EVAL] {typename}{print_exp(fn)} is not a function. "
        "First element of list always should be a function."
    )


def apply(
    fn: LispValue,
    args: Sequence[LispValue],
    env: Environment | None = None,
    save_eval: bool = False,
) -> LispValue:
    """Call `fn` with already-evaluated `args` and return its value.

    - Lambda: bind args in a child of its captured env and evaluate the body.
    - Python callable: invoke as `fn(env, args)`.
    - Anything else raises GlispNotCallable.
    """
    if isinstance(fn, Lambda):
        from glisp.evaluation.evaluator import evaluate

        call_env = Environment(fn.env, fn.formals, list(args), name="fn")
        return evaluate(fn.body, call_env, save_eval)
    if callable(fn):
        return fn(env, list(args))
    raise GlispNotCallable(not_callable_message(fn))
