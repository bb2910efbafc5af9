"""Head-position macro expansion."""

from __future__ import annotations

import logging

from glisp import SExpression
from glisp.evaluation.annotate import stamp_fn
from glisp.evaluation.apply import apply
from glisp.types.environment import Environment
from glisp.types.lambda_fn import Lambda
from glisp.types.node import is_list
from glisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def macroexpand(exp: SExpression, env: Environment, save_eval: bool = False) -> SExpression:
    """Expand `exp` while its head symbol names a macro in `env`.

    Each step calls the macro on the unevaluated tail of the list and
    continues with the form it returns. Stops at the first form whose head is
    unbound, bound to a non-macro, or that is not a list at all. Arguments are
    never evaluated here.
    """
    while is_list(exp) and exp and isinstance(exp[0], Symbol) and env.find(exp[0]):
        fn = env.get(exp[0])
        if not (isinstance(fn, Lambda) and fn.is_macro):
            break
        if save_eval:
            stamp_fn(exp, fn)
        logger.debug("expanding macro %s", exp[0])
        exp = apply(fn, exp[1:], env, save_eval)
    return exp
