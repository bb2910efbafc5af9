"""Special form: try.

    (try body (catch err handler))

Structured errors bind their message under `err`; values raised with the
`throw` native bind as-is. Without a catch clause the failure propagates.
"""

import logging

from glisp import EvaluatorFn, SExpression, LispValue
from glisp.errors import ThrowException
from glisp.types.environment import Environment
from glisp.types.nil import Nil
from glisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

CATCH = Symbol("catch")


def _catch_clause(form: SExpression):
    if isinstance(form, list) and len(form) >= 2 and form[0] == CATCH:
        return form
    return None


def try_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> LispValue:
    body = exp[1] if len(exp) > 1 else Nil
    clause = _catch_clause(exp[2]) if len(exp) > 2 else None

    try:
        return evaluate_fn(body, env, save_eval)
    except Exception as exc:
        if clause is None:
            raise
        err = exc.value if isinstance(exc, ThrowException) else str(exc)
        logger.debug("try caught %s: %r", type(exc).__name__, err)
        catch_env = Environment(env, [clause[1]], [err], name="catch")
        handler = clause[2] if len(clause) > 2 else Nil
        return evaluate_fn(handler, catch_env, save_eval)
