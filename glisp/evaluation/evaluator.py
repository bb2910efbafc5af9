"""Core evaluator for the Glisp interpreter.

A single loop narrows `(exp, env)` until a value comes out. Special forms and
closure calls in tail position hand back a TailCall instead of recursing, so
tail-recursive Glisp functions run in constant Python stack. Sub-evaluations
that are not in tail position (arguments, conditions, bindings) recurse.

With `save_eval` on, every node the loop passes through is stamped with the
value the loop finally produces, and call sites with the callable applied.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from glisp import SExpression, LispValue
from glisp.errors import GlispNotCallable
from glisp.evaluation.annotate import stamp_eval, stamp_expansion, stamp_fn
from glisp.evaluation.apply import not_callable_message
from glisp.evaluation.macro_expander import macroexpand
from glisp.evaluation.special_forms import SPECIAL_FORMS
from glisp.types.environment import Environment
from glisp.types.lambda_fn import Lambda
from glisp.types.node import MalVector, is_list, is_node, is_vector
from glisp.types.symbol import Symbol
from glisp.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def eval_atom(exp: SExpression, env: Environment, save_eval: bool = False) -> LispValue:
    """Evaluate anything that is not a call: symbols are looked up, vectors
    and maps are evaluated element-wise, everything else evaluates to itself."""
    if isinstance(exp, Symbol):
        return env.get(exp)
    if isinstance(exp, list):
        ret = eval_sequence(exp, env, save_eval)
        if is_vector(exp):
            ret = MalVector(ret)
        if save_eval:
            stamp_eval(exp, ret)
        return ret
    if isinstance(exp, dict):
        ret = {k: evaluate(v, env, save_eval) for k, v in exp.items()}
        if save_eval:
            stamp_eval(exp, ret)
        return ret
    return exp


def eval_sequence(exp: list, env: Environment, save_eval: bool = False) -> list:
    return [evaluate(x, env, save_eval) for x in exp]


def _apply_form(exp: list, env: Environment, save_eval: bool) -> LispValue | TailCall:
    fn, *args = eval_sequence(exp, env, save_eval)

    if isinstance(fn, Lambda):
        if save_eval:
            stamp_fn(exp, fn)
        return TailCall(fn.body, Environment(fn.env, fn.formals, args, name="fn"))
    if callable(fn):
        ret = fn(env, args)
        if save_eval:
            stamp_fn(exp, fn)
        return ret
    raise GlispNotCallable(not_callable_message(fn))


def _finish(pending: Optional[dict[int, Any]], value: LispValue) -> LispValue:
    if pending:
        for node in pending.values():
            stamp_eval(node, value)
    return value


def evaluate(exp: SExpression, env: Environment, save_eval: bool = False) -> LispValue:
    """Evaluate `exp` in `env` and return its value.

    Errors raised anywhere below propagate unchanged unless a `try` form
    intercepts them.
    """
    # caller-tree nodes whose value is whatever this loop ends up returning;
    # lists built by the special forms themselves are plain and never held
    pending: Optional[dict[int, Any]] = {} if save_eval else None

    while True:
        if not is_list(exp):
            return _finish(pending, eval_atom(exp, env, save_eval))
        if pending is not None and is_node(exp):
            pending[id(exp)] = exp

        expanded = macroexpand(exp, env, save_eval)
        if expanded is not exp:
            if save_eval:
                stamp_expansion(exp, expanded)
            exp = expanded
            if not is_list(exp):
                return _finish(pending, eval_atom(exp, env, save_eval))
            if pending is not None and is_node(exp):
                pending[id(exp)] = exp

        if not exp:
            return _finish(pending, exp)

        head = exp[0]
        handler = SPECIAL_FORMS.get(head.name) if isinstance(head, Symbol) else None
        if handler is not None:
            logger.debug("special form %s", head.name)
            result = handler(exp, env, evaluate, save_eval)
        else:
            result = _apply_form(exp, env, save_eval)

        if isinstance(result, TailCall):
            exp, env = result.exp, result.env
            continue
        return _finish(pending, result)
