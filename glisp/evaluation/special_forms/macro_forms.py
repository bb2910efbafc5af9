"""Special forms: macro and macroexpand."""

from __future__ import annotations

from glisp import EvaluatorFn, SExpression, LispValue
from glisp.errors import GlispArityError
from glisp.evaluation.macro_expander import macroexpand
from glisp.types.environment import Environment
from glisp.types.lambda_fn import Lambda
from glisp.types.symbol import Symbol

FN = Symbol("fn")


def macro_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> Lambda:
    """(macro [params] body) or (macro name [params] body)

    Builds a function closing over `env` and returns a macro-flagged copy of
    it. The named variant also binds the macro to `name` in `env`.
    """
    if len(exp) == 4 and isinstance(exp[1], Symbol):
        name, params, body = exp[1], exp[2], exp[3]
    elif len(exp) == 3:
        name, params, body = None, exp[1], exp[2]
    else:
        raise GlispArityError("macro requires a parameter list and a body")

    fn = evaluate_fn([FN, params, body], env, save_eval)
    macro = fn.as_macro()
    if name is not None:
        env.set(name, macro)
    return macro


def macroexpand_form(
    exp: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    save_eval: bool = False,
) -> LispValue:
    """(macroexpand form): expand `form` (unevaluated) and return the expansion."""
    if len(exp) != 2:
        raise GlispArityError("macroexpand expects exactly 1 argument")
    return macroexpand(exp[1], env, save_eval)
