from glisp import EvaluatorFn, SExpression, LispValue
from glisp.errors import GlispArityError
from glisp.evaluation.quasiquote import quasiquote
from glisp.types.environment import Environment
from glisp.types.tail_call import TailCall


def quote_form(
    exp: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, save_eval: bool = False
) -> LispValue:
    if len(exp) != 2:
        raise GlispArityError("quote expects exactly 1 argument")
    return exp[1]


def quasiquote_form(
    exp: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, save_eval: bool = False
) -> TailCall:
    if len(exp) != 2:
        raise GlispArityError("quasiquote expects exactly 1 argument")
    # The rewritten template still has to be evaluated.
    return TailCall(quasiquote(exp[1]), env)
