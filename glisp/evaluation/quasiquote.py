"""Quasiquote expansion.

Rewrites a template into explicit `cons`/`concat`/`quote` calls. No evaluation
happens here; the evaluator runs the rewritten form afterwards.

    `(a ~b ~@c)  =>  (cons (quote a) (cons b (concat c (quote ()))))
"""

from glisp import SExpression
from glisp.types.symbol import Symbol

QUOTE = Symbol("quote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")
CONS = Symbol("cons")
CONCAT = Symbol("concat")


def _is_pair(x: SExpression) -> bool:
    return isinstance(x, list) and len(x) > 0


def quasiquote(exp: SExpression) -> SExpression:
    if not _is_pair(exp):
        return [QUOTE, exp]
    if exp[0] == UNQUOTE:
        return exp[1]
    if _is_pair(exp[0]) and exp[0][0] == SPLICE_UNQUOTE:
        return [CONCAT, exp[0][1], quasiquote(exp[1:])]
    return [CONS, quasiquote(exp[0]), quasiquote(exp[1:])]
