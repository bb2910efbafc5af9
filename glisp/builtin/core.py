"""Native functions registered in the global environment.

Only what the evaluator's own rewrites rely on (`cons` and `concat` for
quasiquote, `throw` for raising plain values) plus enough arithmetic,
comparison and list handling to write small programs. Every native takes
`(env, args)`.
"""
from __future__ import annotations

from glisp import LispValue
from glisp.errors import GlispArityError, GlispTypeError, ThrowException
from glisp.evaluation.apply import apply as apply_engine
from glisp.printer import print_exp
from glisp.types.environment import Environment
from glisp.types.nil import Nil
from glisp.types.node import MalVector
from glisp.types.symbol import Symbol


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise GlispTypeError(f"All arguments to {name} must be numbers, got {print_exp(a)}")
    return args


def _seq(name: str, x: LispValue) -> list[LispValue]:
    if x is Nil or x is None:
        return []
    if not isinstance(x, list):
        raise GlispTypeError(f"{name} expects a sequence, got {print_exp(x)}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    return sum(_numbers("+", args))


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract the rest from the first; unary negation for one arg."""
    if not args:
        raise GlispArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    return args[0] - sum(args[1:])


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    if not args:
        raise GlispArityError("/ requires at least 1 argument")
    _numbers("/", args)
    if len(args) == 1:
        return 1 / args[0]
    result = args[0]
    for x in args[1:]:
        result /= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    return all(a == b for a, b in zip(args, args[1:]))


def _chain(name: str, op):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__name__ = name
    return compare


lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    if len(args) != 1:
        raise GlispArityError("not expects exactly 1 argument")
    return args[0] is False or args[0] is Nil or args[0] is None


# -------------------------------
# Sequences
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> list:
    return list(args)


def vector_builtin(env: Environment, args: list[LispValue]) -> MalVector:
    return MalVector(args)


def cons(env: Environment, args: list[LispValue]) -> list:
    """(cons x seq) => new list with x in front of seq."""
    if len(args) != 2:
        raise GlispArityError("cons expects exactly 2 arguments")
    return [args[0], *_seq("cons", args[1])]


def concat(env: Environment, args: list[LispValue]) -> list:
    """Concatenate any number of sequences into a new list."""
    result: list = []
    for seq in args:
        result.extend(_seq("concat", seq))
    return result


def first(env: Environment, args: list[LispValue]) -> LispValue:
    if len(args) != 1:
        raise GlispArityError("first expects exactly 1 argument")
    seq = _seq("first", args[0])
    return seq[0] if seq else Nil


def rest(env: Environment, args: list[LispValue]) -> list:
    if len(args) != 1:
        raise GlispArityError("rest expects exactly 1 argument")
    return list(_seq("rest", args[0])[1:])


def count(env: Environment, args: list[LispValue]) -> int:
    if len(args) != 1:
        raise GlispArityError("count expects exactly 1 argument")
    return len(_seq("count", args[0]))


def is_nil(env: Environment, args: list[LispValue]) -> bool:
    return len(args) == 1 and (args[0] is Nil or args[0] is None)


# -------------------------------
# Functions and errors
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f a b [c d]) => (f a b c d)"""
    if not args:
        raise GlispArityError("apply requires a function")
    fn, *spread = args
    if spread:
        spread = [*spread[:-1], *_seq("apply", spread[-1])]
    return apply_engine(fn, spread, env)


def throw(env: Environment, args: list[LispValue]) -> LispValue:
    """Raise the argument so that an enclosing try/catch binds it unchanged."""
    if len(args) != 1:
        raise GlispArityError("throw expects exactly 1 argument")
    raise ThrowException(args[0])


def str_builtin(env: Environment, args: list[LispValue]) -> str:
    return "".join(print_exp(a, readably=False) for a in args)


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("="): equals,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("not"): logical_not,
            Symbol("list"): list_builtin,
            Symbol("vector"): vector_builtin,
            Symbol("cons"): cons,
            Symbol("concat"): concat,
            Symbol("first"): first,
            Symbol("rest"): rest,
            Symbol("count"): count,
            Symbol("nil?"): is_nil,
            Symbol("apply"): apply,
            Symbol("throw"): throw,
            Symbol("str"): str_builtin,
        }
    )
