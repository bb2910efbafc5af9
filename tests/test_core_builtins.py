import pytest

from glisp.errors import GlispArityError, GlispTypeError
from glisp.evaluation.evaluator import evaluate
from glisp.types.nil import Nil
from glisp.types.node import MalVector
from glisp.types.symbol import Symbol

S = Symbol
V = lambda *xs: MalVector(xs)


@pytest.mark.parametrize(
    "expr,expected",
    [
        ([S("+")], 0),
        ([S("+"), 1, 2, 3], 6),
        ([S("-"), 5], -5),
        ([S("-"), 10, 3, 2], 5),
        ([S("*"), 2, 3, 4], 24),
        ([S("/"), 8, 2], 4),
        ([S("="), 1, 1, 1], True),
        ([S("<"), 1, 2, 3], True),
        ([S(">="), 3, 3, 4], False),
        ([S("not"), Nil], True),
        ([S("cons"), 1, [S("list"), 2, 3]], [1, 2, 3]),
        ([S("cons"), 1, Nil], [1]),
        ([S("concat"), [S("list"), 1], V(2, 3), Nil], [1, 2, 3]),
        ([S("first"), [S("list")]], Nil),
        ([S("rest"), [S("list"), 1, 2]], [2]),
        ([S("count"), V(1, 2, 3)], 3),
        ([S("nil?"), Nil], True),
        ([S("str"), "a", 1, [S("quote"), S("b")]], "a1b"),
        ([S("apply"), S("+"), 1, [S("list"), 2, 3]], 6),
    ],
)
def test_core_natives(env, expr, expected):
    assert evaluate(expr, env) == expected


def test_vector_native(env):
    assert isinstance(evaluate([S("vector"), 1], env), MalVector)


def test_apply_with_closure(env):
    fn = [S("fn"), V(S("a"), S("b")), [S("-"), S("a"), S("b")]]
    assert evaluate([S("apply"), fn, V(10, 4)], env) == 6


def test_arithmetic_type_error(env):
    with pytest.raises(GlispTypeError):
        evaluate([S("+"), 1, "two"], env)


def test_cons_arity(env):
    with pytest.raises(GlispArityError):
        evaluate([S("cons"), 1], env)
