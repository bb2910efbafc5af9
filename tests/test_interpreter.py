import pytest

from glisp.errors import GlispError
from glisp.interpreter import Interpreter
from glisp.types.nil import Nil
from glisp.types.node import MalVector, nodify
from glisp.types.symbol import Symbol

S = Symbol
V = lambda *xs: MalVector(xs)


def test_if_true_false(interp):
    assert interp.eval([S("if"), True, 1, 2]) == 1
    assert interp.eval([S("if"), False, 1, 2]) == 2


def test_let_with_native_plus(interp):
    assert interp.eval([S("let"), V(S("x"), 1, S("y"), [S("+"), S("x"), 1]), S("y")]) == 2


def test_definitions_persist_between_calls(interp):
    interp.eval([S("def"), S("sq"), [S("fn"), V(S("n")), [S("*"), S("n"), S("n")]]])
    assert interp.eval([S("sq"), 9]) == 81


def test_eval_all_returns_last(interp):
    forms = [
        [S("def"), S("a"), 2],
        [S("def"), S("b"), 3],
        [S("*"), S("a"), S("b")],
    ]
    assert interp.eval_all(forms) == 6
    assert interp.eval_all([]) is Nil


def test_save_eval_flag_from_environment(monkeypatch):
    monkeypatch.setenv("GLISP_SAVE_EVAL", "1")
    itp = Interpreter()
    assert itp.save_eval is True
    tree = nodify([S("+"), 1, 2])
    itp.eval(tree)
    assert tree.meta.evaluated == 3


def test_save_eval_defaults_off(monkeypatch):
    monkeypatch.delenv("GLISP_SAVE_EVAL", raising=False)
    assert Interpreter().save_eval is False


def test_explicit_flag_wins(monkeypatch):
    monkeypatch.setenv("GLISP_SAVE_EVAL", "yes")
    assert Interpreter(save_eval=False).save_eval is False


def test_errors_escape_to_caller(interp):
    with pytest.raises(GlispError):
        interp.eval([S("nope")])


def test_throw_escapes_as_thrown_value(interp):
    from glisp.errors import ThrowException
    with pytest.raises(ThrowException) as excinfo:
        interp.eval([S("throw"), "oops"])
    assert excinfo.value.value == "oops"
