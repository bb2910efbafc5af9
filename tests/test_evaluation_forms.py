import pytest

from glisp.errors import GlispArityError, GlispNotCallable, GlispUnboundSymbol
from glisp.evaluation.evaluator import evaluate
from glisp.types.lambda_fn import Lambda
from glisp.types.nil import Nil
from glisp.types.node import MalList, MalMap, MalVector
from glisp.types.symbol import Keyword, Symbol

S = Symbol
V = lambda *xs: MalVector(xs)


# ------------------ atoms ------------------

@pytest.mark.parametrize("atom", [1, 2.5, "text", True, False, Nil, Keyword("k")])
def test_atoms_evaluate_to_themselves(env, atom):
    assert evaluate(atom, env) is atom


def test_symbol_lookup(env):
    env.set(S("x"), 42)
    assert evaluate(S("x"), env) == 42


def test_unbound_symbol(env):
    with pytest.raises(GlispUnboundSymbol):
        evaluate(S("missing"), env)


def test_vector_evaluates_elements_and_stays_vector(env):
    result = evaluate(V(1, [S("+"), 1, 1]), env)
    assert isinstance(result, MalVector)
    assert result == [1, 2]


def test_map_evaluates_values(env):
    result = evaluate(MalMap({"a": [S("+"), 1, 2], "b": "s"}), env)
    assert result == {"a": 3, "b": "s"}


def test_empty_list_is_self_evaluating(env):
    empty = MalList()
    assert evaluate(empty, env) is empty


# ------------------ def / let ------------------

def test_def_binds_and_returns(env):
    assert evaluate([S("def"), S("x"), [S("+"), 1, 2]], env) == 3
    assert evaluate(S("x"), env) == 3


def test_def_inside_let_stays_in_let(env):
    evaluate([S("let"), V(S("y"), 1), [S("def"), S("z"), S("y")]], env)
    assert env.find(S("z")) is None


def test_let_sequential_bindings(env):
    expr = [S("let"), V(S("x"), 1, S("y"), [S("+"), S("x"), 1]), S("y")]
    assert evaluate(expr, env) == 2


def test_let_shadow_then_outer(env):
    evaluate([S("def"), S("x"), 1], env)
    assert evaluate([S("let"), V(S("x"), 2), S("x")], env) == 2
    assert evaluate(S("x"), env) == 1


def test_let_destructuring(env):
    expr = [S("let"), V(V(S("a"), S("&"), S("r")), [S("list"), 1, 2, 3]), S("r")]
    assert evaluate(expr, env) == [2, 3]


def test_let_implicit_do(env):
    expr = [S("let"), V(S("x"), 1), [S("def"), S("x"), 5], [S("+"), S("x"), 1]]
    assert evaluate(expr, env) == 6


def test_let_without_body_is_nil(env):
    assert evaluate([S("let"), V(S("x"), 1)], env) is Nil


def test_let_odd_bindings(env):
    with pytest.raises(GlispArityError):
        evaluate([S("let"), V(S("x")), S("x")], env)


# ------------------ if / do ------------------

def test_if_branches(env):
    assert evaluate([S("if"), True, 1, 2], env) == 1
    assert evaluate([S("if"), False, 1, 2], env) == 2
    assert evaluate([S("if"), Nil, 1, 2], env) == 2


@pytest.mark.parametrize("cond", [0, "", MalList(), Keyword("k")])
def test_if_only_false_and_nil_are_falsy(env, cond):
    assert evaluate([S("if"), [S("quote"), cond], 1, 2], env) == 1


def test_if_without_else_is_nil(env):
    assert evaluate([S("if"), False, 1], env) is Nil


def test_do_returns_last(env):
    assert evaluate([S("do"), [S("def"), S("a"), 1], [S("def"), S("b"), 2], [S("+"), S("a"), S("b")]], env) == 3


def test_empty_do_is_nil(env):
    assert evaluate([S("do")], env) is Nil


# ------------------ fn ------------------

def test_fn_builds_closure(env):
    fn = evaluate([S("fn"), V(S("x")), S("x")], env)
    assert isinstance(fn, Lambda)
    assert fn.env is env and not fn.is_macro


def test_closure_sees_defining_scope(env):
    evaluate([S("def"), S("adder"), [S("fn"), V(S("n")), [S("fn"), V(S("x")), [S("+"), S("x"), S("n")]]]], env)
    evaluate([S("def"), S("add5"), [S("adder"), 5]], env)
    assert evaluate([S("add5"), 10], env) == 15


def test_closures_share_let_environment(env):
    pair = evaluate([S("let"), V(S("x"), 1),
                     [S("list"), [S("fn"), V(), S("x")], [S("fn"), V(), S("x")]]], env)
    f, g = pair
    assert f.env is g.env
    f.env.set(S("x"), 99)
    assert evaluate([g], env) == 99


def test_fn_rest_params(env):
    fn = [S("fn"), V(S("a"), S("&"), S("more")), S("more")]
    assert evaluate([fn, 1, 2, 3], env) == [2, 3]


def test_fn_multiple_body_forms(env):
    fn = [S("fn"), V(), [S("def"), S("t"), 1], [S("+"), S("t"), 1]]
    assert evaluate([fn], env) == 2


def test_fn_arity_mismatch(env):
    with pytest.raises(GlispArityError):
        evaluate([[S("fn"), V(S("a")), S("a")], 1, 2], env)


# ------------------ eval-when-execute ------------------

def test_eval_when_execute_evaluates_result_again(env):
    assert evaluate([S("eval-when-execute"), [S("quote"), [S("+"), 1, 2]]], env) == 3


def test_eval_when_execute_with_built_form(env):
    expr = [S("eval-when-execute"), [S("list"), [S("quote"), S("+")], 2, 3]]
    assert evaluate(expr, env) == 5


# ------------------ application errors ------------------

def test_not_callable_number(env):
    with pytest.raises(GlispNotCallable, match="is not a function"):
        evaluate([1, 2], env)


def test_not_callable_keyword(env):
    with pytest.raises(GlispNotCallable, match=r"^\[EVAL\] Keyword :k is not a function"):
        evaluate([Keyword("k"), 2], env)


def test_not_callable_list(env):
    with pytest.raises(GlispNotCallable, match=r"^\[EVAL\] List \(1 2\)"):
        evaluate([[S("list"), 1, 2], 3], env)


def test_native_receives_caller_env_and_args(env):
    seen = {}

    def spy(caller_env, args):
        seen["env"], seen["args"] = caller_env, args
        return Nil

    env.set(S("spy"), spy)
    evaluate([S("spy"), 1, [S("+"), 1, 1]], env)
    assert seen == {"env": env, "args": [1, 2]}


# ------------------ scope inspection ------------------

def test_env_chain(env):
    expr = [[S("fn"), V(), [S("let"), V(S("a"), 1), [S("env-chain")]]]]
    assert evaluate(expr, env) == "let <- fn <- global"


def test_which_env(env):
    evaluate([S("def"), S("x"), 1], env)
    expr = [S("let"), V(S("x"), 2), [S("which-env"), S("x")]]
    assert evaluate(expr, env) == "let <- global"
    assert evaluate([S("which-env"), S("nothing")], env) == "not defined"
