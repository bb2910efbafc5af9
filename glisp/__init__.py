# Core type aliases for Glisp's data model.
# Code and runtime values share one representation: plain Python scalars,
# Symbol/Keyword objects, lists (MalList/MalVector nodes) and dicts (MalMap nodes).
#
# - SExpression: a form as handed to the evaluator (code-as-data).
# - LispValue:  an evaluated runtime value.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Signature of the evaluator entry point: (exp, env, save_eval) -> value
EvaluatorFn = Callable[..., LispValue]
