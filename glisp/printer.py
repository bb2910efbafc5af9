"""Render Glisp values back to text.

Used for error messages and debugging output; this is not a serializer.
"""

from __future__ import annotations

import json
from typing import Any

from glisp.types.lambda_fn import Lambda
from glisp.types.nil import NilType
from glisp.types.node import is_vector
from glisp.types.symbol import Keyword, Symbol


def _print_number(x: int | float) -> str:
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def print_exp(exp: Any, readably: bool = True) -> str:
    """Return the textual form of `exp`. Strings are quoted when `readably`."""
    if exp is None or isinstance(exp, NilType):
        return "nil"
    if exp is True:
        return "true"
    if exp is False:
        return "false"
    if isinstance(exp, (Symbol, Keyword)):
        return str(exp)
    if isinstance(exp, str):
        return json.dumps(exp, ensure_ascii=False) if readably else exp
    if isinstance(exp, (int, float)):
        return _print_number(exp)
    if isinstance(exp, list):
        inner = " ".join(print_exp(x, readably) for x in exp)
        return f"[{inner}]" if is_vector(exp) else f"({inner})"
    if isinstance(exp, dict):
        inner = " ".join(
            f"{print_exp(k, readably)} {print_exp(v, readably)}" for k, v in exp.items()
        )
        return "{" + inner + "}"
    if isinstance(exp, Lambda):
        head = "macro" if exp.is_macro else "fn"
        return f"({head} {print_exp(exp.formals, readably)} {print_exp(exp.body, readably)})"
    if callable(exp):
        return f"<native fn {getattr(exp, '__name__', type(exp).__name__)}>"
    return str(exp)
