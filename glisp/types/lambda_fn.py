"""Defined (closure) callables."""

from __future__ import annotations

from glisp import SExpression
from glisp.types.environment import Environment


class Lambda:
    """A first-class function: parameter spec, body and the environment it
    was created in. Calling it binds arguments in a fresh child of `env`.

    With `is_macro` set, the evaluator calls it on unevaluated argument forms
    and evaluates whatever it returns in place of the call.
    """

    __slots__ = ("formals", "body", "env", "is_macro")

    def __init__(
        self,
        formals: SExpression,
        body: SExpression,
        env: Environment,
        is_macro: bool = False,
    ):
        self.formals: SExpression = formals
        self.body: SExpression = body
        self.env: Environment = env
        self.is_macro: bool = is_macro

    def as_macro(self) -> Lambda:
        """Copy of this function carrying the macro flag; closes over the same env."""
        return Lambda(self.formals, self.body, self.env, is_macro=True)

    def __str__(self) -> str:
        from glisp.printer import print_exp
        return print_exp(self)

    def __repr__(self) -> str:
        return str(self)
