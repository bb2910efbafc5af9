"""Runtime environment for Glisp.

An Environment maps Symbols to evaluated values and links to an `outer`
scope. Environments are only ever chained, never copied: every closure
created in a scope shares that scope's instance, and `set` on it is seen by
all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Sequence

from glisp import LispValue, SExpression
from glisp.errors import GlispArityError, GlispTypeError, GlispUnboundSymbol
from glisp.types.nil import Nil
from glisp.types.symbol import REST_MARKER, Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise GlispTypeError(f"Cannot bind {name!r}: expected a symbol")


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "name")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        params: SExpression = None,
        args: Optional[Sequence[LispValue]] = None,
        name: Optional[str] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        self.name: str = name or ("global" if outer is None else "anonymous")
        if params is not None:
            self.bind_all(params, args if args is not None else [])

    def get(self, name: Symbol | str) -> LispValue:
        """Look up `name`, walking outward through the chain.

        Raises GlispUnboundSymbol if no environment binds it.
        """
        sym = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if sym in env.vars:
                return env.vars[sym]
            env = env.outer
        raise GlispUnboundSymbol(f"Symbol '{sym.name}' not found")

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Return the nearest environment binding `name`, or None. Never raises
        for an unbound name, so the result doubles as a bound/unbound test."""
        sym = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if sym in env.vars:
                return env
            env = env.outer
        return None

    def has_own(self, name: Symbol | str) -> bool:
        return _as_symbol(name) in self.vars

    def set(self, name: Symbol | str, value: LispValue) -> LispValue:
        """Bind `name` in this environment only and return `value`."""
        self.vars[_as_symbol(name)] = value
        return value

    def bind_all(self, params: SExpression, args: SExpression) -> None:
        """Bind a parameter spec to an argument list.

        - a bare symbol binds the whole argument value;
        - a list binds positionally, nested lists destructure the matching
          argument, and `& name` collects the remaining arguments as a list.

        Raises GlispArityError when the counts do not line up.
        """
        if isinstance(params, Symbol):
            self.set(params, args)
            return
        if not isinstance(params, list):
            raise GlispTypeError(f"Invalid parameter list {params!r}")

        if args is Nil or args is None:
            args = []
        elif not isinstance(args, (list, tuple)):
            raise GlispTypeError(f"Cannot destructure {args!r} against {len(params)} parameter(s)")

        if REST_MARKER in params:
            rest_at = params.index(REST_MARKER)
            if rest_at != len(params) - 2:
                raise GlispArityError("Malformed parameter list: & must be followed by exactly one name")
            required = params[:rest_at]
            if len(args) < len(required):
                raise GlispArityError(
                    f"Too few arguments; expected at least {len(required)}, got {len(args)}"
                )
            for param, arg in zip(required, args):
                self.bind_all(param, arg)
            self.bind_all(params[rest_at + 1], list(args[rest_at:]))
            return

        if len(args) != len(params):
            raise GlispArityError(
                f"Arity mismatch; expected {len(params)} argument(s), got {len(args)}"
            )
        for param, arg in zip(params, args):
            self.bind_all(param, arg)

    def update(self, mapping: dict[Symbol | str, LispValue]) -> None:
        """Bulk-bind a mapping of names to values in this frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def chain(self) -> list[Environment]:
        """This environment followed by each enclosing one, innermost first."""
        envs = []
        env: Optional[Environment] = self
        while env is not None:
            envs.append(env)
            env = env.outer
        return envs

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"{self.name} ")
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {' <- '.join(e.name for e in self.chain())}>"
