"""Interned symbols and keywords.

A symbol's `id` is a one-character type tag followed by its bare name, so
symbols never collide with plain strings and `sym.id[1:]` is the name the
evaluator dispatches special forms on.
"""

from __future__ import annotations
import sys

SYMBOL_TAG = "ƨ"
KEYWORD_TAG = "ʞ"


class Symbol:
    __slots__ = ("id",)
    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str):
        sym = cls._table.get(name)
        if sym is None:
            sym = object.__new__(cls)
            sym.id = sys.intern(SYMBOL_TAG + name)
            cls._table[name] = sym
        return sym

    @property
    def name(self) -> str:
        return self.id[1:]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return (Symbol, (self.name,))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Keyword:
    __slots__ = ("id",)
    _table: dict[str, Keyword] = {}

    def __new__(cls, name: str):
        kw = cls._table.get(name)
        if kw is None:
            kw = object.__new__(cls)
            kw.id = sys.intern(KEYWORD_TAG + name)
            cls._table[name] = kw
        return kw

    @property
    def name(self) -> str:
        return self.id[1:]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return (Keyword, (self.name,))

    def __repr__(self):
        return f"Keyword({self.name!r})"

    def __str__(self):
        return ":" + self.name


# Marks the variadic tail of a parameter list: [a b & more]
REST_MARKER = Symbol("&")
