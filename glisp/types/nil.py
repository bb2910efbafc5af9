from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False
    def __hash__(self): return hash(NilType)

    # Nil is equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return "Nil"


Nil = NilType()


def is_truthy(value) -> bool:
    """Anything but false and nil counts as true (0 and "" included)."""
    return not (value is False or value is None or isinstance(value, NilType))
