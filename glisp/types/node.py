"""Expression nodes that can carry evaluation metadata.

Lists, vectors and maps are plain Python containers. The subclasses below add
a `meta` slot so the evaluator can record, per node, what it last evaluated
to. Plain `list`/`dict` values are still valid expressions; they just never
carry metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class _Unset:
    __slots__ = ()

    def __repr__(self):
        return "UNSET"


# a metadata field never written; distinct from a stored None
UNSET = _Unset()


@dataclass
class EvalMeta:
    evaluated: Any = UNSET  # value this node last evaluated to
    applied: Any = UNSET    # callable last applied with this node as the call site
    expanded: Any = UNSET   # latest macro expansion of this node


class MalList(list):
    __slots__ = ("meta",)

    def __init__(self, iterable=()):
        super().__init__(iterable)
        self.meta: Optional[EvalMeta] = None


class MalVector(MalList):
    """A list carrying the "is-vector" marker. Evaluates element-wise."""

    __slots__ = ()

    def __repr__(self):
        return f"MalVector({list.__repr__(self)})"


class MalMap(dict):
    __slots__ = ("meta",)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.meta: Optional[EvalMeta] = None


def is_list(x: Any) -> bool:
    return isinstance(x, list) and not isinstance(x, MalVector)


def is_vector(x: Any) -> bool:
    return isinstance(x, MalVector)


def is_map(x: Any) -> bool:
    return isinstance(x, dict)


def is_node(x: Any) -> bool:
    return isinstance(x, (MalList, MalMap))


def nodify(tree: Any) -> Any:
    """Rebuild nested plain lists/dicts as metadata-capable nodes.

    Vectors stay vectors; every other value is returned untouched.
    """
    if isinstance(tree, MalVector):
        return MalVector(nodify(x) for x in tree)
    if isinstance(tree, list):
        return MalList(nodify(x) for x in tree)
    if isinstance(tree, dict):
        return MalMap((k, nodify(v)) for k, v in tree.items())
    return tree
