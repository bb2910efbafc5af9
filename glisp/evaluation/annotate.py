"""Evaluation metadata stamping.

Writes are purely observational: nothing in the evaluator reads them back.
Values that are not nodes (symbols, numbers, plain lists) are skipped.
"""

from typing import Any

from glisp.types.node import UNSET, EvalMeta, is_node


def _meta(node) -> EvalMeta:
    if node.meta is None:
        node.meta = EvalMeta()
    return node.meta


def stamp_eval(node: Any, value: Any) -> None:
    if is_node(node):
        _meta(node).evaluated = value


def stamp_fn(node: Any, fn: Any) -> None:
    if is_node(node):
        _meta(node).applied = fn


def stamp_expansion(node: Any, expansion: Any) -> None:
    if is_node(node):
        _meta(node).expanded = expansion


def _read(node: Any, field: str, default: Any) -> Any:
    meta = getattr(node, "meta", None)
    value = getattr(meta, field) if meta is not None else UNSET
    return default if value is UNSET else value


def last_evaluated(node: Any, default: Any = None) -> Any:
    """The value `node` last evaluated to.

    Returns `default` if the node was never evaluated with stamping on. A
    native that returned None stamps None, so pass a sentinel as `default`
    to tell the two apart.
    """
    return _read(node, "evaluated", default)


def last_applied(node: Any, default: Any = None) -> Any:
    return _read(node, "applied", default)


def was_evaluated(node: Any) -> bool:
    return _read(node, "evaluated", UNSET) is not UNSET
