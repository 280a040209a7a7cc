"""Structural hashing over possibly cyclic containers."""

import sys
from typing import Any

from ..guards import detect_outermost_recursion

_MASK = sys.maxsize >> 1


def structural_hash(obj: Any) -> int:
    """
    Hash lists, tuples and dicts by content, including unhashable ones.

    Sequences fold their items in order, dicts combine their entries
    order-independently. When the structure reaches itself anywhere below,
    the whole hash collapses to the length of the outermost container, so
    equal cyclic structures of the same size hash alike.
    """
    if isinstance(obj, (set, frozenset)):
        return hash(frozenset(obj))
    if not isinstance(obj, (list, tuple, dict)):
        return hash(obj)

    value = len(obj)

    def fold() -> None:
        nonlocal value
        if isinstance(obj, dict):
            for key, item in obj.items():
                value ^= hash((hash(key), structural_hash(item)))
        else:
            for item in obj:
                value = ((value & _MASK) << 1) ^ structural_hash(item)

    if detect_outermost_recursion(obj, fold):
        return len(obj)
    return value
