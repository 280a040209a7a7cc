"""Structural equality over possibly cyclic containers."""

from typing import Any, Optional

from ..config import Settings
from ..guards import detect_recursion


def _family(obj: Any) -> Optional[str]:
    if isinstance(obj, list):
        return "list"
    if isinstance(obj, tuple):
        return "tuple"
    if isinstance(obj, dict):
        return "dict"
    if isinstance(obj, (set, frozenset)):
        return "set"
    return None


def structural_eq(a: Any, b: Any, settings: Optional[Settings] = None) -> bool:
    """
    Compare two values element by element, tolerating cycles.

    Containers must belong to the same family (list, tuple, dict, set) and
    have the same size. Re-entering a comparison of the same ``(a, b)`` pair
    yields ``settings.equal_on_recursion``, so two isomorphic cyclic
    structures compare equal by default.
    """
    if a is b:
        return True

    settings = settings or Settings()
    family = _family(a)
    if family is None or _family(b) is None:
        return bool(a == b)
    if family != _family(b) or len(a) != len(b):
        return False

    result = True

    def compare() -> None:
        nonlocal result
        if family == "dict":
            result = a.keys() == b.keys() and all(
                structural_eq(a[key], b[key], settings) for key in a
            )
        elif family == "set":
            # Set members are hashable, so they cannot reach back to the set.
            result = a == b
        else:
            result = all(structural_eq(x, y, settings) for x, y in zip(a, b))

    if detect_recursion(a, compare, paired=b):
        return settings.equal_on_recursion
    return result
