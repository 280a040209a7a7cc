"""Recursion-safe rendering of built-in containers."""

from typing import Any, Dict, List, Optional, Tuple

from ..config import Settings
from ..guards import detect_recursion

_BRACKETS: Dict[type, Tuple[str, str]] = {
    list: ("[", "]"),
    tuple: ("(", ")"),
    dict: ("{", "}"),
    set: ("{", "}"),
    frozenset: ("frozenset({", "})"),
}

_EMPTY: Dict[type, str] = {
    list: "[]",
    tuple: "()",
    dict: "{}",
    set: "set()",
    frozenset: "frozenset()",
}


def structural_repr(obj: Any, settings: Optional[Settings] = None) -> str:
    """
    Render ``obj`` like ``repr`` while tolerating self-references.

    A container already being rendered further up the call chain is shown as
    its brackets around the placeholder, so ``l = []; l.append(l)`` renders
    as ``[[...]]``. Only exact built-in container types are walked; anything
    else, subclasses included, is rendered with its own ``repr``.
    """
    settings = settings or Settings()
    kind = type(obj)
    brackets = _BRACKETS.get(kind)
    if brackets is None:
        return repr(obj)

    parts: List[str] = []

    def render_items() -> None:
        if kind is dict:
            for key, value in obj.items():
                parts.append(f"{structural_repr(key, settings)}: {structural_repr(value, settings)}")
        else:
            for item in obj:
                parts.append(structural_repr(item, settings))

    opening, closing = brackets
    if detect_recursion(obj, render_items):
        return f"{opening}{settings.placeholder}{closing}"

    if not parts:
        return _EMPTY[kind]
    if kind is tuple and len(parts) == 1:
        return f"({parts[0]},)"
    return opening + ", ".join(parts) + closing
