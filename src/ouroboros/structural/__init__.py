"""Recursion-safe repr, equality and hashing built on the guards."""

from .render import structural_repr
from .equality import structural_eq
from .hashing import structural_hash
from .decorators import recursion_safe_eq, recursion_safe_hash, recursion_safe_repr

__all__ = [
    "structural_repr",
    "structural_eq",
    "structural_hash",
    "recursion_safe_repr",
    "recursion_safe_eq",
    "recursion_safe_hash",
]
