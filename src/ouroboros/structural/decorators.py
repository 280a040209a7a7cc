"""
Decorators making user-defined dunder methods safe on cyclic object graphs.

- recursion_safe_repr: re-entrant ``__repr__`` of the same instance renders a
  placeholder instead of recursing.
- recursion_safe_eq: re-entrant ``__eq__`` of the same pair of instances
  returns a fixed answer.
- recursion_safe_hash: a ``__hash__`` that reaches its own instance anywhere
  below collapses to a fallback value at the outermost call.
"""

import functools
from typing import Any, Callable, Optional

from ..guards import OutermostRecursionDetector, PairRecursionDetector, SimpleGuard


def recursion_safe_repr(
    placeholder: Optional[str] = None,
) -> Callable[[Callable[[Any], str]], Callable[[Any], str]]:
    """Wrap ``__repr__``; re-entry renders ``placeholder`` or ``<ClassName ...>``."""
    guard = SimpleGuard()

    def decorator(func: Callable[[Any], str]) -> Callable[[Any], str]:
        @functools.wraps(func)
        def wrapper(self: Any) -> str:
            if guard.is_guarding(self):
                if placeholder is not None:
                    return placeholder
                return f"<{type(self).__name__} ...>"
            return guard.with_guard(self, lambda: func(self))
        return wrapper
    return decorator


def recursion_safe_eq(
    on_recursion: bool = True,
) -> Callable[[Callable[[Any, Any], Any]], Callable[[Any, Any], Any]]:
    """Wrap ``__eq__``; comparing a pair already under comparison returns ``on_recursion``."""
    detector = PairRecursionDetector()

    def decorator(func: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
        @functools.wraps(func)
        def wrapper(self: Any, other: Any) -> Any:
            if self is other:
                return True
            result: Any = on_recursion

            def compare() -> None:
                nonlocal result
                result = func(self, other)

            detector.detect(self, compare, paired=other)
            return result
        return wrapper
    return decorator


def _type_hash(obj: Any) -> int:
    return hash(type(obj))


def recursion_safe_hash(
    fallback: Callable[[Any], int] = _type_hash,
) -> Callable[[Callable[[Any], int]], Callable[[Any], int]]:
    """
    Wrap ``__hash__``; a structure reaching itself hashes to ``fallback(self)``.

    The fallback applies to the outermost decorated call, not just the frame
    where the cycle closed, so the hash never mixes partial results.
    """
    detector = OutermostRecursionDetector()

    def decorator(func: Callable[[Any], int]) -> Callable[[Any], int]:
        @functools.wraps(func)
        def wrapper(self: Any) -> int:
            value = 0

            def compute() -> None:
                nonlocal value
                value = func(self)

            if detector.detect(self, compute):
                return fallback(self)
            return value
        return wrapper
    return decorator
