"""Thread-scoped recursion guards for traversing cyclic object graphs."""

from typing import Any, Callable, TypeVar

from .store import (
    GuardRegistry,
    GuardStore,
    GuardValue,
    Multi,
    Single,
    UNPAIRED,
    default_registry,
)
from .simple import SimpleGuard
from .pair import PairRecursionDetector
from .outermost import InnerRecursionDetected, OutermostRecursionDetector, OutermostResult

T = TypeVar("T")

_simple_guard = SimpleGuard(default_registry)
_pair_detector = PairRecursionDetector(default_registry)
_outermost_detector = OutermostRecursionDetector(_pair_detector)

recursion_guard = _simple_guard.guard


def current_store() -> GuardStore:
    """Guard store of the calling thread."""
    return default_registry.current()


def with_guard(obj: Any, body: Callable[[], T]) -> T:
    return _simple_guard.with_guard(obj, body)


def is_guarding(obj: Any) -> bool:
    return _simple_guard.is_guarding(obj)


def detect_recursion(obj: Any, body: Callable[[], Any], paired: Any = UNPAIRED) -> bool:
    return _pair_detector.detect(obj, body, paired)


def detect_outermost_recursion(
    obj: Any, body: Callable[[], Any], paired: Any = UNPAIRED
) -> OutermostResult:
    return _outermost_detector.detect(obj, body, paired)


__all__ = [
    "GuardRegistry",
    "GuardStore",
    "GuardValue",
    "Multi",
    "Single",
    "UNPAIRED",
    "default_registry",
    "SimpleGuard",
    "PairRecursionDetector",
    "InnerRecursionDetected",
    "OutermostRecursionDetector",
    "OutermostResult",
    "recursion_guard",
    "current_store",
    "with_guard",
    "is_guarding",
    "detect_recursion",
    "detect_outermost_recursion",
]
