"""OUROBOROS: thread-scoped recursion guards for cyclic object graphs."""

from .config import Settings
from .guards import (
    GuardRegistry,
    GuardStore,
    InnerRecursionDetected,
    Multi,
    OutermostRecursionDetector,
    OutermostResult,
    PairRecursionDetector,
    SimpleGuard,
    Single,
    UNPAIRED,
    current_store,
    detect_outermost_recursion,
    detect_recursion,
    is_guarding,
    recursion_guard,
    with_guard,
)
from .structural import (
    recursion_safe_eq,
    recursion_safe_hash,
    recursion_safe_repr,
    structural_eq,
    structural_hash,
    structural_repr,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "GuardRegistry",
    "GuardStore",
    "InnerRecursionDetected",
    "Multi",
    "OutermostRecursionDetector",
    "OutermostResult",
    "PairRecursionDetector",
    "SimpleGuard",
    "Single",
    "UNPAIRED",
    "current_store",
    "detect_outermost_recursion",
    "detect_recursion",
    "is_guarding",
    "recursion_guard",
    "with_guard",
    "recursion_safe_eq",
    "recursion_safe_hash",
    "recursion_safe_repr",
    "structural_eq",
    "structural_hash",
    "structural_repr",
]
