"""Recursion detection that collapses to the outermost guarded call."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from .pair import PairRecursionDetector
from .store import UNPAIRED
from ..logging import get_logger

logger = get_logger(__name__)


class InnerRecursionDetected(BaseException):
    """
    Unwinds nested guarded calls back to the outermost one.

    Derives from BaseException so ``except Exception`` blocks in guarded
    bodies cannot swallow it.
    """


class OutermostResult(Enum):
    RECURSION = "recursion"
    COMPLETED = "completed"
    NESTED = "nested"

    def __bool__(self) -> bool:
        return self is OutermostResult.RECURSION


class OutermostRecursionDetector:
    """
    Reports recursion found anywhere in a traversal at its outermost entry.

    The first call on an execution context becomes the outermost frame. Nested
    calls delegate to the pair detector and, when they hit recursion, raise
    InnerRecursionDetected so every enclosing frame unwinds without running
    its own continuation. Only the outermost frame catches it.
    """

    def __init__(self, pair_detector: Optional[PairRecursionDetector] = None) -> None:
        self.pair_detector = pair_detector if pair_detector is not None else PairRecursionDetector()

    def detect(self, obj: Any, body: Callable[[], Any], paired: Any = UNPAIRED) -> OutermostResult:
        store = self.pair_detector.store()

        if store.outermost_active:
            if self.pair_detector.detect(obj, body, paired):
                raise InnerRecursionDetected()
            return OutermostResult.NESTED

        store.outermost_active = True
        try:
            try:
                found = self.pair_detector.detect(obj, body, paired)
            except InnerRecursionDetected:
                logger.debug("Inner recursion unwound to the outermost frame")
                return OutermostResult.RECURSION
            return OutermostResult.RECURSION if found else OutermostResult.COMPLETED
        finally:
            store.outermost_active = False
