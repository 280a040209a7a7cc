"""Recursion detection keyed by an object and an optional paired object."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional

from .store import GuardRegistry, GuardStore, Multi, Single, UNPAIRED, default_registry
from ..logging import get_logger

logger = get_logger(__name__)


class PairRecursionDetector:
    """
    Detects re-entry of the same ``(obj, paired)`` combination.

    ``detect`` runs ``body`` only when the combination is not already in
    flight on the calling execution context, and reports whether recursion
    was found. The store entry for ``obj`` is promoted from ``Single`` to
    ``Multi`` when the same object is re-entered with a different pairing,
    and is put back exactly as it was when the call exits.
    """

    def __init__(
        self,
        registry: Optional[GuardRegistry] = None,
        identity: Callable[[Any], Hashable] = id,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self._identity = identity

    def store(self) -> GuardStore:
        return self.registry.current()

    def detect(self, obj: Any, body: Callable[[], Any], paired: Any = UNPAIRED) -> bool:
        """
        Run ``body`` unless ``(obj, paired)`` is already being processed.

        Args:
            obj: Object being traversed
            body: Zero-argument callable run when no recursion is found
            paired: Object the traversal pairs ``obj`` with, e.g. the other
                operand of an equality check

        Returns:
            True if recursion was detected and ``body`` was skipped,
            False if ``body`` ran
        """
        key = self._identity(obj)
        pair_key = self._identity(paired)
        store = self.store()
        current = store.get(key)

        if current is None:
            store.put(key, Single(pair_key))
            try:
                body()
            finally:
                store.delete(key)

        elif isinstance(current, Multi):
            if pair_key in current.paired:
                logger.debug(f"Recursion detected on {key} paired with {pair_key}")
                return True
            current.paired.add(pair_key)
            try:
                body()
            finally:
                current.paired.discard(pair_key)

        elif isinstance(current, Single):
            previous = current.paired
            if previous == pair_key:
                logger.debug(f"Recursion detected on {key} paired with {pair_key}")
                return True
            logger.debug(f"Promoting guard on {key} to multiple pairings")
            store.put(key, Multi({previous, pair_key}))
            try:
                body()
            finally:
                store.put(key, current)

        else:
            raise TypeError(f"Unsupported guard value for {key}: {current!r}")

        return False
