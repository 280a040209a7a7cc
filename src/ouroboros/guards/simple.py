"""Coarse, unpaired recursion guard."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Hashable, Iterator, Optional, TypeVar

from .store import GuardRegistry, GuardStore, default_registry
from ..logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class SimpleGuard:
    """
    Marks single objects as "in progress" on the calling execution context.

    Useful when only "have I started processing this object" matters, for
    example a ``__repr__`` that renders a placeholder when re-entered.
    """

    def __init__(
        self,
        registry: Optional[GuardRegistry] = None,
        identity: Callable[[Any], Hashable] = id,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        self._identity = identity

    def _store(self) -> GuardStore:
        return self._registry.current()

    def acquire(self, obj: Any) -> None:
        """Mark ``obj``; marking an already marked object is harmless."""
        self._store().guarded.add(self._identity(obj))

    def release(self, obj: Any) -> None:
        self._store().guarded.discard(self._identity(obj))

    def is_guarding(self, obj: Any) -> bool:
        return self._identity(obj) in self._store().guarded

    def with_guard(self, obj: Any, body: Callable[[], T]) -> T:
        """
        Run ``body`` with ``obj`` marked and return its result.

        The mark is removed on every exit path unless it was already present
        before the call, in which case the enclosing holder keeps it.
        """
        with self.guard(obj):
            return body()

    @contextmanager
    def guard(self, obj: Any) -> Iterator[None]:
        key = self._identity(obj)
        guarded = self._store().guarded
        already_marked = key in guarded
        guarded.add(key)
        try:
            yield
        finally:
            if not already_marked:
                guarded.discard(key)
