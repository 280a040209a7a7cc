"""Per-execution-context guard state."""

from __future__ import annotations

import threading
import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Optional, Set, Union

from ..logging import get_logger

logger = get_logger(__name__)


class _Unpaired:
    """Sentinel paired object used when a guard has no explicit pairing."""

    def __repr__(self) -> str:
        return "UNPAIRED"


UNPAIRED = _Unpaired()


@dataclass(frozen=True)
class Single:
    """The identity is in flight with exactly one pairing."""
    paired: Hashable


@dataclass
class Multi:
    """The identity is in flight with several pairings on the same call chain."""
    paired: Set[Hashable] = field(default_factory=set)


GuardValue = Union[Single, Multi]


class GuardStore:
    """
    Guard state owned by a single execution context.

    Maps object identities to their in-flight pairings. Coarse guards set by
    SimpleGuard live in their own namespace so they never disturb pair state.
    The outermost marker is kept as a side field rather than under a reserved
    key so it can never collide with an identity.
    """

    def __init__(self) -> None:
        self._entries: Dict[Hashable, GuardValue] = {}
        self.guarded: Set[Hashable] = set()
        self.outermost_active = False

    def get(self, key: Hashable) -> Optional[GuardValue]:
        """Return the guard value for ``key`` or None when absent."""
        return self._entries.get(key)

    def put(self, key: Hashable, value: GuardValue) -> None:
        if not isinstance(value, (Single, Multi)):
            raise TypeError(f"Unsupported guard value: {value!r}")
        self._entries[key] = value

    def delete(self, key: Hashable) -> None:
        self._entries.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> Dict[Hashable, Any]:
        """Immutable copy of the entries, with Multi sets frozen."""
        frozen: Dict[Hashable, Any] = {}
        for key, value in self._entries.items():
            if isinstance(value, Multi):
                frozen[key] = ("multi", frozenset(value.paired))
            else:
                frozen[key] = ("single", value.paired)
        return frozen

    def is_clean(self) -> bool:
        return not self._entries and not self.guarded and not self.outermost_active

    def __repr__(self) -> str:
        return (
            f"GuardStore(entries={len(self._entries)}, guarded={len(self.guarded)}, "
            f"outermost_active={self.outermost_active})"
        )


class GuardRegistry:
    """
    Registry of guard stores indexed by execution context.

    The context defaults to the calling thread. Stores are created lazily and
    held weakly, so a store goes away together with its context. The lock only
    protects the registry mapping; stores themselves are never shared.
    """

    def __init__(self, current_context: Callable[[], Any] = threading.current_thread) -> None:
        self._current_context = current_context
        self._stores: "weakref.WeakKeyDictionary[Any, GuardStore]" = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def current(self) -> GuardStore:
        """Return the store of the calling context, creating it on first use."""
        context = self._current_context()
        with self._lock:
            store = self._stores.get(context)
            if store is None:
                store = GuardStore()
                self._stores[context] = store
                logger.debug(f"Created guard store for context {context!r}")
        return store

    def store_for(self, context: Any) -> Optional[GuardStore]:
        with self._lock:
            return self._stores.get(context)

    def discard(self, context: Any) -> None:
        """Drop the store of ``context``; later use recreates an empty one."""
        with self._lock:
            self._stores.pop(context, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)


default_registry = GuardRegistry()
