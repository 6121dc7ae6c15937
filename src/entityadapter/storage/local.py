"""Local in-memory reactive store.

Simple dict-snapshot store suitable for single-process use and testing.

Usage:
    store = LocalStore({"ids": [], "entities": {}, "loading": False})
    unsubscribe = store.subscribe(lambda state, previous: print(state))

    store.set_state({"loading": True})            # shallow merge
    store.set_state(lambda s: {"loading": False})  # updater
    store.set_state(new_snapshot, replace=True)    # full swap
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any, cast

from entityadapter.storage.protocol import Listener, Unsubscribe


class LocalStore[S: Mapping[str, Any]]:
    """Holds one immutable snapshot and notifies listeners on each swap.

    Snapshots are never mutated: every effective ``set_state`` installs a new
    mapping. An updater returning the current snapshot object (identity, not
    equality) is treated as "no change" and notifies nobody.

    Args:
        initial_state: Seed snapshot.
    """

    def __init__(self, initial_state: S):
        self._initial_state = initial_state
        self._state = initial_state
        self._listeners: list[Listener[S]] = []
        # Re-entrant: listeners may write back while being notified.
        self._lock = threading.RLock()

    def get_state(self) -> S:
        """Return the current snapshot."""
        return self._state

    def get_initial_state(self) -> S:
        """Return the snapshot the store was created with."""
        return self._initial_state

    def set_state(
        self,
        partial: S | Mapping[str, Any] | Callable[[S], Mapping[str, Any]],
        replace: bool = False,
    ) -> None:
        """Compute and install the next snapshot atomically.

        Args:
            partial: Next snapshot, a partial mapping to merge, or an updater
                called with the current snapshot.
            replace: Install the result as-is instead of shallow-merging it
                over the current snapshot.
        """
        with self._lock:
            previous = self._state
            next_state = partial(previous) if callable(partial) else partial
            if next_state is previous:
                return

            if replace:
                self._state = cast(S, next_state)
            else:
                self._state = cast(S, {**previous, **next_state})

            for listener in list(self._listeners):
                listener(self._state, previous)

    def subscribe(self, listener: Listener[S]) -> Unsubscribe:
        """Register a listener called with ``(state, previous_state)``.

        Returns:
            Function removing the listener. Safe to call more than once.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)
