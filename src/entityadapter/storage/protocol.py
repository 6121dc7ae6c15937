"""Reactive store protocol for swappable state containers.

The core only needs ``set_state`` (and the façade ``get_state``), so any
observer- or signal-based container exposing these methods can hold the
snapshot:
- Local in-memory (default)
- Framework-bound stores (bridge the same three calls)

Usage:
    store = LocalStore(create_state())
    actions = actions_factory(store.set_state)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from entityadapter.core.types import StateUpdater

type Listener[S] = Callable[[S, S], None]
"""Called with ``(state, previous_state)`` after every effective change."""

type Unsubscribe = Callable[[], None]


@runtime_checkable
class StateContainer[S](Protocol):
    """Holds the current snapshot and swaps it atomically."""

    def get_state(self) -> S:
        """Current snapshot."""
        ...

    def set_state(
        self,
        partial: S | Mapping[str, Any] | StateUpdater[S],
        replace: bool = False,
    ) -> None:
        """Install the next snapshot and notify subscribers synchronously.

        Args:
            partial: Next snapshot, a partial of it, or an updater computing it
                from the current snapshot. Producing the current snapshot
                object itself is a no-op.
            replace: Install the value as-is instead of merging it.
        """
        ...

    def subscribe(self, listener: Listener[S]) -> Unsubscribe:
        """Register a listener. Returns a function removing it."""
        ...
