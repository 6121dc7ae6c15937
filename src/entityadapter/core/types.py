"""Core type definitions for entityadapter."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol

type EntityId = str | int
"""Key under which an entity is stored. Must be hashable."""

type IdSelector[E, K] = Callable[[E], K]
"""Pure function deriving the unique key of an entity."""

type Comparer[E] = Callable[[E, E], int]
"""Two-argument ordering function: negative, zero or positive like ``cmp``."""

type SortOption[E] = Comparer[E] | None | Literal[False]
"""A comparer, or ``None``/``False`` for insertion order."""

type StateUpdater[S] = Callable[[S], Mapping[str, Any]]
"""Computes the next snapshot (or a partial of it) from the current one."""


class SetState[S](Protocol):
    """Atomic snapshot update exposed by a reactive store.

    ``partial`` is a mapping or an updater returning one. Returning the
    current snapshot itself means "no change" and must not notify.
    """

    def __call__(
        self,
        partial: Mapping[str, Any] | StateUpdater[S],
        replace: bool = False,
    ) -> None: ...


@dataclass(frozen=True, slots=True)
class Update[K]:
    """Patch request: ``update`` fields shallow-merge onto the entity keyed ``id``."""

    id: K
    update: Mapping[str, Any]


def normalize_update(raw: Update[Any] | Mapping[str, Any]) -> Update[Any]:
    """Convert an update in any supported format to ``Update``.

    Supports:
    - Update: Direct passthrough
    - Mapping with ``id`` and ``update`` keys

    Raises:
        TypeError: If the value is not a recognized format.
    """
    if isinstance(raw, Update):
        return raw

    if isinstance(raw, Mapping) and "id" in raw and "update" in raw:
        patch = raw["update"]
        if not isinstance(patch, Mapping):
            raise TypeError(f"Expected mapping for 'update', got {type(patch).__name__}")
        return Update(id=raw["id"], update=patch)

    raise TypeError(f"Invalid update: expected Update or {{'id', 'update'}} mapping, got {raw!r}")
