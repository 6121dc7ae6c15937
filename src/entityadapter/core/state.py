"""Normalized collection state.

Usage:
    state = create_state()
    state["ids"]       # []
    state["entities"]  # {}
"""

from __future__ import annotations

from typing import Generic, TypedDict, TypeVar

E = TypeVar("E")
K = TypeVar("K")


class EntityState(TypedDict, Generic[E, K]):
    """Ordered unique ids plus an id-keyed entity map.

    Every id in ``ids`` is a key of ``entities`` and vice versa. Snapshots are
    never mutated in place; each transition produces a new dict.
    """

    ids: list[K]
    entities: dict[K, E]


def create_state() -> EntityState[E, K]:
    """Return a fresh empty state. Each call builds new containers."""
    return {"ids": [], "entities": {}}
