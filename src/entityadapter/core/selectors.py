"""Read-only projections over a normalized collection state.

Usage:
    selectors = selectors_factory()
    selectors.select_all(state)

    by_id = selectors.select_by_id("1")  # curried
    by_id(state) == selectors.select_by_id("1", state)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from entityadapter.core.state import EntityState


class EntitySelectors[E, K]:
    """Pure state-in, value-out projections. Stateless."""

    __slots__ = ()

    def select_ids(self, state: EntityState[E, K]) -> list[K]:
        return state["ids"]

    def select_entities(self, state: EntityState[E, K]) -> dict[K, E]:
        return state["entities"]

    def select_total(self, state: EntityState[E, K]) -> int:
        return len(state["ids"])

    def select_all(self, state: EntityState[E, K]) -> list[E]:
        """Entities in ``ids`` order. Ids with no entity (or a None value) are skipped."""
        entities = state["entities"]
        return [
            entity
            for entity in (entities.get(entity_id) for entity_id in state["ids"])
            if entity is not None
        ]

    @overload
    def select_by_id(self, entity_id: K) -> Callable[[EntityState[E, K]], E | None]: ...

    @overload
    def select_by_id(self, entity_id: K, state: EntityState[E, K]) -> E | None: ...

    def select_by_id(
        self, entity_id: K, state: EntityState[E, K] | None = None
    ) -> E | None | Callable[[EntityState[E, K]], E | None]:
        """Look up one entity by id.

        Called with only an id, returns a selector awaiting the state.

        Args:
            entity_id: Id to look up.
            state: Snapshot to read. Omit for the curried form.

        Returns:
            The entity or None; or, in the curried form, a function of the state.
        """
        if state is None:
            return lambda current: self.select_by_id(entity_id, current)
        return state["entities"].get(entity_id)


def selectors_factory[E, K]() -> EntitySelectors[E, K]:
    """Build the selectors for a normalized collection."""
    return EntitySelectors()
