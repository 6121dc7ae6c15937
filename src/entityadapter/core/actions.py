"""Imperative entity actions bound to a store's ``set_state``.

Usage:
    store = LocalStore(create_state())
    actions = actions_factory(store.set_state, sort=lambda a, b: ...)

    actions.add_one({"id": "1", "name": "Apple"})
    actions.update_one(Update(id="1", update={"name": "Banana"}))

Every action computes the next snapshot synchronously and hands it to exactly
one ``set_state`` call, so subscribers observe one atomic transition per call.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from entityadapter.core.identity import default_id_selector
from entityadapter.core.state import EntityState
from entityadapter.core.transitions import EntityTransitions
from entityadapter.core.types import IdSelector, SetState, SortOption, Update


class EntityActions[E, K]:
    """Mutation operations for a normalized collection held by an external store.

    Args:
        set_state: The store's atomic updater.
        transitions: Pure transitions computing each next snapshot.
    """

    __slots__ = ("_set_state", "_transitions")

    def __init__(
        self,
        set_state: SetState[EntityState[E, K]],
        transitions: EntityTransitions[E, K],
    ) -> None:
        self._set_state = set_state
        self._transitions = transitions

    @property
    def transitions(self) -> EntityTransitions[E, K]:
        """The pure transitions behind these actions, for composing custom updates."""
        return self._transitions

    def add_one(self, entity: E) -> None:
        """Add one entity to the collection, if that entity doesn't exist already."""
        self._set_state(lambda state: self._transitions.add_one(state, entity))

    def add_many(self, entities: Iterable[E]) -> None:
        """Add a list of entities to the collection, if they don't already exist."""
        items = list(entities)
        self._set_state(lambda state: self._transitions.add_many(state, items))

    def set_one(self, entity: E) -> None:
        """Add one entity to the collection, replacing any existing entity with the same id."""
        self._set_state(lambda state: self._transitions.set_one(state, entity))

    def set_many(self, entities: Iterable[E]) -> None:
        """Add a list of entities, replacing any existing entity with the same id."""
        items = list(entities)
        self._set_state(lambda state: self._transitions.set_many(state, items))

    def set_all(self, entities: Iterable[E]) -> None:
        """Replace all entities in the collection with the list of entities."""
        items = list(entities)
        self._set_state(lambda state: self._transitions.set_all(state, items))

    def update_one(self, update: Update[K] | Mapping[str, Any]) -> None:
        """Apply a partial update to the entity with the given id, if it exists."""
        self._set_state(lambda state: self._transitions.update_one(state, update))

    def update_many(self, updates: Iterable[Update[K] | Mapping[str, Any]]) -> None:
        """Apply each partial update to its entity, skipping ids that don't exist."""
        items = list(updates)
        self._set_state(lambda state: self._transitions.update_many(state, items))

    def upsert_one(self, entity: E) -> None:
        """Patch an entity if it exists, or insert it."""
        self._set_state(lambda state: self._transitions.upsert_one(state, entity))

    def upsert_many(self, entities: Iterable[E]) -> None:
        """Patch each entity if it exists, or insert it."""
        items = list(entities)
        self._set_state(lambda state: self._transitions.upsert_many(state, items))

    def remove_one(self, entity: E) -> None:
        """Remove an entity from the collection."""
        self._set_state(lambda state: self._transitions.remove_one(state, entity))

    def remove_many(self, entities: Iterable[E]) -> None:
        """Remove a list of entities from the collection."""
        items = list(entities)
        self._set_state(lambda state: self._transitions.remove_many(state, items))

    def remove_all(self) -> None:
        """Remove all entities from the collection."""
        self._set_state(self._transitions.remove_all)


def actions_factory[E, K](
    set_state: SetState[EntityState[E, K]],
    id_selector: IdSelector[E, K] | None = None,
    sort: SortOption[E] = None,
) -> EntityActions[E, K]:
    """Build entity actions writing through ``set_state``.

    Args:
        set_state: The store's atomic updater.
        id_selector: Derives each entity's id. Defaults to reading the ``id``
            field, warning when it is missing.
        sort: Comparer defining the ``ids`` order. None or False keeps
            insertion order.

    Returns:
        EntityActions bound to the store.
    """
    transitions = EntityTransitions(
        id_selector=id_selector if id_selector is not None else default_id_selector(),
        sort=sort or None,
    )
    return EntityActions(set_state, transitions)
