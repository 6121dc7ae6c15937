"""Pure state transitions for normalized collections.

Each transition takes a state snapshot and returns the next one. When the
effective content does not change (duplicate add, update or removal of an
absent id) the very same snapshot object is returned, so stores comparing by
identity can skip notifying subscribers.

Transitions only read ``ids`` and ``entities``; any other keys a store keeps
next to them are left for the store to carry over.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any

from entityadapter.core.entity import as_patch, merge_entity
from entityadapter.core.sorting import sorted_ids
from entityadapter.core.state import EntityState, create_state
from entityadapter.core.types import Comparer, IdSelector, Update, normalize_update


@dataclass(frozen=True, slots=True)
class EntityTransitions[E, K]:
    """Transition functions bound to an id selector and an optional comparer.

    Attributes:
        id_selector: Derives each entity's id.
        sort: Comparer defining the ``ids`` order, or None for insertion order.
    """

    id_selector: IdSelector[E, K]
    sort: Comparer[E] | None = None

    def _order(self, state: EntityState[E, K], entities: dict[K, E]) -> list[K]:
        # Membership-preserving writes keep ids unless a comparer must re-derive them.
        if self.sort is not None:
            return sorted_ids(entities, self.id_selector, self.sort)
        return state["ids"]

    def add_one(self, state: EntityState[E, K], entity: E) -> EntityState[E, K]:
        """Insert ``entity`` unless its id is already present."""
        entity_id = self.id_selector(entity)
        if entity_id in state["entities"]:
            return state
        return self.set_one(state, entity)

    def set_one(self, state: EntityState[E, K], entity: E) -> EntityState[E, K]:
        """Insert ``entity``, replacing any existing entity with the same id.

        Replacing an existing entity leaves ``ids`` untouched unless a comparer
        is set: then the order is re-derived, since the replacement may carry a
        different sort key. Keeping ``ids`` as-is there would break the sorted
        order that every other write maintains.
        """
        entity_id = self.id_selector(entity)
        is_present = entity_id in state["entities"]
        entities = {**state["entities"], entity_id: entity}

        if is_present or self.sort is not None:
            ids = self._order(state, entities)
        else:
            ids = [*state["ids"], entity_id]

        return {"ids": ids, "entities": entities}

    def update_one(
        self, state: EntityState[E, K], update: Update[K] | Mapping[str, Any]
    ) -> EntityState[E, K]:
        """Shallow-merge a patch onto the entity it targets, if that entity exists."""
        patch = normalize_update(update)
        if patch.id not in state["entities"]:
            return state

        current = state["entities"][patch.id]
        entities = {**state["entities"], patch.id: merge_entity(current, patch.update)}
        return {"ids": self._order(state, entities), "entities": entities}

    def upsert_one(self, state: EntityState[E, K], entity: E) -> EntityState[E, K]:
        """Insert ``entity`` if absent, otherwise patch the existing one with it."""
        entity_id = self.id_selector(entity)
        if entity_id not in state["entities"]:
            return self.set_one(state, entity)
        return self.update_one(state, Update(id=entity_id, update=as_patch(entity)))

    def remove_one(self, state: EntityState[E, K], entity: E) -> EntityState[E, K]:
        """Drop the entity sharing ``entity``'s id, if any."""
        entity_id = self.id_selector(entity)
        if entity_id not in state["entities"] and entity_id not in state["ids"]:
            return state

        entities = {key: value for key, value in state["entities"].items() if key != entity_id}
        ids = [key for key in state["ids"] if key != entity_id]
        return {"ids": ids, "entities": entities}

    def remove_all(self, state: EntityState[E, K] | None = None) -> EntityState[E, K]:
        """Empty state, whatever the current content."""
        return create_state()

    # Batch variants fold the single-item transition left to right, so each
    # step sees the previous one's result and later duplicates win.

    def add_many(self, state: EntityState[E, K], entities: Iterable[E]) -> EntityState[E, K]:
        return reduce(self.add_one, entities, state)

    def set_many(self, state: EntityState[E, K], entities: Iterable[E]) -> EntityState[E, K]:
        return reduce(self.set_one, entities, state)

    def set_all(self, state: EntityState[E, K], entities: Iterable[E]) -> EntityState[E, K]:
        """Replace the whole collection: equivalent to remove_all then set_many."""
        return self.set_many(self.remove_all(state), entities)

    def update_many(
        self,
        state: EntityState[E, K],
        updates: Iterable[Update[K] | Mapping[str, Any]],
    ) -> EntityState[E, K]:
        return reduce(self.update_one, updates, state)

    def upsert_many(self, state: EntityState[E, K], entities: Iterable[E]) -> EntityState[E, K]:
        return reduce(self.upsert_one, entities, state)

    def remove_many(self, state: EntityState[E, K], entities: Iterable[E]) -> EntityState[E, K]:
        return reduce(self.remove_one, entities, state)
