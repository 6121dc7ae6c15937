"""Core functionalities: stateless protocols, transitions and projections.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    Snapshots are held elsewhere; see storage/ for the reactive store and
    adapter/ and store/ for composition.
"""

from entityadapter.core.actions import EntityActions, actions_factory
from entityadapter.core.entity import as_patch, merge_entity
from entityadapter.core.identity import (
    FieldIdSelector,
    MissingIdHandler,
    MissingIdWarning,
    default_id_selector,
    warn_missing_id,
)
from entityadapter.core.selectors import EntitySelectors, selectors_factory
from entityadapter.core.sorting import sorted_ids
from entityadapter.core.state import EntityState, create_state
from entityadapter.core.transitions import EntityTransitions
from entityadapter.core.types import (
    Comparer,
    EntityId,
    IdSelector,
    SetState,
    SortOption,
    StateUpdater,
    Update,
    normalize_update,
)

__all__ = [
    # Types
    "EntityId",
    "IdSelector",
    "Comparer",
    "SortOption",
    "SetState",
    "StateUpdater",
    "Update",
    "normalize_update",
    # State
    "EntityState",
    "create_state",
    # Identity
    "FieldIdSelector",
    "MissingIdHandler",
    "MissingIdWarning",
    "default_id_selector",
    "warn_missing_id",
    # Records
    "as_patch",
    "merge_entity",
    # Transitions and actions
    "sorted_ids",
    "EntityTransitions",
    "EntityActions",
    "actions_factory",
    # Selectors
    "EntitySelectors",
    "selectors_factory",
]
