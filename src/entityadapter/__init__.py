"""entityadapter: normalized entity collections with pure state transitions.

Usage:
    from entityadapter import AdapterOptions, Update, create_entity_store

    store = create_entity_store(AdapterOptions(sort=lambda a, b: a["rank"] - b["rank"]))
    store.actions.add_many([{"id": "b", "rank": 2}, {"id": "a", "rank": 1}])
    store.actions.update_one(Update(id="a", update={"rank": 3}))

    store.selectors.select_ids(store.get_state())  # ["b", "a"]
"""

__version__ = "0.1.0"

# Adapter
from entityadapter.adapter import (
    AdapterOptions,
    EntityAdapter,
    create_entity_adapter,
)

# Configuration
from entityadapter.config import AdapterSettings, get_settings

# Core primitives
from entityadapter.core import (
    Comparer,
    EntityActions,
    EntityId,
    EntitySelectors,
    EntityState,
    EntityTransitions,
    FieldIdSelector,
    IdSelector,
    MissingIdWarning,
    SetState,
    SortOption,
    Update,
    actions_factory,
    create_state,
    selectors_factory,
)

# Reactive storage
from entityadapter.storage import LocalStore, StateContainer

# Store façade
from entityadapter.store import EntityStore, StoreActions, create_entity_store

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "IdSelector",
    "Comparer",
    "SortOption",
    "SetState",
    "Update",
    "EntityState",
    "create_state",
    "FieldIdSelector",
    "MissingIdWarning",
    "EntityTransitions",
    "EntityActions",
    "actions_factory",
    "EntitySelectors",
    "selectors_factory",
    # Adapter
    "AdapterOptions",
    "EntityAdapter",
    "create_entity_adapter",
    # Storage
    "StateContainer",
    "LocalStore",
    # Store
    "EntityStore",
    "StoreActions",
    "create_entity_store",
    # Config
    "AdapterSettings",
    "get_settings",
]
