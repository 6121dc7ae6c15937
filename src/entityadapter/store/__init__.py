"""Store façade binding adapters to live reactive stores."""

from entityadapter.store.entity_store import (
    ActionsCreator,
    EntityStore,
    ExtraStateCreator,
    StoreActions,
    create_entity_store,
)

__all__ = [
    "create_entity_store",
    "EntityStore",
    "StoreActions",
    "ExtraStateCreator",
    "ActionsCreator",
]
