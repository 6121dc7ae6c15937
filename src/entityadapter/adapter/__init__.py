"""Adapter assembly: one configuration, three factories."""

from entityadapter.adapter.adapter import EntityAdapter, create_entity_adapter
from entityadapter.adapter.models import AdapterOptions

__all__ = [
    "AdapterOptions",
    "EntityAdapter",
    "create_entity_adapter",
]
