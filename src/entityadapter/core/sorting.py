"""Sort-order derivation shared by the transitions."""

from __future__ import annotations

from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any

from entityadapter.core.types import Comparer, IdSelector


def sorted_ids[E, K](
    entities: Mapping[Any, E],
    id_selector: IdSelector[E, K],
    comparer: Comparer[E],
) -> list[K]:
    """Derive the canonical id order from every entity in the map.

    Always a full resort: the comparer sees the whole collection, not only
    the entity that changed. Python's sort is stable, so ties keep map order.

    Args:
        entities: Id-keyed entity map.
        id_selector: Maps each sorted entity back to its id.
        comparer: Two-argument ordering function.

    Returns:
        Ids of all present entities in comparer order.
    """
    values = [entity for entity in entities.values() if entity is not None]
    values.sort(key=cmp_to_key(comparer))
    return [id_selector(entity) for entity in values]
