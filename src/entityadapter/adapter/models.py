"""Adapter configuration models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from entityadapter.core.identity import MissingIdHandler, warn_missing_id
from entityadapter.core.types import Comparer, IdSelector, SortOption


@dataclass(frozen=True, slots=True)
class AdapterOptions[E, K]:
    """Identifier and ordering policy for a normalized collection.

    Attributes:
        id_selector: Derives each entity's id. None selects the configured
            default field (see ``AdapterSettings``).
        sort: Comparer defining the ``ids`` order. None or False keeps
            insertion order.
        on_missing_id: Diagnostic sink used by the default id selector.
    """

    id_selector: IdSelector[E, K] | None = None
    sort: SortOption[E] = None
    on_missing_id: MissingIdHandler | None = warn_missing_id

    @property
    def comparer(self) -> Comparer[E] | None:
        """The comparer, or None when sorting is disabled."""
        return self.sort or None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AdapterOptions[E, K]:
        """Create from a mapping with any of the attribute names as keys.

        Raises:
            TypeError: If the mapping has unknown keys.
        """
        unknown = set(data) - {"id_selector", "sort", "on_missing_id"}
        if unknown:
            raise TypeError(f"Unknown adapter options: {', '.join(sorted(unknown))}")
        return cls(**data)
