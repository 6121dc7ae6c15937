"""Pure functions for reading and patching entity records.

Entities are opaque, immutable values. Three record kinds can be patched:
mappings, dataclass instances and Pydantic models. Patching always builds a
new record; the original is left untouched.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, TypeVar, cast

from pydantic import BaseModel

T = TypeVar("T")


def _is_dataclass_instance(entity: Any) -> bool:
    return dataclasses.is_dataclass(entity) and not isinstance(entity, type)


def as_patch(entity: Any) -> Mapping[str, Any]:
    """View a whole entity as a flat field mapping usable as an update.

    Field values are not converted (no ``asdict``/``model_dump`` recursion).
    Dataclass fields declared ``init=False`` are derived, so they are left
    out; Pydantic extra fields are included.

    Raises:
        TypeError: If the entity is not a mapping, dataclass or Pydantic model.
    """
    if isinstance(entity, Mapping):
        return entity
    if isinstance(entity, BaseModel):
        fields = {name: getattr(entity, name) for name in type(entity).model_fields}
        return {**fields, **(entity.model_extra or {})}
    if _is_dataclass_instance(entity):
        return {f.name: getattr(entity, f.name) for f in dataclasses.fields(entity) if f.init}
    raise TypeError(
        f"Cannot use {type(entity).__name__} as a patch: "
        f"expected a mapping, dataclass or Pydantic model"
    )


def merge_entity(entity: T, update: Mapping[str, Any]) -> T:
    """Shallow-merge ``update`` onto ``entity``.

    Args:
        entity: Existing record.
        update: Fields to overwrite.

    Returns:
        New record of the same kind with the update applied.

    Raises:
        TypeError: If the entity kind cannot be patched.
    """
    if isinstance(entity, Mapping):
        return cast(T, {**entity, **update})
    if isinstance(entity, BaseModel):
        return cast(T, entity.model_copy(update=dict(update)))
    if _is_dataclass_instance(entity):
        return cast(T, dataclasses.replace(entity, **update))  # type: ignore[type-var]
    raise TypeError(
        f"Cannot patch {type(entity).__name__}: expected a mapping, dataclass or Pydantic model"
    )
