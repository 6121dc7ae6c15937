"""Identifier extraction.

Usage:
    select_id = FieldIdSelector()              # reads "id", warns when missing
    select_key = FieldIdSelector("uniqueKey")  # reads another field
    quiet = FieldIdSelector(on_missing=None)   # no diagnostic
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Callable, Mapping
from typing import Any

from entityadapter.config import AdapterSettings, get_settings

MissingIdHandler = Callable[[Any], None]

# Warnings are attributed to the first frame outside this package.
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class MissingIdWarning(UserWarning):
    """Issued when the default id selector finds no id on an entity."""


def warn_missing_id(entity: Any) -> None:
    """Default diagnostic sink: issue a ``MissingIdWarning`` naming the entity."""
    warnings.warn(
        f"The entity passed to the id selector returned None. "
        f"You should probably provide your own id_selector. "
        f"The entity that was passed: {entity!r}",
        MissingIdWarning,
        skip_file_prefixes=(_PACKAGE_DIR,),
    )


class FieldIdSelector:
    """Id selector reading a single field from mappings or attribute-style records.

    A missing field never raises: the selector reports the entity to
    ``on_missing`` and returns None, which is then used as the id.

    Args:
        field: Key or attribute holding the id (default "id").
        on_missing: Diagnostic sink called with the entity when the id is
            missing. None disables the diagnostic.
    """

    __slots__ = ("_field", "_on_missing")

    def __init__(
        self,
        field: str = "id",
        on_missing: MissingIdHandler | None = warn_missing_id,
    ) -> None:
        self._field = field
        self._on_missing = on_missing

    @property
    def field(self) -> str:
        return self._field

    def __call__(self, entity: Any) -> Any:
        if isinstance(entity, Mapping):
            value = entity.get(self._field)
        else:
            value = getattr(entity, self._field, None)

        if value is None and self._on_missing is not None:
            self._on_missing(entity)
        return value

    def __repr__(self) -> str:
        return f"FieldIdSelector(field={self._field!r})"


def default_id_selector(
    on_missing: MissingIdHandler | None = warn_missing_id,
    settings: AdapterSettings | None = None,
) -> FieldIdSelector:
    """Selector used when none is configured, following the process settings.

    Args:
        on_missing: Diagnostic sink for entities without an id.
        settings: Overrides the environment-loaded settings.

    Returns:
        FieldIdSelector on ``settings.id_field``; silent when
        ``settings.warn_on_missing_id`` is off.
    """
    settings = settings or get_settings()
    return FieldIdSelector(
        settings.id_field,
        on_missing=on_missing if settings.warn_on_missing_id else None,
    )
