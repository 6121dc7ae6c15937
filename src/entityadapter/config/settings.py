"""Configuration settings using Pydantic Settings.

Usage:
    from entityadapter.config import AdapterSettings

    # Load from environment variables (ENTITY_ADAPTER_*)
    settings = AdapterSettings()

    # Or override with explicit values
    settings = AdapterSettings(warn_on_missing_id=False)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AdapterSettings(BaseSettings):  # type: ignore[misc]
    """Defaults applied when an adapter is created without an explicit id selector.

    Attributes:
        warn_on_missing_id: Emit a diagnostic when the default selector finds no id.
            Turn off in production to silence the check.
        id_field: Field the default selector reads the id from.

    Environment Variables:
        ENTITY_ADAPTER_WARN_ON_MISSING_ID
        ENTITY_ADAPTER_ID_FIELD
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITY_ADAPTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_on_missing_id: bool = True
    id_field: str = "id"


@lru_cache(maxsize=1)
def get_settings() -> AdapterSettings:
    """Process-wide settings, loaded once from the environment.

    Call ``get_settings.cache_clear()`` to reload.
    """
    return AdapterSettings()
