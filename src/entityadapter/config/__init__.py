"""Configuration module using Pydantic Settings.

Usage:
    from entityadapter.config import AdapterSettings, get_settings

    settings = get_settings()
    quiet = AdapterSettings(warn_on_missing_id=False)
"""

from entityadapter.config.settings import AdapterSettings, get_settings

__all__ = [
    "AdapterSettings",
    "get_settings",
]
