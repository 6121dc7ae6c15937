"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from entityadapter import LocalStore, create_state
from entityadapter.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from ENTITY_ADAPTER_* variables and the settings cache."""
    monkeypatch.delenv("ENTITY_ADAPTER_WARN_ON_MISSING_ID", raising=False)
    monkeypatch.delenv("ENTITY_ADAPTER_ID_FIELD", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    """Fresh LocalStore seeded with the empty collection."""
    return LocalStore(create_state())


@pytest.fixture
def diagnostics():
    """Recording sink for missing-id diagnostics."""
    return []


def compare_names(a, b):
    """Ascending by the "name" field."""
    return (a["name"] > b["name"]) - (a["name"] < b["name"])


@pytest.fixture
def by_name():
    return compare_names
