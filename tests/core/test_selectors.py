"""Tests for read-only projections."""

import pytest

from entityadapter import selectors_factory


@pytest.fixture
def selectors():
    return selectors_factory()


@pytest.fixture
def state():
    return {
        "ids": ["2", "1"],
        "entities": {
            "1": {"id": "1", "name": "Entity 1"},
            "2": {"id": "2", "name": "Entity 2"},
        },
    }


def test_select_ids(selectors, state):
    assert selectors.select_ids(state) == ["2", "1"]


def test_select_entities_returns_raw_mapping(selectors, state):
    assert selectors.select_entities(state) is state["entities"]


def test_select_total(selectors, state):
    assert selectors.select_total(state) == 2
    assert selectors.select_total({"ids": [], "entities": {}}) == 0


def test_select_all_follows_ids_order(selectors, state):
    assert selectors.select_all(state) == [
        {"id": "2", "name": "Entity 2"},
        {"id": "1", "name": "Entity 1"},
    ]


def test_select_all_skips_dangling_ids(selectors):
    """An id without an entity is skipped rather than failing."""
    state = {"ids": ["1", "ghost"], "entities": {"1": {"id": "1"}}}

    assert selectors.select_all(state) == [{"id": "1"}]


def test_select_all_skips_none_entities(selectors):
    """A None entity is treated like a missing one, matching sorted ids."""
    state = {"ids": ["1", "2"], "entities": {"1": {"id": "1"}, "2": None}}

    assert selectors.select_all(state) == [{"id": "1"}]


def test_select_by_id_direct(selectors, state):
    assert selectors.select_by_id("1", state) == {"id": "1", "name": "Entity 1"}
    assert selectors.select_by_id("missing", state) is None


def test_select_by_id_curried_matches_direct(selectors, state):
    select_one = selectors.select_by_id("2")

    assert callable(select_one)
    assert select_one(state) == selectors.select_by_id("2", state)


def test_selectors_do_not_mutate_state(selectors, state):
    before = {"ids": list(state["ids"]), "entities": dict(state["entities"])}

    selectors.select_all(state)
    selectors.select_by_id("1")(state)

    assert state == before
