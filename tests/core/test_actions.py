"""Tests for imperative entity actions writing through a store.

Why these tests exist:
- Each action must reach the store as exactly one atomic set_state call
- No-op actions must not notify subscribers
- Extra keys kept next to the collection must survive every action
"""

import pytest

from entityadapter import FieldIdSelector, LocalStore, Update, actions_factory, create_state
from entityadapter.core.identity import MissingIdWarning


@pytest.fixture
def actions(store):
    """Actions with a default-style id selector and insertion order."""
    return actions_factory(store.set_state, id_selector=FieldIdSelector(on_missing=None))


@pytest.fixture
def notifications(store):
    """Records every (state, previous) pair the store publishes."""
    seen = []
    store.subscribe(lambda state, previous: seen.append((state, previous)))
    return seen


def test_add_one(actions, store):
    entity = {"id": "1", "name": "Entity 1"}

    actions.add_one(entity)

    assert store.get_state() == {"ids": ["1"], "entities": {"1": entity}}


def test_duplicate_add_one_does_not_notify(actions, store, notifications):
    actions.add_one({"id": "1", "name": "A"})
    snapshot = store.get_state()

    actions.add_one({"id": "1", "name": "B"})

    assert store.get_state() is snapshot
    assert store.get_state() == {"ids": ["1"], "entities": {"1": {"id": "1", "name": "A"}}}
    assert len(notifications) == 1


def test_add_many_notifies_once(actions, store, notifications):
    """A batch reaches subscribers as one transition, never partially applied."""
    actions.add_many([{"id": "1"}, {"id": "2"}, {"id": "3"}])

    assert len(notifications) == 1
    state, previous = notifications[0]
    assert state["ids"] == ["1", "2", "3"]
    assert previous["ids"] == []


def test_add_many_accepts_generators(actions, store):
    actions.add_many({"id": str(i)} for i in range(3))

    assert store.get_state()["ids"] == ["0", "1", "2"]


def test_set_one_replaces_existing(actions, store):
    store.set_state({"ids": ["1"], "entities": {"1": {"id": "1", "name": "Entity 1"}}}, True)

    actions.set_one({"id": "1", "name": "New Entity 1"})

    assert store.get_state() == {
        "ids": ["1"],
        "entities": {"1": {"id": "1", "name": "New Entity 1"}},
    }


def test_set_many(actions, store):
    entities = [{"id": "1", "name": "Entity 1"}, {"id": "2", "name": "Entity 2"}]

    actions.set_many(entities)

    assert store.get_state() == {
        "ids": ["1", "2"],
        "entities": {"1": entities[0], "2": entities[1]},
    }


def test_set_all_replaces_collection(actions, store):
    actions.add_many([{"id": "old"}])

    actions.set_all([{"id": "1"}, {"id": "2"}])

    assert store.get_state()["ids"] == ["1", "2"]
    assert "old" not in store.get_state()["entities"]


def test_update_one(actions, store):
    actions.add_one({"id": "1", "name": "Entity 1"})

    actions.update_one(Update(id="1", update={"name": "Updated Entity 1"}))

    assert store.get_state()["entities"]["1"] == {"id": "1", "name": "Updated Entity 1"}


def test_update_one_absent_does_not_notify(actions, store, notifications):
    actions.update_one({"id": "1", "update": {"name": "Non-Existent Entity"}})

    assert store.get_state() == {"ids": [], "entities": {}}
    assert notifications == []


def test_update_many(actions, store):
    actions.add_many([{"id": "1", "name": "Entity 1"}, {"id": "2", "name": "Entity 2"}])

    actions.update_many(
        [
            {"id": "1", "update": {"name": "Updated Entity 1"}},
            {"id": "2", "update": {"name": "Updated Entity 2"}},
        ]
    )

    assert store.get_state()["entities"] == {
        "1": {"id": "1", "name": "Updated Entity 1"},
        "2": {"id": "2", "name": "Updated Entity 2"},
    }


def test_upsert_one_and_many(actions, store):
    actions.add_one({"id": "1", "name": "Entity 1", "extra": True})

    actions.upsert_one({"id": "1", "name": "Updated Entity 1"})
    actions.upsert_many([{"id": "2", "name": "Entity 2"}])

    assert store.get_state() == {
        "ids": ["1", "2"],
        "entities": {
            "1": {"id": "1", "name": "Updated Entity 1", "extra": True},
            "2": {"id": "2", "name": "Entity 2"},
        },
    }


def test_remove_one_and_many(actions, store):
    actions.add_many([{"id": "1"}, {"id": "2"}, {"id": "3"}])

    actions.remove_one({"id": "2"})
    actions.remove_many([{"id": "1"}, {"id": "3"}])

    assert store.get_state() == {"ids": [], "entities": {}}


def test_remove_one_absent_does_not_notify(actions, store, notifications):
    actions.add_one({"id": "2", "name": "Entity 2"})

    actions.remove_one({"id": "1", "name": "Non-Existent Entity"})

    assert len(notifications) == 1


def test_remove_all(actions, store):
    actions.add_many([{"id": "1"}, {"id": "2"}])

    actions.remove_all()

    assert store.get_state() == {"ids": [], "entities": {}}


def test_extra_state_survives_actions():
    """Actions write ids/entities only; other snapshot keys are carried over."""
    store = LocalStore({**create_state(), "loading": True})
    actions = actions_factory(store.set_state, id_selector=lambda e: e["id"])

    actions.add_one({"id": "1"})
    actions.remove_all()
    actions.set_all([{"id": "2"}])

    assert store.get_state()["loading"] is True
    assert store.get_state()["ids"] == ["2"]


def test_custom_id_selector(store):
    actions = actions_factory(store.set_state, id_selector=lambda e: e["uniqueKey"])
    entity = {"uniqueKey": "abc123", "name": "Entity 1"}

    actions.add_one(entity)
    actions.update_one(Update(id="abc123", update={"name": "Updated"}))

    assert store.get_state()["ids"] == ["abc123"]
    assert store.get_state()["entities"]["abc123"]["name"] == "Updated"

    actions.remove_one(entity)
    assert store.get_state() == {"ids": [], "entities": {}}


def test_sort_false_means_insertion_order(store, by_name):
    actions = actions_factory(store.set_state, id_selector=lambda e: e["id"], sort=False)

    actions.add_many([{"id": "1", "name": "Zebra"}, {"id": "2", "name": "Apple"}])

    assert store.get_state()["ids"] == ["1", "2"]


def test_sorted_actions(store, by_name):
    actions = actions_factory(store.set_state, id_selector=lambda e: e["id"], sort=by_name)

    actions.add_many([{"id": "2", "name": "Apple"}, {"id": "1", "name": "Zebra"}])
    actions.add_one({"id": "3", "name": "Mango"})

    assert store.get_state()["ids"] == ["2", "3", "1"]


def test_add_one_without_id_reports_twice(store, diagnostics):
    """The default selector runs for the membership check and again on insert.

    One logical add_one of an id-less entity therefore yields two diagnostics.
    """
    actions = actions_factory(
        store.set_state, id_selector=FieldIdSelector(on_missing=diagnostics.append)
    )
    entity = {"name": "Entity without ID"}

    actions.add_one(entity)

    assert diagnostics == [entity, entity]
    assert store.get_state() == {"ids": [None], "entities": {None: entity}}


def test_missing_id_warning_points_at_calling_code(store):
    actions = actions_factory(store.set_state)

    with pytest.warns(MissingIdWarning) as record:
        actions.add_one({"name": "Entity without ID"})

    assert record
    assert all(warning.filename == __file__ for warning in record)


def test_transitions_are_exposed(actions):
    state = actions.transitions.add_one(create_state(), {"id": "x"})

    assert state["ids"] == ["x"]
