"""Tests for the base StatefulEntity contract."""

import logging

from entitymix import Entity, StatefulEntity


def test_stateful_entity_contract(store):
    """Two entities: distinct ids, absent before save, present after."""
    se1 = StatefulEntity(store)
    se2 = StatefulEntity(store)

    assert se1.id == se1.id
    assert se1.id != se2.id

    assert store.find_by_id(se1.id) is None
    assert store.find_by_id(se2.id) is None

    assert se1.save() is True
    assert se2.save() is True

    assert store.find_by_id(se1.id) is se1
    assert store.find_by_id(se2.id) is se2

    assert se1.cancel() is True
    assert se2.cancel() is True


def test_stateful_entity_is_entity(store):
    assert isinstance(StatefulEntity(store), Entity)


def test_save_is_repeatable(store):
    """The base variant has no guard: every save succeeds."""
    entity = StatefulEntity(store)

    assert entity.save() is True
    assert entity.save() is True
    assert entity.can_save() is True
    assert len(store) == 1


def test_cancel_does_not_touch_store(store):
    entity = StatefulEntity(store)

    entity.cancel()

    assert store.find_by_id(entity.id) is None


def test_unwrapped_entity_is_its_own_outermost(store):
    entity = StatefulEntity(store)

    assert entity.owner is None
    assert entity.outermost is entity


def test_save_and_cancel_log_markers(store, caplog):
    caplog.set_level(logging.INFO, logger="entitymix")
    entity = StatefulEntity(store)

    entity.save()
    entity.cancel()

    records = [r for r in caplog.records if r.name == "entitymix.entity.base"]
    assert [r.getMessage() for r in records] == ["Save", "Cancel"]
    assert records[0].entity_id == str(entity.id)


def test_repr_shows_short_id(store):
    entity = StatefulEntity(store)
    assert repr(entity) == f"StatefulEntity(id={entity.id.short()})"
