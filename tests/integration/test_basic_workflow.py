"""Basic workflow integration tests."""

import sys
from datetime import timedelta

sys.path.insert(0, "src")

from entitymix import (
    CreatedUpdated,
    CreateOnly,
    DatedCreateOnlyEntity,
    LocalStore,
    ManualClock,
    SnapshotMode,
    StatefulEntity,
)


def test_save_then_find():
    """Construct, confirm absent, save, confirm present."""
    store = LocalStore()
    entity = StatefulEntity(store)

    assert store.find_by_id(entity.id) is None
    assert entity.save() is True
    assert store.find_by_id(entity.id) is entity


def test_create_once_lifecycle():
    """Unsaved -> Saved on first save; further saves change nothing."""
    store = LocalStore()
    clock = ManualClock()
    entity = DatedCreateOnlyEntity(store, clock=clock)

    assert entity.save() is True
    created = entity.when_created

    for _ in range(3):
        clock.advance(timedelta(minutes=1))
        assert entity.save() is False

    assert entity.when_created == created
    assert entity.last_updated == created
    assert store.find_by_id(entity.id) is entity


def test_mixed_entities_share_one_store():
    """Plain, dated and create-once entities coexist in the same store."""
    store = LocalStore()
    clock = ManualClock()
    plain = StatefulEntity(store)
    dated = CreatedUpdated(StatefulEntity(store), clock=clock)
    once = CreateOnly(StatefulEntity(store))

    for entity in (plain, dated, once):
        assert entity.save() is True

    assert plain.save() is True
    assert dated.save() is True
    assert once.save() is False

    assert len(store) == 3
    assert dated.last_updated > dated.when_created


def test_copy_store_workflow():
    """With COPY snapshots the create-once guard still sees the saved id."""
    store = LocalStore(mode=SnapshotMode.COPY)
    clock = ManualClock()
    entity = DatedCreateOnlyEntity(store, clock=clock)

    assert entity.save() is True
    snapshot = store.find_by_id(entity.id)

    assert snapshot is not entity
    assert snapshot.when_created == entity.when_created
    assert snapshot.save() is False
    assert entity.save() is False
