"""Shared test fixtures."""

import sys
from datetime import UTC, datetime, timedelta

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from entitymix import LocalStore, ManualClock, SnapshotMode


@pytest.fixture
def store():
    """Fresh store keeping live entity references."""
    return LocalStore()


@pytest.fixture
def copy_store():
    """Fresh store keeping deep copies taken at save time."""
    return LocalStore(mode=SnapshotMode.COPY)


@pytest.fixture
def clock():
    """Deterministic clock: 2024-01-01T00:00:00Z, one second per reading."""
    return ManualClock(start=datetime(2024, 1, 1, tzinfo=UTC), step=timedelta(seconds=1))
