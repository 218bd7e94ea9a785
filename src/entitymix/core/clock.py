"""Clocks used for entity timestamps.

Timestamps come from an injectable Clock so that tests can advance time
deterministically instead of sleeping.

Usage:
    clock = ManualClock(step=timedelta(seconds=1))
    entity = CreatedUpdated(StatefulEntity(store), clock=clock)
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

EPOCH = datetime(2000, 1, 1, tzinfo=UTC)
_TICK = timedelta(microseconds=1)


@runtime_checkable
class Clock(Protocol):
    """Source of timezone-aware timestamps."""

    def now(self) -> datetime:
        """Current time."""
        ...


class SystemClock:
    """Wall clock in UTC, strictly increasing per instance.

    Two readings taken within the resolution of the platform clock would
    compare equal; the later one is nudged forward by a microsecond so that
    successive saves always observe a newer timestamp.
    """

    def __init__(self) -> None:
        self._last: datetime | None = None

    def now(self) -> datetime:
        current = datetime.now(tz=UTC)
        if self._last is not None and current <= self._last:
            current = self._last + _TICK
        self._last = current
        return current


class ManualClock:
    """Deterministic clock advancing by a fixed step on every reading.

    Args:
        start: First reading returned.
        step: Amount added after each reading. Must be positive.
    """

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)):
        if step <= timedelta(0):
            raise ValueError(f"ManualClock step must be positive, got {step}")
        self._current = start
        self._step = step

    def now(self) -> datetime:
        reading = self._current
        self._current = reading + self._step
        return reading

    def peek(self) -> datetime:
        """Next reading, without advancing."""
        return self._current

    def advance(self, delta: timedelta) -> None:
        """Jump forward (e.g. to simulate a pause between saves)."""
        if delta < timedelta(0):
            raise ValueError("ManualClock cannot move backwards")
        self._current += delta
