"""Core primitives: identifiers and clocks."""

from entitymix.core.clock import Clock, ManualClock, SystemClock
from entitymix.core.identity import EntityId

__all__ = [
    "EntityId",
    "Clock",
    "SystemClock",
    "ManualClock",
]
