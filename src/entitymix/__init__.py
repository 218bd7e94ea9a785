"""entitymix: layered behavior over a stateful in-memory entity.

Usage:
    from entitymix import CreatedUpdated, CreateOnly, LocalStore, StatefulEntity

    store = LocalStore()
    entity = CreateOnly(CreatedUpdated(StatefulEntity(store)))

    entity.save()    # True; timestamps set, entity stored
    entity.save()    # False; already stored, nothing changes
    store.find_by_id(entity.id) is entity
"""

import logging

__version__ = "0.1.0"

# Core primitives
from entitymix.core import (
    Clock,
    EntityId,
    ManualClock,
    SystemClock,
)

# Entities and layers
from entitymix.entity import (
    ChainLink,
    CreatedUpdated,
    CreateOnly,
    DatedCreateOnlyEntity,
    Entity,
    EntityLayer,
    LayerFactory,
    LayerOwnershipError,
    StatefulEntity,
    compose,
)

# Storage
from entitymix.storage import (
    LocalStore,
    SnapshotMode,
    Store,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "Clock",
    "SystemClock",
    "ManualClock",
    # Entities
    "Entity",
    "ChainLink",
    "StatefulEntity",
    "EntityLayer",
    "CreatedUpdated",
    "CreateOnly",
    "DatedCreateOnlyEntity",
    "LayerFactory",
    "compose",
    "LayerOwnershipError",
    # Storage
    "Store",
    "LocalStore",
    "SnapshotMode",
]
