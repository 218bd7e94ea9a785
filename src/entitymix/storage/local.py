"""Local in-memory store implementation.

Dict-based store suitable for a single process and for testing. Data lives
as long as the LocalStore instance; nothing is written anywhere else.

Usage:
    store = LocalStore()
    copying = LocalStore(mode=SnapshotMode.COPY)
"""

from __future__ import annotations

import copy as cp
import logging
import threading
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING

from entitymix.core.identity import EntityId

if TYPE_CHECKING:
    from entitymix.config import StoreSettings
    from entitymix.entity.protocol import Entity

logger = logging.getLogger(__name__)


class SnapshotMode(str, Enum):
    """What the store keeps when an entity is saved."""

    REFERENCE = "reference"
    """Keep the live entity. Later mutations are visible through find_by_id."""

    COPY = "copy"
    """Keep a deep copy taken at save time; lookups return further copies."""


class LocalStore:
    """In-memory store keyed by EntityId.

    Structure:
        _entities[entity_id] = entity (or a deep copy of it in COPY mode)

    All access goes through a re-entrant lock, so one store can be shared
    between threads. Entities themselves are not thread-safe.

    Args:
        mode: Snapshot semantics for saved entities (default REFERENCE).
    """

    def __init__(self, mode: SnapshotMode = SnapshotMode.REFERENCE):
        self._mode = mode
        self._entities: dict[EntityId, Entity] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: StoreSettings | None = None) -> LocalStore:
        """Build a store from StoreSettings (environment-driven by default)."""
        if settings is None:
            from entitymix.config import StoreSettings

            settings = StoreSettings()
        return cls(mode=settings.snapshot_mode)

    @property
    def mode(self) -> SnapshotMode:
        return self._mode

    def _copy(self, entity: Entity) -> Entity:
        # Entities reference their store; the copy must share it, not clone it.
        return cp.deepcopy(entity, memo={id(self): self})

    def store(self, entity: Entity) -> None:
        """Insert or overwrite the entry keyed by entity.id."""
        saved = self._copy(entity) if self._mode is SnapshotMode.COPY else entity
        with self._lock:
            replaced = entity.id in self._entities
            self._entities[entity.id] = saved
        logger.debug(
            "%s entity %s", "Updated" if replaced else "Stored", entity.id.short()
        )

    def find_by_id(self, entity_id: EntityId) -> Entity | None:
        """Get the stored entity, or None if that id was never saved.

        In COPY mode the result is a fresh copy; mutating it does not change
        what is stored.
        """
        with self._lock:
            found = self._entities.get(entity_id)
        if found is None or self._mode is SnapshotMode.REFERENCE:
            return found
        return self._copy(found)

    def contains(self, entity_id: EntityId) -> bool:
        """Check whether an entity with this id has been saved."""
        with self._lock:
            return entity_id in self._entities

    def remove(self, entity_id: EntityId) -> bool:
        """Drop an entry. Returns True if it existed."""
        with self._lock:
            existed = self._entities.pop(entity_id, None) is not None
        if existed:
            logger.debug("Removed entity %s", entity_id.short())
        return existed

    def all_ids(self) -> Iterator[EntityId]:
        """Iterate the ids of all stored entities (snapshot of the key set)."""
        with self._lock:
            ids = list(self._entities)
        return iter(ids)

    def clear(self) -> None:
        """Forget every stored entity."""
        with self._lock:
            self._entities.clear()

    def __contains__(self, entity_id: object) -> bool:
        return isinstance(entity_id, EntityId) and self.contains(entity_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)
