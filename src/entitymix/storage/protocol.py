"""Store protocol for swappable entity backends.

The store is the in-memory stand-in for a database: entities write
themselves into it on save, and callers look them up by identifier.

Usage:
    store = LocalStore()
    entity = StatefulEntity(store)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entitymix.core.identity import EntityId
    from entitymix.entity.protocol import Entity


@runtime_checkable
class Store(Protocol):
    """Abstract store interface. Implementations own the saved entities."""

    def store(self, entity: Entity) -> None:
        """Insert or overwrite the entry keyed by entity.id."""
        ...

    def find_by_id(self, entity_id: EntityId) -> Entity | None:
        """Get the stored entity, or None if that id was never saved."""
        ...

    def contains(self, entity_id: EntityId) -> bool:
        """Check whether an entity with this id has been saved, without loading it."""
        ...
