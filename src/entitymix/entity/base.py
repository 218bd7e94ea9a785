"""Base stateful entity.

A fake database-backed entity: save() writes it into a store, cancel() does
nothing but report. Both always succeed. Think of save/commit and
cancel/abort on a real session.

Usage:
    store = LocalStore()
    entity = StatefulEntity(store)
    entity.save()
    assert store.find_by_id(entity.id) is entity
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from entitymix.core.identity import EntityId

if TYPE_CHECKING:
    from entitymix.storage.protocol import Store

logger = logging.getLogger(__name__)


class LayerOwnershipError(Exception):
    """Raised when an entity that already has an owning layer is wrapped again."""


class ChainLink:
    """Position of an entity inside a layer chain.

    Each entity is owned by at most one layer. The owner pointers let the base
    entity find the outermost layer, which is what the store should hold.
    """

    _owner: ChainLink | None = None

    def _attach(self, owner: ChainLink) -> None:
        if self._owner is not None:
            raise LayerOwnershipError(
                f"{type(self).__name__} is already wrapped by {type(self._owner).__name__}"
            )
        self._owner = owner

    @property
    def owner(self) -> ChainLink | None:
        """Layer directly wrapping this entity, if any."""
        return self._owner

    @property
    def outermost(self) -> ChainLink:
        """Top of the chain this entity belongs to (itself if unwrapped)."""
        link = self
        while link._owner is not None:
            link = link._owner
        return link


class StatefulEntity(ChainLink):
    """Entity with an identity that saves itself into a store.

    Args:
        store: Store that save() writes into.
    """

    def __init__(self, store: Store):
        self._id = EntityId.new()
        self._store = store

    @property
    def id(self) -> EntityId:
        return self._id

    @property
    def store(self) -> Store:
        return self._store

    def can_save(self) -> bool:
        return True

    def save(self) -> bool:
        """Write the outermost composed entity into the store. Always succeeds."""
        logger.info("Save", extra={"entity_id": str(self._id)})
        self._store.store(self.outermost)  # type: ignore[arg-type]
        return True

    def cancel(self) -> bool:
        """Abandon pending changes. Touches nothing; always succeeds."""
        logger.info("Cancel", extra={"entity_id": str(self._id)})
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.short()})"
