"""Layers: decorators that add behavior around an inner entity.

Each layer owns exactly one inner entity and implements the same
save/cancel/can_save interface, choosing for itself whether to act before
or after delegating. Stacking layers replaces trait linearization with an
explicit chain:

    entity = CreateOnly(CreatedUpdated(StatefulEntity(store)))

Guards are consulted through can_save() before any layer mutates state, so
the outcome of a save does not depend on the order the layers were stacked.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from entitymix.core.clock import Clock, SystemClock
from entitymix.entity.base import ChainLink

if TYPE_CHECKING:
    from entitymix.core.identity import EntityId
    from entitymix.entity.protocol import Entity
    from entitymix.storage.protocol import Store

logger = logging.getLogger(__name__)


class EntityLayer(ChainLink):
    """Pass-through layer. Subclasses override the operations they change.

    Public attributes not defined on the layer resolve on the inner entity,
    so accessors of lower layers stay reachable from the top of the chain.
    They are read-only from here: assigning one through an outer layer raises
    instead of shadowing the inner value.

    Raises:
        TypeError: If inner is not an entity.
        LayerOwnershipError: If inner is already wrapped by another layer.
    """

    def __init__(self, inner: Entity):
        if not isinstance(inner, ChainLink):
            raise TypeError(f"Cannot wrap {type(inner).__name__}: not an entity")
        inner._attach(self)
        self._inner: Entity = inner

    @property
    def inner(self) -> Entity:
        return self._inner

    @property
    def id(self) -> EntityId:
        return self._inner.id

    @property
    def store(self) -> Store:
        return self._inner.store

    def can_save(self) -> bool:
        return self._inner.can_save()

    def save(self) -> bool:
        return self._inner.save()

    def cancel(self) -> bool:
        return self._inner.cancel()

    def __getattr__(self, name: str) -> Any:
        # Private and dunder lookups must not recurse (copy/pickle probe these
        # before __init__ has run).
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if (
            not name.startswith("_")
            and not hasattr(type(self), name)
            and hasattr(self._inner, name)
        ):
            raise AttributeError(
                f"{name!r} belongs to {type(self._inner).__name__} "
                f"and cannot be set through {type(self).__name__}"
            )
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class CreatedUpdated(EntityLayer):
    """Records when the entity was first saved and when it was last saved.

    The first successful save sets both timestamps to the same reading. Later
    saves move only the updated timestamp. cancel() leaves both alone, and a
    save refused by a guard further down the chain changes nothing.

    Args:
        inner: Entity to wrap.
        clock: Timestamp source (default SystemClock).
    """

    def __init__(self, inner: Entity, clock: Clock | None = None):
        super().__init__(inner)
        self._clock = clock or SystemClock()
        self._created_at: datetime | None = None
        self._updated_at: datetime | None = None

    @property
    def when_created(self) -> datetime | None:
        return self._created_at

    @property
    def last_updated(self) -> datetime | None:
        return self._updated_at

    def save(self) -> bool:
        if not self._inner.can_save():
            logger.debug("Save of %s refused; timestamps unchanged", self.id.short())
            return False

        now = self._clock.now()
        if self._created_at is None:
            self._created_at = now
        self._updated_at = now
        return self._inner.save()


class CreateOnly(EntityLayer):
    """Allows a save only while the store has never seen this entity.

    Once the id is present in the store, save() returns False and neither
    timestamps nor the store are touched.
    """

    def can_save(self) -> bool:
        if self.store.contains(self.id):
            return False
        return self._inner.can_save()

    def save(self) -> bool:
        if not self.can_save():
            logger.debug("Entity %s already stored; create-only save skipped", self.id.short())
            return False
        return self._inner.save()
