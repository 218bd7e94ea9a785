"""Composing layers over a base entity.

Usage:
    entity = compose(StatefulEntity(store), CreatedUpdated, CreateOnly)
    # same chain as CreateOnly(CreatedUpdated(StatefulEntity(store)))

    entity = DatedCreateOnlyEntity(store)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from entitymix.entity.base import ChainLink, StatefulEntity
from entitymix.entity.layers import CreatedUpdated, CreateOnly

if TYPE_CHECKING:
    from entitymix.core.clock import Clock
    from entitymix.storage.protocol import Store

LayerFactory = Callable[[ChainLink], ChainLink]
"""Callable wrapping an entity in a new layer, e.g. a layer class or a partial."""


def compose(base: ChainLink, *layers: LayerFactory) -> ChainLink:
    """Wrap base in each layer, innermost first.

    Args:
        base: Entity at the bottom of the chain.
        *layers: Layer factories, applied left to right.

    Returns:
        The outermost layer (base itself when no layers are given).

    Raises:
        TypeError: If a factory returns something that is not an entity.
    """
    entity = base
    for layer in layers:
        wrapped = layer(entity)
        if not isinstance(wrapped, ChainLink):
            raise TypeError(f"Layer factory {layer!r} returned {type(wrapped).__name__}")
        entity = wrapped
    return entity


class DatedCreateOnlyEntity(CreateOnly):
    """Timestamped, create-once entity without composing layers by hand.

    Args:
        store: Store that save() writes into.
        clock: Timestamp source (default SystemClock).
    """

    def __init__(self, store: Store, clock: Clock | None = None):
        super().__init__(CreatedUpdated(StatefulEntity(store), clock=clock))
