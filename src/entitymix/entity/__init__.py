"""Entities and the layers that compose over them."""

from entitymix.entity.base import ChainLink, LayerOwnershipError, StatefulEntity
from entitymix.entity.composition import DatedCreateOnlyEntity, LayerFactory, compose
from entitymix.entity.layers import CreatedUpdated, CreateOnly, EntityLayer
from entitymix.entity.protocol import Entity

__all__ = [
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
]
