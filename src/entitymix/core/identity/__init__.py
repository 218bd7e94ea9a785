"""Entity identity: UUID-backed identifiers."""

from entitymix.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
