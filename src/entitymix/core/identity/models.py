"""Entity identity models.

Usage:
    entity_id = EntityId.new()
    same = EntityId.parse(str(entity_id))
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EntityId:
    """Globally unique, immutable entity identifier backed by a UUID4.

    Assigned once when an entity is constructed and used as the store key.
    """

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def new(cls) -> EntityId:
        """Allocate a fresh identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, text: str) -> EntityId:
        """Rebuild an identifier from its string form.

        Raises:
            ValueError: If text is not a valid UUID.
        """
        return cls(uuid.UUID(text))

    def __str__(self) -> str:
        return str(self.value)

    def short(self) -> str:
        """First eight hex digits, for log lines."""
        return self.value.hex[:8]
