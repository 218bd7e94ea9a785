"""Entity protocol shared by the base entity and every layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entitymix.core.identity import EntityId
    from entitymix.storage.protocol import Store


@runtime_checkable
class Entity(Protocol):
    """Anything that can be saved to and cancelled against a store.

    save() and cancel() report success as a bool rather than raising.
    can_save() answers whether save() would go through, without side effects.
    """

    @property
    def id(self) -> EntityId: ...

    @property
    def store(self) -> Store: ...

    def save(self) -> bool: ...

    def cancel(self) -> bool: ...

    def can_save(self) -> bool: ...
