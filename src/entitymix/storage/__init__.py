"""Store backends."""

from entitymix.storage.local import LocalStore, SnapshotMode
from entitymix.storage.protocol import Store

__all__ = [
    "Store",
    "LocalStore",
    "SnapshotMode",
]
