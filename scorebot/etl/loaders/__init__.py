"""Loaders package: snapshot persistence."""

from scorebot.etl.loaders.snapshot import (
    SnapshotReadError,
    SnapshotStore,
    SnapshotStoreError,
    SnapshotWriteError,
)

__all__ = [
    "SnapshotStore",
    "SnapshotStoreError",
    "SnapshotWriteError",
    "SnapshotReadError",
]
