"""Storage layer for rule snapshots and run status."""

from policysync.storage.snapshots import SnapshotStore

__all__ = ["SnapshotStore"]
