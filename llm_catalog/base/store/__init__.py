"""Snapshot store package."""

from .snapshot_store import SnapshotStore, default_store

__all__ = ["SnapshotStore", "default_store"]
