"""Interfaces parts package: one Protocol per module."""

from .overrides_provider import OverridesProvider
from .snapshot_store import SnapshotSource

__all__ = ["OverridesProvider", "SnapshotSource"]
