"""SnapshotSource Protocol (single-class module).

Read/write contract for the holder of the currently published snapshot.
``SnapshotStore`` implements it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from ..models import Snapshot


@runtime_checkable
class SnapshotSource(Protocol):
    """Interface for snapshot stores."""

    def get(self) -> Optional["Snapshot"]:  # pragma: no cover - trivial
        """Return the published snapshot or ``None``."""
        ...

    def publish(self, snapshot: "Snapshot") -> int:  # pragma: no cover - trivial
        """Atomically replace the published snapshot and return its epoch."""
        ...

    def clear(self) -> None:  # pragma: no cover - trivial
        """Drop the published snapshot."""
        ...
