"""Process-wide holder of the published catalog snapshot.

Readers call :meth:`SnapshotStore.get` once and keep the returned immutable
snapshot for the rest of their operation; no lock is taken on reads. Publish
holds a lock only while bumping the epoch counter and swapping the reference.
"""
from __future__ import annotations

import threading
from typing import Optional

from ..logging import get_logger, log_event
from ..models import Snapshot

_LOGGER_NAME = "llm_catalog.store"


class SnapshotStore:
    """Single-slot snapshot store with a monotonic epoch counter.

    ``clear`` removes the snapshot but never rewinds the counter, so epochs
    keep strictly increasing across clear/publish cycles.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Optional[Snapshot] = None
        self._counter = 0

    def get(self) -> Optional[Snapshot]:
        return self._snapshot

    def publish(self, snapshot: Snapshot) -> int:
        """Stamp ``snapshot`` with the next epoch, publish it and return the epoch."""
        return self.publish_snapshot(snapshot).epoch

    def publish_snapshot(self, snapshot: Snapshot) -> Snapshot:
        """Like :meth:`publish` but return the stamped snapshot as stored."""
        with self._lock:
            self._counter += 1
            epoch = self._counter
            stamped = snapshot.with_epoch(epoch)
            self._snapshot = stamped
        log_event(
            get_logger(_LOGGER_NAME),
            "catalog.store.published",
            epoch=epoch,
            providers=len(snapshot.providers),
            models=len(snapshot.models),
        )
        return stamped

    def clear(self) -> None:
        with self._lock:
            self._snapshot = None
        log_event(get_logger(_LOGGER_NAME), "catalog.store.cleared")

    @property
    def epoch(self) -> int:
        """Epoch of the published snapshot, ``0`` when nothing is published."""
        current = self._snapshot
        if current is None:
            return 0
        return current.meta.epoch or 0


_DEFAULT_STORE = SnapshotStore()


def default_store() -> SnapshotStore:
    return _DEFAULT_STORE


__all__ = ["SnapshotStore", "default_store"]
