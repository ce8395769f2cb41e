"""Snapshot store publishing and epoch semantics."""

from __future__ import annotations

import threading

from llm_catalog.base.models import Snapshot
from llm_catalog.base.store import SnapshotStore, default_store
from llm_catalog.tests.utils import assert_true


def test_empty_store_reports_epoch_zero(store) -> None:
    assert_true(store.get() is None, "nothing published yet")
    assert_true(store.epoch == 0, "epoch is 0 when empty")


def test_publish_assigns_increasing_epochs(store) -> None:
    first = store.publish(Snapshot())
    second = store.publish(Snapshot())
    assert_true((first, second) == (1, 2), f"unexpected epochs {first}, {second}")
    assert_true(store.get().epoch == 2, "published snapshot carries its epoch")
    assert_true(store.epoch == 2, "store epoch follows the published snapshot")


def test_publish_snapshot_returns_stored_value(store) -> None:
    stamped = store.publish_snapshot(Snapshot())
    assert_true(stamped is store.get(), "stamped snapshot is the stored one")
    assert_true(stamped.epoch == 1, "epoch assigned")


def test_publish_does_not_mutate_argument(store) -> None:
    snap = Snapshot()
    store.publish(snap)
    assert_true(snap.epoch is None, "caller's snapshot stays unstamped")


def test_clear_keeps_counter_monotonic(store) -> None:
    store.publish(Snapshot())
    store.clear()
    assert_true(store.get() is None and store.epoch == 0, "cleared store is empty")
    assert_true(store.publish(Snapshot()) == 2, "epochs never rewind")


def test_readers_keep_their_snapshot_across_publish(store) -> None:
    store.publish(Snapshot())
    held = store.get()
    store.publish(Snapshot())
    assert_true(held.epoch == 1, "a held snapshot is never modified")


def test_concurrent_publishes_get_distinct_epochs(store) -> None:
    epochs = []
    lock = threading.Lock()

    def worker() -> None:
        epoch = store.publish(Snapshot())
        with lock:
            epochs.append(epoch)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert_true(sorted(epochs) == list(range(1, 17)), f"epochs must be unique, got {sorted(epochs)}")


def test_default_store_is_process_wide() -> None:
    assert_true(default_store() is default_store(), "same instance on every call")
    assert_true(isinstance(default_store(), SnapshotStore), "default store type")


def test_store_satisfies_snapshot_source_protocol(store) -> None:
    from llm_catalog.base.interfaces import SnapshotSource

    assert_true(isinstance(store, SnapshotSource), "store implements get/publish/clear")
