"""
Tests for the snapshot store.
"""

import threading
from datetime import datetime, timezone

from flood_watch.flood.aggregator import reduce_forecast
from flood_watch.flood.models import Snapshot
from flood_watch.flood.store import SnapshotStore

from fakes import LAHORE, raw_forecast


def make_snapshot(generation: int) -> Snapshot:
    return Snapshot(
        results=(reduce_forecast(raw_forecast(LAHORE, [float(generation)])),),
        generation=generation,
        completed_at=datetime.now(timezone.utc)
    )


class TestSnapshotStore:
    def test_empty(self):
        store = SnapshotStore()
        assert store.current() is None
        assert store.generation == 0

    def test_first_publish(self):
        store = SnapshotStore()
        snapshot = make_snapshot(1)

        assert store.publish(snapshot) is True
        assert store.current() is snapshot
        assert store.generation == 1

    def test_newer_generation_replaces(self):
        store = SnapshotStore()
        store.publish(make_snapshot(1))
        newer = make_snapshot(2)

        assert store.publish(newer) is True
        assert store.current() is newer

    def test_older_generation_dropped(self):
        store = SnapshotStore()
        newer = make_snapshot(2)
        store.publish(newer)

        assert store.publish(make_snapshot(1)) is False
        assert store.current() is newer

    def test_equal_generation_dropped(self):
        store = SnapshotStore()
        first = make_snapshot(3)
        store.publish(first)

        assert store.publish(make_snapshot(3)) is False
        assert store.current() is first

    def test_concurrent_writers_keep_highest_generation(self):
        store = SnapshotStore()
        snapshots = [make_snapshot(generation) for generation in range(1, 201)]

        def writer(batch):
            for snapshot in batch:
                store.publish(snapshot)

        threads = [threading.Thread(target=writer, args=(snapshots[i::4],)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.generation == 200
        assert store.current() is snapshots[-1]
