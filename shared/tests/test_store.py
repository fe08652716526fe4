"""
Unit tests for RecordStore.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import pytest

from shared.store import NotFound, RecordStore


@dataclass
class Widget:
    id: int
    label: str
    size: int = 0


class TestRecordStore:
    """Test cases for RecordStore."""

    @pytest.fixture
    def store(self):
        """Store seeded with three widgets."""
        return RecordStore("widgets", [
            Widget(id=1, label="alpha", size=1),
            Widget(id=2, label="beta", size=2),
            Widget(id=7, label="gamma", size=3),
        ])

    def test_empty_store(self):
        store = RecordStore("empty")
        assert store.list_all() == []
        assert store.get_by_id(1) is None
        assert store.create(Widget(id=99, label="first")).id == 1

    def test_list_all_returns_snapshot(self, store):
        snapshot = store.list_all()
        snapshot[0].label = "changed"
        snapshot.append(Widget(id=100, label="extra"))

        assert [w.label for w in store.list_all()] == ["alpha", "beta", "gamma"]
        assert store.count() == 3

    def test_get_by_id(self, store):
        assert store.get_by_id(2).label == "beta"
        assert store.get_by_id(3) is None

    def test_find(self, store):
        assert store.find(lambda w: w.size == 3).id == 7
        assert store.find(lambda w: w.size == 42) is None

    def test_create_assigns_id_above_highest_seed(self, store):
        created = store.create(Widget(id=1, label="delta"))
        assert created.id == 8
        assert store.get_by_id(8).label == "delta"
        # The seed record keeping id 1 is untouched
        assert store.get_by_id(1).label == "alpha"

    def test_ids_never_reused_after_delete(self, store):
        created = store.create(Widget(id=0, label="delta"))
        assert store.delete(created.id) is True
        assert store.create(Widget(id=0, label="epsilon")).id == created.id + 1

    def test_update_replaces_fields_but_not_id(self, store):
        updated = store.update(2, Widget(id=55, label="BETA", size=20))
        assert updated == Widget(id=2, label="BETA", size=20)
        assert store.get_by_id(2) == Widget(id=2, label="BETA", size=20)
        assert store.get_by_id(55) is None

    def test_update_missing_returns_not_found(self, store):
        outcome = store.update(999, Widget(id=999, label="ghost"))
        assert outcome == NotFound(999)
        assert store.count() == 3

    def test_delete(self, store):
        assert store.delete(1) is True
        assert store.get_by_id(1) is None
        assert store.delete(1) is False
        assert store.delete(999) is False

    def test_returned_records_are_copies(self, store):
        record = store.get_by_id(1)
        record.label = "mutated"
        assert store.get_by_id(1).label == "alpha"

    def test_concurrent_creates_get_contiguous_ids(self, store):
        count = 200

        def create(i):
            return store.create(Widget(id=0, label=f"w{i}")).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(create, range(count)))

        assert len(set(ids)) == count
        assert sorted(ids) == list(range(8, 8 + count))
        assert store.count() == 3 + count

    def test_concurrent_delete_and_get(self, store):
        results = []

        def reader():
            for _ in range(500):
                record = store.get_by_id(2)
                results.append(record is None or record.label == "beta")

        thread = threading.Thread(target=reader)
        thread.start()
        store.delete(2)
        thread.join()

        assert all(results)
        assert store.get_by_id(2) is None
