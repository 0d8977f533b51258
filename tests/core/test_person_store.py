"""Person Store - CRUD semantics, no partial writes, concurrency.

Tests cover:
    - NotFound for absent ids on get/update/delete, list unaffected
    - Conflict on duplicate id leaves the store unchanged
    - insert/get/list/delete round trip
    - update forces the stored id to the path id
    - Concurrent readers see identical snapshots; writes are serialized
    - A poisoned guard surfaces as LockError
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from person_api.core.errors import Conflict, LockError, NotFound
from person_api.core.person import Person, create_person_collection
from person_api.core.person_store import PersonStore


def test_list_returns_seed_in_insertion_order(store):
    assert store.list() == create_person_collection()


def test_list_returns_a_copy(store):
    snapshot = store.list()
    snapshot.clear()
    assert len(store.list()) == 4


@pytest.mark.parametrize("missing_id", [0, 42, 2**32 - 1])
def test_absent_id_is_not_found_everywhere(store, ada, missing_id):
    before = store.list()
    with pytest.raises(NotFound):
        store.get(missing_id)
    with pytest.raises(NotFound):
        store.update(missing_id, ada)
    with pytest.raises(NotFound):
        store.delete(missing_id)
    assert store.list() == before


def test_insert_duplicate_is_conflict_and_store_unchanged(store):
    before = store.list()
    clash = Person(id=1, name="Impostor", age=1, date=date(2020, 2, 2))
    with pytest.raises(Conflict):
        store.insert(clash)
    assert store.list() == before
    assert store.get(1).name == "Elijah"


def test_insert_then_get_and_list(store, ada):
    assert store.insert(ada) == ada
    assert store.get(99) == ada
    assert [p for p in store.list() if p.id == 99] == [ada]
    assert store.list()[-1] == ada


def test_delete_then_get_is_not_found(store, ada):
    store.insert(ada)
    store.delete(99)
    with pytest.raises(NotFound):
        store.get(99)
    assert len(store) == 4


def test_update_replaces_fields_and_keeps_path_id(store, ada):
    store.insert(ada)
    changed = Person(id=12345, name="Ada L.", age=36, date=date(1815, 12, 10))
    stored = store.update(99, changed)
    assert stored == changed.with_id(99)
    assert store.get(99) == stored
    with pytest.raises(NotFound):
        store.get(12345)


def test_taxonomy_errors_do_not_poison_the_guard(store, ada):
    with pytest.raises(NotFound):
        store.delete(404)
    with pytest.raises(Conflict):
        store.insert(store.get(1))
    store.insert(ada)
    assert store.get(99) == ada


def test_seed_with_duplicate_ids_is_rejected(ada):
    with pytest.raises(Conflict):
        PersonStore([ada, ada])


def test_poisoned_guard_surfaces_as_lock_error(store, ada):
    with pytest.raises(RuntimeError):
        with store._guard.write():
            raise RuntimeError("writer died mid-update")

    with pytest.raises(LockError, match="Poison error Read Lock was poisoned"):
        store.list()
    with pytest.raises(LockError, match="Read Lock was poisoned"):
        store.get(1)
    with pytest.raises(LockError, match="Poison error Write Lock was poisoned"):
        store.insert(ada)


def test_concurrent_reads_see_identical_snapshots(store):
    with ThreadPoolExecutor(max_workers=16) as pool:
        snapshots = list(pool.map(lambda _: store.list(), range(200)))
        persons = list(pool.map(lambda _: store.get(2), range(200)))
    assert all(s == snapshots[0] for s in snapshots)
    assert len(set(persons)) == 1


def test_concurrent_writes_are_serialized(store):
    def insert(i):
        return store.insert(
            Person(id=1000 + i, name=f"P{i}", age=i % 256, date=date(2000, 1, 1)),
        )

    def read(_):
        snapshot = store.list()
        ids = [p.id for p in snapshot]
        assert len(ids) == len(set(ids))
        return len(snapshot)

    with ThreadPoolExecutor(max_workers=16) as pool:
        writes = [pool.submit(insert, i) for i in range(100)]
        reads = [pool.submit(read, i) for i in range(100)]
        for f in writes + reads:
            f.result()

    assert len(store) == 104
    assert all(4 <= f.result() <= 104 for f in reads)


def test_concurrent_duplicate_inserts_admit_exactly_one(store, ada):
    def attempt(_):
        try:
            store.insert(ada)
            return "created"
        except Conflict:
            return "conflict"

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(attempt, range(32)))

    assert outcomes.count("created") == 1
    assert outcomes.count("conflict") == 31
