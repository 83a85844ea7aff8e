import pytest

from roster.errors import DraftValidationError, RecordNotFound
from roster.schemas import StudentFields


def test_add_appends_in_order(store, make_record):
    first = store.add(make_record(name="Ann"))
    second = store.add(make_record(name="Bob", email="bob@example.com"))

    assert [r.id for r in store.list()] == [first.id, second.id]
    assert store.count() == 2


def test_add_rejects_invalid_record(store, make_record):
    with pytest.raises(DraftValidationError):
        store.add(make_record(email="not-an-email"))
    assert store.list() == []


def test_update_keeps_id_and_position(store, make_record):
    a = store.add(make_record(name="Ann"))
    b = store.add(make_record(name="Bob", email="bob@example.com"))
    c = store.add(make_record(name="Cid", email="cid@example.com"))

    updated = store.update(b.id, StudentFields(name="Bobby", email="bobby@example.com", id_number="9"))

    assert updated.id == b.id
    records = store.list()
    assert [r.id for r in records] == [a.id, b.id, c.id]
    assert records[1].name == "Bobby"
    assert records[1].email == "bobby@example.com"


def test_update_unknown_id(store, make_record):
    store.add(make_record())
    with pytest.raises(RecordNotFound):
        store.update("missing", StudentFields(name="X", email="x@example.com", id_number="1"))


def test_remove_is_idempotent(store, make_record):
    a = store.add(make_record(name="Ann"))
    b = store.add(make_record(name="Bob", email="bob@example.com"))

    before = store.list()
    assert store.remove("missing") is False
    assert store.list() == before

    assert store.remove(a.id) is True
    assert store.remove(a.id) is False
    assert [r.id for r in store.list()] == [b.id]


def test_list_returns_snapshot(store, make_record):
    record = store.add(make_record())
    snapshot = store.list()
    store.remove(record.id)
    assert len(snapshot) == 1
    assert store.list() == []


def test_get(store, make_record):
    record = store.add(make_record())
    assert store.get(record.id) == record
    assert store.get("missing") is None


def test_positions_after_delete_stay_ordered(store, make_record):
    a = store.add(make_record(name="Ann"))
    b = store.add(make_record(name="Bob", email="bob@example.com"))
    store.remove(b.id)
    c = store.add(make_record(name="Cid", email="cid@example.com"))
    assert [r.id for r in store.list()] == [a.id, c.id]
