import json
import logging
import os

from gilded_desk.infra.store import FlatRecordStore


def test_load_missing_slot_initialises_empty_list(store):
    assert not os.path.exists(store.slot_path("notes"))

    assert store.load("notes") == []

    # Slot is created on disk with an empty array
    with open(store.slot_path("notes")) as f:
        assert json.load(f) == []


def test_save_overwrites_whole_slot(store):
    store.save("tasks", [{"id": 1}, {"id": 2}])
    store.save("tasks", [{"id": 3}])

    assert store.load("tasks") == [{"id": 3}]


def test_round_trip_preserves_order_and_fields(store):
    records = [
        {"id": 2, "title": "second", "extra": {"nested": [1, 2]}},
        {"id": 1, "title": "first", "completed": False, "note": None},
    ]
    store.save("notes", records)

    store.save("notes", store.load("notes"))

    assert store.load("notes") == records


def test_corrupt_slot_is_treated_as_empty_and_logged(store, caplog):
    os.makedirs(store.data_dir, exist_ok=True)
    with open(store.slot_path("notes"), "w") as f:
        f.write("{not json")

    with caplog.at_level(logging.ERROR, logger="gilded_desk.infra.store"):
        assert store.load("notes") == []

    assert any("notes" in record.getMessage() for record in caplog.records)


def test_non_list_slot_is_treated_as_empty(store):
    os.makedirs(store.data_dir, exist_ok=True)
    with open(store.slot_path("files"), "w") as f:
        json.dump({"id": 1}, f)

    assert store.load("files") == []


def test_save_creates_data_directory(tmp_path):
    store = FlatRecordStore(str(tmp_path / "nested" / "data"))

    store.save("users", [{"email": "a@b.com"}])

    assert store.load("users") == [{"email": "a@b.com"}]


def test_save_is_visible_to_a_fresh_store(store):
    store.save("notes", [{"id": 7}])

    assert FlatRecordStore(store.data_dir).load("notes") == [{"id": 7}]
