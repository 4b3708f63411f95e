import json

import pytest

from gilded_desk.exceptions import NotFoundError, ValidationError
from gilded_desk.features.tasks.repository import TaskRepository
from gilded_desk.features.tasks.service import TaskService


@pytest.fixture
def tasks(store):
    return TaskService(TaskRepository(store))


@pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
def test_blank_text_rejected_identically(tasks, text):
    with pytest.raises(ValidationError) as exc:
        tasks.create_task(text)

    assert exc.value.message == "Task text is required"


def test_create_defaults(tasks):
    task = tasks.create_task(" write report ")

    assert task.text == "write report"
    assert task.completed is False
    assert task.id > 0


def test_create_honours_client_supplied_fields(tasks):
    task = tasks.create_task("offline", id=42, completed=True, created_at="2024-03-01T10:00:00.000Z")

    assert task.id == 42
    assert task.completed is True
    assert task.created_at == "2024-03-01T10:00:00.000Z"


def test_resending_same_id_replaces_instead_of_duplicating(tasks, store):
    tasks.create_task("draft", id=42)
    tasks.create_task("final", id=42, completed=True)

    stored = store.load("tasks")
    assert len(stored) == 1
    assert stored[0]["text"] == "final"
    assert stored[0]["completed"] is True


def test_list_newest_first(tasks):
    tasks.create_task("a", id=1, created_at="2024-01-01T00:00:00.000Z")
    tasks.create_task("b", id=2, created_at="2024-02-01T00:00:00.000Z")
    tasks.create_task("c", id=3, created_at="2024-01-15T00:00:00.000Z")

    assert [t.id for t in tasks.list_tasks()] == [2, 3, 1]


def test_update_unknown_id_leaves_collection_unchanged(tasks, store):
    tasks.create_task("keep", id=1)
    with open(store.slot_path("tasks")) as f:
        before = f.read()

    with pytest.raises(NotFoundError):
        tasks.update_task(999, "nope", True)

    with open(store.slot_path("tasks")) as f:
        assert f.read() == before


def test_update_replaces_mutable_fields(tasks, store):
    tasks.create_task("old", id=1, created_at="2024-01-01T00:00:00.000Z")

    updated = tasks.update_task(1, "new", True)

    assert updated.text == "new"
    assert updated.completed is True
    assert updated.created_at == "2024-01-01T00:00:00.000Z"
    assert store.load("tasks")[0]["text"] == "new"


def test_remove_is_idempotent(tasks, store):
    tasks.create_task("a", id=1)
    tasks.create_task("b", id=2)

    tasks.remove_task(1)
    after_first = store.load("tasks")
    tasks.remove_task(1)

    assert store.load("tasks") == after_first
    assert [t["id"] for t in after_first] == [2]


# -------- API --------
def test_tasks_api_crud(client):
    r = client.post("/api/tasks", json={"text": "Buy milk"})
    assert r.status_code == 201
    task = r.json()
    assert task["completed"] is False

    r2 = client.put(f"/api/tasks/{task['id']}", json={"text": "Buy oat milk", "completed": True})
    assert r2.status_code == 200
    assert r2.json()["text"] == "Buy oat milk"
    assert r2.json()["completed"] is True

    listed = client.get("/api/tasks").json()
    assert len(listed) == 1
    assert listed[0]["completed"] is True

    for _ in range(2):
        r3 = client.delete(f"/api/tasks/{task['id']}")
        assert r3.status_code == 200
        assert r3.json() == {"success": True}

    assert client.get("/api/tasks").json() == []


def test_tasks_api_delete_non_numeric_id_is_noop(client, store):
    client.post("/api/tasks", json={"text": "keep", "id": 7})

    r = client.delete("/api/tasks/abc")

    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert [t["id"] for t in store.load("tasks")] == [7]


def test_tasks_api_errors(client):
    r = client.post("/api/tasks", json={"text": "   "})
    assert r.status_code == 400
    assert r.json() == {"error": "Task text is required"}

    r2 = client.put("/api/tasks/12345", json={"text": "x", "completed": False})
    assert r2.status_code == 404
    assert r2.json() == {"error": "Task not found"}


def test_tasks_api_offline_task_round_trip(client):
    body = {"id": 1700000000000, "text": "made offline", "completed": True, "createdAt": "2023-11-14T22:13:20.000Z"}

    r = client.post("/api/tasks", json=body)

    assert r.status_code == 201
    assert r.json() == body


def test_todos_alias_shares_collection(client):
    client.post("/api/todos", json={"text": "via alias", "id": 5})

    assert [t["id"] for t in client.get("/api/tasks").json()] == [5]


def test_task_ids_survive_json_storage(client, store):
    client.post("/api/tasks", json={"text": "a"})

    with open(store.slot_path("tasks")) as f:
        stored = json.load(f)
    assert isinstance(stored[0]["id"], int)
