import pytest


def test_files_stored_as_is_in_insertion_order(client):
    first = {"id": 2, "name": "b.pdf", "size": 2048, "type": "application/pdf", "uploadedAt": "2024-01-02T00:00:00.000Z"}
    second = {"id": 1, "name": "a.png", "size": 10, "type": "image/png", "uploadedAt": "2024-01-03T00:00:00.000Z", "tag": "x"}

    r = client.post("/api/files", json=first)
    assert r.status_code == 201
    assert r.json() == first
    client.post("/api/files", json=second)

    assert client.get("/api/files").json() == [first, second]


def test_files_accept_records_without_validation(client):
    odd = {"name": "", "size": "not a number"}

    r = client.post("/api/files", json=odd)

    assert r.status_code == 201
    assert client.get("/api/files").json() == [odd]


def test_delete_file_idempotent(client, store):
    client.post("/api/files", json={"id": 1, "name": "a"})
    client.post("/api/files", json={"id": 2, "name": "b"})

    r = client.delete("/api/files/1")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    after_first = store.load("files")

    r2 = client.delete("/api/files/1")
    assert r2.status_code == 200
    assert r2.json() == {"success": True}
    assert store.load("files") == after_first == [{"id": 2, "name": "b"}]


@pytest.mark.parametrize("file_id", ["abc", "NaN", "-"])
def test_delete_file_with_non_numeric_id_is_noop(client, store, file_id):
    client.post("/api/files", json={"id": 1, "name": "a"})
    client.post("/api/files", json={"name": "no id"})

    r = client.delete(f"/api/files/{file_id}")

    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert store.load("files") == [{"id": 1, "name": "a"}, {"name": "no id"}]


def test_delete_file_reads_leading_digits(client, store):
    client.post("/api/files", json={"id": 12, "name": "a"})

    r = client.delete("/api/files/12abc")

    assert r.status_code == 200
    assert store.load("files") == []
