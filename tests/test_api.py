"""API tests for todo endpoints."""

import json
from dataclasses import replace
from pathlib import Path

from fastapi.testclient import TestClient
from pytest import raises

from todo_app.main import create_app
from todo_app.repositories.todo_store import StoreLoadError
from todo_app.settings import DEFAULT_CONTENT_SECURITY_POLICY, Settings


class TestTodoAPI:
    """Test suite for Todo API endpoints."""

    def test_get_todos_empty(self, client: TestClient) -> None:
        response = client.get("/api/todos")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_todo_success(self, client: TestClient, data_file: Path) -> None:
        response = client.post("/api/todos", json={"text": "Buy milk"})
        assert response.status_code == 201

        todo = response.json()
        assert set(todo) == {"id", "text", "completed", "createdAt"}
        assert todo["text"] == "Buy milk"
        assert todo["completed"] is False

        listed = client.get("/api/todos").json()
        assert [item for item in listed if item["text"] == "Buy milk"] == [todo]
        assert json.loads(data_file.read_text(encoding="utf-8")) == [todo]

    def test_create_todo_ignores_extra_fields(self, client: TestClient) -> None:
        response = client.post("/api/todos", json={"text": "Extra", "completed": True, "id": "mine"})
        assert response.status_code == 201
        assert response.json()["completed"] is False
        assert response.json()["id"] != "mine"

    def test_create_todo_requires_text(self, client: TestClient) -> None:
        for payload in ({}, {"text": ""}, {"description": "No text"}):
            response = client.post("/api/todos", json=payload)
            assert response.status_code == 400
            assert response.json() == {"message": "Text is required"}

        response = client.post("/api/todos")
        assert response.status_code == 400
        assert response.json() == {"message": "Text is required"}

        assert client.get("/api/todos").json() == []

    def test_create_todo_with_whitespace_text(self, client: TestClient) -> None:
        response = client.post("/api/todos", json={"text": "   "})
        assert response.status_code == 201
        assert response.json()["text"] == "   "

    def test_create_todo_invalid_body(self, client: TestClient) -> None:
        response = client.post("/api/todos", json={"text": 42})
        assert response.status_code == 400
        assert "message" in response.json()

        response = client.post(
            "/api/todos",
            content="{broken",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "message" in response.json()

    def test_get_todo_by_id(self, client: TestClient) -> None:
        todo_id = client.post("/api/todos", json={"text": "Test"}).json()["id"]

        response = client.get(f"/api/todos/{todo_id}")
        assert response.status_code == 200
        assert response.json()["id"] == todo_id

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        not_found = {"message": "Todo not found"}
        assert client.get("/api/todos/nonexistent-id").json() == not_found
        assert client.put("/api/todos/nonexistent-id", json={"completed": True}).status_code == 404
        response = client.delete("/api/todos/nonexistent-id")
        assert response.status_code == 404
        assert response.json() == not_found

    def test_update_todo(self, client: TestClient) -> None:
        created = client.post("/api/todos", json={"text": "Original"}).json()

        response = client.put(
            f"/api/todos/{created['id']}",
            json={"completed": True, "text": "Changed"},
        )
        assert response.status_code == 200
        assert response.json() == {**created, "completed": True}

        fetched = client.get(f"/api/todos/{created['id']}").json()
        assert fetched == {**created, "completed": True}

    def test_update_rejects_non_boolean(self, client: TestClient) -> None:
        todo_id = client.post("/api/todos", json={"text": "Strict"}).json()["id"]
        response = client.put(f"/api/todos/{todo_id}", json={"completed": "yes"})
        assert response.status_code == 400
        assert client.get(f"/api/todos/{todo_id}").json()["completed"] is False

    def test_delete_todo(self, client: TestClient) -> None:
        client.post("/api/todos", json={"text": "Keep"})
        created = client.post("/api/todos", json={"text": "To delete"}).json()

        response = client.delete(f"/api/todos/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Todo deleted", "todo": created}

        assert client.get(f"/api/todos/{created['id']}").status_code == 404
        assert len(client.get("/api/todos").json()) == 1

    def test_write_failure_is_500(self, settings: Settings, tmp_path: Path) -> None:
        app = create_app(settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            app.state.todo_store.path = tmp_path
            response = client.post("/api/todos", json={"text": "Unwritable"})
        assert response.status_code == 500


class TestApplication:
    """Startup, middleware and static client."""

    def test_startup_fails_without_data_file(self, settings: Settings, tmp_path: Path) -> None:
        broken = replace(settings, data_file=tmp_path / "missing.json")
        with raises(StoreLoadError):
            with TestClient(create_app(broken)):
                pass

    def test_existing_data_is_served(self, settings: Settings, data_file: Path) -> None:
        record = {"id": "seed", "text": "Seeded", "completed": True, "createdAt": "2024-01-01T00:00:00.000Z"}
        data_file.write_text(json.dumps([record]), encoding="utf-8")

        with TestClient(create_app(settings)) as client:
            assert client.get("/api/todos").json() == [record]
            assert client.get("/health").json() == {"status": "ok", "todos": 1}

    def test_content_security_policy_header(self, client: TestClient) -> None:
        response = client.get("/api/todos")
        assert response.headers["Content-Security-Policy"] == DEFAULT_CONTENT_SECURITY_POLICY

    def test_request_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/api/todos", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"
        assert client.get("/api/todos").headers["X-Request-ID"]

    def test_static_index_is_served(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "app.js" in response.text
        assert "Content-Security-Policy" in response.headers

    def test_missing_static_dir_disables_front_end(self, settings: Settings, tmp_path: Path) -> None:
        app = create_app(replace(settings, static_dir=tmp_path / "nowhere"))
        with TestClient(app) as client:
            assert client.get("/").status_code == 404
            assert client.get("/api/todos").status_code == 200
