import pytest
from flask import Flask

from taskapi.handlers import TaskHandler
from taskapi.models import InvalidTaskIDError, InvalidTitleError, TaskError, TaskNotFoundError
from taskapi.repository import InMemoryTaskRepository, TaskRepository
from taskapi.services import TaskService


def _client(repo):
    app = Flask(__name__)
    handler = TaskHandler(TaskService(repo))
    app.add_url_rule("/tasks", "create", handler.create_task, methods=["POST"])
    app.add_url_rule("/tasks", "list", handler.get_all_tasks, methods=["GET"])
    app.add_url_rule("/tasks/<task_id>", "get", handler.get_task_by_id, methods=["GET"])
    return app.test_client()


@pytest.fixture
def client():
    return _client(InMemoryTaskRepository())


class _FailingRepository(TaskRepository):
    def create(self, task):
        raise TaskError("storage unavailable")

    def get_all(self):
        raise TaskError("storage unavailable")

    def get_by_id(self, task_id):
        raise TaskError("storage unavailable")

    def update(self, task):
        raise TaskError("storage unavailable")

    def delete(self, task_id):
        raise TaskError("storage unavailable")


def test_create_task_trims_and_returns_201(client):
    resp = client.post("/tasks", json={"title": "  Write report ", "description": " notes "})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["title"] == "Write report"
    assert body["description"] == "notes"
    assert body["created_at"] == body["updated_at"]


def test_created_task_can_be_fetched(client):
    created = client.post("/tasks", json={"title": "Write report"}).get_json()
    resp = client.get(f"/tasks/{created['id']}")
    assert resp.status_code == 200
    assert resp.get_json() == created
    assert "description" not in created


def test_list_counts_tasks(client):
    assert client.get("/tasks").get_json() == {"tasks": [], "count": 0}
    client.post("/tasks", json={"title": "a"})
    client.post("/tasks", json={"title": "b"})
    body = client.get("/tasks").get_json()
    assert body["count"] == 2
    assert sorted(task["title"] for task in body["tasks"]) == ["a", "b"]


def test_missing_title_is_invalid_body(client):
    resp = client.post("/tasks", json={"description": "x"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid request body"


def test_malformed_json_is_invalid_body(client):
    resp = client.post("/tasks", data=b"{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid request body"


def test_empty_body_is_invalid_body(client):
    resp = client.post("/tasks", data=b"", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid request body", "message": "EOF"}


def test_blank_title_fails_validation(client):
    resp = client.post("/tasks", json={"title": "   "})
    assert resp.status_code == 400
    assert resp.get_json() == {
        "error": "Validation failed",
        "message": str(InvalidTitleError()),
    }


def test_unknown_id_is_404(client):
    resp = client.get("/tasks/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Task not found", "message": str(TaskNotFoundError())}


def test_blank_id_is_400(client):
    resp = client.get("/tasks/%20")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid request", "message": str(InvalidTaskIDError())}


def test_storage_failure_on_create_is_500():
    resp = _client(_FailingRepository()).post("/tasks", json={"title": "a"})
    assert resp.status_code == 500
    assert resp.get_json() == {
        "error": "Internal server error",
        "message": "storage unavailable",
    }


def test_storage_failure_on_list_is_500():
    resp = _client(_FailingRepository()).get("/tasks")
    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Failed to retrieve tasks"