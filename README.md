# taskapi

A small JSON HTTP API, built on Flask, for creating and reading tasks. Each
task gets a generated UUID plus creation and update timestamps.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
taskapi
```

This starts Flask's built-in server on all interfaces (`0.0.0.0`). The
command takes no options apart from `--help`. It reads its settings from the
environment; an unset or empty variable falls back to its default:

| Variable  | Default       | Meaning                                                              |
|-----------|---------------|----------------------------------------------------------------------|
| `PORT`    | `8080`        | Port to listen on                                                    |
| `APP_ENV` | `development` | `production` gives mode `release`, `test` gives `test`, else `debug` |

In mode `test` the Flask app has `TESTING` switched on. If the port is not a
number or the server cannot bind, the failure is logged and the command exits
with status 1.

## Endpoints

All routes are under `/api/v1`.

### `POST /api/v1/tasks`

Creates a task.

```json
{"title": "Write report", "description": "Quarterly numbers"}
```

`title` is required and must not be blank; both fields must be strings when
given. Leading and trailing whitespace is trimmed from both fields. The reply
is `201 Created` with the new task (`description` is left out when empty):

```json
{
  "id": "3f1c…",
  "title": "Write report",
  "description": "Quarterly numbers",
  "created_at": "…",
  "updated_at": "…"
}
```

An empty or malformed body, a body that is not a JSON object, a field of the
wrong type, or a missing or empty `title` gets `400` with
`"error": "Invalid request body"`. A title that is only whitespace gets `400`
with `"error": "Validation failed"`.

### `GET /api/v1/tasks`

Lists every task:

```json
{"tasks": [...], "count": 2}
```

### `GET /api/v1/tasks/<id>`

Returns one task. An unknown id gets `404` with `"error": "Task not found"`.

Every error reply has this shape:

```json
{"error": "Task not found", "message": "task not found"}
```

An unexpected exception inside a request is logged and answered with `500`
and `"error": "Internal server error"`.

CORS is open to all origins, with credentials allowed; cross-origin `OPTIONS`
preflight requests are answered with `204`. Every request is written as one
access line to standard output:

```
[2024-01-02 15:04:05] GET /api/v1/tasks 200 1.25ms 127.0.0.1
```

## Using it from Python

```python
from taskapi.config import Config
from taskapi.app import create_app

app = create_app(Config.load({"APP_ENV": "test"}))
client = app.test_client()
resp = client.post("/api/v1/tasks", json={"title": "Buy milk"})
print(resp.status_code, resp.get_json())
```

The layers can also be used on their own:

```python
from taskapi.models import CreateTaskRequest
from taskapi.repository import InMemoryTaskRepository
from taskapi.services import TaskService

service = TaskService(InMemoryTaskRepository())
task = service.create_task(CreateTaskRequest.from_json({"title": "Buy milk"}))
print(service.get_task_by_id(task.id).title)
```

Modules:

- `taskapi.models` — `Task`, `CreateTaskRequest`, `TasksResponse`,
  `ErrorResponse` and the errors `TaskError`, `TaskNotFoundError`,
  `InvalidTitleError`, `InvalidTaskIDError`.
- `taskapi.repository` — the `TaskRepository` interface and the thread-safe
  `InMemoryTaskRepository`, which also has `update` and `delete`.
- `taskapi.services` — `TaskService`.
- `taskapi.config` — `Config.load(environ)`, `is_development()`,
  `is_production()`.
- `taskapi.handlers` — `TaskHandler`, the Flask views.
- `taskapi.middleware` — `install_cors`, `install_error_handler`,
  `install_logger`, `install_structured_logger` (key/value request logging
  through the `taskapi` logger, not installed by `create_app`) and
  `format_access_line`.
- `taskapi.app` — `setup_routes`, `create_app` and `main`.

## What it does not do

- Tasks live only in memory and are lost when the server stops; there is no
  persistent storage.
- The HTTP API has no routes to update or delete tasks, even though the
  repository supports both.
- There is no authentication, and the server is Flask's development server,
  not a production WSGI server.