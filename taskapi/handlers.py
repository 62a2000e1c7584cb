"""HTTP handlers for the task endpoints."""

from __future__ import annotations

import json
from typing import Any

from flask import jsonify, request

from taskapi.models import (
    CreateTaskRequest,
    ErrorResponse,
    InvalidTaskIDError,
    InvalidTitleError,
    TaskError,
    TaskNotFoundError,
)
from taskapi.services import TaskService


def _error(status: int, error: str, message: str):
    return jsonify(ErrorResponse(error, message).to_dict()), status


def _decode_json(data: bytes) -> Any:
    if not data.strip():
        raise ValueError("EOF")
    return json.loads(data)


class TaskHandler:
    """Flask views that expose a TaskService over HTTP."""

    def __init__(self, service: TaskService) -> None:
        self._service = service

    def create_task(self):
        """Handle POST of a new task."""
        try:
            create_request = CreateTaskRequest.from_json(_decode_json(request.get_data()))
        except ValueError as exc:
            return _error(400, "Invalid request body", str(exc))

        try:
            task = self._service.create_task(create_request)
        except InvalidTitleError as exc:
            return _error(400, "Validation failed", str(exc))
        except TaskError as exc:
            return _error(500, "Internal server error", str(exc))

        return jsonify(task.to_dict()), 201

    def get_all_tasks(self):
        """Handle GET of every task."""
        try:
            response = self._service.get_all_tasks()
        except TaskError as exc:
            return _error(500, "Failed to retrieve tasks", str(exc))
        return jsonify(response.to_dict()), 200

    def get_task_by_id(self, task_id: str):
        """Handle GET of one task by its ID."""
        try:
            task = self._service.get_task_by_id(task_id)
        except TaskNotFoundError as exc:
            return _error(404, "Task not found", str(exc))
        except InvalidTaskIDError as exc:
            return _error(400, "Invalid request", str(exc))
        except TaskError as exc:
            return _error(500, "Internal server error", str(exc))
        return jsonify(task.to_dict()), 200