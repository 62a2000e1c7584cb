"""Task entities, request and response shapes, and domain errors."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


class TaskError(Exception):
    """Base class for task domain errors."""

    default_message = "task error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class TaskNotFoundError(TaskError):
    """Raised when no task has the requested ID."""

    default_message = "task not found"


class InvalidTitleError(TaskError):
    """Raised when a task title is empty or only whitespace."""

    default_message = "title must be a non-empty string"


class InvalidTaskIDError(TaskError):
    """Raised when a task ID is empty or only whitespace."""

    default_message = "invalid task ID"


@dataclass(frozen=True)
class ErrorResponse:
    """Body returned to clients when a request fails."""

    error: str
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        body = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Task:
    """A task with a generated ID and creation/update timestamps."""

    id: str
    title: str
    description: str = ""
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def new(cls, title: str, description: str = "") -> "Task":
        """Create a task with a fresh UUID, trimmed text and equal timestamps."""
        now = _now()
        return cls(
            id=str(uuid.uuid4()),
            title=title.strip(),
            description=description.strip(),
            created_at=now,
            updated_at=now,
        )

    def validate(self) -> None:
        """Raise InvalidTitleError if the title is blank."""
        if not self.title.strip():
            raise InvalidTitleError()

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description:
            body["description"] = self.description
        body["created_at"] = self.created_at.isoformat()
        body["updated_at"] = self.updated_at.isoformat()
        return body


@dataclass(frozen=True)
class CreateTaskRequest:
    """Request body for creating a task."""

    title: str
    description: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "CreateTaskRequest":
        """Build a request from decoded JSON; raise ValueError if it is malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("request body must be a JSON object")
        title = _string_field(data, "title")
        description = _string_field(data, "description")
        if title == "":
            raise ValueError(
                "Key: 'CreateTaskRequest.Title' Error:Field validation for "
                "'Title' failed on the 'required' tag"
            )
        return cls(title=title, description=description)


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(
            f"cannot use a value of type {type(value).__name__} "
            f"for string field {key!r}"
        )
    return value


@dataclass
class TasksResponse:
    """Response listing tasks along with how many there are."""

    tasks: list[Task]
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [task.to_dict() for task in self.tasks], "count": self.count}