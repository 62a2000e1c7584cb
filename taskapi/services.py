"""Business logic for tasks."""

from __future__ import annotations

from taskapi.models import (
    CreateTaskRequest,
    InvalidTaskIDError,
    InvalidTitleError,
    Task,
    TasksResponse,
)
from taskapi.repository import TaskRepository


class TaskService:
    """Creates and retrieves tasks through a repository."""

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    def create_task(self, request: CreateTaskRequest) -> Task:
        """Validate the request, store a new task and return it."""
        if not request.title.strip():
            raise InvalidTitleError()
        task = Task.new(request.title, request.description)
        task.validate()
        self._repo.create(task)
        return task

    def get_all_tasks(self) -> TasksResponse:
        tasks = self._repo.get_all()
        return TasksResponse(tasks=tasks, count=len(tasks))

    def get_task_by_id(self, task_id: str) -> Task:
        """Return the task with this ID; raise on a blank or unknown ID."""
        if not task_id.strip():
            raise InvalidTaskIDError()
        return self._repo.get_by_id(task_id)