"""Storage for tasks."""

from __future__ import annotations

import dataclasses
import threading
from abc import ABC, abstractmethod

from taskapi.models import Task, TaskNotFoundError


class TaskRepository(ABC):
    """Contract for task storage."""

    @abstractmethod
    def create(self, task: Task) -> None:
        """Store a task."""

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Return copies of all stored tasks."""

    @abstractmethod
    def get_by_id(self, task_id: str) -> Task:
        """Return a copy of the task with this ID or raise TaskNotFoundError."""

    @abstractmethod
    def update(self, task: Task) -> None:
        """Replace an existing task or raise TaskNotFoundError."""

    @abstractmethod
    def delete(self, task_id: str) -> None:
        """Remove a task or raise TaskNotFoundError."""


class InMemoryTaskRepository(TaskRepository):
    """Thread-safe task storage held in a dictionary."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.RLock()

    def create(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task

    def get_all(self) -> list[Task]:
        with self._lock:
            return [dataclasses.replace(task) for task in self._tasks.values()]

    def get_by_id(self, task_id: str) -> Task:
        with self._lock:
            try:
                task = self._tasks[task_id]
            except KeyError:
                raise TaskNotFoundError() from None
            return dataclasses.replace(task)

    def update(self, task: Task) -> None:
        with self._lock:
            if task.id not in self._tasks:
                raise TaskNotFoundError()
            self._tasks[task.id] = task

    def delete(self, task_id: str) -> None:
        with self._lock:
            try:
                del self._tasks[task_id]
            except KeyError:
                raise TaskNotFoundError() from None