# src/study_planner/tasks/task_errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task subsystem errors."""


class ValidationError(TaskError, ValueError):
    """Rejected input: empty title, duplicate id, malformed serialized task."""


class NotFoundError(TaskError, LookupError):
    """No task with the given id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id


class StorageError(TaskError, RuntimeError):
    """A repository failed to load or save tasks."""
