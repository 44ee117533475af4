# src/study_planner/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from ..core.ports import TaskRepository
from .task_errors import NotFoundError, StorageError, ValidationError
from .task_models import Task, validate_task
from .task_repo_memory import InMemoryTaskRepository

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered task collection + the global "reminders enabled" flag.

    Construct one per app (composition root) and pass it to whoever needs it.

    Thread-safety:
    - mutations are serialized with a lock
    - reads are served from an immutable tuple snapshot, no lock needed
    - the repository is saved before a new snapshot is published, so a failed save
      leaves the store unchanged
    """

    def __init__(
        self,
        repository: TaskRepository | None = None,
        *,
        reminders_enabled: bool = True,
    ) -> None:
        self._repo: TaskRepository = repository if repository is not None else InMemoryTaskRepository()
        self._lock = threading.Lock()

        self._tasks: tuple[Task, ...] = self._checked(self._repo.load())

        stored_flag = self._repo.load_reminders_enabled()
        self._reminders_enabled = bool(reminders_enabled if stored_flag is None else stored_flag)

        logger.info(
            "TaskStore ready total=%s reminders_enabled=%s",
            len(self._tasks),
            self._reminders_enabled,
        )

    # ---- low-level helpers ----

    @staticmethod
    def _checked(tasks: Iterable[Task]) -> tuple[Task, ...]:
        seen: set[str] = set()
        out: list[Task] = []
        for t in tasks:
            try:
                validate_task(t)
            except ValidationError as e:
                raise StorageError(f"repository returned an invalid task: {e}") from e
            if t.id in seen:
                raise StorageError(f"repository returned duplicate task id {t.id}")
            seen.add(t.id)
            out.append(t)
        return tuple(out)

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return -1

    def _publish(self, tasks: tuple[Task, ...]) -> None:
        # Caller holds self._lock.
        self._repo.save(tasks)
        self._tasks = tasks

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def list(self) -> list[Task]:
        """Current tasks in insertion order (a copy)."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def add(self, task: Task) -> Task:
        """
        Append a task.

        Raises ValidationError for an empty title or an id already in the store.
        """
        validate_task(task)
        with self._lock:
            if self._index_of(task.id) >= 0:
                raise ValidationError(f"duplicate task id {task.id}")
            self._publish(self._tasks + (task,))

        logger.debug("Task added id=%s due=%s reminder=%s", task.id, task.due_date, task.reminder_time)
        return task

    def update(self, task: Task) -> Task:
        """
        Replace the task with the same id, keeping its position.

        Raises NotFoundError if no task has that id.
        """
        validate_task(task)
        with self._lock:
            idx = self._index_of(task.id)
            if idx < 0:
                raise NotFoundError(task.id)
            self._publish(self._tasks[:idx] + (task,) + self._tasks[idx + 1 :])

        logger.debug("Task updated id=%s", task.id)
        return task

    def delete(self, task_id: str) -> bool:
        """
        Remove the task with this id.

        Idempotent: deleting an unknown id is a no-op. Returns True if a task was removed.
        """
        with self._lock:
            idx = self._index_of(task_id)
            if idx < 0:
                return False
            self._publish(self._tasks[:idx] + self._tasks[idx + 1 :])

        logger.debug("Task deleted id=%s", task_id)
        return True

    def get_reminders_enabled(self) -> bool:
        return self._reminders_enabled

    def set_reminders_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        with self._lock:
            self._repo.save_reminders_enabled(enabled)
            self._reminders_enabled = enabled
        logger.info("Reminders %s", "enabled" if enabled else "disabled")
