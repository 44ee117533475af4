# src/study_planner/tasks/task_repo_memory.py

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

from .task_errors import StorageError, TaskError
from .task_models import Task, task_from_dict, task_to_dict

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """
    Process-lifetime TaskRepository.

    Tasks are kept in their serialized (dict) form, so the same codec is used as for
    any other storage or API boundary. Nothing survives a restart.
    """

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        *,
        reminders_enabled: bool | None = None,
    ) -> None:
        self._records: list[dict[str, Any]] = copy.deepcopy(records or [])
        self._reminders_enabled = reminders_enabled

    def load(self) -> list[Task]:
        try:
            return [task_from_dict(r) for r in self._records]
        except TaskError as e:
            raise StorageError(f"failed to load tasks: {e}") from e

    def save(self, tasks: Sequence[Task]) -> None:
        try:
            self._records = [task_to_dict(t) for t in tasks]
        except (TaskError, AttributeError, TypeError) as e:
            raise StorageError(f"failed to save tasks: {e}") from e
        logger.debug("InMemoryTaskRepository saved %d tasks", len(self._records))

    def load_reminders_enabled(self) -> bool | None:
        return self._reminders_enabled

    def save_reminders_enabled(self, enabled: bool) -> None:
        self._reminders_enabled = bool(enabled)

    def snapshot(self) -> list[dict[str, Any]]:
        """Serialized records as currently stored (deep copy)."""
        return copy.deepcopy(self._records)
