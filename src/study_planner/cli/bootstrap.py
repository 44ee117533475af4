# src/study_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the repository and TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepository
from ..core.state import AppState
from ..tasks.task_repo_memory import InMemoryTaskRepository
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, repository: TaskRepository | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Tasks live in memory only: nothing is written to disk and nothing survives a restart.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if repository is None:
        repository = InMemoryTaskRepository()

    store = TaskStore(repository, reminders_enabled=settings.reminders_enabled)
    return AppState(settings=settings, task_store=store)
