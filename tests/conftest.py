# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from study_planner.core.state import AppState
from study_planner.tasks.task_repo_memory import InMemoryTaskRepository
from study_planner.tasks.task_store import TaskStore

from .fakes import FixedClock

FIXED_NOW = datetime(2024, 5, 1, 9, 3)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="study-planner-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        console_enabled=False,
        reminders_enabled=True,
        scheduler_enabled=False,
        reminder_window_minutes=5,
        reminder_poll_seconds=1.0,
    )


@pytest.fixture()
def repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def store(repo: InMemoryTaskRepository) -> TaskStore:
    return TaskStore(repo)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FixedClock) -> AppState:
    """AppState wired with a real in-memory TaskStore and a fixed clock."""
    return AppState(settings=settings, task_store=store, clock=clock)

