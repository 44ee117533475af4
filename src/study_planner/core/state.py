# src/study_planner/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """Everything a connector/command needs, wired once in cli/bootstrap.py."""

    # Settings object (config.Settings in the app, a SimpleNamespace in tests).
    settings: Any
    task_store: TaskStore

    # Wall clock for "today" / "due now"; injectable for tests.
    clock: Callable[[], datetime] = field(default=datetime.now)
