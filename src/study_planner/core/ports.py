# src/study_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and notification swappable and makes testing easier.
"""

from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepository(Protocol):
    """
    Persistence collaborator of the TaskStore.

    The store calls load()/load_reminders_enabled() once at construction and
    save()/save_reminders_enabled() after every successful mutation.
    Implementations translate their own failures into StorageError.
    """

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...

    def load_reminders_enabled(self) -> bool | None: ...
    def save_reminders_enabled(self, enabled: bool) -> None: ...


class TaskSource(Protocol):
    """Anything that can hand out the current ordered task list (the TaskStore)."""

    def list(self) -> list[Task]: ...


@dataclass(slots=True, frozen=True)
class ReminderDue:
    """A reminder the scheduler wants surfaced to the user."""

    task: Task
    reminder_at: datetime


class ReminderNotifier(Protocol):
    """
    Host-side port: how the reminder scheduler surfaces a due reminder.

    The host decides what "notify" means (console line, dialog, push, ...).
    """

    def notify(self, reminder: ReminderDue) -> Awaitable[None]: ...
