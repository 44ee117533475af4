# src/study_planner/tasks/reminders.py

from __future__ import annotations

"""
Reminder evaluator.

A reminder is "due now" during a half-open trailing window after its instant:

    instant <= now < instant + window

The evaluator is stateless: polling twice inside the window returns the same task
twice. Callers that must not repeat themselves keep their own "already notified"
state (see task_scheduler.py). If the caller polls less often than the window, a
reminder can be missed entirely.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

from ..core.ports import TaskSource
from .task_models import Task
from .task_queries import tasks_of

DEFAULT_WINDOW = timedelta(minutes=5)


def to_local_naive(now: datetime) -> datetime:
    """Reminder instants are naive local times; bring an aware `now` onto that scale."""
    if now.tzinfo is None:
        return now
    return now.astimezone().replace(tzinfo=None)


def reminder_instant(task: Task) -> datetime | None:
    reminder_time = task.reminder_time
    if reminder_time is None:
        return None
    return datetime.combine(task.due_date, reminder_time)


def is_reminder_due(task: Task, now: datetime, *, window: timedelta = DEFAULT_WINDOW) -> bool:
    instant = reminder_instant(task)
    if instant is None:
        return False
    now = to_local_naive(now)
    return instant <= now < instant + window


def due_reminders(
    source: TaskSource | Iterable[Task],
    now: datetime,
    *,
    window: timedelta = DEFAULT_WINDOW,
) -> list[Task]:
    """Tasks whose reminder instant falls in (now - window, now], in store order."""
    if window <= timedelta(0):
        raise ValueError("window must be positive")
    now = to_local_naive(now)
    return [t for t in tasks_of(source) if is_reminder_due(t, now, window=window)]
