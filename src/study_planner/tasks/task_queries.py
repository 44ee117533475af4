# src/study_planner/tasks/task_queries.py

from __future__ import annotations

"""
Date queries over the task list.

All queries are linear scans in store order. Matching is civil-date equality on
(year, month, day); any time-of-day on the query argument is ignored.
"""

from collections.abc import Iterable
from datetime import date, datetime

from ..core.ports import TaskSource
from .task_models import Task


def tasks_of(source: TaskSource | Iterable[Task]) -> list[Task]:
    lister = getattr(source, "list", None)
    if callable(lister):
        return lister()
    return list(source)  # type: ignore[arg-type]


def civil_date(day: date | datetime) -> date:
    if isinstance(day, datetime):
        return day.date()
    return day


def tasks_on(source: TaskSource | Iterable[Task], day: date | datetime) -> list[Task]:
    target = civil_date(day)
    return [t for t in tasks_of(source) if t.due_date == target]


def tasks_today(source: TaskSource | Iterable[Task], now: date | datetime) -> list[Task]:
    """Tasks due on the caller's current date (`now` comes from the caller's clock)."""
    return tasks_on(source, now)


def has_task_on(source: TaskSource | Iterable[Task], day: date | datetime) -> bool:
    target = civil_date(day)
    return any(t.due_date == target for t in tasks_of(source))


def days_with_tasks(source: TaskSource | Iterable[Task], year: int, month: int) -> list[int]:
    """
    Day-of-month numbers in (year, month) that have at least one task, ascending.

    Used for calendar highlighting; raises ValueError for an invalid month.
    """
    if not 1 <= int(month) <= 12:
        raise ValueError(f"invalid month {month}")
    days = {
        t.due_date.day
        for t in tasks_of(source)
        if t.due_date.year == year and t.due_date.month == month
    }
    return sorted(days)
