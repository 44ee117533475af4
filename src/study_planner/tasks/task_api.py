# src/study_planner/tasks/task_api.py

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime, time
from typing import Any

from .task_errors import NotFoundError, ValidationError
from .task_models import Task, new_task_id, reminder_from_time
from .task_store import TaskStore

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def create_task(
    store: TaskStore,
    *,
    title: str,
    due_date: date | datetime,
    description: str | None = None,
    reminder_time: time | None = None,
) -> Task:
    """
    Convenience helper: build a Task with a fresh id and add it to the store.

    reminder_time=None means "no reminder".
    """
    task = Task(
        id=new_task_id(),
        title=(title or "").strip(),
        due_date=due_date,
        description=description.strip() if description else None,
        reminder=reminder_from_time(reminder_time),
    )
    return store.add(task)


def edit_task(
    store: TaskStore,
    task_id: str,
    *,
    title: str = _UNSET,
    due_date: date | datetime = _UNSET,
    description: str | None = _UNSET,
    reminder_time: time | None = _UNSET,
) -> Task:
    """
    Change selected fields of an existing task. Omitted fields are kept;
    reminder_time=None clears the reminder.
    """
    current = store.get(task_id)
    if current is None:
        raise NotFoundError(task_id)

    changes: dict[str, Any] = {}
    if title is not _UNSET:
        changes["title"] = (title or "").strip()
    if due_date is not _UNSET:
        if due_date is None:
            raise ValidationError("due date is required")
        changes["due_date"] = due_date
    if description is not _UNSET:
        changes["description"] = description.strip() if description else None
    if reminder_time is not _UNSET:
        changes["reminder"] = reminder_from_time(reminder_time)

    if not changes:
        return current

    updated = dataclasses.replace(current, **changes)
    logger.debug("Editing task id=%s fields=%s", task_id, sorted(changes))
    return store.update(updated)


def toggle_reminders(store: TaskStore, enabled: bool | None = None) -> bool:
    """Set the global reminders flag (or flip it when enabled is None). Returns the new value."""
    new_value = (not store.get_reminders_enabled()) if enabled is None else bool(enabled)
    store.set_reminders_enabled(new_value)
    return new_value
