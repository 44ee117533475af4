# src/study_planner/tasks/task_models.py

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from .task_errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class NoReminder:
    """The task has no reminder."""


@dataclass(slots=True, frozen=True)
class ReminderAt:
    """Remind on the task's due date at `at` (hour/minute precision)."""

    at: time

    def __post_init__(self) -> None:
        # Seconds and tzinfo never take part in reminder matching.
        object.__setattr__(self, "at", time(self.at.hour, self.at.minute))


Reminder = NoReminder | ReminderAt

NO_REMINDER = NoReminder()


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True, frozen=True)
class Task:
    id: str
    title: str
    due_date: date
    description: str | None = None
    reminder: Reminder = NO_REMINDER

    def __post_init__(self) -> None:
        # datetime is a date subclass but never compares equal to one.
        if isinstance(self.due_date, datetime):
            object.__setattr__(self, "due_date", self.due_date.date())
        if self.description is not None and not self.description.strip():
            object.__setattr__(self, "description", None)

    @property
    def reminder_enabled(self) -> bool:
        return isinstance(self.reminder, ReminderAt)

    @property
    def reminder_time(self) -> time | None:
        if isinstance(self.reminder, ReminderAt):
            return self.reminder.at
        return None


def reminder_from_time(reminder_time: time | None) -> Reminder:
    if reminder_time is None:
        return NO_REMINDER
    return ReminderAt(reminder_time)


def validate_task(task: Task) -> None:
    if not isinstance(task.id, str) or not task.id.strip():
        raise ValidationError("id is required")
    if not isinstance(task.title, str) or not task.title.strip():
        raise ValidationError("title is required")
    if not isinstance(task.due_date, date):
        raise ValidationError("due date must be a date")
    if not isinstance(task.reminder, (NoReminder, ReminderAt)):
        raise ValidationError("reminder must be NoReminder or ReminderAt")


# ---- serialized form ----


def format_reminder_time(t: time) -> str:
    """Unpadded "H:M", e.g. 9:05 -> "9:5"."""
    return f"{t.hour}:{t.minute}"


def parse_reminder_time(raw: str) -> time:
    """Parse "H:M" (padded or not). Raises ValidationError."""
    parts = str(raw).strip().split(":")
    if len(parts) != 2:
        raise ValidationError(f"invalid reminder time {raw!r}, expected H:M")
    try:
        return time(int(parts[0]), int(parts[1]))
    except ValueError as e:
        raise ValidationError(f"invalid reminder time {raw!r}") from e


def parse_due_date(raw: str) -> date:
    """Accepts an ISO date or ISO date-time; the time-of-day is dropped."""
    try:
        return datetime.fromisoformat(str(raw).strip()).date()
    except ValueError as e:
        raise ValidationError(f"invalid dueDate {raw!r}") from e


def task_to_dict(task: Task) -> dict[str, Any]:
    reminder_time = task.reminder_time
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "dueDate": datetime.combine(task.due_date, time()).isoformat(),
        "reminderTime": format_reminder_time(reminder_time) if reminder_time is not None else None,
        "reminderEnabled": task.reminder_enabled,
    }


def task_from_dict(data: dict[str, Any]) -> Task:
    """
    Inverse of task_to_dict.

    Inconsistent reminder fields collapse to NoReminder:
    - reminderEnabled=false with a time: the time is ignored
    - reminderEnabled=true without a time: nothing to schedule
    """
    if not isinstance(data, dict):
        raise ValidationError("serialized task must be an object")

    task_id = data.get("id")
    title = data.get("title")
    if not isinstance(task_id, str):
        raise ValidationError("id must be a string")
    if not isinstance(title, str):
        raise ValidationError("title must be a string")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise ValidationError("description must be a string or null")

    if "dueDate" not in data or data["dueDate"] is None:
        raise ValidationError("dueDate is required")
    due_date = parse_due_date(data["dueDate"])

    enabled = data.get("reminderEnabled")
    if enabled is None:
        enabled = False
    elif not isinstance(enabled, bool):
        raise ValidationError("reminderEnabled must be a boolean")
    raw_time = data.get("reminderTime")

    reminder: Reminder = NO_REMINDER
    if enabled and raw_time is not None:
        reminder = ReminderAt(parse_reminder_time(raw_time))
    elif enabled:
        logger.debug("Task %s: reminderEnabled without reminderTime; treating as no reminder", task_id)

    return Task(
        id=task_id,
        title=title,
        due_date=due_date,
        description=description,
        reminder=reminder,
    )
