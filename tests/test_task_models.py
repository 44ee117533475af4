# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from study_planner.tasks.task_errors import ValidationError
from study_planner.tasks.task_models import (
    NO_REMINDER,
    ReminderAt,
    Task,
    task_from_dict,
    task_to_dict,
)

from .fakes import make_task


def test_task_serialized_form_matches_wire_format() -> None:
    task = make_task(description="pages 40-61", at=time(9, 5))

    assert task_to_dict(task) == {
        "id": "1",
        "title": "Read Ch.3",
        "description": "pages 40-61",
        "dueDate": "2024-05-01T00:00:00",
        "reminderTime": "9:5",
        "reminderEnabled": True,
    }


@pytest.mark.parametrize(
    "task",
    [
        make_task(),
        make_task(description="with notes", at=time(0, 0)),
        make_task(task_id="x", title="Essay", due=date(2024, 12, 31), at=time(23, 59)),
    ],
)
def test_serialized_round_trip_is_identical(task: Task) -> None:
    assert task_from_dict(task_to_dict(task)) == task


def test_parse_accepts_dart_style_and_plain_dates() -> None:
    t1 = task_from_dict(
        {"id": "a", "title": "T", "dueDate": "2024-05-01T13:45:10.123", "reminderTime": "09:00", "reminderEnabled": True}
    )
    t2 = task_from_dict({"id": "b", "title": "T", "dueDate": "2024-05-01"})

    assert t1.due_date == date(2024, 5, 1)
    assert t1.reminder == ReminderAt(time(9, 0))
    assert t2.due_date == date(2024, 5, 1)
    assert t2.reminder == NO_REMINDER
    assert t2.description is None


def test_inconsistent_reminder_fields_collapse_to_no_reminder() -> None:
    enabled_without_time = task_from_dict(
        {"id": "a", "title": "T", "dueDate": "2024-05-01", "reminderTime": None, "reminderEnabled": True}
    )
    time_without_enabled = task_from_dict(
        {"id": "b", "title": "T", "dueDate": "2024-05-01", "reminderTime": "9:0", "reminderEnabled": False}
    )

    for t in (enabled_without_time, time_without_enabled):
        assert t.reminder_enabled is False
        assert t.reminder_time is None


@pytest.mark.parametrize(
    "data",
    [
        {"title": "T", "dueDate": "2024-05-01"},
        {"id": "a", "dueDate": "2024-05-01"},
        {"id": "a", "title": "T"},
        {"id": "a", "title": "T", "dueDate": "yesterday"},
        {"id": "a", "title": "T", "dueDate": "2024-05-01", "reminderEnabled": True, "reminderTime": "25:00"},
        {"id": "a", "title": "T", "dueDate": "2024-05-01", "reminderEnabled": True, "reminderTime": "nine"},
        {"id": "a", "title": "T", "dueDate": "2024-05-01", "description": 42},
        {"id": "a", "title": "T", "dueDate": "2024-05-01", "reminderEnabled": "false", "reminderTime": "9:0"},
        {"id": "a", "title": "T", "dueDate": "2024-05-01", "reminderEnabled": 1, "reminderTime": "9:0"},
    ],
)
def test_malformed_serialized_task_raises_validation_error(data: dict) -> None:
    with pytest.raises(ValidationError):
        task_from_dict(data)


def test_task_normalizes_datetime_due_and_blank_description() -> None:
    task = Task(id="1", title="T", due_date=datetime(2024, 5, 1, 18, 30), description="   ")

    assert task.due_date == date(2024, 5, 1)
    assert type(task.due_date) is date
    assert task.description is None


def test_reminder_drops_seconds() -> None:
    assert ReminderAt(time(9, 0, 42)).at == time(9, 0)


def test_reminder_time_is_none_whenever_disabled() -> None:
    task = make_task()
    assert task.reminder_enabled is False
    assert task.reminder_time is None

    with_reminder = make_task(at=time(7, 30))
    assert with_reminder.reminder_enabled is True
    assert with_reminder.reminder_time == time(7, 30)
