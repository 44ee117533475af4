# src/study_planner/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, time, timedelta

from ..core.state import AppState
from ..tasks.reminders import due_reminders
from ..tasks.task_api import create_task, edit_task, toggle_reminders
from ..tasks.task_errors import NotFoundError, TaskError, ValidationError
from ..tasks.task_models import Task
from ..tasks.task_queries import days_with_tasks, tasks_on, tasks_today

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

SHORT_ID_LEN = 8


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Task errors (bad input, unknown id) become the reply text; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskError as e:
            logger.debug("Command /%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument parsing ----


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid date '{raw}'. Use YYYY-MM-DD.") from e


def _parse_time(raw: str) -> time:
    try:
        hh, mm = raw.split(":")
        return time(int(hh), int(mm))
    except ValueError as e:
        raise ValidationError(f"Invalid time '{raw}'. Use HH:MM.") from e


def _looks_like_time(raw: str) -> bool:
    hh, sep, mm = raw.partition(":")
    return bool(sep) and hh.isdigit() and mm.isdigit()


def _split_title_description(words: list[str]) -> tuple[str, str | None]:
    text = " ".join(words)
    title, sep, description = text.partition("|")
    return title.strip(), (description.strip() or None) if sep else None


def _resolve_task(state: AppState, raw_id: str) -> Task:
    """Full id or a unique prefix of it (the short ids printed by listings)."""
    task = state.task_store.get(raw_id)
    if task is not None:
        return task
    matches = [t for t in state.task_store.list() if t.id.startswith(raw_id)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ValidationError(f"Ambiguous task id '{raw_id}'.")
    raise NotFoundError(raw_id)


def _format_task(task: Task) -> str:
    reminder = task.reminder_time.strftime("%H:%M") if task.reminder_time else "--:--"
    line = f"[{task.id[:SHORT_ID_LEN]}] {task.due_date.isoformat()} {reminder}  {task.title}"
    if task.description:
        line += f" ({task.description})"
    return line


def _format_tasks(tasks: list[Task], empty: str) -> str:
    if not tasks:
        return empty
    return "\n".join(_format_task(t) for t in tasks)


def _window(state: AppState) -> timedelta:
    return timedelta(minutes=state.settings.reminder_window_minutes)


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    reminders = "ON" if store.get_reminders_enabled() else "OFF"
    return (
        "Status:\n"
        f"  App: {getattr(state.settings, 'app_name', 'study-planner')}\n"
        f"  Tasks: {store.count()}\n"
        f"  Reminders: {reminders} (window {int(_window(state).total_seconds() // 60)} min)\n"
        "  Storage: in-memory (tasks are lost on exit)"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add YYYY-MM-DD [HH:MM] title [| description]
    """
    if not args:
        return "Usage: /add YYYY-MM-DD [HH:MM] title [| description]"

    due = _parse_date(args[0])
    rest = args[1:]

    reminder_time: time | None = None
    if rest and _looks_like_time(rest[0]):
        reminder_time = _parse_time(rest[0])
        rest = rest[1:]

    title, description = _split_title_description(rest)
    task = create_task(
        state.task_store,
        title=title,
        due_date=due,
        description=description,
        reminder_time=reminder_time,
    )
    return f"Added: {_format_task(task)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    return _format_tasks(state.task_store.list(), "No tasks.")


def cmd_today(state: AppState, args: list[str]) -> str:
    today = state.clock().date()
    tasks = tasks_today(state.task_store, today)
    return f"Today's tasks ({today.isoformat()}):\n" + _format_tasks(tasks, "No tasks for today")


def cmd_on(state: AppState, args: list[str]) -> str:
    """
    /on YYYY-MM-DD
    """
    if len(args) != 1:
        return "Usage: /on YYYY-MM-DD"
    day = _parse_date(args[0])
    tasks = tasks_on(state.task_store, day)
    return f"Tasks for {day.isoformat()}:\n" + _format_tasks(tasks, "No tasks for this day")


def cmd_month(state: AppState, args: list[str]) -> str:
    """
    /month          -> current month
    /month YYYY-MM  -> given month
    """
    if args:
        try:
            year_s, month_s = args[0].split("-")
            year, month = int(year_s), int(month_s)
            days = days_with_tasks(state.task_store, year, month)
        except ValueError as e:
            raise ValidationError(f"Invalid month '{args[0]}'. Use YYYY-MM.") from e
    else:
        today = state.clock().date()
        year, month = today.year, today.month
        days = days_with_tasks(state.task_store, year, month)

    label = f"{year:04d}-{month:02d}"
    if not days:
        return f"No tasks in {label}."
    return f"Days with tasks in {label}: " + ", ".join(str(d) for d in days)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit ID title TEXT
    /edit ID desc TEXT        (desc - to clear)
    /edit ID date YYYY-MM-DD
    /edit ID time HH:MM       (time off to clear the reminder)
    """
    if len(args) < 3:
        return "Usage: /edit ID title|desc|date|time VALUE"

    task = _resolve_task(state, args[0])
    field_name = args[1].lower()
    value = " ".join(args[2:]).strip()

    if field_name == "title":
        updated = edit_task(state.task_store, task.id, title=value)
    elif field_name in ("desc", "description"):
        updated = edit_task(state.task_store, task.id, description=None if value == "-" else value)
    elif field_name == "date":
        updated = edit_task(state.task_store, task.id, due_date=_parse_date(value))
    elif field_name == "time":
        new_time = None if value.lower() in ("off", "none", "-") else _parse_time(value)
        updated = edit_task(state.task_store, task.id, reminder_time=new_time)
    else:
        return f"Unknown field '{field_name}'. Use title, desc, date or time."

    return f"Updated: {_format_task(updated)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete ID"
    try:
        task = _resolve_task(state, args[0])
    except NotFoundError:
        # Deleting a task that is already gone is not an error.
        return f"No task '{args[0]}' (nothing to delete)."
    state.task_store.delete(task.id)
    return f"Deleted: {task.title}"


def cmd_reminders(state: AppState, args: list[str]) -> str:
    """
    /reminders       -> show status
    /reminders on    -> enable reminders
    /reminders off   -> disable reminders
    """
    store = state.task_store
    if not args:
        return f"Reminders are currently {'ON' if store.get_reminders_enabled() else 'OFF'}."

    arg = args[0].lower()
    if arg in ("on", "1", "true", "yes"):
        toggle_reminders(store, True)
        return "Reminders enabled."
    if arg in ("off", "0", "false", "no"):
        toggle_reminders(store, False)
        return "Reminders disabled."
    return "Usage: /reminders on or /reminders off."


def cmd_due(state: AppState, args: list[str]) -> str:
    now = state.clock()
    if not state.task_store.get_reminders_enabled():
        return "Reminders are OFF."
    tasks = due_reminders(state.task_store, now, window=_window(state))
    return _format_tasks(tasks, "No reminders due right now.")


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count and reminder settings.")
registry.register("add", cmd_add, help_text="Add a task: /add YYYY-MM-DD [HH:MM] title [| description].")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("today", cmd_today, help_text="Tasks due today.")
registry.register("on", cmd_on, help_text="Tasks due on a date: /on YYYY-MM-DD.")
registry.register("month", cmd_month, help_text="Days with tasks: /month [YYYY-MM].", aliases=["cal"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit ID title|desc|date|time VALUE.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete ID.", aliases=["del", "rm"])
registry.register("reminders", cmd_reminders, help_text="Enable/disable reminders: /reminders on | off.")
registry.register("due", cmd_due, help_text="Reminders due right now.")
