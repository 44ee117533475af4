# tests/test_commands.py

from __future__ import annotations

from datetime import date, time

from study_planner.cli.commands import CommandRegistry, registry

from .fakes import make_task


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("ping", handler, "ping", aliases=["p"])

    assert reg.handle(state, "/ping a b") == "ok"
    assert reg.handle(state, "/P") == "ok"
    assert called == [["a", "b"], []]
    assert "/ping - ping" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_with_reminder_and_description(state) -> None:
    reply = registry.handle(state, "/add 2024-05-01 09:00 Read Ch.3 | pages 40-61")

    assert reply is not None and reply.startswith("Added:")
    [task] = state.task_store.list()
    assert task.title == "Read Ch.3"
    assert task.description == "pages 40-61"
    assert task.due_date == date(2024, 5, 1)
    assert task.reminder_time == time(9, 0)


def test_add_without_title_reports_validation_error(state) -> None:
    reply = registry.handle(state, "/add 2024-05-01 09:00")

    assert reply is not None and reply.startswith("Error:")
    assert state.task_store.list() == []


def test_add_with_bad_date_reports_error(state) -> None:
    reply = registry.handle(state, "/add 01/05/2024 Essay")
    assert reply is not None and "YYYY-MM-DD" in reply


def test_today_and_on(state) -> None:
    state.task_store.add(make_task(task_id="aaaaaaaa1", title="Read Ch.3", due=date(2024, 5, 1)))
    state.task_store.add(make_task(task_id="bbbbbbbb2", title="Essay", due=date(2024, 5, 2)))

    today = registry.handle(state, "/today") or ""
    assert "Read Ch.3" in today and "Essay" not in today

    on = registry.handle(state, "/on 2024-05-02") or ""
    assert "Essay" in on and "Read Ch.3" not in on

    assert "No tasks for this day" in (registry.handle(state, "/on 2024-05-03") or "")


def test_month_lists_days_with_tasks(state) -> None:
    state.task_store.add(make_task(task_id="1", due=date(2024, 5, 20)))
    state.task_store.add(make_task(task_id="2", due=date(2024, 5, 1)))

    assert registry.handle(state, "/month") == "Days with tasks in 2024-05: 1, 20"
    assert registry.handle(state, "/month 2024-06") == "No tasks in 2024-06."
    assert (registry.handle(state, "/month 2024-13") or "").startswith("Error:")


def test_edit_by_short_id(state) -> None:
    state.task_store.add(make_task(task_id="abcdef123456", title="Read"))

    registry.handle(state, "/edit abcdef12 title Read Ch.4")
    registry.handle(state, "/edit abcdef12 time 18:30")
    assert state.task_store.get("abcdef123456").title == "Read Ch.4"
    assert state.task_store.get("abcdef123456").reminder_time == time(18, 30)

    registry.handle(state, "/edit abcdef12 time off")
    assert state.task_store.get("abcdef123456").reminder_enabled is False


def test_edit_unknown_id_reports_not_found(state) -> None:
    reply = registry.handle(state, "/edit nope title X") or ""
    assert reply.startswith("Error:") and "not found" in reply


def test_delete_is_idempotent_from_console(state) -> None:
    state.task_store.add(make_task(task_id="abc123", title="Essay"))

    assert registry.handle(state, "/delete abc123") == "Deleted: Essay"
    assert "nothing to delete" in (registry.handle(state, "/delete abc123") or "")


def test_reminders_toggle_and_due(state) -> None:
    state.task_store.add(make_task(task_id="1", title="Read Ch.3", at=time(9, 0)))

    # Fixed clock is 2024-05-01 09:03.
    assert "Read Ch.3" in (registry.handle(state, "/due") or "")

    assert registry.handle(state, "/reminders off") == "Reminders disabled."
    assert state.task_store.get_reminders_enabled() is False
    assert registry.handle(state, "/due") == "Reminders are OFF."

    assert registry.handle(state, "/reminders on") == "Reminders enabled."
    state.clock.advance(minutes=3)
    assert registry.handle(state, "/due") == "No reminders due right now."


def test_status(state) -> None:
    state.task_store.add(make_task())
    status = registry.handle(state, "/status") or ""

    assert "Tasks: 1" in status
    assert "Reminders: ON (window 5 min)" in status


def test_due_and_status_use_configured_window(state) -> None:
    state.settings.reminder_window_minutes = 2
    state.task_store.add(make_task(task_id="1", title="Read Ch.3", at=time(9, 0)))

    # Fixed clock is 2024-05-01 09:03, outside a 2 minute window.
    assert registry.handle(state, "/due") == "No reminders due right now."
    assert "Reminders: ON (window 2 min)" in (registry.handle(state, "/status") or "")

    state.settings.reminder_window_minutes = 10
    assert "Read Ch.3" in (registry.handle(state, "/due") or "")
