# src/study_planner/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.ports import ReminderDue
from ..core.state import AppState

logger = logging.getLogger(__name__)

# The reminder thread and the REPL both write to stdout.
_print_lock = threading.Lock()


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    with _print_lock:
        print(f"[{_ts_local()}] {text}", flush=True)


class ConsoleReminderNotifier:
    """ReminderNotifier that prints due reminders to the console."""

    def __init__(self, stream=None) -> None:
        self._stream = stream

    async def notify(self, reminder: ReminderDue) -> None:
        text = f"[REMINDER] Remember: {reminder.task.title} (due {reminder.reminder_at:%Y-%m-%d %H:%M})"
        if self._stream is None:
            _print_ts(text)
            return
        with _print_lock:
            self._stream.write(f"[{_ts_local()}] {text}\n")
            self._stream.flush()


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.task_store.count())
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "study-planner"))
    _print_ts(f"[{app_name}] Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print(file=sys.stdout)
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list available commands."

        _print_ts(response)

    logger.info("Console connector finished.")
