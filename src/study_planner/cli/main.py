# src/study_planner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts:
- the reminder scheduler in a background thread (optional),
- the console REPL in the main thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleReminderNotifier, run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_scheduler import ReminderBackgroundRunner, start_reminders_in_background

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    reminder_runner: ReminderBackgroundRunner | None = None
    if settings.scheduler_enabled:
        reminder_runner = start_reminders_in_background(
            state.task_store,
            ConsoleReminderNotifier(),
            interval_seconds=settings.reminder_poll_seconds,
            window_minutes=settings.reminder_window_minutes,
            clock=state.clock,
        )

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
        if not settings.console_enabled:
            # The console loop handles Ctrl+C itself.
            signal.signal(signal.SIGINT, _handle_signal)
    except (ValueError, OSError, AttributeError):
        # Not the main thread, or the platform lacks SIGTERM.
        logger.debug("Signal handlers not installed.", exc_info=True)

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            logger.info("Console disabled. Running reminder scheduler only. Press Ctrl+C to stop.")
            stop_main.wait()

    finally:
        if reminder_runner is not None:
            reminder_runner.stop()
            reminder_runner.join(timeout=10.0)

        logger.info("Bye. %d task(s) discarded (in-memory storage).", state.task_store.count())


if __name__ == "__main__":
    main()
