# src/study_planner/tasks/task_scheduler.py

from __future__ import annotations

"""
Reminder scheduler.

A small polling loop that:
- checks the global "reminders enabled" flag,
- asks the stateless evaluator which reminders are due,
- skips the ones already surfaced (tracked per task id + reminder instant),
- hands the rest to an injected notifier port.

What "notify" means (console line, dialog, push) belongs to the host, not the scheduler.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..core.ports import ReminderDue, ReminderNotifier
from .reminders import due_reminders, reminder_instant, to_local_naive
from .task_store import TaskStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(slots=True)
class ReminderTracker:
    """
    "Already notified" bookkeeping.

    Keyed by (task id, reminder instant) so that moving a reminder to a new time makes
    it eligible again. Keys fall out once their window has passed.
    """

    window: timedelta
    _seen: set[tuple[str, datetime]] = field(default_factory=set)

    def is_new(self, reminder: ReminderDue) -> bool:
        return (reminder.task.id, reminder.reminder_at) not in self._seen

    def mark(self, reminder: ReminderDue) -> None:
        self._seen.add((reminder.task.id, reminder.reminder_at))

    def prune(self, now: datetime) -> None:
        self._seen = {k for k in self._seen if k[1] + self.window > now}

    def __len__(self) -> int:
        return len(self._seen)


async def poll_reminders(
    store: TaskStore,
    notifier: ReminderNotifier,
    tracker: ReminderTracker,
    now: datetime,
) -> list[ReminderDue]:
    """
    One scheduler tick. Returns the reminders delivered in this tick.

    A notifier failure is logged and the reminder is not marked, so the next tick
    retries it while it is still inside the window.
    """
    now = to_local_naive(now)
    tracker.prune(now)

    if not store.get_reminders_enabled():
        return []

    delivered: list[ReminderDue] = []
    for task in due_reminders(store, now, window=tracker.window):
        instant = reminder_instant(task)
        if instant is None:
            continue
        reminder = ReminderDue(task=task, reminder_at=instant)
        if not tracker.is_new(reminder):
            continue

        try:
            await notifier.notify(reminder)
        except Exception:
            logger.exception("Reminder notify failed task_id=%s", task.id)
            continue

        tracker.mark(reminder)
        delivered.append(reminder)
        logger.info("Reminder delivered task_id=%s at=%s", task.id, instant.isoformat())

    return delivered


async def run_reminder_scheduler(
        store: TaskStore,
        notifier: ReminderNotifier,
        *,
        interval_seconds: float = 30.0,
        window_minutes: float = 5.0,
        clock: Clock = datetime.now,
) -> None:
    """
    Simple polling scheduler.

    Every interval_seconds: run poll_reminders() against clock().
    Polling less often than the window can miss reminders.

    To stop the scheduler, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))
    tracker = ReminderTracker(window=timedelta(minutes=max(0.01, float(window_minutes))))

    if tracker.window.total_seconds() < sleep_s:
        logger.warning(
            "Reminder poll interval (%.1fs) is longer than the window (%.1fs); reminders may be missed",
            sleep_s,
            tracker.window.total_seconds(),
        )

    while True:
        try:
            await poll_reminders(store, notifier, tracker, clock())
        except Exception:
            logger.exception("Reminder poll failed")

        await asyncio.sleep(sleep_s)


@dataclass
class ReminderBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal reminder scheduler stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_reminders_in_background(
    store: TaskStore,
    notifier: ReminderNotifier,
    *,
    interval_seconds: float = 30.0,
    window_minutes: float = 5.0,
    clock: Clock = datetime.now,
) -> ReminderBackgroundRunner | None:
    """
    Start the reminder scheduler in a background thread with its own event loop
    (the console REPL blocks on input()).
    """
    ready = threading.Event()
    holder: dict[str, object] = {}

    async def _main(stop_event: asyncio.Event) -> None:
        scheduler_task = asyncio.create_task(
            run_reminder_scheduler(
                store,
                notifier,
                interval_seconds=interval_seconds,
                window_minutes=window_minutes,
                clock=clock,
            )
        )
        await stop_event.wait()
        scheduler_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await scheduler_task
        logger.info("Reminder scheduler stopped.")

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_main(stop_event))
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="reminder-scheduler", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Reminder scheduler thread did not initialize properly.")
        return None

    logger.info("Reminder scheduler started (interval=%ss window=%smin).", interval_seconds, window_minutes)
    return ReminderBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
