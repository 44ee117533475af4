# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "PLANNER_APP_NAME": "App display name (default: study-planner).",
    "PLANNER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "PLANNER_DATA_DIR": "Local data directory for planner.log (default: .local/planner).",
    # Host
    "PLANNER_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Reminders
    "PLANNER_REMINDERS_ENABLED": "Initial state of the global reminders switch (default: true).",
    "PLANNER_SCHEDULER_ENABLED": "Run the background reminder scheduler (default: true).",
    "PLANNER_REMINDER_WINDOW_MINUTES": "How long after its time a reminder still counts as due (default: 5).",
    "PLANNER_REMINDER_POLL_SECONDS": "Scheduler polling interval; keep it below the window (default: 30).",
}
