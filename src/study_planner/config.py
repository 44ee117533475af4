# src/study_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PLANNER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load a local .env (if present) without overriding the real environment."""
    load_dotenv(override=False)


_load_dotenv()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Host ----
    console_enabled: bool

    # ---- Reminders ----
    reminders_enabled: bool
    scheduler_enabled: bool
    reminder_window_minutes: int
    reminder_poll_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "study-planner").strip() or "study-planner"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/planner"))

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        reminders_enabled = _env_bool(_k("REMINDERS_ENABLED"), True)
        scheduler_enabled = _env_bool(_k("SCHEDULER_ENABLED"), True)
        reminder_window_minutes = max(1, _env_int(_k("REMINDER_WINDOW_MINUTES"), 5))
        reminder_poll_seconds = max(1.0, _env_float(_k("REMINDER_POLL_SECONDS"), 30.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            console_enabled=console_enabled,
            reminders_enabled=reminders_enabled,
            scheduler_enabled=scheduler_enabled,
            reminder_window_minutes=reminder_window_minutes,
            reminder_poll_seconds=reminder_poll_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
