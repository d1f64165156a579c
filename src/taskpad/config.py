# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Variables (all optional):
- TASKPAD_APP_NAME      name shown in the greeting (default: taskpad)
- TASKPAD_LOG_LEVEL     console log level (default: WARNING)
- TASKPAD_DATA_DIR      local data directory (default: .local/taskpad)
- TASKPAD_TASKS_PATH    task file, must end in .txt (default: <data_dir>/tasks.txt)
- TASKPAD_STRICT_DATES  require /by and /at to be dates (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    # ---- Parsing ----
    strict_dates: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")

        strict_dates = _env_bool(_k("STRICT_DATES"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            strict_dates=strict_dates,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
