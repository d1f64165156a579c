# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once (or takes injected ones),
- opens the task file and loads it into a TaskList,
- wires the interpreter into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskList
from .commands import build_interpreter

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageError (or its InvalidFileTypeError subclass) when the task
    file cannot be used.
    """
    if settings is None:
        settings = get_settings()

    strict_dates = bool(getattr(settings, "strict_dates", False))
    storage = TaskFile(settings.tasks_path, strict_dates=strict_dates)
    loaded = storage.load()

    tasks = TaskList(loaded.tasks)
    state = AppState(
        settings=settings,
        tasks=tasks,
        storage=storage,
        interpreter=build_interpreter(tasks, strict_dates=strict_dates),
        load_problems=loaded.problems,
    )
    logger.info("State ready tasks=%d file=%s strict_dates=%s", len(tasks), storage.path, strict_dates)
    return state
