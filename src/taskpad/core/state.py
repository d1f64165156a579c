# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..cli.commands import CommandInterpreter
from ..tasks.task_file import LoadProblem, TaskFile
from ..tasks.task_store import TaskList


@dataclass
class AppState:
    # Settings or any object with the same attributes (tests use SimpleNamespace).
    settings: Any

    tasks: TaskList
    storage: TaskFile
    interpreter: CommandInterpreter

    # Lines skipped during the initial load, shown once after the greeting.
    load_problems: list[LoadProblem] = field(default_factory=list)
