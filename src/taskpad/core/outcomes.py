# src/taskpad/core/outcomes.py

"""
Result types shared by the interpreter, the task file and the renderer.

The interpreter never raises for bad user input; it returns one of the
outcome dataclasses below. Failures carry an ErrorKind so callers can pick
the user-facing message by matching on the kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_models import Task


class ErrorKind(StrEnum):
    WRONG_FORMAT = "wrong_format"
    LACKS_ARGUMENTS = "lacks_arguments"
    NON_NUMERIC_ID = "non_numeric_id"
    ID_OUT_OF_RANGE = "id_out_of_range"
    EMPTY_LIST = "empty_list"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    INVALID_FILE_DATA = "invalid_file_data"
    DATE_FORMAT = "date_format"


class TaskError(Exception):
    """Raised by the task list when an operation cannot be applied."""

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        super().__init__(message or kind.value)
        self.kind = kind


@dataclass(frozen=True, slots=True)
class Listed:
    entries: list[tuple[int, Task]]


@dataclass(frozen=True, slots=True)
class Added:
    task: Task
    size: int


@dataclass(frozen=True, slots=True)
class Completed:
    task: Task


@dataclass(frozen=True, slots=True)
class Deleted:
    task: Task
    size: int


@dataclass(frozen=True, slots=True)
class HelpShown:
    text: str


@dataclass(frozen=True, slots=True)
class Exited:
    pass


@dataclass(frozen=True, slots=True)
class Failed:
    kind: ErrorKind
    # Keyword of the command that failed (None when it was not recognized).
    command: str | None = None


Outcome = Listed | Added | Completed | Deleted | HelpShown | Exited | Failed

# Outcomes after which the task file must be rewritten.
MUTATING_OUTCOMES = (Added, Completed, Deleted)
