# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

# Accepted forms for /by and /at when strict date checking is enabled.
DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d %H%M", "%Y-%m-%d %H:%M", "%Y-%m-%d")


class TaskKind(StrEnum):
    """
    Variant tag of a task.

    The values double as the type marker written to the storage file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _require_text(name: str, value: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{name} is required")
    return value.strip()


@dataclass(slots=True)
class Todo:
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    is_done: bool = False

    def __post_init__(self) -> None:
        self.description = _require_text("description", self.description)


@dataclass(slots=True)
class Deadline:
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    by: str
    is_done: bool = False

    def __post_init__(self) -> None:
        self.description = _require_text("description", self.description)
        self.by = _require_text("by", self.by)


@dataclass(slots=True)
class Event:
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    at: str
    is_done: bool = False

    def __post_init__(self) -> None:
        self.description = _require_text("description", self.description)
        self.at = _require_text("at", self.at)


Task = Todo | Deadline | Event


def when_of(task: Task) -> str | None:
    """Secondary field of a task (by/at), None for plain todos."""
    if task.kind is TaskKind.DEADLINE:
        return task.by  # type: ignore[union-attr]
    if task.kind is TaskKind.EVENT:
        return task.at  # type: ignore[union-attr]
    return None


def status_icon(task: Task) -> str:
    return "X" if task.is_done else " "


def format_task(task: Task) -> str:
    """
    Human-readable one-liner, e.g.:
      [T][ ] read book
      [D][X] submit report (by: Friday)
    """
    text = f"[{task.kind.value}][{status_icon(task)}] {task.description}"
    if task.kind is TaskKind.DEADLINE:
        text += f" (by: {when_of(task)})"
    elif task.kind is TaskKind.EVENT:
        text += f" (at: {when_of(task)})"
    return text


def parse_when(raw: str) -> datetime:
    """
    Parse a /by or /at value using DATE_FORMATS.

    Raises ValueError when no format matches.
    """
    value = raw.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"unrecognized date/time: {raw!r}")
