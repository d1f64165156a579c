# src/taskpad/tasks/task_codec.py

"""
One-line storage form of a task.

    T | 0 | read book
    D | 1 | submit report | Friday
    E | 0 | project meeting | Mon 2pm

Fields are escaped so any text survives a round trip: a backslash becomes
"\\\\" and a pipe becomes "\\|". Every pipe inside a field is therefore
preceded by a backslash, so the separator " | " can only appear between
fields.
"""

from __future__ import annotations

import re

from ..core.outcomes import ErrorKind
from .task_models import Deadline, Event, Task, TaskKind, Todo, parse_when, when_of

SEPARATOR = " | "
DONE_MARKER = "1"
NOT_DONE_MARKER = "0"

# Number of fields each type marker needs.
FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 4,
}

_UNESCAPE_RE = re.compile(r"\\(.)")


class DecodeError(ValueError):
    """A stored line could not be turned back into a task."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("|", "\\|")


def _unescape(text: str) -> str:
    return _UNESCAPE_RE.sub(r"\1", text)


def encode_task(task: Task) -> str:
    fields = [
        task.kind.value,
        DONE_MARKER if task.is_done else NOT_DONE_MARKER,
        _escape(task.description),
    ]
    when = when_of(task)
    if when is not None:
        fields.append(_escape(when))
    return SEPARATOR.join(fields)


def decode_task(line: str, *, strict_dates: bool = False) -> Task:
    """
    Rebuild a task from its stored line.

    Raises DecodeError(INVALID_FILE_DATA) for an unknown type marker, a wrong
    field count, a bad done marker or an empty field. With strict_dates,
    an unparseable by/at raises DecodeError(DATE_FORMAT).
    """
    parts = line.rstrip("\r\n").split(SEPARATOR)

    try:
        kind = TaskKind(parts[0])
    except ValueError:
        raise DecodeError(
            ErrorKind.INVALID_FILE_DATA, f"unknown task type {parts[0]!r}"
        ) from None

    expected = FIELD_COUNTS[kind]
    if len(parts) != expected:
        raise DecodeError(
            ErrorKind.INVALID_FILE_DATA,
            f"type {kind.value} needs {expected} fields, got {len(parts)}",
        )

    done_marker = parts[1]
    if done_marker not in (DONE_MARKER, NOT_DONE_MARKER):
        raise DecodeError(ErrorKind.INVALID_FILE_DATA, f"bad done marker {done_marker!r}")

    fields = [_unescape(p) for p in parts[2:]]

    try:
        task: Task
        if kind is TaskKind.TODO:
            task = Todo(fields[0])
        elif kind is TaskKind.DEADLINE:
            task = Deadline(fields[0], fields[1])
        else:
            task = Event(fields[0], fields[1])
    except ValueError as e:
        raise DecodeError(ErrorKind.INVALID_FILE_DATA, str(e)) from e

    when = when_of(task)
    if strict_dates and when is not None:
        try:
            parse_when(when)
        except ValueError as e:
            raise DecodeError(ErrorKind.DATE_FORMAT, str(e)) from e

    task.is_done = done_marker == DONE_MARKER
    return task
