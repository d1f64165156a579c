# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskpad.tasks.task_models import (
    Deadline,
    Event,
    TaskKind,
    Todo,
    format_task,
    parse_when,
    when_of,
)


def test_new_tasks_start_not_done_and_trimmed() -> None:
    todo = Todo("  read book ")
    deadline = Deadline("submit report", " Friday ")

    assert todo.description == "read book"
    assert todo.is_done is False
    assert deadline.by == "Friday"
    assert deadline.kind is TaskKind.DEADLINE


@pytest.mark.parametrize(
    "build",
    [
        lambda: Todo("   "),
        lambda: Deadline("", "Friday"),
        lambda: Deadline("report", "  "),
        lambda: Event("party", ""),
    ],
)
def test_empty_fields_are_rejected(build) -> None:
    with pytest.raises(ValueError):
        build()


def test_format_task_per_kind() -> None:
    todo = Todo("read book")
    assert format_task(todo) == "[T][ ] read book"

    todo.is_done = True
    assert format_task(todo) == "[T][X] read book"

    assert format_task(Deadline("submit report", "Friday")) == "[D][ ] submit report (by: Friday)"
    assert format_task(Event("party", "Sat 2pm")) == "[E][ ] party (at: Sat 2pm)"


def test_when_of() -> None:
    assert when_of(Todo("x")) is None
    assert when_of(Deadline("x", "Mon")) == "Mon"
    assert when_of(Event("x", "noon")) == "noon"


def test_same_fields_different_kind_are_not_equal() -> None:
    assert Deadline("x", "y") != Event("x", "y")
    assert Deadline("x", "y") == Deadline("x", "y")


def test_parse_when_accepts_known_formats() -> None:
    assert parse_when("2026-10-18 1800") == datetime(2026, 10, 18, 18, 0)
    assert parse_when("2026-10-18 18:30") == datetime(2026, 10, 18, 18, 30)
    assert parse_when("2026-10-18") == datetime(2026, 10, 18)


@pytest.mark.parametrize("raw", ["Friday", "18/10/2026", "2026-13-01", ""])
def test_parse_when_rejects_other_text(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_when(raw)
