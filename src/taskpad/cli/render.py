# src/taskpad/cli/render.py

"""
Text rendering for the console.

Every response is one block: a divider, the message lines (indented by one
space), a divider.
"""

from __future__ import annotations

from ..core.outcomes import (
    Added,
    Completed,
    Deleted,
    ErrorKind,
    Exited,
    Failed,
    HelpShown,
    Listed,
    Outcome,
)
from ..tasks.task_file import LoadProblem
from ..tasks.task_models import format_task

DIVIDER = "_" * 60
INDENT = "   "
HELP_HINT = "Type 'help' to see the list of commands."

_FAILURE_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.WRONG_FORMAT: "Your command is of the wrong format!",
    ErrorKind.LACKS_ARGUMENTS: "The description and the time of a task cannot be empty!",
    ErrorKind.NON_NUMERIC_ID: "The task number must be a whole number!",
    ErrorKind.ID_OUT_OF_RANGE: "That task is not in your list!",
    ErrorKind.EMPTY_LIST: "Your task list is empty! Add a todo, deadline or event first.",
    ErrorKind.UNRECOGNIZED_COMMAND: "Sorry, I don't recognize that command.",
    ErrorKind.DATE_FORMAT: "Dates must look like 2026-10-18 1800 (or 2026-10-18).",
}

_PROBLEM_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_FILE_DATA: "A task in the save file is corrupted and was skipped",
    ErrorKind.DATE_FORMAT: "A task in the save file has an invalid date/time and was skipped",
}


def frame(lines: list[str]) -> str:
    body = [f" {line}" for line in lines]
    return "\n".join([DIVIDER, *body, DIVIDER])


def _size_line(size: int) -> str:
    return f"You now have {size} task(s) in the list."


def render_outcome(outcome: Outcome, usage: str | None = None) -> list[str]:
    """
    Message lines for one outcome.

    `usage` is the usage line of the failed command, shown under a
    wrong-format message when known.
    """
    if isinstance(outcome, Listed):
        lines = ["Here are the tasks in your list:"]
        lines += [f"{index}. {format_task(task)}" for index, task in outcome.entries]
        return lines

    if isinstance(outcome, Added):
        return ["Got it. I've added this task:", INDENT + format_task(outcome.task), _size_line(outcome.size)]

    if isinstance(outcome, Completed):
        return ["Nice! I've marked this task as done:", INDENT + format_task(outcome.task)]

    if isinstance(outcome, Deleted):
        return ["Noted. I've removed this task:", INDENT + format_task(outcome.task), _size_line(outcome.size)]

    if isinstance(outcome, HelpShown):
        return outcome.text.splitlines()

    if isinstance(outcome, Exited):
        return ["Bye. Hope to see you again soon!"]

    if isinstance(outcome, Failed):
        lines = [_FAILURE_MESSAGES.get(outcome.kind, "Something went wrong.")]
        if outcome.kind is ErrorKind.WRONG_FORMAT and usage:
            lines.append(f"Usage: {usage}")
        if outcome.kind in (ErrorKind.WRONG_FORMAT, ErrorKind.UNRECOGNIZED_COMMAND):
            lines.append(HELP_HINT)
        return lines

    raise TypeError(f"Unknown outcome: {outcome!r}")


def render_problem(problem: LoadProblem) -> list[str]:
    message = _PROBLEM_MESSAGES.get(problem.kind, "A task in the save file was skipped")
    return [f"{message} (line {problem.line_no}):", INDENT + problem.text]


def render_greeting(app_name: str) -> list[str]:
    return [f"Hello! I'm {app_name}.", "What can I do for you?", HELP_HINT]
