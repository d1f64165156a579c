# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

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
    TaskError,
)
from ..tasks.task_models import Deadline, Event, Task, Todo, parse_when
from ..tasks.task_store import TaskList

DEADLINE_PREFIX = "/by"
EVENT_PREFIX = "/at"

_TASK_ID_RE = re.compile(r"[+-]?\d+")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandContext:
    tasks: TaskList
    strict_dates: bool = False


# Handlers receive the context and the whole trimmed input line.
CommandHandler = Callable[[CommandContext, str], Outcome]


class CommandInterpreter:
    """
    Keyword -> handler registry.

    The keyword is the first whitespace-delimited token of the trimmed line,
    matched case-insensitively. handle() never raises for bad input: every
    failure comes back as Failed(kind, command).
    """

    def __init__(self, tasks: TaskList, *, strict_dates: bool = False) -> None:
        self.context = CommandContext(tasks=tasks, strict_dates=strict_dates)
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, str] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, usage: str, help_text: str) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._usage[key] = usage
        self._help[key] = help_text

    def usage(self, name: str) -> str | None:
        return self._usage.get(name.lower())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        width = max((len(u) for u in self._usage.values()), default=0)
        for name, usage in self._usage.items():
            lines.append(f"  {usage.ljust(width)}  {self._help[name]}")
        return "\n".join(lines)

    def handle(self, raw: str) -> Outcome:
        line = raw.strip()
        tokens = line.split(None, 1)
        if not tokens:
            return Failed(ErrorKind.UNRECOGNIZED_COMMAND)

        name = tokens[0].lower()
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unrecognized command %r", tokens[0])
            return Failed(ErrorKind.UNRECOGNIZED_COMMAND)

        outcome = handler(self.context, line)
        if isinstance(outcome, Failed):
            logger.debug("Command %s failed: %s", name, outcome.kind)
        return outcome


# ---- parsing helpers ----


def _parse_task_id(line: str, command: str) -> int | Failed:
    tokens = line.split()
    if len(tokens) != 2:
        return Failed(ErrorKind.WRONG_FORMAT, command)
    if not _TASK_ID_RE.fullmatch(tokens[1]):
        return Failed(ErrorKind.NON_NUMERIC_ID, command)
    return int(tokens[1])


def _split_described(
    line: str, prefix: str, command: str, strict_dates: bool
) -> tuple[str, str] | Failed:
    """
    "deadline <description> /by <when>" -> (description, when).

    Split once on the first whitespace run to drop the keyword, then once on
    the marker, so the marker is only looked up in the remainder.
    """
    parts = line.split(None, 1)
    if len(parts) != 2:
        return Failed(ErrorKind.WRONG_FORMAT, command)

    pieces = parts[1].split(prefix, 1)
    if len(pieces) != 2:
        return Failed(ErrorKind.WRONG_FORMAT, command)

    description, when = pieces[0].strip(), pieces[1].strip()
    if not description or not when:
        return Failed(ErrorKind.LACKS_ARGUMENTS, command)

    if strict_dates:
        try:
            parse_when(when)
        except ValueError:
            return Failed(ErrorKind.DATE_FORMAT, command)

    return description, when


def _added(ctx: CommandContext, task: Task) -> Added:
    size = ctx.tasks.add(task)
    return Added(task=task, size=size)


# ---- handlers ----


def cmd_list(ctx: CommandContext, line: str) -> Outcome:
    if len(line.split()) != 1:
        return Failed(ErrorKind.WRONG_FORMAT, "list")
    try:
        return Listed(entries=ctx.tasks.entries())
    except TaskError as e:
        return Failed(e.kind, "list")


def cmd_done(ctx: CommandContext, line: str) -> Outcome:
    task_id = _parse_task_id(line, "done")
    if isinstance(task_id, Failed):
        return task_id
    try:
        return Completed(task=ctx.tasks.mark_done(task_id))
    except TaskError as e:
        return Failed(e.kind, "done")


def cmd_delete(ctx: CommandContext, line: str) -> Outcome:
    task_id = _parse_task_id(line, "delete")
    if isinstance(task_id, Failed):
        return task_id
    try:
        task = ctx.tasks.delete(task_id)
    except TaskError as e:
        return Failed(e.kind, "delete")
    return Deleted(task=task, size=len(ctx.tasks))


def cmd_todo(ctx: CommandContext, line: str) -> Outcome:
    parts = line.split(None, 1)
    if len(parts) != 2:
        return Failed(ErrorKind.WRONG_FORMAT, "todo")
    return _added(ctx, Todo(parts[1].strip()))


def cmd_deadline(ctx: CommandContext, line: str) -> Outcome:
    parsed = _split_described(line, DEADLINE_PREFIX, "deadline", ctx.strict_dates)
    if isinstance(parsed, Failed):
        return parsed
    description, by = parsed
    return _added(ctx, Deadline(description, by))


def cmd_event(ctx: CommandContext, line: str) -> Outcome:
    parsed = _split_described(line, EVENT_PREFIX, "event", ctx.strict_dates)
    if isinstance(parsed, Failed):
        return parsed
    description, at = parsed
    return _added(ctx, Event(description, at))


def cmd_bye(ctx: CommandContext, line: str) -> Outcome:
    if len(line.split()) != 1:
        return Failed(ErrorKind.WRONG_FORMAT, "bye")
    return Exited()


def build_interpreter(tasks: TaskList, *, strict_dates: bool = False) -> CommandInterpreter:
    """Interpreter with every task command registered (help included)."""
    interp = CommandInterpreter(tasks, strict_dates=strict_dates)

    def cmd_help(ctx: CommandContext, line: str) -> Outcome:
        return HelpShown(text=interp.build_help())

    when_hint = " (YYYY-MM-DD HHMM)" if strict_dates else ""
    interp.register("list", cmd_list, "list", "Show all tasks.")
    interp.register("done", cmd_done, "done <n>", "Mark task n as done.")
    interp.register("todo", cmd_todo, "todo <description>", "Add a todo.")
    interp.register(
        "deadline",
        cmd_deadline,
        f"deadline <description> {DEADLINE_PREFIX} <when>",
        f"Add a task with a deadline{when_hint}.",
    )
    interp.register(
        "event",
        cmd_event,
        f"event <description> {EVENT_PREFIX} <when>",
        f"Add an event{when_hint}.",
    )
    interp.register("delete", cmd_delete, "delete <n>", "Delete task n.")
    interp.register("help", cmd_help, "help", "Show this help.")
    interp.register("bye", cmd_bye, "bye", "Exit.")
    return interp
