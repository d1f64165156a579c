# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.render import frame, render_greeting, render_outcome, render_problem
from ..core.outcomes import MUTATING_OUTCOMES, Exited, Failed
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _emit(out: TextIO, lines: list[str]) -> None:
    out.write(frame(lines) + "\n")
    out.flush()


def run_console_loop(
    state: AppState,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """
    Read-evaluate-persist-print loop.

    One response block per non-blank line. After every mutating outcome the
    whole task list is written back (StorageError propagates to the caller).
    Returns the exit status: 0 on `bye` or end of input.
    """
    inp = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    _emit(out, render_greeting(app_name))
    for problem in state.load_problems:
        _emit(out, render_problem(problem))

    while True:
        raw = inp.readline()
        if raw == "":
            logger.info("Console EOF received, exiting.")
            _emit(out, render_outcome(Exited()))
            return 0

        if not raw.strip():
            continue

        outcome = state.interpreter.handle(raw)

        if isinstance(outcome, MUTATING_OUTCOMES):
            state.storage.save(state.tasks)

        usage = None
        if isinstance(outcome, Failed) and outcome.command:
            usage = state.interpreter.usage(outcome.command)
        _emit(out, render_outcome(outcome, usage))

        if isinstance(outcome, Exited):
            logger.info("Console exit command received.")
            return 0
