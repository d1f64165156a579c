# src/taskpad/tasks/task_file.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..core.outcomes import ErrorKind
from .task_codec import DecodeError, decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)

VALID_FILE_SUFFIX = ".txt"


class StorageError(RuntimeError):
    """The task file could not be created, read or written."""


class InvalidFileTypeError(StorageError):
    """The configured task file does not end in VALID_FILE_SUFFIX."""


@dataclass(frozen=True, slots=True)
class LoadProblem:
    line_no: int
    kind: ErrorKind
    text: str


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    problems: list[LoadProblem] = field(default_factory=list)


class TaskFile:
    """
    Flat-file persistence for the task list.

    - load(): missing file/directory is created, bad lines are skipped and
      reported as LoadProblem, the rest is returned in order
    - save(): the whole list is rewritten via a temp file + os.replace

    OS-level failures are raised as StorageError.
    """

    def __init__(self, path: str | Path, *, strict_dates: bool = False) -> None:
        path = Path(path)
        if path.suffix.lower() != VALID_FILE_SUFFIX:
            raise InvalidFileTypeError(
                f"Task file must be a {VALID_FILE_SUFFIX} file, got: {path}"
            )
        self._path = path
        self._strict_dates = strict_dates

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_exists(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create task file {self._path}: {e}") from e

    def load(self) -> LoadResult:
        if not self._path.exists():
            logger.info("Task file %s missing, creating it.", self._path)
            self._ensure_exists()
            return LoadResult()

        try:
            with self._path.open("r", encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read task file {self._path}: {e}") from e

        # Only "\n" ends a record; other Unicode line breaks are task text.
        result = LoadResult()
        for line_no, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                result.tasks.append(decode_task(line, strict_dates=self._strict_dates))
            except DecodeError as e:
                logger.warning("Skipping %s line %d (%s): %s", self._path, line_no, e.kind, e)
                result.problems.append(LoadProblem(line_no=line_no, kind=e.kind, text=line))

        logger.info(
            "Loaded %d task(s) from %s (%d skipped)",
            len(result.tasks),
            self._path,
            len(result.problems),
        )
        return result

    def save(self, tasks: Iterable[Task]) -> None:
        body = "".join(encode_task(t) + "\n" for t in tasks)
        tmp = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="") as fh:
                fh.write(body)
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"Could not write task file {self._path}: {e}") from e
        logger.debug("Saved task file %s (%d bytes)", self._path, len(body))
