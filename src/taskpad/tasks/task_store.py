# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.outcomes import ErrorKind, TaskError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    In-memory ordered task list.

    Positions are 1-based at this API (what the user types) and 0-based
    internally. Deleting shifts every later task down by one; freed slots are
    never reused.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def tasks(self) -> list[Task]:
        """Snapshot of the current tasks in order."""
        return list(self._tasks)

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise TaskError(
                ErrorKind.ID_OUT_OF_RANGE,
                f"task {index} is not in the list (size={len(self._tasks)})",
            )
        return index - 1

    # ---- public API ----

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        logger.debug("Task added kind=%s size=%d", task.kind.value, len(self._tasks))
        return len(self._tasks)

    def mark_done(self, index: int) -> Task:
        """Mark task `index` done. Marking a done task again is not an error."""
        task = self._tasks[self._offset(index)]
        task.is_done = True
        logger.debug("Task marked done index=%d", index)
        return task

    def delete(self, index: int) -> Task:
        task = self._tasks.pop(self._offset(index))
        logger.debug("Task deleted index=%d size=%d", index, len(self._tasks))
        return task

    def entries(self) -> list[tuple[int, Task]]:
        """(1-based position, task) pairs. An empty list is an error."""
        if not self._tasks:
            raise TaskError(ErrorKind.EMPTY_LIST, "the task list is empty")
        return list(enumerate(self._tasks, start=1))
