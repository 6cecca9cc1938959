# src/tq/tasks/task_queue.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task

logger = logging.getLogger(__name__)


class InMemoryTaskQueue:
    """
    Minimal in-process TaskQueue.

    Tasks keep insertion order. `last_opened` is the highest index that has
    been opened; -1 means nothing is open yet. Nothing is persisted.
    """

    def __init__(self, tasks: Iterable[Task] = (), last_opened: int = -1) -> None:
        self._tasks: list[Task] = list(tasks)
        if last_opened < -1 or last_opened >= len(self._tasks):
            raise ValueError("last_opened must be -1 or a valid task index")
        self._last_opened = last_opened

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def at(self, index: int) -> Task:
        if index < 0:
            raise IndexError("task index out of range")
        return self._tasks[index]

    def last_opened_index(self) -> int:
        return self._last_opened

    def push(self, task: Task) -> int:
        self._tasks.append(task)
        index = len(self._tasks) - 1
        logger.debug("Queued task index=%d title=%r", index, task.title)
        return index

    def open_next(self) -> int:
        """Move the "opened" boundary forward by one task and return it."""
        if self._last_opened + 1 >= len(self._tasks):
            raise IndexError("every task is already open")
        self._last_opened += 1
        return self._last_opened
