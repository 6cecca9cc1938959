# tests/conftest.py

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from tq.tasks.task_models import Task
from tq.tasks.task_queue import InMemoryTaskQueue
from tq.ui.terminal import TerminalUI


@pytest.fixture()
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def make_ui(stdout: io.StringIO) -> Callable[..., TerminalUI]:
    """
    Build a TerminalUI wired to in-memory streams.

    We intentionally never touch the real sys.stdin/sys.stdout here so the
    blank-line protocol can be asserted on exact output.
    """

    def _make(width: int = 80, input_text: str = "") -> TerminalUI:
        return TerminalUI(width, stdin=io.StringIO(input_text), stdout=stdout)

    return _make


@pytest.fixture()
def queue() -> InMemoryTaskQueue:
    tasks = [Task(title=f"TASK {i}", story=f"story number {i}") for i in range(12)]
    return InMemoryTaskQueue(tasks, last_opened=5)


@pytest.fixture()
def env() -> dict[str, str]:
    return {"SHELL": "/bin/bash", "EDITOR": "nano"}
