# src/tq/core/ports.py

"""
Ports (interfaces) used by the core.

The task editor and the terminal UI depend on Protocols instead of concrete
implementations. This keeps the queue/storage layer and the editor process
swappable and makes testing easier.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskQueue(Protocol):
    """Ordered, index-addressable tasks plus the "last opened" boundary."""

    def at(self, index: int) -> Task: ...
    def last_opened_index(self) -> int: ...


class EditorRunner(Protocol):
    """
    Runs `<shell> -c "<editor> <path>"` attached to the terminal.

    Returns the child's exit code; raises OSError if it could not be started.
    """

    def run(self, shell: str, editor: str, path: Path) -> int: ...
