# src/tq/tasks/task_models.py

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import EmptyStoryError, EmptyTitleError

if TYPE_CHECKING:
    from ..core.ports import EditorRunner

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Trim `text` and replace every run of whitespace with a single space."""
    return _WHITESPACE_RE.sub(" ", text.strip())


@dataclass(slots=True)
class Task:
    """
    A queued task: a one-line title and a free-form story.

    After normalize() both fields are non-empty and single-spaced, and the
    title is upper-cased.
    """

    title: str
    story: str

    def normalize(self) -> None:
        """
        Clean up title & story in place.

        Raises EmptyTitleError / EmptyStoryError (title checked first). On
        failure the task is left unmodified.
        """
        title = collapse_whitespace(self.title).upper()
        story = collapse_whitespace(self.story)
        if not title:
            raise EmptyTitleError()
        if not story:
            raise EmptyStoryError()
        self.title = title
        self.story = story

    def edit(
        self,
        runner: EditorRunner | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Let the user edit this task in $EDITOR. See task_editor.edit_task."""
        from .task_editor import edit_task

        edit_task(self, runner=runner, env=env)
