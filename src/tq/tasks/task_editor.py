# src/tq/tasks/task_editor.py

"""
External edit protocol for a single Task.

Flow:
- encode the task as indented JSON into a temp file,
- run `<shell> -c "<editor> <file>"` attached to the current terminal,
- on a zero exit code decode the file back into the task.

The temp file is never removed: if the editor fails, the user's changes are
still on disk (the path is logged).
"""

from __future__ import annotations

import json
import logging
import re
import subprocess
import tempfile
from collections.abc import Mapping
from pathlib import Path

from ..config import resolve_editor_command
from ..core.ports import EditorRunner
from ..errors import DecodeFailedError, EditorFailedError, EncodeFailedError, TempFileError
from .task_models import Task

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]+")
_MAX_SUFFIX_LEN = 64


class SubprocessEditorRunner:
    """EditorRunner backed by a real child process sharing our stdin/stdout/stderr."""

    def run(self, shell: str, editor: str, path: Path) -> int:
        cmd = [shell, "-c", f"{editor} {path}"]
        logger.debug("Running editor: %s", cmd)
        # No stream arguments: the child inherits the terminal.
        completed = subprocess.run(cmd, check=False)
        return completed.returncode


def temp_name_suffix(title: str) -> str:
    """File name hint derived from the title; uniqueness comes from tempfile."""
    return ("_" + _NON_ALNUM_RE.sub("_", title))[:_MAX_SUFFIX_LEN]


def encode_task(task: Task) -> str:
    payload = {"Title": task.title, "Story": task.story}
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def decode_task(text: str) -> Task:
    """
    Parse the temp-file format back into a Task.

    Keys are case-sensitive ("Title", "Story"); unknown keys are ignored.
    Raises DecodeFailedError for invalid JSON, a non-object payload, or a
    missing / non-string field.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeFailedError(f"failed to decode file: {e}") from e

    if not isinstance(data, dict):
        raise DecodeFailedError("failed to decode file: expected a JSON object")

    fields: dict[str, str] = {}
    for key in ("Title", "Story"):
        value = data.get(key)
        if not isinstance(value, str):
            raise DecodeFailedError(f"failed to decode file: {key!r} must be a string")
        fields[key] = value

    return Task(title=fields["Title"], story=fields["Story"])


def _write_temp_file(task: Task, tmp_dir: str | Path | None) -> Path:
    # Encoded before the file exists: an unencodable task leaves no file behind.
    try:
        data = encode_task(task).encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodeFailedError(f"failed to encode task: {e}") from e

    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            suffix=temp_name_suffix(task.title),
            dir=tmp_dir,
            delete=False,
        ) as handle:
            handle.write(data)
    except OSError as e:
        raise TempFileError(f"failed to write temp file: {e}") from e
    return Path(handle.name)


def edit_task(
    task: Task,
    *,
    runner: EditorRunner | None = None,
    env: Mapping[str, str] | None = None,
    tmp_dir: str | Path | None = None,
) -> None:
    """
    Open `task` in the user's editor and load the result back into it.

    The editor runs in $SHELL (default "sh") and is taken from $EDITOR
    (default "vim"). Blocks until the editor exits. If the editor fails or
    the file cannot be decoded, the task is left unchanged.
    """
    if runner is None:
        runner = SubprocessEditorRunner()

    path = _write_temp_file(task, tmp_dir)
    command = resolve_editor_command(env)

    try:
        returncode = runner.run(command.shell, command.editor, path)
    except OSError as e:
        logger.warning("Editor could not be started; task file kept at %s", path)
        raise EditorFailedError(f"failed to execute editor: {e}") from e

    if returncode != 0:
        logger.warning("Editor exited with code %s; task file kept at %s", returncode, path)
        raise EditorFailedError(
            f"failed to execute editor: exit status {returncode}", returncode=returncode
        )

    try:
        edited = decode_task(path.read_text("utf-8"))
    except OSError as e:
        raise TempFileError(f"failed to open file: {e}") from e
    except UnicodeDecodeError as e:
        logger.warning("Edited task file is not valid UTF-8: %s", path)
        raise DecodeFailedError(f"failed to decode file: {e}") from e
    except DecodeFailedError:
        logger.warning("Edited task file could not be decoded: %s", path)
        raise

    task.title = edited.title
    task.story = edited.story
    logger.debug("Task edited via %s", path)
