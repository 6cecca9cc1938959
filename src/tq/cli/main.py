# src/tq/cli/main.py

"""
CLI entrypoint.

Initializes logging and settings, then runs a short interactive session:
tasks are typed in, normalized, optionally edited in $EDITOR, and listed.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from ..config import get_settings
from ..core.ports import EditorRunner
from ..errors import InputFailedError, NormalizeError, TqError
from ..logging_setup import setup_logging
from ..tasks.task_models import Task
from ..tasks.task_queue import InMemoryTaskQueue
from ..ui.terminal import TerminalUI

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tq", description="Personal task queue.")
    parser.add_argument("--width", type=int, default=None, help="wrap width for console output")
    return parser.parse_args(argv)


def _read_task(ui: TerminalUI) -> Task:
    """Ask for a title and a story until they normalize cleanly."""
    while True:
        ui.message("Title?")
        title = ui.query_line()
        ui.message("Story?")
        story = ui.query_line()
        task = Task(title=title, story=story)
        try:
            task.normalize()
        except NormalizeError as e:
            ui.message("%s", e)
            continue
        return task


def _maybe_edit(
    ui: TerminalUI,
    queue: InMemoryTaskQueue,
    index: int,
    runner: EditorRunner | None,
) -> None:
    ui.message("Edit this task in your editor?")
    if not ui.query_yes_no():
        return

    task = queue.at(index)
    before = (task.title, task.story)
    try:
        task.edit(runner=runner)
        task.normalize()
    except TqError as e:
        task.title, task.story = before
        logger.info("Edit of task %d failed: %s", index, e)
        ui.message("%s", e)
        return
    ui.display(queue, index)


def run_session(
    ui: TerminalUI,
    queue: InMemoryTaskQueue,
    runner: EditorRunner | None = None,
) -> None:
    while True:
        index = queue.push(_read_task(ui))
        ui.display(queue, index)
        _maybe_edit(ui, queue, index, runner)

        ui.message("Add another task?")
        if not ui.query_yes_no():
            break

    while queue.last_opened_index() < len(queue) - 1:
        queue.open_next()

    ui.line()
    for i in range(len(queue)):
        ui.display(queue, i)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    width = args.width if args.width and args.width > 0 else settings.ui_width
    logger.info("Starting %s (width=%d)...", settings.app_name, width)

    ui = TerminalUI(width)
    queue = InMemoryTaskQueue()
    try:
        run_session(ui, queue)
    except InputFailedError:
        logger.info("Input closed, exiting.")
        return 0
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
        return 130

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
