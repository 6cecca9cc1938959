# src/tq/ui/terminal.py

from __future__ import annotations

import sys
from typing import Any, TextIO

from ..core.ports import TaskQueue
from ..errors import InputFailedError


class TerminalUI:
    """
    Uniform set of console IO functions.

    Ensures there is exactly one empty line between every interaction with
    the user, and wraps long text to `width` columns.
    """

    def __init__(
        self,
        width: int,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.width = width
        self._stdin = stdin
        self._stdout = stdout
        self._reader: TextIO | None = None
        self._needs_blank = False

    # ---- low-level helpers ----

    def _reader_stream(self) -> TextIO:
        # Bound once, on first read.
        if self._reader is None:
            self._reader = self._stdin if self._stdin is not None else sys.stdin
        return self._reader

    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _print(self, text: str = "", end: str = "\n") -> None:
        out = self._out()
        out.write(text + end)
        out.flush()

    def _newline(self) -> None:
        """Print a blank line if this is not the first interaction."""
        if self._needs_blank:
            self._print()
        self._needs_blank = True

    def _read_line(self) -> str:
        try:
            line = self._reader_stream().readline()
        except (OSError, ValueError) as e:
            raise InputFailedError(f"failed to query user: {e}") from e
        if not line.endswith("\n"):
            raise InputFailedError("failed to query user: end of input")
        return line

    def paragraph(self, text: str, indent: int) -> str:
        """
        Format `text` so no line runs much past `width`.

        A newline is inserted between words once the running count exceeds
        the width, and every line after the first starts with `indent`
        spaces. Words are never split.
        """
        words = text.split(" ")
        count = 0
        out: list[str] = []
        for i, word in enumerate(words):
            out.append(word)
            count += len(word)
            if i == len(words) - 1:
                break
            if count > self.width:
                out.append("\n" + " " * indent)
                count = indent
            else:
                out.append(" ")
                count += 1
        return "".join(out)

    # ---- queries ----

    def query_yes_no(self) -> bool:
        self._newline()
        while True:
            self._print("Enter y|n: ", end="")
            resp = self._read_line().strip()
            if resp == "y":
                return True
            if resp == "n":
                return False

    def query_line(self) -> str:
        """Read one line, trailing newline included."""
        self._newline()
        return self._read_line()

    # ---- output ----

    def message(self, fmt: str, *args: Any) -> None:
        """
        Print "+ " followed by the wrapped text.

        `fmt` goes through %-formatting only when args are given, so a bare
        message is printed literally ("100%% done" stays "100%% done").
        """
        self._newline()
        text = "+ " + fmt
        if args:
            text = text % args
        self._print(self.paragraph(text, 2))

    def display(self, queue: TaskQueue, index: int) -> None:
        task = queue.at(index)

        title = f"{index}. "
        if index < 10:
            title += " "
        if index <= queue.last_opened_index():
            title += "[open] "
        else:
            title += "[todo] "
        title += task.title
        story = " " * 4 + task.story

        self._newline()
        self._print(self.paragraph(title, 4))
        self._print(self.paragraph(story, 4))

    def line(self) -> None:
        self._newline()
        self._print("---")
