# src/tq/errors.py

"""
Error kinds raised by the task editor and the terminal UI.

Every error carries the name of the operation that failed so the caller can
show a short user-facing message. None of them terminate the process; that
decision belongs to the caller.
"""

from __future__ import annotations


class TqError(Exception):
    operation = "tq"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.operation}: {self.message}"


# ---- normalization ----


class NormalizeError(TqError, ValueError):
    operation = "normalize"


class EmptyTitleError(NormalizeError):
    def __init__(self, message: str = "title is empty") -> None:
        super().__init__(message)


class EmptyStoryError(NormalizeError):
    def __init__(self, message: str = "story is empty") -> None:
        super().__init__(message)


# ---- external edit ----


class EditError(TqError, RuntimeError):
    operation = "edit"


class TempFileError(EditError):
    pass


class EncodeFailedError(EditError):
    pass


class DecodeFailedError(EditError):
    pass


class EditorFailedError(EditError):
    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


# ---- terminal input ----


class InputFailedError(TqError, RuntimeError):
    operation = "query"
