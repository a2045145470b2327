"""Typed failures raised by the document store and editor facade."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class EditorError(RuntimeError):
    """Base class for every recoverable editor failure.

    The message is meant to be shown as-is on the status line.
    """

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class IoFailure(EditorError):
    """Reading or writing a document failed."""


class InvalidUtf8(EditorError):
    """File content is not valid UTF-8 and was not loaded."""


class NoActiveBuffer(EditorError):
    """An operation needed a current document but none exists."""

    def __init__(self, message: str = "No active buffer") -> None:
        super().__init__(message)


class ClipboardUnavailable(EditorError):
    """The clipboard collaborator could not be reached."""

    def __init__(self, message: str = "Clipboard not available") -> None:
        super().__init__(message)


__all__ = [
    "EditorError",
    "IoFailure",
    "InvalidUtf8",
    "NoActiveBuffer",
    "ClipboardUnavailable",
]
