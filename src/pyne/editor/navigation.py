"""Cursor movement over a document's text.

Each function updates ``document.cursor_pos`` in place and clamps at the
document edges instead of failing. Columns count characters from the start
of the line; the line terminator never counts towards a line's length.
"""

from __future__ import annotations

from enum import Enum

from pyne.buffer import Document


class CursorMovement(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    LINE_START = "line_start"
    LINE_END = "line_end"
    DOCUMENT_START = "document_start"
    DOCUMENT_END = "document_end"


def move_left(document: Document) -> None:
    if document.cursor_pos > 0:
        document.cursor_pos -= 1


def move_right(document: Document) -> None:
    if document.cursor_pos < document.content.len_chars():
        document.cursor_pos += 1


def _move_vertical(document: Document, delta: int) -> None:
    content = document.content
    line, column = document.cursor_location()
    target = line + delta
    if target < 0 or target >= content.len_lines():
        return
    document.cursor_pos = content.line_to_char(target) + min(
        column, content.line_len(target)
    )


def move_up(document: Document) -> None:
    _move_vertical(document, -1)


def move_down(document: Document) -> None:
    _move_vertical(document, 1)


def move_line_start(document: Document) -> None:
    document.cursor_pos = document.content.line_to_char(document.cursor_line)


def move_line_end(document: Document) -> None:
    line = document.cursor_line
    content = document.content
    document.cursor_pos = content.line_to_char(line) + content.line_len(line)


def move_document_start(document: Document) -> None:
    document.cursor_pos = 0


def move_document_end(document: Document) -> None:
    """Start of the last line, like Vim's ``G``."""

    content = document.content
    document.cursor_pos = content.line_to_char(content.len_lines() - 1)


_MOVES = {
    CursorMovement.LEFT: move_left,
    CursorMovement.RIGHT: move_right,
    CursorMovement.UP: move_up,
    CursorMovement.DOWN: move_down,
    CursorMovement.LINE_START: move_line_start,
    CursorMovement.LINE_END: move_line_end,
    CursorMovement.DOCUMENT_START: move_document_start,
    CursorMovement.DOCUMENT_END: move_document_end,
}


def apply_movement(document: Document, movement: CursorMovement) -> None:
    _MOVES[CursorMovement(movement)](document)


__all__ = [
    "CursorMovement",
    "apply_movement",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_line_start",
    "move_line_end",
    "move_document_start",
    "move_document_end",
]
