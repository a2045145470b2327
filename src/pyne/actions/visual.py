"""Actions dedicated to Visual mode selection management."""

from __future__ import annotations

from pyne.buffer import EditorError
from pyne.editor import CursorMovement
from pyne.modes.base_mode import ModeContext, ModeResult

from .core import report_error


def _extend(context: ModeContext, movement: CursorMovement) -> ModeResult:
    editor = context.editor
    editor.move_cursor(movement)
    document = editor.document
    anchor = document.selection_anchor if document is not None else None
    cursor = document.cursor_pos if document is not None else None
    context.bus.emit(
        "visual.selection",
        {"anchor": anchor, "cursor": cursor, "range": editor.get_selection()},
    )
    return ModeResult(consumed=True, status="visual_select")


def extend_left(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.LEFT)


def extend_right(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.RIGHT)


def extend_up(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.UP)


def extend_down(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.DOWN)


def extend_line_start(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.LINE_START)


def extend_line_end(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.LINE_END)


def extend_document_start(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.DOCUMENT_START)


def extend_document_end(context: ModeContext, match) -> ModeResult:
    del match
    return _extend(context, CursorMovement.DOCUMENT_END)


def yank_selection(context: ModeContext, match) -> ModeResult:
    del match
    selection = context.editor.get_selection()
    try:
        text = context.editor.yank_selection()
    except EditorError as exc:
        return report_error(context, exc)
    if text is None:
        return ModeResult(consumed=True, switch_to="normal", status="no_selection")
    context.bus.emit("visual.yank", {"text": text, "range": selection})
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="visual_yank",
        message="Copied to clipboard successfully.",
    )


def delete_selection(context: ModeContext, match) -> ModeResult:
    del match
    selection = context.editor.get_selection()
    try:
        removed = context.editor.delete_selection()
    except EditorError as exc:
        return report_error(context, exc)
    if removed is None:
        return ModeResult(consumed=True, switch_to="normal", status="no_selection")
    context.bus.emit("visual.delete", {"text": removed, "range": selection})
    return ModeResult(consumed=True, switch_to="normal", status="visual_delete")


__all__ = [
    "extend_left",
    "extend_right",
    "extend_up",
    "extend_down",
    "extend_line_start",
    "extend_line_end",
    "extend_document_start",
    "extend_document_end",
    "yank_selection",
    "delete_selection",
]
