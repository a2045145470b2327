"""Core action implementations shared across modes.

Actions take ``(context, match)`` and return a ``ModeResult``. Editor
failures are reported through the result (``status="error"``) and an
``editor.error`` bus event instead of propagating to the input loop.
"""

from __future__ import annotations

from functools import partial

from pyne.buffer import EditorError
from pyne.editor import CursorMovement
from pyne.modes.base_mode import ModeContext, ModeResult
from pyne.runtime import telemetry


def report_error(context: ModeContext, exc: EditorError) -> ModeResult:
    telemetry.get_logger("pyne.actions").warning(f"action failed: {exc}")
    context.bus.emit("editor.error", str(exc))
    return ModeResult(
        consumed=True,
        switch_to=context.editor.mode.value,
        status="error",
        message=str(exc),
    )


def enter_insert_mode(context: ModeContext, match) -> ModeResult:
    del match
    context.editor.enter_insert_mode()
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match) -> ModeResult:
    del match
    context.editor.exit_insert_mode()
    context.editor.exit_visual_mode()
    return ModeResult(consumed=True, switch_to="normal", message="exit_to_normal")


def enter_visual_mode(context: ModeContext, match) -> ModeResult:
    del match
    if not context.editor.enter_visual_mode():
        return ModeResult(consumed=True, status="noop", message="No active buffer")
    return ModeResult(consumed=True, switch_to="visual", message="enter_visual")


def enter_command_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def toggle_debug_info(context: ModeContext, match) -> ModeResult:
    del match
    shown = context.editor.toggle_debug_info()
    return ModeResult(
        consumed=True, status="debug", message="debug_on" if shown else "debug_off"
    )


def move_cursor(context: ModeContext, match, *, movement: CursorMovement) -> ModeResult:
    del match
    context.editor.move_cursor(movement)
    return ModeResult(consumed=True, status="move")


move_left = partial(move_cursor, movement=CursorMovement.LEFT)
move_right = partial(move_cursor, movement=CursorMovement.RIGHT)
move_up = partial(move_cursor, movement=CursorMovement.UP)
move_down = partial(move_cursor, movement=CursorMovement.DOWN)
move_line_start = partial(move_cursor, movement=CursorMovement.LINE_START)
move_line_end = partial(move_cursor, movement=CursorMovement.LINE_END)
move_document_start = partial(move_cursor, movement=CursorMovement.DOCUMENT_START)
move_document_end = partial(move_cursor, movement=CursorMovement.DOCUMENT_END)


def insert_text(context: ModeContext, text: str) -> ModeResult:
    try:
        context.editor.insert_str(text)
    except EditorError as exc:
        return report_error(context, exc)
    return ModeResult(consumed=True, status="insert")


def insert_newline(context: ModeContext, match) -> ModeResult:
    del match
    return insert_text(context, "\n")


def insert_tab(context: ModeContext, match) -> ModeResult:
    del match
    return insert_text(context, context.editor.settings.tab_text)


def delete_backward(context: ModeContext, match) -> ModeResult:
    del match
    try:
        removed = context.editor.delete_backward()
    except EditorError as exc:
        return report_error(context, exc)
    return ModeResult(consumed=True, status="delete" if removed else "noop")


def noop_action(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "report_error",
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_visual_mode",
    "enter_command_mode",
    "toggle_debug_info",
    "move_cursor",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_line_start",
    "move_line_end",
    "move_document_start",
    "move_document_end",
    "insert_text",
    "insert_newline",
    "insert_tab",
    "delete_backward",
    "noop_action",
]
