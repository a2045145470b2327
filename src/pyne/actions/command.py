"""Actions that evaluate Ex-style command lines."""

from __future__ import annotations

from typing import Callable, Dict, List, MutableMapping, cast

from pyne.buffer import EditorError
from pyne.modes.base_mode import ModeContext, ModeResult

from .core import report_error

CommandHandler = Callable[[ModeContext, List[str]], ModeResult]


def _command_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("command_state", {})
    )
    state.setdefault("text", "")
    return state


def submit_command_line(context: ModeContext, match) -> ModeResult:
    del match
    state = _command_state(context)
    text = str(state.get("text", "")).strip()
    context.bus.emit("command.submit", text)
    state["text"] = ""
    if not text:
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")
    parts = text.split()
    handler = _COMMAND_HANDLERS.get(parts[0])
    if handler is None:
        return _unknown_command(context, text)
    try:
        return handler(context, parts[1:])
    except EditorError as exc:
        return report_error(context, exc)


def _unknown_command(context: ModeContext, text: str) -> ModeResult:
    context.bus.emit("command.error", text)
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="command_error",
        message=f"Unknown command: {text}",
    )


def _quit_result(context: ModeContext, *, force: bool) -> ModeResult:
    context.bus.emit("command.quit", {"force": force})
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="quit",
        message="quit!" if force else "quit",
    )


def _handle_quit(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    if context.editor.has_unsaved_changes():
        return ModeResult(
            consumed=True,
            switch_to="normal",
            status="command_refused",
            message="Unsaved changes (use :q! to discard or :wq to save)",
        )
    return _quit_result(context, force=False)


def _handle_force_quit(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    return _quit_result(context, force=True)


def _write(context: ModeContext, args: List[str]) -> str:
    path = context.editor.save_file(" ".join(args) if args else None)
    context.bus.emit("command.write", {"path": str(path)})
    return f"Saved {path}"


def _handle_write(context: ModeContext, args: List[str]) -> ModeResult:
    message = _write(context, args)
    return ModeResult(
        consumed=True, switch_to="normal", status="command_write", message=message
    )


def _handle_wq(context: ModeContext, args: List[str]) -> ModeResult:
    _write(context, args)
    return _quit_result(context, force=False)


def _handle_edit(context: ModeContext, args: List[str]) -> ModeResult:
    if not args:
        return ModeResult(
            consumed=True,
            switch_to="normal",
            status="command_error",
            message="Usage: :e <path>",
        )
    context.editor.open_file(" ".join(args))
    path = context.editor.get_current_file_path()
    context.bus.emit("command.edit", {"path": str(path)})
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="command_edit",
        message=f"Opened {path}",
    )


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "q": _handle_quit,
    "quit": _handle_quit,
    "q!": _handle_force_quit,
    "quit!": _handle_force_quit,
    "w": _handle_write,
    "write": _handle_write,
    "wq": _handle_wq,
    "x": _handle_wq,
    "e": _handle_edit,
    "edit": _handle_edit,
}


__all__ = ["submit_command_line"]
