"""Insert mode: bound keys run actions, printable text goes into the document."""

from __future__ import annotations

from pyne.buffer import EditorError

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode, is_printable


class InsertMode(KeymapMode):
    name = "insert"

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if not is_printable(key):
            return ModeResult(consumed=False, status="miss")
        try:
            self.editor.insert_char(key.text)
        except EditorError as exc:
            self.logger.warning(f"insert failed: {exc}")
            self.context.bus.emit("editor.error", str(exc))
            return ModeResult(consumed=True, status="error", message=str(exc))
        return ModeResult(consumed=True, status="insert")


__all__ = ["InsertMode"]
