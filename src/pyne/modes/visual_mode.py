"""Visual mode: the cursor moves while the selection anchor stays put."""

from __future__ import annotations

from typing import Optional

from .keymap_helpers import KeymapMode


class VisualMode(KeymapMode):
    name = "visual"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.context.bus.emit("visual.start", self.editor.get_selection())

    def on_exit(self, next_mode: Optional[str]) -> None:
        super().on_exit(next_mode)
        self.context.bus.emit("visual.end", None)


__all__ = ["VisualMode"]
