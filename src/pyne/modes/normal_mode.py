"""Normal mode: navigation and mode entry, all driven by keymaps."""

from __future__ import annotations

from .keymap_helpers import KeymapMode


class NormalMode(KeymapMode):
    name = "normal"


__all__ = ["NormalMode"]
