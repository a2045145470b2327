"""Editing core: cursor navigation, scrolling, rendering and the Editor facade."""

from .clipboard import ClipboardProvider, MemoryClipboard, SystemClipboard
from .core import Editor
from .mode import Mode
from .navigation import CursorMovement, apply_movement
from .render import Span, VisibleLines, split_selection, visible_content
from .viewport import Viewport, compute_scroll, rescroll

__all__ = [
    "Editor",
    "Mode",
    "CursorMovement",
    "apply_movement",
    "Viewport",
    "compute_scroll",
    "rescroll",
    "Span",
    "VisibleLines",
    "split_selection",
    "visible_content",
    "ClipboardProvider",
    "MemoryClipboard",
    "SystemClipboard",
]
