"""High-level editing verbs reused across modes."""

from .core import (
    delete_backward,
    enter_command_mode,
    enter_insert_mode,
    enter_visual_mode,
    exit_to_normal_mode,
    insert_newline,
    insert_tab,
    noop_action,
    toggle_debug_info,
)
from .visual import delete_selection, yank_selection
from .command import submit_command_line

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_visual_mode",
    "enter_command_mode",
    "toggle_debug_info",
    "insert_newline",
    "insert_tab",
    "delete_backward",
    "noop_action",
    "yank_selection",
    "delete_selection",
    "submit_command_line",
]
