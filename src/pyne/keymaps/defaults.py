"""Built-in keymaps that seed each mode with the editor's default bindings."""

from __future__ import annotations

from typing import Iterable, Sequence

from pyne.actions import command as command_actions
from pyne.actions import core as core_actions
from pyne.actions import visual as visual_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="core.enter_visual",
        handler=core_actions.enter_visual_mode,
        description="Enter visual mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(
        id="core.toggle_debug",
        handler=core_actions.toggle_debug_info,
        description="Toggle the debug line",
    ),
    ActionRef(
        id="core.move_left",
        handler=core_actions.move_left,
        description="Move cursor left",
    ),
    ActionRef(
        id="core.move_right",
        handler=core_actions.move_right,
        description="Move cursor right",
    ),
    ActionRef(
        id="core.move_up",
        handler=core_actions.move_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="core.move_down",
        handler=core_actions.move_down,
        description="Move cursor down",
    ),
    ActionRef(
        id="core.move_line_start",
        handler=core_actions.move_line_start,
        description="Move cursor to line start",
    ),
    ActionRef(
        id="core.move_line_end",
        handler=core_actions.move_line_end,
        description="Move cursor to line end",
    ),
    ActionRef(
        id="core.move_document_start",
        handler=core_actions.move_document_start,
        description="Move cursor to the first line",
    ),
    ActionRef(
        id="core.move_document_end",
        handler=core_actions.move_document_end,
        description="Move cursor to the last line",
    ),
    ActionRef(
        id="insert.newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="insert.tab",
        handler=core_actions.insert_tab,
        description="Insert indentation",
    ),
    ActionRef(
        id="insert.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="visual.extend_left",
        handler=visual_actions.extend_left,
        description="Extend selection left",
    ),
    ActionRef(
        id="visual.extend_right",
        handler=visual_actions.extend_right,
        description="Extend selection right",
    ),
    ActionRef(
        id="visual.extend_up",
        handler=visual_actions.extend_up,
        description="Extend selection up",
    ),
    ActionRef(
        id="visual.extend_down",
        handler=visual_actions.extend_down,
        description="Extend selection down",
    ),
    ActionRef(
        id="visual.extend_line_start",
        handler=visual_actions.extend_line_start,
        description="Extend selection to line start",
    ),
    ActionRef(
        id="visual.extend_line_end",
        handler=visual_actions.extend_line_end,
        description="Extend selection to line end",
    ),
    ActionRef(
        id="visual.extend_document_start",
        handler=visual_actions.extend_document_start,
        description="Extend selection to the first line",
    ),
    ActionRef(
        id="visual.extend_document_end",
        handler=visual_actions.extend_document_end,
        description="Extend selection to the last line",
    ),
    ActionRef(
        id="visual.yank_selection",
        handler=visual_actions.yank_selection,
        description="Copy the selection to the clipboard",
    ),
    ActionRef(
        id="visual.delete_selection",
        handler=visual_actions.delete_selection,
        description="Delete current selection",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the active command line",
    ),
)

# (mode, keys, action id); keys are space separated, binding ids are
# "<mode>.<keys without spaces>"
_DEFAULT_KEYS: tuple[tuple[str, str, str], ...] = (
    ("normal", "i", "core.enter_insert"),
    ("normal", "v", "core.enter_visual"),
    ("normal", ":", "core.enter_command"),
    ("normal", "D", "core.toggle_debug"),
    ("normal", "LEFT", "core.move_left"),
    ("normal", "h", "core.move_left"),
    ("normal", "RIGHT", "core.move_right"),
    ("normal", "l", "core.move_right"),
    ("normal", "UP", "core.move_up"),
    ("normal", "k", "core.move_up"),
    ("normal", "DOWN", "core.move_down"),
    ("normal", "j", "core.move_down"),
    ("normal", "HOME", "core.move_line_start"),
    ("normal", "END", "core.move_line_end"),
    ("normal", "g g", "core.move_document_start"),
    ("normal", "G", "core.move_document_end"),
    ("insert", "ESC", "core.exit_to_normal"),
    ("insert", "BACKSPACE", "insert.delete_backward"),
    ("insert", "ENTER", "insert.newline"),
    ("insert", "TAB", "insert.tab"),
    ("insert", "LEFT", "core.move_left"),
    ("insert", "RIGHT", "core.move_right"),
    ("insert", "UP", "core.move_up"),
    ("insert", "DOWN", "core.move_down"),
    ("insert", "HOME", "core.move_line_start"),
    ("insert", "END", "core.move_line_end"),
    ("visual", "ESC", "core.exit_to_normal"),
    ("visual", "d", "visual.delete_selection"),
    ("visual", "y", "visual.yank_selection"),
    ("visual", "LEFT", "visual.extend_left"),
    ("visual", "h", "visual.extend_left"),
    ("visual", "RIGHT", "visual.extend_right"),
    ("visual", "l", "visual.extend_right"),
    ("visual", "UP", "visual.extend_up"),
    ("visual", "k", "visual.extend_up"),
    ("visual", "DOWN", "visual.extend_down"),
    ("visual", "j", "visual.extend_down"),
    ("visual", "HOME", "visual.extend_line_start"),
    ("visual", "END", "visual.extend_line_end"),
    ("visual", "g g", "visual.extend_document_start"),
    ("visual", "G", "visual.extend_document_end"),
    ("command", "ESC", "core.exit_to_normal"),
    ("command", "ENTER", "command.submit_line"),
)

_ACTION_DESCRIPTIONS = {action.id: action.description for action in DEFAULT_ACTIONS}

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"{mode}.{keys.replace(' ', '')}",
        mode=mode,
        sequence=KeySequence.from_strings(*keys.split()),
        action_id=action_id,
        description=_ACTION_DESCRIPTIONS[action_id],
    )
    for mode, keys, action_id in _DEFAULT_KEYS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
