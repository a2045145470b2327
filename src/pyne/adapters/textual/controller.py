"""Textual-agnostic controller that wires the editor and modes into UI hooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from pyne.editor import Editor, Span
from pyne.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from pyne.keymaps.models import normalize_key
from pyne.modes import (
    CommandMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
    NormalMode,
    VisualMode,
)
from pyne.modes.mode_manager import ModeManager


_MESSAGE_STATUSES = frozenset({"error", "visual_yank", "debug"})


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class Frame:
    """Everything a host needs to paint one screen."""

    lines: List[List[Span]] = field(default_factory=list)
    gutter: List[str] = field(default_factory=list)
    status: str = ""
    command: Optional[str] = None
    # (column, row) relative to the top-left of the text area
    cursor: Optional[Tuple[int, int]] = None
    debug: Optional[str] = None
    message: Optional[str] = None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    render: Callable[[Frame], None]
    handle_event: Callable[[str, object | None], None] = _noop
    quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def create_default_manager(editor: Editor) -> ModeManager:
    """Build a ModeManager with the standard mode set + default keymaps."""

    registry = KeymapRegistry(logger_name="pyne.keymaps")
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry, logger_name="pyne.keymaps")
    context = ModeContext(editor=editor, bus=ModeBus(), extras={})
    manager = ModeManager(
        context,
        keymap_registry=registry,
        keymap_resolver=resolver,
        load_defaults=False,
    )
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(VisualMode)
    manager.register_mode(CommandMode)
    return manager


class TextualEditorAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._message: Optional[str] = None
        self._subscribe_events()

    @property
    def editor(self) -> Editor:
        return self.manager.context.editor

    def resize(self, width: int, height: int) -> Frame:
        self.editor.set_viewport(width, height)
        return self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self.hooks.log(f"key -> {key!r} text={text!r} mods={normalized_modifiers}")
        result = self.manager.handle_key(
            KeyInput(key=normalize_key(key), text=text, modifiers=normalized_modifiers)
        )
        self.hooks.log(
            f"result <- status={result.status} consumed={result.consumed} "
            f"message={result.message!r}"
        )
        if result.status == "quit":
            self.hooks.quit()
            return result
        if result.status in _MESSAGE_STATUSES or result.status.startswith("command_"):
            self._message = result.message
        self.refresh()
        return result

    def build_frame(self) -> Frame:
        editor = self.editor
        active = self.manager.active_mode
        command = None
        if active is not None and active.name == "command":
            command = self._command_text()
        return Frame(
            lines=editor.styled_lines() or [],
            gutter=editor.line_numbers(),
            status=editor.status_line(),
            command=command,
            cursor=self._cursor_cell(),
            debug=editor.debug_info() if editor.show_debug_info else None,
            message=self._message,
        )

    def refresh(self) -> Frame:
        frame = self.build_frame()
        self.hooks.render(frame)
        return frame

    def _cursor_cell(self) -> Optional[Tuple[int, int]]:
        location = self.editor.cursor_screen_position()
        offset = self.editor.scroll_offset()
        if location is None or offset is None:
            return None
        line, column = location
        scroll_x, scroll_y = offset
        return column - scroll_x, line - scroll_y

    def _command_text(self) -> str:
        state = self.manager.context.extras.get("command_state")
        if isinstance(state, dict):
            return str(state.get("text", ""))
        return ""

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "mode.switch",
            "editor.error",
            "visual.selection",
            "visual.yank",
            "visual.delete",
            "command.start",
            "command.end",
            "command.submit",
            "command.error",
            "command.write",
            "command.quit",
            "command.edit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} payload={payload!r}")
        if name == "command.start":
            self._message = None
        self.hooks.handle_event(name, payload)



__all__ = ["Frame", "TextualEditorAdapter", "TextualUIHooks", "create_default_manager"]
