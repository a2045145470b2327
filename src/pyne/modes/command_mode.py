"""Command-line mode with inline editing and keymap integration."""

from __future__ import annotations

from typing import List, MutableMapping, Optional, cast

from .base_mode import KeyInput, ModeContext, ModeResult
from .keymap_helpers import KeymapMode


class CommandMode(KeymapMode):
    """Collects the ``:`` command text; ENTER and ESC are keymap bound."""

    name = "command"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._typed: List[str] = []

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._typed.clear()
        self.context.bus.emit("command.start", None)
        self._sync_command_state()

    def on_exit(self, next_mode: Optional[str]) -> None:
        super().on_exit(next_mode)
        self.context.bus.emit("command.end", self.current_command)
        self._typed.clear()
        self._sync_command_state()

    @property
    def current_command(self) -> str:
        return "".join(self._typed)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if key.key == "BACKSPACE":
            if not self._typed:
                # backspace on an empty line leaves command mode, like vim
                return ModeResult(
                    consumed=True, switch_to="normal", message="command_cancel"
                )
            self._typed.pop()
            self._sync_command_state()
            return ModeResult(consumed=True, status="editing")

        if key.text:
            self._typed.append(key.text)
            self._sync_command_state()
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _command_state(self) -> MutableMapping[str, object]:
        return cast(
            MutableMapping[str, object],
            self.context.extras.setdefault("command_state", {}),
        )

    def _sync_command_state(self) -> None:
        state = self._command_state()
        state["text"] = self.current_command


__all__ = ["CommandMode"]
