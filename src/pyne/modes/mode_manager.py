"""Mode manager coordinating the Normal/Insert/Visual/Command handlers."""

from __future__ import annotations

from typing import Dict, Optional, Type

from pyne.editor import Mode as EditorMode
from pyne.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from pyne.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult

EDITOR_MODES = frozenset(mode.value for mode in EditorMode)


class ModeManager:
    """Owns the active key handler and keeps it in step with ``Editor.mode``.

    The editor is the source of truth for Normal/Insert/Visual. The
    ``command`` handler is layered on top of Normal: while it is active the
    editor stays in Normal mode.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("pyne.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="pyne.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="pyne.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        if name in EDITOR_MODES:
            self.context.editor.set_mode(EditorMode(name))
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.switch", name)
        telemetry.record_event(
            "mode.handler", data={"mode": name}, logger_name="pyne.modes"
        )

    def sync_with_editor(self) -> None:
        """Follow editor-side mode changes (e.g. a file opened from ``:e``)."""

        active = self._active
        wanted = self.context.editor.mode.value
        if active == "command" or active == wanted or wanted not in self._modes:
            return
        self.switch_mode(wanted)

    def handle_key(self, key: KeyInput) -> ModeResult:
        self.sync_with_editor()
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        return self._after_mode_result(result)

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to:
            self.switch_mode(result.switch_to)
        else:
            self.sync_with_editor()
        return result


__all__ = ["ModeManager", "EDITOR_MODES"]
