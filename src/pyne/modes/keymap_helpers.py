"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import List, Optional

from pyne.keymaps import KeymapResolver
from pyne.keymaps.models import normalize_key
from pyne.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    name = normalize_key(key.key)
    modifiers = tuple(
        sorted(dict.fromkeys(m.strip().lower() for m in key.modifiers if m.strip()))
    )
    if modifiers:
        return "+".join(modifiers) + f"+{name}"
    return name


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def is_printable(key: KeyInput) -> bool:
    """True for plain text input (no ctrl/alt chord)."""

    if not key.text or len(key.text) != 1 or not key.text.isprintable():
        return False
    chord = {m.lower() for m in key.modifiers} & {"ctrl", "alt", "meta"}
    return not chord


class KeymapMode(Mode):
    """Mode that resolves keys through the keymap resolver first.

    Multi-key bindings accumulate in ``_pending`` until they match or miss;
    a miss hands the last key to :meth:`handle_unbound`.
    """

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"pyne.modes.{self.name}")
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._resolver.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._pending.clear()
            match = result.match
            with telemetry.span(
                "keymaps::execute",
                component="keymaps",
                metadata={"binding_id": match.binding.id, "action": match.action.id},
            ):
                outcome = match.action(self.context, match)
            if isinstance(outcome, ModeResult):
                return outcome
            return ModeResult(consumed=True)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        self._pending.clear()
        return self.handle_unbound(key)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss")


__all__ = ["KeymapMode", "key_to_token", "require_keymap_resolver", "is_printable"]
