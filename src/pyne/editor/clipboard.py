"""Clipboard collaborators used by Visual-mode yank."""

from __future__ import annotations

from typing import Optional, Protocol

import pyperclip

from pyne.buffer import ClipboardUnavailable
from pyne.runtime import telemetry


class ClipboardProvider(Protocol):
    """Anything that can receive copied text."""

    def set_contents(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""
        ...

    def get_contents(self) -> Optional[str]:
        """Return the current clipboard text, if it can be read."""
        ...


class SystemClipboard:
    """System clipboard via pyperclip (xclip/xsel/wl-copy/pbcopy/win32)."""

    def __init__(self) -> None:
        self.logger = telemetry.get_logger("pyne.clipboard")

    def set_contents(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            self.logger.warning(f"System clipboard unavailable via pyperclip: {exc}")
            raise ClipboardUnavailable(f"Clipboard not available: {exc}") from exc

    def get_contents(self) -> Optional[str]:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardUnavailable(f"Clipboard not available: {exc}") from exc


class MemoryClipboard:
    """Process-local clipboard for hosts without a system clipboard."""

    def __init__(self) -> None:
        self.contents: Optional[str] = None

    def set_contents(self, text: str) -> None:
        self.contents = text

    def get_contents(self) -> Optional[str]:
        return self.contents


__all__ = ["ClipboardProvider", "SystemClipboard", "MemoryClipboard"]
