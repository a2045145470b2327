"""Editor facade: documents, mode, viewport and clipboard behind one object.

The facade is what the input loop, command line and file browser talk to.
Every mutating call rescrolls the current document before returning, so a
caller never sees a stale scroll offset. Queries return ``None`` when no
document is open; mutations raise :class:`~pyne.buffer.NoActiveBuffer`.

The editor is not thread-safe. Hosts that drive it from more than one thread
must serialise access themselves, because cursor, content and scroll state
are updated across several fields.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Tuple

from pyne.buffer import BufferStore, ClipboardUnavailable, Document, NoActiveBuffer
from pyne.buffer.document import Location, Selection
from pyne.runtime import telemetry
from pyne.runtime.settings import EditorSettings

from . import render
from .clipboard import ClipboardProvider, SystemClipboard
from .mode import Mode
from .navigation import CursorMovement, apply_movement
from .viewport import Viewport, rescroll

class Editor:
    def __init__(
        self,
        *,
        store: Optional[BufferStore] = None,
        settings: Optional[EditorSettings] = None,
        clipboard: Optional[ClipboardProvider] = None,
    ) -> None:
        self.settings = settings or EditorSettings.from_env()
        self.store = store or BufferStore(settings=self.settings)
        self._mode = Mode.NORMAL
        self._viewport = Viewport(*self.settings.viewport)
        self._show_debug_info = False
        self._clipboard: Optional[ClipboardProvider] = clipboard or SystemClipboard()
        self.logger = telemetry.get_logger("pyne.editor")

    # -- state queries -------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self._mode

    def current_mode(self) -> Mode:
        return self._mode

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def document(self) -> Optional[Document]:
        return self.store.current

    def require_document(self) -> Document:
        return self.store.require_current()

    def cursor_screen_position(self) -> Optional[Location]:
        document = self.store.current
        if document is None:
            return None
        return document.cursor_location()

    def scroll_offset(self) -> Optional[Tuple[int, int]]:
        document = self.store.current
        return document.scroll_offset if document is not None else None

    def visible_content(self) -> Optional[str]:
        document = self.store.current
        if document is None:
            return None
        return render.visible_content(document, self._viewport)

    def visible_lines(self) -> Optional[render.VisibleLines]:
        document = self.store.current
        if document is None:
            return None
        return render.VisibleLines(document, self._viewport)

    def styled_lines(self) -> Optional[List[List[render.Span]]]:
        document = self.store.current
        if document is None:
            return None
        return list(render.iter_styled_lines(document, self._viewport))

    def line_numbers(self) -> List[str]:
        return render.line_numbers(self.store.current, self._viewport)

    def status_line(self, width: Optional[int] = None) -> str:
        return render.status_line(
            self._mode,
            self.cursor_screen_position(),
            self._viewport.width if width is None else width,
        )

    def get_content(self) -> Optional[str]:
        document = self.store.current
        return document.text if document is not None else None

    def get_selection(self) -> Optional[Selection]:
        document = self.store.current
        return document.selection() if document is not None else None

    def copy_selection(self) -> Optional[str]:
        document = self.store.current
        return document.selected_text() if document is not None else None

    # -- viewport and scrolling ----------------------------------------

    def set_viewport(self, width: int, height: int) -> None:
        self._viewport = Viewport(width, height)
        self.scroll()

    def scroll(self) -> bool:
        """Recompute the current document's scroll offset."""

        document = self.store.current
        if document is None:
            return False
        return rescroll(
            document,
            self._viewport,
            vertical_padding=self.settings.vertical_padding,
            horizontal_padding=self.settings.horizontal_padding,
        )

    # -- mutations -----------------------------------------------------

    def insert_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"insert_char expects a single character, got {char!r}")
        self.insert_str(char)

    def insert_str(self, text: str) -> None:
        document = self.require_document()
        document.insert(text)
        self.scroll()

    def insert_newline(self) -> None:
        self.insert_str("\n")

    def insert_tab(self) -> None:
        self.insert_str(self.settings.tab_text)

    def delete_backward(self) -> bool:
        document = self.require_document()
        removed = document.delete_backward()
        if removed:
            self.scroll()
        return removed

    def delete_selection(self) -> Optional[str]:
        """Delete the Visual selection and fall back to Normal mode."""

        document = self.require_document()
        removed = document.delete_selection()
        self._switch(Mode.NORMAL)
        self.scroll()
        return removed

    def move_cursor(self, movement: CursorMovement) -> None:
        document = self.store.current
        if document is None:
            return
        apply_movement(document, movement)
        self.scroll()

    # -- mode transitions ----------------------------------------------

    def set_mode(self, mode: Mode) -> None:
        self._switch(Mode(mode))

    def enter_insert_mode(self) -> bool:
        if self._mode is not Mode.NORMAL:
            return False
        self._switch(Mode.INSERT)
        return True

    def exit_insert_mode(self) -> bool:
        if self._mode is not Mode.INSERT:
            return False
        self._switch(Mode.NORMAL)
        return True

    def enter_visual_mode(self) -> bool:
        if self._mode is not Mode.NORMAL or self.store.current is None:
            return False
        self._switch(Mode.VISUAL)
        return True

    def exit_visual_mode(self) -> bool:
        if self._mode is not Mode.VISUAL:
            return False
        self._switch(Mode.NORMAL)
        return True

    def yank_selection(self) -> Optional[str]:
        """Copy the selection to the clipboard and return to Normal mode.

        The mode change happens even when the clipboard fails; the failure is
        raised as :class:`ClipboardUnavailable` afterwards.
        """

        text = self.copy_selection()
        try:
            if text is not None:
                self._copy_to_clipboard(text)
        finally:
            self._switch(Mode.NORMAL)
        return text

    def _copy_to_clipboard(self, text: str) -> None:
        if self._clipboard is None:
            raise ClipboardUnavailable()
        try:
            self._clipboard.set_contents(text)
        except ClipboardUnavailable:
            self._clipboard = None
            raise

    def _switch(self, mode: Mode) -> None:
        document = self.store.current
        if document is not None:
            if mode is Mode.VISUAL and document.selection_anchor is None:
                document.start_selection()
            elif mode is not Mode.VISUAL:
                document.clear_selection()
        if mode is self._mode:
            return
        previous = self._mode
        self._mode = mode
        telemetry.record_event(
            "mode.switch",
            data={"from": previous.value, "to": mode.value},
            logger_name="pyne.editor",
        )

    # -- documents -----------------------------------------------------

    def get_current_file_path(self) -> Optional[Path]:
        return self.store.current_key

    def starting_directory(self) -> Optional[Path]:
        return self.store.starting_directory

    def set_starting_directory(self, path: os.PathLike[str] | str) -> None:
        self.store.set_starting_directory(path)

    def is_scratch_buffer(self) -> bool:
        return self.store.is_scratch()

    def has_unsaved_changes(self) -> bool:
        return self.store.has_unsaved_changes()

    def unsaved_buffer_keys(self) -> List[Path]:
        return self.store.unsaved_keys()

    def open_file(self, path: os.PathLike[str] | str) -> Document:
        previous = self.store.current
        document = self.store.open(path)
        self._start_session(previous)
        return document

    def new_scratch_buffer(self) -> Path:
        previous = self.store.current
        key = self.store.create_scratch()
        self._start_session(previous)
        return key

    def save_file(self, path: Optional[os.PathLike[str] | str] = None) -> Path:
        if self.store.current is None:
            raise NoActiveBuffer("No active buffer to save")
        return self.store.save(path)

    def _start_session(self, previous: Optional[Document]) -> None:
        if previous is not None:
            previous.clear_selection()
        self._switch(Mode.NORMAL)
        self.scroll()

    # -- diagnostics ---------------------------------------------------

    @property
    def show_debug_info(self) -> bool:
        return self._show_debug_info

    def toggle_debug_info(self) -> bool:
        self._show_debug_info = not self._show_debug_info
        return self._show_debug_info

    def debug_info(self) -> str:
        document = self.store.current
        width, height = self._viewport.as_tuple()
        if document is None:
            return f"no buffer | viewport {width}x{height}"
        scroll_x, scroll_y = document.scroll_offset
        return (
            f"cursor {document.cursor_pos} | viewport {width}x{height} | "
            f"scroll ({scroll_x}, {scroll_y}) | chars {len(document)} | "
            f"lines {document.content.len_lines()}"
        )


__all__ = ["Editor"]
