"""Single editable document: text, cursor, scroll offset and selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pyne.runtime import telemetry

from .text import TextContent

Location = Tuple[int, int]  # (line, column)
Selection = Tuple[int, int]  # (start, end) character offsets, start <= end


@dataclass(slots=True)
class Document:
    """Mutable editing state for one open file or scratch buffer.

    ``cursor_pos`` and ``selection_anchor`` are character offsets into
    ``content`` and are kept within ``[0, len(content)]`` by every method here.
    ``scroll_offset`` is owned by the scroll engine and is only stored.
    """

    content: TextContent = field(default_factory=TextContent)
    cursor_pos: int = 0
    scroll_offset: Tuple[int, int] = (0, 0)
    is_modified: bool = False
    selection_anchor: Optional[int] = None
    name: str = "document"

    @classmethod
    def from_text(cls, text: str, *, name: str = "document") -> "Document":
        return cls(content=TextContent(text), name=name)

    @property
    def text(self) -> str:
        return str(self.content)

    def __len__(self) -> int:
        return self.content.len_chars()

    @property
    def cursor_line(self) -> int:
        return self.content.char_to_line(self.cursor_pos)

    @property
    def cursor_column(self) -> int:
        return self.cursor_pos - self.content.line_to_char(self.cursor_line)

    def cursor_location(self) -> Location:
        line = self.cursor_line
        return (line, self.cursor_pos - self.content.line_to_char(line))

    def set_cursor(self, offset: int) -> int:
        self.cursor_pos = max(0, min(offset, self.content.len_chars()))
        return self.cursor_pos

    def start_selection(self) -> None:
        self.selection_anchor = self.cursor_pos

    def clear_selection(self) -> None:
        self.selection_anchor = None

    def selection(self) -> Optional[Selection]:
        if self.selection_anchor is None:
            return None
        anchor, cursor = self.selection_anchor, self.cursor_pos
        return (min(anchor, cursor), max(anchor, cursor))

    def selected_text(self) -> Optional[str]:
        selection = self.selection()
        if selection is None:
            return None
        return self.content.slice(*selection)

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor and move the cursor past it."""

        if not text:
            return
        with telemetry.span(
            "document::insert",
            component=True,
            metadata={"document": self.name, "length": len(text)},
        ):
            self.content.insert(self.cursor_pos, text)
            self.cursor_pos += len(text)
            self.is_modified = True

    def delete_backward(self) -> bool:
        """Remove the character before the cursor; ``False`` at offset 0."""

        if self.cursor_pos == 0:
            return False
        self.delete_range(self.cursor_pos - 1, self.cursor_pos)
        return True

    def delete_range(self, start: int, end: int) -> str:
        """Remove ``[start, end)`` and park the cursor at ``start``."""

        start, end = sorted((start, end))
        start = max(0, start)
        end = min(end, self.content.len_chars())
        if start >= end:
            return ""
        with telemetry.span(
            "document::delete",
            component=True,
            metadata={"document": self.name, "start": start, "end": end},
        ):
            removed = self.content.slice(start, end)
            self.content.remove(start, end)
            self.cursor_pos = start
            self.is_modified = True
        if self.selection_anchor is not None:
            self.selection_anchor = min(self.selection_anchor, len(self.content))
        return removed

    def delete_selection(self) -> Optional[str]:
        """Remove the selected text and drop the anchor.

        Returns the removed text, or ``None`` when nothing was selected.
        """

        selection = self.selection()
        if selection is None:
            return None
        removed = self.delete_range(*selection)
        self.cursor_pos = selection[0]
        self.selection_anchor = None
        return removed


__all__ = ["Document", "Location", "Selection"]
