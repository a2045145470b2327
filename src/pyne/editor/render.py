"""Text shown for the current viewport.

Everything here is a pure function of a ``Document`` and a ``Viewport``:
nothing mutates the document, and repeated calls give identical output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from pyne.buffer import Document, Selection, TextContent

from .mode import Mode
from .viewport import Viewport


@dataclass(frozen=True, slots=True)
class Span:
    """Run of display text; ``selected`` runs are drawn highlighted."""

    text: str
    selected: bool = False


def render_line(
    content: TextContent,
    index: int,
    scroll_x: int,
    width: int,
    *,
    is_cursor_line: bool,
) -> str:
    """Clip line ``index`` to ``[scroll_x, scroll_x + width)`` for display.

    The cursor's line keeps trailing whitespace so the caret can sit past the
    text, and only ends with a newline when the document line does. Other
    lines always end with a newline; when nothing of them is left in view they
    render as a bare newline, otherwise trailing whitespace is trimmed unless
    the line continues beyond the right edge.
    """

    line_length = content.line_len(index)
    start = min(scroll_x, line_length)
    end = min(scroll_x + width, line_length)
    line_start = content.line_to_char(index)
    visible = content.slice(line_start + start, line_start + max(start, end))

    if is_cursor_line:
        return visible + "\n" if content.has_terminator(index) else visible
    if scroll_x >= line_length:
        return "\n"
    if line_length > end:
        return visible + "\n"
    return visible.rstrip() + "\n"


class VisibleLines:
    """Lazy, re-iterable view of the lines currently in the viewport."""

    def __init__(self, document: Document, viewport: Viewport) -> None:
        self._document = document
        self._viewport = viewport

    @property
    def line_range(self) -> range:
        scroll_y = self._document.scroll_offset[1]
        last = min(
            self._document.content.len_lines(), scroll_y + self._viewport.height
        )
        return range(scroll_y, max(scroll_y, last))

    def __len__(self) -> int:
        return len(self.line_range)

    def __iter__(self) -> Iterator[str]:
        document = self._document
        scroll_x = document.scroll_offset[0]
        cursor_line = document.cursor_line
        for index in self.line_range:
            yield render_line(
                document.content,
                index,
                scroll_x,
                self._viewport.width,
                is_cursor_line=index == cursor_line,
            )

    def text(self) -> str:
        return "".join(self)


def visible_content(document: Document, viewport: Viewport) -> str:
    return VisibleLines(document, viewport).text()


def split_selection(
    text: str, offset: int, selection: Optional[Selection]
) -> List[Span]:
    """Split ``text`` (starting at document ``offset``) around ``selection``.

    Returns up to three spans: before, inside and after the intersection of
    the text with ``[start, end)``. Text that does not touch the selection
    comes back as a single unselected span.
    """

    if selection is None:
        return [Span(text)]
    start, end = selection
    line_end = offset + len(text)
    if not (offset < end and line_end > start):
        return [Span(text)]

    inner_start = max(start, offset) - offset
    inner_end = min(end, line_end) - offset
    spans: List[Span] = []
    if inner_start > 0:
        spans.append(Span(text[:inner_start]))
    spans.append(Span(text[inner_start:inner_end], selected=True))
    if inner_end < len(text):
        spans.append(Span(text[inner_end:]))
    return spans


def iter_styled_lines(document: Document, viewport: Viewport) -> Iterator[List[Span]]:
    """Visible lines (without newlines) split into selection spans."""

    view = VisibleLines(document, viewport)
    content = document.content
    scroll_x = document.scroll_offset[0]
    selection = document.selection()
    for index, rendered in zip(view.line_range, view):
        text = rendered[:-1] if rendered.endswith("\n") else rendered
        offset = content.line_to_char(index) + min(scroll_x, content.line_len(index))
        yield split_selection(text, offset, selection)


def line_numbers(document: Optional[Document], viewport: Viewport) -> List[str]:
    """Right-aligned 1-based numbers for the gutter, one per viewport row."""

    scroll_y = document.scroll_offset[1] if document is not None else 0
    total = document.content.len_lines() if document is not None else 0
    last = min(scroll_y + viewport.height, total)
    numbers = [f"{index + 1:>4}" for index in range(scroll_y, last)]
    numbers.extend("    " for _ in range(viewport.height - len(numbers)))
    return numbers


def status_line(mode: Mode, location: Optional[Tuple[int, int]], width: int) -> str:
    mode_text = f" {mode.label} "
    if location is None:
        cursor_info = "No active buffer "
    else:
        cursor_info = f"{location[0] + 1}:{location[1] + 1} "

    if width > len(mode_text) + len(cursor_info):
        padding = " " * (width - len(mode_text) - len(cursor_info))
        return f"{mode_text}{padding}{cursor_info}"
    if width > len(mode_text):
        return mode_text + cursor_info[: width - len(mode_text)]
    return mode_text[: max(0, width)]


def join_spans(spans: Sequence[Span]) -> str:
    return "".join(span.text for span in spans)


__all__ = [
    "Span",
    "VisibleLines",
    "iter_styled_lines",
    "join_spans",
    "line_numbers",
    "render_line",
    "split_selection",
    "status_line",
    "visible_content",
]
