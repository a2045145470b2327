"""Viewport size and the scroll engine that keeps the cursor on screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pyne.buffer import Document

VERTICAL_PADDING = 6
HORIZONTAL_PADDING = 6


@dataclass(frozen=True, slots=True)
class Viewport:
    """Visible character-cell rectangle."""

    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(0, int(self.width)))
        object.__setattr__(self, "height", max(0, int(self.height)))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


def effective_padding(padding: int, dimension: int) -> int:
    """Shrink ``padding`` so both margins fit inside ``dimension``."""

    # The full margin needs 2 * padding + 1 cells. With fewer, the top and
    # bottom rules disagree and the offset would oscillate; a 5-line view gets
    # a 2-line margin.
    return max(0, min(padding, (dimension - 1) // 2))


def _scroll_axis(cursor: int, scroll: int, dimension: int, padding: int) -> int:
    pad = effective_padding(padding, dimension)
    if cursor < scroll + pad:
        return max(0, cursor - pad)
    if cursor >= scroll + dimension - pad:
        return max(0, cursor - max(0, dimension - pad - 1))
    return scroll


def compute_scroll(
    document: Document,
    viewport: Viewport,
    *,
    vertical_padding: int = VERTICAL_PADDING,
    horizontal_padding: int = HORIZONTAL_PADDING,
) -> Tuple[int, int]:
    """Return the ``(x, y)`` scroll offset that keeps the cursor in the margins.

    The offset only moves when the cursor gets closer than the padding to an
    edge, and then by the minimum amount. Applying the result and calling
    again yields the same offset.
    """

    line, column = document.cursor_location()
    scroll_x, scroll_y = document.scroll_offset
    new_y = _scroll_axis(line, scroll_y, viewport.height, vertical_padding)
    new_x = _scroll_axis(column, scroll_x, viewport.width, horizontal_padding)
    return (new_x, min(new_y, document.content.len_lines()))


def rescroll(
    document: Document,
    viewport: Viewport,
    *,
    vertical_padding: int = VERTICAL_PADDING,
    horizontal_padding: int = HORIZONTAL_PADDING,
) -> bool:
    """Store the recomputed offset on ``document``; ``True`` if it changed."""

    updated = compute_scroll(
        document,
        viewport,
        vertical_padding=vertical_padding,
        horizontal_padding=horizontal_padding,
    )
    if updated == document.scroll_offset:
        return False
    document.scroll_offset = updated
    return True


__all__ = [
    "Viewport",
    "VERTICAL_PADDING",
    "HORIZONTAL_PADDING",
    "compute_scroll",
    "effective_padding",
    "rescroll",
]
