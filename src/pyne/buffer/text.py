"""Character-indexed text storage with a line-start index."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator, List


class TextContent:
    """Editable text addressed by character offsets.

    Lines are terminated by ``"\\n"``; the terminator belongs to the line it
    ends. Text ending with a newline therefore has a trailing empty line, and
    empty text has exactly one empty line. Offset/line conversion is a binary
    search over the cached line starts.
    """

    __slots__ = ("_text", "_line_starts")

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._line_starts: List[int] = _scan_line_starts(text, 0)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextContent({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextContent):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def len_chars(self) -> int:
        return len(self._text)

    def len_lines(self) -> int:
        return len(self._line_starts)

    def char_to_line(self, offset: int) -> int:
        offset = max(0, min(offset, len(self._text)))
        return bisect_right(self._line_starts, offset) - 1

    def line_to_char(self, line: int) -> int:
        """Offset of the first character of ``line``.

        ``line == len_lines()`` maps to the end of the text.
        """

        if line >= len(self._line_starts):
            return len(self._text)
        return self._line_starts[max(0, line)]

    def line(self, index: int) -> str:
        """Line ``index`` including its terminator, if it has one."""

        start = self._line_starts[index]
        return self._text[start : self.line_to_char(index + 1)]

    def line_len(self, index: int) -> int:
        """Number of characters on ``index`` excluding the terminator."""

        start = self._line_starts[index]
        end = self.line_to_char(index + 1)
        if end > start and self._text[end - 1] == "\n":
            end -= 1
        return end - start

    def has_terminator(self, index: int) -> bool:
        return index < len(self._line_starts) - 1

    def lines(self) -> Iterator[str]:
        for index in range(len(self._line_starts)):
            yield self.line(index)

    def slice(self, start: int, end: int) -> str:
        return self._text[start:end]

    def insert(self, offset: int, text: str) -> None:
        if not text:
            return
        offset = max(0, min(offset, len(self._text)))
        self._text = self._text[:offset] + text + self._text[offset:]
        line = bisect_right(self._line_starts, offset)
        shifted = [start + len(text) for start in self._line_starts[line:]]
        self._line_starts[line:] = _scan_line_starts(text, offset)[1:] + shifted

    def remove(self, start: int, end: int) -> None:
        start = max(0, start)
        end = min(end, len(self._text))
        if start >= end:
            return
        removed = end - start
        self._text = self._text[:start] + self._text[end:]
        first = bisect_right(self._line_starts, start)
        last = bisect_right(self._line_starts, end)
        shifted = [line_start - removed for line_start in self._line_starts[last:]]
        self._line_starts[first:] = shifted


def _scan_line_starts(text: str, base: int) -> List[int]:
    starts = [base]
    index = text.find("\n")
    while index != -1:
        starts.append(base + index + 1)
        index = text.find("\n", index + 1)
    return starts


__all__ = ["TextContent"]
