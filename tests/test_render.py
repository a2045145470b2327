from __future__ import annotations

from pyne.buffer import Document
from pyne.editor import Mode, Span, Viewport, VisibleLines, split_selection
from pyne.editor.render import (
    iter_styled_lines,
    join_spans,
    line_numbers,
    render_line,
    status_line,
    visible_content,
)


def make_document(text: str, cursor: int = 0) -> Document:
    document = Document.from_text(text)
    document.set_cursor(cursor)
    return document


def test_visible_content_ends_cursor_line_like_the_document() -> None:
    document = make_document("abc\ndef\nghi", cursor=9)

    assert visible_content(document, Viewport(80, 24)) == "abc\ndef\nghi"


def test_non_cursor_last_line_gets_newline() -> None:
    document = make_document("abc\ndef\nghi", cursor=0)

    assert visible_content(document, Viewport(80, 24)) == "abc\ndef\nghi\n"


def test_trailing_whitespace_kept_only_on_cursor_line() -> None:
    document = make_document("ab  \ncd  ", cursor=0)

    assert visible_content(document, Viewport(80, 24)) == "ab  \ncd\n"


def test_clipped_line_keeps_text_up_to_right_edge() -> None:
    document = make_document("abcdefgh  \nxy", cursor=11)

    assert visible_content(document, Viewport(4, 24)) == "abcd\nxy"


def test_line_scrolled_past_its_end_is_bare_newline() -> None:
    document = make_document("abcdefghij\nxy\nabcdefghij", cursor=6)
    document.scroll_offset = (5, 0)

    lines = list(VisibleLines(document, Viewport(3, 24)))

    assert lines == ["fgh\n", "\n", "fgh\n"]


def test_line_scrolled_exactly_to_its_length_is_bare_newline() -> None:
    document = make_document("abc\nabcdef", cursor=10)
    document.scroll_offset = (3, 0)

    assert render_line(document.content, 0, 3, 5, is_cursor_line=False) == "\n"


def test_cursor_line_past_its_end_renders_empty() -> None:
    document = make_document("ab", cursor=2)

    assert render_line(document.content, 0, 5, 3, is_cursor_line=True) == ""


def test_visible_lines_respects_vertical_window() -> None:
    document = make_document("\n".join(str(i) for i in range(10)), cursor=0)
    document.scroll_offset = (0, 4)
    view = VisibleLines(document, Viewport(10, 3))

    assert view.line_range == range(4, 7)
    assert len(view) == 3
    assert view.text() == "4\n5\n6\n"
    assert view.text() == view.text()


def test_split_selection_three_spans() -> None:
    spans = split_selection("abcdef", 10, (12, 14))

    assert spans == [Span("ab"), Span("cd", selected=True), Span("ef")]


def test_split_selection_outside_line_is_single_span() -> None:
    assert split_selection("abc", 0, (5, 9)) == [Span("abc")]
    assert split_selection("abc", 0, None) == [Span("abc")]
    # end is exclusive
    assert split_selection("abc", 4, (0, 4)) == [Span("abc")]


def test_styled_lines_split_selection_across_lines() -> None:
    document = make_document("abc\ndef\nghi", cursor=6)
    document.selection_anchor = 1

    styled = list(iter_styled_lines(document, Viewport(80, 24)))

    assert styled[0] == [Span("a"), Span("bc", selected=True)]
    assert styled[1] == [Span("de", selected=True), Span("f")]
    assert styled[2] == [Span("ghi")]
    assert [join_spans(line) for line in styled] == ["abc", "def", "ghi"]


def test_line_numbers_pad_to_viewport_height() -> None:
    document = make_document("a\nb", cursor=0)

    assert line_numbers(document, Viewport(10, 4)) == ["   1", "   2", "    ", "    "]
    assert line_numbers(None, Viewport(10, 2)) == ["    ", "    "]


def test_status_line_layout() -> None:
    assert status_line(Mode.INSERT, (0, 4), 20) == " INS " + " " * 11 + "1:5 "
    assert status_line(Mode.NORMAL, None, 30).endswith("No active buffer ")
    assert status_line(Mode.VISUAL, (9, 9), 7) == " VIS 10"
    assert status_line(Mode.NORMAL, (0, 0), 3) == " NO"
