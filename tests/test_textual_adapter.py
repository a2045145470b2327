from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from pyne.adapters.textual import (
    Frame,
    TextualEditorAdapter,
    TextualUIHooks,
    create_default_manager,
)
from pyne.editor import Editor, MemoryClipboard, Span
from pyne.runtime import EditorSettings


def make_adapter(tmp_path: Path, hooks: TextualUIHooks, text: str = "") -> TextualEditorAdapter:
    editor = Editor(clipboard=MemoryClipboard(), settings=EditorSettings())
    editor.set_starting_directory(tmp_path)
    (tmp_path / "doc.txt").write_text(text, encoding="utf-8")
    editor.open_file("doc.txt")
    return TextualEditorAdapter(create_default_manager(editor), hooks)


def test_adapter_renders_frames(tmp_path: Path) -> None:
    frames: List[Frame] = []
    adapter = make_adapter(tmp_path, TextualUIHooks(render=frames.append))

    adapter.resize(20, 4)
    adapter.handle_textual_key("i")
    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")

    frame = frames[-1]
    assert frame.lines == [[Span("hi")]]
    assert frame.gutter == ["   1", "    ", "    ", "    "]
    assert frame.status == " INS " + " " * 11 + "1:3 "
    assert frame.cursor == (2, 0)
    assert frame.command is None
    assert frame.debug is None


def test_adapter_cursor_is_relative_to_scroll(tmp_path: Path) -> None:
    frames: List[Frame] = []
    adapter = make_adapter(
        tmp_path, TextualUIHooks(render=frames.append), text="\n" * 30
    )
    adapter.resize(10, 5)

    for _ in range(12):
        adapter.handle_textual_key("j", text="j")

    assert adapter.editor.scroll_offset() == (0, 10)
    assert frames[-1].cursor == (0, 2)
    assert frames[-1].gutter[0] == "  11"


def test_adapter_shows_command_line_and_messages(tmp_path: Path) -> None:
    frames: List[Frame] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        render=frames.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = make_adapter(tmp_path, hooks)

    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("f", text="f")
    assert frames[-1].command == "f"
    adapter.handle_textual_key("enter")

    assert frames[-1].command is None
    assert frames[-1].message == "Unknown command: f"
    assert ("command.submit", "f") in events
    assert ("command.error", "f") in events


def test_adapter_calls_quit_hook(tmp_path: Path) -> None:
    quits: List[bool] = []
    hooks = TextualUIHooks(render=lambda frame: None, quit=lambda: quits.append(True))
    adapter = make_adapter(tmp_path, hooks, text="abc")

    for key in (":", "q"):
        adapter.handle_textual_key(key, text=key)
    result = adapter.handle_textual_key("enter")

    assert result.status == "quit"
    assert quits == [True]


def test_adapter_surfaces_visual_selection(tmp_path: Path) -> None:
    frames: List[Frame] = []
    events: List[Dict[str, Any]] = []
    hooks = TextualUIHooks(
        render=frames.append,
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = make_adapter(tmp_path, hooks, text="abcdef")

    adapter.handle_textual_key("v", text="v")
    adapter.handle_textual_key("l", text="l")
    adapter.handle_textual_key("l", text="l")

    visual_payloads = [event for event in events if event["name"] == "visual.selection"]
    assert visual_payloads
    assert visual_payloads[-1]["payload"]["range"] == (0, 2)
    assert frames[-1].lines == [[Span("ab", selected=True), Span("cdef")]]


def test_adapter_debug_line(tmp_path: Path) -> None:
    frames: List[Frame] = []
    adapter = make_adapter(tmp_path, TextualUIHooks(render=frames.append), text="ab")

    adapter.handle_textual_key("D", text="D")

    assert frames[-1].debug is not None
    assert frames[-1].debug.startswith("cursor 0 |")


def test_adapter_emits_log_lines(tmp_path: Path) -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(render=lambda frame: None, log=logs.append)
    adapter = make_adapter(tmp_path, hooks)

    adapter.handle_textual_key("i")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
