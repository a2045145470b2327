"""Executable Textual app that hosts the pyne editor."""

from __future__ import annotations

import argparse
import os
from typing import Any, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use pyne.adapters.textual.app"
    ) from exc

from pyne.buffer import EditorError
from pyne.editor import Editor
from pyne.runtime import telemetry

from .controller import Frame, TextualEditorAdapter, TextualUIHooks, create_default_manager

GUTTER_WIDTH = 5
SELECTED_STYLE = "reverse"
CURSOR_STYLE = "reverse underline"


def render_text(frame: Frame) -> Text:
    """Turn a frame's styled lines into one rich ``Text`` with the cursor drawn."""

    text = Text(no_wrap=True, overflow="crop")
    cursor_col, cursor_row = frame.cursor if frame.cursor is not None else (-1, -1)
    for row, spans in enumerate(frame.lines):
        line = Text(no_wrap=True)
        for span in spans:
            line.append(span.text.rstrip("\n"), SELECTED_STYLE if span.selected else "")
        if row == cursor_row and cursor_col >= 0:
            if len(line) <= cursor_col:
                line.pad_right(cursor_col + 1 - len(line))
            line.stylize(CURSOR_STYLE, cursor_col, cursor_col + 1)
        if row:
            text.append("\n")
        text.append_text(line)
    return text


class PyneApp(App[None]):
    """Minimal Textual UI embedding the editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor-area {
		height: 1fr;
	}

	#gutter {
		width: 5;
		color: $text-muted;
	}

	#text-view {
		width: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#message-line {
		height: 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, editor: Editor) -> None:
        super().__init__()
        self.editor = editor
        self.adapter: TextualEditorAdapter | None = None
        self._gutter: Static | None = None
        self._text_view: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None
        self.logger = telemetry.get_logger("pyne.app")

    def compose(self) -> ComposeResult:
        with Horizontal(id="editor-area"):
            self._gutter = Static("", id="gutter")
            self._text_view = Static("", id="text-view")
            yield self._gutter
            yield self._text_view
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            render=self._render_frame,
            handle_event=self._handle_event,
            quit=self.exit,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(create_default_manager(self.editor), hooks)
        self._resize_editor()

    def on_resize(self, event: events.Resize) -> None:
        del event
        self._resize_editor()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.prevent_default()
        event.stop()

    def _resize_editor(self) -> None:
        if not self.adapter:
            return
        width, height = self.size
        # two rows for the status and message lines
        self.adapter.resize(max(0, width - GUTTER_WIDTH), max(0, height - 2))

    def _render_frame(self, frame: Frame) -> None:
        if self._gutter:
            self._gutter.update("\n".join(frame.gutter))
        if self._text_view:
            self._text_view.update(render_text(frame))
        if self._status_widget:
            self._status_widget.update(Text(frame.status, style="bold"))
        if self._message_widget:
            if frame.command is not None:
                self._message_widget.update(f":{frame.command}")
            elif frame.debug:
                self._message_widget.update(frame.debug)
            else:
                self._message_widget.update(frame.message or "")

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "editor.error":
            self.logger.warning(f"{name}: {payload}")

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key == "ctrl+q":
            return None
        modifiers = tuple(part for part in key.split("+")[:-1] if part != "shift")
        if event.character and len(event.character) == 1 and event.is_printable:
            return (event.character, event.character, modifiers)
        name = key.split("+")[-1]
        return (name, None, modifiers)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Modal terminal text editor.")
    parser.add_argument("file", nargs="?", help="File to open (scratch buffer if omitted)")
    return parser.parse_args(argv)


def build_editor(path: Optional[str] = None) -> Editor:
    """Editor rooted at the working directory with ``path`` (or a scratch doc) open."""

    editor = Editor()
    editor.set_starting_directory(os.getcwd())
    if path:
        editor.open_file(path)
    else:
        editor.new_scratch_buffer()
    return editor


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    # the terminal belongs to the UI: log to file only
    telemetry.configure(preset=os.environ.get("PYNE_LOG_PRESET", "production"))
    try:
        editor = build_editor(args.file)
    except EditorError as exc:
        print(f"pyne: {exc}")
        return 1
    PyneApp(editor).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
