"""Textual adapter: the controller is importable without Textual installed."""

from .controller import Frame, TextualEditorAdapter, TextualUIHooks, create_default_manager

__all__ = ["Frame", "TextualEditorAdapter", "TextualUIHooks", "create_default_manager"]
