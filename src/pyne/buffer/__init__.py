"""Document storage: text content, documents and the buffer store."""

from .document import Document, Location, Selection
from .errors import (
    ClipboardUnavailable,
    EditorError,
    InvalidUtf8,
    IoFailure,
    NoActiveBuffer,
)
from .store import BufferStore
from .text import TextContent

__all__ = [
    "BufferStore",
    "Document",
    "Location",
    "Selection",
    "TextContent",
    "EditorError",
    "IoFailure",
    "InvalidUtf8",
    "NoActiveBuffer",
    "ClipboardUnavailable",
]
