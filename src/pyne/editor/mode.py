"""Editing modes."""

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """Modal editing state; values double as mode handler names."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Mode.NORMAL: "NOR",
    Mode.INSERT: "INS",
    Mode.VISUAL: "VIS",
}

__all__ = ["Mode"]
