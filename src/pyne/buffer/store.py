"""Keyed collection of open documents with a current-document pointer."""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from pyne.runtime import telemetry
from pyne.runtime.settings import EditorSettings, config_dir

from .document import Document
from .errors import InvalidUtf8, IoFailure, NoActiveBuffer


class BufferStore:
    """Owns every open ``Document`` keyed by its canonical path.

    Scratch documents get a generated key ``<dir>/<prefix><uuid4>.txt`` that is
    not written to disk until the document is saved. Documents are never
    removed; saving under a new path moves the entry to the new key.
    """

    def __init__(
        self,
        *,
        starting_directory: Optional[os.PathLike[str] | str] = None,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        self._documents: Dict[Path, Document] = {}
        self._current: Optional[Path] = None
        self._starting_directory: Optional[Path] = (
            Path(starting_directory) if starting_directory is not None else None
        )
        self.logger = telemetry.get_logger("pyne.store")

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        return key in self._documents

    @property
    def documents(self) -> Mapping[Path, Document]:
        return MappingProxyType(self._documents)

    @property
    def current_key(self) -> Optional[Path]:
        return self._current

    @property
    def current(self) -> Optional[Document]:
        if self._current is None:
            return None
        return self._documents.get(self._current)

    def require_current(self) -> Document:
        document = self.current
        if document is None:
            raise NoActiveBuffer()
        return document

    @property
    def starting_directory(self) -> Optional[Path]:
        return self._starting_directory

    def set_starting_directory(self, path: os.PathLike[str] | str) -> None:
        self._starting_directory = Path(path)

    def resolve_path(self, path: os.PathLike[str] | str) -> Path:
        candidate = Path(path).expanduser()
        if not candidate.is_absolute() and self._starting_directory is not None:
            candidate = self._starting_directory / candidate
        return candidate.resolve()

    def switch_to(self, key: Path) -> Document:
        if key not in self._documents:
            raise KeyError(f"No document stored under '{key}'")
        self._current = key
        return self._documents[key]

    def open(self, path: os.PathLike[str] | str) -> Document:
        """Load ``path`` verbatim and make it current.

        A path that is already open is switched to without rereading, so
        unsaved edits survive.
        """

        key = self.resolve_path(path)
        if key in self._documents:
            self._current = key
            telemetry.record_event(
                "store.switch", data={"path": str(key)}, logger_name="pyne.store"
            )
            return self._documents[key]

        try:
            raw = key.read_bytes()
        except OSError as exc:
            self.logger.error(f"open failed: {key}: {exc}")
            raise IoFailure(f"Failed to open {key}: {exc}", path=key) from exc
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            self.logger.error(f"open refused, not UTF-8: {key}")
            raise InvalidUtf8(
                f"Cannot open binary or non-UTF8 file {key}", path=key
            ) from exc

        document = Document.from_text(text, name=key.name)
        self._documents[key] = document
        self._current = key
        telemetry.record_event(
            "store.open",
            data={"path": str(key), "chars": len(text)},
            logger_name="pyne.store",
        )
        return document

    def scratch_directory(self) -> Path:
        if self._starting_directory is not None:
            return self._starting_directory
        return config_dir()

    def create_scratch(self) -> Path:
        """Allocate an empty scratch document and make it current."""

        directory = self.scratch_directory()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self.logger.error(f"cannot create scratch directory {directory}: {exc}")
            raise IoFailure(
                f"Failed to create config directory: {directory}", path=directory
            ) from exc

        key = (directory / f"{self.settings.scratch_prefix}{uuid.uuid4()}.txt").resolve()
        self._documents[key] = Document(name=key.name)
        self._current = key
        telemetry.record_event(
            "store.scratch", data={"path": str(key)}, logger_name="pyne.store"
        )
        return key

    def is_scratch(self, key: Optional[Path] = None) -> bool:
        target = key if key is not None else self._current
        if target is None:
            return False
        return target.name.startswith(self.settings.scratch_prefix)

    def save(self, path: Optional[os.PathLike[str] | str] = None) -> Path:
        """Write the current document to ``path`` (default: its own key).

        Saving to a different path re-keys the document so later saves and
        ``current_key`` follow the new location.
        """

        current = self._current
        if current is None:
            raise NoActiveBuffer()
        document = self.require_current()
        target = self.resolve_path(path) if path is not None else current
        if target != current and target in self._documents:
            self.logger.error(f"save refused, {target} is open in another buffer")
            raise IoFailure(
                f"Cannot save to {target}: already open in another buffer",
                path=target,
            )
        try:
            target.write_bytes(document.text.encode("utf-8"))
        except OSError as exc:
            self.logger.error(f"save failed: {target}: {exc}")
            raise IoFailure(f"Failed to save {target}: {exc}", path=target) from exc

        document.is_modified = False
        if target != current:
            del self._documents[current]
            self._documents[target] = document
            document.name = target.name
            self._current = target
        telemetry.record_event(
            "store.save",
            data={"path": str(target), "chars": len(document)},
            logger_name="pyne.store",
        )
        return target

    def has_unsaved_changes(self) -> bool:
        return any(document.is_modified for document in self._documents.values())

    def unsaved_keys(self) -> List[Path]:
        return [key for key, document in self._documents.items() if document.is_modified]


__all__ = ["BufferStore"]
