from __future__ import annotations

from pathlib import Path

import pytest

from pyne.buffer import BufferStore, InvalidUtf8, IoFailure, NoActiveBuffer
from pyne.runtime import EditorSettings


def make_store(tmp_path: Path) -> BufferStore:
    return BufferStore(starting_directory=tmp_path, settings=EditorSettings())


def test_open_resolves_relative_to_starting_directory(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("alpha\nbeta\n", encoding="utf-8")
    store = make_store(tmp_path)

    document = store.open("notes.txt")

    assert store.current_key == (tmp_path / "notes.txt").resolve()
    assert store.current is document
    assert document.text == "alpha\nbeta\n"
    assert document.cursor_pos == 0
    assert document.is_modified is False


def test_open_then_save_round_trips_bytes(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    raw = "π ≈ 3.14\r\ntabs\there\n\n".encode("utf-8")
    path.write_bytes(raw)
    store = make_store(tmp_path)

    store.open(path)
    store.save(path)

    assert path.read_bytes() == raw
    assert store.current is not None
    assert store.current.is_modified is False


def test_open_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\x00abc")
    store = make_store(tmp_path)

    with pytest.raises(InvalidUtf8) as excinfo:
        store.open(path)

    assert "non-UTF8" in str(excinfo.value)
    assert store.current is None
    assert len(store) == 0


def test_open_missing_file_raises_io_failure(tmp_path: Path) -> None:
    store = make_store(tmp_path)

    with pytest.raises(IoFailure):
        store.open("missing.txt")

    assert store.current is None


def test_reopen_keeps_unsaved_edits(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("abc", encoding="utf-8")
    store = make_store(tmp_path)
    first = store.open("a.txt")
    first.insert("x")

    again = store.open("a.txt")

    assert again is first
    assert again.text == "xabc"
    assert len(store) == 1


def test_save_without_document_raises(tmp_path: Path) -> None:
    store = make_store(tmp_path)

    with pytest.raises(NoActiveBuffer):
        store.save()


def test_save_under_new_path_rekeys_document(tmp_path: Path) -> None:
    (tmp_path / "old.txt").write_text("abc", encoding="utf-8")
    store = make_store(tmp_path)
    document = store.open("old.txt")
    document.insert("z")

    target = store.save("new.txt")

    assert target == (tmp_path / "new.txt").resolve()
    assert (tmp_path / "new.txt").read_text(encoding="utf-8") == "zabc"
    assert store.current_key == target
    assert store.current is document
    assert (tmp_path / "old.txt").resolve() not in store
    assert document.name == "new.txt"


def test_scratch_document_lives_in_starting_directory(tmp_path: Path) -> None:
    store = make_store(tmp_path)

    key = store.create_scratch()

    assert key.parent == tmp_path.resolve()
    assert key.name.startswith("scratch_")
    assert key.suffix == ".txt"
    assert not key.exists()
    assert store.is_scratch() is True
    assert store.current is not None
    assert store.current.text == ""


def test_scratch_keys_are_unique(tmp_path: Path) -> None:
    store = make_store(tmp_path)

    first = store.create_scratch()
    second = store.create_scratch()

    assert first != second
    assert store.current_key == second


def test_scratch_directory_failure_raises_io_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = BufferStore(starting_directory=blocker / "sub", settings=EditorSettings())

    with pytest.raises(IoFailure):
        store.create_scratch()


def test_scratch_without_starting_directory_uses_config_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PYNE_CONFIG_DIR", str(tmp_path / "cfg"))
    store = BufferStore(settings=EditorSettings())

    key = store.create_scratch()

    assert key.parent == (tmp_path / "cfg").resolve()
    assert (tmp_path / "cfg").is_dir()


def test_unsaved_keys_track_modified_documents(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    store = make_store(tmp_path)
    store.open("a.txt").insert("!")
    store.open("b.txt")

    assert store.has_unsaved_changes() is True
    assert store.unsaved_keys() == [(tmp_path / "a.txt").resolve()]
    assert store.is_scratch() is False


def test_save_onto_path_open_in_another_buffer_is_refused(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("aaa", encoding="utf-8")
    (tmp_path / "b.txt").write_text("bbb", encoding="utf-8")
    store = make_store(tmp_path)
    store.open("b.txt").insert("EDIT-")
    store.open("a.txt")

    with pytest.raises(IoFailure, match="already open in another buffer"):
        store.save("b.txt")

    assert len(store) == 2
    assert store.current_key == (tmp_path / "a.txt").resolve()
    assert store.unsaved_keys() == [(tmp_path / "b.txt").resolve()]
    assert store.documents[(tmp_path / "b.txt").resolve()].text == "EDIT-bbb"
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "bbb"
