import pytest

from pyne.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from pyne.keymaps.defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_sequence(*keys: str) -> KeySequence:
    return KeySequence.from_strings(*keys)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    sequence: KeySequence | None = None,
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=sequence or make_sequence("g", "g"),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.gg")

    registry.register_binding(binding)

    assert len(list(registry.iter_bindings())) == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]
    assert registry.find("normal", "g g") == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.gg.duplicate"))


def test_same_keys_in_different_modes_do_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.gg"))
    registry.register_binding(make_binding(binding_id="visual.gg", mode="visual"))

    assert len(list(registry.iter_bindings())) == 2


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.gg"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert len(list(registry.iter_bindings())) == 0
    assert registry.revision() == before + 1


def test_named_keys_are_normalized() -> None:
    assert make_sequence("escape").tokens == ("ESC",)
    assert make_sequence("<Esc>").tokens == ("ESC",)
    assert make_sequence("return").tokens == ("ENTER",)
    assert make_sequence("D").tokens == ("D",)


def test_load_default_keymaps_registers_everything() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert len(list(registry.iter_bindings())) == len(DEFAULT_BINDINGS)
    assert registry.get_binding("normal.i").action_id == "core.enter_insert"
    assert registry.get_binding("visual.y").action_id == "visual.yank_selection"
    assert registry.get_action("command.submit_line") in DEFAULT_ACTIONS


def test_load_default_keymaps_exclude_and_extra() -> None:
    registry = KeymapRegistry()
    custom = Binding(
        id="normal.a",
        mode="normal",
        sequence=KeySequence.from_strings("a"),
        action_id="core.enter_insert",
    )

    load_default_keymaps(
        registry, exclude_bindings=("normal.i",), extra_bindings=(custom,)
    )

    assert registry.find("normal", "i") is None
    assert registry.find("normal", "a") == custom


def test_load_default_keymaps_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    with pytest.raises(ValueError):
        load_default_keymaps(registry)

    load_default_keymaps(registry, replace=True)
    assert len(list(registry.iter_bindings())) == len(DEFAULT_BINDINGS)
