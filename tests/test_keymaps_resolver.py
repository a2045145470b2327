from __future__ import annotations

from pyne.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeymapRegistry,
    KeymapResolver,
    load_default_keymaps,
)


def make_resolver() -> tuple[KeymapRegistry, KeymapResolver]:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return registry, KeymapResolver(registry)


def test_gg_resolves_after_both_keys() -> None:
    _, resolver = make_resolver()

    result = resolver.resolve("normal", ("g", "g"))

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == "normal.gg"
    assert result.match.action.id == "core.move_document_start"
    assert result.consumed == 2


def test_single_g_is_pending() -> None:
    _, resolver = make_resolver()

    result = resolver.resolve("visual", ("g",))

    assert result.status == "pending"
    assert result.next_expected == ("g",)


def test_single_key_bindings_match_immediately() -> None:
    _, resolver = make_resolver()

    assert resolver.resolve("normal", ("G",)).match.action.id == "core.move_document_end"
    assert resolver.resolve("insert", ("ESC",)).match.action.id == "core.exit_to_normal"


def test_misses_for_unbound_sequences_and_modes() -> None:
    _, resolver = make_resolver()

    assert resolver.resolve("normal", ("g", "x")).status == "miss"
    assert resolver.resolve("insert", ("g", "g")).status == "miss"
    assert resolver.resolve("explorer", ("i",)).status == "miss"
    assert resolver.resolve("normal", ()).status == "miss"


def test_new_bindings_are_seen_without_rebuilding_the_resolver() -> None:
    registry, resolver = make_resolver()
    assert resolver.resolve("normal", ("a",)).status == "miss"

    registry.register_action(ActionRef(id="custom.append", handler=lambda *_: None))
    registry.register_binding(
        Binding(
            id="normal.a",
            mode="normal",
            sequence=KeySequence.from_strings("a"),
            action_id="custom.append",
        )
    )

    result = resolver.resolve("normal", ("a",))
    assert result.status == "match"
    assert result.match.action.id == "custom.append"

    registry.unregister_binding("normal.gg")
    assert resolver.resolve("normal", ("g",)).status == "miss"
