import pytest

from evtr.errors import ConfigError
from evtr.keymap import (
    KeyBinding,
    KeyCode,
    KeyEvent,
    Modifiers,
    key_list,
    parse_key_binding,
)


def test_parse_key_binding_supports_modified_and_plain_keys():
    assert parse_key_binding("ctrl-c").display == "Ctrl-c"
    assert parse_key_binding("shift-g").display == "Shift-G"
    assert parse_key_binding("?").display == "?"


def test_shift_uppercases_letter_code():
    binding = parse_key_binding("shift-g")

    assert binding.code == "G"
    assert binding.modifiers == Modifiers.SHIFT


def test_named_keys_parse_to_key_codes():
    binding = parse_key_binding("pagedown")

    assert binding.code is KeyCode.PAGE_DOWN
    assert binding.display == "PageDown"
    assert binding.modifiers == Modifiers.NONE


def test_input_is_trimmed_and_case_insensitive():
    assert parse_key_binding("  CTRL-C ") == parse_key_binding("ctrl-c")


def test_modifier_display_order_is_canonical():
    assert parse_key_binding("alt-ctrl-x").display == "Ctrl-Alt-x"


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("", "must not be empty"),
        ("   ", "must not be empty"),
        ("meta-x", "unsupported key modifier in binding: meta"),
        ("ctrl-foo", "unsupported key binding base: foo"),
    ],
)
def test_invalid_bindings_are_rejected(raw, message):
    with pytest.raises(ConfigError, match=message):
        parse_key_binding(raw)


def test_matches_checks_code_and_relevant_modifiers():
    ctrl_c = parse_key_binding("ctrl-c")

    assert ctrl_c.matches(KeyEvent("c", Modifiers.CONTROL))
    assert not ctrl_c.matches(KeyEvent("c"))
    assert ctrl_c.matches(KeyEvent("c", Modifiers.CONTROL | Modifiers.SUPER))


def test_matches_shifted_character_event():
    end = parse_key_binding("shift-g")

    assert end.matches(KeyEvent("G", Modifiers.SHIFT))
    assert not end.matches(KeyEvent("g"))


def test_matches_named_key_event():
    assert parse_key_binding("home").matches(KeyEvent(KeyCode.HOME))


def test_key_list_parses_every_spec():
    bindings = key_list(["up", "ctrl-p"])

    assert [binding.display for binding in bindings] == ["Up", "Ctrl-p"]
    assert all(isinstance(binding, KeyBinding) for binding in bindings)


def test_key_list_raises_on_bad_spec():
    with pytest.raises(ConfigError):
        key_list(["up", "bogus-key"])