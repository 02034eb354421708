import dataclasses

import pytest

from evtr.keymap import key_list
from evtr.settings import (
    Config,
    Rgb,
    SelectorConfig,
    SortOrder,
    StartupFocus,
    default_config,
    default_keymap,
)


def test_default_selector_settings():
    config = default_config()

    assert config.selector.sort is SortOrder.PATH
    assert config.selector.page_scroll_size == 10


def test_default_monitor_settings():
    config = default_config()

    assert config.monitor.startup_focus is StartupFocus.AUTO
    assert config.monitor.joystick_invert_y is True


def test_default_monitor_layout_percentages():
    layout = default_config().layout.monitor

    assert layout.axes_box_percent == 75
    assert layout.joystick_hat_joystick_percent == 70


def test_default_keymap_bindings():
    keymap = default_keymap()

    assert list(keymap.selector.move_up) == key_list(["up", "ctrl-p"])
    assert list(keymap.selector.exit) == key_list(["ctrl-c"])
    assert [b.display for b in keymap.monitor.end][1] == "Shift-G"


def test_default_keymap_matches_config_keys():
    assert default_keymap() == default_config().keys


def test_default_config_is_stable():
    assert default_config() == Config()


def test_rgb_hex_rendering():
    assert Rgb(0x11, 0x22, 0x33).hex() == "#112233"


def test_enum_string_values():
    assert str(SortOrder.NAME) == "name"
    assert SortOrder("path") is SortOrder.PATH
    assert StartupFocus("buttons") is StartupFocus.BUTTONS


def test_config_sections_are_immutable():
    selector = SelectorConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        selector.page_scroll_size = 3  # type: ignore[misc]

    assert selector.page_scroll_size == 10


def test_replace_keeps_other_fields():
    selector = dataclasses.replace(SelectorConfig(), sort=SortOrder.NAME)

    assert selector.sort is SortOrder.NAME
    assert selector.page_scroll_size == SelectorConfig().page_scroll_size