"""Reading and writing the TOML configuration file."""

from __future__ import annotations

import string
import tomllib
from dataclasses import fields
from enum import Enum
from typing import Any, Callable, Mapping

import tomli_w

from evtr.errors import ConfigError
from evtr.keymap import KeyBinding
from evtr.settings import (
    Config,
    KeymapConfig,
    LayoutConfig,
    MonitorConfig,
    MonitorKeymap,
    MonitorLayoutConfig,
    SelectorConfig,
    SelectorKeymap,
    SelectorLayoutConfig,
    SortOrder,
    StartupFocus,
    ThemeConfig,
    ThemePalette,
    default_config,
)
from evtr.validate import (
    parse_bindings,
    parse_hex_color_field,
    require_positive,
    require_range,
    validate_selector_layout,
    validate_unique_key_bindings,
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class _SchemaError(ValueError):
    """The document does not have the shape of a configuration file."""


Checker = Callable[[Any, str], Any]


def _integer(minimum: int, maximum: int, type_name: str) -> Checker:
    def check(value: Any, path: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _SchemaError(f"{path}: invalid type, expected {type_name}")
        if not minimum <= value <= maximum:
            raise _SchemaError(
                f"{path}: invalid value {value}, expected {type_name}"
            )
        return value

    return check


def _boolean(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise _SchemaError(f"{path}: invalid type, expected a boolean")
    return value


def _text(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise _SchemaError(f"{path}: invalid type, expected a string")
    return value


def _string_list(value: Any, path: str) -> list[str]:
    if not isinstance(value, list):
        raise _SchemaError(f"{path}: invalid type, expected a sequence")
    return [_text(item, path) for item in value]


def _variant(enum_type: type[Enum]) -> Checker:
    allowed = [member.value for member in enum_type]

    def check(value: Any, path: str) -> str:
        if not isinstance(value, str):
            raise _SchemaError(f"{path}: invalid type, expected a string")
        if value not in allowed:
            expected = ", ".join(f"`{name}`" for name in allowed)
            raise _SchemaError(
                f"{path}: unknown variant `{value}`, expected one of {expected}"
            )
        return value

    return check


_I32 = _integer(-(2**31), 2**31 - 1, "i32")
_USIZE = _integer(0, 2**64 - 1, "usize")
_U16 = _integer(0, 2**16 - 1, "u16")

_SCHEMA: dict[str, Any] = {
    "selector": {
        "sort": _variant(SortOrder),
        "page_scroll_size": _I32,
    },
    "monitor": {
        "page_scroll_steps": _USIZE,
        "startup_focus": _variant(StartupFocus),
        "joystick_invert_y": _boolean,
        "relative_display_range": _I32,
    },
    "theme": {
        "palette": {name.name: _text for name in fields(ThemePalette)},
    },
    "layout": {
        "selector": {
            "margin_percent": _U16,
            "content_width_percent": _U16,
        },
        "monitor": {
            "buttons_per_row": _USIZE,
            "main_column_percent": _U16,
            "joystick_gap": _U16,
            "axes_box_percent": _U16,
            "joystick_hat_joystick_percent": _U16,
        },
    },
    "keys": {
        "selector": {name.name: _string_list for name in fields(SelectorKeymap)},
        "monitor": {name.name: _string_list for name in fields(MonitorKeymap)},
    },
}


def _merge(
    schema: Mapping[str, Any],
    defaults: Mapping[str, Any],
    given: Any,
    path: str,
) -> dict[str, Any]:
    where = path or "top level"
    if not isinstance(given, Mapping):
        raise _SchemaError(f"{where}: invalid type, expected a table")
    for name in given:
        if name not in schema:
            expected = ", ".join(f"`{known}`" for known in schema)
            raise _SchemaError(
                f"unknown field `{name}` in {where}, expected one of {expected}"
            )

    merged: dict[str, Any] = {}
    for name, spec in schema.items():
        dotted = f"{path}.{name}" if path else name
        if name not in given:
            merged[name] = defaults[name]
        elif isinstance(spec, dict):
            merged[name] = _merge(spec, defaults[name], given[name], dotted)
        else:
            merged[name] = spec(given[name], dotted)
    return merged


def _resolve_document(document: Any) -> dict[str, Any]:
    return _merge(_SCHEMA, document_from_config(default_config()), document, "")


def _export_bindings(bindings: tuple[KeyBinding, ...]) -> list[str]:
    return [binding.display.translate(_ASCII_LOWER) for binding in bindings]


def _export_keymap(keymap: SelectorKeymap | MonitorKeymap) -> dict[str, list[str]]:
    return {
        entry.name: _export_bindings(getattr(keymap, entry.name))
        for entry in fields(keymap)
    }


def document_from_config(config: Config) -> dict[str, Any]:
    """The TOML document that describes ``config``."""
    monitor_layout = config.layout.monitor
    return {
        "selector": {
            "sort": config.selector.sort.value,
            "page_scroll_size": config.selector.page_scroll_size,
        },
        "monitor": {
            "page_scroll_steps": config.monitor.page_scroll_steps,
            "startup_focus": config.monitor.startup_focus.value,
            "joystick_invert_y": config.monitor.joystick_invert_y,
            "relative_display_range": config.monitor.relative_display_range,
        },
        "theme": {
            "palette": {
                entry.name: getattr(config.theme.palette, entry.name).hex()
                for entry in fields(ThemePalette)
            },
        },
        "layout": {
            "selector": {
                "margin_percent": config.layout.selector.margin_percent,
                "content_width_percent": config.layout.selector.content_width_percent,
            },
            "monitor": {
                "buttons_per_row": monitor_layout.buttons_per_row,
                "main_column_percent": monitor_layout.main_column_percent,
                "joystick_gap": monitor_layout.joystick_gap,
                "axes_box_percent": monitor_layout.axes_box_percent,
                "joystick_hat_joystick_percent": (
                    monitor_layout.joystick_hat_joystick_percent
                ),
            },
        },
        "keys": {
            "selector": _export_keymap(config.keys.selector),
            "monitor": _export_keymap(config.keys.monitor),
        },
    }


def _selector_config(section: Mapping[str, Any]) -> SelectorConfig:
    return SelectorConfig(
        sort=SortOrder(section["sort"]),
        page_scroll_size=require_positive(
            section["page_scroll_size"], "selector.page_scroll_size"
        ),
    )


def _monitor_config(section: Mapping[str, Any]) -> MonitorConfig:
    return MonitorConfig(
        page_scroll_steps=require_positive(
            section["page_scroll_steps"], "monitor.page_scroll_steps"
        ),
        startup_focus=StartupFocus(section["startup_focus"]),
        joystick_invert_y=section["joystick_invert_y"],
        relative_display_range=require_positive(
            section["relative_display_range"], "monitor.relative_display_range"
        ),
    )


def _theme_config(section: Mapping[str, Any]) -> ThemeConfig:
    palette = section["palette"]
    return ThemeConfig(
        palette=ThemePalette(
            **{
                entry.name: parse_hex_color_field(
                    palette[entry.name], f"theme.palette.{entry.name}"
                )
                for entry in fields(ThemePalette)
            }
        )
    )


def _layout_config(section: Mapping[str, Any]) -> LayoutConfig:
    selector = SelectorLayoutConfig(
        margin_percent=section["selector"]["margin_percent"],
        content_width_percent=section["selector"]["content_width_percent"],
    )
    validate_selector_layout(selector)

    monitor = section["monitor"]
    prefix = "layout.monitor"
    return LayoutConfig(
        selector=selector,
        monitor=MonitorLayoutConfig(
            buttons_per_row=require_range(
                monitor["buttons_per_row"], 1, 6, f"{prefix}.buttons_per_row"
            ),
            main_column_percent=require_range(
                monitor["main_column_percent"], 40, 90, f"{prefix}.main_column_percent"
            ),
            joystick_gap=require_range(
                monitor["joystick_gap"], 0, 8, f"{prefix}.joystick_gap"
            ),
            axes_box_percent=require_range(
                monitor["axes_box_percent"], 1, 99, f"{prefix}.axes_box_percent"
            ),
            joystick_hat_joystick_percent=require_range(
                monitor["joystick_hat_joystick_percent"],
                1,
                99,
                f"{prefix}.joystick_hat_joystick_percent",
            ),
        ),
    )


def _keymap(keymap_type: type, section: Mapping[str, Any], scope: str):
    parsed = {
        entry.name: parse_bindings(section[entry.name], f"{scope}.{entry.name}")
        for entry in fields(keymap_type)
    }
    validate_unique_key_bindings(parsed.items(), scope)
    return keymap_type(**parsed)


def _keymap_config(section: Mapping[str, Any]) -> KeymapConfig:
    return KeymapConfig(
        selector=_keymap(SelectorKeymap, section["selector"], "keys.selector"),
        monitor=_keymap(MonitorKeymap, section["monitor"], "keys.monitor"),
    )


def _config_from_resolved(resolved: Mapping[str, Any]) -> Config:
    return Config(
        selector=_selector_config(resolved["selector"]),
        monitor=_monitor_config(resolved["monitor"]),
        theme=_theme_config(resolved["theme"]),
        layout=_layout_config(resolved["layout"]),
        keys=_keymap_config(resolved["keys"]),
    )


def config_from_document(document: Mapping[str, Any]) -> Config:
    """Validate a parsed configuration document and build the runtime config."""
    try:
        resolved = _resolve_document(document)
    except _SchemaError as err:
        raise ConfigError(f"invalid config: {err}") from None
    return _config_from_resolved(resolved)


def parse_config_text(text: str, source: str) -> Config:
    """Parse TOML text read from ``source`` into a runtime config."""
    try:
        resolved = _resolve_document(tomllib.loads(text))
    except (tomllib.TOMLDecodeError, _SchemaError) as err:
        raise ConfigError(f"invalid config {source}: {err}") from None
    return _config_from_resolved(resolved)


def render_default() -> str:
    """The default configuration as TOML text."""
    return tomli_w.dumps(document_from_config(default_config()))