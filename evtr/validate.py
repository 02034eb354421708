"""Validation helpers for configuration values."""

from __future__ import annotations

import re
from typing import Iterable

from evtr.errors import ConfigError
from evtr.keymap import KeyBinding, parse_key_binding
from evtr.settings import Rgb, SelectorLayoutConfig

_HEX_COMPONENT = re.compile(r"\+?[0-9a-fA-F]+")


def parse_bindings(values: Iterable[str], field: str) -> tuple[KeyBinding, ...]:
    """Parse the bindings configured for one action."""
    values = list(values)
    if not values:
        raise ConfigError(f"{field} must not be empty")
    bindings = []
    for value in values:
        try:
            bindings.append(parse_key_binding(value))
        except ConfigError:
            raise ConfigError(f"invalid key binding in {field}: {value}") from None
    return tuple(bindings)


def validate_unique_key_bindings(
    entries: Iterable[tuple[str, Iterable[KeyBinding]]], scope: str
) -> None:
    """Reject any key that is bound to more than one action in a scope."""
    seen: dict[tuple[object, int], str] = {}
    for action, bindings in entries:
        for binding in bindings:
            key = (binding.code, int(binding.modifiers))
            existing = seen.get(key)
            seen[key] = action
            if existing is not None:
                raise ConfigError(
                    f"duplicate binding in {scope}: {binding.display} "
                    f"is assigned to both {existing} and {action}"
                )


def validate_selector_layout(layout: SelectorLayoutConfig) -> None:
    """Check that the selector margins and content add up."""
    if layout.margin_percent > 50:
        raise ConfigError("layout.selector.margin_percent must be at most 50")
    if layout.margin_percent * 2 + layout.content_width_percent != 100:
        raise ConfigError(
            "layout.selector.margin_percent * 2 + content_width_percent must equal 100"
        )


def require_positive(value: int, field: str) -> int:
    """Return ``value`` if it is greater than zero."""
    if value <= 0:
        raise ConfigError(f"{field} must be greater than 0")
    return value


def require_range(value: int, minimum: int, maximum: int, field: str) -> int:
    """Return ``value`` if it lies in the inclusive range."""
    if minimum <= value <= maximum:
        return value
    raise ConfigError(f"{field} must be between {minimum} and {maximum}")


def parse_hex_color(raw: str) -> Rgb:
    """Parse ``#rrggbb``; raise ValueError on anything else."""
    if not raw.isascii() or len(raw) != 7 or not raw.startswith("#"):
        raise ValueError(f"not a #rrggbb colour: {raw!r}")
    components = []
    for start in (1, 3, 5):
        part = raw[start : start + 2]
        if not _HEX_COMPONENT.fullmatch(part):
            raise ValueError(f"not a #rrggbb colour: {raw!r}")
        components.append(int(part, 16))
    return Rgb(*components)


def parse_hex_color_field(raw: str, field: str) -> Rgb:
    """Parse a colour for a named configuration field."""
    try:
        return parse_hex_color(raw)
    except ValueError:
        raise ConfigError(f"invalid color for {field}: {raw}") from None