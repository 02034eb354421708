"""Key codes, key events and configurable key bindings."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Iterable, Union

from evtr.errors import ConfigError


class KeyCode(Enum):
    """Non-character keys. Character keys are plain one-character strings."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    HOME = "Home"
    END = "End"
    ENTER = "Enter"
    ESC = "Esc"
    BACKSPACE = "Backspace"
    TAB = "Tab"
    DELETE = "Delete"
    INSERT = "Insert"


Key = Union[KeyCode, str]


class Modifiers(IntFlag):
    """Keyboard modifier flags."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


_RELEVANT_MODIFIERS = Modifiers.CONTROL | Modifiers.SHIFT | Modifiers.ALT

_MODIFIER_NAMES = {
    "ctrl": Modifiers.CONTROL,
    "shift": Modifiers.SHIFT,
    "alt": Modifiers.ALT,
}

_NAMED_KEYS = {
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "enter": KeyCode.ENTER,
    "esc": KeyCode.ESC,
    "backspace": KeyCode.BACKSPACE,
}

_BINDABLE_KEYS = frozenset(_NAMED_KEYS.values())

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True)
class KeyEvent:
    """A key press as delivered by the terminal."""

    code: Key
    modifiers: Modifiers = Modifiers.NONE


@dataclass(frozen=True)
class KeyBinding:
    """A key plus modifiers that an action is bound to."""

    code: Key
    modifiers: Modifiers
    display: str

    def matches(self, key: KeyEvent) -> bool:
        """Whether a key event triggers this binding."""
        return self.code == key.code and self.modifiers == (
            Modifiers(key.modifiers) & _RELEVANT_MODIFIERS
        )

    def __str__(self) -> str:
        return self.display


def parse_key_binding(raw: str) -> KeyBinding:
    """Parse a binding such as ``ctrl-c``, ``shift-g`` or ``pageup``."""
    normalized = raw.strip().translate(_ASCII_LOWER)
    if not normalized:
        raise ConfigError("key binding must not be empty")

    *prefix, base = normalized.split("-")
    modifiers = Modifiers.NONE
    for name in prefix:
        flag = _MODIFIER_NAMES.get(name)
        if flag is None:
            raise ConfigError(f"unsupported key modifier in binding: {name}")
        modifiers |= flag

    code: Key
    named = _NAMED_KEYS.get(base)
    if named is not None:
        code = named
    elif len(base) == 1:
        code = base
        if Modifiers.SHIFT in modifiers and base.isascii() and base.isalpha():
            code = base.upper()
    else:
        raise ConfigError(f"unsupported key binding base: {base}")

    return KeyBinding(code, modifiers, _canonical_display(code, modifiers))


def _canonical_display(code: Key, modifiers: Modifiers) -> str:
    parts = [
        label
        for flag, label in (
            (Modifiers.CONTROL, "Ctrl"),
            (Modifiers.SHIFT, "Shift"),
            (Modifiers.ALT, "Alt"),
        )
        if flag in modifiers
    ]
    if isinstance(code, str):
        parts.append(code)
    elif code in _BINDABLE_KEYS:
        parts.append(code.value)
    else:
        parts.append("Unsupported")
    return "-".join(parts)


def key_list(specs: Iterable[str]) -> list[KeyBinding]:
    """Parse a list of binding specifications."""
    return [parse_key_binding(spec) for spec in specs]