"""Runtime configuration values and their defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from evtr.keymap import KeyBinding, key_list


class SortOrder(StrEnum):
    """Order of devices in the selector."""

    PATH = "path"
    NAME = "name"


class StartupFocus(StrEnum):
    """Which monitor section has focus on start."""

    AUTO = "auto"
    AXES = "axes"
    BUTTONS = "buttons"


@dataclass(frozen=True)
class Rgb:
    """A 24-bit colour."""

    red: int
    green: int
    blue: int

    def hex(self) -> str:
        """Render as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


def _keys(*specs: str):
    return field(default_factory=lambda: tuple(key_list(specs)))


@dataclass(frozen=True)
class SelectorConfig:
    sort: SortOrder = SortOrder.PATH
    page_scroll_size: int = 10


@dataclass(frozen=True)
class MonitorConfig:
    page_scroll_steps: int = 10
    startup_focus: StartupFocus = StartupFocus.AUTO
    joystick_invert_y: bool = True
    relative_display_range: int = 1000


@dataclass(frozen=True)
class ThemePalette:
    text: Rgb = Rgb(201, 210, 244)
    muted: Rgb = Rgb(61, 66, 90)
    accent: Rgb = Rgb(147, 197, 253)
    accent_strong: Rgb = Rgb(96, 165, 250)
    danger: Rgb = Rgb(248, 113, 113)


@dataclass(frozen=True)
class ThemeConfig:
    palette: ThemePalette = field(default_factory=ThemePalette)


@dataclass(frozen=True)
class SelectorLayoutConfig:
    margin_percent: int = 20
    content_width_percent: int = 60


@dataclass(frozen=True)
class MonitorLayoutConfig:
    buttons_per_row: int = 3
    main_column_percent: int = 70
    joystick_gap: int = 2
    axes_box_percent: int = 75
    joystick_hat_joystick_percent: int = 70


@dataclass(frozen=True)
class LayoutConfig:
    selector: SelectorLayoutConfig = field(default_factory=SelectorLayoutConfig)
    monitor: MonitorLayoutConfig = field(default_factory=MonitorLayoutConfig)


@dataclass(frozen=True)
class SelectorKeymap:
    exit: tuple[KeyBinding, ...] = _keys("ctrl-c")
    back: tuple[KeyBinding, ...] = _keys("esc")
    toggle_help: tuple[KeyBinding, ...] = _keys("?")
    refresh: tuple[KeyBinding, ...] = _keys("ctrl-r")
    select: tuple[KeyBinding, ...] = _keys("enter")
    clear_search: tuple[KeyBinding, ...] = _keys("ctrl-u")
    delete_char: tuple[KeyBinding, ...] = _keys("backspace")
    move_up: tuple[KeyBinding, ...] = _keys("up", "ctrl-p")
    move_down: tuple[KeyBinding, ...] = _keys("down", "ctrl-n")
    page_up: tuple[KeyBinding, ...] = _keys("pageup")
    page_down: tuple[KeyBinding, ...] = _keys("pagedown")
    home: tuple[KeyBinding, ...] = _keys("home")
    end: tuple[KeyBinding, ...] = _keys("end")


@dataclass(frozen=True)
class MonitorKeymap:
    back: tuple[KeyBinding, ...] = _keys("esc")
    exit: tuple[KeyBinding, ...] = _keys("ctrl-c")
    reset: tuple[KeyBinding, ...] = _keys("r")
    home: tuple[KeyBinding, ...] = _keys("home", "g")
    end: tuple[KeyBinding, ...] = _keys("end", "shift-g")
    scroll_up: tuple[KeyBinding, ...] = _keys("up", "k")
    scroll_down: tuple[KeyBinding, ...] = _keys("down", "j")
    toggle_info: tuple[KeyBinding, ...] = _keys("i")
    toggle_invert_y: tuple[KeyBinding, ...] = _keys("y")
    toggle_help: tuple[KeyBinding, ...] = _keys("?")
    focus_next: tuple[KeyBinding, ...] = _keys("shift-j")
    focus_prev: tuple[KeyBinding, ...] = _keys("shift-k")
    page_up: tuple[KeyBinding, ...] = _keys("pageup")
    page_down: tuple[KeyBinding, ...] = _keys("pagedown")


@dataclass(frozen=True)
class KeymapConfig:
    selector: SelectorKeymap = field(default_factory=SelectorKeymap)
    monitor: MonitorKeymap = field(default_factory=MonitorKeymap)


@dataclass(frozen=True)
class Config:
    selector: SelectorConfig = field(default_factory=SelectorConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    keys: KeymapConfig = field(default_factory=KeymapConfig)


def default_keymap() -> KeymapConfig:
    """The built-in key bindings."""
    return KeymapConfig()


def default_config() -> Config:
    """The built-in configuration."""
    return Config()