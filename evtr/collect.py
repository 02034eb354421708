"""Reading a device's inputs and their starting state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Container, Iterable, Mapping, Protocol, TypeVar

from evtr import monitor_config
from evtr.inputs import (
    AbsoluteState,
    AbsoluteValue,
    ButtonValue,
    DeviceInput,
    RelativeValue,
    fallback_state,
    kernel_state,
)

T = TypeVar("T")

BTN_TOOL_FINGER = 0x145
BTN_TOOL_QUINTTAP = 0x148
BTN_TOUCH = 0x14A
BTN_TOOL_DOUBLETAP = 0x14D
BTN_TOOL_TRIPLETAP = 0x14E
BTN_TOOL_QUADTAP = 0x14F

_TOUCH_CONTACT_BUTTONS = frozenset(
    {
        BTN_TOUCH,
        BTN_TOOL_FINGER,
        BTN_TOOL_DOUBLETAP,
        BTN_TOOL_TRIPLETAP,
        BTN_TOOL_QUADTAP,
        BTN_TOOL_QUINTTAP,
    }
)


def _code_names(prefix: str, runs: Iterable[tuple[int, str]]) -> dict[int, str]:
    return {
        start + offset: f"{prefix}_{name}"
        for start, names in runs
        for offset, name in enumerate(names.split())
    }


_ABS_NAMES = _code_names(
    "ABS",
    [
        (0x00, "X Y Z RX RY RZ THROTTLE RUDDER WHEEL GAS BRAKE"),
        (
            0x10,
            "HAT0X HAT0Y HAT1X HAT1Y HAT2X HAT2Y HAT3X HAT3Y "
            "PRESSURE DISTANCE TILT_X TILT_Y TOOL_WIDTH",
        ),
        (0x20, "VOLUME PROFILE"),
        (0x28, "MISC"),
        (
            0x2F,
            "MT_SLOT MT_TOUCH_MAJOR MT_TOUCH_MINOR MT_WIDTH_MAJOR MT_WIDTH_MINOR "
            "MT_ORIENTATION MT_POSITION_X MT_POSITION_Y MT_TOOL_TYPE MT_BLOB_ID "
            "MT_TRACKING_ID MT_PRESSURE MT_DISTANCE MT_TOOL_X MT_TOOL_Y",
        ),
    ],
)

_REL_NAMES = _code_names(
    "REL",
    [(0x00, "X Y Z RX RY RZ HWHEEL DIAL WHEEL MISC RESERVED WHEEL_HI_RES HWHEEL_HI_RES")],
)

_KEY_NAMES = {
    **_code_names(
        "KEY",
        [
            (
                0,
                "RESERVED ESC 1 2 3 4 5 6 7 8 9 0 MINUS EQUAL BACKSPACE TAB "
                "Q W E R T Y U I O P LEFTBRACE RIGHTBRACE ENTER LEFTCTRL "
                "A S D F G H J K L SEMICOLON APOSTROPHE GRAVE LEFTSHIFT BACKSLASH "
                "Z X C V B N M COMMA DOT SLASH RIGHTSHIFT KPASTERISK LEFTALT SPACE "
                "CAPSLOCK F1 F2 F3 F4 F5 F6 F7 F8 F9 F10 NUMLOCK SCROLLLOCK "
                "KP7 KP8 KP9 KPMINUS KP4 KP5 KP6 KPPLUS KP1 KP2 KP3 KP0 KPDOT",
            ),
            (
                85,
                "ZENKAKUHANKAKU 102ND F11 F12 RO KATAKANA HIRAGANA HENKAN "
                "KATAKANAHIRAGANA MUHENKAN KPJPCOMMA KPENTER RIGHTCTRL KPSLASH "
                "SYSRQ RIGHTALT LINEFEED HOME UP PAGEUP LEFT RIGHT END DOWN "
                "PAGEDOWN INSERT DELETE MACRO MUTE VOLUMEDOWN VOLUMEUP POWER "
                "KPEQUAL KPPLUSMINUS PAUSE SCALE KPCOMMA HANGEUL HANJA YEN "
                "LEFTMETA RIGHTMETA COMPOSE",
            ),
            (183, "F13 F14 F15 F16 F17 F18 F19 F20 F21 F22 F23 F24"),
        ],
    ),
    **_code_names(
        "BTN",
        [
            (0x100, "0 1 2 3 4 5 6 7 8 9"),
            (0x110, "LEFT RIGHT MIDDLE SIDE EXTRA FORWARD BACK TASK"),
            (
                0x120,
                "TRIGGER THUMB THUMB2 TOP TOP2 PINKIE BASE BASE2 BASE3 BASE4 "
                "BASE5 BASE6",
            ),
            (0x12F, "DEAD"),
            (
                0x130,
                "SOUTH EAST C NORTH WEST Z TL TR TL2 TR2 SELECT START MODE "
                "THUMBL THUMBR",
            ),
            (
                0x140,
                "TOOL_PEN TOOL_RUBBER TOOL_BRUSH TOOL_PENCIL TOOL_AIRBRUSH "
                "TOOL_FINGER TOOL_MOUSE TOOL_LENS TOOL_QUINTTAP STYLUS3 TOUCH "
                "STYLUS STYLUS2 TOOL_DOUBLETAP TOOL_TRIPLETAP TOOL_QUADTAP",
            ),
            (0x150, "GEAR_DOWN GEAR_UP"),
            (0x220, "DPAD_UP DPAD_DOWN DPAD_LEFT DPAD_RIGHT"),
            (0x2C0, " ".join(f"TRIGGER_HAPPY{n}" for n in range(1, 41))),
        ],
    ),
}


@dataclass(frozen=True)
class AxisSnapshot:
    """An absolute axis' range and value as read from the device."""

    minimum: int
    maximum: int
    value: int


class InputDevice(Protocol):
    """What the collector needs from an opened input device.

    The ``supported_*`` methods return None when the device lacks that
    event category. The ``get_*_state`` methods may raise OSError.
    """

    def supported_absolute_axes(self) -> Iterable[int] | None: ...

    def supported_relative_axes(self) -> Iterable[int] | None: ...

    def supported_keys(self) -> Iterable[int] | None: ...

    def get_abs_state(self) -> Mapping[int, AxisSnapshot]: ...

    def get_key_state(self) -> Container[int]: ...


@dataclass
class CollectedInputs:
    """Inputs found on a device, keyed by event code, plus startup warnings."""

    absolute: list[tuple[int, DeviceInput]] = field(default_factory=list)
    relative: list[tuple[int, DeviceInput]] = field(default_factory=list)
    buttons: list[tuple[int, DeviceInput]] = field(default_factory=list)
    startup_warnings: list[str] = field(default_factory=list)


def _load_startup_state(
    supported: bool,
    warnings: list[str],
    load: Callable[[], T],
    warning: Callable[[OSError], str],
) -> T | None:
    if not supported:
        return None
    try:
        return load()
    except OSError as err:
        warnings.append(warning(err))
        return None


def collect_device_inputs(device: InputDevice) -> CollectedInputs:
    """Every absolute, relative and button input of ``device`` with its start value."""
    warnings: list[str] = []

    abs_state = _load_startup_state(
        device.supported_absolute_axes() is not None,
        warnings,
        device.get_abs_state,
        lambda err: (
            "unable to load absolute axis state; using fallback defaults "
            f"until events arrive: {err}"
        ),
    )
    key_state = _load_startup_state(
        device.supported_keys() is not None,
        warnings,
        device.get_key_state,
        lambda err: (
            "unable to load key/button state; buttons start released "
            f"until events arrive: {err}"
        ),
    )

    absolute = [
        (
            code,
            DeviceInput(
                _code_name(_ABS_NAMES, "abs", code),
                AbsoluteValue(
                    absolute_state_from_snapshot(
                        None if abs_state is None else abs_state.get(code)
                    )
                ),
            ),
        )
        for code in device.supported_absolute_axes() or ()
    ]
    relative = [
        (code, DeviceInput(_code_name(_REL_NAMES, "rel", code), RelativeValue(0)))
        for code in device.supported_relative_axes() or ()
    ]
    buttons = [
        (
            code,
            DeviceInput(
                strip_btn_prefix(_code_name(_KEY_NAMES, "key", code)),
                ButtonValue(is_key_pressed(code, key_state)),
            ),
        )
        for code in device.supported_keys() or ()
        if not is_touch_contact_button(code)
    ]

    return CollectedInputs(absolute, relative, buttons, warnings)


def absolute_state_from_snapshot(snapshot: AxisSnapshot | None) -> AbsoluteState:
    """Kernel state from a snapshot, or the default range when there is none."""
    if snapshot is not None:
        return kernel_state(snapshot.minimum, snapshot.maximum, snapshot.value)
    low, high = monitor_config.DEFAULT_AXIS_RANGE
    return fallback_state(low, high, 0)


def is_key_pressed(code: int, key_state: Container[int] | None) -> bool:
    """Whether ``code`` is held according to the startup key state."""
    return key_state is not None and code in key_state


def is_touch_contact_button(code: int) -> bool:
    """Whether ``code`` only signals touch contact rather than a real button."""
    return code in _TOUCH_CONTACT_BUTTONS


def strip_btn_prefix(name: str) -> str:
    """Drop a leading ``btn_`` from a lower-case button name."""
    return name.removeprefix("btn_")


def _code_name(names: Mapping[int, str], prefix: str, code: int) -> str:
    return names.get(code, f"{prefix}_{code:#x}").lower()