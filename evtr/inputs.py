"""Input events, per-input values and the index from events to inputs."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

from evtr import config, monitor_math

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class EventType(IntEnum):
    """Linux input event types."""

    SYNCHRONIZATION = 0x00
    KEY = 0x01
    RELATIVE = 0x02
    ABSOLUTE = 0x03
    MISC = 0x04
    SWITCH = 0x05
    LED = 0x11
    SOUND = 0x12
    REPEAT = 0x14
    FORCEFEEDBACK = 0x15
    POWER = 0x16
    FORCEFEEDBACKSTATUS = 0x17


@dataclass(frozen=True)
class InputEvent:
    """One event read from an input device."""

    event_type: int
    code: int
    value: int


class InputTypeId(Enum):
    """Event categories the monitor tracks."""

    ABS = "abs"
    REL = "rel"
    KEY = "key"


@dataclass(frozen=True)
class InputId:
    """Identifies one input by category and event code."""

    kind: InputTypeId
    code: int

    @classmethod
    def absolute(cls, code: int) -> "InputId":
        return cls(InputTypeId.ABS, code)

    @classmethod
    def relative(cls, code: int) -> "InputId":
        return cls(InputTypeId.REL, code)

    @classmethod
    def key(cls, code: int) -> "InputId":
        return cls(InputTypeId.KEY, code)


class AxisOrigin(Enum):
    """Where an absolute axis got its range from."""

    KERNEL = "kernel"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class AbsoluteState:
    """Range and current value of an absolute axis."""

    origin: AxisOrigin
    minimum: int
    maximum: int
    value: int


def kernel_state(minimum: int, maximum: int, value: int) -> AbsoluteState:
    """An absolute state reported by the kernel."""
    return AbsoluteState(AxisOrigin.KERNEL, minimum, maximum, value)


def fallback_state(minimum: int, maximum: int, value: int) -> AbsoluteState:
    """An absolute state made up until real events arrive."""
    return AbsoluteState(AxisOrigin.FALLBACK, minimum, maximum, value)


@dataclass
class AbsoluteValue:
    """Current state of an absolute axis."""

    state: AbsoluteState

    def normalized(self) -> float:
        return monitor_math.normalize_range(
            self.state.value, self.state.minimum, self.state.maximum
        )

    def display_label(self) -> str:
        return str(self.state.value)

    def update(self, event: InputEvent) -> None:
        if event.event_type == EventType.ABSOLUTE:
            self.state = replace(self.state, value=event.value)


@dataclass
class RelativeValue:
    """Accumulated movement of a relative axis."""

    value: int = 0

    def normalized(self) -> float:
        return monitor_math.normalize_wrapped(
            self.value, config.monitor().relative_display_range
        )

    def display_label(self) -> str:
        return str(
            monitor_math.wrapped_value(
                self.value, config.monitor().relative_display_range
            )
        )

    def update(self, event: InputEvent) -> None:
        if event.event_type == EventType.RELATIVE:
            self.value = max(_I32_MIN, min(_I32_MAX, self.value + event.value))


@dataclass
class ButtonValue:
    """Whether a button is held down."""

    pressed: bool = False

    def normalized(self) -> float:
        return 1.0 if self.pressed else 0.0

    def display_label(self) -> str:
        return "ON" if self.pressed else "OFF"

    def update(self, event: InputEvent) -> None:
        if event.event_type == EventType.KEY:
            self.pressed = event.value != 0


InputValue = AbsoluteValue | RelativeValue | ButtonValue


@dataclass
class DeviceInput:
    """A named input and its current value."""

    name: str
    input_type: InputValue


@dataclass(frozen=True)
class AbsoluteAxis:
    """A snapshot of an absolute axis' range and value."""

    minimum: int
    maximum: int
    value: int


@dataclass(frozen=True)
class InputLocation:
    """Position of an input within its category's list."""

    kind: InputTypeId
    index: int

    @classmethod
    def absolute(cls, index: int) -> "InputLocation":
        return cls(InputTypeId.ABS, index)

    @classmethod
    def relative(cls, index: int) -> "InputLocation":
        return cls(InputTypeId.REL, index)

    @classmethod
    def button(cls, index: int) -> "InputLocation":
        return cls(InputTypeId.KEY, index)


@dataclass
class EventIndex:
    """Maps input identifiers to their locations."""

    _by_event: dict[InputId, InputLocation] = field(default_factory=dict)

    def insert(self, input_id: InputId, location: InputLocation) -> None:
        self._by_event[input_id] = location

    def location_for(self, input_id: InputId) -> InputLocation | None:
        return self._by_event.get(input_id)


_KIND_BY_EVENT = {
    EventType.ABSOLUTE: InputTypeId.ABS,
    EventType.RELATIVE: InputTypeId.REL,
    EventType.KEY: InputTypeId.KEY,
}


def input_id_for(event: InputEvent) -> InputId | None:
    """The tracked input an event refers to, or None for other event types."""
    kind = _KIND_BY_EVENT.get(event.event_type)
    return None if kind is None else InputId(kind, event.code)