"""Inputs grouped by category, in event-code order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from evtr.inputs import (
    AbsoluteAxis,
    AbsoluteValue,
    DeviceInput,
    EventIndex,
    InputId,
    InputLocation,
    InputTypeId,
    RelativeValue,
)


@dataclass
class InputBuckets:
    """Absolute, relative and button inputs, each sorted by event code."""

    absolute: list[DeviceInput] = field(default_factory=list)
    relative: list[DeviceInput] = field(default_factory=list)
    buttons: list[DeviceInput] = field(default_factory=list)

    def _bucket(self, kind: InputTypeId) -> list[DeviceInput]:
        return {
            InputTypeId.ABS: self.absolute,
            InputTypeId.REL: self.relative,
            InputTypeId.KEY: self.buttons,
        }[kind]

    def input(self, location: InputLocation) -> DeviceInput | None:
        """The input at ``location``, or None if there is none."""
        bucket = self._bucket(location.kind)
        if 0 <= location.index < len(bucket):
            return bucket[location.index]
        return None

    def reset_relative_axes(self) -> None:
        """Set every relative axis back to zero."""
        for entry in self.relative:
            if isinstance(entry.input_type, RelativeValue):
                entry.input_type.value = 0

    def absolute_axis(self, location: InputLocation) -> AbsoluteAxis | None:
        """Range and value of the absolute axis at ``location``."""
        entry = self.input(location)
        if entry is None or not isinstance(entry.input_type, AbsoluteValue):
            return None
        state = entry.input_type.state
        return AbsoluteAxis(state.minimum, state.maximum, state.value)


def sorted_inputs(
    entries: Iterable[tuple[int, DeviceInput]],
    kind: InputTypeId,
    index: EventIndex,
) -> list[DeviceInput]:
    """Sort ``entries`` by code and record each one's location in ``index``."""
    ordered = sorted(entries, key=lambda entry: entry[0])
    inputs = []
    for position, (code, device_input) in enumerate(ordered):
        index.insert(InputId(kind, code), InputLocation(kind, position))
        inputs.append(device_input)
    return inputs


def build_buckets(
    absolute: Iterable[tuple[int, DeviceInput]],
    relative: Iterable[tuple[int, DeviceInput]],
    buttons: Iterable[tuple[int, DeviceInput]],
) -> tuple[InputBuckets, EventIndex]:
    """Group coded inputs into buckets and build the event index for them."""
    index = EventIndex()
    buckets = InputBuckets(
        absolute=sorted_inputs(absolute, InputTypeId.ABS, index),
        relative=sorted_inputs(relative, InputTypeId.REL, index),
        buttons=sorted_inputs(buttons, InputTypeId.KEY, index),
    )
    return buckets, index