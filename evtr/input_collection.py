"""All inputs of one device, updated as events arrive."""

from __future__ import annotations

from typing import Iterable

from evtr.buckets import InputBuckets, build_buckets
from evtr.collect import InputDevice, collect_device_inputs
from evtr.inputs import (
    AbsoluteAxis,
    DeviceInput,
    EventIndex,
    InputEvent,
    InputId,
    input_id_for,
)


class InputCollection:
    """A device's absolute, relative and button inputs, sorted by event code."""

    def __init__(
        self,
        absolute: Iterable[tuple[int, DeviceInput]] = (),
        relative: Iterable[tuple[int, DeviceInput]] = (),
        buttons: Iterable[tuple[int, DeviceInput]] = (),
    ) -> None:
        self.buckets: InputBuckets
        self.event_index: EventIndex
        self.buckets, self.event_index = build_buckets(absolute, relative, buttons)

    def handle_event(self, event: InputEvent) -> None:
        """Apply an event to the input it refers to; ignore anything else."""
        input_id = input_id_for(event)
        if input_id is None:
            return
        location = self.event_index.location_for(input_id)
        if location is None:
            return
        entry = self.buckets.input(location)
        if entry is not None:
            entry.input_type.update(event)

    def reset_relative_axes(self) -> None:
        """Set every relative axis back to zero."""
        self.buckets.reset_relative_axes()

    def absolute_axis(self, code: int) -> AbsoluteAxis | None:
        """Range and value of the absolute axis with event ``code``."""
        location = self.event_index.location_for(InputId.absolute(code))
        if location is None:
            return None
        return self.buckets.absolute_axis(location)

    def absolute_axis_pair(
        self, x: int, y: int
    ) -> tuple[AbsoluteAxis, AbsoluteAxis] | None:
        """Both axes of a pair, or None unless the device has both."""
        x_axis = self.absolute_axis(x)
        if x_axis is None:
            return None
        y_axis = self.absolute_axis(y)
        if y_axis is None:
            return None
        return x_axis, y_axis

    def absolute_inputs(self) -> list[DeviceInput]:
        return self.buckets.absolute

    def relative_inputs(self) -> list[DeviceInput]:
        return self.buckets.relative

    def button_inputs(self) -> list[DeviceInput]:
        return self.buckets.buttons


def collection_from_device(device: InputDevice) -> tuple[InputCollection, list[str]]:
    """Read a device's inputs; also return warnings raised while reading its state."""
    collected = collect_device_inputs(device)
    collection = InputCollection(
        collected.absolute, collected.relative, collected.buttons
    )
    return collection, list(collected.startup_warnings)