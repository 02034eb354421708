import pytest

from evtr.inputs import (
    AbsoluteState,
    AbsoluteValue,
    AxisOrigin,
    ButtonValue,
    EventIndex,
    EventType,
    InputEvent,
    InputId,
    InputLocation,
    InputTypeId,
    RelativeValue,
    fallback_state,
    input_id_for,
    kernel_state,
)

ABS_X = 0


def test_absolute_state_preserves_origin():
    assert kernel_state(-1, 1, 0).origin == AxisOrigin.KERNEL
    assert fallback_state(-1, 1, 0).origin == AxisOrigin.FALLBACK


def test_input_id_helpers_use_named_fields():
    assert InputId.absolute(1) == InputId(kind=InputTypeId.ABS, code=1)
    assert InputId.relative(2) == InputId(kind=InputTypeId.REL, code=2)
    assert InputId.key(3) == InputId(kind=InputTypeId.KEY, code=3)


def test_input_kind_update_routes_by_event_type():
    absolute = AbsoluteValue(kernel_state(-1, 1, 0))
    relative = RelativeValue(0)
    button = ButtonValue(False)

    absolute.update(InputEvent(EventType.ABSOLUTE, ABS_X, 1))
    relative.update(InputEvent(EventType.RELATIVE, 0, 3))
    button.update(InputEvent(EventType.KEY, 0, 1))

    assert absolute == AbsoluteValue(kernel_state(-1, 1, 1))
    assert relative == RelativeValue(3)
    assert button == ButtonValue(True)


def test_update_ignores_mismatched_event_types():
    absolute = AbsoluteValue(kernel_state(-1, 1, 0))
    relative = RelativeValue(4)
    button = ButtonValue(True)

    absolute.update(InputEvent(EventType.RELATIVE, 0, 1))
    relative.update(InputEvent(EventType.KEY, 0, 9))
    button.update(InputEvent(EventType.ABSOLUTE, 0, 0))

    assert absolute.state.value == 0
    assert relative.value == 4
    assert button.pressed is True


def test_relative_update_saturates_at_i32_bounds():
    high = RelativeValue(2**31 - 1)
    high.update(InputEvent(EventType.RELATIVE, 0, 5))
    low = RelativeValue(-(2**31))
    low.update(InputEvent(EventType.RELATIVE, 0, -5))

    assert high.value == 2**31 - 1
    assert low.value == -(2**31)


def test_button_release_clears_pressed():
    button = ButtonValue(True)
    button.update(InputEvent(EventType.KEY, 0x130, 0))
    assert button.pressed is False


def test_normalized_values_per_kind():
    assert AbsoluteValue(kernel_state(0, 10, 5)).normalized() == 0.5
    assert RelativeValue(0).normalized() == 0.5
    assert ButtonValue(True).normalized() == 1.0
    assert ButtonValue(False).normalized() == 0.0


def test_display_labels_per_kind():
    assert AbsoluteValue(kernel_state(-10, 10, 7)).display_label() == "7"
    assert RelativeValue(600).display_label() == "-400"
    assert RelativeValue(42).display_label() == "42"
    assert ButtonValue(True).display_label() == "ON"
    assert ButtonValue(False).display_label() == "OFF"


@pytest.mark.parametrize(
    ("event_type", "expected"),
    [
        (EventType.ABSOLUTE, InputId.absolute(5)),
        (EventType.RELATIVE, InputId.relative(5)),
        (EventType.KEY, InputId.key(5)),
        (EventType.SYNCHRONIZATION, None),
        (EventType.MISC, None),
    ],
)
def test_input_id_for_maps_tracked_event_types(event_type, expected):
    assert input_id_for(InputEvent(event_type, 5, 1)) == expected


def test_input_id_for_accepts_raw_type_numbers():
    assert input_id_for(InputEvent(3, 1, 0)) == InputId.absolute(1)


def test_location_for_returns_inserted_location():
    index = EventIndex()
    index.insert(InputId.absolute(4), InputLocation.absolute(2))

    assert index.location_for(InputId.absolute(4)) == InputLocation.absolute(2)


def test_location_for_returns_none_for_unknown_input_id():
    index = EventIndex()

    assert index.location_for(InputId.relative(1)) is None


def test_insert_overwrites_existing_location_for_same_input_id():
    index = EventIndex()
    index.insert(InputId.key(7), InputLocation.button(0))
    index.insert(InputId.key(7), InputLocation.button(3))

    assert index.location_for(InputId.key(7)) == InputLocation.button(3)


def test_absolute_state_fields():
    state = AbsoluteState(AxisOrigin.KERNEL, -3, 3, 1)
    assert state == kernel_state(-3, 3, 1)