import pytest

from evtr import config, monitor_config
from evtr.boxes import (
    BoxMinimums,
    LayoutRequest,
    LowerSectionLayout,
    TopRowLayout,
    TopRowRequest,
    TouchAllocation,
    box_layout,
    minimums_for,
    place_top_row,
    plan_lower_section,
    plan_top_row,
    plan_touch,
    top_row_request,
)
from evtr.geometry import Rect
from evtr.settings import default_config


@pytest.fixture(autouse=True)
def default_runtime_config():
    config.install_runtime(default_config())
    yield
    config.install_runtime(default_config())


def dual_top_row_request():
    return LayoutRequest(joystick_columns=1, hat=True)


def test_box_layout_gives_small_remaining_space_to_buttons_first():
    area = Rect(0, 0, 60, 1)
    layout = box_layout(area, LayoutRequest(axes=True, buttons=True))
    assert layout.axes_box is None
    assert layout.buttons_box == area


def test_box_layout_drops_touch_when_it_cannot_fit_with_axes_and_buttons():
    area = Rect(0, 0, 60, monitor_config.TOUCHPAD_MIN_HEIGHT + 2)
    layout = box_layout(area, LayoutRequest(touch=True, axes=True, buttons=True))
    assert layout.touch_box is None
    assert layout.axes_box is not None
    assert layout.buttons_box is not None


def test_box_layout_keeps_joystick_and_hat_side_by_side_when_both_fit():
    layout = box_layout(Rect(0, 0, 60, 12), dual_top_row_request())
    assert layout.joystick_box is not None
    assert layout.hat_box is not None
    assert layout.joystick_box.y == layout.hat_box.y
    assert layout.hat_box.x > layout.joystick_box.x


def test_box_layout_falls_back_to_joystick_when_hat_cannot_fit():
    layout = box_layout(Rect(0, 0, 12, 6), dual_top_row_request())
    assert layout.joystick_box is not None
    assert layout.hat_box is None


def test_box_layout_stacks_boxes_without_overlap():
    area = Rect(0, 0, 60, 40)
    layout = box_layout(
        area, LayoutRequest(joystick_columns=1, touch=True, axes=True, buttons=True)
    )
    boxes = [layout.joystick_box, layout.touch_box, layout.axes_box, layout.buttons_box]
    assert all(box is not None for box in boxes)
    for upper, lower in zip(boxes, boxes[1:]):
        assert upper.y + upper.height == lower.y
    assert sum(box.height for box in boxes) <= area.height


def test_touch_allocation_uses_full_remaining_height_when_it_is_the_only_section():
    request = LayoutRequest(touch=True)
    touch = plan_touch(12, request, minimums_for(request))
    assert touch == TouchAllocation.shown(12)


def test_touch_allocation_hidden_when_not_requested():
    request = LayoutRequest(axes=True)
    assert plan_touch(30, request, minimums_for(request)) == TouchAllocation.hidden()


def test_lower_section_layout_prioritizes_buttons_when_budget_is_tight():
    request = LayoutRequest(axes=True, buttons=True)
    lower = plan_lower_section(1, request, minimums_for(request), 75)
    assert lower.axes_height == 0
    assert lower.buttons_height == 1


def test_lower_section_layout_respects_axes_box_percent():
    request = LayoutRequest(axes=True, buttons=True)
    lower = plan_lower_section(20, request, minimums_for(request), 60)
    assert lower.axes_height == 12
    assert lower.buttons_height == 8


def test_lower_section_layout_empty_when_nothing_requested():
    request = LayoutRequest()
    assert plan_lower_section(20, request, minimums_for(request), 60) == LowerSectionLayout()


def test_minimums_for_only_counts_requested_panels():
    assert minimums_for(LayoutRequest()) == BoxMinimums()
    minimums = minimums_for(LayoutRequest(axes=True, buttons=True))
    assert minimums.reserved_below_touch() == 3
    assert minimums.reserved_below_top() == 3


def test_top_row_request_maps_present_widgets():
    assert top_row_request(LayoutRequest()) is TopRowRequest.NONE
    assert top_row_request(LayoutRequest(joystick_columns=1)) is TopRowRequest.JOYSTICK
    assert top_row_request(LayoutRequest(hat=True)) is TopRowRequest.HAT
    assert top_row_request(dual_top_row_request()) is TopRowRequest.BOTH


def test_plan_top_row_prefers_side_by_side_when_both_fit():
    minimums = minimums_for(dual_top_row_request())
    plan = plan_top_row(Rect(0, 0, 60, 12), 1, minimums, TopRowRequest.BOTH, 70)
    assert plan.kind is TopRowRequest.BOTH
    assert plan.height > 0


def test_plan_top_row_prefers_hat_when_only_hat_fits_split_layout():
    minimums = minimums_for(dual_top_row_request())
    plan = plan_top_row(Rect(0, 0, 20, 12), 2, minimums, TopRowRequest.BOTH, 70)
    assert plan.kind is TopRowRequest.HAT
    assert plan.height > 0


def test_plan_top_row_falls_back_to_joystick_when_neither_split_widget_fits():
    minimums = minimums_for(dual_top_row_request())
    plan = plan_top_row(Rect(0, 0, 12, 6), 1, minimums, TopRowRequest.BOTH, 70)
    assert plan.kind is TopRowRequest.JOYSTICK
    assert plan.height > 0


def test_plan_top_row_none_has_no_height():
    plan = plan_top_row(Rect(0, 0, 60, 12), 0, BoxMinimums(), TopRowRequest.NONE, 70)
    assert plan == TopRowLayout()
    assert plan.height == 0


def test_place_top_row_respects_joystick_hat_split_percent():
    area = Rect(0, 0, 40, 8)
    layout = TopRowLayout.split(6, 0)
    wide_joystick, wide_hat, wide_cursor = place_top_row(area, area.y, layout, 80)
    narrow_joystick, narrow_hat, narrow_cursor = place_top_row(area, area.y, layout, 60)
    assert wide_joystick.width > narrow_joystick.width
    assert wide_hat.width < narrow_hat.width
    assert wide_cursor == 6
    assert narrow_cursor == 6


def test_place_top_row_with_empty_layout_keeps_cursor():
    assert place_top_row(Rect(0, 0, 40, 8), 3, TopRowLayout(), 70) == (None, None, 3)