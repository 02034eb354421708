"""Vertical placement of the monitor's panels.

The panels are the joystick and d-pad row, the touchpad, the axes and the
buttons, placed from top to bottom.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from evtr import monitor_config
from evtr.geometry import Rect
from evtr.split import gap_if_room, ratio_widths, split_row_ratio


@dataclass(frozen=True)
class LayoutRequest:
    """The panels that want space.

    ``joystick_columns`` is None when there is no joystick panel.
    """

    joystick_columns: int | None = None
    hat: bool = False
    touch: bool = False
    axes: bool = False
    buttons: bool = False

    @property
    def has_joystick(self) -> bool:
        return self.joystick_columns is not None


@dataclass(frozen=True)
class BoxLayout:
    """The rectangle given to each panel, or None for a panel left out."""

    joystick_box: Rect | None = None
    hat_box: Rect | None = None
    axes_box: Rect | None = None
    touch_box: Rect | None = None
    buttons_box: Rect | None = None


@dataclass(frozen=True)
class BoxMinimums:
    """Smallest height each requested panel can be drawn at; 0 when not requested."""

    axes: int = 0
    buttons: int = 0
    touch: int = 0
    joystick: int = 0
    hat: int = 0

    def reserved_below_top(self) -> int:
        return self.axes + self.buttons + self.touch

    def reserved_below_touch(self) -> int:
        return self.axes + self.buttons


@dataclass(frozen=True)
class TouchAllocation:
    """Whether the touchpad is shown and how tall it is."""

    visible: bool = False
    height: int = 0

    @classmethod
    def hidden(cls) -> "TouchAllocation":
        return cls()

    @classmethod
    def shown(cls, height: int) -> "TouchAllocation":
        return cls(True, height)


@dataclass(frozen=True)
class LowerSectionLayout:
    """Heights of the axes and buttons panels."""

    axes_height: int = 0
    buttons_height: int = 0


class TopRowRequest(Enum):
    """Which widgets share the top row; as a layout kind, BOTH means side by side."""

    NONE = "none"
    JOYSTICK = "joystick"
    HAT = "hat"
    BOTH = "both"


@dataclass(frozen=True)
class TopRowLayout:
    """The planned top row: its kind, height and, when split, the gap."""

    kind: TopRowRequest = TopRowRequest.NONE
    height: int = 0
    gap: int = 0

    @classmethod
    def joystick(cls, height: int) -> "TopRowLayout":
        return cls(TopRowRequest.JOYSTICK, height)

    @classmethod
    def hat(cls, height: int) -> "TopRowLayout":
        return cls(TopRowRequest.HAT, height)

    @classmethod
    def split(cls, height: int, gap: int) -> "TopRowLayout":
        return cls(TopRowRequest.BOTH, height, gap)


def _sub(a: int, b: int) -> int:
    return max(a - b, 0)


def minimums_for(request: LayoutRequest) -> BoxMinimums:
    """Minimum heights of the requested panels."""
    return BoxMinimums(
        axes=2 if request.axes else 0,
        buttons=1 if request.buttons else 0,
        touch=monitor_config.TOUCHPAD_MIN_HEIGHT + 2 if request.touch else 0,
        joystick=monitor_config.JOYSTICK_MIN_SIZE if request.has_joystick else 0,
        hat=monitor_config.HAT_MIN_SIZE if request.hat else 0,
    )


def top_row_request(request: LayoutRequest) -> TopRowRequest:
    """Which top-row widgets the request asks for."""
    match (request.has_joystick, request.hat):
        case (True, True):
            return TopRowRequest.BOTH
        case (True, False):
            return TopRowRequest.JOYSTICK
        case (False, True):
            return TopRowRequest.HAT
        case _:
            return TopRowRequest.NONE


def box_layout(area: Rect, request: LayoutRequest) -> BoxLayout:
    """Place the requested panels in ``area``, dropping those that cannot fit."""
    minimums = minimums_for(request)
    split_percent = monitor_config.joystick_hat_joystick_percent()
    top_row = plan_top_row(
        area,
        request.joystick_columns or 0,
        minimums,
        top_row_request(request),
        split_percent,
    )

    remaining = _sub(area.height, top_row.height)
    touch = plan_touch(remaining, request, minimums)
    remaining = _sub(remaining, touch.height)
    lower = plan_lower_section(
        remaining, request, minimums, monitor_config.axes_box_percent()
    )

    joystick_box, hat_box, cursor_y = place_top_row(area, area.y, top_row, split_percent)
    touch_box = None
    if touch.visible:
        touch_box, cursor_y = _take_next_box(area, cursor_y, touch.height, minimums.touch)
    axes_box, cursor_y = _take_next_box(
        area, cursor_y, lower.axes_height, minimums.axes
    )
    buttons_box, cursor_y = _take_next_box(
        area, cursor_y, lower.buttons_height, minimums.buttons
    )

    return BoxLayout(
        joystick_box=joystick_box,
        hat_box=hat_box,
        axes_box=axes_box,
        touch_box=touch_box,
        buttons_box=buttons_box,
    )


def plan_touch(
    remaining_height: int, request: LayoutRequest, minimums: BoxMinimums
) -> TouchAllocation:
    """Touchpad height given the height left below the top row."""
    if not request.touch:
        return TouchAllocation.hidden()

    min_other = minimums.reserved_below_touch()
    if min_other == 0:
        if remaining_height < minimums.touch:
            return TouchAllocation.hidden()
        return TouchAllocation.shown(remaining_height)

    if remaining_height < min_other + minimums.touch:
        return TouchAllocation.hidden()

    preferred = monitor_config.TOUCHPAD_HEIGHT + 2
    max_touch = _sub(remaining_height, min_other)
    return TouchAllocation.shown(max(minimums.touch, min(preferred, max_touch)))


def plan_lower_section(
    remaining_height: int,
    request: LayoutRequest,
    minimums: BoxMinimums,
    axes_box_percent: int,
) -> LowerSectionLayout:
    """Share the remaining height between axes and buttons; buttons win when tight."""
    match (request.axes, request.buttons):
        case (True, True):
            if remaining_height < minimums.axes + minimums.buttons:
                if remaining_height >= minimums.buttons:
                    return LowerSectionLayout(0, remaining_height)
                return LowerSectionLayout()
            desired = remaining_height * axes_box_percent // 100
            max_axes = _sub(remaining_height, minimums.buttons)
            axes_height = max(minimums.axes, min(desired, max_axes))
            return LowerSectionLayout(axes_height, _sub(remaining_height, axes_height))
        case (True, False):
            if remaining_height >= minimums.axes:
                return LowerSectionLayout(remaining_height, 0)
            return LowerSectionLayout()
        case (False, True):
            if remaining_height >= minimums.buttons:
                return LowerSectionLayout(0, remaining_height)
            return LowerSectionLayout()
        case _:
            return LowerSectionLayout()


def plan_top_row(
    area: Rect,
    joystick_columns: int,
    minimums: BoxMinimums,
    request: TopRowRequest,
    joystick_hat_joystick_percent: int,
) -> TopRowLayout:
    """Choose the top row's arrangement and height."""
    max_top = _sub(area.height, minimums.reserved_below_top())
    if request is TopRowRequest.JOYSTICK:
        planned = _joystick_layout(
            area.width, max_top, minimums.joystick, joystick_columns
        )
    elif request is TopRowRequest.HAT:
        planned = _hat_layout(area.width, max_top, minimums.hat)
    elif request is TopRowRequest.BOTH:
        planned = _plan_dual_top_row(
            area.width,
            max_top,
            joystick_columns,
            minimums,
            joystick_hat_joystick_percent,
        )
    else:
        planned = None
    return planned or TopRowLayout()


def place_top_row(
    area: Rect,
    cursor_y: int,
    layout: TopRowLayout,
    joystick_hat_joystick_percent: int,
) -> tuple[Rect | None, Rect | None, int]:
    """Joystick and hat boxes for ``layout`` at ``cursor_y``, and the next free row."""
    height = layout.height
    if height == 0:
        return None, None, cursor_y

    joystick_box: Rect | None = None
    hat_box: Rect | None = None
    if layout.kind is TopRowRequest.JOYSTICK:
        joystick_box = Rect(area.x, cursor_y, area.width, height)
    elif layout.kind is TopRowRequest.HAT:
        hat_box = Rect(area.x, cursor_y, area.width, height)
    elif layout.kind is TopRowRequest.BOTH:
        joystick_box, hat_box = split_row_ratio(
            area.x,
            cursor_y,
            area.width,
            height,
            layout.gap,
            joystick_hat_joystick_percent,
        )
    return joystick_box, hat_box, cursor_y + height


def _plan_dual_top_row(
    width: int,
    max_top: int,
    joystick_columns: int,
    minimums: BoxMinimums,
    joystick_hat_joystick_percent: int,
) -> TopRowLayout | None:
    gap = gap_if_room(width, monitor_config.joystick_gap())
    joystick_width, hat_width = ratio_widths(width, gap, joystick_hat_joystick_percent)
    joystick_fit = _joystick_height_for_width(
        joystick_width, max_top, minimums.joystick, joystick_columns
    )
    hat_fit = _hat_height_for_width(hat_width, max_top, minimums.hat)

    if joystick_fit is not None and hat_fit is not None:
        return TopRowLayout.split(max(joystick_fit, hat_fit), gap)
    if joystick_fit is not None:
        return _joystick_layout(width, max_top, minimums.joystick, joystick_columns)
    if hat_fit is not None:
        return _hat_layout(width, max_top, minimums.hat)
    return _joystick_layout(
        width, max_top, minimums.joystick, joystick_columns
    ) or _hat_layout(width, max_top, minimums.hat)


def _joystick_layout(
    width: int, max_height: int, min_height: int, columns: int
) -> TopRowLayout | None:
    height = _joystick_height_for_width(width, max_height, min_height, columns)
    return None if height is None else TopRowLayout.joystick(height)


def _hat_layout(width: int, max_height: int, min_height: int) -> TopRowLayout | None:
    height = _hat_height_for_width(width, max_height, min_height)
    return None if height is None else TopRowLayout.hat(height)


def _joystick_height_for_width(
    width: int, max_height: int, min_height: int, columns: int
) -> int | None:
    if width == 0 or max_height < min_height:
        return None
    columns = max(columns, 1)
    gap = monitor_config.joystick_gap() if columns > 1 else 0
    width_per = _sub(width, gap) // columns
    return _bounded_square_height(
        width_per, max_height, min_height, monitor_config.JOYSTICK_MAX_SIZE
    )


def _hat_height_for_width(width: int, max_height: int, min_height: int) -> int | None:
    return _bounded_square_height(
        width, max_height, min_height, monitor_config.HAT_MAX_SIZE
    )


def _bounded_square_height(
    width: int, max_height: int, min_height: int, max_size: int
) -> int | None:
    if width == 0 or max_height < min_height:
        return None
    ratio = max(monitor_config.JOYSTICK_ASPECT_RATIO, 1)
    height_for_width = width // ratio
    max_size = min(max_size, max_height)
    if max_size < min_height:
        return None
    preferred = min(height_for_width, max_size)
    if preferred < min_height or preferred == 0:
        return None
    return max(min_height, min(preferred, max_size))


def _take_next_box(
    area: Rect, cursor_y: int, height: int, min_height: int
) -> tuple[Rect | None, int]:
    if height < min_height or height == 0:
        return None, cursor_y
    return Rect(area.x, cursor_y, area.width, height), cursor_y + height