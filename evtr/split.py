"""Horizontal splitting of areas into columns."""

from __future__ import annotations

from evtr import monitor_config
from evtr.geometry import Rect


def gap_if_room(width: int, preferred_gap: int) -> int:
    """``preferred_gap`` if ``width`` leaves room for it, else 0."""
    return preferred_gap if width > preferred_gap * 2 else 0


def split_buttons_column(
    area: Rect,
    buttons_present: bool,
    main_min_width: int,
    buttons_min_width: int,
    min_button_gap: int,
) -> tuple[Rect, Rect | None]:
    """Split off a buttons sidebar when both columns get enough width."""
    if not buttons_present:
        return area, None

    gap = gap_if_room(area.width, monitor_config.MAIN_BUTTONS_GAP)
    main_width, buttons_width = ratio_widths(
        area.width, gap, monitor_config.main_column_percent()
    )

    if main_width < main_min_width or buttons_width < buttons_min_width:
        return area, None
    if not _buttons_width_ok(buttons_width, min_button_gap):
        return area, None

    main_area = Rect(area.x, area.y, main_width, area.height)
    buttons_area = Rect(area.x + main_width + gap, area.y, buttons_width, area.height)
    return main_area, buttons_area


def split_row_ratio(
    x: int, y: int, width: int, height: int, gap: int, left_percent: int
) -> tuple[Rect, Rect]:
    """Two side-by-side rectangles sized by ``left_percent``."""
    left_width, right_width = ratio_widths(width, gap, left_percent)
    left = Rect(x, y, left_width, height)
    right = Rect(x + left_width + gap, y, right_width, height)
    return left, right


def ratio_widths(width: int, gap: int, left_percent: int) -> tuple[int, int]:
    """Left and right widths; both are at least 1 when any width is left."""
    available = max(width - gap, 0)
    if available < 2:
        return 0, 0
    left_percent = max(1, min(99, left_percent))
    left = available * left_percent // 100
    left = min(max(left, 1), available - 1)
    return left, available - left


def _buttons_width_ok(width: int, min_gap: int) -> bool:
    if width == 0:
        return False
    return width // monitor_config.buttons_per_row() > min_gap