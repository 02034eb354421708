"""Input counts and scroll limits for the monitor view."""

from __future__ import annotations

from dataclasses import dataclass

from evtr import monitor_config


@dataclass(frozen=True)
class Counts:
    """Number of absolute axes, relative axes and buttons."""

    abs: int
    rel: int
    btn: int

    def total_axes(self) -> int:
        return self.abs + self.rel

    def has_buttons(self) -> bool:
        return self.btn > 0

    def filtered(
        self, abs_visible: bool, rel_visible: bool, buttons_visible: bool
    ) -> "Counts":
        """Counts with hidden sections zeroed."""
        return Counts(
            self.abs if abs_visible else 0,
            self.rel if rel_visible else 0,
            self.btn if buttons_visible else 0,
        )


@dataclass(frozen=True)
class ScrollState:
    """Current axis and button-row scroll positions."""

    axis: int = 0
    button_row: int = 0


@dataclass(frozen=True)
class ScrollBounds:
    """How far each section can scroll and whether it overflows."""

    axes_max: int
    abs_max_start: int
    rel_max_start: int
    button_row_max_start: int
    axes_overflow: bool
    buttons_overflow: bool

    def axis_offsets(self, effective_counts: Counts, axis_scroll: int) -> tuple[int, int]:
        """Absolute and relative window starts for a combined axis scroll."""
        return axis_offsets_for(
            axis_scroll,
            effective_counts.abs,
            effective_counts.rel,
            self.abs_max_start,
            self.rel_max_start,
        )


def bounds_from_capacities(
    effective_counts: Counts,
    abs_capacity: int,
    rel_capacity: int,
    button_rows_capacity: int,
) -> ScrollBounds:
    """Scroll limits given how many items each section can show."""
    abs_max_start = aligned_window_start(effective_counts.abs, abs_capacity, 1)
    rel_max_start = aligned_window_start(effective_counts.rel, rel_capacity, 1)
    axes_overflow = (abs_capacity + rel_capacity) > 0 and (
        effective_counts.abs > abs_capacity or effective_counts.rel > rel_capacity
    )

    per_row = monitor_config.buttons_per_row()
    total_button_rows = -(-effective_counts.btn // per_row)
    if button_rows_capacity == 0:
        button_row_max_start = 0
    else:
        button_row_max_start = max(total_button_rows - button_rows_capacity, 0)
    buttons_overflow = (
        button_rows_capacity > 0 and total_button_rows > button_rows_capacity
    )

    return ScrollBounds(
        axes_max=abs_max_start + rel_max_start,
        abs_max_start=abs_max_start,
        rel_max_start=rel_max_start,
        button_row_max_start=button_row_max_start,
        axes_overflow=axes_overflow,
        buttons_overflow=buttons_overflow,
    )


def axis_offsets_for(
    axis_scroll: int,
    abs_count: int,
    rel_count: int,
    abs_max_start: int,
    rel_max_start: int,
) -> tuple[int, int]:
    """Split one axis scroll value: absolute axes scroll first, then relative."""
    axis_scroll = min(axis_scroll, abs_max_start + rel_max_start)
    has_abs, has_rel = abs_count > 0, rel_count > 0

    if has_abs and has_rel:
        if axis_scroll <= abs_max_start:
            return axis_scroll, 0
        return abs_max_start, min(axis_scroll - abs_max_start, rel_max_start)
    if has_abs:
        return min(axis_scroll, abs_max_start), 0
    if has_rel:
        return 0, min(axis_scroll, rel_max_start)
    return 0, 0


def aligned_window_start(count: int, capacity: int, align: int) -> int:
    """Last start of a ``capacity`` window over ``count`` items, rounded down to ``align``."""
    if capacity == 0 or count == 0:
        return 0
    max_start = max(count - capacity, 0)
    if align <= 1:
        return max_start
    return max_start // align * align