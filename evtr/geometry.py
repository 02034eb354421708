"""Rectangles and the top-level and axis-section layouts."""

from __future__ import annotations

from dataclasses import dataclass

from evtr import monitor_config


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class AxesLayout:
    """Areas for the absolute and relative axis sections."""

    abs_area: Rect | None
    rel_area: Rect | None


def main_layout(area: Rect) -> tuple[Rect, Rect]:
    """Split ``area`` into a one-row header and the body below it."""
    header_height = min(1, area.height)
    header = Rect(area.x, area.y, area.width, header_height)
    body = Rect(area.x, area.y + header_height, area.width, area.height - header_height)
    return header, body


def axes_layout(area: Rect, abs_count: int, rel_count: int) -> AxesLayout:
    """Share ``area`` between absolute and relative axes in proportion to their counts."""
    total = abs_count + rel_count
    if total == 0 or area.height == 0:
        return AxesLayout(None, None)

    if abs_count > 0 and rel_count > 0:
        gap = monitor_config.REL_SECTION_GAP
        available = max(area.height - gap, 0)
        abs_portion = available * abs_count // total
        rel_portion = max(available - abs_portion, 0)
        return AxesLayout(
            Rect(area.x, area.y, area.width, abs_portion),
            Rect(area.x, area.y + abs_portion + gap, area.width, rel_portion),
        )
    if abs_count > 0:
        return AxesLayout(area, None)
    return AxesLayout(None, area)