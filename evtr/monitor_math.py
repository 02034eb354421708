"""Normalisation helpers for axis values."""

from __future__ import annotations


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _truncated_remainder(value: int, divisor: int) -> int:
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def _truncated_half(value: int) -> int:
    return -((-value) // 2) if value < 0 else value // 2


def normalize_range(value: int, minimum: int, maximum: int) -> float:
    """Position of ``value`` within ``[minimum, maximum]`` as 0..1; 0.5 for an empty range."""
    span = maximum - minimum
    if span > 0:
        return _clamp_unit((value - minimum) / span)
    return 0.5


def wrapped_value(value: int, span: int) -> int:
    """Wrap ``value`` into ``[-span/2, span/2]``."""
    half = _truncated_half(span)
    wrapped = _truncated_remainder(value, span)
    if wrapped > half:
        wrapped -= span
    elif wrapped < -half:
        wrapped += span
    return wrapped


def normalize_wrapped(value: int, span: int) -> float:
    """Wrapped value mapped into 0..1 with zero at the centre."""
    half = _truncated_half(span)
    return _clamp_unit((wrapped_value(value, span) + half) / span)