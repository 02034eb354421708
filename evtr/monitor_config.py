"""Sizing constants and configurable layout values for the monitor view."""

from __future__ import annotations

from evtr import config

BUTTON_HEIGHT = 3
DEFAULT_AXIS_RANGE = (-32768, 32767)
BAR_HEIGHTS = (5, 3, 1)
AXIS_LABEL_MAX = 20  # characters allocated to an axis label
AXIS_GAP = 1  # vertical gap between axis bars
REL_SECTION_GAP = 1  # spacer before the relative section
AXIS_LEFT_PADDING = 1
BTN_SECTION_TOP_PADDING = 1
BTN_SECTION_VERT_PADDING = 2
BTN_COL_GAP = 1
AXIS_MIN_WIDTH = 20
LABEL_GAUGE_GAP = 1
COMPACT_BTN_COL_GAP = 1
TOUCHPAD_MIN_WIDTH = 20
TOUCHPAD_MIN_HEIGHT = 4
TOUCHPAD_HEIGHT = 7
JOYSTICK_MIN_SIZE = 6
JOYSTICK_MAX_SIZE = 12
JOYSTICK_ASPECT_RATIO = 2  # width to height ratio of the joystick view
HAT_MIN_SIZE = 6
HAT_MAX_SIZE = 10
HAT_BLOCKS = 4  # blocks per d-pad direction
HAT_THICKNESS = 2  # blocks across a d-pad arm
HAT_PADDING = 0
MAIN_BUTTONS_GAP = 2  # gap between the main column and the buttons column
MAIN_COLUMN_MIN_WIDTH = 30
BUTTONS_COLUMN_MIN_WIDTH = 24


def buttons_per_row() -> int:
    return config.layout().monitor.buttons_per_row


def axes_box_percent() -> int:
    return config.layout().monitor.axes_box_percent


def joystick_gap() -> int:
    return config.layout().monitor.joystick_gap


def joystick_hat_joystick_percent() -> int:
    return config.layout().monitor.joystick_hat_joystick_percent


def main_column_percent() -> int:
    return config.layout().monitor.main_column_percent