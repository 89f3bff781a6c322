"""Layouts, stack styles and log thresholds, with their names."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, TypeVar


class Layout(IntEnum):
    """Arrangement of the views of a tag."""

    MONOCLE = 1
    LEFT = 2
    RIGHT = 3
    TOP = 4
    BOTTOM = 5
    WIDE = 6


class Stack(IntEnum):
    """How the views of a stack share its area."""

    EVEN = 1
    DIMINISH = 2
    DWINDLE = 3


class LogThreshold(IntEnum):
    """Lowest severity that is written to the log."""

    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


_LAYOUT_NAMES = {
    Layout.MONOCLE: "monocle",
    Layout.LEFT: "left",
    Layout.RIGHT: "right",
    Layout.TOP: "top",
    Layout.BOTTOM: "bottom",
    Layout.WIDE: "wide",
}

_STACK_NAMES = {
    Stack.EVEN: "even",
    Stack.DIMINISH: "diminish",
    Stack.DWINDLE: "dwindle",
}

_LOG_THRESHOLD_NAMES = {
    LogThreshold.DEBUG: "debug",
    LogThreshold.INFO: "info",
    LogThreshold.WARNING: "warning",
    LogThreshold.ERROR: "error",
    LogThreshold.FATAL: "fatal",
}

_E = TypeVar("_E", bound=IntEnum)


def _lookup_name(names: dict, value) -> Optional[str]:
    return names.get(value)


def _lookup_value(names: dict[_E, str], name: Optional[str]) -> Optional[_E]:
    if name is None:
        return None
    wanted = name.lower()
    return next((value for value, known in names.items() if known == wanted), None)


def layout_name(layout) -> Optional[str]:
    """Name of a layout, None when unknown."""
    return _lookup_name(_LAYOUT_NAMES, layout)


def layout_val(name) -> Optional[Layout]:
    """Layout for a case-insensitive name, None when unknown."""
    return _lookup_value(_LAYOUT_NAMES, name)


def stack_name(stack) -> Optional[str]:
    """Name of a stack style, None when unknown."""
    return _lookup_name(_STACK_NAMES, stack)


def stack_val(name) -> Optional[Stack]:
    """Stack style for a case-insensitive name, None when unknown."""
    return _lookup_value(_STACK_NAMES, name)


def log_threshold_name(threshold) -> Optional[str]:
    """Name of a log threshold, None when unknown."""
    return _lookup_name(_LOG_THRESHOLD_NAMES, threshold)


def log_threshold_val(name) -> Optional[LogThreshold]:
    """Log threshold for a case-insensitive name, None when unknown."""
    return _lookup_value(_LOG_THRESHOLD_NAMES, name)