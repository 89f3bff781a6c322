"""Startup settings with validation of their textual values."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .enums import Layout, LogThreshold, Stack, layout_val, stack_val

LAYOUT_DEFAULT = Layout.LEFT
LAYOUT_ALT_DEFAULT = Layout.MONOCLE
STACK_DEFAULT = Stack.DWINDLE

COUNT_MIN = 0
COUNT_MASTER_DEFAULT = 1
COUNT_WIDE_LEFT_DEFAULT = 1

RATIO_MIN = 0.1
RATIO_MAX = 0.9
RATIO_MASTER_DEFAULT = 0.5
RATIO_WIDE_DEFAULT = 0.35

SMART_GAPS_DEFAULT = False

INNER_GAPS_MIN = 0
INNER_GAPS_DEFAULT = 0
OUTER_GAPS_MIN = 0
OUTER_GAPS_DEFAULT = 0

BORDER_WIDTH_MIN = 0
BORDER_WIDTH_DEFAULT = 2
BORDER_WIDTH_MONOCLE_MIN = 0
BORDER_WIDTH_MONOCLE_DEFAULT = 0
BORDER_WIDTH_SMART_GAPS_MIN = 0
BORDER_WIDTH_SMART_GAPS_DEFAULT = 0

BORDER_COLOR_FOCUSED_DEFAULT = "0x93a1a1"
BORDER_COLOR_FOCUSED_MONOCLE_DEFAULT = "0x586e75"
BORDER_COLOR_UNFOCUSED_DEFAULT = "0x586e75"

LOG_THRESHOLD_DEFAULT = LogThreshold.INFO

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_INTEGER = re.compile(r"\s*[+-]?[0-9]+")
_DECIMAL_PREFIX = re.compile(
    r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_PREFIX = re.compile(
    r"\s*([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_SPECIAL_PREFIX = re.compile(r"\s*([+-]?)(infinity|inf|nan)", re.IGNORECASE)


def valid_colour(s) -> bool:
    """True for 0xRRGGBB or 0xRRGGBBAA."""
    if not isinstance(s, str):
        return False
    if len(s) not in (8, 10) or not s.startswith("0x"):
        return False
    return all(c in _HEX_DIGITS for c in s[2:])


def _parse_integer(s: str) -> int:
    """Whole-string base 10 integer, leading whitespace allowed."""
    if not _INTEGER.fullmatch(s):
        raise ValueError(s)
    return int(s)


def _parse_float_prefix(s: str) -> float:
    """Leading floating point number of s, 0.0 when there is none."""
    match = _HEX_PREFIX.match(s)
    if match:
        sign, body = match.groups()
        if "p" not in body.lower():
            body += "p0"
        value = float.fromhex("0x" + body)
        return -value if sign == "-" else value
    match = _SPECIAL_PREFIX.match(s)
    if match:
        sign, word = match.groups()
        value = math.nan if word.lower() == "nan" else math.inf
        return -value if sign == "-" else value
    match = _DECIMAL_PREFIX.match(s)
    if match:
        return float(match.group(0))
    return 0.0


@dataclass
class Config:
    """Settings applied to every new tag and to borders."""

    layout: Layout = LAYOUT_DEFAULT
    layout_alt: Layout = LAYOUT_ALT_DEFAULT
    stack: Stack = STACK_DEFAULT
    count_master: int = COUNT_MASTER_DEFAULT
    ratio_master: float = RATIO_MASTER_DEFAULT
    count_wide_left: int = COUNT_WIDE_LEFT_DEFAULT
    ratio_wide: float = RATIO_WIDE_DEFAULT
    smart_gaps: bool = SMART_GAPS_DEFAULT
    border_width_smart_gaps: int = BORDER_WIDTH_SMART_GAPS_DEFAULT
    inner_gaps: int = INNER_GAPS_DEFAULT
    outer_gaps: int = OUTER_GAPS_DEFAULT
    border_width: int = BORDER_WIDTH_DEFAULT
    border_width_monocle: int = BORDER_WIDTH_MONOCLE_DEFAULT
    border_color_focused: str = BORDER_COLOR_FOCUSED_DEFAULT
    border_color_focused_monocle: str = BORDER_COLOR_FOCUSED_MONOCLE_DEFAULT
    border_color_unfocused: str = BORDER_COLOR_UNFOCUSED_DEFAULT

    @staticmethod
    def _layout(s: str, option: str) -> Layout:
        layout = layout_val(s)
        if layout is None:
            raise ValueError(f"invalid --{option} '{s}'")
        return layout

    @staticmethod
    def _integer(s: str, minimum: int, option: str) -> int:
        try:
            value = _parse_integer(s)
        except ValueError:
            raise ValueError(f"invalid --{option} '{s}'") from None
        if value < minimum:
            raise ValueError(f"invalid --{option} '{s}'")
        return value

    @staticmethod
    def _ratio(s: str, option: str) -> float:
        value = _parse_float_prefix(s)
        if value < RATIO_MIN or value > RATIO_MAX:
            raise ValueError(f"invalid --{option} '{s}'")
        return value

    @staticmethod
    def _colour(s: str, option: str) -> str:
        if not valid_colour(s):
            raise ValueError(f"invalid --{option} '{s}'")
        return s

    def set_layout(self, s: str) -> None:
        self.layout = self._layout(s, "layout")

    def set_layout_alt(self, s: str) -> None:
        self.layout_alt = self._layout(s, "layout-alt")

    def set_stack(self, s: str) -> None:
        stack = stack_val(s)
        if stack is None:
            raise ValueError(f"invalid --stack '{s}'")
        self.stack = stack

    def set_count_master(self, s: str) -> None:
        self.count_master = self._integer(s, COUNT_MIN, "count-master")

    def set_ratio_master(self, s: str) -> None:
        self.ratio_master = self._ratio(s, "ratio-master")

    def set_count_wide_left(self, s: str) -> None:
        self.count_wide_left = self._integer(s, COUNT_MIN, "count-wide-left")

    def set_ratio_wide(self, s: str) -> None:
        self.ratio_wide = self._ratio(s, "ratio-wide")

    def set_smart_gaps(self, smart_gaps: bool) -> None:
        self.smart_gaps = bool(smart_gaps)

    def set_border_width_smart_gaps(self, s: str) -> None:
        self.border_width_smart_gaps = self._integer(
            s, BORDER_WIDTH_SMART_GAPS_MIN, "border-width-smart-gaps"
        )

    def set_inner_gaps(self, s: str) -> None:
        self.inner_gaps = self._integer(s, INNER_GAPS_MIN, "inner-gaps")

    def set_outer_gaps(self, s: str) -> None:
        self.outer_gaps = self._integer(s, OUTER_GAPS_MIN, "outer-gaps")

    def set_border_width(self, s: str) -> None:
        self.border_width = self._integer(s, BORDER_WIDTH_MIN, "border-width")

    def set_border_width_monocle(self, s: str) -> None:
        self.border_width_monocle = self._integer(
            s, BORDER_WIDTH_MONOCLE_MIN, "border-width-monocle"
        )

    def set_border_color_focused(self, s: str) -> None:
        self.border_color_focused = self._colour(s, "border-color-focused")

    def set_border_color_focused_monocle(self, s: str) -> None:
        self.border_color_focused_monocle = self._colour(
            s, "border-color-focused-monocle"
        )

    def set_border_color_unfocused(self, s: str) -> None:
        self.border_color_unfocused = self._colour(s, "border-color-unfocused")