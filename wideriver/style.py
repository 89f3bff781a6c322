"""Border style wanted for a layout, and the control commands to reach it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import Config
from .enums import Layout
from .tag import Tag


@dataclass
class Style:
    """Border width and colours; None means not yet set."""

    border_width: Optional[int] = None
    border_color_focused: Optional[str] = None
    border_color_unfocused: Optional[str] = None


def desired_style(config: Config, tag: Tag, view_count: int) -> Style:
    """The border style for a tag showing view_count views."""
    if tag.layout_cur is Layout.MONOCLE:
        width = config.border_width_monocle
        focused = config.border_color_focused_monocle
    elif view_count == 1 and tag.smart_gaps:
        width = config.border_width_smart_gaps
        focused = config.border_color_focused
    else:
        width = config.border_width
        focused = config.border_color_focused
    return Style(
        border_width=width,
        border_color_focused=focused,
        border_color_unfocused=config.border_color_unfocused,
    )


def style_commands(desired: Style, current: Style) -> list[list[str]]:
    """Control command arguments for each setting that differs from current."""
    commands: list[list[str]] = []
    if desired.border_width != current.border_width:
        commands.append(["border-width", str(desired.border_width)])
    if desired.border_color_focused != current.border_color_focused:
        commands.append(["border-color-focused", str(desired.border_color_focused)])
    if desired.border_color_unfocused != current.border_color_unfocused:
        commands.append(["border-color-unfocused", str(desired.border_color_unfocused)])
    return commands