"""Per-output tag state and the layout commands applied to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import COUNT_MIN, RATIO_MAX, RATIO_MIN, Config
from .enums import Layout, Stack
from .tag import Tag, make_tags, tag_all


@dataclass
class Command:
    """A user command; fields left as None are not changed."""

    layout: Optional[Layout] = None
    layout_toggle: bool = False
    stack: Optional[Stack] = None
    count: Optional[int] = None
    count_delta: Optional[int] = None
    ratio: Optional[float] = None
    ratio_delta: Optional[float] = None


def _apply_layout(tag: Tag, command: Command) -> None:
    if command.layout is not None:
        if tag.layout_cur != command.layout:
            tag.layout_prev = tag.layout_cur
            tag.layout_cur = command.layout
    elif command.layout_toggle:
        tag.layout_cur, tag.layout_prev = tag.layout_prev, tag.layout_cur


def _apply_stack(tag: Tag, command: Command) -> None:
    if command.stack is not None:
        tag.stack = command.stack


def _apply_count_ratio(tag: Tag, command: Command) -> None:
    if tag.layout_cur is Layout.MONOCLE:
        return
    if tag.layout_cur is Layout.WIDE:
        count_attr, ratio_attr = "count_wide_left", "ratio_wide"
    else:
        count_attr, ratio_attr = "count_master", "ratio_master"

    if command.count is not None:
        setattr(tag, count_attr, command.count)
    elif command.count_delta is not None:
        new = getattr(tag, count_attr) + command.count_delta
        setattr(tag, count_attr, max(new, COUNT_MIN))

    if command.ratio is not None:
        ratio = command.ratio
    elif command.ratio_delta is not None:
        ratio = getattr(tag, ratio_attr) + command.ratio_delta
    else:
        return
    setattr(tag, ratio_attr, min(max(ratio, RATIO_MIN), RATIO_MAX))


def apply_command(tag: Tag, command: Command) -> None:
    """Change one tag's layout, stack, count and ratio as the command asks."""
    _apply_layout(tag, command)
    _apply_stack(tag, command)
    _apply_count_ratio(tag, command)


@dataclass
class Output:
    """A display output holding one tag per bit of the tag mask."""

    name: int
    config: Config = field(default_factory=Config)
    tags: list[Tag] = field(init=False)
    command_tags_mask: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.tags = make_tags(self.config)

    def apply_command(self, command: Command) -> None:
        """Apply a command to every tag in the current command tags mask."""
        for tag in tag_all(self.tags, self.command_tags_mask):
            apply_command(tag, command)