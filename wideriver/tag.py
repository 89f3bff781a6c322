"""Per-tag layout state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .config import Config
from .enums import Layout, Stack

TAG_COUNT = 32


@dataclass
class Tag:
    """Layout settings of one tag, identified by its bit mask."""

    layout_cur: Layout
    layout_prev: Layout
    stack: Stack
    count_master: int
    ratio_master: float
    count_wide_left: int
    ratio_wide: float
    smart_gaps: bool
    inner_gaps: int
    outer_gaps: int
    mask: int

    @classmethod
    def from_config(cls, config: Config, mask: int) -> "Tag":
        """A tag starting from the configured settings."""
        return cls(
            layout_cur=config.layout,
            layout_prev=config.layout_alt,
            stack=config.stack,
            count_master=config.count_master,
            ratio_master=config.ratio_master,
            count_wide_left=config.count_wide_left,
            ratio_wide=config.ratio_wide,
            smart_gaps=config.smart_gaps,
            inner_gaps=config.inner_gaps,
            outer_gaps=config.outer_gaps,
            mask=mask,
        )


def make_tags(config: Config) -> list[Tag]:
    """One tag for each of the 32 bits of a tag mask, lowest first."""
    return [Tag.from_config(config, 1 << bit) for bit in range(TAG_COUNT)]


def tag_first(tags: Sequence[Tag], mask: int) -> Optional[Tag]:
    """Lowest tag in mask, else the first tag; None when there are no tags."""
    if not tags:
        return None
    return next((tag for tag in tags if mask & tag.mask), tags[0])


def tag_all(tags: Iterable[Tag], mask: int) -> list[Tag]:
    """Every tag in mask, in order."""
    return [tag for tag in tags if mask & tag.mask]