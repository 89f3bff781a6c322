"""Complete view layouts and their short descriptions."""

from __future__ import annotations

from typing import Optional

from .arrange import (
    MASTER_STACK_LAYOUTS,
    Box,
    Cardinal,
    Demand,
    arrange_count,
    arrange_master_stack,
    arrange_monocle,
    arrange_views,
    arrange_wide,
)
from .enums import Layout, LogThreshold, Stack
from .tag import Tag

# Stack growth and dwindle directions for each master-stack layout.
_STACK_DIRECTIONS = {
    Layout.LEFT: (Cardinal.S, Cardinal.S, Cardinal.S, Cardinal.E),
    Layout.RIGHT: (Cardinal.S, Cardinal.S, Cardinal.S, Cardinal.W),
    Layout.TOP: (Cardinal.E, Cardinal.E, Cardinal.E, Cardinal.S),
    Layout.BOTTOM: (Cardinal.E, Cardinal.E, Cardinal.E, Cardinal.N),
}


def layout(demand: Optional[Demand], tag: Optional[Tag]) -> list[Box]:
    """Boxes for every view, in the order the views are given."""
    if demand is None or tag is None:
        return []

    num_before, num_master, num_after = arrange_count(demand.view_count, tag)
    current = tag.layout_cur
    inner = tag.inner_gaps

    if current in MASTER_STACK_LAYOUTS:
        box_master, box_after = arrange_master_stack(demand, tag, num_master, num_after)
        master_cur, master_next, stack_cur, stack_next = _STACK_DIRECTIONS[current]
        return arrange_views(
            demand, Stack.EVEN, master_cur, master_next,
            num_master, num_master, inner, box_master, box_master,
        ) + arrange_views(
            demand, tag.stack, stack_cur, stack_next,
            num_after, num_after, inner, box_after, box_after,
        )

    if current is Layout.MONOCLE:
        return arrange_monocle(demand, tag)

    if current is Layout.WIDE:
        box_before, box_master, box_after = arrange_wide(
            demand, tag, num_before, num_master, num_after
        )
        before = arrange_views(
            demand, tag.stack, Cardinal.N, Cardinal.W,
            num_before, num_before, inner, box_before, box_before,
        )
        # the first view is pushed farthest away
        before.reverse()
        master = arrange_views(
            demand, Stack.EVEN, Cardinal.S, Cardinal.S,
            num_master, num_master, inner, box_master, box_master,
        )
        after = arrange_views(
            demand, tag.stack, Cardinal.S, Cardinal.E,
            num_after, num_after, inner, box_after, box_after,
        )
        return before + master + after

    return []


def _description_info(demand: Demand, tag: Tag) -> str:
    current = tag.layout_cur
    if current is Layout.LEFT:
        return "│├──┤" if tag.count_master == 0 else "│ ├─┤"
    if current is Layout.RIGHT:
        return "├──┤│" if tag.count_master == 0 else "├─┤ │"
    if current is Layout.TOP:
        return "├─┬─┤"
    if current is Layout.BOTTOM:
        return "├─┴─┤"
    if current is Layout.MONOCLE:
        return f"│ {demand.view_count} │" if demand.view_count > 1 else "│   │"
    if current is Layout.WIDE:
        return "││  ├─┤" if tag.count_wide_left == 0 else "├─┤ ├─┤"
    return ""


def _description_debug(demand: Demand, tag: Tag) -> str:
    info = _description_info(demand, tag)
    current = tag.layout_cur
    if current in MASTER_STACK_LAYOUTS:
        return f"{info} {tag.count_master} {tag.ratio_master:g} "
    if current is Layout.WIDE:
        return f"{info} {tag.count_wide_left} {tag.ratio_wide:g} "
    return info


def layout_description(
    demand: Optional[Demand],
    tag: Optional[Tag],
    threshold: LogThreshold = LogThreshold.INFO,
) -> str:
    """Short picture of the layout; with counts and ratios at debug level."""
    if demand is None or tag is None:
        return ""
    if threshold == LogThreshold.DEBUG:
        return _description_debug(demand, tag)
    return _description_info(demand, tag)