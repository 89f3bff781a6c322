"""Division of the usable area into boxes for views."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .enums import Layout, Stack
from .tag import Tag

MASTER_STACK_LAYOUTS = frozenset({Layout.LEFT, Layout.RIGHT, Layout.TOP, Layout.BOTTOM})


class Cardinal(Enum):
    """Direction in which a stack grows."""

    N = 1
    S = 2
    E = 3
    W = 4


@dataclass
class Box:
    """Position and size of an area in pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Demand:
    """A request to lay out views within a usable area."""

    view_count: int
    usable_width: int
    usable_height: int


def _round(value: float) -> int:
    return int(value + 0.5)


def _gaps(demand: Demand, tag: Tag) -> tuple[int, int]:
    """Inner and outer gaps, both zero for a lone view with smart gaps."""
    if demand.view_count == 1 and tag.smart_gaps:
        return 0, 0
    return tag.inner_gaps, tag.outer_gaps


def _full(demand: Demand, outer: int) -> Box:
    return Box(
        x=outer,
        y=outer,
        width=demand.usable_width - 2 * outer,
        height=demand.usable_height - 2 * outer,
    )


def arrange_count(view_count: int, tag: Tag) -> tuple[int, int, int]:
    """Number of views before, in and after the master area."""
    layout = tag.layout_cur
    if layout in MASTER_STACK_LAYOUTS:
        if view_count <= tag.count_master:
            return 0, view_count, 0
        return 0, tag.count_master, view_count - tag.count_master
    if layout is Layout.MONOCLE:
        return 0, view_count, 0
    if layout is Layout.WIDE:
        if view_count == 0:
            return 0, 0, 0
        remaining = view_count - 1
        if remaining == 0:
            return 0, 1, 0
        if tag.count_wide_left == 0:
            return 0, 1, remaining
        if remaining > tag.count_wide_left:
            return tag.count_wide_left, 1, remaining - tag.count_wide_left
        return remaining, 1, 0
    return 0, 0, 0


def arrange_master_stack(
    demand: Demand, tag: Tag, num_master: int, num_stack: int
) -> tuple[Box, Box]:
    """Master and stack areas of a left, right, top or bottom layout."""
    master, stack = Box(), Box()
    inner, outer = _gaps(demand, tag)

    if num_master == 0 and num_stack == 0:
        return master, stack
    if num_master == 0:
        return master, _full(demand, outer)
    if num_stack == 0:
        return _full(demand, outer), stack

    width, height = demand.usable_width, demand.usable_height
    layout = tag.layout_cur

    if layout in (Layout.LEFT, Layout.RIGHT):
        master.width = _round((width - 2 * outer - inner) * tag.ratio_master)
        master.height = height - 2 * outer
        stack.width = width - master.width - 2 * outer - inner
        stack.height = height - 2 * outer
    elif layout in (Layout.TOP, Layout.BOTTOM):
        master.width = width - 2 * outer
        master.height = _round((height - 2 * outer - inner) * tag.ratio_master)
        stack.width = width - 2 * outer
        stack.height = height - master.height - 2 * outer - inner

    if layout in (Layout.LEFT, Layout.TOP):
        master.x, master.y = outer, outer
    elif layout is Layout.RIGHT:
        master.x, master.y = outer + stack.width + inner, outer
    elif layout is Layout.BOTTOM:
        master.x, master.y = outer, outer + stack.height + inner

    if layout is Layout.LEFT:
        stack.x, stack.y = outer + master.width + inner, outer
    elif layout is Layout.TOP:
        stack.x, stack.y = outer, outer + master.height + inner
    elif layout in (Layout.RIGHT, Layout.BOTTOM):
        stack.x, stack.y = outer, outer

    return master, stack


def arrange_wide(
    demand: Demand, tag: Tag, num_before: int, num_master: int, num_after: int
) -> tuple[Box, Box, Box]:
    """Left stack, central master and right stack areas of the wide layout."""
    before, master, after = Box(), Box(), Box()
    inner, outer = _gaps(demand, tag)
    width, height = demand.usable_width, demand.usable_height
    full_height = height - 2 * outer

    present = (bool(num_before), bool(num_master), bool(num_after))

    if present == (False, False, False):
        return before, master, after
    if present == (False, True, False):
        return before, _full(demand, outer), after
    if present == (False, False, True):
        return before, master, _full(demand, outer)
    if present == (True, False, False):
        return _full(demand, outer), master, after

    if present == (True, False, True):
        before.width = _round((width - 2 * outer - inner) / 2.0)
        before.height = full_height
        before.x, before.y = outer, outer

        after.width = width - before.width - 2 * outer - inner
        after.height = full_height
        after.x, after.y = outer + before.width + inner, outer
        return before, master, after

    side_ratio = tag.ratio_wide + (1.0 - tag.ratio_wide) / 2.0

    if present == (False, True, True):
        master.width = _round((width - 2 * outer - inner) * side_ratio)
        master.height = full_height
        master.x, master.y = outer, outer

        after.width = width - master.width - 2 * outer - inner
        after.height = full_height
        after.x, after.y = outer + master.width + inner, outer
        return before, master, after

    if present == (True, True, False):
        master.width = _round((width - 2 * outer - inner) * side_ratio)
        master.height = full_height
        master.x, master.y = width - master.width - outer, outer

        before.width = master.x - outer - inner
        before.height = full_height
        before.x, before.y = outer, outer
        return before, master, after

    master.width = _round((width - 2 * (outer + inner)) * tag.ratio_wide)
    master.height = full_height
    master.x = _round((width - master.width) / 2.0)
    master.y = outer

    before.width = master.x - outer - inner
    before.height = full_height
    before.x, before.y = outer, outer

    after.width = width - master.x - master.width - inner - outer
    after.height = full_height
    after.x, after.y = master.x + master.width + inner, outer
    return before, master, after


def arrange_monocle(demand: Demand, tag: Tag) -> list[Box]:
    """One identical box per view, covering the area within the outer gaps."""
    outer = 0 if tag.smart_gaps else tag.outer_gaps
    return [_full(demand, outer) for _ in range(demand.view_count)]


def arrange_views(
    demand: Demand,
    stack: Stack,
    dir_cur: Cardinal,
    dir_next: Cardinal,
    num_total: int,
    num_remaining: int,
    inner_gap: int,
    box_total: Box,
    box_remaining: Box,
) -> list[Box]:
    """Split an area into boxes for views, following the stack style."""
    views: list[Box] = []
    if num_total == 0 or num_remaining == 0:
        return views

    remaining = replace(box_remaining)
    while num_remaining > 0:
        this = replace(remaining)
        if num_remaining == 1:
            views.append(this)
            break

        if stack is Stack.EVEN:
            width = _round((remaining.width - (num_remaining - 1) * inner_gap) / num_remaining)
            height = _round((remaining.height - (num_remaining - 1) * inner_gap) / num_remaining)
        elif stack is Stack.DIMINISH:
            denom = num_total * (num_total + 1) // 2
            width = _round(num_remaining * (box_total.width - (num_total - 1) * inner_gap) / denom)
            height = _round(num_remaining * (box_total.height - (num_total - 1) * inner_gap) / denom)
        else:
            width = _round((remaining.width - inner_gap) / 2)
            height = _round((remaining.height - inner_gap) / 2)

        following = replace(remaining)
        if dir_cur in (Cardinal.N, Cardinal.S):
            this.height = height
            following.height -= this.height + inner_gap
        else:
            this.width = width
            following.width -= this.width + inner_gap

        if dir_cur is Cardinal.N:
            this.y += remaining.height - this.height
        elif dir_cur is Cardinal.S:
            following.y += this.height + inner_gap
        elif dir_cur is Cardinal.E:
            following.x += this.width + inner_gap
        else:
            this.x += remaining.width - this.width

        views.append(this)
        remaining = following
        num_remaining -= 1
        if stack is Stack.DWINDLE:
            dir_cur, dir_next = dir_next, dir_cur

    return views