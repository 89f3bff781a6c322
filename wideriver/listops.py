"""Comparison helpers and list operations driven by caller-supplied tests."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

Equals = Callable[[Any, Any], bool]
LessThan = Callable[[Any, Any], bool]


def equals_strcmp(a: Optional[str], b: Optional[str]) -> bool:
    """True when both are None or both are equal strings."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    return a == b


def equals_strstr(a: Optional[str], b: Optional[str]) -> bool:
    """True when both are None or b occurs within a."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    return b in a


def _matches(equals: Optional[Equals], value: Any, b: Any) -> bool:
    return equals(value, b) if equals is not None else value is b


def find_equal(items: list[T], equals: Optional[Equals], b: Any) -> Optional[T]:
    """First item equal to b; identity comparison when equals is None."""
    return next((item for item in items if _matches(equals, item, b)), None)


def remove_all(items: list, equals: Optional[Equals], b: Any) -> int:
    """Remove every item equal to b in place; return how many were removed."""
    kept = [item for item in items if not _matches(equals, item, b)]
    removed = len(items) - len(kept)
    items[:] = kept
    return removed


def xor_merge(
    first: list,
    second: list,
    equals: Optional[Equals],
    clone: Optional[Callable[[Any], Any]] = None,
) -> None:
    """Merge second into first, keeping what appears in only one of them.

    Each item of second removes its equals from first, or is appended
    (cloned when clone is given) when first held none.
    """
    for item in second:
        if not remove_all(first, equals, item):
            first.append(clone(item) if clone is not None else item)


def sort_by_less_than(items: list[T], less_than: Optional[LessThan]) -> list[T]:
    """A new stably sorted list; empty when less_than is None."""
    if not items or less_than is None:
        return []
    ordered: list[T] = []
    for item in items:
        position = next(
            (i for i, placed in enumerate(ordered) if less_than(item, placed)),
            len(ordered),
        )
        ordered.insert(position, item)
    return ordered


def move_matching(to: list, source: list, equals: Optional[Equals], b: Any) -> None:
    """Move items equal to b from source to the end of to; nothing without equals."""
    if equals is None:
        return
    moving = [item for item in source if equals(item, b)]
    source[:] = [item for item in source if not equals(item, b)]
    to.extend(moving)


def list_equal(a: list, b: list, equals: Optional[Equals]) -> bool:
    """Same length and pairwise equal; identity comparison when equals is None."""
    if len(a) != len(b):
        return False
    return all(_matches(equals, x, y) for x, y in zip(a, b))


def list_str(items: list[str]) -> Optional[str]:
    """Items joined by newlines, None for an empty list."""
    if not items:
        return None
    return "\n".join(items)