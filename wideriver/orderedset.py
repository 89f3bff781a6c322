"""Insertion-ordered set of objects compared by identity."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Equals = Callable[[Any, Any], bool]


class OrderedSet:
    """Objects kept in insertion order, each object at most once.

    Membership is by identity, not equality; None cannot be a member.
    Capacity starts at initial and grows by grow whenever it is full.
    """

    def __init__(self, initial: int, grow: int):
        if initial <= 0 or grow <= 0:
            raise ValueError("initial and grow must be positive")
        self._capacity = initial
        self._grow = grow
        self._members: dict[int, Any] = {}

    def add(self, val: Any) -> bool:
        """Add val; True if it was not already a member."""
        if val is None or id(val) in self._members:
            return False
        if len(self._members) >= self._capacity:
            self._capacity += self._grow
        self._members[id(val)] = val
        return True

    def remove(self, val: Any) -> bool:
        """Remove val; True if it was a member."""
        if val is None:
            return False
        return self._members.pop(id(val), None) is not None

    def __contains__(self, val: Any) -> bool:
        return val is not None and id(val) in self._members

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._members.values()))

    def __len__(self) -> int:
        return len(self._members)

    def __str__(self) -> str:
        return "\n".join(str(val) for val in self._members.values())

    def equal(self, other: Optional["OrderedSet"], equals: Optional[Equals] = None) -> bool:
        """Same size and members pairwise equal in order; identity without equals."""
        if other is None or len(self) != len(other):
            return False
        for a, b in zip(self, other):
            if equals is not None:
                if not equals(a, b):
                    return False
            elif a is not b:
                return False
        return True

    def capacity(self) -> int:
        """Current capacity: initial plus a whole number of grow steps."""
        return self._capacity