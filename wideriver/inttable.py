"""Insertion-ordered table keyed by unsigned 64-bit integers."""

from __future__ import annotations

import operator
from typing import Any, Callable, Hashable, Iterator, Optional

Equals = Callable[[Any, Any], bool]

_UINT64 = 1 << 64


class OrderedTable:
    """Key to value table that keeps entries in insertion order.

    Overwriting a key keeps its position; removing a key closes the gap.
    None values are permitted. Integer keys are taken modulo 2**64.
    Capacity starts at initial and grows by grow whenever it is full.
    """

    def __init__(self, initial: int, grow: int):
        if initial <= 0 or grow <= 0:
            raise ValueError("initial and grow must be positive")
        self._capacity = initial
        self._grow = grow
        self._entries: dict[Hashable, tuple[Any, Any]] = {}

    def _lookup(self, key: Any) -> Hashable:
        """The form of key used to find its entry."""
        return operator.index(key) % _UINT64

    def _stored(self, key: Any) -> Any:
        """The form of key kept in the table."""
        return operator.index(key) % _UINT64

    def _same_key(self, a: Any, b: Any) -> bool:
        return a == b

    def _key_text(self, key: Any) -> str:
        return str(key)

    def get(self, key: Any) -> Any:
        """Value of key, None when absent."""
        entry = self._entries.get(self._lookup(key))
        return entry[1] if entry is not None else None

    def put(self, key: Any, val: Any) -> Any:
        """Set key to val; return the value it replaced, or None."""
        found = self._lookup(key)
        entry = self._entries.get(found)
        if entry is not None:
            self._entries[found] = (entry[0], val)
            return entry[1]
        if len(self._entries) >= self._capacity:
            self._capacity += self._grow
        self._entries[found] = (self._stored(key), val)
        return None

    def remove(self, key: Any) -> Any:
        """Remove key; return its value, or None when absent."""
        entry = self._entries.pop(self._lookup(key), None)
        return entry[1] if entry is not None else None

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """(key, value) entries in order."""
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> list[Any]:
        return [key for key, _ in self._entries.values()]

    def values(self) -> list[Any]:
        return [val for _, val in self._entries.values()]

    def equal(self, other: Optional["OrderedTable"], equals: Optional[Equals] = None) -> bool:
        """Same size, keys equal in order, values equal; identity without equals."""
        if other is None or len(self) != len(other):
            return False
        for (ak, av), (bk, bv) in zip(self, other):
            if not self._same_key(ak, bk):
                return False
            if equals is not None:
                if not equals(av, bv):
                    return False
            elif av is not bv:
                return False
        return True

    def capacity(self) -> int:
        """Current capacity: initial plus a whole number of grow steps."""
        return self._capacity

    def __str__(self) -> str:
        return "\n".join(
            f"{self._key_text(key)} = {'(null)' if val is None else val}"
            for key, val in self._entries.values()
        )