"""Insertion-ordered table keyed by object identity."""

from __future__ import annotations

from typing import Any, Hashable

from .inttable import OrderedTable


class IdentityTable(OrderedTable):
    """Ordered table whose keys match only when they are the same object.

    Keys that are equal but distinct objects are separate entries. None is
    a valid key. The table holds a reference to every key it stores.
    """

    def __init__(self, initial: int, grow: int):
        super().__init__(initial, grow)

    def _lookup(self, key: Any) -> Hashable:
        return id(key)

    def _stored(self, key: Any) -> Any:
        return key

    def _same_key(self, a: Any, b: Any) -> bool:
        return a is b

    def _key_text(self, key: Any) -> str:
        return "(nil)" if key is None else hex(id(key))

    def __str__(self) -> str:
        """One "address = value" line per entry, "(null)" for None values."""
        return "\n".join(
            f"{self._key_text(key)} = {'(null)' if val is None else val}"
            for key, val in self
        )