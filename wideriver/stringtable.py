"""Insertion-ordered table keyed by strings, optionally ignoring ASCII case."""

from __future__ import annotations

from typing import Any, Hashable, Optional

from .inttable import Equals, OrderedTable

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _fold(key: str) -> str:
    return key.translate(_ASCII_LOWER)


class StringTable(OrderedTable):
    """Ordered table with string keys.

    With case_insensitive, keys differing only in ASCII letter case are the
    same key, and the spelling first inserted is the one kept. A None key is
    never stored and never found.
    """

    def __init__(self, initial: int, grow: int, case_insensitive: bool = False):
        super().__init__(initial, grow)
        self.case_insensitive = bool(case_insensitive)

    def _lookup(self, key: Any) -> Hashable:
        if not isinstance(key, str):
            raise TypeError(f"key must be a string, not {type(key).__name__}")
        return _fold(key) if self.case_insensitive else key

    def _stored(self, key: Any) -> Any:
        return key

    def _key_text(self, key: Any) -> str:
        return key

    def get(self, key: Optional[str]) -> Any:
        if key is None:
            return None
        return super().get(key)

    def put(self, key: Optional[str], val: Any) -> Any:
        if key is None:
            return None
        return super().put(key, val)

    def remove(self, key: Optional[str]) -> Any:
        if key is None:
            return None
        return super().remove(key)

    def equal(self, other: Optional["StringTable"], equals: Optional[Equals] = None) -> bool:
        """Same size, keys equal in order, values equal; identity without equals.

        Keys are compared ignoring ASCII case when either table does.
        """
        if other is None or len(self) != len(other):
            return False
        fold = self.case_insensitive or getattr(other, "case_insensitive", False)
        for (ak, av), (bk, bv) in zip(self, other):
            if fold:
                if _fold(ak) != _fold(bk):
                    return False
            elif ak != bk:
                return False
            if equals is not None:
                if not equals(av, bv):
                    return False
            elif av is not bv:
                return False
        return True

    def __str__(self) -> str:
        """One "key = value" line per entry, "(null)" for None values."""
        return "\n".join(
            f"{key} = {'(null)' if val is None else val}" for key, val in self
        )