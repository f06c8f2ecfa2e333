"""A growable array with explicit capacity bookkeeping."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

DEFAULT_CAPACITY = 10

Compare = Callable[[Any, Any], int]


def _matches(value: Any, item: Any, compare: Compare | None) -> bool:
    """Tell whether ``item`` matches ``value`` under ``compare`` (or ==)."""
    if compare is None:
        return bool(value == item)
    return compare(value, item) == 0


class DynamicArray:
    """Sequence that grows by half its capacity and shrinks by half when sparse."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._items: list[Any] = []
        self._capacity = capacity if capacity > 0 else DEFAULT_CAPACITY

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __getitem__(self, pos: int) -> Any:
        self._check_index(pos)
        return self._items[pos]

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        self.insert(len(self._items), value)

    def insert(self, pos: int, value: Any) -> None:
        """Insert a value before position pos (0 <= pos <= len)."""
        size = len(self._items)
        if not 0 <= pos <= size:
            raise IndexError(f"insert position {pos} out of range 0..{size}")
        if size + (size >> 1) > self._capacity or size >= self._capacity:
            self._expand()
        self._items.insert(pos, value)

    def pop(self, pos: int | None = None) -> Any:
        """Remove and return the value at pos (the last one by default)."""
        if pos is None:
            pos = len(self._items) - 1
        self._check_index(pos)
        if len(self._items) < self._capacity - (self._capacity >> 1):
            self._shrink()
        return self._items.pop(pos)

    def remove(self, value: Any, compare: Compare | None = None) -> int:
        """Remove every element for which compare(value, element) == 0.

        Without ``compare`` elements equal to ``value`` are removed.
        Returns the number of elements removed.
        """
        removed = 0
        while True:
            pos = next(
                (
                    idx
                    for idx, item in enumerate(self._items)
                    if _matches(value, item, compare)
                ),
                None,
            )
            if pos is None:
                return removed
            self.pop(pos)
            removed += 1

    def _check_index(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range 0..{len(self._items) - 1}")

    def _expand(self) -> None:
        grown = self._capacity + (self._capacity >> 1)
        self._capacity = max(grown, len(self._items) + 1)

    def _shrink(self) -> None:
        self._capacity -= self._capacity >> 1