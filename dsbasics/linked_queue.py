"""A first-in, first-out queue backed by a doubly linked list."""

from __future__ import annotations

from typing import Any

from dsbasics.linked_list import DoubleLinkList


class LinkedQueue:
    """Queue that enters at the tail of a linked list and leaves at its head."""

    def __init__(self) -> None:
        self._list = DoubleLinkList()

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._list)!r})"

    def push(self, value: Any) -> None:
        """Add a value at the rear."""
        self._list.append(value)

    def pop(self) -> Any:
        """Remove and return the front value; IndexError if empty."""
        if not len(self._list):
            raise IndexError("pop from empty queue")
        return self._list.pop_front()

    def front(self) -> Any:
        """Return the front value without removing it; IndexError if empty."""
        if not len(self._list):
            raise IndexError("front of empty queue")
        return self._list.first()

    def rear(self) -> Any:
        """Return the rear value without removing it; IndexError if empty."""
        if not len(self._list):
            raise IndexError("rear of empty queue")
        return self._list.last()

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return len(self._list) == 0