"""A doubly linked list with a sentinel head and a tail reference."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

Compare = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoubleLinkList:
    """Doubly linked list addressed by zero-based positions."""

    def __init__(self) -> None:
        self._head = _Node(None)
        self._tail = self._head
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not self._head:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoubleLinkList({list(self)!r})"

    def insert(self, pos: int, value: Any) -> None:
        """Insert a value so that it ends up at position pos (0 <= pos <= len)."""
        if not 0 <= pos <= self._size:
            raise IndexError(f"insert position {pos} out of range 0..{self._size}")
        new_node = _Node(value)
        if pos == self._size:
            prev = self._tail
            self._tail = new_node
        else:
            prev = self._walk_to_predecessor(pos)
            prev.next.prev = new_node
        new_node.next = prev.next
        new_node.prev = prev
        prev.next = new_node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Insert a value at the front."""
        self.insert(0, value)

    def append(self, value: Any) -> None:
        """Insert a value at the back."""
        self.insert(self._size, value)

    def delete_at(self, pos: int) -> Any:
        """Remove and return the value at position pos."""
        self._check_index(pos)
        if pos == self._size - 1:
            removed = self._tail
            self._tail = removed.prev
            self._tail.next = None
        else:
            prev = self._walk_to_predecessor(pos)
            removed = prev.next
            prev.next = removed.next
            removed.next.prev = prev
        self._size -= 1
        removed.prev = removed.next = None
        return removed.value

    def pop_front(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        return self.delete_at(0)

    def pop_back(self) -> Any:
        """Remove and return the last value; IndexError if empty."""
        return self.delete_at(self._size - 1)

    def remove(self, value: Any, compare: Compare | None = None) -> int:
        """Remove every element for which compare(value, element) == 0.

        Without a comparator, elements equal to value are removed.
        Returns the number of elements removed.
        """
        if compare is None:
            def matches(element: Any) -> bool:
                return element == value
        else:
            def matches(element: Any) -> bool:
                return compare(value, element) == 0

        removed = 0
        pos = 0
        node = self._head.next
        while node is not None:
            following = node.next
            if matches(node.value):
                self.delete_at(pos)
                removed += 1
            else:
                pos += 1
            node = following
        return removed

    def get(self, pos: int) -> Any:
        """Return the value at position pos."""
        self._check_index(pos)
        if pos == self._size - 1:
            return self._tail.value
        return self._walk_to_predecessor(pos).next.value

    def first(self) -> Any:
        """Return the first value; IndexError if empty."""
        return self.get(0)

    def last(self) -> Any:
        """Return the last value; IndexError if empty."""
        return self.get(self._size - 1)

    def _check_index(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range for list of length {self._size}")

    def _walk_to_predecessor(self, pos: int) -> _Node:
        node = self._head
        for _ in range(pos):
            node = node.next
        return node