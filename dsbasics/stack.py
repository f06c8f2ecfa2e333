"""A last-in, first-out stack backed by a dynamic array."""

from __future__ import annotations

from typing import Any

from dsbasics.dynamic_array import DynamicArray

_STACK_CAPACITY = 10


class ArrayStack:
    """Stack whose top is the end of a dynamic array."""

    def __init__(self) -> None:
        self._array = DynamicArray(_STACK_CAPACITY)

    def __len__(self) -> int:
        return len(self._array)

    def __repr__(self) -> str:
        return f"ArrayStack({list(self._array)!r})"

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._array.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if empty."""
        if not len(self._array):
            raise IndexError("pop from empty stack")
        return self._array.pop()

    def top(self) -> Any:
        """Return the top value without removing it; IndexError if empty."""
        if not len(self._array):
            raise IndexError("top of empty stack")
        return self._array[len(self._array) - 1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return len(self._array) == 0