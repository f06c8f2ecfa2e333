"""An unbalanced binary search tree ordered by a three-way comparator."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any

Compare = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class _Node:
    __slots__ = ("value", "left", "right", "parent")

    def __init__(self, value: Any, parent: _Node | None) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent


class BinarySearchTree:
    """Binary search tree holding distinct values.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    when ``a`` sorts before, equal to or after ``b``.
    """

    def __init__(self, compare: Compare | None = None) -> None:
        self._compare = compare or _natural
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.inorder())!r})"

    def insert(self, value: Any) -> bool:
        """Add a value; return False if an equal value is already present."""
        if self._root is None:
            self._root = _Node(value, None)
            self._size += 1
            return True
        node = self._root
        while True:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                return False
            child = node.left if cmp < 0 else node.right
            if child is None:
                new_node = _Node(value, node)
                if cmp < 0:
                    node.left = new_node
                else:
                    node.right = new_node
                self._size += 1
                return True
            node = child

    def delete(self, value: Any) -> bool:
        """Remove the value equal to ``value``; return False if absent."""
        node = self._find(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.value = predecessor.value
            node = predecessor

        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        parent = node.parent
        if parent is None:
            self._root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        self._size -= 1
        return True

    def preorder(self) -> Iterator[Any]:
        """Yield values root first, then the left and right subtrees."""
        pending: list[_Node] = []
        node = self._root
        while True:
            if node is not None:
                yield node.value
                if node.right is not None:
                    pending.append(node.right)
                node = node.left
            elif pending:
                node = pending.pop()
            else:
                return

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        pending: list[_Node] = []
        node = self._root
        while True:
            if node is not None:
                pending.append(node)
                node = node.left
            elif pending:
                node = pending.pop()
                yield node.value
                node = node.right
            else:
                return

    def postorder(self) -> Iterator[Any]:
        """Yield values of the left and right subtrees before their root."""
        if self._root is None:
            return
        pending: list[_Node] = [self._root]
        previous: _Node | None = None
        while pending:
            top = pending[-1]
            is_leaf = top.left is None and top.right is None
            if is_leaf or (previous is not None and previous.parent is top):
                previous = pending.pop()
                yield previous.value
            else:
                if top.right is not None:
                    pending.append(top.right)
                if top.left is not None:
                    pending.append(top.left)

    def level_order(self) -> Iterator[Any]:
        """Yield values level by level, left to right."""
        if self._root is None:
            return
        queue: deque[_Node] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def height(self) -> int:
        """Return the number of levels; 0 for an empty tree."""
        if self._root is None:
            return 0
        levels = 0
        queue: deque[_Node] = deque([self._root])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return levels

    def _find(self, value: Any) -> _Node | None:
        node = self._root
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None