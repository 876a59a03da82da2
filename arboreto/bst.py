"""An unbalanced binary search tree of integers with a few tree queries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree; height is filled by compute_heights."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None
    height: int = 0


def _is_full(node: BSTNode | None) -> bool:
    if node is None:
        return True
    if node.left is None and node.right is None:
        return True
    if node.left is not None and node.right is not None:
        return _is_full(node.left) and _is_full(node.right)
    return False


def _is_complete(node: BSTNode | None, index: int, total: int) -> bool:
    if node is None:
        return True
    if index >= total:
        return False
    return _is_complete(node.left, 2 * index + 1, total) and _is_complete(
        node.right, 2 * index + 2, total
    )


def _remove(node: BSTNode | None, value: int) -> BSTNode | None:
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    return node


def _collect_range(
    node: BSTNode | None, low: int, high: int, found: list[int]
) -> None:
    if node is None:
        return
    if low < node.value:
        _collect_range(node.left, low, high, found)
    if low <= node.value <= high:
        found.append(node.value)
    if high > node.value:
        _collect_range(node.right, low, high, found)


def _heights(node: BSTNode | None, found: list[tuple[int, int]]) -> int:
    if node is None:
        return -1
    left = _heights(node.left, found)
    right = _heights(node.right, found)
    node.height = max(left, right) + 1
    found.append((node.value, node.height))
    return node.height


class BinarySearchTree:
    """Binary search tree; equal values are stored in the right subtree."""

    def __init__(self) -> None:
        self._root: BSTNode | None = None

    def _walk(self) -> Iterator[BSTNode]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __len__(self) -> int:
        return sum(1 for _ in self._walk())

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value) is not None

    def insert(self, value: int) -> None:
        """Insert a value; duplicates go to the right."""
        new = BSTNode(value)
        if self._root is None:
            self._root = new
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = new
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new
                    return
                current = current.right

    def find(self, value: int) -> BSTNode | None:
        """Return the first node holding value, or None."""
        current = self._root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def remove(self, value: int) -> None:
        """Remove one occurrence of value; absent values are ignored."""
        self._root = _remove(self._root, value)

    def total(self) -> int:
        """Return the sum of all values."""
        return sum(node.value for node in self._walk())

    def mean(self) -> float:
        """Return the mean of all values, or 0.0 for an empty tree."""
        count = len(self)
        return self.total() / count if count else 0.0

    def is_full(self) -> bool:
        """Return True when every node has either zero or two children."""
        return _is_full(self._root)

    def is_complete(self) -> bool:
        """Return True when the nodes fill the levels from left to right."""
        return _is_complete(self._root, 0, len(self))

    def values_in_range(self, low: int, high: int) -> list[int]:
        """Return, in order, the values v with low <= v <= high."""
        found: list[int] = []
        _collect_range(self._root, low, high, found)
        return found

    def is_strictly_binary(self) -> bool:
        """Return True when no node has exactly one child."""
        return _is_full(self._root)

    def count_greater(self, value: int) -> int:
        """Return how many stored values are greater than value."""
        return sum(1 for node in self._walk() if node.value > value)

    def level_mean(self, level: int) -> float:
        """Return the mean of the values at a depth (root is 0), or 0.0."""
        if level < 0 or self._root is None:
            return 0.0
        nodes = [self._root]
        for _ in range(level):
            nodes = [
                child
                for node in nodes
                for child in (node.left, node.right)
                if child is not None
            ]
        if not nodes:
            return 0.0
        return sum(node.value for node in nodes) / len(nodes)

    def compute_heights(self) -> list[tuple[int, int]]:
        """Store each node's height and return (value, height) in post-order.

        Leaves have height 0.
        """
        found: list[tuple[int, int]] = []
        _heights(self._root, found)
        return found