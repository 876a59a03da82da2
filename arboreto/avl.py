"""A self-balancing AVL tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

EMPTY_TREE = "Árvore vazia."


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a leaf has height 1."""

    value: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1

    def balance(self) -> int:
        """Return the left subtree height minus the right subtree height."""
        return _height(self.left) - _height(self.right)

    def _update_height(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _rotate_right(top: AVLNode) -> AVLNode:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    pivot.right = top
    top._update_height()
    pivot._update_height()
    return pivot


def _rotate_left(top: AVLNode) -> AVLNode:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    pivot.left = top
    top._update_height()
    pivot._update_height()
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    node._update_height()
    balance = node.balance()
    if balance > 1:
        assert node.left is not None
        if node.left.balance() < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if node.right.balance() > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, value: int) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    return _rebalance(node)


def _remove(node: AVLNode | None, value: int) -> AVLNode | None:
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is None:
            return None
        node = child
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    return _rebalance(node)


def _draw(node: AVLNode, depth: int, lines: list[str]) -> None:
    if node.right is not None:
        _draw(node.right, depth + 1, lines)
    lines.append(f"{'   ' * depth}{node.value}")
    if node.left is not None:
        _draw(node.left, depth + 1, lines)


class AVLTree:
    """AVL tree; inserting a value already present does nothing."""

    def __init__(self) -> None:
        self._root: AVLNode | None = None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        stack: list[AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value) is not None

    def height(self) -> int:
        """Return the height of the tree; 0 when empty, 1 for one node."""
        return _height(self._root)

    def insert(self, value: int) -> None:
        """Insert value and rebalance."""
        self._root = _insert(self._root, value)

    def remove(self, value: int) -> None:
        """Remove value if present and rebalance."""
        self._root = _remove(self._root, value)

    def find(self, value: int) -> AVLNode | None:
        """Return the node holding value, or None."""
        node = self._root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def in_order(self) -> list[int]:
        """Return the values in ascending order."""
        return list(self)

    def format_tree(self) -> str:
        """Draw the tree sideways: right subtree above, three spaces per level."""
        if self._root is None:
            return EMPTY_TREE
        lines: list[str] = []
        _draw(self._root, 0, lines)
        return "\n".join(lines)

    def format_in_order(self) -> str:
        """Return the values in ascending order separated by spaces."""
        if self._root is None:
            return EMPTY_TREE
        return " ".join(str(value) for value in self)