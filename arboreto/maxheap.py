"""A binary max-heap of integers stored in a flat list."""

from __future__ import annotations

from collections.abc import Iterable


class MaxHeap:
    """Max-heap kept as an implicit binary tree in a list."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the heap holds no values."""
        return not self._items

    def insert(self, value: int) -> None:
        """Add a value and restore the heap order."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def root(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("root of an empty heap")
        return self._items[0]

    def remove_root(self) -> None:
        """Remove the largest value; does nothing on an empty heap."""
        if not self._items:
            return
        self._items[0] = self._items[-1]
        self._sift_down(0)
        self._items.pop()

    def as_list(self) -> list[int]:
        """Return a copy of the underlying array, in heap order."""
        return list(self._items)

    def format_list(self) -> str:
        """Return the values in heap order, separated by commas."""
        return ", ".join(str(value) for value in self._items)

    def format_tree(self) -> str:
        """Return a pre-order drawing of the tree, one node per line."""
        lines: list[str] = []
        if self._items:
            self._draw(0, 0, lines)
        return "\n".join(lines)

    def heapsort(self) -> list[int]:
        """Return the values sorted ascending, leaving the heap unchanged."""
        items = list(self._items)
        for end in range(len(items) - 1, 0, -1):
            items[0], items[end] = items[end], items[0]
            parent, child = 0, 1
            while child < end:
                if child + 1 < end and items[child] < items[child + 1]:
                    child += 1
                if items[parent] < items[child]:
                    items[parent], items[child] = items[child], items[parent]
                    parent = child
                    child = 2 * parent + 1
                else:
                    break
        return items

    def find(self, value: int) -> int | None:
        """Return the array index holding value, or None if absent.

        Subtrees whose root is smaller than value are skipped; the search
        visits nodes in pre-order, left child first.
        """
        size = len(self._items)
        pending = [0]
        while pending:
            index = pending.pop()
            if index >= size or self._items[index] < value:
                continue
            if self._items[index] == value:
                return index
            pending.append(2 * index + 2)
            pending.append(2 * index + 1)
        return None

    def _draw(self, index: int, depth: int, lines: list[str]) -> None:
        lines.append(f"{'--' * depth}({self._items[index]})")
        size = len(self._items)
        for child in (2 * index + 1, 2 * index + 2):
            if child < size:
                self._draw(child, depth + 1, lines)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * index + 1
            if child >= size:
                return
            if child + 1 < size and items[child] < items[child + 1]:
                child += 1
            if not items[index] < items[child]:
                return
            items[index], items[child] = items[child], items[index]
            index = child


def is_min_heap(values: Iterable[int]) -> bool:
    """Return True when every parent is no greater than its children."""
    items = list(values)
    return all(items[(i - 1) // 2] <= items[i] for i in range(1, len(items)))


def heapify_max(values: list[int]) -> None:
    """Rearrange a list in place so that it satisfies the max-heap order."""
    size = len(values)
    for start in range(size // 2 - 1, -1, -1):
        parent = start
        while 2 * parent + 1 < size:
            largest = 2 * parent + 1
            if largest + 1 < size and values[largest + 1] > values[largest]:
                largest += 1
            if values[parent] < values[largest]:
                values[parent], values[largest] = values[largest], values[parent]
                parent = largest
            else:
                break