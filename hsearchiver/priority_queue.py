"""A binary min-heap ordered only by the items' ``<`` operator."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-heap that compares items with ``<`` alone."""

    def __init__(self) -> None:
        self._tree: list[T] = []

    def _sift_up(self, index: int) -> None:
        tree = self._tree
        while index:
            parent = (index - 1) // 2
            if not tree[index] < tree[parent]:
                break
            tree[index], tree[parent] = tree[parent], tree[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        tree = self._tree
        size = len(tree)
        while 2 * index + 1 < size:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = left
            if right < size and tree[right] < tree[left]:
                smallest = right
            if not tree[smallest] < tree[index]:
                break
            tree[index], tree[smallest] = tree[smallest], tree[index]
            index = smallest

    def push(self, item: T) -> None:
        """Add an item."""
        self._tree.append(item)
        self._sift_up(len(self._tree) - 1)

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._tree:
            raise IndexError("peek from an empty priority queue")
        return self._tree[0]

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._tree:
            raise IndexError("pop from an empty priority queue")
        top = self._tree[0]
        last = self._tree.pop()
        if self._tree:
            self._tree[0] = last
            self._sift_down(0)
        return top

    def __len__(self) -> int:
        return len(self._tree)