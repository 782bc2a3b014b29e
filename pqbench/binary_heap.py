"""Min-priority queue on an array-backed binary heap."""

from __future__ import annotations

from collections.abc import Iterator


class BinaryHeap:
    """Binary min-heap of (priority, value) entries ordered by priority only."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int]] = []

    def is_empty(self) -> bool:
        return not self._heap

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index][0] >= heap[parent][0]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child][0] < heap[smallest][0]:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def push(self, priority: int, value: int) -> None:
        """Add a value with the given priority."""
        self._heap.append((priority, value))
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> int:
        """Remove and return the value with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from an empty queue")
        value = self._heap[0][1]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return value

    def peek(self) -> int:
        """Return the value with the lowest priority without removing it."""
        if not self._heap:
            raise IndexError("peek into an empty queue")
        return self._heap[0][1]

    def modify_priority(self, old_priority: int, new_priority: int) -> None:
        """Give the first entry in heap order with old_priority a new priority.

        Nothing happens when no entry has old_priority.
        """
        for index, (priority, value) in enumerate(self._heap):
            if priority == old_priority:
                self._heap[index] = (new_priority, value)
                self._sift_up(index)
                self._sift_down(index)
                return

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield the entries in heap array order."""
        return iter(list(self._heap))