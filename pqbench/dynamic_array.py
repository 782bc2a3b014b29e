"""Min-priority queue on a growable array kept sorted by priority."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from operator import itemgetter

_priority = itemgetter(0)


class DynamicArrayQueue:
    """Priority queue on an array sorted by ascending priority.

    Elements of equal priority leave in the order they arrived.
    """

    def __init__(self) -> None:
        self._data: list[tuple[int, int]] = []

    def is_empty(self) -> bool:
        return not self._data

    def push(self, priority: int, value: int) -> None:
        """Add a value after every element of lower or equal priority."""
        bisect.insort_right(self._data, (priority, value), key=_priority)

    def pop(self) -> int:
        """Remove and return the value with the lowest priority."""
        if not self._data:
            raise IndexError("pop from an empty queue")
        return self._data.pop(0)[1]

    def peek(self) -> int:
        """Return the value with the lowest priority without removing it."""
        if not self._data:
            raise IndexError("peek into an empty queue")
        return self._data[0][1]

    def modify_priority(self, old_priority: int, new_priority: int) -> None:
        """Give the first element with old_priority the priority new_priority."""
        index = bisect.bisect_left(self._data, old_priority, key=_priority)
        if index == len(self._data) or self._data[index][0] != old_priority:
            raise KeyError(old_priority)
        _, value = self._data.pop(index)
        self.push(new_priority, value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(list(self._data))