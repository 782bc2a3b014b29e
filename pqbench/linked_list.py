"""Priority queue kept as a sorted singly linked list backed by a node pool."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class Node:
    """A list cell holding a priority, a value and the link to the next cell."""

    priority: int
    value: int
    next: Node | None = None


class NodePool:
    """A free list of nodes reused so that pushes do not allocate every time."""

    def __init__(self, size: int = 100) -> None:
        self._free: Node | None = None
        self._count = 0
        for _ in range(size):
            self.return_node(Node(0, 0))

    def get_node(self, priority: int, value: int) -> Node:
        """Take a node from the pool, or make a new one if the pool is empty."""
        node = self._free
        if node is None:
            return Node(priority, value)
        self._free = node.next
        self._count -= 1
        node.priority = priority
        node.value = value
        node.next = None
        return node

    def return_node(self, node: Node) -> None:
        """Put a node back into the pool."""
        node.next = self._free
        self._free = node
        self._count += 1

    def __len__(self) -> int:
        return self._count


class LinkedListQueue:
    """Min-priority queue on a linked list sorted by ascending priority.

    Elements of equal priority leave in the order they arrived.
    """

    def __init__(self, pool_size: int = 10000) -> None:
        self._head: Node | None = None
        self._size = 0
        self._pool = NodePool(pool_size)

    def is_empty(self) -> bool:
        return self._head is None

    def _link(self, node: Node) -> None:
        """Insert a detached node after every node of lower or equal priority."""
        head = self._head
        if head is None or head.priority > node.priority:
            node.next = head
            self._head = node
            return
        current = head
        while current.next is not None and current.next.priority <= node.priority:
            current = current.next
        node.next = current.next
        current.next = node

    def push(self, priority: int, value: int) -> None:
        """Add a value with the given priority."""
        self._link(self._pool.get_node(priority, value))
        self._size += 1

    def pop(self) -> int:
        """Remove and return the value with the lowest priority."""
        head = self._head
        if head is None:
            raise IndexError("pop from an empty queue")
        value = head.value
        self._head = head.next
        self._pool.return_node(head)
        self._size -= 1
        return value

    def peek(self) -> int:
        """Return the value with the lowest priority without removing it."""
        if self._head is None:
            raise IndexError("peek into an empty queue")
        return self._head.value

    def modify_priority(self, old_priority: int, new_priority: int) -> None:
        """Give the first element with old_priority the priority new_priority."""
        head = self._head
        if head is None:
            raise IndexError("queue is empty")
        if head.priority == old_priority:
            head.priority = new_priority
            if head.next is not None and head.next.priority < new_priority:
                self._head = head.next
                head.next = None
                self._link(head)
            return
        prev, current = head, head.next
        while current is not None and current.priority != old_priority:
            prev, current = current, current.next
        if current is None:
            raise KeyError(old_priority)
        prev.next = current.next
        current.next = None
        current.priority = new_priority
        self._link(current)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[int, int]]:
        current = self._head
        while current is not None:
            yield current.priority, current.value
            current = current.next