"""FIFO queues: a fixed-size array queue and an unbounded linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing onto an array queue with no free slot."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear array queue of fixed size.

    Slots freed by dequeuing are only reclaimed once the queue has been
    emptied completely, so a queue can report full while holding fewer
    than ``capacity`` values.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the underlying array."""
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if len(self._slots) == self._capacity:
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == len(self._slots):
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self._capacity})"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("the queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"