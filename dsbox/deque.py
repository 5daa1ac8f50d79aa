"""Double-ended queues: a fixed-capacity one and an unbounded linked one."""

from __future__ import annotations

from collections import deque as _deque
from collections.abc import Iterator
from typing import Any


class DequeFullError(Exception):
    """Raised when pushing onto a bounded deque that has no free slot."""


class DequeEmptyError(IndexError):
    """Raised when reading or removing from an empty deque."""


class BoundedDeque:
    """A deque holding at most ``capacity`` values, like a circular buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: _deque[Any] = _deque()

    @property
    def capacity(self) -> int:
        """The largest number of values the deque can hold."""
        return self._capacity

    def _check_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise DequeFullError("queue is full")

    def _check_items(self) -> None:
        if not self._items:
            raise DequeEmptyError("queue empty")

    def push_front(self, value: Any) -> None:
        """Insert a value at the front."""
        self._check_room()
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Insert a value at the rear."""
        self._check_room()
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        self._check_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the value at the rear."""
        self._check_items()
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedDeque({list(self._items)!r}, capacity={self._capacity})"


class _Element:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Element | None = None
        self.next: _Element | None = None


class LinkedDeque:
    """An unbounded deque built from doubly linked elements."""

    def __init__(self) -> None:
        self._front: _Element | None = None
        self._back: _Element | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert a value at the front."""
        element = _Element(value)
        element.next = self._front
        if self._front is None:
            self._back = element
        else:
            self._front.prev = element
        self._front = element
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert a value at the back."""
        element = _Element(value)
        element.prev = self._back
        if self._back is None:
            self._front = element
        else:
            self._back.next = element
        self._back = element
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise DequeEmptyError("deque is empty")
        element = self._front
        self._front = element.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        self._size -= 1
        return element.value

    def pop_back(self) -> Any:
        """Remove and return the value at the back."""
        if self._back is None:
            raise DequeEmptyError("deque is empty")
        element = self._back
        self._back = element.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        self._size -= 1
        return element.value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise DequeEmptyError("deque front is empty")
        return self._front.value

    def back(self) -> Any:
        """Return the value at the back without removing it."""
        if self._back is None:
            raise DequeEmptyError("deque back is empty")
        return self._back.value

    def __iter__(self) -> Iterator[Any]:
        element = self._front
        while element is not None:
            yield element.value
            element = element.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedDeque({list(self)!r})"