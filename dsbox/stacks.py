"""LIFO stacks: array-backed, linked, and one built from two queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class StackFullError(Exception):
    """Raised when pushing onto a full array stack."""


class StackEmptyError(IndexError):
    """Raised when reading or removing from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of values the stack can hold."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Push a value on top."""
        if len(self._items) == self._capacity:
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items.copy())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self._capacity})"


class _Node:
    __slots__ = ("value", "link")

    def __init__(self, value: Any, link: _Node | None) -> None:
        self.value = value
        self.link = link


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Push a value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack underflow")
        node = self._top
        self._top = node.link
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.link

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class QueueStack:
    """A stack kept in one queue, with the newest value always at its front."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Push a value on top by rebuilding the queue behind it."""
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._main:
            raise StackEmptyError("stack is empty")
        return self._main.popleft()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._main:
            raise StackEmptyError("stack is empty")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)

    def __repr__(self) -> str:
        return f"QueueStack({list(self._main)!r})"