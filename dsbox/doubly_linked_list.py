"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """A chain of nodes linked to both neighbours."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> None:
        """Add a value at the head."""
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add a value at the tail."""
        node = _Node(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _link_after(self, anchor: _Node, value: Any) -> None:
        node = _Node(value)
        node.prev = anchor
        node.next = anchor.next
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def insert_after_position(self, position: int, value: Any) -> None:
        """Insert a value after the node at the given 0-based position."""
        if position < 0 or position >= self._size:
            raise IndexError(f"there are fewer than {position + 1} elements")
        node = self._head
        for _ in range(position):
            node = node.next
        self._link_after(node, value)

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._tail)

    def delete_after(self, value: Any) -> Any:
        """Remove and return the value following the first node holding value."""
        node = next((n for n in self._nodes() if n.value == value), None)
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if node.next is None:
            raise ValueError(f"nothing follows {value!r}")
        return self._unlink(node.next)

    def index(self, value: Any) -> int:
        """Return the 0-based position of the first node holding value."""
        for position, node in enumerate(self._nodes()):
            if node.value == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"