"""A singly linked list with the usual insertion, removal and reordering operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Student:
    """A record with a roll number and a name."""

    rollno: int
    name: str


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class SinglyLinkedList:
    """A chain of nodes each linked to the one after it."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, value: Any) -> tuple[_Node | None, _Node | None]:
        """Return (previous, node) for the first node holding value."""
        previous = None
        for node in self._nodes():
            if node.value == value:
                return previous, node
            previous = node
        return None, None

    def push_front(self, value: Any) -> None:
        """Add a value at the head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Add a value at the tail."""
        new_node = _Node(value)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self._head = new_node
        else:
            last.next = new_node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert a value so that it ends up at the given 0-based position."""
        if index < 0 or index > self._size:
            raise IndexError(f"position {index} is out of range")
        if index == 0:
            self.push_front(value)
            return
        node = self._head
        for _ in range(index - 1):
            node = node.next
        node.next = _Node(value, node.next)
        self._size += 1

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert a value right after the first node holding target."""
        _, node = self._find(target)
        if node is None:
            raise ValueError(f"{target!r} is not in the list")
        node.next = _Node(value, node.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        previous = None
        last = self._head
        while last.next is not None:
            previous, last = last, last.next
        if previous is None:
            self._head = None
        else:
            previous.next = None
        self._size -= 1
        return last.value

    def _unlink(self, previous: _Node | None, node: _Node) -> None:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding value."""
        previous, node = self._find(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        self._unlink(previous, node)

    def remove_where(self, predicate: Callable[[Any], bool]) -> Any:
        """Remove and return the first value for which predicate is true."""
        previous = None
        for node in self._nodes():
            if predicate(node.value):
                self._unlink(previous, node)
                return node.value
            previous = node
        raise ValueError("no element matches")

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def swap(self, x: Any, y: Any) -> None:
        """Swap the nodes holding x and y by changing links; no-op if either is missing."""
        if x == y:
            return
        prev_x, cur_x = self._find(x)
        prev_y, cur_y = self._find(y)
        if cur_x is None or cur_y is None:
            return
        if prev_x is not None:
            prev_x.next = cur_y
        else:
            self._head = cur_y
        if prev_y is not None:
            prev_y.next = cur_x
        else:
            self._head = cur_x
        cur_x.next, cur_y.next = cur_y.next, cur_x.next

    def sort(self) -> None:
        """Sort the values in place in ascending order."""
        swapped = True
        while swapped:
            swapped = False
            for node in self._nodes():
                following = node.next
                if following is not None and node.value > following.value:
                    node.value, following.value = following.value, node.value
                    swapped = True

    def max(self) -> Any:
        """Return the largest value."""
        if self._head is None:
            raise ValueError("max of an empty list")
        return max(self)

    def union(self, other: Iterable[Any]) -> SinglyLinkedList:
        """Return a new list holding this list's values followed by other's."""
        joined = SinglyLinkedList(self)
        for value in other:
            joined.append(value)
        return joined

    def intersection(self, other: Iterable[Any]) -> SinglyLinkedList:
        """Return the values found in both, in this list's order, each match used once."""
        remaining = list(other)
        common = SinglyLinkedList()
        for value in self:
            if value in remaining:
                remaining.remove(value)
                common.append(value)
        return common

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"