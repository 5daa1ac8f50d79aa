"""A fixed-size hash table using linear probing and tombstone deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_SIZE = 20


@dataclass
class _Item:
    key: int
    data: Any


_TOMBSTONE = _Item(-1, -1)


class OpenAddressingTable:
    """Integer keys hashed by ``key % size``, collisions resolved by linear probing."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._slots: list[_Item | None] = [None] * size

    def _probe(self, key: int):
        start = key % self._size
        for step in range(self._size):
            yield (start + step) % self._size

    def insert(self, key: int, data: Any) -> None:
        """Store data under key in the first empty or deleted slot."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _TOMBSTONE:
                self._slots[index] = _Item(key, data)
                return
        raise OverflowError("hash table is full")

    def _find_index(self, key: int) -> int:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                break
            if slot is not _TOMBSTONE and slot.key == key:
                return index
        raise KeyError(key)

    def search(self, key: int) -> Any:
        """Return the data stored under key."""
        return self._slots[self._find_index(key)].data

    def delete(self, key: int) -> Any:
        """Remove key, leaving a tombstone, and return its data."""
        index = self._find_index(key)
        data = self._slots[index].data
        self._slots[index] = _TOMBSTONE
        return data

    def display(self) -> str:
        """Render every slot: ``(key,data)`` for used ones, ``~~`` for empty."""
        return "".join(
            " ~~ " if slot is None else f" ({slot.key},{slot.data})"
            for slot in self._slots
        )