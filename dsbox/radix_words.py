"""Build fixed-width digit keys from dates and words and radix-sort them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

KEY_WIDTH = 26


def encode_ascii(word: str) -> str:
    """Encode each character as its ASCII code in three digits."""
    for ch in word:
        if ord(ch) > 127:
            raise ValueError(f"character {ch!r} is not ASCII")
    return "".join(f"{ord(ch):03d}" for ch in word)


def build_keys(dates: Sequence[str], words: Sequence[str]) -> list[str]:
    """Join each date with its encoded word and right-pad with zeros to KEY_WIDTH."""
    keys = []
    for date, word in zip(dates, words, strict=True):
        key = date + encode_ascii(word)
        if len(key) > KEY_WIDTH:
            raise ValueError(f"key for {word!r} is longer than {KEY_WIDTH} digits")
        keys.append(key.ljust(KEY_WIDTH, "0"))
    return keys


def radix_sort_strings(keys: Iterable[str]) -> list[str]:
    """Stable LSD radix sort of equal-length decimal digit strings."""
    items = list(keys)
    if not items:
        return items
    width = len(items[0])
    for key in items:
        if len(key) != width:
            raise ValueError("all keys must have the same length")
        if not (key.isascii() and key.isdigit()):
            raise ValueError(f"key {key!r} holds a non-digit character")
    for position in range(width - 1, -1, -1):
        buckets: list[list[str]] = [[] for _ in range(10)]
        for key in items:
            buckets[int(key[position])].append(key)
        items = [key for bucket in buckets for key in bucket]
    return items