"""A prefix tree over lower-case ASCII words."""

from __future__ import annotations

import string

ALPHABET = string.ascii_lowercase


class _TrieNode:
    __slots__ = ("children", "is_end_of_word")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.is_end_of_word = False


def _check_word(word: str) -> None:
    bad = next((ch for ch in word if ch not in ALPHABET), None)
    if bad is not None:
        raise ValueError(f"character {bad!r} is not a lower-case letter a-z")


class Trie:
    """A set of words stored letter by letter."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add a word."""
        _check_word(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end_of_word = True

    def search(self, word: str) -> bool:
        """Return whether the word was inserted."""
        _check_word(word)
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_end_of_word

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        try:
            return self.search(word)
        except ValueError:
            return False