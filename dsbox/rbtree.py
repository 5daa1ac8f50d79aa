"""A red-black tree supporting insertion and ordered traversal."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class Color(enum.Enum):
    """Node colour."""

    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree."""

    value: Any
    color: Color
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)
    parent: RBNode | None = field(default=None, repr=False)


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """A self-balancing binary search tree; equal values go right."""

    def __init__(self) -> None:
        self._root: RBNode | None = None
        self._size = 0

    @property
    def root(self) -> RBNode | None:
        """The root node, or None when the tree is empty."""
        return self._root

    def _replace_child(self, old: RBNode, new: RBNode) -> None:
        new.parent = old.parent
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, y: RBNode) -> None:
        x = y.left
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        self._replace_child(y, x)
        x.right = y
        y.parent = x

    def insert(self, value: Any) -> None:
        """Insert a value and rebalance."""
        node = RBNode(value, Color.RED)
        parent = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._fix_insert(node)

    def _fix_insert(self, z: RBNode) -> None:
        while z is not self._root and z.parent.color is Color.RED:
            parent = z.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self._rotate_left(z)
                    parent = z.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self._rotate_right(z)
                    parent = z.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        self._root.color = Color.BLACK

    def inorder(self) -> list[Any]:
        """All values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[RBNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False