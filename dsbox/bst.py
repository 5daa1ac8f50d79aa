"""Binary search trees: one keyed map-like tree and one tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class DuplicateKeyError(ValueError):
    """Raised when inserting a value that the tree already holds."""


class _KeyedNode:
    __slots__ = ("key", "element", "left", "right")

    def __init__(self, key: Any, element: Any) -> None:
        self.key = key
        self.element = element
        self.left: _KeyedNode | None = None
        self.right: _KeyedNode | None = None


class KeyedBST:
    """A binary search tree mapping keys to elements; equal keys go right."""

    def __init__(self) -> None:
        self._root: _KeyedNode | None = None
        self._count = 0

    def insert(self, key: Any, element: Any) -> None:
        """Add a key with its element; duplicates are kept."""
        node = _KeyedNode(key, element)
        if self._root is None:
            self._root = node
        else:
            current = self._root
            while True:
                if current.key > key:
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right
        self._count += 1

    def _locate(self, key: Any) -> tuple[_KeyedNode | None, _KeyedNode | None]:
        parent = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if node.key > key else node.right
        return parent, node

    def find(self, key: Any) -> Any:
        """Return the element stored under key."""
        _, node = self._locate(key)
        if node is None:
            raise KeyError(key)
        return node.element

    def _detach(self, parent: _KeyedNode | None, node: _KeyedNode) -> None:
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.key, node.element = successor.key, successor.element
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1

    def remove(self, key: Any) -> Any:
        """Remove key and return its element."""
        parent, node = self._locate(key)
        if node is None:
            raise KeyError(key)
        element = node.element
        self._detach(parent, node)
        return element

    def remove_any(self) -> Any:
        """Remove the root entry and return its element."""
        if self._root is None:
            raise KeyError("remove_any from an empty tree")
        element = self._root.element
        self._detach(None, self._root)
        return element

    def clear(self) -> None:
        """Drop every entry."""
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count


class _IntNode:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: _IntNode | None = None
        self.right: _IntNode | None = None


class IntBST:
    """A binary search tree of distinct values."""

    def __init__(self) -> None:
        self._root: _IntNode | None = None

    def _locate(self, value: int) -> tuple[_IntNode | None, _IntNode | None]:
        parent = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return parent, node

    def insert(self, value: int) -> None:
        """Add a value; a value already present raises DuplicateKeyError."""
        parent, node = self._locate(value)
        if node is not None:
            raise DuplicateKeyError(f"duplicate value {value!r}")
        new_node = _IntNode(value)
        if parent is None:
            self._root = new_node
        elif value < parent.value:
            parent.left = new_node
        else:
            parent.right = new_node

    def delete(self, value: int) -> None:
        """Remove a value; two-child nodes take their in-order predecessor."""
        parent, node = self._locate(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            if pred_parent is node:
                node.left = pred.left
            else:
                pred_parent.right = pred.left
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def maximum(self) -> int:
        """Return the largest value."""
        if self._root is None:
            raise ValueError("maximum of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def _inorder(self) -> Iterator[int]:
        stack: list[_IntNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""
        return list(self._inorder())

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __contains__(self, value: object) -> bool:
        return self._locate(value)[1] is not None