"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _AVLNode:
    key: Any
    left: Optional[_AVLNode] = None
    right: Optional[_AVLNode] = None
    height: int = 1


def _height(node: Optional[_AVLNode]) -> int:
    return node.height if node is not None else 0


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _AVLNode) -> _AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _AVLNode) -> _AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _AVLNode) -> _AVLNode:
    _update(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


class AVLTree:
    """An AVL tree of keys.

    By default equal keys are rejected; with ``allow_duplicates`` they are
    kept and placed in the right subtree.
    """

    def __init__(self, allow_duplicates: bool = False) -> None:
        self.allow_duplicates = allow_duplicates
        self._root: Optional[_AVLNode] = None
        self._size = 0

    def _insert(self, node: Optional[_AVLNode], key: Any) -> tuple[_AVLNode, bool]:
        if node is None:
            return _AVLNode(key), True
        if key < node.key:
            node.left, inserted = self._insert(node.left, key)
        elif key > node.key or self.allow_duplicates:
            node.right, inserted = self._insert(node.right, key)
        else:
            return node, False
        return _rebalance(node), inserted

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was rejected as a duplicate."""
        self._root, inserted = self._insert(self._root, key)
        if inserted:
            self._size += 1
        return inserted

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return _height(self._root)

    @staticmethod
    def _walk(node: Optional[_AVLNode], order: str) -> Iterator[Any]:
        if node is None:
            return
        if order == "pre":
            yield node.key
        yield from AVLTree._walk(node.left, order)
        if order == "in":
            yield node.key
        yield from AVLTree._walk(node.right, order)
        if order == "post":
            yield node.key

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self._walk(self._root, "in"))

    def preorder(self) -> list[Any]:
        """Return the keys in node, left, right order."""
        return list(self._walk(self._root, "pre"))

    def postorder(self) -> list[Any]:
        """Return the keys in left, right, node order."""
        return list(self._walk(self._root, "post"))