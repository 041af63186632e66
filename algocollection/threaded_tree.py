"""A right- and left-threaded binary search tree walked in order without a stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _ThreadedNode:
    key: Any
    left: Optional[_ThreadedNode] = None
    right: Optional[_ThreadedNode] = None
    # True when the pointer is a thread to the in-order predecessor/successor.
    left_thread: bool = True
    right_thread: bool = True


def _successor(node: _ThreadedNode) -> Optional[_ThreadedNode]:
    if node.right_thread:
        return node.right
    current = node.right
    assert current is not None
    while not current.left_thread:
        assert current.left is not None
        current = current.left
    return current


class ThreadedBST:
    """A binary search tree of unique keys with in-order threads."""

    def __init__(self) -> None:
        self._root: Optional[_ThreadedNode] = None

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it is already present."""
        current = self._root
        parent: Optional[_ThreadedNode] = None
        while current is not None:
            if key == current.key:
                return False
            parent = current
            if key < current.key:
                if current.left_thread:
                    break
                current = current.left
            else:
                if current.right_thread:
                    break
                current = current.right

        node = _ThreadedNode(key)
        if parent is None:
            self._root = node
        elif key < parent.key:
            node.left = parent.left
            node.right = parent
            parent.left_thread = False
            parent.left = node
        else:
            node.left = parent
            node.right = parent.right
            parent.right_thread = False
            parent.right = node
        return True

    def __iter__(self) -> Iterator[Any]:
        node = self._root
        if node is None:
            return
        while not node.left_thread:
            assert node.left is not None
            node = node.left
        current: Optional[_ThreadedNode] = node
        while current is not None:
            yield current.key
            current = _successor(current)

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self)