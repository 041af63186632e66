"""Binary search trees built from TreeNode; equal values go to the left."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from algocollection.binary_tree import TreeNode


def bst_insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert ``value`` and return the root, a new node if the tree was empty."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value > current.value:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = node
                return root
            current = current.left


def bst_from_values(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a search tree by inserting the values in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = bst_insert(root, value)
    return root


def bst_min(root: Optional[TreeNode]) -> TreeNode:
    """Return the leftmost node, which holds the smallest value."""
    if root is None:
        raise ValueError("an empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node


def bst_delete(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Remove one node holding ``value`` and return the new root.

    A node with two children takes the value of its in-order successor, which
    is then removed from the right subtree. A missing value leaves the tree as it is.
    """
    if root is None:
        return None
    if value < root.value:
        root.left = bst_delete(root.left, value)
        return root
    if value > root.value:
        root.right = bst_delete(root.right, value)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = bst_min(root.right)
    root.value = successor.value
    root.right = bst_delete(root.right, successor.value)
    return root