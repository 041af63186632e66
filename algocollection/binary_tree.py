"""Binary trees: construction in level order, traversals, measures and ancestors."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def insert_level_order(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Put ``value`` in the first free child slot found in level order.

    Returns the root, which is a new node when the tree was empty.
    """
    node = TreeNode(value)
    if root is None:
        return node
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = node
            return root
        queue.append(current.left)
        if current.right is None:
            current.right = node
            return root
        queue.append(current.right)
    return root


def build_from_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values listed in level order.

    The first value is the root; after it, each node in turn takes the next
    two values as its left and right child. None stands for a missing child,
    and values running out leaves the remaining slots empty.
    """
    source = iter(values)
    first = next(source, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        current = queue.popleft()
        for side in ("left", "right"):
            value = next(source, None)
            if value is not None:
                child = TreeNode(value)
                setattr(current, side, child)
                queue.append(child)
    return root


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in node, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return the values level by level, left to right."""
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path; 0 if empty."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def count_leaves(root: Optional[TreeNode]) -> int:
    """Return the number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def find_path(root: Optional[TreeNode], key: Any) -> Optional[list[Any]]:
    """Return the values from the root down to the first node holding ``key``.

    The tree is searched depth first, left before right. None if ``key`` is absent.
    """
    if root is None:
        return None
    if root.value == key:
        return [root.value]
    for child in (root.left, root.right):
        path = find_path(child, key)
        if path is not None:
            return [root.value, *path]
    return None


def lowest_common_ancestor(
    root: Optional[TreeNode], first: Any, second: Any
) -> Optional[TreeNode]:
    """Return the deepest node that has both keys below it or at it.

    If only one key is present, the node holding it is returned; None if neither is.
    """
    if root is None:
        return None
    if root.value == first or root.value == second:
        return root
    left = lowest_common_ancestor(root.left, first, second)
    right = lowest_common_ancestor(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lca_by_paths(root: Optional[TreeNode], first: Any, second: Any) -> Optional[Any]:
    """Return the value of the lowest common ancestor, found by comparing root paths.

    None if either key is missing from the tree.
    """
    first_path = find_path(root, first)
    second_path = find_path(root, second)
    if first_path is None or second_path is None:
        return None
    common = None
    for a, b in zip(first_path, second_path):
        if a != b:
            break
        common = a
    return common