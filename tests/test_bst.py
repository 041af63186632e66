import pytest
from hypothesis import given
from hypothesis import strategies as st

from algocollection.binary_tree import count_nodes, inorder, preorder
from algocollection.bst import bst_delete, bst_from_values, bst_insert, bst_min


SOURCE_VALUES = [50, 30, 20, 40, 70, 60, 80]


def _is_search_tree(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.value <= low:
        return False
    if high is not None and node.value > high:
        return False
    return _is_search_tree(node.left, low, node.value) and _is_search_tree(
        node.right, node.value, high
    )


def test_inorder_of_source_tree_is_sorted():
    root = bst_from_values(SOURCE_VALUES)
    assert inorder(root) == sorted(SOURCE_VALUES)
    assert root.value == SOURCE_VALUES[0]


def test_insert_returns_same_root():
    root = bst_from_values([50])
    assert bst_insert(root, 30) is root
    assert root.left.value == 30


def test_insert_into_empty_creates_root():
    root = bst_insert(None, 7)
    assert preorder(root) == [7]


def test_duplicates_go_left():
    root = bst_from_values([5, 5])
    assert root.left.value == 5
    assert root.right is None


def test_min_of_source_tree():
    assert bst_min(bst_from_values(SOURCE_VALUES)).value == min(SOURCE_VALUES)


def test_min_of_empty_tree_raises():
    with pytest.raises(ValueError):
        bst_min(None)


def test_delete_leaf_then_node_with_one_child():
    root = bst_from_values(SOURCE_VALUES)
    root = bst_delete(root, 20)
    assert inorder(root) == sorted(v for v in SOURCE_VALUES if v != 20)
    root = bst_delete(root, 30)
    assert inorder(root) == sorted(v for v in SOURCE_VALUES if v not in (20, 30))
    assert _is_search_tree(root)


def test_delete_root_with_two_children():
    root = bst_from_values(SOURCE_VALUES)
    root = bst_delete(root, 50)
    assert root.value == 60
    assert inorder(root) == sorted(v for v in SOURCE_VALUES if v != 50)


def test_delete_missing_value_keeps_tree():
    root = bst_from_values(SOURCE_VALUES)
    before = preorder(root)
    assert bst_delete(root, 999) is root
    assert preorder(root) == before


def test_delete_from_empty_tree():
    assert bst_delete(None, 1) is None


def test_delete_only_node_empties_tree():
    assert bst_delete(bst_from_values([3]), 3) is None


@given(st.lists(st.integers(-50, 50), max_size=40))
def test_built_tree_is_sorted_search_tree(values):
    root = bst_from_values(values)
    assert inorder(root) == sorted(values)
    assert count_nodes(root) == len(values)
    assert _is_search_tree(root)


@given(st.lists(st.integers(-20, 20), max_size=25, unique=True))
def test_deleting_everything_empties_tree(values):
    root = bst_from_values(values)
    for value in values:
        root = bst_delete(root, value)
    assert root is None