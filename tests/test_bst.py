import pytest
from hypothesis import given, strategies as st

from algonotes.bst import BinarySearchTree

VALUES = [100, 50, 200, 150, 300, 250, 270, 320]


def make_tree(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_in_order_example():
    tree = make_tree(VALUES)
    assert list(tree.in_order()) == [50, 100, 150, 200, 250, 270, 300, 320]


def test_delete_two_children_example():
    tree = make_tree(VALUES)
    tree.delete(300)
    assert list(tree.in_order()) == [50, 100, 150, 200, 250, 270, 320]
    assert list(tree.pre_order()) == [100, 50, 200, 150, 320, 250, 270]


def test_pre_and_post_order_of_small_tree():
    tree = make_tree([2, 1, 3])
    assert list(tree.pre_order()) == [2, 1, 3]
    assert list(tree.post_order()) == [1, 3, 2]


def test_delete_leaf_and_single_child():
    tree = make_tree(VALUES)
    tree.delete(50)
    tree.delete(250)
    assert list(tree) == [100, 150, 200, 270, 300, 320]


def test_delete_root_only_node():
    tree = make_tree([5])
    tree.delete(5)
    assert tree.root is None
    assert list(tree) == []


def test_delete_missing_raises():
    tree = make_tree(VALUES)
    with pytest.raises(KeyError):
        tree.delete(999)


def test_empty_tree_traversals():
    tree = BinarySearchTree()
    assert list(tree.pre_order()) == []
    assert list(tree.post_order()) == []


@given(st.lists(st.integers(-100, 100)))
def test_in_order_is_sorted(values):
    assert list(make_tree(values).in_order()) == sorted(values)


@given(st.lists(st.integers(-100, 100), min_size=1), st.data())
def test_delete_keeps_order(values, data):
    tree = make_tree(values)
    target = data.draw(st.sampled_from(values))
    tree.delete(target)
    expected = sorted(values)
    expected.remove(target)
    assert list(tree.in_order()) == expected
    assert sorted(tree.pre_order()) == expected
    assert sorted(tree.post_order()) == expected