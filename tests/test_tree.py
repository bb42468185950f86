import random

import pytest

from bstree.tree import BinarySearchTree, Node, format_traversal


def build(first, *rest):
    tree = BinarySearchTree(first)
    for value in rest:
        tree.insert(value)
    return tree


def test_create_with_value_sets_root():
    tree = BinarySearchTree(17)
    assert tree.root.value == 17
    assert len(tree) == 1


def test_create_empty():
    tree = BinarySearchTree()
    assert tree.root is None
    assert len(tree) == 0
    assert list(tree) == []


def test_insert_smaller_goes_left():
    tree = build(10, 9)
    assert tree.root.value == 10
    assert tree.root.left.value == 9
    assert tree.root.right is None


def test_insert_into_empty_tree_creates_root():
    tree = BinarySearchTree()
    tree.insert(5)
    assert tree.root == Node(5)
    assert len(tree) == 1


def test_duplicates_go_right_and_count():
    tree = build(10, 10)
    assert tree.root.right.value == 10
    assert tree.root.left is None
    assert len(tree) == 2


def test_remove_leaf_preorder():
    tree = build(15, 10, 9, 11, 16, 18)
    tree.remove(11)
    assert format_traversal(tree.pre_order()) == "15 10 9 16 18 "
    assert len(tree) == 5


def test_remove_node_with_two_children_keeps_order():
    values = [15, 10, 9, 11, 16, 18]
    tree = build(*values)
    tree.remove(10)
    assert list(tree) == sorted(v for v in values if v != 10)
    assert 10 not in tree
    assert len(tree) == len(values) - 1


def test_remove_root_with_one_child():
    tree = build(10, 12, 14)
    tree.remove(10)
    assert tree.root.value == 12
    assert list(tree) == [12, 14]


def test_remove_absent_value_changes_nothing():
    tree = build(10, 6, 12)
    tree.remove(99)
    assert len(tree) == 3
    assert list(tree.pre_order()) == [10, 6, 12]


def test_remove_from_empty_tree():
    tree = BinarySearchTree()
    tree.remove(1)
    assert len(tree) == 0


def test_remove_last_value_empties_tree():
    tree = BinarySearchTree(4)
    tree.remove(4)
    assert tree.root is None
    assert len(tree) == 0


def test_remove_one_duplicate_only():
    tree = build(5, 5, 5)
    tree.remove(5)
    assert list(tree) == [5, 5]
    assert len(tree) == 2


def test_find():
    tree = build(10, 6, 12, 15)
    assert tree.find(15) is True
    assert tree.find(7) is False
    assert 6 in tree
    assert 13 not in tree


def test_find_max():
    assert build(10, 6, 15, 18).find_max() == 18


def test_find_min():
    assert build(10, 6, 15, 18, 3).find_min() == 3


def test_single_node_min_and_max():
    tree = BinarySearchTree(17)
    assert tree.find_min() == 17
    assert tree.find_max() == 17


@pytest.mark.parametrize("method", ["find_min", "find_max"])
def test_min_max_on_empty_tree_raise(method):
    with pytest.raises(ValueError):
        getattr(BinarySearchTree(), method)()


def test_traversals_of_small_tree():
    tree = build(10, 8, 12)
    assert format_traversal(tree.in_order()) == "8 10 12 "
    assert format_traversal(tree.pre_order()) == "10 8 12 "
    assert format_traversal(tree.post_order()) == "8 12 10 "


def test_format_empty_traversal():
    assert format_traversal(BinarySearchTree().in_order()) == "empty tree"


def test_size_after_inserts_and_remove():
    tree = build(10, 11, 9, 8, 12, 3, 20)
    tree.remove(3)
    assert len(tree) == 6


def test_random_operations_keep_invariants():
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(300)]
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    remaining = list(values)
    for value in rng.sample(values, 120):
        tree.remove(value)
        remaining.remove(value)
    assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)
    assert sorted(tree.pre_order()) == sorted(remaining)
    assert sorted(tree.post_order()) == sorted(remaining)
    assert tree.find_min() == min(remaining)
    assert tree.find_max() == max(remaining)
    for value in set(values):
        assert (value in tree) == (value in remaining)


def test_deep_tree_does_not_recurse():
    tree = BinarySearchTree()
    for value in range(5000):
        tree.insert(value)
    assert list(tree) == list(range(5000))
    assert list(tree.post_order())[-1] == 0
    assert tree.find_max() == 4999