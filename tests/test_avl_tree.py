import math
import random

import pytest

from algobox.avl_tree import AVLTree

DEMO_VALUES = [50, 30, 70, 20, 40, 60, 80, 10, 25, 35]


def build(values):
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def max_avl_height(n):
    return 1.4405 * math.log2(n + 2)


def test_new_tree_is_empty():
    tree = AVLTree()
    assert tree.is_empty()
    assert tree.height() == 0
    assert tree.inorder() == []
    assert tree.level_order() == []
    assert tree.display() == ""


def test_demo_inorder_is_sorted():
    tree = build(DEMO_VALUES)
    assert tree.inorder() == sorted(DEMO_VALUES)
    assert len(tree) == len(DEMO_VALUES)


def test_demo_shape():
    tree = build(DEMO_VALUES)
    assert tree.height() == 4
    assert tree.preorder() == [50, 30, 20, 10, 25, 40, 35, 70, 60, 80]
    assert tree.level_order()[0] == [50]


def test_level_order_covers_all_values():
    tree = build(DEMO_VALUES)
    flattened = [v for level in tree.level_order() for v in level]
    assert sorted(flattened) == sorted(DEMO_VALUES)
    assert len(tree.level_order()) == tree.height()


def test_postorder_ends_with_root():
    tree = build(DEMO_VALUES)
    assert tree.postorder()[-1] == tree.preorder()[0]
    assert sorted(tree.postorder()) == sorted(DEMO_VALUES)


def test_rotation_on_ascending_insert():
    tree = build([1, 2, 3])
    assert tree.preorder() == [2, 1, 3]
    assert tree.height() == 2


@pytest.mark.parametrize("values", [list(range(1, 201)), list(range(200, 0, -1))])
def test_sorted_inserts_stay_balanced(values):
    tree = build(values)
    assert tree.inorder() == sorted(values)
    assert tree.height() <= max_avl_height(len(values))


def test_search():
    tree = build(DEMO_VALUES)
    assert tree.search(25)
    assert tree.search(35)
    assert not tree.search(100)
    assert 25 in tree
    assert 100 not in tree


def test_duplicates_ignored():
    tree = build([5, 5, 5, 3])
    assert tree.inorder() == [3, 5]
    assert len(tree) == 2


def test_remove_demo_sequence():
    tree = build(DEMO_VALUES)
    remaining = set(DEMO_VALUES)
    for value in (20, 30, 50):
        tree.remove(value)
        remaining.discard(value)
        assert tree.inorder() == sorted(remaining)
        assert not tree.search(value)
    assert len(tree) == len(remaining)


def test_remove_missing_is_noop():
    tree = build(DEMO_VALUES)
    tree.remove(999)
    assert tree.inorder() == sorted(DEMO_VALUES)
    assert len(tree) == len(DEMO_VALUES)


def test_remove_everything():
    tree = build(DEMO_VALUES)
    for value in DEMO_VALUES:
        tree.remove(value)
    assert tree.is_empty()
    assert tree.height() == 0
    assert len(tree) == 0


def test_random_operations_keep_invariants():
    rng = random.Random(7)
    tree = AVLTree()
    reference = set()
    for _ in range(500):
        value = rng.randrange(100)
        if rng.random() < 0.6:
            tree.insert(value)
            reference.add(value)
        else:
            tree.remove(value)
            reference.discard(value)
        assert tree.height() <= max_avl_height(len(reference))
    assert tree.inorder() == sorted(reference)
    assert list(tree) == sorted(reference)


def test_display_lists_each_node_with_height():
    tree = build(DEMO_VALUES)
    lines = [line for line in tree.display().split("\n") if line]
    assert len(lines) == len(DEMO_VALUES)
    root_line = f"{tree.preorder()[0]}({tree.height()})"
    assert root_line in lines
    values = [int(line.strip().split("(")[0]) for line in lines]
    assert values == sorted(DEMO_VALUES, reverse=True)