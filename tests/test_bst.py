import random

import pytest

from arboreto.bst import BinarySearchTree


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def distinct_values(seed, count=40):
    rng = random.Random(seed)
    return rng.sample(range(-500, 500), count)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_in_order_matches_sorted_input(seed):
    values = distinct_values(seed)
    tree = build(values)
    assert tree.values_in_range(min(values), max(values)) == sorted(values)
    assert len(tree) == len(values)
    assert all(value in tree for value in values)


def test_duplicates_are_kept_on_the_right():
    tree = build([5, 5])
    assert len(tree) == 2
    node = tree.find(5)
    assert node.left is None
    assert node.right.value == 5


def test_total_and_mean():
    values = distinct_values(7)
    tree = build(values)
    assert tree.total() == sum(values)
    assert tree.mean() == pytest.approx(sum(values) / len(values))


def test_empty_tree():
    tree = BinarySearchTree()
    assert len(tree) == 0
    assert tree.total() == 0
    assert tree.mean() == 0.0
    assert tree.is_full()
    assert tree.is_complete()
    assert tree.compute_heights() == []


@pytest.mark.parametrize(
    "values, expected",
    [([2, 1, 3], True), ([2, 1], False), ([5, 3, 8, 1, 4], True), ([5, 3, 8, 1], False)],
)
def test_is_full_and_strictly_binary(values, expected):
    tree = build(values)
    assert tree.is_full() is expected
    assert tree.is_strictly_binary() is expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([4, 2, 6, 1], True),
        ([4, 2, 6, 7], False),
        ([4, 2, 6, 1, 3, 5, 7], True),
        ([4, 2, 1], False),
    ],
)
def test_is_complete(values, expected):
    assert build(values).is_complete() is expected


@pytest.mark.parametrize("low, high", [(-100, 100), (0, 0), (200, 499), (50, -50)])
def test_values_in_range(low, high):
    values = distinct_values(11)
    tree = build(values)
    assert tree.values_in_range(low, high) == [
        v for v in sorted(values) if low <= v <= high
    ]


@pytest.mark.parametrize("pivot", [-600, -1, 0, 250, 600])
def test_count_greater(pivot):
    values = distinct_values(13)
    tree = build(values)
    assert tree.count_greater(pivot) == sum(1 for v in values if v > pivot)


def test_level_mean():
    tree = build([10, 5, 15])
    assert tree.level_mean(0) == 10
    assert tree.level_mean(1) == pytest.approx(10.0)
    assert tree.level_mean(5) == 0.0
    assert tree.level_mean(-1) == 0.0


@pytest.mark.parametrize("target", [1, 3, 5, 8, 9, 4])
def test_remove_keeps_order(target):
    values = [5, 3, 8, 1, 4, 9]
    tree = build(values)
    tree.remove(target)
    assert target not in tree
    assert len(tree) == len(values) - 1
    remaining = sorted(v for v in values if v != target)
    assert tree.values_in_range(min(remaining), max(remaining)) == remaining


def test_remove_absent_value_changes_nothing():
    values = [5, 3, 8]
    tree = build(values)
    tree.remove(42)
    assert tree.values_in_range(3, 8) == sorted(values)


def test_find():
    tree = build([5, 3, 8])
    assert tree.find(8).value == 8
    assert tree.find(7) is None


def test_compute_heights_small_tree():
    tree = build([2, 1, 3])
    assert tree.compute_heights() == [(1, 0), (3, 0), (2, 1)]


def test_compute_heights_invariants():
    values = distinct_values(17)
    tree = build(values)
    pairs = tree.compute_heights()
    assert sorted(v for v, _ in pairs) == sorted(values)
    root_value, root_height = pairs[-1]
    assert root_value == values[0]
    assert root_height == max(h for _, h in pairs)
    for value, height in pairs:
        node = tree.find(value)
        assert node.height == height
        children = [c.height for c in (node.left, node.right) if c is not None]
        assert height == (max(children) + 1 if children else 0)