"""
Shared pytest fixtures for B-tree container tests.
"""

import random

import pytest

from btreemap.models.sortedcontainers import BTree, Node


def _check_node(node: Node, tree: BTree, is_root: bool, low, high, depth: int, leaf_depths: set[int]) -> int:
    """Assert the structural invariants below node and return its key count."""
    keys = [entry.key for entry in node.keys]

    assert len(keys) <= tree.max_keys, f"Overfull node {keys}"
    if not is_root:
        assert len(keys) >= tree.min_degree - 1, f"Underfull node {keys}"
    assert keys == sorted(keys), f"Unordered node {keys}"
    for key in keys:
        assert low is None or key >= low
        assert high is None or key <= high

    if node.is_leaf():
        leaf_depths.add(depth)
        return len(keys)

    assert len(node.children) == len(keys) + 1
    bounds = [low] + keys + [high]
    count = len(keys)
    for i, child in enumerate(node.children):
        count += _check_node(child, tree, False, bounds[i], bounds[i + 1], depth + 1, leaf_depths)
    return count


@pytest.fixture
def check_invariants():
    """Provide a checker for node fill, ordering, shape and size of a tree."""

    def check(tree: BTree) -> None:
        leaf_depths: set[int] = set()
        count = _check_node(tree.root, tree, True, None, None, 0, leaf_depths)
        assert count == tree.size()
        assert len(leaf_depths) == 1, f"Leaves at different depths: {leaf_depths}"

    return check


@pytest.fixture
def tree():
    """Provide a fresh BTree with the default minimum degree."""
    return BTree()


@pytest.fixture
def sequential_tree():
    """Provide a t=2 tree holding keys 1..6 inserted in order."""
    tree = BTree(2)
    for key, value in zip(range(1, 7), "abcdef"):
        tree.insert(key, value)
    return tree


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries in insertion order."""
    keys = [975, 801, 916, 648, 259, 103, 212, 230, 336, 371]
    return [(key, f"value{key}") for key in keys]


@pytest.fixture
def large_sample_entries():
    """Provide a larger shuffled sample for stress testing."""
    rng = random.Random(1234)
    keys = list(range(2000))
    rng.shuffle(keys)
    return [(key, f"value{key}") for key in keys]
