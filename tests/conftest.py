"""Pytest fixtures for tree layout tests."""

import pytest


@pytest.fixture
def demo_edges() -> dict[int, list[int]]:
    """Nine-node binary tree: 0 -> 1, 2; 1 -> 3, 4; 2 -> 5, 6; 3 -> 7, 8."""
    return {
        0: [1, 2],
        1: [3, 4],
        2: [5, 6],
        3: [7, 8],
    }


@pytest.fixture
def binary_edges() -> dict[int, list[int]]:
    """Five nodes, in-order sequence 3, 1, 4, 0, 2."""
    return {0: [1, 2], 1: [3, 4]}


@pytest.fixture
def cherry_edges() -> dict[int, list[int]]:
    """Root with two leaves."""
    return {0: [1, 2], 1: [], 2: []}


@pytest.fixture
def chain_edges() -> dict[int, list[int]]:
    """Linked list 0 -> 1 -> 2 -> 3 -> 4."""
    return {0: [1], 1: [2], 2: [3], 3: [4]}


@pytest.fixture
def ternary_edges() -> dict[int, list[int]]:
    """Root with three children, the last one with two leaves."""
    return {0: [1, 2, 3], 3: [4, 5]}


@pytest.fixture
def uneven_edges() -> dict[int, list[int]]:
    """Mixed fan-out and depth: a deep left subtree, a leaf, a deep right subtree."""
    return {
        0: [1, 2, 3],
        1: [4, 5, 6],
        4: [7, 8],
        3: [9],
        9: [10, 11, 12],
    }


@pytest.fixture
def caterpillar_edges() -> dict[int, list[int]]:
    """Spine down the right side, one leaf hanging left of every spine node."""
    return {i: [i + 1, i + 2] for i in range(0, 12, 2)}
