"""Tests for knuth.py layout module."""

import pytest

from tree_layouts.errors import UnsupportedShapeError
from tree_layouts.layout.knuth import knuth_positions
from tree_layouts.tree import build_tree


class TestKnuthPositions:
    """Tests for knuth_positions function."""

    def test_in_order_sequence(self, binary_edges):
        """x increases along the in-order sequence 3, 1, 4, 0, 2."""
        tree = build_tree(binary_edges)
        positions = knuth_positions(tree, scale=30)

        xs = [positions[i][0] for i in (3, 1, 4, 0, 2)]
        assert xs == [30, 60, 90, 120, 150]

    def test_y_from_depth(self, binary_edges):
        """y is scale * (depth + 1)."""
        tree = build_tree(binary_edges)
        positions = knuth_positions(tree, scale=30)

        assert positions[0][1] == 30
        assert positions[1][1] == positions[2][1] == 60
        assert positions[3][1] == positions[4][1] == 90

    def test_single_child_is_left(self):
        """A lone child is visited before its parent."""
        tree = build_tree({0: [1]})
        positions = knuth_positions(tree, scale=30)

        assert positions[1] == (30, 60)
        assert positions[0] == (60, 30)

    def test_chain_is_diagonal(self, chain_edges):
        """A chain of left children steps one rank per level."""
        tree = build_tree(chain_edges)
        positions = knuth_positions(tree, scale=1)

        assert positions == [(5, 1), (4, 2), (3, 3), (2, 4), (1, 5)]

    def test_extra_children_keep_default(self, ternary_edges):
        """Children after the second (and their subtrees) stay at (0, 0)."""
        tree = build_tree(ternary_edges)
        positions = knuth_positions(tree, scale=30)

        assert positions[1] == (30, 60)
        assert positions[0] == (60, 30)
        assert positions[2] == (90, 60)
        assert positions[3] == (0.0, 0.0)
        assert positions[4] == (0.0, 0.0)
        assert positions[5] == (0.0, 0.0)

    def test_strict_rejects_wide_nodes(self, ternary_edges):
        """strict=True raises for nodes with more than two children."""
        tree = build_tree(ternary_edges)

        with pytest.raises(UnsupportedShapeError, match=r"\[0\]"):
            knuth_positions(tree, strict=True)

    def test_strict_accepts_binary(self, demo_edges):
        """strict=True is silent on binary trees."""
        tree = build_tree(demo_edges)

        assert knuth_positions(tree, strict=True) == knuth_positions(tree)

    def test_deep_tree(self):
        """In-order walk is iterative."""
        n = 10000
        tree = build_tree({i: [i + 1] for i in range(n - 1)})
        positions = knuth_positions(tree, scale=1)

        assert positions[0] == (n, 1)
        assert positions[n - 1] == (1, n)
