"""Tests for edge map loading and position export."""

import csv
import json

import pytest

from tree_layouts.edgemap import load_edge_map
from tree_layouts.export import generate_csv, generate_json, positions_document
from tree_layouts.tree import build_tree


class TestLoadEdgeMap:
    """Tests for load_edge_map function."""

    def test_bare_json_mapping(self, tmp_path):
        """A bare JSON object is the edge map itself."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps({"0": [1, 2], "1": [3]}))

        edges, node_count = load_edge_map(path)

        assert edges == {"0": [1, 2], "1": [3]}
        assert node_count is None
        assert build_tree(edges).children[1] == [3]

    def test_json_with_node_count(self, tmp_path):
        """Wrapped form carries the node count."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps({"node-count": 3, "edges": {"0": [1, 2]}}))

        edges, node_count = load_edge_map(path)

        assert edges == {"0": [1, 2]}
        assert node_count == 3

    def test_yaml(self, tmp_path):
        """YAML files keep integer keys."""
        path = tmp_path / "tree.yml"
        path.write_text("edges:\n  0: [1, 2]\n  2: [3]\n")

        edges, node_count = load_edge_map(path)

        assert edges == {0: [1, 2], 2: [3]}
        assert node_count is None

    def test_non_mapping_rejected(self, tmp_path):
        """A list document is not an edge map."""
        path = tmp_path / "tree.json"
        path.write_text("[[0, 1]]")

        with pytest.raises(ValueError, match="expected a mapping"):
            load_edge_map(path)


class TestExport:
    """Tests for JSON and CSV export."""

    def test_positions_document(self, cherry_edges):
        """Document holds strategy, bounds, positions and edges."""
        tree = build_tree(cherry_edges)
        positions = [(45.0, 30.0), (30.0, 60.0), (60.0, 60.0)]

        doc = positions_document(positions, "wide", tree)

        assert doc["strategy"] == "wide"
        assert doc["node-count"] == 3
        assert doc["bounds"] == {"width": 60.0, "height": 60.0}
        assert doc["positions"] == [[45.0, 30.0], [30.0, 60.0], [60.0, 60.0]]
        assert doc["edges"] == {"0": [1, 2]}

    def test_document_without_tree(self):
        """Edges are omitted when no tree is given."""
        assert "edges" not in positions_document([(0.0, 0.0)], "thin")

    def test_generate_json(self, tmp_path, cherry_edges):
        """JSON file round-trips the document."""
        tree = build_tree(cherry_edges)
        positions = [(45.0, 30.0), (30.0, 60.0), (60.0, 60.0)]
        path = tmp_path / "out.json"

        generate_json(positions, path, "wide", tree)

        assert json.loads(path.read_text()) == positions_document(positions, "wide", tree)

    def test_generate_csv(self, tmp_path):
        """CSV has a header and one row per node id."""
        path = tmp_path / "out.csv"

        generate_csv([(1.5, 2.0), (3.0, 4.0)], path)

        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows == [["id", "x", "y"], ["0", "1.5", "2.0"], ["1", "3.0", "4.0"]]
