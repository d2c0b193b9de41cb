"""Write position tables to JSON and CSV."""

import csv
import json
from pathlib import Path

from .runner import BoundingBox
from .tree import Positions, Tree


def positions_document(
    positions: Positions,
    strategy: str,
    tree: Tree | None = None,
) -> dict:
    """JSON-ready description of one layout.

    Includes the edges when ``tree`` is given so a renderer can draw the
    drawing from this document alone.
    """
    bounds = BoundingBox.of(positions)
    doc = {
        "strategy": strategy,
        "node-count": len(positions),
        "bounds": {"width": bounds.width, "height": bounds.height},
        "positions": [[x, y] for x, y in positions],
    }
    if tree is not None:
        doc["edges"] = {str(k): v for k, v in tree.edge_map().items()}
    return doc


def generate_json(
    positions: Positions,
    output_file: Path,
    strategy: str,
    tree: Tree | None = None,
) -> None:
    """Write positions (and optionally edges) as JSON.

    Args:
        positions: (x, y) per node id.
        output_file: Path to write the JSON file.
        strategy: Name recorded in the document.
        tree: Tree whose edges are included, if given.
    """
    with open(output_file, "w") as f:
        json.dump(positions_document(positions, strategy, tree), f, indent=2)


def generate_csv(positions: Positions, output_file: Path) -> None:
    """Write positions as CSV with columns id, x, y."""
    with open(output_file, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "x", "y"])
        for node, (x, y) in enumerate(positions):
            writer.writerow([node, x, y])
