"""Read edge maps from JSON or YAML files."""

import json
from pathlib import Path


def load_edge_map(path: Path) -> tuple[dict, int | None]:
    """Load an edge map and optional node count.

    The document is either a bare mapping (parent id -> child ids) or a
    mapping with an ``edges`` key and an optional ``node-count`` key::

        {"node-count": 5, "edges": {"0": [1, 2], "1": [3, 4]}}

    Ids are returned as found in the file; ``build_tree`` converts them.

    Args:
        path: ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Tuple of (edge_map, node_count) where node_count is None if absent.

    Raises:
        ValueError: If the document is not a mapping.
    """
    path = Path(path)
    if path.suffix in (".yaml", ".yml"):
        from .config import load_config

        data = load_config(path)
    else:
        with open(path) as f:
            data = json.load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")

    if "edges" in data:
        edges = data["edges"] or {}
        node_count = data.get("node-count")
        if not isinstance(edges, dict):
            raise ValueError(f"{path}: 'edges' must be a mapping")
        return edges, int(node_count) if node_count is not None else None

    return data, None
