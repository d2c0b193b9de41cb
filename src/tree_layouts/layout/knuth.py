"""In-order placement for binary trees."""

from ..config import SCALE
from ..errors import UnsupportedShapeError
from ..tree import Positions, Tree


def _left(tree: Tree, node: int) -> int | None:
    kids = tree.children[node]
    return kids[0] if kids else None


def _right(tree: Tree, node: int) -> int | None:
    kids = tree.children[node]
    return kids[1] if len(kids) > 1 else None


def knuth_positions(tree: Tree, scale: float = SCALE, strict: bool = False) -> Positions:
    """Assign x by in-order rank, y by depth.

    The first child is the left subtree and the second child the right one. A
    node with a single child treats it as a left child. Third and later
    children are never visited and keep the ``(0, 0)`` fill.

    Args:
        tree: Tree to lay out.
        scale: Distance between in-order ranks and between levels.
        strict: Raise instead of ignoring children beyond the second.

    Returns:
        (x, y) per node id.

    Raises:
        UnsupportedShapeError: If ``strict`` and some node has more than two children.
    """
    if strict:
        wide = [node for node, kids in enumerate(tree.children) if len(kids) > 2]
        if wide:
            raise UnsupportedShapeError(
                f"In-order layout needs at most two children per node; nodes {wide} have more"
            )

    positions: Positions = [(0.0, 0.0)] * len(tree)
    counter = 0
    stack: list[tuple[int, int]] = []
    node: int | None = tree.root
    depth = 0

    while stack or node is not None:
        # Descend along left children
        while node is not None:
            stack.append((node, depth))
            node = _left(tree, node)
            depth += 1

        node, depth = stack.pop()
        positions[node] = (scale * (counter + 1), scale * (depth + 1))
        counter += 1

        node = _right(tree, node)
        depth += 1

    return positions
