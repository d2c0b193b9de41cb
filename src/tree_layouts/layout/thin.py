"""Level-order placement and its parent-centering variant."""

from collections import defaultdict

from ..config import SCALE
from ..tree import Positions, Tree


def thin_positions(tree: Tree, scale: float = SCALE, separation: float = 1) -> Positions:
    """Place each node in the next free slot of its depth level.

    Nodes are visited breadth-first, so slots within a level follow left-to-right
    child order. Parents are not centered and subtrees can cross.

    Args:
        tree: Tree to lay out.
        scale: Distance between slots and between levels.
        separation: Multiplier on the slot index.

    Returns:
        (x, y) per node id.
    """
    positions: Positions = [(0.0, 0.0)] * len(tree)
    nexts: defaultdict[int, int] = defaultdict(int)

    for node, depth in tree.levels():
        x = scale * (separation * nexts[depth] + 1)
        y = scale * (depth + 1)
        positions[node] = (x, y)
        nexts[depth] += 1

    return positions


def parent_positions(tree: Tree, scale: float = SCALE) -> Positions:
    """Level-order layout with double spacing, then parents centered over children.

    Each internal node moves to the midpoint of its first and last child.
    Only direct children are considered, so deeper subtrees may still overlap.
    """
    positions = thin_positions(tree, scale=scale, separation=2)

    for node in tree.postorder():
        kids = tree.children[node]
        if not kids:
            continue
        left_x = positions[kids[0]][0]
        right_x = positions[kids[-1]][0]
        positions[node] = ((left_x + right_x) / 2, positions[node][1])

    return positions
