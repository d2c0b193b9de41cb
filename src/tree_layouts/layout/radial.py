"""Radial layouts with proportional angular wedges (Eades R1 and R2).

Every node owns a wedge of the circle proportional to its leaf count and sits
on the wedge bisector. R1 puts a node at ``scale * depth``; R2 puts it at
``scale * (height(root) - height(node))`` so all leaves share the outer ring.
"""

import math
from enum import Enum

from ..config import SCALE
from ..tree import Positions, Tree


class RadialVariant(Enum):
    """Rule mapping a node to its ring."""

    R1 = "r1"  # ring = depth from root
    R2 = "r2"  # ring = height(root) - height(node)


def subtree_sizes(tree: Tree) -> tuple[list[int], list[int]]:
    """Leaf count and height (edges to deepest leaf) for every node.

    Returns:
        widths: Number of leaves under each node (1 for a leaf).
        heights: 0 for a leaf, else 1 + max child height.
    """
    n = len(tree)
    widths = [1] * n
    heights = [0] * n
    for node in tree.postorder():
        kids = tree.children[node]
        if kids:
            widths[node] = sum(widths[c] for c in kids)
            heights[node] = 1 + max(heights[c] for c in kids)
    return widths, heights


def max_wedge(ring: int) -> float:
    """Widest wedge a node on ring ``ring`` may hand to its children.

    Children on ring ``ring + 1`` must stay inside the tangent lines at the
    node, which subtend ``2 * acos(ring / (ring + 1))``. The center (ring 0)
    is unrestricted.
    """
    if ring <= 0:
        return 2 * math.pi
    return 2 * math.acos(ring / (ring + 1))


def polar_positions(tree: Tree, variant: RadialVariant = RadialVariant.R1) -> list[tuple[int, float]]:
    """Ring index and angle for every node, before scaling and conversion.

    The root is always on ring 0 with angle 0.
    """
    widths, heights = subtree_sizes(tree)
    root_height = heights[tree.root]

    polar: list[tuple[int, float]] = [(0, 0.0)] * len(tree)
    wedges: list[tuple[float, float]] = [(0.0, 0.0)] * len(tree)
    wedges[tree.root] = (0.0, 2 * math.pi)

    for node, depth in tree.preorder():
        if variant is RadialVariant.R1:
            ring = depth
        else:
            ring = root_height - heights[node]

        low, high = wedges[node]
        angle = (low + high) / 2 if node != tree.root else 0.0
        polar[node] = (ring, angle)

        kids = tree.children[node]
        if not kids:
            continue

        limit = max_wedge(ring)
        if high - low > limit:
            low, high = angle - limit / 2, angle + limit / 2

        # Split the (possibly narrowed) wedge by leaf count
        step = (high - low) / widths[node]
        for child in kids:
            child_high = low + step * widths[child]
            wedges[child] = (low, child_high)
            low = child_high

    return polar


def _to_cartesian(polar: list[tuple[int, float]], scale: float) -> Positions:
    """Convert rings and angles to coordinates translated into the positive quadrant."""
    points = [
        (scale * ring * math.cos(angle), scale * ring * math.sin(angle))
        for ring, angle in polar
    ]
    min_x = min(x for x, _ in points)
    min_y = min(y for _, y in points)
    return [(x - min_x, y - min_y) for x, y in points]


def radial_r1_positions(tree: Tree, scale: float = SCALE) -> Positions:
    """Radial layout with radius proportional to depth."""
    return _to_cartesian(polar_positions(tree, RadialVariant.R1), scale)


def radial_r2_positions(tree: Tree, scale: float = SCALE) -> Positions:
    """Radial layout with radius proportional to height above the leaves.

    Leaves all land on the outermost ring, giving an ultrametric-looking
    drawing.
    """
    return _to_cartesian(polar_positions(tree, RadialVariant.R2), scale)
