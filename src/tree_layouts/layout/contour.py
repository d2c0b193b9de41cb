"""Centered layouts that keep sibling subtrees apart.

Both strategies run a post-order pass that assigns each child a ``mod``, its
x offset relative to the parent, followed by a pre-order pass that sums the
offsets from the root down. All offsets are in units of ``scale``.

``wide_positions`` separates siblings by whole-subtree extents (leftmost and
rightmost offsets), which is simple but quadratic on degenerate trees.
``buchheim_positions`` compares per-depth contours, so subtrees only need to
clear each other on the levels they share and the drawing is narrower.
"""

from collections.abc import Callable, Sequence

from ..config import NODE_SEP, SCALE
from ..tree import Positions, Tree


def apply_offsets(tree: Tree, mod: list[float], start: float, scale: float) -> Positions:
    """Turn relative offsets into coordinates.

    The root sits at ``scale * start`` on the first level (``y = scale``);
    every other node adds its own ``mod`` to its parent's offset.
    """
    positions: Positions = [(0.0, 0.0)] * len(tree)
    stack = [(tree.root, 1, start)]
    while stack:
        node, depth, offset = stack.pop()
        positions[node] = (scale * offset, scale * depth)
        for child in tree.children[node]:
            stack.append((child, depth + 1, offset + mod[child]))
    return positions


def wide_positions(tree: Tree, scale: float = SCALE, node_sep: float = NODE_SEP) -> Positions:
    """Center parents over children, separating siblings by full subtree extents.

    Args:
        tree: Tree to lay out.
        scale: Distance between levels and size of one offset unit.
        node_sep: Minimum gap between adjacent sibling subtrees, in offset units.

    Returns:
        (x, y) per node id, leftmost node at ``x == scale``.
    """
    n = len(tree)
    mod = [0.0] * n
    leftmost = [0.0] * n
    rightmost = [0.0] * n

    for node in tree.postorder():
        kids = tree.children[node]
        if not kids:
            continue

        span = 0.0
        for prev, child in zip(kids, kids[1:]):
            # Offsets accumulate: each child clears the one before it
            span += rightmost[prev] - leftmost[child] + node_sep
            mod[child] = span

        for child in kids:
            mod[child] -= span / 2

        first, last = kids[0], kids[-1]
        leftmost[node] = mod[first] + leftmost[first]
        rightmost[node] = mod[last] + rightmost[last]

    return apply_offsets(tree, mod, 1 - leftmost[tree.root], scale)


def contour(tree: Tree, node: int, mod: list[float], comp: Callable[[float, float], float]) -> list[float]:
    """Per-depth extreme offset of the subtree rooted at ``node``.

    Entry ``i`` is ``comp`` (``max`` for the right contour, ``min`` for the
    left one) over the offsets, relative to ``node``, of all nodes ``i``
    levels below it.
    """
    result: list[float] = []
    stack = [(node, 0, 0.0)]
    while stack:
        current, depth, offset = stack.pop()
        if depth == len(result):
            result.append(offset)
        else:
            result[depth] = comp(result[depth], offset)
        for child in tree.children[current]:
            stack.append((child, depth + 1, offset + mod[child]))
    return result


def push(left_contour: Sequence[float], right_contour: Sequence[float], node_sep: float = NODE_SEP) -> float:
    """Smallest shift that moves a subtree clear of everything to its left.

    Only the levels both contours reach are compared, so the cost is the
    length of the shorter contour.

    Args:
        left_contour: Left contour of the subtree being placed.
        right_contour: Right contour of what is already placed.
        node_sep: Gap required on every shared level.

    Returns:
        Offset for the new subtree's root in the frame of ``right_contour``.
    """
    shared = min(len(left_contour), len(right_contour))
    max_sep = max(right_contour[depth] - left_contour[depth] for depth in range(shared))
    return max_sep + node_sep


class _Contour:
    """Contour stored deepest level first, plus a shift applied to every entry.

    Shifting a whole contour and putting a new node on top of it are both
    constant time, so a parent can take over its children's contours
    instead of copying them.
    """

    __slots__ = ("values", "shift")

    def __init__(self) -> None:
        self.values = [0.0]
        self.shift = 0.0

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, depth: int) -> float:
        return self.values[-1 - depth] + self.shift

    def add_root(self) -> None:
        self.values.append(-self.shift)


def _merge(a: _Contour, b: _Contour, comp: Callable[[float, float], float]) -> _Contour:
    """Index-wise ``comp`` of two contours in the same frame.

    The longer contour is updated in place and returned, so the work done is
    the length of the shorter one.
    """
    if len(b) > len(a):
        a, b = b, a
    values = a.values
    for depth in range(len(b)):
        i = -1 - depth
        values[i] = comp(values[i], b[depth] - a.shift)
    return a


def buchheim_positions(tree: Tree, scale: float = SCALE, node_sep: float = NODE_SEP) -> Positions:
    """Center parents over children, separating siblings level by level.

    Each node's left and right contours are assembled from its children's in
    the post-order pass and handed up to the parent, so no subtree is walked
    more than once.

    Args:
        tree: Tree to lay out.
        scale: Distance between levels and size of one offset unit.
        node_sep: Minimum gap between sibling subtrees on every shared level.

    Returns:
        (x, y) per node id, leftmost node at ``x == scale``.
    """
    n = len(tree)
    mod = [0.0] * n
    leftmost = [0.0] * n
    lefts: list[_Contour | None] = [None] * n
    rights: list[_Contour | None] = [None] * n

    for node in tree.postorder():
        kids = tree.children[node]
        if not kids:
            lefts[node], rights[node] = _Contour(), _Contour()
            continue

        # Offsets relative to the first child until the final centering shift
        left, right = lefts[kids[0]], rights[kids[0]]
        for child in kids[1:]:
            child_left, child_right = lefts[child], rights[child]
            offset = push(child_left, right, node_sep)
            mod[child] = offset
            child_left.shift += offset
            child_right.shift += offset
            left = _merge(left, child_left, min)
            right = _merge(right, child_right, max)
        for child in kids:
            lefts[child] = rights[child] = None

        span = mod[kids[-1]]
        for child in kids:
            mod[child] -= span / 2
            leftmost[node] = min(leftmost[node], mod[child] + leftmost[child])

        left.shift -= span / 2
        right.shift -= span / 2
        left.add_root()
        right.add_root()
        lefts[node], rights[node] = left, right

    positions = apply_offsets(tree, mod, 1 - leftmost[tree.root], scale)

    shift = scale - min(x for x, _ in positions)
    return [(x + shift, y) for x, y in positions]
