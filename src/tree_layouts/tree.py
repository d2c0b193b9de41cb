"""Rooted, ordered tree stored as an arena of integer node ids."""

import logging
from collections import deque
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import networkx as nx

from .errors import MalformedTreeError

logger = logging.getLogger(__name__)

# The root of every tree is node 0
ROOT = 0

EdgeMap = Mapping[int, Sequence[int]]

# (x, y) per node id
Positions = list[tuple[float, float]]


@dataclass
class Tree:
    """Rooted tree with left-to-right ordered children.

    Node ids index both lists. ``children[i]`` holds the ordered child ids of
    node ``i`` (empty for a leaf) and ``parent[i]`` its parent id, or ``None``
    for the root. Layout strategies never write to a tree, so one instance can
    be laid out any number of times.
    """

    children: list[list[int]] = field(default_factory=lambda: [[]])
    parent: list[int | None] = field(default_factory=lambda: [None])

    @property
    def root(self) -> int:
        return ROOT

    @property
    def node_count(self) -> int:
        return len(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def is_leaf(self, node: int) -> bool:
        return not self.children[node]

    def preorder(self) -> Iterator[tuple[int, int]]:
        """Yield (node, depth) pairs, parents before children, left to right."""
        stack = [(ROOT, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in reversed(self.children[node]):
                stack.append((child, depth + 1))

    def postorder(self) -> list[int]:
        """Return node ids with every child before its parent, left to right."""
        order: list[int] = []
        stack = [ROOT]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(self.children[node])
        order.reverse()
        return order

    def levels(self) -> Iterator[tuple[int, int]]:
        """Yield (node, depth) pairs in breadth-first order."""
        queue: deque[tuple[int, int]] = deque([(ROOT, 0)])
        while queue:
            node, depth = queue.popleft()
            yield node, depth
            for child in self.children[node]:
                queue.append((child, depth + 1))

    def depths(self) -> list[int]:
        """Depth of each node id (root is depth 0)."""
        depth_of = [0] * len(self)
        for node, depth in self.levels():
            depth_of[node] = depth
        return depth_of

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path."""
        return max(self.depths())

    def edge_map(self) -> dict[int, list[int]]:
        """Parent id -> ordered child ids, internal nodes only."""
        return {node: list(kids) for node, kids in enumerate(self.children) if kids}

    def to_networkx(self) -> nx.DiGraph:
        """Directed parent -> child graph; edge attribute ``order`` keeps sibling order."""
        G = nx.DiGraph()
        G.add_nodes_from(range(len(self)))
        for node, kids in enumerate(self.children):
            for i, child in enumerate(kids):
                G.add_edge(node, child, order=i)
        return G

    @classmethod
    def from_networkx(cls, graph: nx.DiGraph) -> "Tree":
        """Build a tree from a directed graph rooted at node 0.

        Children are ordered by the ``order`` edge attribute where present,
        otherwise by edge insertion order.

        Raises:
            MalformedTreeError: If the graph is not an arborescence rooted at 0.
        """
        if graph.number_of_nodes() == 0:
            raise MalformedTreeError("Graph has no nodes")
        if not nx.is_arborescence(graph):
            raise MalformedTreeError("Graph is not a rooted tree")
        if ROOT not in graph or graph.in_degree(ROOT) != 0:
            raise MalformedTreeError(f"Graph must be rooted at node {ROOT}")

        edges: dict[int, list[int]] = {}
        for node in graph.nodes:
            successors = list(graph.successors(node))
            if not successors:
                continue
            # sorted() is stable, so unordered edges keep insertion order
            successors = sorted(
                successors,
                key=lambda c: graph.edges[node, c].get("order", 0),
            )
            edges[node] = successors
        return build_tree(edges, node_count=graph.number_of_nodes())


def _normalize_edge_map(edge_map: Mapping) -> dict[int, list[int]]:
    """Coerce keys and child ids to int (JSON object keys arrive as strings)."""
    edges: dict[int, list[int]] = {}
    try:
        for parent, kids in edge_map.items():
            edges[int(parent)] = [int(child) for child in (kids or ())]
    except (TypeError, ValueError) as err:
        raise MalformedTreeError(f"Edge map ids must be integers: {err}") from err
    return edges


def build_tree(edge_map: EdgeMap, node_count: int | None = None) -> Tree:
    """Materialize a tree from an edge map by breadth-first traversal from node 0.

    Args:
        edge_map: Parent id -> ordered child ids. Ids absent as keys are leaves.
        node_count: Total number of nodes. Defaults to the largest referenced id + 1.

    Returns:
        The built tree.

    Raises:
        MalformedTreeError: If an id is out of range, a node is reached twice
            (cycle or multiple parents), or some id in ``[0, node_count)`` is
            not reachable from the root.
    """
    edges = _normalize_edge_map(edge_map)

    referenced = {ROOT, *edges}
    for kids in edges.values():
        referenced.update(kids)

    if node_count is None:
        node_count = max(referenced) + 1
    elif node_count < 1:
        raise MalformedTreeError(f"node_count must be at least 1, got {node_count}")

    out_of_range = sorted(i for i in referenced if i < 0 or i >= node_count)
    if out_of_range:
        raise MalformedTreeError(f"Node ids out of range [0, {node_count}): {out_of_range}")

    children: list[list[int]] = [[] for _ in range(node_count)]
    parent: list[int | None] = [None] * node_count
    seen = {ROOT}
    queue: deque[int] = deque([ROOT])

    while queue:
        node = queue.popleft()
        for child in edges.get(node, ()):
            if child in seen:
                raise MalformedTreeError(
                    f"Node {child} reached twice (again from {node}): "
                    "edge map contains a cycle or a node with two parents"
                )
            seen.add(child)
            parent[child] = node
            children[node].append(child)
            queue.append(child)

    if len(seen) != node_count:
        unreached = sorted(set(range(node_count)) - seen)
        raise MalformedTreeError(f"Nodes not reachable from root {ROOT}: {unreached}")

    tree = Tree(children=children, parent=parent)
    logger.debug("Built tree with %d nodes, height %d", node_count, tree.height())
    return tree
