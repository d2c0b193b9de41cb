"""Compute 2-D node coordinates for drawing rooted trees."""

from .config import LayoutOptions
from .errors import MalformedTreeError, TreeLayoutError, UnsupportedShapeError
from .layout import LayoutStrategy, compute_layout
from .runner import BoundingBox, LayoutResult, canvas_size, run_strategies
from .tree import Tree, build_tree

__all__ = [
    "Tree",
    "build_tree",
    "LayoutOptions",
    "LayoutStrategy",
    "compute_layout",
    "BoundingBox",
    "LayoutResult",
    "run_strategies",
    "canvas_size",
    "TreeLayoutError",
    "MalformedTreeError",
    "UnsupportedShapeError",
]
