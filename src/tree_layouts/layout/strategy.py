"""Closed set of layout strategies and dispatch to their implementations."""

import logging
from collections.abc import Callable
from enum import Enum

from ..config import LayoutOptions
from ..tree import Positions, Tree
from .contour import buchheim_positions, wide_positions
from .knuth import knuth_positions
from .radial import radial_r1_positions, radial_r2_positions
from .thin import parent_positions, thin_positions

logger = logging.getLogger(__name__)


class LayoutStrategy(Enum):
    """Available layout strategies; values are the command-line names."""

    THIN = "thin"  # level-order slots
    KNUTH = "knuth"  # binary in-order
    PARENT = "parent"  # level order, parents re-centered
    WIDE = "wide"  # extent-separated, centered
    BUCHHEIM = "buchheim"  # contour-separated, centered
    RADIAL_R1 = "radial-r1"
    RADIAL_R2 = "radial-r2"

    @classmethod
    def parse(cls, name: str) -> "LayoutStrategy":
        """Look up a strategy by its command-line name."""
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown strategy '{name}' (choose from: {valid})") from None

    @property
    def is_radial(self) -> bool:
        return self in (LayoutStrategy.RADIAL_R1, LayoutStrategy.RADIAL_R2)

    @classmethod
    def cartesian(cls) -> list["LayoutStrategy"]:
        """Strategies whose y coordinate depends on depth alone."""
        return [s for s in cls if not s.is_radial]


_REGISTRY: dict[LayoutStrategy, Callable[[Tree, LayoutOptions], Positions]] = {
    LayoutStrategy.THIN: lambda tree, opts: thin_positions(tree, scale=opts.scale),
    LayoutStrategy.KNUTH: lambda tree, opts: knuth_positions(
        tree, scale=opts.scale, strict=opts.strict_binary
    ),
    LayoutStrategy.PARENT: lambda tree, opts: parent_positions(tree, scale=opts.scale),
    LayoutStrategy.WIDE: lambda tree, opts: wide_positions(
        tree, scale=opts.scale, node_sep=opts.node_sep
    ),
    LayoutStrategy.BUCHHEIM: lambda tree, opts: buchheim_positions(
        tree, scale=opts.scale, node_sep=opts.node_sep
    ),
    LayoutStrategy.RADIAL_R1: lambda tree, opts: radial_r1_positions(tree, scale=opts.scale),
    LayoutStrategy.RADIAL_R2: lambda tree, opts: radial_r2_positions(tree, scale=opts.scale),
}


def compute_layout(
    tree: Tree,
    strategy: LayoutStrategy | str,
    options: LayoutOptions | None = None,
) -> Positions:
    """Lay out ``tree`` with one strategy.

    Args:
        tree: Tree to lay out.
        strategy: Strategy or its command-line name.
        options: Scale, separation and strictness. Defaults to ``LayoutOptions()``.

    Returns:
        (x, y) per node id, ``len(tree)`` entries.
    """
    if isinstance(strategy, str):
        strategy = LayoutStrategy.parse(strategy)
    options = options or LayoutOptions()
    logger.debug("Laying out %d nodes with %s", len(tree), strategy.value)
    return _REGISTRY[strategy](tree, options)
