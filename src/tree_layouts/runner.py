"""Run several strategies against one tree and size a canvas for them."""

import logging
from dataclasses import dataclass

from .config import LayoutOptions
from .layout.strategy import LayoutStrategy, compute_layout
from .tree import Positions, Tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    """Largest x and y in a position table (coordinates start at the origin)."""

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def of(cls, positions: Positions) -> "BoundingBox":
        if not positions:
            return cls()
        return cls(
            width=max(x for x, _ in positions),
            height=max(y for _, y in positions),
        )


@dataclass
class LayoutResult:
    """Positions produced by one strategy, with their bounding box."""

    strategy: LayoutStrategy
    positions: Positions
    bounds: BoundingBox


def run_strategies(
    tree: Tree,
    strategies: list[LayoutStrategy] | None = None,
    options: LayoutOptions | None = None,
) -> dict[LayoutStrategy, LayoutResult]:
    """Lay out the same tree with each strategy.

    Args:
        tree: Tree to lay out.
        strategies: Strategies to run, in order. Defaults to all of them.
        options: Options passed to every strategy.

    Returns:
        Results keyed by strategy, in the order they were run.
    """
    if strategies is None:
        strategies = list(LayoutStrategy)

    results: dict[LayoutStrategy, LayoutResult] = {}
    for strategy in strategies:
        positions = compute_layout(tree, strategy, options)
        bounds = BoundingBox.of(positions)
        logger.debug("%s: %.1f x %.1f", strategy.value, bounds.width, bounds.height)
        results[strategy] = LayoutResult(strategy=strategy, positions=positions, bounds=bounds)
    return results


def canvas_size(results: dict[LayoutStrategy, LayoutResult], margin: float = 0.0) -> BoundingBox:
    """Smallest box holding every result, plus ``margin`` on the far edges."""
    width = max((r.bounds.width for r in results.values()), default=0.0)
    height = max((r.bounds.height for r in results.values()), default=0.0)
    return BoundingBox(width=width + margin, height=height + margin)
