"""Tree layout strategies.

Each strategy maps a tree to one (x, y) pair per node id.
"""

from .contour import buchheim_positions, contour, push, wide_positions
from .knuth import knuth_positions
from .radial import RadialVariant, polar_positions, radial_r1_positions, radial_r2_positions
from .strategy import LayoutStrategy, compute_layout
from .thin import parent_positions, thin_positions

__all__ = [
    "LayoutStrategy",
    "compute_layout",
    "thin_positions",
    "parent_positions",
    "knuth_positions",
    "wide_positions",
    "buchheim_positions",
    "contour",
    "push",
    "RadialVariant",
    "polar_positions",
    "radial_r1_positions",
    "radial_r2_positions",
]
