"""Generic 2D grid with wraparound addressing and bounded neighborhoods."""

from pcg_grid.grid.grid import Grid
from pcg_grid.grid.types import COMPASS_ORDER, GridDirection, Vec2, Vec2Like

__all__ = [
    "COMPASS_ORDER",
    "Grid",
    "GridDirection",
    "Vec2",
    "Vec2Like",
]
