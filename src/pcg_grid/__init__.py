"""Procedural content generation on 2D grids."""

from pcg_grid.grid import Grid, GridDirection, Vec2

__all__ = ["Grid", "GridDirection", "Vec2"]
