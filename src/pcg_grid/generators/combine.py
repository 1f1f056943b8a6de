"""Cell-wise arithmetic between the grid being written and another grid.

Each combinator reads ``other.get(location)``, which wraps, and falls back
to ``default`` when ``other`` has no cell (an empty buffer).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from pcg_grid.generators.base import GridGenerator

if TYPE_CHECKING:
    from pcg_grid.grid.grid import Grid
    from pcg_grid.grid.types import Vec2


@dataclass
class GridCombinator(GridGenerator[Any]):
    other: Grid[Any]
    default: Any = 0.0

    def other_value(self, location: Vec2) -> Any:
        value = self.other.get(location)
        return self.default if value is None else value


class CopyGenerator(GridCombinator):
    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return self.other_value(location)


class AddGenerator(GridCombinator):
    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return current + self.other_value(location)


class SubGenerator(GridCombinator):
    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return current - self.other_value(location)


class MulGenerator(GridCombinator):
    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return current * self.other_value(location)


class DivGenerator(GridCombinator):
    """Divides by the other grid's cell.

    Float division follows IEEE 754: ``x / 0`` is ``±inf`` and ``0 / 0`` is
    NaN, so a zero cell never aborts a pass. Other element types use their
    own ``/``.
    """

    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        divisor = self.other_value(location)
        if isinstance(current, float) or isinstance(divisor, float):
            with np.errstate(divide="ignore", invalid="ignore"):
                return float(np.float64(current) / np.float64(divisor))
        return current / divisor


class MinGenerator(GridCombinator):
    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return min(current, self.other_value(location))


class MaxGenerator(GridCombinator):
    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return max(current, self.other_value(location))
