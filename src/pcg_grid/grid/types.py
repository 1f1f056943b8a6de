"""Type definitions for grid addressing."""

from __future__ import annotations

from enum import Enum
from numbers import Integral
from typing import NamedTuple, Union


class Vec2(NamedTuple):
    """Integer 2D vector used for both cell locations and grid sizes."""

    x: int
    y: int

    @classmethod
    def of(cls, value: "Vec2Like") -> "Vec2":
        """Coerce a tuple, a Vec2 or a single integer (splat) into a Vec2.

        Any ``numbers.Integral`` counts as an integer, numpy scalars included.
        """
        if isinstance(value, Vec2):
            return value
        if isinstance(value, Integral):
            return cls(int(value), int(value))
        x, y = value
        return cls(int(x), int(y))

    @property
    def area(self) -> int:
        return self.x * self.y


Vec2Like = Union[Vec2, tuple[int, int], int]


class GridDirection(Enum):
    """Eight compass directions in the fixed enumeration order.

    Rows grow downward, so north decreases ``y`` and south increases it.
    """

    N = (0, -1)
    NE = (1, -1)
    E = (1, 0)
    SE = (1, 1)
    S = (0, 1)
    SW = (-1, 1)
    W = (-1, 0)
    NW = (-1, -1)

    @property
    def offset(self) -> Vec2:
        return Vec2(*self.value)

    def opposite(self) -> "GridDirection":
        dx, dy = self.value
        return GridDirection((-dx, -dy))


# Neighbor enumeration order.
COMPASS_ORDER: tuple[GridDirection, ...] = (
    GridDirection.N,
    GridDirection.NE,
    GridDirection.E,
    GridDirection.SE,
    GridDirection.S,
    GridDirection.SW,
    GridDirection.W,
    GridDirection.NW,
)
