"""3x3 convolution over a snapshot grid.

Neighbors are read through ``Grid.get``, which wraps, so the convolution is
toroidal: the left column sees the right column and the top row sees the
bottom row. Always convolve against a snapshot (``grid.clone()``), never the
grid being written.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from pcg_grid.generators.base import GridGenerator

if TYPE_CHECKING:
    from pcg_grid.grid.grid import Grid
    from pcg_grid.grid.types import Vec2

# Row-major weights, center at index 4.
Kernel = tuple[float, float, float, float, float, float, float, float, float]


# Read-only; custom weights go straight to Kernel33Generator.
KERNEL_PRESETS: Mapping[str, Kernel] = MappingProxyType({
    "identity": (0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0),
    "ridge": (0.0, -1.0, 0.0, -1.0, 4.0, -1.0, 0.0, -1.0, 0.0),
    "edge_detection": (-1.0, -1.0, -1.0, -1.0, 8.0, -1.0, -1.0, -1.0, -1.0),
    "sharpen": (0.0, -1.0, 0.0, -1.0, 5.0, -1.0, 0.0, -1.0, 0.0),
    "emboss": (-2.0, -1.0, 0.0, -1.0, 1.0, 1.0, 0.0, 1.0, 2.0),
    "box_blur": (1.0 / 9.0,) * 9,
    "gaussian_blur": (
        1.0 / 16.0, 2.0 / 16.0, 1.0 / 16.0,
        2.0 / 16.0, 4.0 / 16.0, 2.0 / 16.0,
        1.0 / 16.0, 2.0 / 16.0, 1.0 / 16.0,
    ),
})


def _checked_kernel(weights: Sequence[Any]) -> tuple[Any, ...]:
    weights = tuple(weights)
    if len(weights) != 9:
        raise ValueError(f"A 3x3 kernel needs 9 weights, got {len(weights)}")
    return weights


def get_kernel(name: str) -> Kernel:
    """Return the preset weights named *name*."""
    try:
        return KERNEL_PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown kernel {name!r}; expected one of {sorted(KERNEL_PRESETS)}"
        ) from None


class Kernel33Generator(GridGenerator[Any]):
    """Weighted sum of a cell's 3x3 neighborhood in *other*."""

    def __init__(self, other: Grid[Any], kernel: Sequence[Any], default: Any = 0.0) -> None:
        self.other = other
        self.kernel = _checked_kernel(kernel)
        self.default = default

    @classmethod
    def preset(cls, name: str, other: Grid[Any]) -> "Kernel33Generator":
        return cls(other, get_kernel(name))

    @classmethod
    def identity(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("identity", other)

    @classmethod
    def ridge(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("ridge", other)

    @classmethod
    def edge_detection(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("edge_detection", other)

    @classmethod
    def sharpen(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("sharpen", other)

    @classmethod
    def emboss(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("emboss", other)

    @classmethod
    def box_blur(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("box_blur", other)

    @classmethod
    def gaussian_blur(cls, other: Grid[Any]) -> "Kernel33Generator":
        return cls.preset("gaussian_blur", other)

    def region(self, location: Vec2, size: Vec2) -> list[Any]:
        """The 3x3 neighborhood of *location* in *other*, row-major."""
        # Adding size - 1 instead of subtracting 1 keeps coordinates non-negative.
        x, y = location
        left, right = x + size.x - 1, x + 1
        top, bottom = y + size.y - 1, y + 1
        values = []
        for row in (top, y, bottom):
            for column in (left, x, right):
                value = self.other.get((column, row))
                values.append(self.default if value is None else value)
        return values

    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        accumulator = self.default
        for value, weight in zip(self.region(location, size), self.kernel):
            accumulator = value * weight + accumulator
        return accumulator
