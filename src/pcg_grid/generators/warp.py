"""Domain warping: run a generator at a displaced location."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pcg_grid.generators.base import GeneratorLike, GridGenerator, as_generator
from pcg_grid.grid.types import Vec2

if TYPE_CHECKING:
    from pcg_grid.grid.grid import Grid


def _wrap_offset(coordinate: int, offset: int, extent: int) -> int:
    if offset >= 0:
        return (coordinate + offset) % extent
    return (coordinate + extent - (abs(offset) % extent)) % extent


class OffsetLocationGenerator(GridGenerator[Any]):
    """Delegates to *generator* at ``location + offsets[location]``.

    The shifted location wraps around the grid on both axes. Cells missing
    from *offsets* are not displaced.
    """

    def __init__(self, generator: GeneratorLike[Any], offsets: Grid[tuple[int, int]]) -> None:
        self.generator = as_generator(generator)
        self.offsets = offsets

    def shifted(self, location: Vec2, size: Vec2) -> Vec2:
        offset = self.offsets.get(location)
        if offset is None:
            return location
        dx, dy = offset
        return Vec2(
            _wrap_offset(location.x, int(dx), size.x),
            _wrap_offset(location.y, int(dy), size.y),
        )

    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return self.generator.generate(self.shifted(location, size), size, current, grid)
