"""Flat row-major 2D grid with wraparound addressing."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

import numpy as np
from numpy.typing import NDArray

from pcg_grid.generators.base import GeneratorLike, as_generator
from pcg_grid.grid.types import COMPASS_ORDER, GridDirection, Vec2, Vec2Like

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def _checked_size(size: Vec2Like) -> Vec2:
    size = Vec2.of(size)
    if size.x < 0 or size.y < 0:
        raise ValueError(f"Grid size must be non-negative, got {tuple(size)}")
    return size


class Grid(Generic[T]):
    """Fixed-size 2D buffer of plain values.

    Cells are stored row-major (``index = y * width + x``). ``get``/``set``
    wrap both axes modulo the grid size, so reads and writes never go out of
    bounds; ``location_offset`` and ``neighbors`` are bounded instead.

    Grids are value types: ``clone``/``fork`` always allocate a new buffer.
    """

    __slots__ = ("_size", "_buffer")

    def __init__(self, size: Vec2Like, buffer: Iterable[T]) -> None:
        """Adopt a copy of *buffer*; raises ``ValueError`` on a length mismatch.

        ``with_buffer`` is the non-raising form.
        """
        size = _checked_size(size)
        buffer = list(buffer)
        if len(buffer) != size.area:
            raise ValueError(
                f"Buffer of length {len(buffer)} does not fit a grid of size {tuple(size)}"
            )
        self._size = size
        self._buffer = buffer

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def new(cls, size: Vec2Like, fill: T) -> "Grid[T]":
        """Allocate ``size.x * size.y`` cells all equal to *fill*."""
        size = _checked_size(size)
        return cls(size, [fill] * size.area)

    @classmethod
    def with_buffer(cls, size: Vec2Like, buffer: Iterable[T]) -> "Grid[T] | None":
        """Adopt *buffer* if its length matches *size*, otherwise return None."""
        size = _checked_size(size)
        buffer = list(buffer)
        if len(buffer) != size.area:
            return None
        return cls(size, buffer)

    @classmethod
    def generate(
        cls,
        size: Vec2Like,
        generator: GeneratorLike[T],
        default: Any = 0.0,
    ) -> "Grid[T]":
        """Create a grid filled with *default* and run *generator* over it once."""
        result = cls.new(size, default)
        result.apply_all(generator)
        return result

    @classmethod
    def from_array(cls, array: NDArray[Any]) -> "Grid[Any]":
        """Build a grid from a 2D numpy array of shape ``(height, width)``."""
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        height, width = array.shape
        return cls(Vec2(width, height), array.ravel().tolist())

    def fork(self, fill: T) -> "Grid[T]":
        """Same size, new buffer filled with *fill*."""
        return Grid(self._size, [fill] * self._size.area)

    def fork_generate(self, generator: GeneratorLike[T]) -> "Grid[T]":
        """Clone this grid, then run *generator* over the clone.

        The generator sees this grid's values as ``current``.
        """
        result = self.clone()
        result.apply_all(generator)
        return result

    def clone(self) -> "Grid[T]":
        return Grid(self._size, self._buffer)

    __copy__ = clone

    def into_inner(self) -> tuple[Vec2, list[T]]:
        """Size and a copy of the cells."""
        return self._size, list(self._buffer)

    def to_array(self, dtype: Any = np.float64) -> NDArray[Any]:
        """Return a ``(height, width)`` numpy copy of the buffer."""
        return np.array(self._buffer, dtype=dtype).reshape(self._size.y, self._size.x)

    # ── Accessors ────────────────────────────────────────────────

    @property
    def size(self) -> Vec2:
        return self._size

    @property
    def buffer(self) -> list[T]:
        """Copy of the cells in row-major order; write through ``set``."""
        return list(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._buffer == other._buffer

    def __repr__(self) -> str:
        return f"Grid(size=({self._size.x}, {self._size.y}))"

    def index(self, location: Vec2Like) -> int:
        """Buffer index of *location*, wrapped on both axes.

        Requires a non-empty grid; ``get``/``set`` check that first.
        """
        location = Vec2.of(location)
        size = self._size
        return (location.y % size.y) * size.x + (location.x % size.x)

    def location(self, index: int) -> Vec2:
        """Inverse of ``index`` for in-range indices. Requires a non-empty grid."""
        return Vec2(index % self._size.x, index // self._size.x)

    def get(self, location: Vec2Like) -> T | None:
        if not self._buffer:
            return None
        return self._buffer[self.index(location)]

    def set(self, location: Vec2Like, value: T) -> None:
        if not self._buffer:
            return
        self._buffer[self.index(location)] = value

    def cells(self) -> Iterator[tuple[Vec2, T]]:
        """Iterate ``(location, value)`` pairs in row-major order."""
        width = self._size.x
        for index, value in enumerate(self._buffer):
            yield Vec2(index % width, index // width), value

    # ── Generation ───────────────────────────────────────────────

    def apply(
        self,
        from_location: Vec2Like,
        to_location: Vec2Like,
        generator: GeneratorLike[T],
    ) -> None:
        """Replace every cell of ``[from, to)`` with the generator's output.

        Rows are visited top to bottom, cells left to right. The generator
        receives this grid as its ``grid`` argument while it is being
        mutated: cells already visited hold new values. Generators that need
        stable neighbor reads must be built around a separate snapshot
        (``grid.clone()``).
        """
        if not self._buffer:
            return
        generator = as_generator(generator)
        start = Vec2.of(from_location)
        end = Vec2.of(to_location)
        size = self._size
        buffer = self._buffer
        logger.debug(
            "Applying %s over x=[%d, %d) y=[%d, %d)",
            type(generator).__name__, start.x, end.x, start.y, end.y,
        )
        for y in range(start.y, end.y):
            for x in range(start.x, end.x):
                location = Vec2(x, y)
                index = self.index(location)
                buffer[index] = generator.generate(location, size, buffer[index], self)

    def apply_all(self, generator: GeneratorLike[T]) -> None:
        self.apply(0, self._size, generator)

    def map(self, f: Callable[[Vec2, Vec2, T], U]) -> "Grid[U]":
        """Build a new grid from ``f(location, size, value)`` for every cell."""
        size = self._size
        return Grid(size, [f(location, size, value) for location, value in self.cells()])

    # ── Bounded neighborhood ─────────────────────────────────────

    def location_offset(
        self,
        location: Vec2Like,
        direction: GridDirection,
        distance: int,
    ) -> Vec2 | None:
        """Move *distance* cells in *direction* without wrapping.

        Returns None for a zero distance or when the move leaves the grid.
        """
        if distance <= 0:
            return None
        location = Vec2.of(location)
        dx, dy = direction.value
        x = location.x + dx * distance
        y = location.y + dy * distance
        if not (0 <= x < self._size.x and 0 <= y < self._size.y):
            return None
        return Vec2(x, y)

    def neighbors(
        self,
        location: Vec2Like,
        distances: Iterable[int],
    ) -> Iterator[tuple[GridDirection, Vec2, T]]:
        """Yield ``(direction, location, value)`` for in-bounds neighbors.

        Ordered by distance, then by compass order N, NE, E, SE, S, SW, W, NW.
        """
        for distance in distances:
            for direction in COMPASS_ORDER:
                target = self.location_offset(location, direction, distance)
                if target is None:
                    continue
                value = self.get(target)
                if value is None:
                    continue
                yield direction, target, value
