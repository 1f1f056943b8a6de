"""Noise sources and the generator that samples them into a grid."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from pcg_grid.generators.base import GridGenerator

if TYPE_CHECKING:
    from pcg_grid.grid.grid import Grid
    from pcg_grid.grid.types import Vec2


class NoiseSource(Protocol):
    """Anything that maps a 2D point to a value in [-1, 1]."""

    def sample_2d(self, x: float, y: float) -> float:
        ...


def _seeded_hash(seed: int, ix: int, iy: int, channel: int) -> float:
    """Deterministic float in [0, 1) for an integer lattice point."""
    h = ((seed * 2654435761) ^ (ix * 340573321) ^ (iy * 1013904223) ^ (channel * 668265263))
    h &= 0xFFFFFFFF
    h = ((h >> 16) ^ h) * 0x45D9F3B & 0xFFFFFFFF
    h = ((h >> 16) ^ h) * 0x45D9F3B & 0xFFFFFFFF
    h = ((h >> 16) ^ h) & 0xFFFFFFFF
    return h / 0x100000000


class SimplexNoise:
    """Single-octave OpenSimplex noise with a fixed seed."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample_2d(self, x: float, y: float) -> float:
        # opensimplex's noise2 is already bounded to [-1, 1].
        return self._simplex.noise2(x, y)


class Fbm:
    """Fractal Brownian motion over OpenSimplex.

    Octave ``i`` is sampled at ``frequency * lacunarity**i`` and weighted by
    ``persistence**i``. The weighted sum is divided by the total weight,
    which keeps the result in [-1, 1] whatever the octave count.
    """

    def __init__(
        self,
        seed: int = 0,
        frequency: float = 1.0,
        octaves: int = 6,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
    ) -> None:
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        self.seed = seed
        self.frequency = frequency
        self.octaves = octaves
        self.persistence = persistence
        self.lacunarity = lacunarity
        self._simplex = SimplexNoise(seed)
        self._layers = [
            (frequency * lacunarity**octave, persistence**octave)
            for octave in range(octaves)
        ]
        self._weight = sum(weight for _, weight in self._layers)

    def sample_2d(self, x: float, y: float) -> float:
        sample = self._simplex.sample_2d
        weighted = sum(
            weight * sample(x * scale, y * scale) for scale, weight in self._layers
        )
        return weighted / self._weight


class WorleyNoise:
    """Cellular noise: distance to the nearest jittered feature point.

    One feature point per unit cell; the 3x3 block of cells around the
    sample is searched. Distances in [0, sqrt(2)] are mapped onto [-1, 1].
    """

    def __init__(self, seed: int = 0, frequency: float = 1.0) -> None:
        self.seed = seed
        self.frequency = frequency

    def sample_2d(self, x: float, y: float) -> float:
        sx = x * self.frequency
        sy = y * self.frequency
        cell_x = math.floor(sx)
        cell_y = math.floor(sy)

        nearest = math.inf
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                nx = cell_x + dx
                ny = cell_y + dy
                px = nx + _seeded_hash(self.seed, nx, ny, 0)
                py = ny + _seeded_hash(self.seed, nx, ny, 1)
                nearest = min(nearest, math.hypot(sx - px, sy - py))

        return min(nearest / math.sqrt(2.0), 1.0) * 2.0 - 1.0


def identity_transform() -> NDArray[np.float64]:
    return np.identity(4, dtype=np.float64)


def scale_transform(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    """4x4 matrix scaling x by *sx* and y by *sy* (defaults to *sx*)."""
    matrix = identity_transform()
    matrix[0, 0] = sx
    matrix[1, 1] = sx if sy is None else sy
    return matrix


def translate_transform(tx: float, ty: float) -> NDArray[np.float64]:
    matrix = identity_transform()
    matrix[0, 3] = tx
    matrix[1, 3] = ty
    return matrix


class NoiseGenerator(GridGenerator[float]):
    """Samples *noise* at the affinely transformed cell location.

    The cell's current value is ignored.
    """

    def __init__(
        self,
        noise: NoiseSource,
        transform: NDArray[np.float64] | None = None,
    ) -> None:
        self.noise = noise
        self.transform = identity_transform() if transform is None else np.asarray(transform, dtype=np.float64)
        if self.transform.shape != (4, 4):
            raise ValueError(f"transform must be a 4x4 matrix, got shape {self.transform.shape}")

    def with_transform(self, transform: NDArray[np.float64]) -> "NoiseGenerator":
        return NoiseGenerator(self.noise, transform)

    def generate(self, location: Vec2, size: Vec2, current: float, grid: Grid[float]) -> float:
        point = self.transform @ np.array((location.x, location.y, 0.0, 1.0))
        return self.noise.sample_2d(float(point[0]), float(point[1]))
