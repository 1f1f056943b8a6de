"""Type definitions for terrain pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pcg_grid.grid import Grid


class Terrain(IntEnum):
    """Terrain categories handed to the tile renderer."""

    WATER = 0
    FOREST = 1
    GRASS = 2
    SAND = 3
    ROCK = 4
    SNOW = 5


# Categories a walking character cannot enter.
BLOCKING_TERRAIN = frozenset({Terrain.WATER, Terrain.ROCK})

GLYPHS: dict[Terrain, str] = {
    Terrain.WATER: "~",
    Terrain.FOREST: "T",
    Terrain.GRASS: ".",
    Terrain.SAND: ":",
    Terrain.ROCK: "^",
    Terrain.SNOW: "*",
}


@dataclass
class TerrainConfig:
    """Configuration for terrain generation.

    All parameters are deterministic given the seed. Heights and biome
    values are remapped to [0, 1] before classification.
    """

    seed: int = 0

    # Grid edge length in cells
    size: int = 50

    # Height noise
    height_frequency: float = 0.025
    height_octaves: int = 6

    # Biome noise (seeded independently of height)
    biome_seed_offset: int = 42
    biome_frequency: float = 0.05
    biome_octaves: int = 6

    # Subtract a square falloff so the map is surrounded by water
    island: bool = False

    # Gaussian blur passes over the heightmap before classification
    smoothing_passes: int = 0

    # Height bands (strictly greater than selects the band)
    snow_level: float = 0.9
    rock_level: float = 0.75
    land_level: float = 0.4

    # Biome bands on land
    sand_biome: float = 0.9
    grass_biome: float = 0.6

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be at least 1, got {self.size}")
        if self.smoothing_passes < 0:
            raise ValueError(f"smoothing_passes must be non-negative, got {self.smoothing_passes}")


@dataclass
class TerrainResult:
    """All intermediate and final grids of one terrain run."""

    height: Grid[float]
    biome: Grid[float]
    terrain: Grid[Terrain]
    colliders: Grid[bool]

    def histogram(self) -> dict[Terrain, int]:
        """Cell count per category, in category order."""
        counts = {category: 0 for category in Terrain}
        for value in self.terrain.buffer:
            counts[value] += 1
        return counts
