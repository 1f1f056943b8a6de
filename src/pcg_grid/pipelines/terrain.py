"""Height + biome terrain pipeline.

Builds a height grid and a biome grid from fractal noise, optionally pulls
the borders down with a square falloff (island maps), smooths, and then
classifies every cell into a ``Terrain`` category.
"""

from __future__ import annotations

import logging
import time

from pcg_grid.generators import (
    ClampGenerator,
    Fbm,
    Kernel33Generator,
    NoiseGenerator,
    RemapGenerator,
    SubGenerator,
)
from pcg_grid.grid import Grid, Vec2
from pcg_grid.pipelines.types import BLOCKING_TERRAIN, Terrain, TerrainConfig, TerrainResult

logger = logging.getLogger(__name__)

# Noise output range and the normalised range the bands are defined on.
NOISE_RANGE = (-1.0, 1.0)
UNIT_RANGE = (0.0, 1.0)


def island_gradient(location: Vec2, size: Vec2, current: float) -> float:
    """Square falloff: 0 at the center, 1 on the border, squared."""
    center_x = max(size.x // 2, 1)
    center_y = max(size.y // 2, 1)
    x = abs(location.x - center_x) / center_x
    y = abs(location.y - center_y) / center_y
    result = max(x, y)
    return result * result


def _unit_noise_grid(size: Vec2, noise: Fbm) -> Grid[float]:
    grid = Grid.generate(size, NoiseGenerator(noise))
    grid.apply_all(RemapGenerator(NOISE_RANGE, UNIT_RANGE))
    return grid


def generate_heightmap(config: TerrainConfig) -> Grid[float]:
    """Height in [0, 1] (island maps may dip below 0 before clamping)."""
    size = Vec2.of(config.size)
    height = _unit_noise_grid(
        size,
        Fbm(seed=config.seed, frequency=config.height_frequency, octaves=config.height_octaves),
    )

    if config.island:
        gradient = height.fork_generate(island_gradient)
        height.apply_all(SubGenerator(gradient))

    for _ in range(config.smoothing_passes):
        snapshot = height.clone()
        height.apply_all(Kernel33Generator.gaussian_blur(snapshot))

    height.apply_all(ClampGenerator(0.0, 1.0))
    return height


def generate_biome_map(config: TerrainConfig) -> Grid[float]:
    return _unit_noise_grid(
        Vec2.of(config.size),
        Fbm(
            seed=config.seed + config.biome_seed_offset,
            frequency=config.biome_frequency,
            octaves=config.biome_octaves,
        ),
    )


def classify_cell(height: float, biome: float, config: TerrainConfig) -> Terrain:
    if height > config.snow_level:
        return Terrain.SNOW
    if height > config.rock_level:
        return Terrain.ROCK
    if height > config.land_level:
        if biome > config.sand_biome:
            return Terrain.SAND
        if biome > config.grass_biome:
            return Terrain.GRASS
        return Terrain.FOREST
    return Terrain.WATER


def classify_terrain(
    height: Grid[float],
    biome: Grid[float],
    config: TerrainConfig,
) -> Grid[Terrain]:
    """Combine height and biome into a category grid.

    Both grids must share a size; biome cells are read with the same
    location as the height cell.
    """
    if height.size != biome.size:
        raise ValueError(
            f"Height and biome grids differ in size: {tuple(height.size)} vs {tuple(biome.size)}"
        )

    def classify(location: Vec2, size: Vec2, value: float) -> Terrain:
        return classify_cell(value, biome.get(location), config)

    return height.map(classify)


def collider_grid(terrain: Grid[Terrain]) -> Grid[bool]:
    """Collision flags for a tile world: water and rock block movement."""
    return terrain.map(lambda location, size, category: category in BLOCKING_TERRAIN)


def generate_terrain(config: TerrainConfig) -> TerrainResult:
    """Run the full pipeline for *config*."""
    logger.info(
        "Generating %dx%d terrain (seed=%d, island=%s)",
        config.size, config.size, config.seed, config.island,
    )

    t0 = time.perf_counter()
    height = generate_heightmap(config)
    t_height = time.perf_counter()
    biome = generate_biome_map(config)
    t_biome = time.perf_counter()
    terrain = classify_terrain(height, biome, config)
    colliders = collider_grid(terrain)
    t_classify = time.perf_counter()

    logger.info(
        "[Terrain] phase timings: height=%.1fms biome=%.1fms classify=%.1fms total=%.1fms",
        (t_height - t0) * 1000,
        (t_biome - t_height) * 1000,
        (t_classify - t_biome) * 1000,
        (t_classify - t0) * 1000,
    )

    return TerrainResult(height=height, biome=biome, terrain=terrain, colliders=colliders)
