"""End-to-end generation pipelines built from grids and generators."""

from pcg_grid.pipelines.caves import generate_caves, warp_offsets
from pcg_grid.pipelines.presets import TERRAIN_PRESETS, apply_preset, get_preset_overrides
from pcg_grid.pipelines.terrain import (
    classify_terrain,
    collider_grid,
    generate_biome_map,
    generate_heightmap,
    generate_terrain,
    island_gradient,
)
from pcg_grid.pipelines.types import Terrain, TerrainConfig, TerrainResult

__all__ = [
    "TERRAIN_PRESETS",
    "Terrain",
    "TerrainConfig",
    "TerrainResult",
    "apply_preset",
    "classify_terrain",
    "collider_grid",
    "generate_biome_map",
    "generate_caves",
    "generate_heightmap",
    "generate_terrain",
    "get_preset_overrides",
    "island_gradient",
    "warp_offsets",
]
