"""Terrain presets.

Maps each preset name to ``TerrainConfig`` field overrides. Omitted fields
keep the ``TerrainConfig`` defaults.
"""

from __future__ import annotations

from typing import Any

from pcg_grid.pipelines.types import TerrainConfig

TERRAIN_PRESETS: dict[str, dict[str, Any]] = {
    # ── Continent ───────────────────────────────────────────────
    # Open landmass; water only where the height noise dips.
    "continent": {
        "island": False,
        "snow_level": 0.9,
        "rock_level": 0.75,
        "land_level": 0.4,
        "sand_biome": 0.9,
        "grass_biome": 0.6,
    },
    # ── Island ──────────────────────────────────────────────────
    # Square falloff pulls the borders under water, so the land
    # bands sit lower than on a continent.
    "island": {
        "island": True,
        "snow_level": 0.75,
        "rock_level": 0.6,
        "land_level": 0.1,
        "sand_biome": 0.8,
        "grass_biome": 0.5,
    },
    # ── Lowlands ────────────────────────────────────────────────
    # Smoothed, low-frequency height with broad grassland.
    "lowlands": {
        "island": False,
        "height_frequency": 0.015,
        "smoothing_passes": 2,
        "snow_level": 0.95,
        "rock_level": 0.85,
        "land_level": 0.35,
        "grass_biome": 0.4,
    },
}


def get_preset_overrides(name: str) -> dict[str, Any]:
    """Return a copy of the overrides registered for *name*."""
    try:
        return dict(TERRAIN_PRESETS[name])
    except KeyError:
        raise ValueError(
            f"Unknown terrain preset {name!r}; expected one of {sorted(TERRAIN_PRESETS)}"
        ) from None


def apply_preset(name: str, **overrides: Any) -> TerrainConfig:
    """Build a ``TerrainConfig`` from preset *name* plus explicit overrides."""
    config_kwargs = get_preset_overrides(name)
    config_kwargs.update(overrides)
    return TerrainConfig(**config_kwargs)
