"""Cave collider maps from domain-warped cellular noise."""

from __future__ import annotations

import logging
import time

from pcg_grid.generators import (
    Fbm,
    NoiseGenerator,
    OffsetLocationGenerator,
    ThresholdGenerator,
    WorleyNoise,
)
from pcg_grid.grid import Grid, Vec2, Vec2Like

logger = logging.getLogger(__name__)


def warp_offsets(size: Vec2Like, seed: int, strength: int, frequency: float = 0.1) -> Grid[tuple[int, int]]:
    """Integer displacement field in [-strength, strength] on both axes."""
    noise_x = Fbm(seed=seed, frequency=frequency, octaves=3)
    noise_y = Fbm(seed=seed + 1, frequency=frequency, octaves=3)

    def offset(location: Vec2, size: Vec2, current: tuple[int, int]) -> tuple[int, int]:
        return (
            round(noise_x.sample_2d(location.x, location.y) * strength),
            round(noise_y.sample_2d(location.x, location.y) * strength),
        )

    return Grid.generate(size, offset, default=(0, 0))


def generate_caves(
    size: Vec2Like,
    seed: int = 0,
    frequency: float = 0.12,
    warp_strength: int = 3,
    threshold: float = -0.2,
) -> Grid[bool]:
    """Collider grid: True is solid rock, False is open cave.

    Worley noise is low near its feature points, so open pockets form around
    them; the warp field bends the pockets into tunnels.
    """
    size = Vec2.of(size)
    if size.x < 1 or size.y < 1:
        raise ValueError(f"Cave size must be at least 1x1, got {tuple(size)}")
    if warp_strength < 0:
        raise ValueError(f"warp_strength must be non-negative, got {warp_strength}")

    t0 = time.perf_counter()
    offsets = warp_offsets(size, seed + 1000, warp_strength)
    cells = Grid.generate(
        size,
        OffsetLocationGenerator(NoiseGenerator(WorleyNoise(seed=seed, frequency=frequency)), offsets),
    )
    cells.apply_all(ThresholdGenerator.constant(threshold, True, False))

    solid = sum(1 for value in cells.buffer if value)
    logger.info(
        "[Caves] %dx%d generated in %.1fms (%d solid, %d open)",
        size.x, size.y, (time.perf_counter() - t0) * 1000, solid, len(cells) - solid,
    )
    return cells
