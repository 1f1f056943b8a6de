"""Command-line entry point: generate a map and print a text preview."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable

from pcg_grid.config import settings
from pcg_grid.grid import Grid
from pcg_grid.pipelines import TERRAIN_PRESETS, Terrain, apply_preset, generate_caves, generate_terrain
from pcg_grid.pipelines.types import GLYPHS


def setup_logging(level_name: str | None = None) -> None:
    """Configure root logging."""
    level = getattr(logging, (level_name or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def render_text(grid: Grid, glyph: Callable[[Any], str]) -> str:
    """One character per cell, one line per row."""
    width = grid.size.x
    buffer = grid.buffer
    return "\n".join(
        "".join(glyph(value) for value in buffer[row * width:(row + 1) * width])
        for row in range(grid.size.y)
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pcg-grid", description=__doc__)
    parser.add_argument("--preset", choices=sorted(TERRAIN_PRESETS), default=settings.default_preset)
    parser.add_argument("--size", type=int, default=settings.default_size)
    parser.add_argument("--seed", type=int, default=settings.default_seed)
    parser.add_argument("--caves", action="store_true", help="Generate a cave collider map instead")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    if args.size < 1:
        logger.error("Size must be at least 1, got %d", args.size)
        return 2

    if args.caves:
        caves = generate_caves(args.size, seed=args.seed)
        print(render_text(caves, lambda solid: "#" if solid else " "))
        return 0

    config = apply_preset(args.preset, seed=args.seed, size=args.size)
    result = generate_terrain(config)
    print(render_text(result.terrain, GLYPHS.__getitem__))
    print()
    for category, count in result.histogram().items():
        print(f"{GLYPHS[category]} {Terrain(category).name.lower():<7} {count}")
    return 0


def run() -> None:
    """Entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
