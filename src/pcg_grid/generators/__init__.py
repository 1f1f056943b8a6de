"""Cell-transform generators for building and refining grids."""

from pcg_grid.generators.base import FunctionGenerator, GridGenerator, as_generator
from pcg_grid.generators.combine import (
    AddGenerator,
    CopyGenerator,
    DivGenerator,
    MaxGenerator,
    MinGenerator,
    MulGenerator,
    SubGenerator,
)
from pcg_grid.generators.kernel import KERNEL_PRESETS, Kernel33Generator, get_kernel
from pcg_grid.generators.noise import (
    Fbm,
    NoiseGenerator,
    SimplexNoise,
    WorleyNoise,
    scale_transform,
    translate_transform,
)
from pcg_grid.generators.values import (
    ClampGenerator,
    ConstGenerator,
    RemapGenerator,
    ThresholdGenerator,
)
from pcg_grid.generators.warp import OffsetLocationGenerator

__all__ = [
    "AddGenerator",
    "ClampGenerator",
    "ConstGenerator",
    "CopyGenerator",
    "DivGenerator",
    "Fbm",
    "FunctionGenerator",
    "GridGenerator",
    "KERNEL_PRESETS",
    "Kernel33Generator",
    "MaxGenerator",
    "MinGenerator",
    "MulGenerator",
    "NoiseGenerator",
    "OffsetLocationGenerator",
    "RemapGenerator",
    "SimplexNoise",
    "SubGenerator",
    "ThresholdGenerator",
    "WorleyNoise",
    "as_generator",
    "get_kernel",
    "scale_transform",
    "translate_transform",
]
