"""Generators that transform a cell's own value: constants, clamping,
range remapping and threshold classification."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pcg_grid.generators.base import GridGenerator

if TYPE_CHECKING:
    from pcg_grid.grid.grid import Grid
    from pcg_grid.grid.types import Vec2

# (start, end) pair; start may be greater than end.
ValueRange = tuple[float, float]


@dataclass
class ConstGenerator(GridGenerator[Any]):
    value: Any

    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return self.value


@dataclass
class ClampGenerator(GridGenerator[Any]):
    minimum: Any
    maximum: Any

    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return min(max(current, self.minimum), self.maximum)


class RemapGenerator(GridGenerator[float]):
    """Linearly rescales values from *from_range* onto *to_range*.

    Values outside *from_range* extrapolate. A zero-width *from_range* has
    no meaningful mapping and is rejected.
    """

    def __init__(self, from_range: ValueRange, to_range: ValueRange) -> None:
        from_start, from_end = from_range
        if from_end == from_start:
            raise ValueError(f"Cannot remap from a zero-width range {tuple(from_range)}")
        self.from_range = (from_start, from_end)
        self.to_range = tuple(to_range)

    def generate(self, location: Vec2, size: Vec2, current: float, grid: Grid[float]) -> float:
        from_start, from_end = self.from_range
        to_start, to_end = self.to_range
        factor = (current - from_start) / (from_end - from_start)
        return (to_end - to_start) * factor + to_start

    def __repr__(self) -> str:
        return f"RemapGenerator(from_range={self.from_range}, to_range={self.to_range})"


class ThresholdGenerator(GridGenerator[Any]):
    """Two-way classification: ``upper`` if the value is strictly greater
    than the threshold at that cell, otherwise ``lower``.

    Build with ``ThresholdGenerator.constant`` for a single cutoff or
    ``ThresholdGenerator.samples`` for a spatially varying one.
    """

    def __init__(self, upper: Any, lower: Any) -> None:
        self.upper = upper
        self.lower = lower

    @staticmethod
    def constant(threshold: Any, upper: Any, lower: Any) -> "ConstantThreshold":
        return ConstantThreshold(threshold, upper, lower)

    @staticmethod
    def samples(
        thresholds: Grid[Any],
        upper: Any,
        lower: Any,
        default: Any = 0.0,
    ) -> "SampledThreshold":
        return SampledThreshold(thresholds, upper, lower, default)

    @abstractmethod
    def threshold_at(self, location: Vec2) -> Any:
        ...

    def generate(self, location: Vec2, size: Vec2, current: Any, grid: Grid[Any]) -> Any:
        return self.upper if current > self.threshold_at(location) else self.lower


class ConstantThreshold(ThresholdGenerator):
    def __init__(self, threshold: Any, upper: Any, lower: Any) -> None:
        super().__init__(upper, lower)
        self.threshold = threshold

    def threshold_at(self, location: Vec2) -> Any:
        return self.threshold


class SampledThreshold(ThresholdGenerator):
    """Threshold read from a grid; missing cells fall back to *default*."""

    def __init__(self, thresholds: Grid[Any], upper: Any, lower: Any, default: Any = 0.0) -> None:
        super().__init__(upper, lower)
        self.thresholds = thresholds
        self.default = default

    def threshold_at(self, location: Vec2) -> Any:
        value = self.thresholds.get(location)
        return self.default if value is None else value
