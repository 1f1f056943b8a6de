"""Tests for the generator interface, combinators and value transforms."""

import math

import pytest

from pcg_grid.generators import (
    AddGenerator,
    ClampGenerator,
    ConstGenerator,
    CopyGenerator,
    DivGenerator,
    FunctionGenerator,
    GridGenerator,
    MaxGenerator,
    MinGenerator,
    MulGenerator,
    RemapGenerator,
    SubGenerator,
    ThresholdGenerator,
    as_generator,
)
from pcg_grid.grid import Grid, Vec2


class TestGeneratorAdapter:
    """Tests for wrapping plain callables."""

    def test_three_argument_callable(self):
        generator = as_generator(lambda location, size, current: current + 1)

        assert isinstance(generator, FunctionGenerator)
        assert generator.generate(Vec2(0, 0), Vec2(1, 1), 1, None) == 2

    def test_four_argument_callable_receives_grid(self):
        grid = Grid.new((2, 2), 3)
        generator = as_generator(lambda location, size, current, grid: grid.get((1, 1)))

        assert generator.wants_grid
        assert generator.generate(Vec2(0, 0), grid.size, 0, grid) == 3

    def test_bound_method(self):
        """``self`` does not count toward the arity."""

        class Doubler:
            def double(self, location, size, current):
                return current * 2

        grid = Grid.new((2, 1), 4)
        grid.apply_all(Doubler().double)

        assert grid.buffer == [8, 8]

    def test_generator_instance_passes_through(self):
        generator = ConstGenerator(1)

        assert as_generator(generator) is generator

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            as_generator(42)

    def test_subclass_is_callable(self):
        class Column(GridGenerator):
            def generate(self, location, size, current, grid):
                return location.x

        assert Column()(Vec2(3, 0), Vec2(4, 4), 0, None) == 3


class TestCombinators:
    """Tests for cell-wise arithmetic against another grid."""

    @pytest.fixture
    def base(self):
        return Grid.with_buffer((2, 2), [1.0, 2.0, 3.0, 4.0])

    @pytest.fixture
    def other(self):
        return Grid.with_buffer((2, 2), [2.0, 2.0, 5.0, 1.0])

    @pytest.mark.parametrize(
        "generator_cls, expected",
        [
            (CopyGenerator, [2.0, 2.0, 5.0, 1.0]),
            (AddGenerator, [3.0, 4.0, 8.0, 5.0]),
            (SubGenerator, [-1.0, 0.0, -2.0, 3.0]),
            (MulGenerator, [2.0, 4.0, 15.0, 4.0]),
            (DivGenerator, [0.5, 1.0, 0.6, 4.0]),
            (MinGenerator, [1.0, 2.0, 3.0, 1.0]),
            (MaxGenerator, [2.0, 2.0, 5.0, 4.0]),
        ],
    )
    def test_cellwise_operation(self, base, other, generator_cls, expected):
        base.apply_all(generator_cls(other))

        assert base.buffer == pytest.approx(expected)

    def test_other_grid_wraps(self, base):
        """A smaller other grid is tiled across the target."""
        other = Grid.new((1, 1), 10.0)
        base.apply_all(AddGenerator(other))

        assert base.buffer == [11.0, 12.0, 13.0, 14.0]

    def test_missing_other_cells_use_default(self, base):
        empty = Grid.new((0, 0), 0.0)

        base.apply_all(AddGenerator(empty))
        assert base.buffer == [1.0, 2.0, 3.0, 4.0]

        base.apply_all(CopyGenerator(empty, default=7.0))
        assert base.buffer == [7.0] * 4

    def test_float_division_by_zero_gives_inf_and_nan(self):
        """A zero divisor cell yields ±inf or NaN and the pass completes."""
        grid = Grid.with_buffer((3, 1), [1.0, -2.0, 0.0])
        grid.apply_all(DivGenerator(Grid.new((3, 1), 0.0)))

        positive, negative, undefined = grid.buffer
        assert positive == math.inf
        assert negative == -math.inf
        assert math.isnan(undefined)

    def test_float_division_by_integer_zero(self):
        """One float operand is enough for IEEE semantics."""
        grid = Grid.new((1, 1), 4.0)
        grid.apply_all(DivGenerator(Grid.new((1, 1), 0)))

        assert grid.get((0, 0)) == math.inf

    def test_integer_division_uses_true_division(self):
        grid = Grid.new((2, 1), 3)
        grid.apply_all(DivGenerator(Grid.with_buffer((2, 1), [2, -3])))

        assert grid.buffer == [1.5, -1.0]

    def test_integer_grids(self):
        grid = Grid.new((2, 1), 3)
        grid.apply_all(MulGenerator(Grid.with_buffer((2, 1), [2, -1]), default=0))

        assert grid.buffer == [6, -3]


class TestValueGenerators:
    """Tests for constants, clamping and remapping."""

    def test_const(self, counting_grid):
        counting_grid.apply_all(ConstGenerator(0.25))

        assert set(counting_grid.buffer) == {0.25}

    def test_clamp(self, counting_grid):
        counting_grid.apply_all(ClampGenerator(2.0, 5.0))

        assert min(counting_grid.buffer) == 2.0
        assert max(counting_grid.buffer) == 5.0
        assert counting_grid.get((3, 0)) == 3.0

    @pytest.mark.parametrize(
        "from_range, to_range",
        [((-1.0, 1.0), (0.0, 1.0)), ((0.2, 0.7), (3.0, 5.0)), ((10.0, 0.0), (0.0, 1.0))],
    )
    def test_remap_endpoints_are_exact(self, from_range, to_range):
        start = Grid.new((3, 3), from_range[0])
        end = Grid.new((3, 3), from_range[1])

        start.apply_all(RemapGenerator(from_range, to_range))
        end.apply_all(RemapGenerator(from_range, to_range))

        assert start.buffer == [to_range[0]] * 9
        assert end.buffer == [to_range[1]] * 9

    def test_remap_midpoint(self):
        grid = Grid.new((1, 1), 0.0)
        grid.apply_all(RemapGenerator((-1.0, 1.0), (0.0, 10.0)))

        assert grid.get((0, 0)) == pytest.approx(5.0)

    def test_remap_rejects_zero_width_source(self):
        with pytest.raises(ValueError):
            RemapGenerator((0.5, 0.5), (0.0, 1.0))


class TestThreshold:
    """Tests for two-way threshold classification."""

    def test_constant_is_strictly_greater(self):
        grid = Grid.with_buffer((3, 1), [0.4, 0.5, 0.6])
        grid.apply_all(ThresholdGenerator.constant(0.5, "high", "low"))

        assert grid.buffer == ["low", "low", "high"]

    def test_samples_vary_per_cell(self):
        grid = Grid.new((2, 2), 0.5)
        thresholds = Grid.with_buffer((2, 2), [0.0, 1.0, 0.5, 0.49])
        grid.apply_all(ThresholdGenerator.samples(thresholds, True, False))

        assert grid.buffer == [True, False, False, True]

    def test_samples_missing_threshold_uses_default(self):
        grid = Grid.with_buffer((2, 1), [-0.5, 0.5])
        grid.apply_all(ThresholdGenerator.samples(Grid.new((0, 0), 0.0), 1, 0))

        assert grid.buffer == [0, 1]

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            ThresholdGenerator(1, 0)
