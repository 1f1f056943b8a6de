"""Tests for 3x3 convolution kernels."""

import pytest

from pcg_grid.generators import KERNEL_PRESETS, Kernel33Generator, get_kernel
from pcg_grid.grid import Grid


class TestKernelPresets:
    """Tests for named kernel weights."""

    def test_all_presets_have_nine_weights(self):
        for name in KERNEL_PRESETS:
            assert len(get_kernel(name)) == 9

    def test_blurs_preserve_total_weight(self):
        assert sum(get_kernel("box_blur")) == pytest.approx(1.0)
        assert sum(get_kernel("gaussian_blur")) == pytest.approx(1.0)

    def test_unknown_kernel(self):
        with pytest.raises(ValueError, match="Unknown kernel"):
            get_kernel("does_not_exist")

    def test_presets_are_read_only(self):
        """Named presets cannot be added or replaced at runtime."""
        with pytest.raises(TypeError):
            KERNEL_PRESETS["shift_left"] = (0.0,) * 9  # type: ignore[index]

        assert "shift_left" not in KERNEL_PRESETS
        assert len(KERNEL_PRESETS) == 7

    def test_custom_weights_without_a_name(self):
        grid = Grid.with_buffer((3, 1), [1.0, 2.0, 3.0])

        grid.apply_all(Kernel33Generator(grid.clone(), (0, 0, 0, 0, 0, 1, 0, 0, 0)))

        assert grid.buffer == [2.0, 3.0, 1.0]

    def test_preset_by_name_matches_classmethod(self, counting_grid):
        by_name = counting_grid.fork_generate(Kernel33Generator.preset("sharpen", counting_grid.clone()))
        direct = counting_grid.fork_generate(Kernel33Generator.sharpen(counting_grid.clone()))

        assert by_name == direct

    def test_wrong_weight_count(self):
        with pytest.raises(ValueError):
            Kernel33Generator(Grid.new((2, 2), 0.0), [1.0] * 8)


class TestKernelConvolution:
    """Tests for toroidal convolution."""

    def test_identity_reproduces_grid(self, counting_grid):
        original = counting_grid.clone()
        counting_grid.apply_all(Kernel33Generator.identity(original))

        assert counting_grid == original

    def test_ridge_of_constant_grid_is_zero(self):
        grid = Grid.new((4, 4), 0.5)
        grid.apply_all(Kernel33Generator.ridge(grid.clone()))

        assert grid.buffer == [0.0] * 16

    def test_box_blur_spreads_center_on_3x3(self):
        """On a 3x3 torus every neighborhood covers all nine cells once."""
        grid = Grid.new((3, 3), 0.0)
        grid.set((1, 1), 1.0)

        grid.apply_all(Kernel33Generator.box_blur(grid.clone()))

        assert grid.get((1, 1)) == pytest.approx(1.0 / 9.0)
        assert grid.get((0, 0)) == pytest.approx(1.0 / 9.0)
        assert grid.buffer == pytest.approx([1.0 / 9.0] * 9)

    def test_box_blur_wraps_across_edges(self, impulse_grid):
        """The opposite corner sees the impulse through wraparound."""
        impulse_grid.apply_all(Kernel33Generator.box_blur(impulse_grid.clone()))

        assert impulse_grid.get((3, 3)) == pytest.approx(1.0 / 9.0)
        assert impulse_grid.get((3, 0)) == pytest.approx(1.0 / 9.0)
        assert impulse_grid.get((2, 2)) == 0.0

    def test_gaussian_blur_weights_by_distance(self, impulse_grid):
        impulse_grid.apply_all(Kernel33Generator.gaussian_blur(impulse_grid.clone()))

        assert impulse_grid.get((0, 0)) == pytest.approx(4.0 / 16.0)
        assert impulse_grid.get((1, 0)) == pytest.approx(2.0 / 16.0)
        assert impulse_grid.get((3, 3)) == pytest.approx(1.0 / 16.0)

    def test_snapshot_isolates_reads(self, impulse_grid):
        """Convolving against the live grid would smear the impulse further."""
        snapshot = impulse_grid.clone()
        impulse_grid.apply_all(Kernel33Generator.box_blur(snapshot))

        assert snapshot.get((0, 0)) == 1.0
        assert sum(impulse_grid.buffer) == pytest.approx(1.0)

    def test_emboss_is_directional(self, impulse_grid):
        impulse_grid.apply_all(Kernel33Generator.emboss(impulse_grid.clone()))

        # Cell below-right reads the impulse through its top-left weight.
        assert impulse_grid.get((1, 1)) == -2.0
        assert impulse_grid.get((3, 3)) == 2.0
