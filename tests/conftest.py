"""Pytest configuration and fixtures for grid tests."""

import pytest

from pcg_grid.grid import Grid


@pytest.fixture
def counting_grid():
    """4x3 grid whose cells hold their own row-major index."""
    return Grid.with_buffer((4, 3), [float(i) for i in range(12)])


@pytest.fixture
def impulse_grid():
    """4x4 grid of zeros with a single 1.0 in the top-left corner."""
    grid = Grid.new((4, 4), 0.0)
    grid.set((0, 0), 1.0)
    return grid
