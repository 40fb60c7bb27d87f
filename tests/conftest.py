"""Pytest configuration for the shape algebra tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from shapes import Point


@pytest.fixture
def sample_points():
    """Seeded cloud of real-valued points plus a small integer lattice."""
    rng = np.random.default_rng(42)
    cloud = [Point(float(x), float(y)) for x, y in rng.uniform(-5.0, 15.0, size=(200, 2))]
    lattice = [Point(x, y) for x in range(-1, 11) for y in range(-1, 11)]
    return cloud + lattice


@pytest.fixture
def extreme_points():
    """Points with huge, infinite and NaN coordinates."""
    inf = float("inf")
    nan = float("nan")
    return [
        Point(1e200, 0.0),
        Point(-1e200, 1e200),
        Point(1e308, -1e308),
        Point(inf, 0.0),
        Point(-inf, -inf),
        Point(inf, nan),
        Point(nan, 0.0),
        Point(nan, nan),
        Point(0.0, -inf),
    ]
