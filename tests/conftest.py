"""Shared pytest fixtures for pyinterplib tests."""
import pytest
import numpy as np

import matplotlib
matplotlib.use('Agg')


@pytest.fixture
def cubic_points():
    """Samples of y = x**3."""
    return [[0.0, 0.0], [1.0, 1.0], [2.0, 8.0], [3.0, 27.0]]


@pytest.fixture
def cubic_points_with_derivatives():
    """Samples of y = x**3 with y' and y''."""
    return [[x, x ** 3, 3 * x ** 2, 6 * x] for x in (0.0, 1.0, 2.0, 3.0)]


@pytest.fixture
def root_points():
    """Samples of y = x**2 - 2 with y' and y''; the root sqrt(2) lies between 1 and 2."""
    return [[x, x ** 2 - 2.0, 2.0 * x, 2.0] for x in (1.0, 2.0, 3.0, 4.0)]


@pytest.fixture
def hump_points():
    """Three samples for the natural spline example."""
    return [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]]


@pytest.fixture
def sine_points():
    """Unevenly spaced samples of sin(x)."""
    x = np.array([0.0, 0.4, 1.0, 1.5, 2.3, 3.0, 3.6])
    return np.column_stack([x, np.sin(x)])


@pytest.fixture
def csv_file(tmp_path):
    """Factory writing CSV content to a temporary file."""
    def _write(content, name="data.csv"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def source_csv(csv_file):
    """Samples of y = x**3 with first and second derivatives."""
    lines = ["x,y,dy,d2y"]
    for x in (0.0, 1.0, 2.0, 3.0, 4.0):
        lines.append(f"{x},{x ** 3 - 8},{3 * x ** 2},{6 * x}")
    return csv_file("\n".join(lines) + "\n", "source_data.csv")
