"""
Natural and clamped cubic spline coefficients.

Nodes are x_0..x_N, interval i (1..N) spans [x_{i-1}, x_i] and carries the cubic
``a_i + b_i*dx + c_i*dx**2 + d_i*dx**3`` with ``dx = x - x_{i-1}``. The c_i are half
the second derivative at x_{i-1}; c_1 and c_{N+1} are the boundary values.
"""
import logging

import numpy as np

from pyinterplib.core.exceptions import NotEnoughInputDataError
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def solve_c_coefficients(x: np.ndarray, y: np.ndarray, c_start: float, c_end: float) -> np.ndarray:
    """
    Solve the tridiagonal continuity system for c_1..c_{N+1} by the shuttle method.

    Forward sweep: ``c_i = xi_{i+1} * c_{i+1} + eta_{i+1}`` with ``xi_2 = 0`` and
    ``eta_2 = c_start``; backward pass from ``c_{N+1} = c_end``.
    Returns:
        Array of length N + 2; index 0 is unused, ``c[1] == c_start``, ``c[N + 1] == c_end``
    """
    n = len(x) - 1
    h = np.empty(n + 1)
    h[1:] = np.diff(x)
    xi = np.zeros(n + 2)
    eta = np.zeros(n + 2)
    eta[2] = c_start
    for i in range(2, n + 1):
        f = 3.0 * ((y[i] - y[i - 1]) / h[i] - (y[i - 1] - y[i - 2]) / h[i - 1])
        denominator = h[i - 1] * xi[i] + 2.0 * (h[i - 1] + h[i])
        xi[i + 1] = -h[i] / denominator
        eta[i + 1] = (f - h[i - 1] * eta[i]) / denominator
    c = np.zeros(n + 2)
    c[1] = c_start
    c[n + 1] = c_end
    for i in range(n, 1, -1):
        c[i] = xi[i + 1] * c[i + 1] + eta[i + 1]
    logger.debug("Shuttle method: c = %s", c[1:].tolist())
    return c


def build_spline_coefficients(x: np.ndarray, y: np.ndarray,
                              c_start: float = 0.0, c_end: float = 0.0) -> np.ndarray:
    """
    Compute the per-interval cubic coefficients.
    Args:
        x: Sorted node abscissae
        y: Node values
        c_start: Half the second derivative at x_0 (0 for the natural condition)
        c_end: Half the second derivative at x_N (0 for the natural condition)
    Returns:
        Array of shape ``(N, 4)``; row i - 1 holds ``(a_i, b_i, c_i, d_i)``
    Raises:
        NotEnoughInputDataError: If there are fewer than two nodes
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if len(x) < ProcessingConstants.MIN_SPLINE_POINTS:
        raise NotEnoughInputDataError(
            f"Not enough input data: a spline needs at least {ProcessingConstants.MIN_SPLINE_POINTS} nodes, "
            f"got {len(x)}")
    c = solve_c_coefficients(x, y, c_start, c_end)
    n = len(x) - 1
    h = np.diff(x)
    coefficients = np.empty((n, 4))
    for i in range(1, n + 1):
        hi = h[i - 1]
        coefficients[i - 1, 0] = y[i - 1]
        coefficients[i - 1, 1] = (y[i] - y[i - 1]) / hi - hi * (c[i + 1] + 2.0 * c[i]) / 3.0
        coefficients[i - 1, 2] = c[i]
        coefficients[i - 1, 3] = (c[i + 1] - c[i]) / (3.0 * hi)
    logger.debug("Built %d spline intervals with boundary (%g, %g)", n, c_start, c_end)
    return coefficients


def locate_interval(x_nodes: np.ndarray, x: float) -> int:
    """
    Zero-based interval index containing x.

    Points left of the first node use the first interval, points right of the last
    node use the last one; a node itself belongs to the interval it closes.
    """
    index = int(np.searchsorted(x_nodes, x, side='left'))
    return min(max(index, 1), len(x_nodes) - 1) - 1


def evaluate_spline(x_nodes: np.ndarray, coefficients: np.ndarray, x: float, order: int = 0) -> float:
    """Evaluate the spline (order 0) or its first/second derivative at x."""
    interval = locate_interval(x_nodes, x)
    a, b, c, d = coefficients[interval]
    dx = x - x_nodes[interval]
    if order == 0:
        return float(((d * dx + c) * dx + b) * dx + a)
    if order == 1:
        return float((3.0 * d * dx + 2.0 * c) * dx + b)
    if order == 2:
        return float(6.0 * d * dx + 2.0 * c)
    raise ValueError(f"Spline derivative order must be 0, 1 or 2, got {order}")
