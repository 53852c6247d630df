"""Side-by-side evaluation of the approximation families."""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from pyinterplib.core.exceptions import NotEnoughInputDataError
from pyinterplib.core.polynomials import HermitePolynomial, NewtonPolynomial
from pyinterplib.core.spline import CubicSpline
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PolynomialComparison:
    x: float
    degrees: np.ndarray
    newton: np.ndarray
    hermite: np.ndarray


@dataclass(frozen=True, eq=False)
class SplineComparison:
    x: np.ndarray
    newton: np.ndarray
    spline: np.ndarray
    degree: int

    @property
    def difference(self) -> np.ndarray:
        return self.newton - self.spline


def compare_polynomials(newton: NewtonPolynomial, hermite: HermitePolynomial, x: float,
                        max_degree: int = ProcessingConstants.MAX_COMPARISON_DEGREE) -> PolynomialComparison:
    """Evaluate Newton and Hermite polynomials of degrees 1..max_degree at x."""
    logger.info("Comparing Newton and Hermite polynomials at x=%g for degrees 1..%d", x, max_degree)
    degrees = np.arange(1, max_degree + 1)
    newton_values = np.array([newton.calc(x, int(n)) for n in degrees])
    hermite_values = np.array([hermite.calc(x, int(n)) for n in degrees])
    return PolynomialComparison(x=x, degrees=degrees, newton=newton_values, hermite=hermite_values)


def comparison_abscissae(x_nodes: Sequence[float],
                         points_per_interval: int = ProcessingConstants.COMPARISON_POINTS_PER_INTERVAL) -> np.ndarray:
    """
    Equally spaced interior points of the first, middle and last intervals.

    Each interval is split into ``points_per_interval + 1`` equal parts.
    """
    x_nodes = np.asarray(x_nodes, dtype=np.float64)
    if len(x_nodes) < ProcessingConstants.MIN_SPLINE_POINTS:
        raise NotEnoughInputDataError("Not enough input data: comparison needs at least two nodes")
    middle = min(len(x_nodes) // 2, len(x_nodes) - 2)
    intervals = [(0, 1), (middle, middle + 1), (len(x_nodes) - 2, len(x_nodes) - 1)]
    fractions = np.arange(1, points_per_interval + 1) / (points_per_interval + 1)
    points = [x_nodes[i] + fractions * (x_nodes[j] - x_nodes[i]) for i, j in intervals]
    return np.concatenate(points)


def compare_with_spline(newton: NewtonPolynomial, spline: CubicSpline, xs: Sequence[float],
                        degree: int = ProcessingConstants.DEFAULT_POLYNOMIAL_DEGREE) -> SplineComparison:
    """Evaluate the Newton polynomial of the given degree and the spline at every point of xs."""
    xs = np.asarray(xs, dtype=np.float64)
    logger.info("Comparing Newton (degree %d) with spline at %d points", degree, len(xs))
    newton_values = np.array([newton.calc(x, degree) for x in xs])
    spline_values = np.array([spline.calc(x) for x in xs])
    logger.debug("Largest Newton/spline deviation: %g", float(np.max(np.abs(newton_values - spline_values))))
    return SplineComparison(x=xs, newton=newton_values, spline=spline_values, degree=degree)


def clamped_boundary(newton: NewtonPolynomial, start_x: float, end_x: Optional[float] = None,
                     degree: int = ProcessingConstants.DEFAULT_POLYNOMIAL_DEGREE) -> Tuple[float, float]:
    """
    Spline boundary values taken from the Newton polynomial's curvature.

    Returns half the polynomial's second derivative at start_x (and at end_x,
    or 0 for a natural end when end_x is None).
    """
    c_start = newton.second_derivative(start_x, degree) / 2.0
    c_end = 0.0 if end_x is None else newton.second_derivative(end_x, degree) / 2.0
    logger.debug("Clamped boundary from Newton degree %d: (%g, %g)", degree, c_start, c_end)
    return c_start, c_end
