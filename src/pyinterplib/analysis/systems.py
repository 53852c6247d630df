import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from pyinterplib.algorithms.inversion import invert_points
from pyinterplib.core.polynomials import NewtonPolynomial
from pyinterplib.parsing.validation.array_validator import validate_point_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemSolution:
    x: float
    y: float


def solve_tabulated_system(xy_rows: Sequence[Sequence[float]], yx_rows: Sequence[Sequence[float]],
                           degree: int) -> SystemSolution:
    """
    Solve the system ``y = f(x)``, ``x = g(y)`` given as two sample tables.

    The second table is inverted into ``y = g^-1(x)``; the root of
    ``f(x) - g^-1(x)`` over the abscissae of the first table is the x of the
    intersection, and ``g^-1`` supplies its y.
    Args:
        xy_rows: Samples ``(x, f(x))``
        yx_rows: Samples ``(y, g(y))``
        degree: Degree of the Newton polynomials used throughout
    Returns:
        SystemSolution with the intersection point
    Raises:
        NoRootInIntervalError: If the difference of the curves never changes sign
        NotEnoughInputDataError: If a table has no more than ``degree`` nodes
    """
    logger.info("Solving tabulated system with degree %d", degree)
    xy = validate_point_rows(xy_rows)[:, :2]
    yx = validate_point_rows(yx_rows)[:, :2]
    inverse_curve = NewtonPolynomial(invert_points(yx))
    differences = np.array([[x, y - inverse_curve.calc(x, degree)] for x, y in xy])
    logger.debug("Curve differences at the xy abscissae: %s", differences[:, 1].tolist())
    difference_curve = NewtonPolynomial(differences)
    root = difference_curve.find_root(degree)
    solution = SystemSolution(x=root, y=inverse_curve.calc(root, degree))
    logger.info("System solution: x=%g, y=%g", solution.x, solution.y)
    return solution
