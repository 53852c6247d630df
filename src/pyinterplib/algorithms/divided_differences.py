import logging
import math
from dataclasses import dataclass
from typing import List

import numpy as np

from pyinterplib.core.exceptions import InvalidDerivativeOrderError, NumericalInstabilityError
from pyinterplib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DividedDifferenceTable:
    """
    Triangular table of divided differences.

    ``values[i, 0]`` is x_i, ``values[i, 1]`` is y_i and ``values[i, k + 1]`` is the
    divided difference of order k starting at row i. Row i has ``size - i``
    differences; the unused upper-right part is NaN.
    """
    values: np.ndarray
    derivative_order: int = 0

    @property
    def size(self) -> int:
        """Number of (possibly repeated) nodes in the table."""
        return self.values.shape[0]

    @property
    def degree(self) -> int:
        return self.size - 1

    @property
    def nodes(self) -> np.ndarray:
        return self.values[:, 0]

    @property
    def coefficients(self) -> np.ndarray:
        """Newton-form coefficients: the top row of the table without x."""
        return self.values[0, 1:]

    def rows(self) -> List[List[float]]:
        """Ragged rows without the NaN padding, as needed for printing."""
        return [self.values[i, :self.size + 1 - i].tolist() for i in range(self.size)]


def build_difference_table(nodes: np.ndarray, derivative_order: int = 0,
                           tolerance: float = ProcessingConstants.NODE_TOLERANCE) -> DividedDifferenceTable:
    """
    Build the (confluent) divided-difference table of the given node rows.

    For a difference of order k over coincident nodes (``|x_i - x_{i+k}| < tolerance``)
    with ``k <= derivative_order``, the stored k-th derivative divided by k! is used
    instead of the quotient. With ``derivative_order == 0`` this is the plain Newton table.
    Args:
        nodes: Rows ``(x, y, y', y'', ...)`` as produced by the node selector
        derivative_order: Highest derivative that may be read from the rows
        tolerance: Distance below which two x values are the same node
    Returns:
        Immutable DividedDifferenceTable
    Raises:
        InvalidDerivativeOrderError: If the rows carry fewer derivative columns than requested
        NumericalInstabilityError: If two distinct rows coincide where no derivative applies
    """
    nodes = np.asarray(nodes, dtype=np.float64)
    available = nodes.shape[1] - 2
    if derivative_order < 0 or derivative_order > available:
        raise InvalidDerivativeOrderError(
            ErrorMessages.INVALID_DERIVATIVE_ORDER.format(order=derivative_order, available=available))
    size = nodes.shape[0]
    values = np.full((size, size + 1), np.nan)
    values[:, :2] = nodes[:, :2]
    for k in range(1, size):
        factorial = math.factorial(k)
        for i in range(size - k):
            x_left, x_right = values[i, 0], values[i + k, 0]
            if abs(x_left - x_right) < tolerance:
                if k > derivative_order:
                    raise NumericalInstabilityError(ErrorMessages.UNSTABLE_DIFFERENCE.format(
                        order=k, row=i, x_left=x_left, x_right=x_right))
                values[i, k + 1] = nodes[i, k + 1] / factorial
            else:
                values[i, k + 1] = (values[i, k] - values[i + 1, k]) / (x_left - x_right)
    values.flags.writeable = False
    logger.debug("Built divided-difference table: %d rows, derivative order %d, coefficients %s",
                 size, derivative_order, values[0, 1:].tolist())
    return DividedDifferenceTable(values=values, derivative_order=derivative_order)
