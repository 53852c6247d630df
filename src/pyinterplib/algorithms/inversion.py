import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from pyinterplib.core.exceptions import (CannotInvertFunctionError, InvalidDerivativeOrderError,
                                         NoRootInIntervalError, NotEnoughInputDataError)
from pyinterplib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootBracket:
    """Result of scanning the samples for a root."""
    anchor: int
    exact_root: Optional[float] = None

    @property
    def is_exact(self) -> bool:
        return self.exact_root is not None


def invert_points(points: np.ndarray, tolerance: float = ProcessingConstants.NODE_TOLERANCE) -> np.ndarray:
    """
    Change the dependency y(x) into x(y).

    Before: ``(x, y[, y'[, y'']])``. After: ``(y, x[, x'[, x'']])`` with
    ``x' = 1 / y'`` and ``x'' = -y'' / y'^3``. Row order is kept.
    Args:
        points: Point rows with up to two derivative columns
        tolerance: Smallest admissible ``|y'|``
    Returns:
        New array with the inverted rows
    Raises:
        NotEnoughInputDataError: If the rows have fewer than two columns
        InvalidDerivativeOrderError: If the rows carry more than two derivative columns
        CannotInvertFunctionError: If ``|y'| < tolerance`` at any node
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] < 2:
        raise NotEnoughInputDataError("Not enough input data: inversion needs x and y columns")
    derivative_columns = points.shape[1] - 2
    if derivative_columns > ProcessingConstants.MAX_INVERTIBLE_DERIVATIVE_ORDER:
        raise InvalidDerivativeOrderError(ErrorMessages.INVALID_DERIVATIVE_ORDER.format(
            order=derivative_columns, available=ProcessingConstants.MAX_INVERTIBLE_DERIVATIVE_ORDER))
    result = np.empty_like(points)
    result[:, 0] = points[:, 1]
    result[:, 1] = points[:, 0]
    if derivative_columns >= 1:
        first = points[:, 2]
        flat = np.abs(first) < tolerance
        if np.any(flat):
            index = int(np.argmax(flat))
            raise CannotInvertFunctionError(ErrorMessages.FLAT_TANGENT.format(value=first[index], x=points[index, 0]))
        result[:, 2] = 1.0 / first
        if derivative_columns == 2:
            result[:, 3] = -points[:, 3] / first ** 3
    logger.debug("Inverted %d points with %d derivative column(s)", len(points), derivative_columns)
    return result


def bracket_root(points: np.ndarray, tolerance: float = ProcessingConstants.NODE_TOLERANCE) -> RootBracket:
    """
    Scan consecutive samples for an exact zero or the first sign change.

    An exact zero (``|y_i| < tolerance``) is returned as the root itself; a sign change
    between rows i and i + 1 yields anchor i + 1 for node selection on the inverted set.
    Raises:
        NoRootInIntervalError: If there is neither a zero nor a sign change
    """
    y = np.asarray(points, dtype=np.float64)[:, 1]
    for i in range(len(y) - 1):
        if abs(y[i]) < tolerance:
            logger.debug("Exact zero found at row %d (x=%g)", i, points[i][0])
            return RootBracket(anchor=i, exact_root=float(points[i][0]))
        if y[i] * y[i + 1] < 0:
            logger.debug("Sign change between rows %d and %d", i, i + 1)
            return RootBracket(anchor=i + 1)
    if len(y) and abs(y[-1]) < tolerance:
        logger.debug("Exact zero found at the last row (x=%g)", points[-1][0])
        return RootBracket(anchor=len(y) - 1, exact_root=float(points[-1][0]))
    raise NoRootInIntervalError(ErrorMessages.NO_ROOT)
