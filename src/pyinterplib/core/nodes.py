import logging
from typing import Sequence

import numpy as np

from pyinterplib.core.exceptions import InvalidDerivativeOrderError
from pyinterplib.data.constants import ErrorMessages
from pyinterplib.parsing.validation.array_validator import is_monotonic, validate_point_rows

logger = logging.getLogger(__name__)


class NodeStore:
    """
    Ordered set of sample nodes ``(x, y, y', y'', ...)``.

    Rows are kept sorted ascending by x after every load or replacement.
    Access is read-only: the arrays handed out cannot be written to.
    """

    def __init__(self, rows: Sequence[Sequence[float]], derivative_order: int = 0):
        self._points = None
        self.set_points(rows, derivative_order)

    def set_points(self, rows: Sequence[Sequence[float]], derivative_order: int = 0) -> None:
        """
        Replace the stored points.
        Args:
            rows: Raw point rows, ``row[0]`` is x, ``row[1]`` is y, then derivatives
            derivative_order: Number of derivative columns every row must provide
        Raises:
            InvalidDerivativeOrderError: If derivative_order is negative
            NotEnoughInputDataError: If there are no rows or a row is too short
            ValueError: If two rows share the same x
        """
        if derivative_order < 0:
            raise InvalidDerivativeOrderError(
                ErrorMessages.INVALID_DERIVATIVE_ORDER.format(order=derivative_order, available="no negative"))
        data = validate_point_rows(rows, derivative_order)
        order = np.argsort(data[:, 0], kind='stable')
        data = data[order]
        is_monotonic(data[:, 0], name="Node x values", mode="strictly_increasing")
        data.flags.writeable = False
        self._points = data
        logger.debug("Node store loaded: %d nodes, %d derivative column(s), x in [%g, %g]",
                     len(data), self.derivative_columns, data[0, 0], data[-1, 0])

    @property
    def points(self) -> np.ndarray:
        """Sorted point rows, shape ``(n, 2 + derivative_columns)``."""
        return self._points

    @property
    def x(self) -> np.ndarray:
        """Node abscissae in ascending order."""
        return self._points[:, 0]

    @property
    def y(self) -> np.ndarray:
        """Function values matching ``x``."""
        return self._points[:, 1]

    @property
    def derivative_columns(self) -> int:
        """Number of derivative columns available in every row."""
        return self._points.shape[1] - 2

    def columns(self, derivative_order: int) -> np.ndarray:
        """Points restricted to x, y and the first ``derivative_order`` derivatives."""
        if derivative_order < 0 or derivative_order > self.derivative_columns:
            raise InvalidDerivativeOrderError(ErrorMessages.INVALID_DERIVATIVE_ORDER.format(
                order=derivative_order, available=self.derivative_columns))
        return self._points[:, :2 + derivative_order]

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"NodeStore(nodes={len(self)}, derivative_columns={self.derivative_columns})"
