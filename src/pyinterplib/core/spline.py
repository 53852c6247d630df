import logging
from typing import Sequence, Tuple, Union

import numpy as np
import sympy as sp

from pyinterplib.algorithms.spline_solver import build_spline_coefficients, evaluate_spline
from pyinterplib.core.nodes import NodeStore
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class CubicSpline:
    """
    Piecewise cubic interpolation with second-derivative boundary conditions.

    The spline starts unconfigured. The first evaluation without an explicit
    boundary condition applies the natural condition ``(0, 0)`` once.
    """

    def __init__(self, rows: Sequence[Sequence[float]]):
        self.store = NodeStore(rows)
        self._coefficients = None
        self._boundary = None
        logger.debug("CubicSpline created over %d nodes", len(self.store))

    def set_points(self, rows: Sequence[Sequence[float]]) -> None:
        """
        Replace the nodes; a configured spline is rebuilt with its current boundary condition.

        Nothing changes when the new rows are rejected or the rebuild fails.
        """
        store = NodeStore(rows)
        coefficients = None
        if self._boundary is not None:
            coefficients = self._solve(store, *self._boundary)
        self.store = store
        self._coefficients = coefficients

    def set_boundary_condition(self, c_start: float, c_end: float) -> None:
        """
        Solve for the spline coefficients.
        Args:
            c_start: Half the second derivative at the first node
            c_end: Half the second derivative at the last node
        """
        logger.info("Setting spline boundary condition: c_start=%g, c_end=%g", c_start, c_end)
        self._coefficients = self._solve(self.store, c_start, c_end)
        self._boundary = (float(c_start), float(c_end))

    @staticmethod
    def _solve(store: NodeStore, c_start: float, c_end: float) -> np.ndarray:
        coefficients = build_spline_coefficients(store.x, store.y, c_start, c_end)
        coefficients.flags.writeable = False
        return coefficients

    def set_natural_condition(self) -> None:
        self.set_boundary_condition(*ProcessingConstants.NATURAL_BOUNDARY)

    @property
    def is_configured(self) -> bool:
        return self._coefficients is not None

    @property
    def boundary_condition(self) -> Union[Tuple[float, float], None]:
        return self._boundary

    @property
    def coefficients(self) -> np.ndarray:
        """Per-interval ``(a, b, c, d)`` rows."""
        self._ensure_configured()
        return self._coefficients

    def calc(self, x: float) -> float:
        """Value of the spline at x (outside the nodes the end pieces are extended)."""
        self._ensure_configured()
        return evaluate_spline(self.store.x, self._coefficients, x)

    def calc_derivative(self, x: float, order: int = 1) -> float:
        self._ensure_configured()
        return evaluate_spline(self.store.x, self._coefficients, x, order=order)

    def as_piecewise(self, symbol: Union[sp.Symbol, str] = 'x') -> sp.Piecewise:
        """The spline as a SymPy Piecewise with the end pieces extended beyond the nodes."""
        if isinstance(symbol, str):
            symbol = sp.Symbol(symbol)
        self._ensure_configured()
        x_nodes = self.store.x
        conditions = []
        last = len(self._coefficients) - 1
        for i, (a, b, c, d) in enumerate(self._coefficients):
            dx = symbol - float(x_nodes[i])
            expr = float(a) + float(b) * dx + float(c) * dx ** 2 + float(d) * dx ** 3
            if i == last:
                conditions.append((expr, True))
            else:
                conditions.append((expr, symbol <= float(x_nodes[i + 1])))
        return sp.Piecewise(*conditions)

    def _ensure_configured(self) -> None:
        if self._coefficients is None:
            logger.debug("Spline not configured, applying natural boundary condition")
            self.set_natural_condition()

    def __repr__(self) -> str:
        return f"CubicSpline(nodes={len(self.store)}, boundary={self._boundary})"
