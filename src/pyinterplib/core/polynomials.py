import logging
from typing import Optional, Sequence, Union

import sympy as sp

from pyinterplib.algorithms.divided_differences import DividedDifferenceTable, build_difference_table
from pyinterplib.algorithms.inversion import bracket_root, invert_points
from pyinterplib.algorithms.newton_form import evaluate_newton, evaluate_newton_derivatives, newton_expression
from pyinterplib.algorithms.node_selector import select_nodes
from pyinterplib.core.exceptions import InvalidDerivativeOrderError, InvalidPolynomialDegreeError
from pyinterplib.core.nodes import NodeStore
from pyinterplib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


class PolynomialInterpolator:
    """
    Local polynomial interpolation in Newton form.

    Owns a NodeStore and the divided-difference table of the last computation.
    The table is scratch data rebuilt on every call; instances must not be shared
    between concurrent callers.
    """

    name = "polynomial"

    def __init__(self, rows: Sequence[Sequence[float]], derivative_order: int = 0,
                 tolerance: float = ProcessingConstants.NODE_TOLERANCE):
        self.store = NodeStore(rows, derivative_order)
        self.tolerance = tolerance
        self._derivative_order = derivative_order
        self._table: Optional[DividedDifferenceTable] = None

    @property
    def derivative_order(self) -> int:
        return self._derivative_order

    @property
    def difference_table(self) -> Optional[DividedDifferenceTable]:
        """Table built by the last calc/derivative/find_root call (None before the first one)."""
        return self._table

    def set_points(self, rows: Sequence[Sequence[float]]) -> None:
        """Replace the nodes; rows must still provide the current derivative order."""
        self.store.set_points(rows, self._derivative_order)
        self._table = None

    def calc(self, x: float, degree: int) -> float:
        """
        Approximate y(x) with a polynomial of the given degree built on the nodes closest to x.
        Raises:
            InvalidPolynomialDegreeError: If degree is negative
            NotEnoughInputDataError: If the store holds no more than ``degree`` nodes
        """
        self._table = self._build_table(x, degree)
        result = evaluate_newton(self._table, x)
        logger.debug("%s(%g) with degree %d = %g", self.name, x, degree, result)
        return result

    def derivative(self, x: float, degree: int) -> float:
        """First derivative of the interpolating polynomial at x."""
        self._table = self._build_table(x, degree)
        return float(evaluate_newton_derivatives(self._table, x, order=1)[1])

    def second_derivative(self, x: float, degree: int) -> float:
        """Second derivative of the interpolating polynomial at x."""
        self._table = self._build_table(x, degree)
        return float(evaluate_newton_derivatives(self._table, x, order=2)[2])

    def find_root(self, degree: int) -> float:
        """
        Find x with y(x) == 0 by interpolating the inverse function x(y) at y = 0.

        Nodes are taken around the first sign change of y; a sample with y == 0
        (within tolerance) is returned directly.
        Raises:
            InvalidPolynomialDegreeError: If degree is negative
            NoRootInIntervalError: If the samples have neither a zero nor a sign change
            CannotInvertFunctionError: If a derivative column contains a zero tangent
        """
        _validate_degree(degree)
        bracket = bracket_root(self.store.points, self.tolerance)
        if bracket.is_exact:
            logger.info("%s root found at sample x=%g", self.name, bracket.exact_root)
            return bracket.exact_root
        inverted = invert_points(self.store.columns(self._derivative_order), self.tolerance)
        nodes = select_nodes(inverted, 0.0, degree + 1, copies=self._derivative_order + 1, anchor=bracket.anchor)
        self._table = build_difference_table(nodes, self._derivative_order, self.tolerance)
        root = evaluate_newton(self._table, 0.0)
        logger.info("%s root with degree %d: x=%g (anchor row %d)", self.name, degree, root, bracket.anchor)
        return root

    def expression(self, symbol: Union[sp.Symbol, str] = 'x') -> sp.Expr:
        """SymPy form of the polynomial from the last computation."""
        if self._table is None:
            raise ValueError("No polynomial has been built yet")
        return newton_expression(self._table, symbol)

    def _build_table(self, x: float, degree: int) -> DividedDifferenceTable:
        _validate_degree(degree)
        nodes = select_nodes(self.store.columns(self._derivative_order), x, degree + 1,
                             copies=self._derivative_order + 1)
        return build_difference_table(nodes, self._derivative_order, self.tolerance)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self.store)}, derivative_order={self._derivative_order})"


class NewtonPolynomial(PolynomialInterpolator):
    """Newton interpolation on ``(x, y)`` samples; derivative columns are ignored."""

    name = "Newton"

    def __init__(self, rows: Sequence[Sequence[float]], tolerance: float = ProcessingConstants.NODE_TOLERANCE):
        super().__init__(rows, 0, tolerance)


class HermitePolynomial(PolynomialInterpolator):
    """
    Hermite interpolation using derivative columns through confluent nodes.

    Each selected node is repeated ``derivative_order + 1`` times, capped so that a
    polynomial of degree n uses exactly n + 1 node copies.
    """

    name = "Hermite"

    def __init__(self, rows: Sequence[Sequence[float]],
                 derivative_order: int = ProcessingConstants.DEFAULT_DERIVATIVE_ORDER,
                 tolerance: float = ProcessingConstants.NODE_TOLERANCE):
        super().__init__(rows, derivative_order, tolerance)

    def set_derivative_order(self, derivative_order: int) -> None:
        """
        Change how many derivatives are used at each node.
        Raises:
            InvalidDerivativeOrderError: If negative or above the available derivative columns
        """
        available = self.store.derivative_columns
        if derivative_order < 0 or derivative_order > available:
            raise InvalidDerivativeOrderError(
                ErrorMessages.INVALID_DERIVATIVE_ORDER.format(order=derivative_order, available=available))
        logger.info("Hermite derivative order changed: %d -> %d", self._derivative_order, derivative_order)
        self._derivative_order = derivative_order
        self._table = None


def _validate_degree(degree: int) -> None:
    if degree < 0:
        raise InvalidPolynomialDegreeError(ErrorMessages.INVALID_DEGREE.format(degree=degree))
