import logging
from typing import Union

import numpy as np
import sympy as sp

from pyinterplib.algorithms.divided_differences import DividedDifferenceTable

logger = logging.getLogger(__name__)


def evaluate_newton(table: DividedDifferenceTable, x: float) -> float:
    """Evaluate the Newton-form polynomial of the table at x by nested multiplication."""
    coefficients = table.coefficients
    nodes = table.nodes
    result = coefficients[-1]
    for i in range(table.size - 2, -1, -1):
        result = result * (x - nodes[i]) + coefficients[i]
    return float(result)


def evaluate_newton_derivatives(table: DividedDifferenceTable, x: float, order: int = 2) -> np.ndarray:
    """
    Evaluate the Newton-form polynomial and its derivatives at x.

    Extends the nested multiplication: for every factor ``(x - x_i)`` the j-th
    derivative accumulator becomes ``d_j * (x - x_i) + j * d_{j-1}``.
    Args:
        table: Divided-difference table
        x: Evaluation point
        order: Highest derivative to return
    Returns:
        Array ``[p(x), p'(x), ..., p^(order)(x)]``
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")
    coefficients = table.coefficients
    nodes = table.nodes
    acc = np.zeros(order + 1)
    acc[0] = coefficients[-1]
    for i in range(table.size - 2, -1, -1):
        t = x - nodes[i]
        for j in range(order, 0, -1):
            acc[j] = acc[j] * t + j * acc[j - 1]
        acc[0] = acc[0] * t + coefficients[i]
    logger.debug("Newton derivatives at x=%g: %s", x, acc.tolist())
    return acc


def newton_expression(table: DividedDifferenceTable, symbol: Union[sp.Symbol, str] = 'x') -> sp.Expr:
    """
    Nested Newton form of the table as a SymPy expression.
    Examples:
        >>> x = sp.Symbol('x')
        >>> expr = newton_expression(table, x)
        >>> float(expr.subs(x, 1.5))
    """
    if isinstance(symbol, str):
        symbol = sp.Symbol(symbol)
    coefficients = table.coefficients
    nodes = table.nodes
    expr = sp.Float(coefficients[-1])
    for i in range(table.size - 2, -1, -1):
        expr = expr * (symbol - sp.Float(nodes[i])) + sp.Float(coefficients[i])
    return expr
