"""
Core numerical algorithms for interpolation.

This module provides the node selector, the confluent divided-difference table,
Newton-form evaluation, function inversion for root finding and the cubic
spline solver. Everything here is a pure function over numpy arrays.
"""

from .node_selector import select_nodes, insertion_index
from .divided_differences import DividedDifferenceTable, build_difference_table
from .newton_form import evaluate_newton, evaluate_newton_derivatives, newton_expression
from .inversion import RootBracket, invert_points, bracket_root
from .spline_solver import build_spline_coefficients, solve_c_coefficients, evaluate_spline, locate_interval

__all__ = [
    "select_nodes",
    "insertion_index",
    "DividedDifferenceTable",
    "build_difference_table",
    "evaluate_newton",
    "evaluate_newton_derivatives",
    "newton_expression",
    "RootBracket",
    "invert_points",
    "bracket_root",
    "build_spline_coefficients",
    "solve_c_coefficients",
    "evaluate_spline",
    "locate_interval"
]
