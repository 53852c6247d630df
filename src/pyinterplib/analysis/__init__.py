"""
Higher-level analyses built on the interpolation objects.

Comparisons between the approximation families and the solution of a system
of two tabulated equations.
"""

from .comparison import (PolynomialComparison, SplineComparison, compare_polynomials, comparison_abscissae,
                         compare_with_spline, clamped_boundary)
from .systems import SystemSolution, solve_tabulated_system

__all__ = [
    "PolynomialComparison",
    "SplineComparison",
    "compare_polynomials",
    "comparison_abscissae",
    "compare_with_spline",
    "clamped_boundary",
    "SystemSolution",
    "solve_tabulated_system"
]
