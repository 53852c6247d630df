"""
PyInterpLib - A Python library for interpolation of tabulated functions.

This library approximates an unknown function from a discrete set of sample
points, finds where it crosses zero and compares polynomial and piecewise-cubic
approximations.

Key Features:
- Local Newton interpolation on the nodes closest to the query point
- Hermite interpolation using derivative columns through confluent nodes
- Root finding by interpolation of the inverse function
- Cubic splines with second-derivative boundary conditions
- Solution of systems given as two sample tables
- Console tables and matplotlib plots of the approximations

Main Components:
- Core: Node store, polynomial and spline objects, exceptions
- Algorithms: Node selection, divided differences, Newton form, inversion, spline solver
- Analysis: Comparisons and tabulated systems
- Parsing: Data files and YAML run configuration
- Visualization: Tables and plots
"""

# Enhanced version handling with multiple fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pyinterplib")
        except PackageNotFoundError:
            __version__ = "0.1.0+unknown"
    except ImportError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core objects
from .core.exceptions import (InterpolationError, NotEnoughInputDataError, InvalidPolynomialDegreeError,
                              InvalidDerivativeOrderError, CannotInvertFunctionError, NoRootInIntervalError,
                              NumericalInstabilityError)
from .core.nodes import NodeStore
from .core.polynomials import NewtonPolynomial, HermitePolynomial
from .core.spline import CubicSpline

# Main API functions
from .parsing.api import (
    load_config,
    create_newton_polynomial,
    create_hermite_polynomial,
    create_cubic_spline
)

# Analysis
from .analysis.comparison import compare_polynomials, compare_with_spline, clamped_boundary
from .analysis.systems import solve_tabulated_system

# Visualization
from .visualization.plotters import ApproximationVisualizer

__all__ = [
    # Version
    '__version__',

    # Exceptions
    'InterpolationError',
    'NotEnoughInputDataError',
    'InvalidPolynomialDegreeError',
    'InvalidDerivativeOrderError',
    'CannotInvertFunctionError',
    'NoRootInIntervalError',
    'NumericalInstabilityError',

    # Core classes
    'NodeStore',
    'NewtonPolynomial',
    'HermitePolynomial',
    'CubicSpline',

    # Main API
    'load_config',
    'create_newton_polynomial',
    'create_hermite_polynomial',
    'create_cubic_spline',

    # Analysis
    'compare_polynomials',
    'compare_with_spline',
    'clamped_boundary',
    'solve_tabulated_system',

    # Visualization
    'ApproximationVisualizer'
]

__description__ = "Interpolation of tabulated functions"
