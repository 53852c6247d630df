"""Test imports work correctly."""

import pytest


def test_all_imports():
    """Test that all modules can be imported without circular dependencies."""
    try:
        import pyinterplib
        import pyinterplib.core
        import pyinterplib.algorithms
        import pyinterplib.analysis
        import pyinterplib.parsing
        import pyinterplib.visualization
        import pyinterplib.cli
        from pyinterplib.core.polynomials import NewtonPolynomial, HermitePolynomial
        from pyinterplib.core.spline import CubicSpline
        from pyinterplib.parsing.api import create_newton_polynomial
        from pyinterplib.parsing.config.run_config_parser import RunConfigParser
        from pyinterplib.algorithms.divided_differences import build_difference_table
        from pyinterplib.visualization.plotters import ApproximationVisualizer
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_public_names():
    """Test that the package exports its main objects."""
    import pyinterplib
    for name in pyinterplib.__all__:
        assert hasattr(pyinterplib, name), name
    assert isinstance(pyinterplib.__version__, str)


def test_exception_hierarchy():
    from pyinterplib import (InterpolationError, NotEnoughInputDataError, InvalidPolynomialDegreeError,
                             InvalidDerivativeOrderError, CannotInvertFunctionError, NoRootInIntervalError,
                             NumericalInstabilityError)
    for error in (NotEnoughInputDataError, InvalidPolynomialDegreeError, InvalidDerivativeOrderError,
                  CannotInvertFunctionError, NoRootInIntervalError, NumericalInstabilityError):
        assert issubclass(error, InterpolationError)
