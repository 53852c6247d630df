from .exceptions import (InterpolationError, NotEnoughInputDataError, InvalidPolynomialDegreeError,
                         InvalidDerivativeOrderError, CannotInvertFunctionError, NoRootInIntervalError,
                         NumericalInstabilityError)
from .nodes import NodeStore
from .polynomials import PolynomialInterpolator, NewtonPolynomial, HermitePolynomial
from .spline import CubicSpline

__all__ = [
    "InterpolationError",
    "NotEnoughInputDataError",
    "InvalidPolynomialDegreeError",
    "InvalidDerivativeOrderError",
    "CannotInvertFunctionError",
    "NoRootInIntervalError",
    "NumericalInstabilityError",
    "NodeStore",
    "PolynomialInterpolator",
    "NewtonPolynomial",
    "HermitePolynomial",
    "CubicSpline"
]
