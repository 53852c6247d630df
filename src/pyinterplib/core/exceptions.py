"""Custom exceptions for pyinterplib core functionality."""
import logging

logger = logging.getLogger(__name__)


class InterpolationError(Exception):
    """Base exception for all interpolation-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("%s raised: %s", type(self).__name__, message)


class NotEnoughInputDataError(InterpolationError):
    """Exception raised when there are fewer nodes or fields than the computation requires."""
    pass


class InvalidPolynomialDegreeError(InterpolationError):
    """Exception raised when a negative polynomial degree is requested."""
    pass


class InvalidDerivativeOrderError(InterpolationError):
    """Exception raised when the derivative order exceeds the available derivative columns."""
    pass


class CannotInvertFunctionError(InterpolationError):
    """Exception raised when a zero tangent makes the inverse function undefined."""
    pass


class NoRootInIntervalError(InterpolationError):
    """Exception raised when the samples contain neither a zero nor a sign change."""
    pass


class NumericalInstabilityError(InterpolationError):
    """Exception raised when a divided difference would divide by (almost) zero."""
    pass
