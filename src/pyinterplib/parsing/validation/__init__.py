"""Validation utilities for PyInterpLib."""

from .array_validator import is_monotonic, validate_point_rows

__all__ = [
    "is_monotonic",
    "validate_point_rows"
]
