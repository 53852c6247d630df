"""
Parsing and configuration modules for pyinterplib.

This package handles delimited data files, YAML run configuration and
validation of raw point rows. The file-based constructors live in
``pyinterplib.parsing.api``.
"""

from .io.data_handler import load_point_rows
from .validation.array_validator import is_monotonic, validate_point_rows

__all__ = [
    'load_point_rows',
    'is_monotonic',
    'validate_point_rows'
]
