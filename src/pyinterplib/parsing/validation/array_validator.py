"""General data validation utilities."""

import logging
from typing import Sequence

import numpy as np

from pyinterplib.core.exceptions import NotEnoughInputDataError
from pyinterplib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def is_monotonic(arr: np.ndarray, name: str = "Array",
                 mode: str = "strictly_increasing",
                 threshold: float = 0.0,
                 raise_error: bool = True) -> bool:
    """Universal monotonicity checker supporting multiple modes."""
    for i in range(1, len(arr)):
        diff = arr[i] - arr[i-1]
        violation = False
        if mode == "strictly_increasing" and diff <= threshold:
            violation = True
        elif mode == "non_decreasing" and diff < -threshold:
            violation = True
        elif mode == "strictly_decreasing" and diff >= -threshold:
            violation = True
        elif mode == "non_increasing" and diff > threshold:
            violation = True
        if violation:
            start_idx = max(0, i-2)
            end_idx = min(len(arr), i+3)
            context = "\nSurrounding values:\n"
            for j in range(start_idx, end_idx):
                context += f"Index {j}: {arr[j]:.10e}\n"
            error_msg = (
                f"{name} is not {mode.replace('_', ' ')} at index {i}:\n"
                f"Previous value ({i-1}): {arr[i-1]:.10e}\n"
                f"Current value ({i}): {arr[i]:.10e}\n"
                f"Difference: {diff:.10e}\n"
                f"{context}"
            )
            if raise_error:
                raise ValueError(error_msg)
            else:
                logger.warning("Warning: %s", error_msg)
                return False
    logger.debug("%s is %s", name, mode.replace('_', ' '))
    return True


def validate_point_rows(rows: Sequence[Sequence[float]], derivative_order: int = 0) -> np.ndarray:
    """
    Validate raw point rows and convert them to a rectangular float array.

    Every row needs at least ``2 + derivative_order`` fields. Rows may be ragged;
    the result keeps the columns that are present in every row.
    Raises:
        NotEnoughInputDataError: If there are no rows or a row is too short
        ValueError: If a field is not numeric or not finite
    """
    required = ProcessingConstants.MIN_FIELDS_PER_ROW + derivative_order
    if rows is None or len(rows) < ProcessingConstants.MIN_DATA_POINTS:
        raise NotEnoughInputDataError("Not enough input data: no points provided")
    width = None
    for i, row in enumerate(rows):
        if len(row) < required:
            raise NotEnoughInputDataError(ErrorMessages.SHORT_ROW.format(index=i, count=len(row), required=required))
        width = len(row) if width is None else min(width, len(row))
    try:
        data = np.array([[float(value) for value in row[:width]] for row in rows], dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Point rows must contain numeric values only: {str(e)}") from e
    if not np.all(np.isfinite(data)):
        bad_rows = np.where(~np.all(np.isfinite(data), axis=1))[0].tolist()
        raise ValueError(f"Point rows contain non-finite values at rows {bad_rows}")
    logger.debug("Validated %d rows with %d columns (%d required)", data.shape[0], width, required)
    return data
