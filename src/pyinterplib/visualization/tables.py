"""Console rendering of difference tables and comparison results."""
import logging

import numpy as np
import pandas as pd

from pyinterplib.algorithms.divided_differences import DividedDifferenceTable
from pyinterplib.analysis.comparison import PolynomialComparison, SplineComparison

logger = logging.getLogger(__name__)

FLOAT_FORMAT = "{:.6g}".format


def difference_table_frame(table: DividedDifferenceTable) -> pd.DataFrame:
    """DataFrame with columns x, y and the divided differences of order 1..m-1."""
    columns = ["x", "y"] + [f"order {k}" for k in range(1, table.size)]
    return pd.DataFrame(np.asarray(table.values), columns=columns)


def format_difference_table(table: DividedDifferenceTable) -> str:
    """Render the triangular table, leaving the unused upper-right part blank."""
    frame = difference_table_frame(table)
    logger.debug("Formatting difference table with %d rows", table.size)
    return frame.to_string(index=False, na_rep="", float_format=FLOAT_FORMAT)


def format_polynomial_comparison(comparison: PolynomialComparison) -> str:
    """One row per degree with the Newton and Hermite values and their difference."""
    frame = pd.DataFrame({
        "degree": comparison.degrees,
        "Newton": comparison.newton,
        "Hermite": comparison.hermite,
        "difference": comparison.newton - comparison.hermite,
    })
    header = f"Newton vs Hermite at x = {comparison.x:g}"
    return header + "\n" + frame.to_string(index=False, float_format=FLOAT_FORMAT)


def format_spline_comparison(comparison: SplineComparison) -> str:
    frame = pd.DataFrame({
        "x": comparison.x,
        f"Newton (degree {comparison.degree})": comparison.newton,
        "spline": comparison.spline,
        "difference": comparison.difference,
    })
    return frame.to_string(index=False, float_format=FLOAT_FORMAT)
