from .plotters import ApproximationVisualizer
from .tables import (difference_table_frame, format_difference_table, format_polynomial_comparison,
                     format_spline_comparison)

__all__ = [
    "ApproximationVisualizer",
    "difference_table_frame",
    "format_difference_table",
    "format_polynomial_comparison",
    "format_spline_comparison"
]
