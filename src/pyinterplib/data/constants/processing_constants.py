from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Numerical constants shared by the interpolation engine."""
    # Tolerance used for confluent nodes, exact zeros and flat tangents
    NODE_TOLERANCE: Final[float] = 1e-7
    # Node store
    MIN_DATA_POINTS: Final[int] = 1
    MIN_SPLINE_POINTS: Final[int] = 2
    MIN_FIELDS_PER_ROW: Final[int] = 2
    # Inverse-function rules are known up to the second derivative
    MAX_INVERTIBLE_DERIVATIVE_ORDER: Final[int] = 2
    # Defaults exposed to callers
    DEFAULT_POLYNOMIAL_DEGREE: Final[int] = 3
    DEFAULT_DERIVATIVE_ORDER: Final[int] = 2
    NATURAL_BOUNDARY: Final[tuple] = (0.0, 0.0)
    # Comparisons
    MAX_COMPARISON_DEGREE: Final[int] = 5
    COMPARISON_POINTS_PER_INTERVAL: Final[int] = 3
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 400
    RANGE_PADDING_FACTOR: Final[float] = 0.05


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    NOT_ENOUGH_NODES: Final[str] = ("Not enough input data: {count} nodes for a polynomial of degree {degree}. "
                                    "Decrease the degree or add more points")
    SHORT_ROW: Final[str] = "Row {index} has {count} fields, at least {required} required"
    INVALID_DEGREE: Final[str] = "Invalid polynomial degree: {degree} (must be >= 0)"
    INVALID_DERIVATIVE_ORDER: Final[str] = "Invalid derivative order {order}: {available} derivative column(s) available"
    FLAT_TANGENT: Final[str] = "Cannot invert function: derivative {value:.3e} at x={x} is (close to) zero"
    NO_ROOT: Final[str] = "At this interval, the function has no valid roots"
    UNSTABLE_DIFFERENCE: Final[str] = ("Divided difference of order {order} at row {row}: nodes {x_left} and {x_right} "
                                       "coincide but no derivative is available")


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    DEFAULT_SEPARATOR: Final[str] = ','
    DEFAULT_MAIN_FILE: Final[str] = './data/source_data.csv'
    DEFAULT_PLOT_DIRECTORY: Final[str] = 'pyinterplib_plots'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
