import logging
from pathlib import Path
from typing import Optional, Union

from pyinterplib.core.polynomials import HermitePolynomial, NewtonPolynomial
from pyinterplib.core.spline import CubicSpline
from pyinterplib.data.constants import FileConstants, ProcessingConstants
from pyinterplib.parsing.config.run_config_parser import RunConfig, RunConfigParser
from pyinterplib.parsing.io.data_handler import load_point_rows

logger = logging.getLogger(__name__)


def load_config(yaml_path: Union[str, Path]) -> RunConfig:
    """
    Load a run configuration from a YAML file.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        RunConfig with every relative path resolved against the file's directory
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Loading run configuration from: %s", yaml_path)
    try:
        return RunConfigParser(yaml_path).create_config()
    except Exception as e:
        logger.error("Failed to load run configuration from %s: %s", yaml_path, e)
        raise


def create_newton_polynomial(file_path: Union[str, Path], separator: str = FileConstants.DEFAULT_SEPARATOR,
                             header: bool = True) -> NewtonPolynomial:
    """
    Create a Newton polynomial from the ``x, y`` columns of a data file.

    Additional derivative columns in the file are ignored.
    """
    rows = load_point_rows(file_path, ProcessingConstants.MIN_FIELDS_PER_ROW, separator, header)
    polynomial = NewtonPolynomial(rows)
    logger.info("Created Newton polynomial from %s with %d nodes", file_path, len(polynomial.store))
    return polynomial


def create_hermite_polynomial(file_path: Union[str, Path],
                              derivative_order: int = ProcessingConstants.DEFAULT_DERIVATIVE_ORDER,
                              separator: str = FileConstants.DEFAULT_SEPARATOR,
                              header: bool = True) -> HermitePolynomial:
    """
    Create a Hermite polynomial from a data file with derivative columns.
    Args:
        file_path: Path to a file with rows ``x, y, y', y'', ...``
        derivative_order: Number of derivative columns every row must provide
        separator: Field separator
        header: Indicates if the file starts with a header row
    Returns:
        HermitePolynomial over all rows of the file
    Raises:
        ValueError: If a required column is missing or non-numeric
    """
    rows = load_point_rows(file_path, ProcessingConstants.MIN_FIELDS_PER_ROW + derivative_order, separator, header)
    polynomial = HermitePolynomial(rows, derivative_order)
    logger.info("Created Hermite polynomial from %s with %d nodes and derivative order %d",
                file_path, len(polynomial.store), derivative_order)
    return polynomial


def create_cubic_spline(file_path: Union[str, Path], separator: str = FileConstants.DEFAULT_SEPARATOR,
                        header: bool = True, boundary: Optional[tuple] = None) -> CubicSpline:
    """Create a cubic spline from the ``x, y`` columns of a data file, optionally configured with a boundary pair."""
    rows = load_point_rows(file_path, ProcessingConstants.MIN_FIELDS_PER_ROW, separator, header,
                           max_fields=ProcessingConstants.MIN_FIELDS_PER_ROW)
    spline = CubicSpline(rows)
    if boundary is not None:
        spline.set_boundary_condition(*boundary)
    logger.info("Created cubic spline from %s with %d nodes", file_path, len(spline.store))
    return spline
