"""Interactive menu for evaluating, comparing and plotting approximations of tabulated data."""
import argparse
import logging
import sys
from dataclasses import dataclass, replace
from enum import IntEnum
from pathlib import Path
from typing import Callable, Dict, List, Optional

import numpy as np

from pyinterplib.analysis.comparison import (clamped_boundary, compare_polynomials, compare_with_spline,
                                             comparison_abscissae)
from pyinterplib.analysis.systems import solve_tabulated_system
from pyinterplib.core.exceptions import InterpolationError
from pyinterplib.core.polynomials import HermitePolynomial, NewtonPolynomial
from pyinterplib.core.spline import CubicSpline
from pyinterplib.data.constants import FileConstants, ProcessingConstants
from pyinterplib.parsing.api import load_config
from pyinterplib.parsing.config.run_config_parser import RunConfig
from pyinterplib.parsing.config.yaml_keys import NATURAL_KEY, START_KEY, START_END_KEY
from pyinterplib.parsing.io.data_handler import load_point_rows
from pyinterplib.visualization.plotters import ApproximationVisualizer
from pyinterplib.visualization.tables import (format_difference_table, format_polynomial_comparison,
                                              format_spline_comparison)

logger = logging.getLogger(__name__)

InputFunction = Callable[[str], str]


class Operation(IntEnum):
    EXIT = 0
    NEWTON_VALUE = 1
    NEWTON_TABLE = 2
    HERMITE_VALUE = 3
    HERMITE_TABLE = 4
    FIND_ROOT = 5
    COMPARE_POLYNOMIALS = 6
    SOLVE_SYSTEM = 7
    CHANGE_DERIVATIVE_ORDER = 8
    SPLINE_VALUE = 9
    NATURAL_BOUNDARY = 10
    START_BOUNDARY = 11
    START_END_BOUNDARY = 12
    COMPARE_SPLINE = 13
    PLOT = 14

    @property
    def description(self) -> str:
        return OPERATION_DESCRIPTIONS[self]


OPERATION_DESCRIPTIONS = {
    Operation.EXIT: "Exit",
    Operation.NEWTON_VALUE: "Compute y(x) with the Newton polynomial",
    Operation.NEWTON_TABLE: "Show the Newton divided-difference table",
    Operation.HERMITE_VALUE: "Compute y(x) with the Hermite polynomial",
    Operation.HERMITE_TABLE: "Show the Hermite divided-difference table",
    Operation.FIND_ROOT: "Find the root of the function (y == 0)",
    Operation.COMPARE_POLYNOMIALS: "Compare Newton and Hermite for degrees 1 to 5",
    Operation.SOLVE_SYSTEM: "Solve the system of two tabulated equations",
    Operation.CHANGE_DERIVATIVE_ORDER: "Change the number of derivatives used by Hermite",
    Operation.SPLINE_VALUE: "Compute y(x) with the Newton polynomial and the cubic spline",
    Operation.NATURAL_BOUNDARY: "Spline boundary: natural (0, 0)",
    Operation.START_BOUNDARY: "Spline boundary: start from Newton curvature, natural end",
    Operation.START_END_BOUNDARY: "Spline boundary: start and end from Newton curvature",
    Operation.COMPARE_SPLINE: "Compare Newton and spline in the first, middle and last intervals",
    Operation.PLOT: "Plot samples, Newton polynomial and spline",
}


@dataclass
class Session:
    """Data and approximation objects shared by the menu handlers."""
    config: RunConfig
    points: np.ndarray
    newton: NewtonPolynomial
    hermite: HermitePolynomial
    spline: CubicSpline
    xy_rows: Optional[np.ndarray] = None
    yx_rows: Optional[np.ndarray] = None

    @classmethod
    def from_config(cls, config: RunConfig) -> 'Session':
        points = load_point_rows(config.main_file, ProcessingConstants.MIN_FIELDS_PER_ROW,
                                 config.separator, config.header)
        available = points.shape[1] - ProcessingConstants.MIN_FIELDS_PER_ROW
        derivative_order = config.derivative_order
        if derivative_order > available:
            logger.warning("%s provides %d derivative column(s), Hermite derivative order lowered from %d to %d",
                           config.main_file, available, derivative_order, available)
            derivative_order = available
        xy_rows = yx_rows = None
        if config.has_system_files:
            xy_rows = load_point_rows(config.xy_file, ProcessingConstants.MIN_FIELDS_PER_ROW,
                                      config.separator, config.header)
            yx_rows = load_point_rows(config.yx_file, ProcessingConstants.MIN_FIELDS_PER_ROW,
                                      config.separator, config.header)
        session = cls(config=config, points=points, newton=NewtonPolynomial(points),
                      hermite=HermitePolynomial(points, derivative_order),
                      spline=CubicSpline(points[:, :ProcessingConstants.MIN_FIELDS_PER_ROW]),
                      xy_rows=xy_rows, yx_rows=yx_rows)
        apply_boundary(session, config.boundary)
        logger.info("Session ready: %d nodes, Hermite derivative order %d", len(points), derivative_order)
        return session


def apply_boundary(session: Session, boundary) -> None:
    """Configure the spline from a boundary keyword or an explicit ``(c_start, c_end)`` pair."""
    x_nodes = session.spline.store.x
    degree = session.config.degree
    if boundary == NATURAL_KEY:
        session.spline.set_natural_condition()
    elif boundary == START_KEY:
        session.spline.set_boundary_condition(*clamped_boundary(session.newton, x_nodes[0], None, degree))
    elif boundary == START_END_KEY:
        session.spline.set_boundary_condition(*clamped_boundary(session.newton, x_nodes[0], x_nodes[-1], degree))
    else:
        session.spline.set_boundary_condition(*boundary)


# --- Input helpers ---
def read_float(read: InputFunction, prompt: str) -> float:
    text = read(prompt).strip()
    try:
        return float(text)
    except ValueError as e:
        raise ValueError(f"'{text}' is not a number") from e


def read_int(read: InputFunction, prompt: str, default: Optional[int] = None) -> int:
    text = read(prompt).strip()
    if not text and default is not None:
        return default
    try:
        return int(text)
    except ValueError as e:
        raise ValueError(f"'{text}' is not an integer") from e


def read_degree(session: Session, read: InputFunction) -> int:
    return read_int(read, f"Polynomial degree [{session.config.degree}]: ", session.config.degree)


# --- Handlers ---
def newton_value(session: Session, read: InputFunction) -> None:
    x = read_float(read, "x: ")
    degree = read_degree(session, read)
    print(f"Newton: y({x:g}) = {session.newton.calc(x, degree):.6f}")


def newton_table(session: Session, read: InputFunction) -> None:
    x = read_float(read, "x: ")
    session.newton.calc(x, read_degree(session, read))
    print(format_difference_table(session.newton.difference_table))


def hermite_value(session: Session, read: InputFunction) -> None:
    x = read_float(read, "x: ")
    degree = read_degree(session, read)
    print(f"Hermite: y({x:g}) = {session.hermite.calc(x, degree):.6f}")


def hermite_table(session: Session, read: InputFunction) -> None:
    x = read_float(read, "x: ")
    session.hermite.calc(x, read_degree(session, read))
    print(format_difference_table(session.hermite.difference_table))


def find_root(session: Session, read: InputFunction) -> None:
    degree = read_degree(session, read)
    print(f"Newton root: x = {session.newton.find_root(degree):.6f}")
    print(f"Hermite root: x = {session.hermite.find_root(degree):.6f}")


def compare_polynomial_families(session: Session, read: InputFunction) -> None:
    x = read_float(read, "x: ")
    max_degree = min(ProcessingConstants.MAX_COMPARISON_DEGREE, len(session.newton.store) - 1)
    print(format_polynomial_comparison(compare_polynomials(session.newton, session.hermite, x, max_degree)))


def solve_system(session: Session, read: InputFunction) -> None:
    if session.xy_rows is None or session.yx_rows is None:
        raise ValueError("Solving a system needs both the xy and the yx data files")
    solution = solve_tabulated_system(session.xy_rows, session.yx_rows, read_degree(session, read))
    print(f"System solution: x = {solution.x:.6f}, y = {solution.y:.6f}")


def change_derivative_order(session: Session, read: InputFunction) -> None:
    order = read_int(read, f"Derivatives per node (0..{session.hermite.store.derivative_columns}): ")
    session.hermite.set_derivative_order(order)
    print(f"Hermite now uses {order} derivative(s) per node")


def spline_value(session: Session, read: InputFunction) -> None:
    x = read_float(read, "x: ")
    degree = read_degree(session, read)
    print(f"Newton: y({x:g}) = {session.newton.calc(x, degree):.6f}")
    print(f"Spline: y({x:g}) = {session.spline.calc(x):.6f}")


def natural_boundary(session: Session, read: InputFunction) -> None:
    apply_boundary(session, NATURAL_KEY)
    print(f"Spline boundary condition: {session.spline.boundary_condition}")


def start_boundary(session: Session, read: InputFunction) -> None:
    apply_boundary(session, START_KEY)
    print(f"Spline boundary condition: {session.spline.boundary_condition}")


def start_end_boundary(session: Session, read: InputFunction) -> None:
    apply_boundary(session, START_END_KEY)
    print(f"Spline boundary condition: {session.spline.boundary_condition}")


def compare_spline(session: Session, read: InputFunction) -> None:
    xs = comparison_abscissae(session.spline.store.x)
    print(format_spline_comparison(compare_with_spline(session.newton, session.spline, xs, session.config.degree)))


def plot(session: Session, read: InputFunction) -> None:
    visualizer = ApproximationVisualizer(session.config.plot_directory)
    path = visualizer.plot(session.points, session.newton, session.spline, session.config.degree,
                           title=f"Interpolation of {session.config.main_file.name}")
    print(f"Plot saved as {path}")


HANDLERS: Dict[Operation, Callable[[Session, InputFunction], None]] = {
    Operation.NEWTON_VALUE: newton_value,
    Operation.NEWTON_TABLE: newton_table,
    Operation.HERMITE_VALUE: hermite_value,
    Operation.HERMITE_TABLE: hermite_table,
    Operation.FIND_ROOT: find_root,
    Operation.COMPARE_POLYNOMIALS: compare_polynomial_families,
    Operation.SOLVE_SYSTEM: solve_system,
    Operation.CHANGE_DERIVATIVE_ORDER: change_derivative_order,
    Operation.SPLINE_VALUE: spline_value,
    Operation.NATURAL_BOUNDARY: natural_boundary,
    Operation.START_BOUNDARY: start_boundary,
    Operation.START_END_BOUNDARY: start_end_boundary,
    Operation.COMPARE_SPLINE: compare_spline,
    Operation.PLOT: plot,
}


# --- Menu loop ---
def format_menu() -> str:
    lines = ["=" * 72, "Interpolation with Newton, Hermite and cubic spline approximations", "-" * 72]
    lines += [f"{int(op):>2}. {op.description}" for op in Operation if op is not Operation.EXIT]
    lines += [f"{int(Operation.EXIT):>2}. {Operation.EXIT.description}", "-" * 72]
    return "\n".join(lines)


def choose_operation(read: InputFunction) -> Operation:
    while True:
        text = read("Operation number: ").strip()
        try:
            return Operation(int(text))
        except ValueError:
            print(f"Invalid operation number '{text}', try again.")


def run_menu(session: Session, read: InputFunction = input) -> None:
    """Repeat menu selection and dispatch until exit or end of input."""
    while True:
        print(format_menu())
        try:
            operation = choose_operation(read)
        except EOFError:
            break
        if operation is Operation.EXIT:
            break
        logger.debug("Selected operation: %s", operation.name)
        try:
            HANDLERS[operation](session, read)
        except EOFError:
            break
        except (InterpolationError, ValueError) as e:
            logger.error("Operation '%s' failed: %s", operation.description, e)
    print("Done.")


# --- Entry point ---
def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyinterplib", description=__doc__)
    parser.add_argument("--config", type=Path, help="YAML run configuration")
    parser.add_argument("--main", type=Path, help=f"main data file (default: {FileConstants.DEFAULT_MAIN_FILE})")
    parser.add_argument("--xy", type=Path, help="samples of y = f(x) for system solving")
    parser.add_argument("--yx", type=Path, help="samples of x = g(y) for system solving")
    parser.add_argument("--degree", type=int, help="default polynomial degree")
    parser.add_argument("--derivatives", type=int, help="derivatives per node used by Hermite")
    parser.add_argument("--plot-dir", type=Path, help="directory for saved plots")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    """Run configuration from the YAML file (if given) with command-line flags taking precedence."""
    config = load_config(args.config) if args.config else RunConfig(main_file=Path(FileConstants.DEFAULT_MAIN_FILE))
    overrides = {
        "main_file": args.main,
        "xy_file": args.xy,
        "yx_file": args.yx,
        "degree": args.degree,
        "derivative_order": args.derivatives,
        "plot_directory": args.plot_dir,
    }
    return replace(config, **{key: value for key, value in overrides.items() if value is not None})


def main(argv: Optional[List[str]] = None, read: InputFunction = input) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        session = Session.from_config(build_config(args))
    except (InterpolationError, ValueError, FileNotFoundError) as e:
        logger.error("Could not start: %s", e)
        return 1
    run_menu(session, read)
    return 0


if __name__ == "__main__":
    sys.exit(main())
