"""Demonstration script for interpolation of tabulated data."""
import logging
from pathlib import Path

from pyinterplib.analysis.comparison import (clamped_boundary, compare_polynomials, compare_with_spline,
                                             comparison_abscissae)
from pyinterplib.analysis.systems import solve_tabulated_system
from pyinterplib.parsing.api import load_config, create_newton_polynomial, create_hermite_polynomial
from pyinterplib.parsing.io.data_handler import load_point_rows
from pyinterplib.core.spline import CubicSpline
from pyinterplib.visualization.plotters import ApproximationVisualizer
from pyinterplib.visualization.tables import (format_difference_table, format_polynomial_comparison,
                                              format_spline_comparison)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_interpolation():
    """Demonstrate polynomial and spline interpolation of y = cos(x) - x."""
    setup_logging()
    config_path = Path(__file__).parent / "run_config.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Run configuration not found: {config_path}")
    config = load_config(config_path)
    newton = create_newton_polynomial(config.main_file)
    hermite = create_hermite_polynomial(config.main_file, config.derivative_order)
    x = 0.7
    print(f"\n{'=' * 80}")
    print(f"VALUES AT x = {x}")
    print(f"{'=' * 80}")
    print(f"Newton  (degree {config.degree}): {newton.calc(x, config.degree):.6f}")
    print(f"Hermite (degree {config.degree}): {hermite.calc(x, config.degree):.6f}")
    print(format_difference_table(hermite.difference_table))
    print(f"\n{'=' * 80}")
    print("ROOT OF cos(x) - x")
    print(f"{'=' * 80}")
    print(f"Newton : {newton.find_root(config.degree):.6f}")
    print(f"Hermite: {hermite.find_root(config.degree):.6f}")
    print(format_polynomial_comparison(compare_polynomials(newton, hermite, x)))
    print(f"\n{'=' * 80}")
    print("CUBIC SPLINE")
    print(f"{'=' * 80}")
    points = load_point_rows(config.main_file)
    spline = CubicSpline(points[:, :2])
    xs = comparison_abscissae(spline.store.x)
    print("Natural boundary:")
    print(format_spline_comparison(compare_with_spline(newton, spline, xs, config.degree)))
    spline.set_boundary_condition(*clamped_boundary(newton, spline.store.x[0], spline.store.x[-1], config.degree))
    print(f"Boundary from Newton curvature {spline.boundary_condition}:")
    print(format_spline_comparison(compare_with_spline(newton, spline, xs, config.degree)))
    if config.has_system_files:
        print(f"\n{'=' * 80}")
        print("SYSTEM y = x**2, x = 1.5 - y/2")
        print(f"{'=' * 80}")
        solution = solve_tabulated_system(load_point_rows(config.xy_file), load_point_rows(config.yx_file),
                                          config.degree)
        print(f"x = {solution.x:.6f}, y = {solution.y:.6f}")
    path = ApproximationVisualizer(config.plot_directory).plot(points, newton, spline, config.degree,
                                                               title="y = cos(x) - x")
    print(f"\nPlot saved as {path}")


if __name__ == "__main__":
    demonstrate_interpolation()
