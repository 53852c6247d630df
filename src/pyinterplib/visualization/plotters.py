import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import numpy as np

from pyinterplib.core.exceptions import InterpolationError
from pyinterplib.core.polynomials import PolynomialInterpolator
from pyinterplib.core.spline import CubicSpline
from pyinterplib.data.constants import FileConstants, ProcessingConstants

logger = logging.getLogger(__name__)


class ApproximationVisualizer:
    """Plots sample points together with polynomial and spline approximations."""

    # --- Constructor ---
    def __init__(self, plot_directory: Union[str, Path] = FileConstants.DEFAULT_PLOT_DIRECTORY,
                 num_points: int = ProcessingConstants.DEFAULT_VISUALIZATION_POINTS) -> None:
        self.plot_directory = Path(plot_directory)
        self.num_points = num_points
        self.fig = None
        self.ax = None
        self.setup_style()
        logger.debug("ApproximationVisualizer initialized with plot directory: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'Liberation Sans'],
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.dpi': 150,
        })

    # --- Public API Methods ---
    def sample_range(self, x_nodes: np.ndarray) -> np.ndarray:
        """Evenly spaced abscissae covering the nodes plus a small margin on both sides."""
        x_min, x_max = float(np.min(x_nodes)), float(np.max(x_nodes))
        padding = (x_max - x_min) * ProcessingConstants.RANGE_PADDING_FACTOR
        return np.linspace(x_min - padding, x_max + padding, self.num_points)

    def plot(self, points: np.ndarray, polynomial: Optional[PolynomialInterpolator] = None,
             spline: Optional[CubicSpline] = None, degree: int = ProcessingConstants.DEFAULT_POLYNOMIAL_DEGREE,
             title: str = "Interpolation", filename: Optional[str] = None) -> Path:
        """
        Draw the samples and the requested approximations and save the figure as PNG.
        Args:
            points: Sample rows, the first two columns are plotted
            polynomial: Newton or Hermite polynomial evaluated with the given degree
            spline: Cubic spline evaluated with its current boundary condition
            degree: Polynomial degree
            title: Figure title
            filename: Output file name inside the plot directory (timestamped when omitted)
        Returns:
            Path of the saved PNG
        """
        points = np.asarray(points, dtype=np.float64)
        logger.info("Plotting %d samples (polynomial=%s, spline=%s)",
                    len(points), polynomial is not None, spline is not None)
        self.fig, self.ax = plt.subplots(figsize=(10, 6))
        try:
            xs = self.sample_range(points[:, 0])
            if polynomial is not None:
                self._plot_curve(xs, lambda x: polynomial.calc(x, degree),
                                 f"{polynomial.name} (degree {degree})", '#1f77b4')
            if spline is not None:
                self._plot_curve(xs, spline.calc, "Cubic spline", '#ff7f0e')
            self.ax.scatter(points[:, 0], points[:, 1], color='#000000', marker='o', s=25,
                            zorder=3, label='Samples')
            self.ax.set_title(title, fontweight='bold')
            self.ax.set_xlabel("x")
            self.ax.set_ylabel("y")
            self.ax.legend(loc='best', framealpha=0.9)
            return self.save(filename)
        finally:  # Always close the figure to prevent memory leaks
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            logger.debug("Figure closed and memory cleaned up")

    def save(self, filename: Optional[str] = None) -> Path:
        if self.fig is None:
            raise ValueError("No figure to save")
        self.plot_directory.mkdir(parents=True, exist_ok=True)
        if filename is None:
            filename = f"interpolation_{datetime.now().strftime('%Y%m%d_%H%M%S')}.png"
        filepath = self.plot_directory / filename
        self.fig.savefig(str(filepath), bbox_inches="tight", edgecolor='none', pad_inches=0.2)
        logger.info("Plot saved as %s", filepath)
        return filepath

    # --- Private Methods ---
    def _plot_curve(self, xs: np.ndarray, function, label: str, color: str) -> None:
        try:
            ys = np.array([function(x) for x in xs])
        except InterpolationError as e:
            logger.warning("Could not evaluate %s over the plot range: %s", label, e)
            return
        self.ax.plot(xs, ys, color=color, linewidth=1.8, label=label)
