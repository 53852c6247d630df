"""Unit tests for the file-based API."""

import pytest

from pyinterplib.core.exceptions import NotEnoughInputDataError
from pyinterplib.parsing.api import (create_cubic_spline, create_hermite_polynomial, create_newton_polynomial,
                                     load_config)


class TestApi:
    """Test cases for the parsing API functions."""
    def test_create_newton_polynomial(self, source_csv):
        newton = create_newton_polynomial(source_csv)
        assert len(newton.store) == 5
        assert newton.calc(1.5, 3) == pytest.approx(1.5 ** 3 - 8)

    def test_create_hermite_polynomial(self, source_csv):
        hermite = create_hermite_polynomial(source_csv, derivative_order=1)
        assert hermite.derivative_order == 1
        assert hermite.calc(2.5, 3) == pytest.approx(2.5 ** 3 - 8)

    def test_create_hermite_without_derivatives(self, csv_file):
        with pytest.raises(ValueError, match="at least 4 required"):
            create_hermite_polynomial(csv_file("x,y\n0,0\n1,1\n"), derivative_order=2)

    def test_create_cubic_spline(self, source_csv):
        spline = create_cubic_spline(source_csv)
        assert spline.store.derivative_columns == 0
        assert spline.calc(2.0) == pytest.approx(0.0)

    def test_create_cubic_spline_with_boundary(self, source_csv):
        spline = create_cubic_spline(source_csv, boundary=(0.0, 12.0))
        assert spline.boundary_condition == (0.0, 12.0)

    def test_find_root_from_file(self, source_csv):
        assert create_newton_polynomial(source_csv).find_root(2) == 2.0

    def test_single_row_file(self, csv_file):
        newton = create_newton_polynomial(csv_file("x,y\n1,2\n"))
        with pytest.raises(NotEnoughInputDataError):
            newton.calc(1.0, 1)

    def test_load_config(self, tmp_path, source_csv):
        path = tmp_path / "run.yaml"
        path.write_text(f"data:\n  main: {source_csv.name}\npolynomial:\n  degree: 2\n")
        config = load_config(path)
        assert config.main_file == source_csv
        assert config.degree == 2
