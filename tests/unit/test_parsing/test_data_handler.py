"""Unit tests for reading point rows from files."""

import pytest
import numpy as np

from pyinterplib.parsing.io.data_handler import load_point_rows


class TestLoadPointRows:
    """Test cases for load_point_rows."""
    def test_csv_with_header(self, csv_file):
        path = csv_file("x,y\n0,1\n1,2\n2,5\n")
        data = load_point_rows(path)
        np.testing.assert_array_equal(data, [[0.0, 1.0], [1.0, 2.0], [2.0, 5.0]])
        assert data.dtype == np.float64

    def test_file_order_kept(self, csv_file):
        """Test that rows are returned unsorted; sorting is the node store's job."""
        data = load_point_rows(csv_file("x,y\n2,4\n0,0\n"))
        np.testing.assert_array_equal(data[:, 0], [2.0, 0.0])

    def test_without_header(self, csv_file):
        data = load_point_rows(csv_file("0,1\n1,2\n"), header=False)
        assert data.shape == (2, 2)

    def test_derivative_columns(self, source_csv):
        data = load_point_rows(source_csv)
        assert data.shape == (5, 4)

    def test_whitespace_separated_txt(self, csv_file):
        path = csv_file("x y dy\n0   0 1\n1 1   1\n", name="points.txt")
        data = load_point_rows(path, separator=r"\s+")
        np.testing.assert_array_equal(data, [[0.0, 0.0, 1.0], [1.0, 1.0, 1.0]])

    def test_max_fields(self, source_csv):
        assert load_point_rows(source_csv, max_fields=2).shape == (5, 2)

    def test_incomplete_trailing_column_dropped(self, csv_file):
        """Test that an optional column missing in some rows is dropped."""
        data = load_point_rows(csv_file("x,y,dy\n0,0,1\n1,1,\n"))
        assert data.shape == (2, 2)

    def test_missing_required_value(self, csv_file):
        with pytest.raises(ValueError, match=r"data rows \[2\]"):
            load_point_rows(csv_file("x,y\n0,1\n1,\n"))

    def test_non_numeric_value(self, csv_file):
        with pytest.raises(ValueError, match="non-numeric"):
            load_point_rows(csv_file("x,y\n0,abc\n"))

    def test_too_few_columns(self, csv_file):
        with pytest.raises(ValueError, match="at least 3 required"):
            load_point_rows(csv_file("x,y\n0,1\n"), min_fields=3)

    def test_empty_file(self, csv_file):
        with pytest.raises(ValueError, match="No data"):
            load_point_rows(csv_file(""))

    def test_header_only(self, csv_file):
        with pytest.raises(ValueError, match="No data"):
            load_point_rows(csv_file("x,y\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_point_rows(tmp_path / "missing.csv")

    def test_unsupported_extension(self, csv_file):
        with pytest.raises(ValueError, match="Unsupported file type"):
            load_point_rows(csv_file("x,y\n0,1\n", name="data.xlsx"))

    def test_directory(self, tmp_path):
        folder = tmp_path / "folder.csv"
        folder.mkdir()
        with pytest.raises(ValueError, match="not a file"):
            load_point_rows(folder)
