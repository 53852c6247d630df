"""Unit tests for the YAML run configuration."""

import pytest
from pathlib import Path

from pyinterplib.core.exceptions import InvalidPolynomialDegreeError
from pyinterplib.parsing.config.run_config_parser import RunConfig, RunConfigParser


@pytest.fixture
def yaml_file(tmp_path):
    def _write(content):
        path = tmp_path / "run.yaml"
        path.write_text(content)
        return path
    return _write


class TestRunConfigParser:
    """Test cases for RunConfigParser."""
    def test_minimal_config_defaults(self, yaml_file):
        path = yaml_file("data:\n  main: points.csv\n")
        config = RunConfigParser(path).create_config()
        assert config.main_file == path.parent / "points.csv"
        assert config.xy_file is None
        assert config.separator == ","
        assert config.header is True
        assert config.degree == 3
        assert config.derivative_order == 2
        assert config.boundary == "natural"
        assert config.plot_directory == path.parent / "pyinterplib_plots"
        assert not config.has_system_files

    def test_full_config(self, yaml_file, tmp_path):
        path = yaml_file(
            "data:\n"
            "  main: data/main.csv\n"
            "  xy: data/xy.csv\n"
            f"  yx: {tmp_path / 'abs' / 'yx.csv'}\n"
            "  separator: ';'\n"
            "  header: false\n"
            "polynomial:\n"
            "  degree: 4\n"
            "  derivative_order: 1\n"
            "spline:\n"
            "  boundary: [0.5, -1]\n"
            "output:\n"
            "  plot_directory: plots\n"
        )
        config = RunConfigParser(path).create_config()
        assert config.main_file == tmp_path / "data" / "main.csv"
        assert config.xy_file == tmp_path / "data" / "xy.csv"
        assert config.yx_file == tmp_path / "abs" / "yx.csv"
        assert config.has_system_files
        assert config.separator == ";"
        assert config.header is False
        assert config.degree == 4
        assert config.derivative_order == 1
        assert config.boundary == (0.5, -1.0)
        assert config.plot_directory == tmp_path / "plots"

    @pytest.mark.parametrize("keyword", ["natural", "start", "start_end", "Start_End"])
    def test_boundary_keywords(self, yaml_file, keyword):
        config = RunConfigParser(yaml_file(f"data:\n  main: a.csv\nspline:\n  boundary: {keyword}\n")).create_config()
        assert config.boundary == keyword.lower()

    def test_unknown_boundary(self, yaml_file):
        with pytest.raises(ValueError, match="Unknown spline boundary"):
            RunConfigParser(yaml_file("data:\n  main: a.csv\nspline:\n  boundary: clamped\n")).create_config()

    def test_unknown_section_suggestion(self, yaml_file):
        with pytest.raises(ValueError, match="Did you mean 'polynomial'"):
            RunConfigParser(yaml_file("data:\n  main: a.csv\npolynomal:\n  degree: 2\n"))

    def test_missing_main(self, yaml_file):
        with pytest.raises(ValueError, match="data.main"):
            RunConfigParser(yaml_file("polynomial:\n  degree: 2\n")).create_config()

    def test_duplicate_keys(self, yaml_file):
        with pytest.raises(ValueError, match="Duplicate key"):
            RunConfigParser(yaml_file("data:\n  main: a.csv\ndata:\n  main: b.csv\n"))

    def test_not_a_mapping(self, yaml_file):
        with pytest.raises(ValueError, match="must be a mapping"):
            RunConfigParser(yaml_file("- a\n- b\n"))

    def test_invalid_degree_type(self, yaml_file):
        with pytest.raises(ValueError, match="Invalid run configuration"):
            RunConfigParser(yaml_file("data:\n  main: a.csv\npolynomial:\n  degree: high\n")).create_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RunConfigParser(tmp_path / "missing.yaml")


class TestRunConfig:
    """Test cases for RunConfig validation."""
    def test_paths_converted(self):
        config = RunConfig(main_file="a.csv", plot_directory="plots")
        assert config.main_file == Path("a.csv")
        assert config.plot_directory == Path("plots")

    def test_negative_degree(self):
        with pytest.raises(InvalidPolynomialDegreeError):
            RunConfig(main_file="a.csv", degree=-1)

    def test_boundary_pair(self):
        assert RunConfig(main_file="a.csv", boundary=[1, 2]).boundary == (1.0, 2.0)

    def test_bad_boundary_pair(self):
        with pytest.raises(ValueError, match="pair of numbers"):
            RunConfig(main_file="a.csv", boundary=[1, 2, 3])
