import logging
from dataclasses import dataclass, field
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ruamel.yaml import YAML, constructor, scanner

from pyinterplib.core.exceptions import InvalidDerivativeOrderError, InvalidPolynomialDegreeError
from pyinterplib.data.constants import ErrorMessages, FileConstants, ProcessingConstants
from pyinterplib.parsing.config.yaml_keys import (DATA_KEY, MAIN_FILE_KEY, XY_FILE_KEY, YX_FILE_KEY, SEPARATOR_KEY,
                                                  HEADER_KEY, POLYNOMIAL_KEY, DEGREE_KEY, DERIVATIVE_ORDER_KEY,
                                                  SPLINE_KEY, BOUNDARY_KEY, NATURAL_KEY, START_KEY, START_END_KEY,
                                                  OUTPUT_KEY, PLOT_DIRECTORY_KEY)

logger = logging.getLogger(__name__)

BoundarySetting = Union[str, Tuple[float, float]]


@dataclass
class RunConfig:
    """Settings of an interpolation session."""
    main_file: Path
    xy_file: Optional[Path] = None
    yx_file: Optional[Path] = None
    separator: str = FileConstants.DEFAULT_SEPARATOR
    header: bool = True
    degree: int = ProcessingConstants.DEFAULT_POLYNOMIAL_DEGREE
    derivative_order: int = ProcessingConstants.DEFAULT_DERIVATIVE_ORDER
    boundary: BoundarySetting = NATURAL_KEY
    plot_directory: Path = field(default_factory=lambda: Path(FileConstants.DEFAULT_PLOT_DIRECTORY))

    def __post_init__(self) -> None:
        self.main_file = Path(self.main_file)
        self.xy_file = Path(self.xy_file) if self.xy_file is not None else None
        self.yx_file = Path(self.yx_file) if self.yx_file is not None else None
        self.plot_directory = Path(self.plot_directory)
        if self.degree < 0:
            raise InvalidPolynomialDegreeError(ErrorMessages.INVALID_DEGREE.format(degree=self.degree))
        if self.derivative_order < 0:
            raise InvalidDerivativeOrderError(
                ErrorMessages.INVALID_DERIVATIVE_ORDER.format(order=self.derivative_order, available="no negative"))
        self.boundary = _parse_boundary(self.boundary)

    @property
    def has_system_files(self) -> bool:
        return self.xy_file is not None and self.yx_file is not None


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class RunConfigParser(YAMLFileParser):
    """Parser for interpolation run configuration files in YAML format."""

    VALID_SECTIONS = {DATA_KEY, POLYNOMIAL_KEY, SPLINE_KEY, OUTPUT_KEY}

    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        if not isinstance(self.config, dict):
            raise ValueError(f"Configuration in {self.config_path} must be a mapping, "
                             f"got {type(self.config).__name__}")
        self._validate_sections()

    def create_config(self) -> RunConfig:
        """Build the RunConfig, resolving relative paths against the YAML file's directory."""
        data = self._section(DATA_KEY)
        polynomial = self._section(POLYNOMIAL_KEY)
        spline = self._section(SPLINE_KEY)
        output = self._section(OUTPUT_KEY)
        if MAIN_FILE_KEY not in data:
            raise ValueError(f"Missing required key '{DATA_KEY}.{MAIN_FILE_KEY}' in {self.config_path}")
        try:
            run_config = RunConfig(
                main_file=self._resolve(data[MAIN_FILE_KEY]),
                xy_file=self._resolve(data.get(XY_FILE_KEY)),
                yx_file=self._resolve(data.get(YX_FILE_KEY)),
                separator=str(data.get(SEPARATOR_KEY, FileConstants.DEFAULT_SEPARATOR)),
                header=bool(data.get(HEADER_KEY, True)),
                degree=int(polynomial.get(DEGREE_KEY, ProcessingConstants.DEFAULT_POLYNOMIAL_DEGREE)),
                derivative_order=int(polynomial.get(DERIVATIVE_ORDER_KEY,
                                                    ProcessingConstants.DEFAULT_DERIVATIVE_ORDER)),
                boundary=spline.get(BOUNDARY_KEY, NATURAL_KEY),
                plot_directory=self._resolve(output.get(PLOT_DIRECTORY_KEY, FileConstants.DEFAULT_PLOT_DIRECTORY)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid run configuration in {self.config_path}: {str(e)}") from e
        logger.info("Run configuration: main=%s, degree=%d, derivative_order=%d, boundary=%s",
                    run_config.main_file, run_config.degree, run_config.derivative_order, run_config.boundary)
        return run_config

    def _validate_sections(self) -> None:
        for key in self.config:
            if key not in self.VALID_SECTIONS:
                suggestion = get_close_matches(str(key), self.VALID_SECTIONS, n=1)
                message = f"Unknown section '{key}' in {self.config_path}"
                if suggestion:
                    message += f". Did you mean '{suggestion[0]}'?"
                raise ValueError(message)

    def _section(self, key: str) -> Dict[str, Any]:
        section = self.config.get(key) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Section '{key}' in {self.config_path} must be a mapping")
        return section

    def _resolve(self, path: Optional[Union[str, Path]]) -> Optional[Path]:
        if path is None:
            return None
        path = Path(path)
        return path if path.is_absolute() else self.base_dir / path


def _parse_boundary(boundary: Any) -> BoundarySetting:
    """Accept 'natural', 'start', 'start_end' or an explicit ``[c_start, c_end]`` pair."""
    if isinstance(boundary, str):
        value = boundary.strip().lower()
        if value not in (NATURAL_KEY, START_KEY, START_END_KEY):
            raise ValueError(f"Unknown spline boundary '{boundary}'. "
                             f"Use '{NATURAL_KEY}', '{START_KEY}', '{START_END_KEY}' or [c_start, c_end]")
        return value
    try:
        c_start, c_end = boundary
        return float(c_start), float(c_end)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Spline boundary must be a keyword or a pair of numbers, got {boundary!r}") from e
