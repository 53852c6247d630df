import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

from pyinterplib.data.constants import FileConstants, ProcessingConstants

logger = logging.getLogger(__name__)


def load_point_rows(file_path: Union[str, Path], min_fields: int = ProcessingConstants.MIN_FIELDS_PER_ROW,
                    separator: str = FileConstants.DEFAULT_SEPARATOR, header: bool = True,
                    max_fields: Optional[int] = None) -> np.ndarray:
    """
    Reads numeric point rows from a delimited text file.
    Args:
        file_path: Path to a ``.csv`` or ``.txt`` file
        min_fields: Number of leading columns every row must provide (x, y, derivatives)
        separator: Field separator; whitespace-separated files use ``r'\\s+'``
        header: Indicates if the file starts with a header row
        max_fields: Keep at most this many leading columns
    Returns:
        Float array of shape ``(rows, columns)`` in file order
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: If the file format is unsupported or the data is incomplete
    """
    file_path = Path(file_path)
    logger.info("Loading point rows from: %s", file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")
    file_extension = file_path.suffix.lower()
    if file_extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    file_size_mb = file_path.stat().st_size / (1024 * 1024)
    if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"File size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                         f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")
    try:
        df = pd.read_csv(
            file_path,
            sep=separator,
            header=0 if header else None,
            na_values=FileConstants.NA_VALUES,
            encoding=FileConstants.DEFAULT_ENCODING,
            engine='python' if len(separator) > 1 else 'c'
        )
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"No data found in file {file_path}: {str(e)}") from e
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading file {file_path}: {str(e)}") from e
    except Exception as e:
        raise ValueError(f"Error reading file {file_path}: {str(e)}") from e
    return _convert_rows(df, min_fields, max_fields, str(file_path))


def _convert_rows(df: pd.DataFrame, min_fields: int, max_fields: Optional[int], file_path: str) -> np.ndarray:
    """Convert the DataFrame to a float array and validate the required columns."""
    if df.empty:
        raise ValueError(f"No data found in file: {file_path}")
    if df.shape[1] < min_fields:
        raise ValueError(f"File {file_path} has {df.shape[1]} columns, at least {min_fields} required")
    if max_fields is not None:
        df = df.iloc[:, :max_fields]
    numeric = df.apply(pd.to_numeric, errors='coerce')
    data = numeric.to_numpy(dtype=np.float64)
    required = data[:, :min_fields]
    missing_rows = np.where(np.any(np.isnan(required), axis=1))[0]
    if len(missing_rows) > 0:
        # Row numbers as they appear in the file (1-based, after the header)
        raise ValueError(f"Missing or non-numeric values in required columns of {file_path} "
                         f"at data rows {(missing_rows + 1).tolist()}")
    # Optional trailing columns are only kept where every row provides them
    last = min_fields
    while last < data.shape[1] and not np.any(np.isnan(data[:, last])):
        last += 1
    if last < data.shape[1]:
        logger.warning("Dropping %d incomplete trailing column(s) from %s", data.shape[1] - last, file_path)
    data = data[:, :last]
    logger.info("Loaded %d rows with %d columns from %s", data.shape[0], data.shape[1], file_path)
    return data
