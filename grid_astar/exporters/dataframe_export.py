"""
Export search results to Polars DataFrame and CSV
"""

import logging
from typing import Optional, Sequence

import polars as pl

from ..core.grid import GridCell
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, path_to_records

logger = logging.getLogger(__name__)

PATH_SCHEMA = {'step': pl.Int64, 'row': pl.Int64, 'col': pl.Int64}


def export_to_dataframe(path: Optional[Sequence[GridCell]]) -> pl.DataFrame:
    """
    Export a path to a Polars DataFrame with one row per step

    Schema:
        - step: 1-based step number
        - row: Row of the cell
        - col: Column of the cell

    An empty DataFrame with the same schema is returned for an empty path or
    when no path exists.
    """
    records = path_to_records(path)
    df = pl.DataFrame(records, schema=PATH_SCHEMA)
    logger.debug(f"Created DataFrame with {len(df)} path rows")
    return df


def export_to_csv(path: Optional[Sequence[GridCell]], file_path: str) -> pl.DataFrame:
    """
    Write a path to CSV (columns step,row,col)

    Returns:
        The DataFrame that was written

    Raises:
        PathValidationError: If file_path is invalid
        FileExportError: If the write fails
    """
    df = export_to_dataframe(path)

    try:
        validated_path = validate_file_path(file_path)
        df.write_csv(validated_path)
        logger.info(f"CSV path exported to: {validated_path}")
    except PathValidationError:
        raise
    except (OSError, pl.exceptions.PolarsError) as e:
        logger.error(f"Failed to write CSV file: {e}")
        raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return df
