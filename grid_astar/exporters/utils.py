"""
Utility functions for exporters
"""

import os
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..core.grid import GridCell
from .exceptions import PathValidationError

logger = logging.getLogger(__name__)

# Constants
MAX_FILENAME_LENGTH = 255


def validate_file_path(file_path: str) -> Path:
    """
    Validate and resolve a file path for export, creating parent directories

    Args:
        file_path: Path to validate

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path is invalid
    """
    if not file_path or not isinstance(file_path, (str, Path)):
        raise PathValidationError(f"File path must be a non-empty string, got: {type(file_path)}")

    filename = os.path.basename(str(file_path))
    if len(filename) > MAX_FILENAME_LENGTH:
        raise PathValidationError(
            f"Filename too long ({len(filename)} chars). Maximum is {MAX_FILENAME_LENGTH}"
        )

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}") from e

    if path.exists() and path.is_dir():
        raise PathValidationError(f"Path is a directory: {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PathValidationError(f"Cannot create directory '{path.parent}': {e}") from e

    return path


def path_to_records(path: Optional[Sequence[GridCell]]) -> List[Dict[str, int]]:
    """Turn a path into a list of {'step', 'row', 'col'} dicts (empty for None)"""
    if not path:
        return []
    return [
        {'step': step, 'row': cell.row, 'col': cell.col}
        for step, cell in enumerate(path, start=1)
    ]
