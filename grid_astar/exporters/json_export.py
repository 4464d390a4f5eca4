"""
Export search results to JSON format
"""

import json
import logging
from typing import Optional, Sequence

from ..core.astar import SearchStats
from ..core.grid import GridCell
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path

logger = logging.getLogger(__name__)


def build_result_document(
    path: Optional[Sequence[GridCell]],
    stats: Optional[SearchStats] = None
) -> dict:
    """
    Build the JSON-serializable result document

    ``found`` distinguishes "no path" (path is None) from a zero-step path.
    """
    document = {
        'found': path is not None,
        'path': [cell.as_dict() for cell in path] if path is not None else None,
    }
    if stats is not None:
        document['stats'] = stats.model_dump(mode='json')
    return document


def export_to_json(
    path: Optional[Sequence[GridCell]],
    stats: Optional[SearchStats] = None,
    file_path: Optional[str] = None,
    indent: int = 2
) -> str:
    """
    Export a search result to JSON

    Args:
        path: Steps returned by the engine, or None when no path exists
        stats: Optional statistics of the search
        file_path: Optional path to save the JSON file. If None, only returns the string
        indent: Number of spaces for indentation (default: 2)

    Returns:
        JSON string representation of the result

    Raises:
        PathValidationError: If file_path is invalid
        FileExportError: If serialization or the file write fails

    Examples:
        >>> export_to_json([GridCell(0, 1)], indent=None)
        '{"found": true, "path": [{"row": 0, "col": 1}]}'
    """
    document = build_result_document(path, stats)

    try:
        json_str = json.dumps(document, indent=indent)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed: {e}")
        raise FileExportError(f"Failed to serialize result to JSON: {e}") from e

    if file_path:
        try:
            validated_path = validate_file_path(file_path)
            validated_path.write_text(json_str, encoding='utf-8')
            logger.info(f"JSON result exported to: {validated_path}")

        except PathValidationError:
            raise
        except OSError as e:
            logger.error(f"Failed to write JSON file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return json_str
