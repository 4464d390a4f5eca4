"""
Export functionality for search results

- JSON: Machine-readable result document (path plus search statistics)
- DataFrame/CSV: Polars table with one row per step
"""

from .dataframe_export import export_to_dataframe, export_to_csv
from .json_export import export_to_json, build_result_document

from .exceptions import (
    ExporterError,
    FileExportError,
    PathValidationError
)

__all__ = [
    "export_to_dataframe",
    "export_to_csv",
    "export_to_json",
    "build_result_document",
    "ExporterError",
    "FileExportError",
    "PathValidationError",
]
