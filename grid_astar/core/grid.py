"""
Grid model for A* pathfinding.

Holds the static passability data of a rectangular (possibly jagged) table of
integer markers and answers cell lookups. Cells outside the table, including
positions past the end of a short row, are treated as nonexistent.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union
from dataclasses import dataclass

import polars as pl

from .exceptions import GridFormatError

logger = logging.getLogger(__name__)

DEFAULT_PASSABLE_VALUE = 0

# Up-left, up-right, down-right, down-left, left, right, up, down
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 1), (1, 1), (1, -1),
    (0, -1), (0, 1), (-1, 0), (1, 0),
)


@dataclass(frozen=True)
class GridCell:
    """A (row, col) position on the grid"""
    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col

    def as_dict(self) -> dict:
        return {'row': self.row, 'col': self.col}

    def is_diagonal_to(self, other: 'GridCell') -> bool:
        """True if both row and column differ"""
        return self.row != other.row and self.col != other.col


class Grid:
    """
    Passability table for pathfinding.

    A cell is passable when its marker equals ``passable_value``; any other
    marker blocks it. The rows are copied on construction so the grid stays
    fixed even if the caller mutates its own lists afterwards.
    """

    def __init__(self, rows: Sequence[Sequence[int]], passable_value: int = DEFAULT_PASSABLE_VALUE):
        """
        Initialize grid.

        Args:
            rows: Sequence of rows, each a sequence of integer markers
            passable_value: Marker that denotes a passable cell (default: 0)

        Raises:
            GridFormatError: If rows is not a sequence of sequences
        """
        if isinstance(rows, (str, bytes)):
            raise GridFormatError("Grid rows must be a sequence of sequences, got a string")

        try:
            self._rows: Tuple[Tuple[int, ...], ...] = tuple(tuple(row) for row in rows)
        except TypeError as e:
            raise GridFormatError(f"Grid rows must be a sequence of sequences: {e}") from e

        self.passable_value = passable_value
        self.row_count = len(self._rows)
        self.col_count = max((len(row) for row in self._rows), default=0)

        logger.debug(
            f"Grid created: {self.row_count}x{self.col_count}, "
            f"{self.passable_count()} passable cells"
        )

    @classmethod
    def from_dataframe(cls, df: pl.DataFrame, passable_value: int = DEFAULT_PASSABLE_VALUE) -> 'Grid':
        """
        Build a grid from a Polars DataFrame, one DataFrame row per grid row

        Null cells are treated as blocked.
        """
        if df.width == 0:
            return cls([], passable_value=passable_value)

        blocked = passable_value + 1
        try:
            rows = [
                [blocked if value is None else int(value) for value in row]
                for row in df.iter_rows()
            ]
        except (TypeError, ValueError) as e:
            raise GridFormatError(f"Grid DataFrame must contain integer markers: {e}") from e

        return cls(rows, passable_value=passable_value)

    @classmethod
    def from_csv(cls, csv_path: Union[str, Path], passable_value: int = DEFAULT_PASSABLE_VALUE) -> 'Grid':
        """
        Load a grid from a header-less CSV file of integer markers

        Raises:
            FileNotFoundError: If the file does not exist
            GridFormatError: If the file cannot be parsed as integer markers
        """
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(f"Grid file not found: {csv_path}")

        try:
            df = pl.read_csv(path, has_header=False, infer_schema_length=0)
            df = df.with_columns(pl.all().str.strip_chars().cast(pl.Int64, strict=True))
        except pl.exceptions.PolarsError as e:
            raise GridFormatError(f"Failed to parse grid CSV '{csv_path}': {e}") from e

        logger.info(f"Loaded grid from {path} ({df.height} rows)")
        return cls.from_dataframe(df, passable_value=passable_value)

    @property
    def rows(self) -> List[List[int]]:
        """Copy of the raw markers"""
        return [list(row) for row in self._rows]

    def is_valid(self, row: int, col: int) -> bool:
        """Check if a position exists in the (possibly jagged) table"""
        return 0 <= row < self.row_count and 0 <= col < len(self._rows[row])

    def is_passable(self, row: int, col: int) -> bool:
        """Check if a cell exists and is passable"""
        return self.is_valid(row, col) and self._rows[row][col] == self.passable_value

    def value_at(self, row: int, col: int) -> Optional[int]:
        """Raw marker at a position, or None when the position does not exist"""
        if not self.is_valid(row, col):
            return None
        return self._rows[row][col]

    def row_length(self, row: int) -> int:
        return len(self._rows[row]) if 0 <= row < self.row_count else 0

    def get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get passable neighbors in all 8 directions.

        Diagonals come first, then orthogonals. Moving diagonally past blocked
        orthogonal cells is allowed.
        """
        neighbors = []

        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if self.is_passable(n_row, n_col):
                neighbors.append((n_row, n_col))

        return neighbors

    def passable_count(self) -> int:
        return sum(
            1 for row in self._rows for value in row if value == self.passable_value
        )

    def iter_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every existing (row, col) position in row-major order"""
        for r, row in enumerate(self._rows):
            for c in range(len(row)):
                yield r, c

    def __repr__(self) -> str:
        return f"Grid(rows={self.row_count}, cols={self.col_count}, passable_value={self.passable_value})"
