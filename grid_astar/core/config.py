"""
Configuration management for grid pathfinding with Pydantic validation
"""

from typing import Dict, List, Optional, Literal, Any, Union
from pathlib import Path
import os
import re
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from .grid import Grid, DEFAULT_PASSABLE_VALUE
from .heuristics import DEFAULT_HEURISTIC, heuristic_exists, list_heuristics


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class SearchConfig(BaseModel):
    """Search engine settings"""
    model_config = ConfigDict(frozen=True, extra='forbid')

    passable_value: int = Field(DEFAULT_PASSABLE_VALUE, description="Grid marker for a passable cell")
    orthogonal_cost: float = Field(1.0, gt=0, description="Cost of a horizontal or vertical step")
    diagonal_cost: float = Field(1.4, gt=0, description="Cost of a diagonal step")
    heuristic: str = Field(DEFAULT_HEURISTIC, description="Registered heuristic name")
    decrease_key: bool = Field(
        True,
        description="Re-heapify an open node after its cost improves (False keeps its stale heap position)"
    )

    @field_validator('heuristic')
    @classmethod
    def validate_heuristic(cls, v):
        """Ensure the heuristic is registered"""
        if not heuristic_exists(v):
            raise ValueError(f"Unknown heuristic '{v}'. Available: {', '.join(list_heuristics())}")
        return v


class GridSourceConfig(BaseModel):
    """Where the grid comes from: inline rows or a CSV file"""
    model_config = ConfigDict(extra='forbid')

    rows: Optional[List[List[int]]] = Field(None, description="Inline grid rows")
    csv_path: Optional[str] = Field(None, min_length=1, description="Path to a header-less CSV grid")

    @model_validator(mode='after')
    def validate_single_source(self):
        """Exactly one of rows / csv_path must be given"""
        if (self.rows is None) == (self.csv_path is None):
            raise ValueError("grid requires exactly one of 'rows' or 'csv_path'")
        return self


class OutputConfig(BaseModel):
    """Output configuration"""
    path_marker: str = Field('.', min_length=1, max_length=1, description="Character drawn on path cells")
    show_grid: bool = Field(True, description="Print the grid with the path overlaid")
    formats: List[Literal['text', 'json', 'csv']] = Field(
        default_factory=lambda: ['text'],
        min_length=1,
        description="Output formats"
    )
    directory: str = Field('pathfind_results', description="Directory for json/csv exports")
    file_prefix: str = Field('path', min_length=1, description="File prefix for exports")


class PathfindConfigModel(BaseModel):
    """Pydantic model for a pathfinding run configuration"""
    model_config = ConfigDict(extra='ignore')

    # Metadata (optional)
    version: Optional[Union[int, float, str]] = None
    description: Optional[str] = None

    # Required sections
    grid: GridSourceConfig
    start: List[int] = Field(..., min_length=2, max_length=2, description="[row, col] of the start cell")
    goal: List[int] = Field(..., min_length=2, max_length=2, description="[row, col] of the goal cell")

    # Optional sections with defaults
    waypoints: List[List[int]] = Field(default_factory=list, description="Intermediate [row, col] cells")
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator('waypoints')
    @classmethod
    def validate_waypoints(cls, v):
        """Each waypoint must be a [row, col] pair"""
        for waypoint in v:
            if len(waypoint) != 2:
                raise ValueError(f"Waypoint must be [row, col], got {waypoint}")
        return v


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports multiple formats:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}  (with default)

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            default_value = match.group(3)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set")

        value = re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

        return value

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    else:
        return value


# ============================================================================
# PathfindConfig Class (wrapper around Pydantic model)
# ============================================================================

class PathfindConfig:
    """Configuration for a pathfinding run with validation"""

    def __init__(self, config_dict: Dict, base_dir: Optional[Path] = None):
        """
        Initialize from dictionary (parsed from YAML) with Pydantic validation

        Args:
            config_dict: Raw configuration
            base_dir: Directory that relative csv_path and output directory values
                are resolved against
        """
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        config_dict = _substitute_env_vars(config_dict)

        try:
            self._model = PathfindConfigModel(**config_dict)
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {str(e)}") from e

        self.base_dir = base_dir or Path.cwd()

        # Metadata
        self.version = self._model.version
        self.description = self._model.description

        # Endpoints
        self.start = tuple(self._model.start)
        self.goal = tuple(self._model.goal)
        self.waypoints = [tuple(w) for w in self._model.waypoints]

        # Grid source
        self.grid_rows = self._model.grid.rows
        self.grid_csv_path = self._model.grid.csv_path

        # Search
        self.search = self._model.search

        # Output
        self.path_marker = self._model.output.path_marker
        self.show_grid = self._model.output.show_grid
        self.output_formats = self._model.output.formats
        self.output_dir = Path(self._model.output.directory)
        if not self.output_dir.is_absolute():
            self.output_dir = self.base_dir / self.output_dir
        self.file_prefix = self._model.output.file_prefix

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'PathfindConfig':
        """Load configuration from YAML file with validation"""
        try:
            with open(yaml_path, 'r') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        return cls(config_dict, base_dir=Path(yaml_path).resolve().parent)

    def load_grid(self) -> Grid:
        """Build the configured grid (inline rows or CSV file)"""
        passable_value = self.search.passable_value

        if self.grid_rows is not None:
            return Grid(self.grid_rows, passable_value=passable_value)

        csv_path = Path(self.grid_csv_path)
        if not csv_path.is_absolute():
            csv_path = self.base_dir / csv_path
        return Grid.from_csv(csv_path, passable_value=passable_value)

    def with_overrides(self, **search_overrides) -> 'PathfindConfig':
        """Return a copy with some search settings replaced (None values are ignored)"""
        config_dict = self.to_dict()
        overrides = {k: v for k, v in search_overrides.items() if v is not None}
        config_dict['search'].update(overrides)
        return PathfindConfig(config_dict, base_dir=self.base_dir)

    def to_dict(self) -> Dict:
        """Convert config back to dictionary"""
        grid: Dict[str, Any] = {}
        if self.grid_rows is not None:
            grid['rows'] = [list(row) for row in self.grid_rows]
        else:
            grid['csv_path'] = self.grid_csv_path

        return {
            'version': self.version,
            'description': self.description,
            'grid': grid,
            'start': list(self.start),
            'goal': list(self.goal),
            'waypoints': [list(w) for w in self.waypoints],
            'search': self.search.model_dump(),
            'output': {
                'path_marker': self.path_marker,
                'show_grid': self.show_grid,
                'formats': list(self.output_formats),
                'directory': str(self.output_dir),
                'file_prefix': self.file_prefix,
            },
        }
