"""
Tests for configuration loading and validation
"""

import pytest
import yaml
from pydantic import ValidationError

from grid_astar.core.config import SearchConfig, PathfindConfig, _substitute_env_vars
from grid_astar.cli.config_template import MINIMAL_CONFIG_TEMPLATE
from tests.conftest import REFERENCE_MAZE


def minimal_config(**overrides):
    config = {
        'grid': {'rows': [[0, 0], [0, 0]]},
        'start': [0, 0],
        'goal': [1, 1],
    }
    config.update(overrides)
    return config


class TestSearchConfig:
    """Test suite for SearchConfig"""

    def test_defaults(self):
        """Test defaults reproduce the reference costs and heuristic"""
        config = SearchConfig()

        assert config.passable_value == 0
        assert config.orthogonal_cost == 1.0
        assert config.diagonal_cost == 1.4
        assert config.heuristic == 'manhattan'
        assert config.decrease_key is True

    def test_unknown_heuristic_rejected(self):
        with pytest.raises(ValidationError, match="Unknown heuristic"):
            SearchConfig(heuristic='teleport')

    @pytest.mark.parametrize('field', ['orthogonal_cost', 'diagonal_cost'])
    def test_non_positive_costs_rejected(self, field):
        with pytest.raises(ValidationError):
            SearchConfig(**{field: 0})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            SearchConfig(max_steps=10)

    def test_frozen(self):
        config = SearchConfig()
        with pytest.raises(ValidationError):
            config.heuristic = 'octile'


class TestPathfindConfig:
    """Test suite for PathfindConfig"""

    def test_minimal_config(self):
        config = PathfindConfig(minimal_config())

        assert config.start == (0, 0)
        assert config.goal == (1, 1)
        assert config.waypoints == []
        assert config.search == SearchConfig()
        assert config.output_formats == ['text']
        assert config.path_marker == '.'

    def test_load_inline_grid(self):
        grid = PathfindConfig(minimal_config()).load_grid()
        assert grid.rows == [[0, 0], [0, 0]]

    def test_search_section(self):
        config = PathfindConfig(minimal_config(search={'heuristic': 'octile', 'passable_value': 2}))

        assert config.search.heuristic == 'octile'
        assert config.load_grid().passable_value == 2

    def test_both_grid_sources_rejected(self):
        with pytest.raises(ValueError, match="exactly one"):
            PathfindConfig(minimal_config(grid={'rows': [[0]], 'csv_path': 'grid.csv'}))

    def test_missing_grid_source_rejected(self):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            PathfindConfig(minimal_config(grid={}))

    def test_missing_goal_rejected(self):
        config = minimal_config()
        del config['goal']

        with pytest.raises(ValueError, match="Configuration validation failed"):
            PathfindConfig(config)

    def test_bad_coordinate_rejected(self):
        with pytest.raises(ValueError):
            PathfindConfig(minimal_config(start=[0, 0, 0]))

    def test_bad_waypoint_rejected(self):
        with pytest.raises(ValueError, match="Waypoint"):
            PathfindConfig(minimal_config(waypoints=[[1]]))

    def test_bad_output_format_rejected(self):
        with pytest.raises(ValueError):
            PathfindConfig(minimal_config(output={'formats': ['html']}))

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError, match="mapping"):
            PathfindConfig(['not', 'a', 'mapping'])

    def test_with_overrides(self):
        config = PathfindConfig(minimal_config())
        overridden = config.with_overrides(heuristic='octile', diagonal_cost=None)

        assert overridden.search.heuristic == 'octile'
        assert overridden.search.diagonal_cost == 1.4
        assert config.search.heuristic == 'manhattan'

    def test_to_dict_reloads(self):
        config = PathfindConfig(minimal_config(waypoints=[[0, 1]]))
        reloaded = PathfindConfig(config.to_dict())

        assert reloaded.to_dict() == config.to_dict()


class TestYamlLoading:
    """Test suite for YAML files and CSV grid paths"""

    def test_from_yaml(self, config_file):
        config = PathfindConfig.from_yaml(config_file())

        assert config.start == (9, 0)
        assert config.load_grid().rows == REFERENCE_MAZE

    def test_relative_csv_path_resolves_against_config_dir(self, tmp_path):
        (tmp_path / 'maze.csv').write_text("0,0\n1,0\n", encoding='utf-8')
        config_path = tmp_path / 'config.yaml'
        config_path.write_text(yaml.safe_dump(minimal_config(grid={'csv_path': 'maze.csv'})), encoding='utf-8')

        grid = PathfindConfig.from_yaml(config_path).load_grid()

        assert grid.rows == [[0, 0], [1, 0]]

    def test_relative_output_directory_resolves_against_config_dir(self, tmp_path):
        config_path = tmp_path / 'config.yaml'
        config_path.write_text(yaml.safe_dump(minimal_config(output={'directory': 'out'})), encoding='utf-8')

        config = PathfindConfig.from_yaml(config_path)

        assert config.output_dir == tmp_path.resolve() / 'out'

    def test_absolute_output_directory_is_kept(self, tmp_path):
        config = PathfindConfig(minimal_config(output={'directory': str(tmp_path / 'out')}))
        assert config.output_dir == tmp_path / 'out'

    def test_env_var_in_csv_path(self, tmp_path, monkeypatch):
        (tmp_path / 'maze.csv').write_text("0\n", encoding='utf-8')
        monkeypatch.setenv('GRID_DIR', str(tmp_path))

        config = PathfindConfig(minimal_config(grid={'csv_path': '${GRID_DIR}/maze.csv'}, start=[0, 0], goal=[0, 0]))

        assert config.grid_csv_path == f"{tmp_path}/maze.csv"
        assert config.load_grid().rows == [[0]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PathfindConfig.from_yaml(tmp_path / 'missing.yaml')

    def test_invalid_yaml(self, tmp_path):
        bad = tmp_path / 'bad.yaml'
        bad.write_text("grid: [unclosed", encoding='utf-8')

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            PathfindConfig.from_yaml(bad)

    def test_template_is_valid(self):
        """Test the init template loads and describes the reference maze"""
        config = PathfindConfig(yaml.safe_load(MINIMAL_CONFIG_TEMPLATE))

        assert config.load_grid().rows == REFERENCE_MAZE
        assert config.start == (9, 0)
        assert config.goal == (9, 9)


class TestEnvSubstitution:
    """Test suite for environment variable substitution"""

    def test_braced_and_simple(self, monkeypatch):
        monkeypatch.setenv('MAZE_NAME', 'maze')

        assert _substitute_env_vars('${MAZE_NAME}.csv') == 'maze.csv'
        assert _substitute_env_vars('$MAZE_NAME.csv') == 'maze.csv'

    def test_default_value(self, monkeypatch):
        monkeypatch.delenv('UNSET_GRID_VAR', raising=False)
        assert _substitute_env_vars('${UNSET_GRID_VAR:-fallback}') == 'fallback'

    def test_missing_variable_raises(self, monkeypatch):
        monkeypatch.delenv('UNSET_GRID_VAR', raising=False)

        with pytest.raises(ValueError, match="UNSET_GRID_VAR"):
            _substitute_env_vars('${UNSET_GRID_VAR}')

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv('MARKER', '*')

        result = _substitute_env_vars({'output': {'path_marker': '$MARKER'}, 'rows': [[0, 1]]})

        assert result == {'output': {'path_marker': '*'}, 'rows': [[0, 1]]}
