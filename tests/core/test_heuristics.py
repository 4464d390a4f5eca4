"""
Tests for the heuristic registry
"""

import math

import pytest
from hypothesis import given, strategies as st

from grid_astar.core.grid import Grid
from grid_astar.core.heuristics import (
    HEURISTIC_REGISTRY,
    register_heuristic,
    get_heuristic,
    list_heuristics,
    heuristic_exists,
    manhattan,
    octile,
    chebyshev,
    euclidean,
)
from tests.conftest import dijkstra_cost


class TestHeuristicValues:
    """Test suite for built-in heuristics"""

    def test_manhattan(self):
        assert manhattan(3, 4) == 7
        assert manhattan(0, 0) == 0

    def test_octile(self):
        """Test three diagonal steps plus one straight step"""
        assert octile(3, 4, 1.0, 1.4) == pytest.approx(5.2)

    def test_octile_caps_expensive_diagonals(self):
        """Test a diagonal is never charged more than two straight steps"""
        assert octile(2, 2, 1.0, 5.0) == pytest.approx(4.0)

    def test_chebyshev(self):
        assert chebyshev(3, 4, 1.0, 1.4) == pytest.approx(4.0)

    def test_euclidean(self):
        assert euclidean(3, 4, 1.0, 1.4) == pytest.approx(5 * 1.4 / math.sqrt(2))

    def test_manhattan_overestimates_diagonals(self):
        """Test the default heuristic is inadmissible for a pure diagonal"""
        assert manhattan(1, 1, 1.0, 1.4) > 1.4


class TestHeuristicRegistry:
    """Test suite for registration and lookup"""

    def test_builtins_registered(self):
        assert list_heuristics() == ['chebyshev', 'euclidean', 'manhattan', 'octile']
        assert get_heuristic('manhattan') is manhattan
        assert heuristic_exists('octile')

    def test_unknown_heuristic(self):
        assert get_heuristic('teleport') is None
        assert not heuristic_exists('teleport')

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_heuristic('manhattan')(lambda d_row, d_col, o, d: 0.0)

    def test_register_custom(self):
        """Test a new heuristic becomes available by name"""
        try:
            @register_heuristic('zero')
            def zero(d_row, d_col, orthogonal_cost, diagonal_cost):
                return 0.0

            assert get_heuristic('zero') is zero
            assert 'zero' in list_heuristics()
        finally:
            HEURISTIC_REGISTRY.pop('zero', None)

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            register_heuristic('not_callable')(42)


class TestHeuristicAdmissibility:
    """Property-based tests using Hypothesis"""

    @given(
        st.integers(min_value=0, max_value=6),
        st.integers(min_value=0, max_value=6),
        st.sampled_from(['octile', 'chebyshev', 'euclidean'])
    )
    def test_never_overestimates_on_open_grid(self, d_row, d_col, name):
        """Property: admissible heuristics are at most the true cost on an empty grid"""
        grid = Grid([[0] * 7 for _ in range(7)])
        true_cost = dijkstra_cost(grid, (0, 0), (d_row, d_col))

        estimate = get_heuristic(name)(d_row, d_col, 1.0, 1.4)

        assert estimate <= true_cost + 1e-9
