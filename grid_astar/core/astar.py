"""
A* pathfinding on a passability grid.

The engine allocates one SearchNode per grid cell up front and reuses them
for every search. Nodes touched by a search are recorded in a dirty list and
reset at the start of the next search, so repeated searches never pay for a
full-grid reset.

Movement is 8-directional. Orthogonal steps cost ``orthogonal_cost`` and
diagonal steps (row and column both change) cost ``diagonal_cost``. The
default Manhattan heuristic overestimates on diagonal moves, so the default
configuration may return a path that is valid but not the shortest one;
select the ``octile`` heuristic for guaranteed shortest paths.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from .binary_heap import BinaryHeap
from .config import SearchConfig
from .exceptions import InvalidPositionError
from .grid import Grid, GridCell
from .heuristics import get_heuristic
from .node import SearchNode, compare_by_f

logger = logging.getLogger(__name__)


class SearchStats(BaseModel):
    """Counters describing the most recent search

    Attributes:
        start: Start cell as (row, col)
        goal: Goal cell as (row, col)
        found: Whether the goal was reached
        expanded: Nodes popped from the open set and closed
        discovered: Nodes pushed onto the open set (start included)
        improved: Open nodes whose cost was lowered after discovery
        path_length: Number of steps in the returned path (None if no path)
        path_cost: Accumulated cost of the returned path (None if no path)
    """
    start: Tuple[int, int]
    goal: Tuple[int, int]
    found: bool = False
    expanded: int = 0
    discovered: int = 0
    improved: int = 0
    path_length: Optional[int] = None
    path_cost: Optional[float] = None


class AStar:
    """
    Reusable A* search engine bound to one grid.

    Not safe for concurrent ``find_path`` calls: node metadata is mutated in
    place. Use one engine per thread.
    """

    def __init__(
        self,
        grid: Union[Grid, Sequence[Sequence[int]]],
        config: Optional[SearchConfig] = None
    ):
        """
        Initialize the engine and allocate search nodes

        Args:
            grid: Grid instance, or raw rows of markers
            config: Search settings (default: SearchConfig())
        """
        self._config = config or SearchConfig()

        if not isinstance(grid, Grid):
            grid = Grid(grid, passable_value=self._config.passable_value)
        self._grid = grid

        self._heuristic = get_heuristic(self._config.heuristic)
        self._nodes: List[List[SearchNode]] = self._create_nodes()
        self._dirty_nodes: List[SearchNode] = []
        self.last_stats: Optional[SearchStats] = None

        logger.debug(
            f"A* engine ready on {self._grid!r} "
            f"(heuristic={self._config.heuristic}, decrease_key={self._config.decrease_key})"
        )

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def config(self) -> SearchConfig:
        return self._config

    def find_path(
        self,
        start_row: int,
        start_col: int,
        end_row: int,
        end_col: int
    ) -> Optional[List[GridCell]]:
        """
        Find a path from start to end.

        Args:
            start_row: Row of the start cell
            start_col: Column of the start cell
            end_row: Row of the goal cell
            end_col: Column of the goal cell

        Returns:
            Cells to step through, excluding the start and including the goal.
            An empty list when start equals goal. None when the goal cannot be
            reached.

        Raises:
            InvalidPositionError: If either cell does not exist or is blocked
        """
        # Validate before any node is touched
        start_node = self._get_node(start_row, start_col)
        end_node = self._get_node(end_row, end_col)

        self._reset_dirty_nodes()

        stats = SearchStats(start=(start_row, start_col), goal=(end_row, end_col))
        self.last_stats = stats

        open_set: BinaryHeap[SearchNode] = BinaryHeap(compare_by_f)

        start_node.g = 0.0
        start_node.h = self._get_h(start_node, end_node)
        start_node.f = start_node.g + start_node.h
        start_node.in_open_set = True
        open_set.push(start_node)
        self._dirty_nodes.append(start_node)
        stats.discovered += 1

        while open_set:
            current = open_set.pop()
            current.in_open_set = False
            current.in_closed_set = True
            stats.expanded += 1

            if current is end_node:
                path = self._path_to(current)
                stats.found = True
                stats.path_length = len(path)
                stats.path_cost = current.g
                logger.debug(
                    f"Path found {stats.start} -> {stats.goal}: {len(path)} steps, "
                    f"cost {current.g:.2f}, {stats.expanded} nodes expanded"
                )
                return path

            for n_row, n_col in self._grid.get_neighbors(current.row, current.col):
                neighbor = self._nodes[n_row][n_col]
                if neighbor.in_closed_set:
                    continue

                g_value = self._get_g(neighbor, current)
                h_value = self._get_h(neighbor, end_node)

                if neighbor.in_open_set:
                    if g_value + h_value < neighbor.f:
                        neighbor.g = g_value
                        neighbor.h = h_value
                        neighbor.f = g_value + h_value
                        neighbor.parent = current.position
                        stats.improved += 1
                        if self._config.decrease_key:
                            open_set.update(neighbor)
                else:
                    neighbor.g = g_value
                    neighbor.h = h_value
                    neighbor.f = g_value + h_value
                    neighbor.parent = current.position
                    neighbor.in_open_set = True
                    open_set.push(neighbor)
                    self._dirty_nodes.append(neighbor)
                    stats.discovered += 1

        logger.debug(
            f"No path {stats.start} -> {stats.goal} after expanding {stats.expanded} nodes"
        )
        return None

    def find_path_between(self, start: GridCell, end: GridCell) -> Optional[List[GridCell]]:
        """Same as find_path, taking GridCell endpoints"""
        return self.find_path(start.row, start.col, end.row, end.col)

    def find_route(self, waypoints: Sequence[Tuple[int, int]]) -> Optional[List[GridCell]]:
        """
        Route through several cells in order.

        After the call ``last_stats`` describes the whole route: counters are
        summed over the legs searched, and the length and cost cover every
        leg. A failed leg stops the route with ``found`` left False.

        Args:
            waypoints: (row, col) cells to visit, first one is the start

        Returns:
            Concatenated steps of every leg (start excluded), or None if any
            leg has no path

        Raises:
            ValueError: If fewer than two waypoints are given
            InvalidPositionError: If any waypoint does not exist or is blocked
        """
        if len(waypoints) < 2:
            raise ValueError(f"A route needs at least 2 waypoints, got {len(waypoints)}")

        # Validate every waypoint up front
        for row, col in waypoints:
            self._get_node(row, col)

        route_stats = SearchStats(start=tuple(waypoints[0]), goal=tuple(waypoints[-1]))
        complete_path: List[GridCell] = []
        route_cost = 0.0

        for (start_row, start_col), (end_row, end_col) in zip(waypoints, waypoints[1:]):
            segment = self.find_path(start_row, start_col, end_row, end_col)

            leg_stats = self.last_stats
            route_stats.expanded += leg_stats.expanded
            route_stats.discovered += leg_stats.discovered
            route_stats.improved += leg_stats.improved

            if segment is None:
                logger.debug(f"Route leg ({start_row}, {start_col}) -> ({end_row}, {end_col}) has no path")
                self.last_stats = route_stats
                return None

            complete_path.extend(segment)
            route_cost += leg_stats.path_cost

        route_stats.found = True
        route_stats.path_length = len(complete_path)
        route_stats.path_cost = route_cost
        self.last_stats = route_stats

        return complete_path

    def reset(self) -> None:
        """Clear the state left by the last search"""
        self._reset_dirty_nodes()
        self.last_stats = None

    def node_at(self, row: int, col: int) -> SearchNode:
        """Search node for a cell (for inspection)"""
        if not self._grid.is_valid(row, col):
            raise InvalidPositionError(row, col, "outside the grid")
        return self._nodes[row][col]

    # Internal helpers

    def _create_nodes(self) -> List[List[SearchNode]]:
        return [
            [SearchNode(r, c) for c in range(self._grid.row_length(r))]
            for r in range(self._grid.row_count)
        ]

    def _reset_dirty_nodes(self) -> None:
        for node in self._dirty_nodes:
            node.reset()
        self._dirty_nodes = []

    def _get_node(self, row: int, col: int) -> SearchNode:
        """Node for a passable cell, or InvalidPositionError"""
        if not self._grid.is_valid(row, col):
            raise InvalidPositionError(row, col, "outside the grid")
        if not self._grid.is_passable(row, col):
            raise InvalidPositionError(row, col, "cell is blocked")
        return self._nodes[row][col]

    def _get_g(self, node: SearchNode, current: SearchNode) -> float:
        if current.row != node.row and current.col != node.col:
            return current.g + self._config.diagonal_cost
        return current.g + self._config.orthogonal_cost

    def _get_h(self, node: SearchNode, end: SearchNode) -> float:
        return self._heuristic(
            abs(end.row - node.row),
            abs(end.col - node.col),
            self._config.orthogonal_cost,
            self._config.diagonal_cost
        )

    def _path_to(self, node: SearchNode) -> List[GridCell]:
        """Walk predecessor links back to the start, then reverse"""
        path = []
        current = node

        while current.parent is not None:
            path.append(GridCell(current.row, current.col))
            parent_row, parent_col = current.parent
            current = self._nodes[parent_row][parent_col]

        path.reverse()
        return path
