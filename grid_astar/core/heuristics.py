"""
Heuristic registry for A* distance estimates

Every heuristic takes the absolute row and column deltas between a cell and
the goal plus the configured step costs, and returns the estimated remaining
cost.
"""

import math
from typing import Callable, Dict, List, Optional

HeuristicFunc = Callable[[int, int, float, float], float]

# Global registry mapping heuristic names to functions
HEURISTIC_REGISTRY: Dict[str, HeuristicFunc] = {}

DEFAULT_HEURISTIC = 'manhattan'


def register_heuristic(name: str):
    """Decorator to register a heuristic function in the global registry

    Usage:
        @register_heuristic("manhattan")
        def manhattan(d_row, d_col, orthogonal_cost, diagonal_cost):
            ...

    Args:
        name: Unique identifier for the heuristic (used in configs and the CLI)

    Returns:
        Decorator function that registers the function

    Raises:
        TypeError: If the decorated object is not callable
        ValueError: If the heuristic name is already registered
    """
    def decorator(func: HeuristicFunc) -> HeuristicFunc:
        if not callable(func):
            raise TypeError(f"Heuristic '{name}' must be callable")

        if name in HEURISTIC_REGISTRY:
            raise ValueError(
                f"Heuristic '{name}' is already registered by {HEURISTIC_REGISTRY[name].__name__}"
            )

        HEURISTIC_REGISTRY[name] = func
        return func

    return decorator


def get_heuristic(name: str) -> Optional[HeuristicFunc]:
    """Retrieve a heuristic by name, or None if unknown"""
    return HEURISTIC_REGISTRY.get(name)


def list_heuristics() -> List[str]:
    """Sorted list of registered heuristic names"""
    return sorted(HEURISTIC_REGISTRY.keys())


def heuristic_exists(name: str) -> bool:
    return name in HEURISTIC_REGISTRY


@register_heuristic('manhattan')
def manhattan(d_row: int, d_col: int, orthogonal_cost: float = 1.0, diagonal_cost: float = 1.4) -> float:
    """
    Manhattan distance in cell units.

    Overestimates when diagonal moves are cheaper than two orthogonal moves,
    so paths found with it are not guaranteed to be shortest.
    """
    return d_row + d_col


@register_heuristic('octile')
def octile(d_row: int, d_col: int, orthogonal_cost: float = 1.0, diagonal_cost: float = 1.4) -> float:
    """Exact cost on an empty 8-connected grid; admissible and consistent"""
    diagonal_steps = min(d_row, d_col)
    straight_steps = max(d_row, d_col) - diagonal_steps
    # A diagonal never costs more than two orthogonal steps and a straight
    # step never more than one diagonal
    diagonal_step_cost = min(diagonal_cost, 2 * orthogonal_cost)
    straight_step_cost = min(orthogonal_cost, diagonal_cost)
    return diagonal_steps * diagonal_step_cost + straight_steps * straight_step_cost


@register_heuristic('chebyshev')
def chebyshev(d_row: int, d_col: int, orthogonal_cost: float = 1.0, diagonal_cost: float = 1.4) -> float:
    return max(d_row, d_col) * min(orthogonal_cost, diagonal_cost)


@register_heuristic('euclidean')
def euclidean(d_row: int, d_col: int, orthogonal_cost: float = 1.0, diagonal_cost: float = 1.4) -> float:
    return math.hypot(d_row, d_col) * min(orthogonal_cost, diagonal_cost / math.sqrt(2))
