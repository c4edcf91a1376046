"""
Heuristic Module - Lower bounds on remaining heat loss.
"""

from .grid import CostGrid, Position
from .state import MovementState


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def manhattan_heuristic(grid: CostGrid, state: MovementState) -> int:
    """
    Admissible, consistent estimate of remaining cost to the target.

    Every remaining step costs at least the cheapest cell on the grid,
    so the Manhattan distance is scaled by grid.min_cost. Grids with
    zero-cost cells fall back to 0.

    Args:
        grid: Cost grid (provides target and min_cost)
        state: State to estimate from

    Returns:
        Lower bound on the cost still to pay
    """
    return manhattan_distance(state.position, grid.target) * grid.min_cost


def zero_heuristic(grid: CostGrid, state: MovementState) -> int:
    """Uninformed estimate; turns A* into uniform-cost search."""
    return 0
