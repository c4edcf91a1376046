"""
Solver Package - Constrained shortest-path search for the crucible puzzle.

A crucible travels from the top-left to the bottom-right of a cost grid,
paying each entered cell's cost. It may not reverse, may move at most
max_run cells in a straight line and must move at least min_run cells
before turning or stopping. Strategies search the augmented state space
of (position, direction, run) and are selected at runtime by name.

Public API:
    - CostGrid: Immutable cost grid
    - Direction: Cardinal direction with rotations
    - MovementState: Augmented search node
    - RunBounds: min_run / max_run constraints
    - successors(): Transition rule
    - manhattan_heuristic(): Admissible lower bound
    - Solution / SolutionMetrics / SolutionStatus: Search result
    - SolutionContext: Inputs for one search
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from crucible.solver import CostGrid, RunBounds, SolutionContext, create_strategy

    grid = CostGrid.from_rows([[2, 4, 1], [3, 2, 1], [3, 2, 5]])
    context = SolutionContext(grid=grid, bounds=RunBounds(min_run=1, max_run=3))

    strategy = create_strategy("astar")
    solution = strategy.solve(context)

    if solution.found:
        print(f"Minimal heat loss: {solution.cost}")
    else:
        print("No path")
"""

# Core data structures
from .grid import CostGrid, Position
from .state import Direction, MovementState
from .transitions import RunBounds, successors, candidate_directions
from .heuristic import manhattan_distance, manhattan_heuristic, zero_heuristic
from .solution import Solution, SolutionMetrics, SolutionStatus
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "CostGrid",
    "Position",
    "Direction",
    "MovementState",
    "RunBounds",
    "Solution",
    "SolutionMetrics",
    "SolutionStatus",
    "SolutionContext",
    # Search building blocks
    "successors",
    "candidate_directions",
    "manhattan_distance",
    "manhattan_heuristic",
    "zero_heuristic",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
