"""
Dijkstra Strategy - Uniform-cost search over the same augmented states.
"""

from ..factory import register_strategy
from ..grid import CostGrid
from ..heuristic import zero_heuristic
from ..state import MovementState
from .astar import AStarStrategy


@register_strategy
class DijkstraStrategy(AStarStrategy):
    """
    A* with a zero heuristic.

    Explores more states than A* but needs no lower bound; useful as a
    reference when checking heuristic changes.
    """
    name = "dijkstra"
    description = "Dijkstra (reference) - Uniform-cost search, no heuristic"

    def heuristic(self, grid: CostGrid, state: MovementState) -> int:
        return zero_heuristic(grid, state)
