"""
Solution Module - Result of a crucible search.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from ..errors import NoPathFound
from .grid import CostGrid, Position
from .state import MovementState


class SolutionStatus(Enum):
    """Terminal outcome of a search."""
    FOUND = auto()
    NO_PATH = auto()


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_expanded: States popped and expanded
        states_pushed: Entries pushed onto the frontier
        stale_skipped: Popped entries ignored because a cheaper cost was known
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    states_expanded: int = 0
    states_pushed: int = 0
    stale_skipped: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    A missing path is a normal outcome: status is NO_PATH and cost is None.

    Attributes:
        status: FOUND or NO_PATH
        cost: Minimal total heat loss, None when no path exists
        path: States from the start state to the goal state (inclusive)
        metrics: Performance statistics
    """
    status: SolutionStatus
    cost: Optional[int] = None
    path: List[MovementState] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @classmethod
    def not_found(cls, metrics: Optional[SolutionMetrics] = None) -> 'Solution':
        return cls(status=SolutionStatus.NO_PATH,
                   metrics=metrics or SolutionMetrics())

    @property
    def found(self) -> bool:
        return self.status is SolutionStatus.FOUND

    @property
    def positions(self) -> List[Position]:
        """Cells visited, start cell first."""
        return [state.position for state in self.path]

    @property
    def step_count(self) -> int:
        """Number of moves on the path."""
        return max(0, len(self.path) - 1)

    def require_cost(self) -> int:
        """
        Get the cost, raising if the target was unreachable.

        Returns:
            Minimal total heat loss

        Raises:
            NoPathFound: If the search found no path
        """
        if self.cost is None:
            raise NoPathFound("No path was found for this grid",
                              {"strategy": self.metrics.strategy_name})
        return self.cost

    def path_cost(self, grid: CostGrid) -> int:
        """Sum of entered cell costs along the path (start cell is free)."""
        return sum(grid.cost(state.position) for state in self.path[1:])
