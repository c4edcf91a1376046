"""
Base Strategy Module - Abstract base class for search strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple

from .context import SolutionContext
from .solution import Solution, SolutionMetrics, SolutionStatus
from .state import MovementState
from .transitions import successors


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Find the cheapest path from the start to the target.

        Args:
            context: Solution context with grid, bounds and progress callback

        Returns:
            Solution with status, cost, path and metrics
        """
        pass

    def expand(self, context: SolutionContext,
               state: MovementState) -> Iterator[Tuple[MovementState, int]]:
        """
        Legal successors of a state with their incremental costs.

        Args:
            context: Solution context
            state: State to expand

        Returns:
            Iterator of (next_state, step_cost) tuples
        """
        return successors(context.grid, state, context.bounds)

    def _reconstruct_path(
        self,
        parents: Dict[MovementState, MovementState],
        goal: MovementState
    ) -> List[MovementState]:
        """
        Walk parent links back from the goal state.

        Args:
            parents: Map from state to the state it was reached from
            goal: Terminal state

        Returns:
            States from start to goal
        """
        path = [goal]
        current = goal
        while current in parents:
            current = parents[current]
            path.append(current)
        path.reverse()
        return path

    def _build_solution(
        self,
        cost: Optional[int],
        path: List[MovementState],
        metrics: SolutionMetrics,
        start_time: float
    ) -> Solution:
        """Build Solution object from search results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.strategy_name = self.name

        if cost is None:
            return Solution.not_found(metrics)
        return Solution(
            status=SolutionStatus.FOUND,
            cost=cost,
            path=path,
            metrics=metrics
        )
