"""
A* Strategy - Best-first search over augmented movement states.

Each search node is (position, direction, run), so the run-length rules
become plain graph edges and a standard A* finds the optimal path.

Frontier entries are ordered by (f, h, seq): lowest f first, then the
entry closer to the target, then FIFO by insertion order. States never
need to be compared with each other.
"""

import heapq
import logging
import time
from typing import Dict, List, Tuple

from ..base import SolverStrategy
from ..context import SolutionContext
from ..factory import register_strategy
from ..grid import CostGrid
from ..heuristic import manhattan_heuristic
from ..solution import Solution, SolutionMetrics
from ..state import MovementState

logger = logging.getLogger(__name__)

# Expansions between progress reports
PROGRESS_INTERVAL = 10_000

FrontierEntry = Tuple[int, int, int, int, MovementState]  # (f, h, seq, g, state)


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    A* search with the Manhattan lower bound.

    Algorithm:
        1. Push the start state with cost 0
        2. Pop the lowest-f entry, skipping stale ones
        3. Stop if the state is at the target and allowed to stop there
        4. Otherwise relax every legal successor, keeping only improvements
        5. An empty frontier means the target is unreachable
    """
    name = "astar"
    description = "A* (default) - Manhattan-guided best-first search"

    def heuristic(self, grid: CostGrid, state: MovementState) -> int:
        return manhattan_heuristic(grid, state)

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the minimal heat loss from start to target.

        Args:
            context: Solution context with grid and run bounds

        Returns:
            Solution with cost and path, or a NO_PATH solution
        """
        start_time = time.perf_counter()
        grid = context.grid
        metrics = SolutionMetrics()

        start = context.start_state()
        best_cost: Dict[MovementState, int] = {start: 0}
        parents: Dict[MovementState, MovementState] = {}
        frontier: List[FrontierEntry] = []
        seq = 0

        h_start = self.heuristic(grid, start)
        heapq.heappush(frontier, (h_start, h_start, seq, 0, start))
        metrics.states_pushed = 1

        while frontier:
            _, _, _, cost, state = heapq.heappop(frontier)

            # Ignore stale pops
            if cost > best_cost.get(state, cost):
                metrics.stale_skipped += 1
                continue

            if context.is_goal(state):
                path = self._reconstruct_path(parents, state)
                logger.info(
                    f"[{self.name}] Reached {state.position} with cost {cost}: "
                    f"{metrics.states_expanded} expanded, {metrics.states_pushed} pushed"
                )
                return self._build_solution(cost, path, metrics, start_time)

            metrics.states_expanded += 1
            if metrics.states_expanded % PROGRESS_INTERVAL == 0:
                message = f"{metrics.states_expanded} states expanded, frontier {len(frontier)}"
                logger.debug(f"[{self.name}] {message}")
                context.report_progress(metrics.states_expanded, message)

            for next_state, step_cost in self.expand(context, state):
                next_cost = cost + step_cost
                known = best_cost.get(next_state)
                if known is not None and next_cost >= known:
                    continue

                best_cost[next_state] = next_cost
                parents[next_state] = state
                h = self.heuristic(grid, next_state)
                seq += 1
                heapq.heappush(frontier, (next_cost + h, h, seq, next_cost, next_state))
                metrics.states_pushed += 1

        logger.info(
            f"[{self.name}] No path to {context.target} under {context.bounds}: "
            f"{metrics.states_expanded} states expanded"
        )
        return self._build_solution(None, [], metrics, start_time)
