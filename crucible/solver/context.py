"""
Solution Context Module - Inputs for a single search invocation.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..errors import OutOfBounds
from .grid import CostGrid, Position
from .state import MovementState
from .transitions import RunBounds


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the grid, run bounds and
    progress reporting.

    A context belongs to one search; the grid inside it is read-only and
    may be shared between contexts.

    Attributes:
        grid: Cost grid to search
        bounds: Run-length constraints
        start: Starting cell (defaults to the grid's top-left)
        progress_callback: Optional callback for progress updates
        start_time: When the context was created
    """
    grid: CostGrid
    bounds: RunBounds = field(default_factory=RunBounds)
    start: Optional[Position] = None
    progress_callback: Optional[Callable[[int, str], None]] = None
    start_time: float = field(default_factory=time.perf_counter)

    def __post_init__(self):
        if self.start is None:
            self.start = self.grid.start
        if not self.grid.in_bounds(self.start):
            raise OutOfBounds(
                "Start lies outside the grid",
                {"start": self.start, "rows": self.grid.rows, "cols": self.grid.cols},
            )

    @property
    def target(self) -> Position:
        return self.grid.target

    def start_state(self) -> MovementState:
        """Initial search node: at the start cell, not yet moved."""
        return MovementState.initial(self.start)

    def is_goal(self, state: MovementState) -> bool:
        """
        Goal predicate: at the target and allowed to stop there.

        Args:
            state: Popped search state

        Returns:
            True if the search may terminate on this state
        """
        return state.position == self.target and self.bounds.can_stop(state)

    def report_progress(self, expanded: int, message: str = "") -> None:
        """
        Report progress to caller.

        Args:
            expanded: States expanded so far
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(expanded, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since the context was created.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
