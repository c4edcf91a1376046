"""
Transition Rule Module - Legal crucible moves under run-length bounds.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..errors import InvalidConfigError
from .grid import CostGrid
from .state import Direction, MovementState


@dataclass(frozen=True)
class RunBounds:
    """
    Turn constraints for a crucible.

    Attributes:
        min_run: Steps required in a direction before turning or stopping (1 = no minimum)
        max_run: Most consecutive steps allowed in one direction
    """
    min_run: int = 1
    max_run: int = 3

    def __post_init__(self):
        if self.min_run < 1:
            raise InvalidConfigError("min_run must be at least 1",
                                     {"min_run": self.min_run})
        if self.max_run < self.min_run:
            raise InvalidConfigError("max_run must not be below min_run",
                                     {"min_run": self.min_run, "max_run": self.max_run})

    def can_continue(self, state: MovementState) -> bool:
        return state.direction is not None and state.run < self.max_run

    def can_turn(self, state: MovementState) -> bool:
        return state.direction is None or state.run >= self.min_run

    def can_stop(self, state: MovementState) -> bool:
        """True if the crucible may come to rest in this state."""
        return state.is_initial or state.run >= self.min_run


def candidate_directions(state: MovementState, bounds: RunBounds) -> List[Direction]:
    """
    Directions the run rules allow from a state, ignoring grid bounds.

    Args:
        state: Current movement state
        bounds: Run-length constraints

    Returns:
        List of directions (never includes a reversal)
    """
    if state.direction is None:
        return list(Direction)

    directions = []
    if bounds.can_continue(state):
        directions.append(state.direction)
    if bounds.can_turn(state):
        directions.append(state.direction.turn_left())
        directions.append(state.direction.turn_right())
    return directions


def successors(grid: CostGrid, state: MovementState,
               bounds: RunBounds) -> Iterator[Tuple[MovementState, int]]:
    """
    Generate legal successor states and the heat lost entering each.

    Moves that would leave the grid are skipped.

    Args:
        grid: Cost grid
        state: State to expand
        bounds: Run-length constraints

    Yields:
        (next_state, incremental_cost) tuples
    """
    for direction in candidate_directions(state, bounds):
        position = direction.step(state.position)
        if not grid.in_bounds(position):
            continue
        yield state.advance(direction), grid.cost(position)
