"""
Movement State Module - Directions and augmented search nodes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .grid import Position


class Direction(Enum):
    """
    Cardinal travel direction.

    Value is the (d_row, d_col) step; rows grow southwards.
    """
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def arrow(self) -> str:
        """Single character used when drawing a path."""
        return _ARROWS[self]

    def reverse(self) -> 'Direction':
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))

    def turn_left(self) -> 'Direction':
        """Rotate 90 degrees counter-clockwise."""
        d_row, d_col = self.value
        return Direction((-d_col, d_row))

    def turn_right(self) -> 'Direction':
        """Rotate 90 degrees clockwise."""
        d_row, d_col = self.value
        return Direction((d_col, -d_row))

    def is_perpendicular_to(self, other: 'Direction') -> bool:
        return other in (self.turn_left(), self.turn_right())

    def step(self, position: Position) -> Position:
        """Position one cell further in this direction (may be off-grid)."""
        d_row, d_col = self.value
        return (position[0] + d_row, position[1] + d_col)


_ARROWS = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}


@dataclass(frozen=True)
class MovementState:
    """
    Node in the augmented search graph.

    Two states are the same search node only when position, direction and
    run all match: the cheapest way into a cell depends on how it was
    entered.

    Attributes:
        position: (row, col) of the crucible
        direction: Last travel direction, None before the first move
        run: Consecutive steps taken in direction (0 before the first move)
    """
    position: Position
    direction: Optional[Direction] = None
    run: int = 0

    def __post_init__(self):
        if self.run < 0:
            raise ValueError(f"Run length cannot be negative: {self.run}")
        if (self.run == 0) != (self.direction is None):
            raise ValueError(
                f"Run {self.run} inconsistent with direction {self.direction}"
            )

    @classmethod
    def initial(cls, position: Position) -> 'MovementState':
        """Create the not-yet-moved state at a position."""
        return cls(position=position)

    @property
    def is_initial(self) -> bool:
        return self.direction is None

    def advance(self, direction: Direction) -> 'MovementState':
        """
        Create the state reached by one step in a direction.

        Continuing in the current direction extends the run; any other
        direction starts a new run of 1. Bounds and run limits are checked
        by the transition rule, not here.
        """
        run = self.run + 1 if direction == self.direction else 1
        return MovementState(position=direction.step(self.position),
                             direction=direction, run=run)
