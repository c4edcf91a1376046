"""
Cost Grid Module - Immutable weighted grid for the crucible puzzle.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np

from ..errors import OutOfBounds

Position = Tuple[int, int]  # (row, col)

MAX_CELL_COST = 9


@dataclass(frozen=True, eq=False)
class CostGrid:
    """
    Immutable cost grid representation.

    Cells hold the heat lost when the crucible enters them (0-9).
    The backing numpy array is made read-only on construction so the
    grid can be shared between independent searches.

    Attributes:
        costs: 2D uint8 array indexed [row, col]
        target: Goal cell (defaults to bottom-right corner)
    """
    costs: np.ndarray
    target: Optional[Position] = None
    min_cost: int = field(init=False)

    def __post_init__(self):
        costs = np.array(self.costs, dtype=np.uint8)
        if costs.ndim != 2 or costs.size == 0:
            raise ValueError(f"Cost grid must be a non-empty 2D array, got shape {costs.shape}")
        if int(costs.max()) > MAX_CELL_COST:
            raise ValueError(f"Cell costs must be in [0, {MAX_CELL_COST}]")
        costs.setflags(write=False)

        target = self.target
        if target is None:
            target = (costs.shape[0] - 1, costs.shape[1] - 1)
        target = (int(target[0]), int(target[1]))
        if not (0 <= target[0] < costs.shape[0] and 0 <= target[1] < costs.shape[1]):
            raise OutOfBounds("Target lies outside the grid",
                              {"target": target, "shape": costs.shape})

        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "costs", costs)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "min_cost", int(costs.min()))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]],
                  target: Optional[Position] = None) -> 'CostGrid':
        """
        Create CostGrid from nested sequences of ints.

        Args:
            rows: Row-major cell costs, all rows the same length
            target: Optional goal cell (bottom-right when omitted)

        Returns:
            CostGrid instance
        """
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"Rows have unequal lengths: {sorted(widths)}")
        return cls(costs=np.array(rows, dtype=np.uint8), target=target)

    def with_target(self, target: Position) -> 'CostGrid':
        """Return a copy of this grid aimed at another cell."""
        return CostGrid(costs=self.costs, target=target)

    @property
    def rows(self) -> int:
        """Get number of rows in grid."""
        return int(self.costs.shape[0])

    @property
    def cols(self) -> int:
        """Get number of columns in grid."""
        return int(self.costs.shape[1])

    @property
    def start(self) -> Position:
        """Top-left cell, where the crucible starts."""
        return (0, 0)

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cost(self, position: Position) -> int:
        """
        Get heat loss for entering a cell.

        Args:
            position: (row, col) tuple

        Returns:
            Cell cost (0-9)

        Raises:
            OutOfBounds: If position is outside the grid
        """
        if not self.in_bounds(position):
            raise OutOfBounds("Position outside grid",
                              {"position": position, "rows": self.rows, "cols": self.cols})
        row, col = position
        return int(self.costs[row, col])

    def to_text(self) -> str:
        """Render back to the one-line-per-row digit format."""
        return "\n".join("".join(str(int(v)) for v in row) for row in self.costs)

    def __str__(self) -> str:
        return self.to_text()

    def __hash__(self):
        """Enable using CostGrid as dict key or in sets."""
        return hash((self.costs.shape, self.costs.tobytes(), self.target))

    def __eq__(self, other):
        if not isinstance(other, CostGrid):
            return False
        return (self.target == other.target
                and np.array_equal(self.costs, other.costs))
