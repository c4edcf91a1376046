"""
Parse Result Dataclasses

Shared data structures for grid parser results.
"""

from dataclasses import dataclass

from ..solver.grid import CostGrid


@dataclass
class ParseResult:
    """Complete result of parsing one grid text."""
    grid: CostGrid              # Parsed, validated cost grid
    rows: int                   # Number of grid rows
    cols: int                   # Number of grid columns
    source: str                 # File path, "<stdin>" or "<sample>"
    processing_time_ms: float   # Time taken
