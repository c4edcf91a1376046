"""
Digit Grid Parser

Parses the puzzle's plain-text format: one line per row, each character
a digit 0-9 giving that cell's heat loss.
"""

import logging
import time
from typing import List

import numpy as np

from ..errors import ParseError
from ..solver.grid import CostGrid
from .base import GridParser
from .result import ParseResult

logger = logging.getLogger(__name__)


class DigitGridParser(GridParser):
    """
    Parser for rectangular digit grids.

    Leading blank lines and trailing whitespace are ignored and
    \\r\\n line endings are accepted. Blank lines inside the grid,
    non-digit characters and ragged rows are rejected.
    """

    @property
    def name(self) -> str:
        return "digits"

    def parse(self, text: str, source: str = "<text>") -> ParseResult:
        start_time = time.perf_counter()

        # Leading spaces must reach the digit check
        lines = text.rstrip().lstrip("\r\n").splitlines()
        if not lines:
            raise ParseError("Tried to parse a grid with no lines", {"source": source})

        cols = len(lines[0])
        rows: List[List[int]] = []
        for line_no, line in enumerate(lines, start=1):
            if len(line) != cols:
                raise ParseError(
                    "Rows have unequal lengths",
                    {"source": source, "line": line_no, "expected": cols, "actual": len(line)},
                )
            row = []
            for col_no, char in enumerate(line, start=1):
                # str.isdigit accepts non-ASCII digits like '²'
                if char not in "0123456789":
                    raise ParseError(
                        f"A non-digit character {char!r}",
                        {"source": source, "line": line_no, "column": col_no},
                    )
                row.append(ord(char) - ord("0"))
            rows.append(row)

        grid = CostGrid(costs=np.array(rows, dtype=np.uint8))
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"Parsed {grid.rows}x{grid.cols} grid from {source} in {elapsed_ms:.1f}ms")

        return ParseResult(
            grid=grid,
            rows=grid.rows,
            cols=grid.cols,
            source=source,
            processing_time_ms=elapsed_ms,
        )
