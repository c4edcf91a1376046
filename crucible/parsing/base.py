"""
Grid Parser Base Interface

Abstract base class defining the grid parser contract.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .result import ParseResult


class GridParser(ABC):
    """
    Abstract base class for grid parsers.

    All parser implementations must inherit from this class and implement
    the parse() method to turn puzzle text into a CostGrid.
    """

    @abstractmethod
    def parse(self, text: str, source: str = "<text>") -> ParseResult:
        """
        Parse puzzle text into a cost grid.

        Args:
            text: Raw puzzle input
            source: Where the text came from, for messages

        Returns:
            ParseResult containing:
            - grid: CostGrid - validated, read-only cost grid
            - rows / cols: int - grid dimensions
            - source: str - origin of the text
            - processing_time_ms: float - processing duration

        Raises:
            ParseError: If the text is not a valid grid
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Parser identifier.

        Returns:
            String name identifying this parser type (e.g., "digits")
        """
        pass

    def parse_file(self, path: Union[str, Path]) -> ParseResult:
        """
        Read and parse a grid file.

        Args:
            path: Path to a UTF-8 text file

        Returns:
            ParseResult for the file contents

        Raises:
            OSError: If the file cannot be read
            ParseError: If the contents are not a valid grid
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        return self.parse(text, source=str(path))
