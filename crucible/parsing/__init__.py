"""
Parsing Module for the Crucible Solver

Pluggable parser architecture for turning puzzle text into cost grids.

Usage:
    from crucible.parsing import create_parser

    # Create a parser (digit grid)
    parser = create_parser()

    # Parse a file or a string
    result = parser.parse_file("inputs/day_17.txt")
    result = parser.parse("241\\n321\\n325")

    # Access the grid
    grid = result.grid
"""

# Public API - Result types
from .result import ParseResult

# Public API - Base class for custom parsers
from .base import GridParser

# Public API - Factory functions
from .factory import (
    create_parser,
    register_parser,
    available_parsers,
)

# Public API - Digit parser
from .digit_parser import DigitGridParser

# Debug utilities
from .debug import DEBUG_DIR, render_path_text, save_debug_image

__all__ = [
    # Result types
    "ParseResult",
    # Base class
    "GridParser",
    # Factory
    "create_parser",
    "register_parser",
    "available_parsers",
    # Parsers
    "DigitGridParser",
    # Debug
    "DEBUG_DIR",
    "render_path_text",
    "save_debug_image",
]
