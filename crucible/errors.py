"""
Errors Module - Exception hierarchy for the crucible solver.

Hierarchy:
    CrucibleError (base)
    ├── ParseError          (also ValueError)  - malformed grid text
    ├── OutOfBounds         (also IndexError)  - cell lookup outside the grid
    ├── NoPathFound         (also LookupError) - target unreachable under the run rules
    └── InvalidConfigError  (also ValueError)  - illegal run bounds or unknown variant

Usage:
    from crucible.errors import ParseError

    try:
        result = parser.parse(text)
    except ParseError as e:
        logger.error(f"Could not parse grid: {e}")
        logger.error(f"Context: {e.context}")
"""

from typing import Any, Dict, Optional


class CrucibleError(Exception):
    """
    Base exception for all crucible errors.

    Attributes:
        message: Human-readable error message
        context: Extra key/value details (line numbers, offending values, ...)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} | Context: {context_str}"


class ParseError(CrucibleError, ValueError):
    """Grid text is empty, has a non-digit character or ragged rows."""


class OutOfBounds(CrucibleError, IndexError):
    """A cell position lies outside the grid."""


class NoPathFound(CrucibleError, LookupError):
    """The search exhausted its frontier without reaching the target."""


class InvalidConfigError(CrucibleError, ValueError):
    """Run bounds or variant configuration is invalid."""
