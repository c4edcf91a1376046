"""
Grid Parser Factory

Factory for creating grid parser instances.
"""

import importlib
from typing import Dict, List, Type, Union

from .base import GridParser


# Registry of available parsers: "module.Class" paths or registered classes
_PARSER_REGISTRY: Dict[str, Union[str, Type[GridParser]]] = {
    "digits": "digit_parser.DigitGridParser",
}

# Cache for loaded parser classes
_PARSER_CACHE: Dict[str, Type[GridParser]] = {}


def _load_parser_class(parser_type: str) -> Type[GridParser]:
    """Lazily load a parser class by type."""
    if parser_type in _PARSER_CACHE:
        return _PARSER_CACHE[parser_type]

    entry = _PARSER_REGISTRY[parser_type]
    if isinstance(entry, str):
        module_name, class_name = entry.rsplit(".", 1)
        module = importlib.import_module(f".{module_name}", package=__package__)
        parser_class = getattr(module, class_name)
    else:
        parser_class = entry

    _PARSER_CACHE[parser_type] = parser_class
    return parser_class


def create_parser(parser_type: str = "digits") -> GridParser:
    """
    Create a grid parser by type.

    Args:
        parser_type: Parser type identifier. Available types:
            - "digits" (default): one digit per cell, one line per row

    Returns:
        GridParser instance

    Raises:
        ValueError: If parser_type is not recognized

    Example:
        parser = create_parser()
        result = parser.parse_file("inputs/day_17.txt")
        grid = result.grid
    """
    if parser_type not in _PARSER_REGISTRY:
        available = ", ".join(_PARSER_REGISTRY.keys())
        raise ValueError(f"Unknown parser type: {parser_type}. Available: {available}")

    return _load_parser_class(parser_type)()


def register_parser(name: str, parser_class: type) -> None:
    """
    Register a custom grid parser type.

    Args:
        name: Parser type identifier
        parser_class: GridParser subclass

    Example:
        from crucible.parsing import register_parser, GridParser

        class CsvGridParser(GridParser):
            ...

        register_parser("csv", CsvGridParser)
    """
    if not isinstance(parser_class, type) or not issubclass(parser_class, GridParser):
        raise TypeError(f"{parser_class} must be a subclass of GridParser")
    _PARSER_REGISTRY[name] = parser_class
    _PARSER_CACHE.pop(name, None)


def available_parsers() -> List[str]:
    """
    List available parser types.

    Returns:
        List of registered parser type names
    """
    return list(_PARSER_REGISTRY.keys())
