"""
Settings Module for the Crucible Solver

Provides persistent storage for user preferences using JSON.
Settings are stored in crucible.json in the working directory.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import InvalidConfigError
from .solver.transitions import RunBounds

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("crucible.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "astar",
    "default_variant": "all",
    "variants": {
        "part1": {"min_run": 1, "max_run": 3},
        "part2": {"min_run": 4, "max_run": 10},
    },
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from crucible.json.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    if not isinstance(settings, dict):
        logger.warning("Settings file does not hold an object, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    # Merge with defaults to handle missing keys
    result = copy.deepcopy(DEFAULT_SETTINGS)
    variants = settings.pop("variants", None)
    result.update(settings)
    if isinstance(variants, dict):
        result["variants"].update(variants)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to crucible.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def get_variant_names(settings: Dict[str, Any]) -> List[str]:
    """Names of the configured puzzle variants, in file order."""
    return list(settings.get("variants", {}).keys())


def get_variant_bounds(settings: Dict[str, Any], name: str) -> RunBounds:
    """
    Look up the run bounds of a named puzzle variant.

    Args:
        settings: Loaded settings
        name: Variant name (e.g. "part1")

    Returns:
        RunBounds for the variant

    Raises:
        InvalidConfigError: If the variant is unknown or malformed
    """
    variants = settings.get("variants", {})
    if name not in variants:
        raise InvalidConfigError(f"Unknown variant: {name}",
                                 {"available": ", ".join(variants)})
    entry = variants[name]
    try:
        min_run = int(entry["min_run"])
        max_run = int(entry["max_run"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidConfigError(f"Malformed variant: {name}", {"entry": entry}) from e
    return RunBounds(min_run=min_run, max_run=max_run)
