"""
Crucible - minimal heat loss solver for run-constrained grid paths.
"""

__version__ = "0.1.0"
