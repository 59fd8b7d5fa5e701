"""Data structures for simulation settings and results.

This module defines the run configuration and the result data structures
of the staggered grid solver.
"""

from .config import Settings
from .fields import Fields
from .time_series import TimeSeries

__all__ = [
    # Configuration
    "Settings",
    # Fields
    "Fields",
    # Time series
    "TimeSeries",
]
