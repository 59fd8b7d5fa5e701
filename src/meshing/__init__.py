"""Staggered grid field storage."""

from .field_variable import FieldVariable
from .staggered_grid import StaggeredGrid

__all__ = ["FieldVariable", "StaggeredGrid"]
