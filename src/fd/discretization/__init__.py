"""Finite-difference discretization schemes on the staggered grid."""

from .base import Discretization
from .central_differences import CentralDifferences
from .donor_cell import DonorCell

__all__ = ["Discretization", "CentralDifferences", "DonorCell"]
