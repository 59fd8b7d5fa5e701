"""Staggered grid Navier-Stokes simulation.

Computation owns a Discretization (CentralDifferences or DonorCell) and a
PressureSolver (SOR or GaussSeidel) and runs the projection method loop.
"""

from .computation import Computation

__all__ = ["Computation"]
