"""Finite difference projection method on a staggered grid.

Subpackages:
- discretization: stencils and the CentralDifferences / DonorCell schemes
- pressure_solvers: SOR and Gauss-Seidel for the pressure Poisson equation
- core: boundary values, time step width, momentum prediction, rhs, correction
"""
