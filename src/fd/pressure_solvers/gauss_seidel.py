from .base_pressure_solver import PressureSolver
from .kernels import gauss_seidel_sweep


class GaussSeidel(PressureSolver):
    """Plain Gauss-Seidel, SOR with omega = 1."""

    def _sweep(self, p, rhs, dx, dy):
        gauss_seidel_sweep(p, rhs, dx, dy)
