from .base_pressure_solver import PressureSolver
from .kernels import sor_sweep


class SOR(PressureSolver):
    """Successive over-relaxation with relaxation factor ``omega``."""

    def __init__(self, discretization, epsilon, maximum_number_of_iterations, omega):
        super().__init__(discretization, epsilon, maximum_number_of_iterations)
        if not 0.0 < omega < 2.0:
            raise ValueError(f"SOR omega must be in (0, 2), got {omega}")
        self.omega = float(omega)

    def _sweep(self, p, rhs, dx, dy):
        sor_sweep(p, rhs, dx, dy, self.omega)
