"""Iterative pressure Poisson solvers."""

from .base_pressure_solver import PressureSolver
from .gauss_seidel import GaussSeidel
from .sor import SOR

PRESSURE_SOLVERS = ("SOR", "GaussSeidel")


def create_pressure_solver(name, discretization, epsilon, maximum_number_of_iterations, omega=1.0):
    """Build the pressure solver selected by ``name``.

    Parameters
    ----------
    name : str
        ``"SOR"`` or ``"GaussSeidel"``.
    discretization : Discretization
        Owner of the grid the solver works on.
    epsilon : float
        Residual tolerance.
    maximum_number_of_iterations : int
        Iteration cap.
    omega : float, optional
        Relaxation factor, SOR only. Default is 1.0.

    Raises
    ------
    ValueError
        If ``name`` is not a known solver.
    """
    if name == "SOR":
        return SOR(discretization, epsilon, maximum_number_of_iterations, omega)
    if name == "GaussSeidel":
        return GaussSeidel(discretization, epsilon, maximum_number_of_iterations)
    raise ValueError(f"Unknown pressure solver: {name!r}. Choose from {PRESSURE_SOLVERS}")


__all__ = [
    "PressureSolver",
    "SOR",
    "GaussSeidel",
    "PRESSURE_SOLVERS",
    "create_pressure_solver",
]
