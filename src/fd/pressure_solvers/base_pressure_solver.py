"""Abstract iterative solver for the pressure Poisson equation."""

from abc import ABC, abstractmethod

from .kernels import apply_neumann_boundary, residual_norm


class PressureSolver(ABC):
    """Iterates p towards ``laplace(p) = rhs`` on the interior.

    Works directly on the grid owned by ``discretization`` (no copy). After
    every sweep the Neumann ghost values are re-imposed and the residual is
    evaluated. The iteration stops when the residual falls below
    ``epsilon`` or after ``maximum_number_of_iterations`` sweeps. Reaching
    the cap is not an error: the state below records what happened.

    Attributes
    ----------
    iterations : int
        Sweeps done in the last ``solve()``.
    residual : float
        Residual after the last sweep.
    converged : bool
        Whether the last ``solve()`` reached ``epsilon``.
    residual_history : list of float
        Residual after every sweep of the last ``solve()``.
    """

    def __init__(self, discretization, epsilon, maximum_number_of_iterations):
        if epsilon <= 0.0:
            raise ValueError(f"Pressure solver epsilon must be positive, got {epsilon}")
        if maximum_number_of_iterations < 1:
            raise ValueError(
                f"maximumNumberOfIterations must be at least 1, got {maximum_number_of_iterations}"
            )

        self.discretization = discretization
        self.epsilon = float(epsilon)
        self.maximum_number_of_iterations = int(maximum_number_of_iterations)

        self.iterations = 0
        self.residual = float("inf")
        self.converged = False
        self.residual_history = []

    @abstractmethod
    def _sweep(self, p, rhs, dx, dy):
        """Update the interior of p once, in place."""

    def solve(self):
        """Run sweeps until converged or the iteration cap is reached."""
        grid = self.discretization.grid
        p = grid.p.data
        rhs = grid.rhs.data
        dx, dy = grid.dx, grid.dy

        apply_neumann_boundary(p)

        self.residual_history = []
        self.converged = False
        iteration = 0

        while True:
            self._sweep(p, rhs, dx, dy)
            apply_neumann_boundary(p)
            iteration += 1

            residual = residual_norm(p, rhs, dx, dy)
            self.residual_history.append(residual)

            if residual < self.epsilon:
                self.converged = True
                break
            if iteration >= self.maximum_number_of_iterations:
                break

        self.iterations = iteration
        self.residual = residual
