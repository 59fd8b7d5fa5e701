"""Sweep and residual kernels for the pressure Poisson equation.

All kernels work on the raw storage arrays of p and rhs; the interior is
storage ``1:-1`` along both axes. Sweeps run row by row (j outer, i inner)
and update p in place.
"""

import numpy as np
from numba import njit

from fd.discretization.diffusion.central_diff import second_derivative_x, second_derivative_y


@njit(cache=True)
def sor_sweep(p, rhs, dx, dy, omega):
    """One successive over-relaxation sweep over the interior."""
    dx2 = dx * dx
    dy2 = dy * dy
    factor = 0.5 * dx2 * dy2 / (dx2 + dy2)

    for b in range(1, p.shape[1] - 1):
        for a in range(1, p.shape[0] - 1):
            p_gs = factor * (
                (p[a + 1, b] + p[a - 1, b]) / dx2
                + (p[a, b + 1] + p[a, b - 1]) / dy2
                - rhs[a, b]
            )
            p[a, b] = (1.0 - omega) * p[a, b] + omega * p_gs


@njit(cache=True)
def gauss_seidel_sweep(p, rhs, dx, dy):
    """One Gauss-Seidel sweep over the interior."""
    dx2 = dx * dx
    dy2 = dy * dy
    factor = 0.5 * dx2 * dy2 / (dx2 + dy2)

    for b in range(1, p.shape[1] - 1):
        for a in range(1, p.shape[0] - 1):
            p[a, b] = factor * (
                (p[a + 1, b] + p[a - 1, b]) / dx2
                + (p[a, b + 1] + p[a, b - 1]) / dy2
                - rhs[a, b]
            )


@njit(cache=True)
def residual_norm(p, rhs, dx, dy):
    """Root mean square of ``laplace(p) - rhs`` over the interior."""
    total = 0.0
    for b in range(1, p.shape[1] - 1):
        for a in range(1, p.shape[0] - 1):
            r = second_derivative_x(p, a, b, dx) + second_derivative_y(p, a, b, dy) - rhs[a, b]
            total += r * r

    n_interior = (p.shape[0] - 2) * (p.shape[1] - 2)
    return np.sqrt(total / n_interior)


def apply_neumann_boundary(p):
    """Zero-gradient ghost values: copy the adjacent interior value."""
    p[0, 1:-1] = p[1, 1:-1]
    p[-1, 1:-1] = p[-2, 1:-1]
    p[:, 0] = p[:, 1]
    p[:, -1] = p[:, -2]
