"""Second derivatives by 3-point central differences.

All stencils take raw storage arrays and storage indices ``(a, b)``. They are
shared by the per-cell ``Discretization`` methods and the interior-loop
kernels.
"""

from numba import njit


@njit(inline="always", cache=True)
def second_derivative_x(phi, a, b, dx):
    """d2(phi)/dx2 at storage index (a, b)."""
    return (phi[a + 1, b] - 2.0 * phi[a, b] + phi[a - 1, b]) / (dx * dx)


@njit(inline="always", cache=True)
def second_derivative_y(phi, a, b, dy):
    """d2(phi)/dy2 at storage index (a, b)."""
    return (phi[a, b + 1] - 2.0 * phi[a, b] + phi[a, b - 1]) / (dy * dy)
