"""Pressure gradients at velocity locations.

u(i, j) sits between p(i, j) and p(i+1, j), v(i, j) between p(i, j) and
p(i, j+1), so the compact difference is centred on the velocity point.
"""

from numba import njit


@njit(inline="always", cache=True)
def pressure_gradient_x(p, a, b, dx):
    return (p[a + 1, b] - p[a, b]) / dx


@njit(inline="always", cache=True)
def pressure_gradient_y(p, a, b, dy):
    return (p[a, b + 1] - p[a, b]) / dy
