"""Donor-cell convective terms.

Each term is the central estimate plus ``alpha`` times an upwind correction
whose sign follows the advecting velocity at the face. ``alpha = 0`` gives
central differences, ``alpha = 1`` pure donor cell.
"""

from numba import njit

from .central import du2_dx, duv_dy, duv_dx, dv2_dy


@njit(inline="always", cache=True)
def du2_dx_donor(u, a, b, dx, alpha):
    """d(u^2)/dx at u(a, b)."""
    u_right = 0.5 * (u[a, b] + u[a + 1, b])
    u_left = 0.5 * (u[a - 1, b] + u[a, b])
    upwind = (
        abs(u_right) * 0.5 * (u[a, b] - u[a + 1, b])
        - abs(u_left) * 0.5 * (u[a - 1, b] - u[a, b])
    )
    return du2_dx(u, a, b, dx) + alpha / dx * upwind


@njit(inline="always", cache=True)
def duv_dy_donor(u, v, a, b, dy, alpha):
    """d(uv)/dy at u(a, b)."""
    v_top = 0.5 * (v[a, b] + v[a + 1, b])
    v_bottom = 0.5 * (v[a, b - 1] + v[a + 1, b - 1])
    upwind = (
        abs(v_top) * 0.5 * (u[a, b] - u[a, b + 1])
        - abs(v_bottom) * 0.5 * (u[a, b - 1] - u[a, b])
    )
    return duv_dy(u, v, a, b, dy) + alpha / dy * upwind


@njit(inline="always", cache=True)
def duv_dx_donor(u, v, a, b, dx, alpha):
    """d(uv)/dx at v(a, b)."""
    u_right = 0.5 * (u[a, b] + u[a, b + 1])
    u_left = 0.5 * (u[a - 1, b] + u[a - 1, b + 1])
    upwind = (
        abs(u_right) * 0.5 * (v[a, b] - v[a + 1, b])
        - abs(u_left) * 0.5 * (v[a - 1, b] - v[a, b])
    )
    return duv_dx(u, v, a, b, dx) + alpha / dx * upwind


@njit(inline="always", cache=True)
def dv2_dy_donor(v, a, b, dy, alpha):
    """d(v^2)/dy at v(a, b)."""
    v_top = 0.5 * (v[a, b] + v[a, b + 1])
    v_bottom = 0.5 * (v[a, b - 1] + v[a, b])
    upwind = (
        abs(v_top) * 0.5 * (v[a, b] - v[a, b + 1])
        - abs(v_bottom) * 0.5 * (v[a, b - 1] - v[a, b])
    )
    return dv2_dy(v, a, b, dy) + alpha / dy * upwind
