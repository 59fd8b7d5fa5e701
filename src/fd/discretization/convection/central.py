"""Convective terms by central differences of face-averaged velocities.

u and v share the same storage offset, so all stencils are written in
storage indices of the field being updated (u for du2/dx and duv/dy, v for
duv/dx and dv2/dy).
"""

from numba import njit


@njit(inline="always", cache=True)
def du2_dx(u, a, b, dx):
    """d(u^2)/dx at u(a, b)."""
    u_right = 0.5 * (u[a, b] + u[a + 1, b])
    u_left = 0.5 * (u[a - 1, b] + u[a, b])
    return (u_right * u_right - u_left * u_left) / dx


@njit(inline="always", cache=True)
def duv_dy(u, v, a, b, dy):
    """d(uv)/dy at u(a, b)."""
    v_top = 0.5 * (v[a, b] + v[a + 1, b])
    v_bottom = 0.5 * (v[a, b - 1] + v[a + 1, b - 1])
    u_top = 0.5 * (u[a, b] + u[a, b + 1])
    u_bottom = 0.5 * (u[a, b - 1] + u[a, b])
    return (v_top * u_top - v_bottom * u_bottom) / dy


@njit(inline="always", cache=True)
def duv_dx(u, v, a, b, dx):
    """d(uv)/dx at v(a, b)."""
    u_right = 0.5 * (u[a, b] + u[a, b + 1])
    u_left = 0.5 * (u[a - 1, b] + u[a - 1, b + 1])
    v_right = 0.5 * (v[a, b] + v[a + 1, b])
    v_left = 0.5 * (v[a - 1, b] + v[a, b])
    return (u_right * v_right - u_left * v_left) / dx


@njit(inline="always", cache=True)
def dv2_dy(v, a, b, dy):
    """d(v^2)/dy at v(a, b)."""
    v_top = 0.5 * (v[a, b] + v[a, b + 1])
    v_bottom = 0.5 * (v[a, b - 1] + v[a, b])
    return (v_top * v_top - v_bottom * v_bottom) / dy
