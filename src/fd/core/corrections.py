from numba import njit, prange

from fd.discretization.gradient.pressure_gradient import pressure_gradient_x, pressure_gradient_y


@njit(parallel=True, cache=True)
def velocity_correction(u, v, f, g, p, dx, dy, dt):
    """
    Projection step on the interior: u = F - dt * dp/dx, v = G - dt * dp/dy.
    """
    for a in prange(1, u.shape[0] - 1):
        for b in range(1, u.shape[1] - 1):
            u[a, b] = f[a, b] - dt * pressure_gradient_x(p, a, b, dx)

    for a in prange(1, v.shape[0] - 1):
        for b in range(1, v.shape[1] - 1):
            v[a, b] = g[a, b] - dt * pressure_gradient_y(p, a, b, dy)
