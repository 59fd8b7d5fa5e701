"""Explicit momentum prediction of the intermediate velocities F and G."""

from numba import njit, prange

from fd.discretization.diffusion.central_diff import second_derivative_x, second_derivative_y
from fd.discretization.convection.central import du2_dx, duv_dy, duv_dx, dv2_dy
from fd.discretization.convection.upwind import (
    du2_dx_donor,
    duv_dy_donor,
    duv_dx_donor,
    dv2_dy_donor,
)


@njit(parallel=True, cache=True)
def compute_preliminary_velocities(u, v, f, g, dx, dy, re, gx, gy, dt, donor_cell, alpha):
    """Fill the interior of F and G.

    F = u + dt * (laplace(u) / Re - d(u^2)/dx - d(uv)/dy + gx)
    G = v + dt * (laplace(v) / Re - d(uv)/dx - d(v^2)/dy + gy)

    Parameters
    ----------
    u, v, f, g : np.ndarray
        Storage arrays; f and g are written on their interior only.
    donor_cell : bool
        Use the donor-cell convective terms with weight ``alpha``.
    """
    inv_re = 1.0 / re

    for a in prange(1, f.shape[0] - 1):
        for b in range(1, f.shape[1] - 1):
            diffusion = second_derivative_x(u, a, b, dx) + second_derivative_y(u, a, b, dy)
            if donor_cell:
                convection = du2_dx_donor(u, a, b, dx, alpha) + duv_dy_donor(u, v, a, b, dy, alpha)
            else:
                convection = du2_dx(u, a, b, dx) + duv_dy(u, v, a, b, dy)
            f[a, b] = u[a, b] + dt * (inv_re * diffusion - convection + gx)

    for a in prange(1, g.shape[0] - 1):
        for b in range(1, g.shape[1] - 1):
            diffusion = second_derivative_x(v, a, b, dx) + second_derivative_y(v, a, b, dy)
            if donor_cell:
                convection = duv_dx_donor(u, v, a, b, dx, alpha) + dv2_dy_donor(v, a, b, dy, alpha)
            else:
                convection = duv_dx(u, v, a, b, dx) + dv2_dy(v, a, b, dy)
            g[a, b] = v[a, b] + dt * (inv_re * diffusion - convection + gy)
