"""Adaptive time step width from the stability conditions."""

import math


def stability_limits(u_max, v_max, dx, dy, re):
    """Diffusive and convective time step limits.

    Parameters
    ----------
    u_max, v_max : float
        Maximum velocity magnitudes. Zero gives an unbounded convective limit.
    dx, dy : float
        Mesh width.
    re : float
        Reynolds number.

    Returns
    -------
    diffusive, convective_x, convective_y : float
    """
    if dx == dy:
        diffusive = re * dx * dy / 4.0
    else:
        dx2 = dx * dx
        dy2 = dy * dy
        diffusive = re / 2.0 * dx2 * dy2 / (dx2 + dy2)

    convective_x = dx / u_max if u_max > 0.0 else math.inf
    convective_y = dy / v_max if v_max > 0.0 else math.inf

    return diffusive, convective_x, convective_y


def compute_time_step_width(u_max, v_max, dx, dy, re, tau, maximum_dt):
    """``min(tau * min(limits), maximum_dt)``."""
    limit = min(stability_limits(u_max, v_max, dx, dy, re))
    return min(tau * limit, maximum_dt)
