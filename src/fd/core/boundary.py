"""Dirichlet boundary values for the velocities and the intermediate fluxes.

Arrays are raw storage of the staggered fields (ghost layer at index 0 and
-1). Top and bottom are set first and the sides last, so the corner ghost
cells always hold the side values.
"""


def apply_velocity_boundary_values(u, v, bc_bottom, bc_top, bc_left, bc_right):
    """Impose wall velocities on u and v.

    The component normal to a wall is set directly; the tangential one gets
    a ghost value extrapolated through the wall, ``2 * value - interior``,
    so that the wall average equals the prescribed value.

    Parameters
    ----------
    u, v : np.ndarray
        Storage arrays of u and v, modified in place.
    bc_bottom, bc_top, bc_left, bc_right : tuple of float
        Prescribed ``(u, v)`` on each wall.
    """
    # Bottom and top
    u[:, 0] = 2.0 * bc_bottom[0] - u[:, 1]
    u[:, -1] = 2.0 * bc_top[0] - u[:, -2]
    v[:, 0] = bc_bottom[1]
    v[:, -1] = bc_top[1]

    # Left and right
    u[0, :] = bc_left[0]
    u[-1, :] = bc_right[0]
    v[0, :] = 2.0 * bc_left[1] - v[1, :]
    v[-1, :] = 2.0 * bc_right[1] - v[-2, :]


def apply_flux_boundary_values(f, g, u, v):
    """Copy the boundary values of u into F and of v into G."""
    f[:, 0] = u[:, 0]
    f[:, -1] = u[:, -1]
    g[:, 0] = v[:, 0]
    g[:, -1] = v[:, -1]

    f[0, :] = u[0, :]
    f[-1, :] = u[-1, :]
    g[0, :] = v[0, :]
    g[-1, :] = v[-1, :]
