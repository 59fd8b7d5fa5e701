import numpy as np
from numba import njit, prange


@njit(parallel=True, cache=True)
def compute_divergence(fx, fy, dx, dy, scale=1.0, out=None):
    """
    Discrete divergence of a staggered vector field at cell centres.

    ``fx`` has u layout, ``fy`` v layout. Writes
    ``scale * ((fx[i] - fx[i-1]) / dx + (fy[j] - fy[j-1]) / dy)`` into the
    interior of ``out`` (p layout). With ``fx, fy = F, G`` and
    ``scale = 1 / dt`` this is the pressure right-hand side.
    """
    if out is None:
        out = np.zeros((fy.shape[0], fx.shape[1]))

    for a in prange(1, out.shape[0] - 1):
        for b in range(1, out.shape[1] - 1):
            out[a, b] = scale * (
                (fx[a, b] - fx[a - 1, b]) / dx + (fy[a, b] - fy[a, b - 1]) / dy
            )

    return out
