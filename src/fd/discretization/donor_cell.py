"""Donor-cell discretization of the convective terms."""

from .base import Discretization
from .convection.upwind import du2_dx_donor, duv_dy_donor, duv_dx_donor, dv2_dy_donor


class DonorCell(Discretization):
    """Central differences blended with an upwind estimate.

    Parameters
    ----------
    n_cells : tuple of int
        Number of cells ``(nx, ny)``.
    mesh_width : tuple of float
        Grid spacing ``(dx, dy)``.
    alpha : float
        Upwind weight in [0, 1]. 0 is central differencing.
    """

    uses_donor_cell = True

    def __init__(self, n_cells, mesh_width, alpha):
        super().__init__(n_cells, mesh_width)
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"Donor cell alpha must be in [0, 1], got {alpha}")
        self.alpha = float(alpha)

    def compute_du2_dx(self, i, j):
        a, b = self.grid.u.interior_storage_index(i, j)
        return du2_dx_donor(self.grid.u.data, a, b, self.dx, self.alpha)

    def compute_duv_dy(self, i, j):
        a, b = self.grid.u.interior_storage_index(i, j)
        return duv_dy_donor(self.grid.u.data, self.grid.v.data, a, b, self.dy, self.alpha)

    def compute_duv_dx(self, i, j):
        a, b = self.grid.v.interior_storage_index(i, j)
        return duv_dx_donor(self.grid.u.data, self.grid.v.data, a, b, self.dx, self.alpha)

    def compute_dv2_dy(self, i, j):
        a, b = self.grid.v.interior_storage_index(i, j)
        return dv2_dy_donor(self.grid.v.data, a, b, self.dy, self.alpha)
