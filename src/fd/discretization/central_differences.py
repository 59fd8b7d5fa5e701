"""Central-difference discretization of the convective terms."""

from .base import Discretization
from .convection.central import du2_dx, duv_dy, duv_dx, dv2_dy


class CentralDifferences(Discretization):
    """Second-order central differences of face-averaged velocities."""

    def compute_du2_dx(self, i, j):
        a, b = self.grid.u.interior_storage_index(i, j)
        return du2_dx(self.grid.u.data, a, b, self.dx)

    def compute_duv_dy(self, i, j):
        a, b = self.grid.u.interior_storage_index(i, j)
        return duv_dy(self.grid.u.data, self.grid.v.data, a, b, self.dy)

    def compute_duv_dx(self, i, j):
        a, b = self.grid.v.interior_storage_index(i, j)
        return duv_dx(self.grid.u.data, self.grid.v.data, a, b, self.dx)

    def compute_dv2_dy(self, i, j):
        a, b = self.grid.v.interior_storage_index(i, j)
        return dv2_dy(self.grid.v.data, a, b, self.dy)
