"""Abstract discretization on a staggered grid."""

from abc import ABC, abstractmethod

from meshing import StaggeredGrid

from .diffusion.central_diff import second_derivative_x, second_derivative_y
from .gradient.pressure_gradient import pressure_gradient_x, pressure_gradient_y


class Discretization(ABC):
    """Finite-difference estimates of the momentum-equation terms.

    Owns the ``StaggeredGrid``. All ``compute_*`` methods take logical
    interior indices of the field the term is evaluated at (u for the
    x-momentum terms, v for the y-momentum terms) and never modify a field.

    Subclasses must:
    - Implement the four convective terms
    - Set ``uses_donor_cell`` and ``alpha`` for the interior-loop kernels

    Parameters
    ----------
    n_cells : tuple of int
        Number of cells ``(nx, ny)``.
    mesh_width : tuple of float
        Grid spacing ``(dx, dy)``.
    """

    uses_donor_cell = False
    alpha = 0.0

    def __init__(self, n_cells, mesh_width):
        self.grid = StaggeredGrid(n_cells, mesh_width)

    @property
    def dx(self):
        return self.grid.dx

    @property
    def dy(self):
        return self.grid.dy

    @property
    def n_cells(self):
        return self.grid.n_cells

    @property
    def mesh_width(self):
        return self.grid.mesh_width

    # ------------------------------------------------------------------
    # Diffusion (identical for all schemes)
    # ------------------------------------------------------------------
    def compute_d2u_dx2(self, i, j):
        a, b = self.grid.u.interior_storage_index(i, j)
        return second_derivative_x(self.grid.u.data, a, b, self.dx)

    def compute_d2u_dy2(self, i, j):
        a, b = self.grid.u.interior_storage_index(i, j)
        return second_derivative_y(self.grid.u.data, a, b, self.dy)

    def compute_d2v_dx2(self, i, j):
        a, b = self.grid.v.interior_storage_index(i, j)
        return second_derivative_x(self.grid.v.data, a, b, self.dx)

    def compute_d2v_dy2(self, i, j):
        a, b = self.grid.v.interior_storage_index(i, j)
        return second_derivative_y(self.grid.v.data, a, b, self.dy)

    # ------------------------------------------------------------------
    # Pressure gradient at velocity locations
    # ------------------------------------------------------------------
    def compute_dp_dx(self, i, j):
        """dp/dx at the location of u(i, j)."""
        a, b = self.grid.u.interior_storage_index(i, j)
        return pressure_gradient_x(self.grid.p.data, a, b, self.dx)

    def compute_dp_dy(self, i, j):
        """dp/dy at the location of v(i, j)."""
        a, b = self.grid.v.interior_storage_index(i, j)
        return pressure_gradient_y(self.grid.p.data, a, b, self.dy)

    # ------------------------------------------------------------------
    # Convection
    # ------------------------------------------------------------------
    @abstractmethod
    def compute_du2_dx(self, i, j):
        """d(u^2)/dx at u(i, j)."""

    @abstractmethod
    def compute_duv_dy(self, i, j):
        """d(uv)/dy at u(i, j)."""

    @abstractmethod
    def compute_duv_dx(self, i, j):
        """d(uv)/dx at v(i, j)."""

    @abstractmethod
    def compute_dv2_dy(self, i, j):
        """d(v^2)/dy at v(i, j)."""
