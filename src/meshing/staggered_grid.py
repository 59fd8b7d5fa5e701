"""Staggered (MAC) grid holding all fields of the projection method.

Layout for ``n_cells = (nx, ny)`` and mesh width ``(dx, dy)``:

- u, F at vertical cell faces, ``u(i, j)`` at ``((i+1) dx, (j+1/2) dy)``,
  logical range i in [-1, nx), j in [-1, ny+1).
- v, G at horizontal cell faces, ``v(i, j)`` at ``((i+1/2) dx, (j+1) dy)``,
  logical range i in [-1, nx+1), j in [-1, ny).
- p, rhs at cell centers, ``p(i, j)`` at ``((i+1/2) dx, (j+1/2) dy)``,
  logical range i in [-1, nx+1), j in [-1, ny+1).

Every field stores its first logical index (-1) at storage index 0, so the
storage index is the logical index plus one in both directions. The interior
of every field is storage ``1:-1`` along both axes.
"""

import numpy as np

from .field_variable import FieldVariable


class StaggeredGrid:
    """Owns u, v, p, F, G and rhs with their staggered index ranges.

    Parameters
    ----------
    n_cells : tuple of int
        Number of cells ``(nx, ny)``.
    mesh_width : tuple of float
        Grid spacing ``(dx, dy)``.
    """

    def __init__(self, n_cells, mesh_width):
        nx, ny = int(n_cells[0]), int(n_cells[1])
        dx, dy = float(mesh_width[0]), float(mesh_width[1])
        if nx < 1 or ny < 1:
            raise ValueError(f"Number of cells must be positive, got {n_cells}")
        if dx <= 0.0 or dy <= 0.0:
            raise ValueError(f"Mesh width must be positive, got {mesh_width}")

        self._n_cells = (nx, ny)
        self._mesh_width = (dx, dy)

        u_origin = (0.0, -0.5 * dy)
        v_origin = (-0.5 * dx, 0.0)
        p_origin = (-0.5 * dx, -0.5 * dy)

        self.u = FieldVariable("u", self.u_i_range, self.u_j_range, u_origin, self._mesh_width)
        self.v = FieldVariable("v", self.v_i_range, self.v_j_range, v_origin, self._mesh_width)
        self.p = FieldVariable("p", self.p_i_range, self.p_j_range, p_origin, self._mesh_width)
        self.f = FieldVariable("F", self.u_i_range, self.u_j_range, u_origin, self._mesh_width)
        self.g = FieldVariable("G", self.v_i_range, self.v_j_range, v_origin, self._mesh_width)
        self.rhs = FieldVariable("rhs", self.p_i_range, self.p_j_range, p_origin, self._mesh_width)

    @property
    def n_cells(self):
        return self._n_cells

    @property
    def mesh_width(self):
        return self._mesh_width

    @property
    def dx(self):
        return self._mesh_width[0]

    @property
    def dy(self):
        return self._mesh_width[1]

    # ------------------------------------------------------------------
    # Full logical index ranges (ghost cells included), half-open
    # ------------------------------------------------------------------
    @property
    def u_i_range(self):
        return -1, self._n_cells[0]

    @property
    def u_j_range(self):
        return -1, self._n_cells[1] + 1

    @property
    def v_i_range(self):
        return -1, self._n_cells[0] + 1

    @property
    def v_j_range(self):
        return -1, self._n_cells[1]

    @property
    def p_i_range(self):
        return -1, self._n_cells[0] + 1

    @property
    def p_j_range(self):
        return -1, self._n_cells[1] + 1

    # ------------------------------------------------------------------
    # Interior logical index ranges, half-open
    # ------------------------------------------------------------------
    @staticmethod
    def _interior(index_range):
        return index_range[0] + 1, index_range[1] - 1

    @property
    def u_interior(self):
        """Interior ``(i_range, j_range)`` of u and F."""
        return self._interior(self.u_i_range), self._interior(self.u_j_range)

    @property
    def v_interior(self):
        """Interior ``(i_range, j_range)`` of v and G."""
        return self._interior(self.v_i_range), self._interior(self.v_j_range)

    @property
    def p_interior(self):
        """Interior ``(i_range, j_range)`` of p and rhs."""
        return self._interior(self.p_i_range), self._interior(self.p_j_range)

    def cell_centers(self):
        """Physical coordinates of the cell centres, each of shape (nx, ny)."""
        nx, ny = self._n_cells
        x = (np.arange(nx) + 0.5) * self.dx
        y = (np.arange(ny) + 0.5) * self.dy
        return np.meshgrid(x, y, indexing="ij")

    def cell_centered_values(self):
        """u, v and p interpolated to the cell centres, each of shape (nx, ny)."""
        x, y = self.cell_centers()
        return self.u.interpolate_at(x, y), self.v.interpolate_at(x, y), self.p.interpolate_at(x, y)

    def fields(self):
        """All six fields keyed by name."""
        return {"u": self.u, "v": self.v, "p": self.p, "F": self.f, "G": self.g, "rhs": self.rhs}
