"""Scalar field storage on a staggered grid.

A ``FieldVariable`` holds one scalar quantity (u, v, p, F, G or rhs) over a
rectangular logical index range that includes the ghost layer. Logical
indices may be negative; the storage index is ``logical - begin``.

Indexing Conventions:
- ``field[i, j]`` uses logical indices and is bounds-checked.
- ``field.data[a, b]`` is the raw storage (used by the numba kernels).
- ``origin`` is the physical position of storage index (0, 0).
"""

import sys

import numpy as np
from scipy.interpolate import RegularGridInterpolator


class FieldVariable:
    """2D scalar field with ghost cells and an index offset.

    Parameters
    ----------
    name : str
        Field name, used in diagnostics.
    i_range : tuple of int
        Half-open logical index range ``(i_begin, i_end)`` along x.
    j_range : tuple of int
        Half-open logical index range ``(j_begin, j_end)`` along y.
    origin : tuple of float
        Physical coordinates of the first storage point.
    mesh_width : tuple of float
        Grid spacing ``(dx, dy)``.
    """

    def __init__(self, name, i_range, j_range, origin, mesh_width):
        self.name = name
        self.i_begin, self.i_end = int(i_range[0]), int(i_range[1])
        self.j_begin, self.j_end = int(j_range[0]), int(j_range[1])
        self.origin = (float(origin[0]), float(origin[1]))
        self.mesh_width = (float(mesh_width[0]), float(mesh_width[1]))

        self.data = np.zeros((self.i_end - self.i_begin, self.j_end - self.j_begin))

    @property
    def size(self):
        """Storage shape ``(n_i, n_j)``, ghost cells included."""
        return self.data.shape

    def _storage_index(self, index):
        i, j = index
        if not (self.i_begin <= i < self.i_end and self.j_begin <= j < self.j_end):
            # Index misuse is a programming defect: abort instead of raising
            sys.exit(
                f"FieldVariable '{self.name}': index ({i}, {j}) out of range "
                f"i in [{self.i_begin}, {self.i_end}), j in [{self.j_begin}, {self.j_end})"
            )
        return i - self.i_begin, j - self.j_begin

    def interior_storage_index(self, i, j):
        """Storage index of an interior point, where all four neighbours exist."""
        if not (self.i_begin < i < self.i_end - 1 and self.j_begin < j < self.j_end - 1):
            sys.exit(
                f"FieldVariable '{self.name}': ({i}, {j}) is not an interior index "
                f"of i in [{self.i_begin}, {self.i_end}), j in [{self.j_begin}, {self.j_end})"
            )
        return i - self.i_begin, j - self.j_begin

    def __getitem__(self, index):
        return self.data[self._storage_index(index)]

    def __setitem__(self, index, value):
        self.data[self._storage_index(index)] = value

    def value_at(self, i, j):
        """Bounds-checked read of the value at logical index ``(i, j)``."""
        return self[i, j]

    def max_abs(self):
        """Maximum magnitude over the whole storage, ghost cells included."""
        return float(np.max(np.abs(self.data)))

    def fill(self, value):
        self.data.fill(value)

    def physical_coordinates(self):
        """1D physical coordinates of the storage points along x and y."""
        dx, dy = self.mesh_width
        x = self.origin[0] + dx * np.arange(self.data.shape[0])
        y = self.origin[1] + dy * np.arange(self.data.shape[1])
        return x, y

    def interpolate_at(self, x, y):
        """Bilinear interpolation of the field at physical points.

        Parameters
        ----------
        x, y : float or np.ndarray
            Physical coordinates. Points outside the storage span are extrapolated.

        Returns
        -------
        float or np.ndarray
            Interpolated values with the broadcast shape of ``x`` and ``y``.
        """
        x_nodes, y_nodes = self.physical_coordinates()
        interpolator = RegularGridInterpolator(
            (x_nodes, y_nodes), self.data, method="linear", bounds_error=False, fill_value=None
        )

        x_arr, y_arr = np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(y, dtype=float))
        points = np.column_stack((x_arr.ravel(), y_arr.ravel()))
        values = interpolator(points).reshape(x_arr.shape)

        if values.ndim == 0:
            return float(values)
        return values

    def __repr__(self):
        return (
            f"FieldVariable(name={self.name!r}, i=[{self.i_begin}, {self.i_end}), "
            f"j=[{self.j_begin}, {self.j_end}))"
        )
