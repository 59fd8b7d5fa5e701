"""HDF5 snapshot writer for visualization."""

import h5py

from .base_writer import OutputWriter


class OutputWriterHDF5(OutputWriter):
    """Writes ``output_XXXX.h5`` per step.

    Layout:
    - root attributes: time, n_cells, mesh_width, file_no
    - ``staggered`` group: raw storage of u, v, p (ghost cells included)
    - ``cell_centered`` group: u, v, p interpolated to the cell centres, x, y
    """

    def write_file(self, current_time):
        grid = self.discretization.grid
        path = self._next_path(".h5")

        x, y = grid.cell_centers()
        u_c, v_c, p_c = grid.cell_centered_values()

        with h5py.File(path, "w") as f:
            f.attrs["time"] = current_time
            f.attrs["n_cells"] = grid.n_cells
            f.attrs["mesh_width"] = grid.mesh_width
            f.attrs["file_no"] = self.file_no - 1

            staggered = f.create_group("staggered")
            for name in ("u", "v", "p"):
                staggered.create_dataset(name, data=grid.fields()[name].data)

            centered = f.create_group("cell_centered")
            centered.create_dataset("x", data=x)
            centered.create_dataset("y", data=y)
            centered.create_dataset("u", data=u_c)
            centered.create_dataset("v", data=v_c)
            centered.create_dataset("p", data=p_c)

        return path
