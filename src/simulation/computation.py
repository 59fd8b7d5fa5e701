"""Time stepping of the incompressible Navier-Stokes equations.

This module implements the projection method on a staggered grid: explicit
momentum prediction, a pressure Poisson solve and the velocity correction,
with an adaptive time step width.
"""

import time

import numpy as np

from datastructures import Settings, Fields, TimeSeries
from fd.discretization import CentralDifferences, DonorCell
from fd.pressure_solvers import create_pressure_solver
from fd.core import (
    apply_velocity_boundary_values,
    apply_flux_boundary_values,
    compute_time_step_width,
    compute_preliminary_velocities,
    compute_divergence,
    velocity_correction,
)


class Computation:
    """Driver of the simulation loop.

    Each step runs, in this order:
    1. apply_boundary_values
    2. compute_time_step_width
    3. compute_preliminary_velocities (F, G)
    4. compute_right_hand_side
    5. compute_pressure
    6. compute_velocities
    7. write_file(current_time) on every output writer

    Parameters
    ----------
    settings : Settings, optional
        Run configuration. If not provided, kwargs are used to create it.
    output_writers : list of type, optional
        Output writer classes, each constructed with the discretization and
        ``output_dir``. Default is no output.
    output_dir : str or Path, optional
        Directory for the output writers. Default is "out".
    verbose : bool, optional
        Print progress. Default is True.
    print_every : int, optional
        Print a summary every this many steps. Default is 10.
    **kwargs
        Settings parameters passed to Settings if settings is None.

    Raises
    ------
    ValueError
        For an invalid configuration, such as an unknown pressure solver.
    """

    Config = Settings

    def __init__(self, settings=None, output_writers=None, output_dir="out",
                 verbose=True, print_every=10, **kwargs):
        if settings is None:
            settings = self.Config(**kwargs)
        self.settings = settings
        self.verbose = verbose
        self.print_every = max(int(print_every), 1)

        mesh_width = settings.mesh_width
        if settings.use_donor_cell:
            self.discretization = DonorCell(settings.n_cells, mesh_width, settings.alpha)
        else:
            self.discretization = CentralDifferences(settings.n_cells, mesh_width)

        self.pressure_solver = create_pressure_solver(
            settings.pressure_solver,
            self.discretization,
            settings.epsilon,
            settings.maximum_number_of_iterations,
            omega=settings.omega,
        )

        self.output_writers = [
            writer_cls(self.discretization, output_dir) for writer_cls in (output_writers or [])
        ]

        # Simulation clock
        self.current_time = 0.0
        self.dt = 0.0
        self.n_steps = 0

        self.time_series = TimeSeries()
        self._divergence = np.zeros(self.grid.p.size)

    @property
    def grid(self):
        return self.discretization.grid

    # ------------------------------------------------------------------
    # Steps of one time iteration
    # ------------------------------------------------------------------
    def apply_boundary_values(self):
        """Dirichlet values on u and v, then copy them into F and G."""
        s = self.settings
        grid = self.grid
        apply_velocity_boundary_values(
            grid.u.data, grid.v.data,
            s.dirichlet_bc_bottom, s.dirichlet_bc_top, s.dirichlet_bc_left, s.dirichlet_bc_right,
        )
        apply_flux_boundary_values(grid.f.data, grid.g.data, grid.u.data, grid.v.data)

    def compute_time_step_width(self):
        """Set ``self.dt`` from the stability limits, tau and maximum_dt.

        The velocity maxima are taken over the whole storage of u and v,
        ghost cells included.
        """
        s = self.settings
        self.dt = compute_time_step_width(
            self.grid.u.max_abs(), self.grid.v.max_abs(),
            self.grid.dx, self.grid.dy, s.re, s.tau, s.maximum_dt,
        )
        return self.dt

    def compute_preliminary_velocities(self):
        s = self.settings
        grid = self.grid
        compute_preliminary_velocities(
            grid.u.data, grid.v.data, grid.f.data, grid.g.data,
            grid.dx, grid.dy, s.re, s.g[0], s.g[1], self.dt,
            self.discretization.uses_donor_cell, self.discretization.alpha,
        )

    def compute_right_hand_side(self):
        """rhs = div(F, G) / dt on the interior."""
        grid = self.grid
        compute_divergence(
            grid.f.data, grid.g.data, grid.dx, grid.dy, 1.0 / self.dt, out=grid.rhs.data
        )

    def compute_pressure(self):
        self.pressure_solver.solve()

    def compute_velocities(self):
        grid = self.grid
        velocity_correction(
            grid.u.data, grid.v.data, grid.f.data, grid.g.data, grid.p.data,
            grid.dx, grid.dy, self.dt,
        )

    def _advance_time(self):
        """Advance the clock by dt, landing exactly on end_time on the last step."""
        end_time = self.settings.end_time
        if self.current_time + self.dt >= end_time:
            self.dt = end_time - self.current_time
            self.current_time = end_time
        else:
            self.current_time += self.dt

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run_simulation(self):
        """Integrate from ``current_time`` to ``end_time``.

        Stores the per-step history in ``self.time_series``.
        """
        end_time = self.settings.end_time

        if self.verbose:
            print("Settings:")
            print(self.settings.to_dataframe().T.to_string(header=False))
            print(f"Mesh width: dx={self.grid.dx:.6g}, dy={self.grid.dy:.6g}")

        time_start = time.time()

        while self.current_time < end_time:
            self.apply_boundary_values()
            self.compute_time_step_width()
            self._advance_time()

            self.compute_preliminary_velocities()
            self.compute_right_hand_side()
            self.compute_pressure()
            self.compute_velocities()

            for writer in self.output_writers:
                writer.write_file(self.current_time)

            self.n_steps += 1
            self._record_step()

            if self.verbose:
                self._print_step()

        time_end = time.time()
        if self.verbose:
            print(f"Simulation finished after {self.n_steps} steps in {time_end - time_start:.2f} seconds.")

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def max_divergence(self):
        """Maximum |div u| over the interior cells."""
        grid = self.grid
        compute_divergence(grid.u.data, grid.v.data, grid.dx, grid.dy, 1.0, out=self._divergence)
        return float(np.max(np.abs(self._divergence[1:-1, 1:-1])))

    def kinetic_energy(self):
        """0.5 * sum(u^2 + v^2) dx dy with velocities averaged to the cell centres."""
        u = self.grid.u.data
        v = self.grid.v.data
        u_c = 0.5 * (u[:-1, 1:-1] + u[1:, 1:-1])
        v_c = 0.5 * (v[1:-1, :-1] + v[1:-1, 1:])
        return 0.5 * float(np.sum(u_c**2 + v_c**2)) * self.grid.dx * self.grid.dy

    def _record_step(self):
        solver = self.pressure_solver
        self.time_series.append(
            time=self.current_time,
            dt=self.dt,
            pressure_iterations=solver.iterations,
            pressure_residual=solver.residual,
            pressure_converged=solver.converged,
            max_divergence=self.max_divergence(),
            kinetic_energy=self.kinetic_energy(),
        )

    def _print_step(self):
        solver = self.pressure_solver
        if not solver.converged:
            print(
                f"  Pressure solver stopped after {solver.iterations} iterations "
                f"(residual {solver.residual:.3e} > epsilon {solver.epsilon:.1e})"
            )
        last_step = self.current_time >= self.settings.end_time
        if self.n_steps % self.print_every == 0 or last_step:
            print(
                f"Step {self.n_steps}: t={self.current_time:.6g}, dt={self.dt:.3e}, "
                f"pressure iterations={solver.iterations}, residual={solver.residual:.3e}, "
                f"max div={self.time_series.max_divergence[-1]:.3e}"
            )

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def result_fields(self):
        """Velocity and pressure at the cell centres."""
        x, y = self.grid.cell_centers()
        u, v, p = self.grid.cell_centered_values()
        return Fields(
            u=u.ravel(),
            v=v.ravel(),
            p=p.ravel(),
            x=x.ravel(),
            y=y.ravel(),
            grid_points=np.column_stack((x.ravel(), y.ravel())),
        )

    def save(self, filepath):
        """Save settings, cell-centred fields and time series to HDF5.

        Parameters
        ----------
        filepath : str or Path
            Output file path.
        """
        from dataclasses import asdict
        import h5py
        from pathlib import Path

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fields_dict = asdict(self.result_fields())
        time_series_dict = asdict(self.time_series)
        settings_dict = asdict(self.settings)

        with h5py.File(filepath, "w") as f:
            # Settings and run state as root-level attributes
            for key, val in settings_dict.items():
                f.attrs[key] = val
            f.attrs["current_time"] = self.current_time
            f.attrs["n_steps"] = self.n_steps

            fields_grp = f.create_group("fields")
            for key, val in fields_dict.items():
                fields_grp.create_dataset(key, data=val)
            fields_grp.create_dataset(
                "velocity_magnitude", data=np.sqrt(fields_dict["u"] ** 2 + fields_dict["v"] ** 2)
            )

            # Raw staggered storage, ghost cells included, for inspection
            staggered_grp = f.create_group("staggered")
            for name, field in self.grid.fields().items():
                staggered_grp.create_dataset(name, data=field.data)

            ts_grp = f.create_group("time_series")
            for key, val in time_series_dict.items():
                ts_grp.create_dataset(key, data=np.asarray(val))
