"""Plotter for saved staggered grid simulation results."""

from pathlib import Path

import h5py
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np


def _load_run(h5_path, label):
    """Read one result file into (metadata, fields, time_series) DataFrames."""
    with h5py.File(h5_path, "r") as f:
        metadata = {}
        for key, val in f.attrs.items():
            if isinstance(val, np.ndarray):
                val = tuple(val.tolist())
            elif isinstance(val, bytes):
                val = val.decode()
            metadata[key] = val

        fields = {key: f["fields"][key][()] for key in ("x", "y", "u", "v", "p")}
        time_series = {key: f["time_series"][key][()] for key in f["time_series"]}

    return (
        pd.DataFrame([metadata]).assign(run=label),
        pd.DataFrame(fields).assign(run=label),
        pd.DataFrame(time_series).assign(run=label),
    )


class CavityPlotter:
    """Plotter for lid-driven cavity and channel flow results.

    Parameters
    ----------
    runs : dict, str, Path, or list
        Single run or list of runs. Can be:
        - str/Path: Path to HDF5 file written by ``Computation.save``
        - dict: Dictionary with 'h5_path' (and optionally 'label')
        - list: List of any of the above

    Attributes
    ----------
    fields : pd.DataFrame
        Cell-centred fields (x, y, u, v, p) for all runs
    time_series : pd.DataFrame
        Per-step history for all runs
    metadata : pd.DataFrame
        Settings and run state for all runs
    """

    def __init__(self, runs):
        if not isinstance(runs, list):
            runs = [runs]

        fields_list = []
        time_series_list = []
        metadata_list = []

        for run in runs:
            if isinstance(run, (str, Path)):
                run = {"h5_path": run, "label": Path(run).stem}

            h5_path = Path(run["h5_path"])
            if not h5_path.exists():
                raise FileNotFoundError(f"HDF5 file not found: {h5_path}")

            label = run.get("label", h5_path.stem)
            metadata_df, fields_df, time_series_df = _load_run(h5_path, label)

            metadata_list.append(metadata_df)
            fields_list.append(fields_df)
            time_series_list.append(time_series_df)

        self.fields = pd.concat(fields_list, ignore_index=True)
        self.time_series = pd.concat(time_series_list, ignore_index=True)
        self.metadata = pd.concat(metadata_list, ignore_index=True)

    def _require_single_run(self):
        if self.metadata['run'].nunique() > 1:
            raise ValueError("Field plotting only available for single run.")

    def _reynolds(self):
        return float(self.metadata['re'].iloc[0])

    def plot_time_series(self, output_path=None):
        """Plot time step width and pressure residual over simulated time.

        Parameters
        ----------
        output_path : str or Path, optional
            Path to save figure. If None, figure is not saved.
        """
        n_runs = self.metadata['run'].nunique()
        long_df = self.time_series.melt(
            id_vars=["run", "time"],
            value_vars=["dt", "pressure_residual", "max_divergence"],
            var_name="quantity",
        )

        g = sns.relplot(
            data=long_df,
            x="time",
            y="value",
            col="quantity",
            hue="run" if n_runs > 1 else None,
            kind="line",
            height=4,
            aspect=1.2,
            linewidth=2,
            facet_kws={"sharey": False},
            legend="auto" if n_runs > 1 else False,
        )
        for ax in g.axes.flat:
            ax.set_yscale("log")
            ax.grid(True, alpha=0.3)
            ax.set_xlabel("Time")
        g.set_titles("{col_name}")

        if output_path:
            g.savefig(output_path, bbox_inches="tight", dpi=300)
            print(f"Time series plot saved to: {output_path}")

    def plot_velocity_fields(self, output_path=None):
        """Plot velocity components (u and v) using matplotlib tricontourf.

        Only available for single-run plotting.
        """
        self._require_single_run()

        Re = self._reynolds()
        fig, axes = plt.subplots(1, 2, figsize=(12, 5))

        for ax, name in zip(axes, ("u", "v")):
            cf = ax.tricontourf(
                self.fields['x'], self.fields['y'], self.fields[name],
                levels=20, cmap="RdBu_r"
            )
            ax.set_xlabel("x")
            ax.set_ylabel("y")
            ax.set_title(f"{name.upper()} velocity", fontweight="bold")
            ax.set_aspect("equal")
            plt.colorbar(cf, ax=ax, label=name)

        fig.suptitle(f"Velocity Components (Re = {Re:.0f})", fontweight="bold")
        plt.tight_layout()

        if output_path:
            plt.savefig(output_path, bbox_inches="tight", dpi=300)
            print(f"Velocity fields plot saved to: {output_path}")

    def plot_pressure(self, output_path=None):
        """Plot pressure field using matplotlib tricontourf."""
        self._require_single_run()

        Re = self._reynolds()
        fig, ax = plt.subplots(figsize=(8, 7))

        cf = ax.tricontourf(
            self.fields['x'], self.fields['y'], self.fields['p'],
            levels=20, cmap="coolwarm"
        )
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(f"Pressure Field (Re = {Re:.0f})", fontweight="bold")
        ax.set_aspect("equal")
        plt.colorbar(cf, ax=ax, label="Pressure")
        plt.tight_layout()

        if output_path:
            plt.savefig(output_path, bbox_inches="tight", dpi=300)
            print(f"Pressure plot saved to: {output_path}")

    def plot_velocity_magnitude(self, output_path=None):
        """Plot velocity magnitude with streamlines.

        The cell centres form a regular grid, so the fields are reshaped
        directly for ``streamplot``.
        """
        self._require_single_run()

        Re = self._reynolds()
        nx, ny = (int(n) for n in self.metadata['n_cells'].iloc[0])

        x = self.fields['x'].values.reshape(nx, ny)
        y = self.fields['y'].values.reshape(nx, ny)
        u = self.fields['u'].values.reshape(nx, ny)
        v = self.fields['v'].values.reshape(nx, ny)
        vel_mag = np.sqrt(u**2 + v**2)

        fig, ax = plt.subplots(figsize=(8, 7))
        cf = ax.contourf(x, y, vel_mag, levels=20, cmap="coolwarm")

        # streamplot expects row index = y
        stream = ax.streamplot(
            x[:, 0], y[0, :], u.T, v.T,
            color='white', linewidth=1, density=1.5,
            arrowsize=1.2, arrowstyle='->'
        )
        stream.lines.set_alpha(0.6)

        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(f"Velocity Magnitude with Streamlines (Re = {Re:.0f})", fontweight="bold")
        ax.set_aspect("equal")
        plt.colorbar(cf, ax=ax, label="Velocity magnitude")
        plt.tight_layout()

        if output_path:
            plt.savefig(output_path, bbox_inches="tight", dpi=300)
            print(f"Velocity magnitude plot saved to: {output_path}")
