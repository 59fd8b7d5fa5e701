"""
Lid-Driven Cavity Flow Visualization
=====================================

This script visualizes the lid-driven cavity solution computed by
compute_cavity.py.
"""

# %%
# Setup and Load Data
# -------------------

from utils import get_project_root, CavityPlotter

project_root = get_project_root()
data_dir = project_root / "data" / "LidDrivenCavity"
fig_dir = project_root / "figures" / "LidDrivenCavity"
fig_dir.mkdir(parents=True, exist_ok=True)

plotter = CavityPlotter(data_dir / "cavity_Re1000.h5")
print(f"Loaded solution from: {data_dir / 'cavity_Re1000.h5'}")

# %%
# Time Series
# -----------
# Time step width, pressure residual and divergence over simulated time.

plotter.plot_time_series(output_path=fig_dir / "cavity_Re1000_time_series.pdf")

# %%
# Velocity Fields
# ---------------

plotter.plot_velocity_fields(output_path=fig_dir / "cavity_Re1000_velocity.pdf")

# %%
# Pressure Field
# --------------

plotter.plot_pressure(output_path=fig_dir / "cavity_Re1000_pressure.pdf")

# %%
# Velocity Magnitude
# ------------------

plotter.plot_velocity_magnitude(output_path=fig_dir / "cavity_Re1000_streamlines.pdf")

print(f"\nAll figures saved to: {fig_dir}")
