"""Projection-method building blocks operating on storage arrays."""

from .boundary import apply_velocity_boundary_values, apply_flux_boundary_values
from .corrections import velocity_correction
from .divergence import compute_divergence
from .momentum import compute_preliminary_velocities
from .time_step import compute_time_step_width, stability_limits

__all__ = [
    "apply_velocity_boundary_values",
    "apply_flux_boundary_values",
    "velocity_correction",
    "compute_divergence",
    "compute_preliminary_velocities",
    "compute_time_step_width",
    "stability_limits",
]
