# conftest.py

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from output import OutputWriter


class RecordingWriter(OutputWriter):
    """Output writer that only remembers the times it was called with."""

    def __init__(self, discretization, output_dir="out"):
        self.discretization = discretization
        self.times = []

    def write_file(self, current_time):
        self.times.append(current_time)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def cavity_settings():
    """Small lid-driven cavity that finishes in two steps."""
    from datastructures import Settings

    return Settings(
        n_cells=(4, 4),
        physical_size=(1.0, 1.0),
        re=100,
        end_time=0.015,
        tau=0.5,
        maximum_dt=0.01,
        use_donor_cell=False,
        pressure_solver="GaussSeidel",
        epsilon=1e-6,
        maximum_number_of_iterations=10000,
    )
