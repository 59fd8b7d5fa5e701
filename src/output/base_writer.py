"""Abstract output writer."""

from abc import ABC, abstractmethod
from pathlib import Path


class OutputWriter(ABC):
    """Persists one snapshot per completed time step.

    Writers only read the grid of ``discretization``; they never modify
    simulation state.

    Parameters
    ----------
    discretization : Discretization
        Owner of the staggered grid to write.
    output_dir : str or Path, optional
        Directory for the output files, created if missing. Default is "out".
    """

    def __init__(self, discretization, output_dir="out"):
        self.discretization = discretization
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.file_no = 0

    def _next_path(self, suffix):
        path = self.output_dir / f"output_{self.file_no:04d}{suffix}"
        self.file_no += 1
        return path

    @abstractmethod
    def write_file(self, current_time):
        """Write the current state, labelled with ``current_time``."""
