"""Time series data structures."""
from dataclasses import dataclass, asdict, field, fields
from typing import List
import pandas as pd


@dataclass
class TimeSeries:
    """Per time step history of a simulation.

    Parameters
    ----------
    time : List[float]
        Simulated time at the end of each step.
    dt : List[float]
        Time step width of each step.
    pressure_iterations : List[int]
        Pressure solver sweeps per step.
    pressure_residual : List[float]
        Final pressure residual per step.
    pressure_converged : List[bool]
        Whether the pressure solver reached its tolerance.
    max_divergence : List[float]
        Maximum |div u| over the interior cells after the projection.
    kinetic_energy : List[float]
        0.5 * sum(u^2 + v^2) dx dy of the cell-centred velocities.
    """
    time: List[float] = field(default_factory=list)
    dt: List[float] = field(default_factory=list)
    pressure_iterations: List[int] = field(default_factory=list)
    pressure_residual: List[float] = field(default_factory=list)
    pressure_converged: List[bool] = field(default_factory=list)
    max_divergence: List[float] = field(default_factory=list)
    kinetic_energy: List[float] = field(default_factory=list)

    def append(self, **values):
        """Append one step. Every column must be given."""
        keys = [f.name for f in fields(self)]
        missing = [key for key in keys if key not in values]
        if missing:
            raise ValueError(f"Missing time series values: {missing}")
        for key in keys:
            getattr(self, key).append(values[key])

    def __len__(self):
        return len(self.time)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert time series to DataFrame for analysis and plotting.

        Returns
        -------
        pd.DataFrame
            One row per time step.
        """
        return pd.DataFrame(asdict(self))
