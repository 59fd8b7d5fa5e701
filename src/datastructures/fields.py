"""Field data structures for simulation results."""
from dataclasses import dataclass, asdict
import numpy as np
import pandas as pd


@dataclass
class Fields:
    """Velocity and pressure interpolated to the cell centres.

    Parameters
    ----------
    u : np.ndarray
        x-velocity at the cell centres, flattened.
    v : np.ndarray
        y-velocity at the cell centres, flattened.
    p : np.ndarray
        Pressure at the cell centres, flattened.
    x : np.ndarray
        x-coordinates of the cell centres.
    y : np.ndarray
        y-coordinates of the cell centres.
    grid_points : np.ndarray
        Cell centre coordinates, shape (N, 2).
    """
    u: np.ndarray
    v: np.ndarray
    p: np.ndarray
    x: np.ndarray
    y: np.ndarray
    grid_points: np.ndarray

    def to_dataframe(self) -> pd.DataFrame:
        """Convert fields to DataFrame for analysis and plotting.

        Returns
        -------
        pd.DataFrame
            Wide-format DataFrame with columns: u, v, p, x, y.
            Each row represents one cell centre.
        """
        data = asdict(self)
        # x and y already carry the coordinates
        data.pop('grid_points')
        return pd.DataFrame(data)
