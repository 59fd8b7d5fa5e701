"""Simulation settings and the parameter file loader."""
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Tuple
import pandas as pd


# Parameter file key -> (attribute, component index or None)
_PARAMETER_KEYS = {
    "physicalSizeX": ("physical_size", 0),
    "physicalSizeY": ("physical_size", 1),
    "endTime": ("end_time", None),
    "re": ("re", None),
    "gX": ("g", 0),
    "gY": ("g", 1),
    "dirichletBottomX": ("dirichlet_bc_bottom", 0),
    "dirichletBottomY": ("dirichlet_bc_bottom", 1),
    "dirichletTopX": ("dirichlet_bc_top", 0),
    "dirichletTopY": ("dirichlet_bc_top", 1),
    "dirichletLeftX": ("dirichlet_bc_left", 0),
    "dirichletLeftY": ("dirichlet_bc_left", 1),
    "dirichletRightX": ("dirichlet_bc_right", 0),
    "dirichletRightY": ("dirichlet_bc_right", 1),
    "nCellsX": ("n_cells", 0),
    "nCellsY": ("n_cells", 1),
    "useDonorCell": ("use_donor_cell", None),
    "alpha": ("alpha", None),
    "tau": ("tau", None),
    "maximumDt": ("maximum_dt", None),
    "pressureSolver": ("pressure_solver", None),
    "omega": ("omega", None),
    "epsilon": ("epsilon", None),
    "maximumNumberOfIterations": ("maximum_number_of_iterations", None),
}


def _parse_bool(text):
    lowered = text.lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise ValueError(f"Cannot interpret {text!r} as a boolean")


@dataclass
class Settings:
    """Run configuration, fixed for the whole simulation.

    Parameters
    ----------
    n_cells : tuple of int, optional
        Number of cells ``(nx, ny)``. Default is (20, 20).
    physical_size : tuple of float, optional
        Domain size ``(Lx, Ly)``. Default is (2.0, 2.0).
    re : float, optional
        Reynolds number. Default is 1000.
    end_time : float, optional
        Simulated time at which the run stops. Default is 10.
    tau : float, optional
        Safety factor applied to the stability limits. Default is 0.5.
    maximum_dt : float, optional
        Upper bound for the time step width. Default is 0.1.
    g : tuple of float, optional
        Body force ``(gx, gy)``. Default is (0, 0).
    use_donor_cell : bool, optional
        Donor-cell instead of central convective terms. Default is False.
    alpha : float, optional
        Donor-cell upwind weight. Default is 0.5.
    dirichlet_bc_bottom, dirichlet_bc_top, dirichlet_bc_left, dirichlet_bc_right : tuple of float
        Prescribed ``(u, v)`` on each wall. Defaults describe a lid-driven
        cavity with the lid moving at u = 1 on top.
    pressure_solver : str, optional
        ``"SOR"`` or ``"GaussSeidel"``. Default is "SOR".
    omega : float, optional
        SOR relaxation factor. Default is 1.0.
    epsilon : float, optional
        Pressure residual tolerance. Default is 1e-5.
    maximum_number_of_iterations : int, optional
        Pressure solver iteration cap. Default is 100000.
    """
    # Discretization
    n_cells: Tuple[int, int] = (20, 20)
    physical_size: Tuple[float, float] = (2.0, 2.0)

    # Physics
    re: float = 1000
    end_time: float = 10.0
    tau: float = 0.5
    maximum_dt: float = 0.1
    g: Tuple[float, float] = (0.0, 0.0)

    # Convection scheme
    use_donor_cell: bool = False
    alpha: float = 0.5

    # Boundary velocities (u, v)
    dirichlet_bc_bottom: Tuple[float, float] = (0.0, 0.0)
    dirichlet_bc_top: Tuple[float, float] = (1.0, 0.0)
    dirichlet_bc_left: Tuple[float, float] = (0.0, 0.0)
    dirichlet_bc_right: Tuple[float, float] = (0.0, 0.0)

    # Pressure solver
    pressure_solver: str = "SOR"
    omega: float = 1.0
    epsilon: float = 1e-5
    maximum_number_of_iterations: int = 100000

    def __post_init__(self):
        self.n_cells = (int(self.n_cells[0]), int(self.n_cells[1]))
        self.physical_size = (float(self.physical_size[0]), float(self.physical_size[1]))
        self.g = (float(self.g[0]), float(self.g[1]))
        for name in ("dirichlet_bc_bottom", "dirichlet_bc_top", "dirichlet_bc_left", "dirichlet_bc_right"):
            value = getattr(self, name)
            setattr(self, name, (float(value[0]), float(value[1])))
        self.maximum_number_of_iterations = int(self.maximum_number_of_iterations)

        if min(self.n_cells) < 1:
            raise ValueError(f"n_cells must be positive, got {self.n_cells}")
        if min(self.physical_size) <= 0:
            raise ValueError(f"physical_size must be positive, got {self.physical_size}")
        for name in ("re", "tau", "maximum_dt"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.end_time < 0:
            raise ValueError(f"end_time must not be negative, got {self.end_time}")

    @property
    def mesh_width(self):
        """Grid spacing ``(dx, dy)``."""
        return (
            self.physical_size[0] / self.n_cells[0],
            self.physical_size[1] / self.n_cells[1],
        )

    @classmethod
    def from_file(cls, filename):
        """Load settings from a parameter file.

        One ``key = value`` per line, ``#`` starts a comment. Keys not given
        keep their default.

        Parameters
        ----------
        filename : str or Path
            Path to the parameter file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        ValueError
            For unknown keys or values that cannot be parsed.
        """
        path = Path(filename)
        if not path.exists():
            raise FileNotFoundError(f"Parameter file not found: {path}")

        defaults = {f.name: f.default for f in fields(cls)}
        values = {name: list(v) if isinstance(v, tuple) else v for name, v in defaults.items()}

        for line_number, raw_line in enumerate(path.read_text().splitlines(), start=1):
            line = raw_line.split("#", 1)[0].strip()
            if not line:
                continue
            if "=" not in line:
                raise ValueError(f"{path}:{line_number}: expected 'key = value', got {raw_line!r}")

            key, text = (part.strip() for part in line.split("=", 1))
            if key not in _PARAMETER_KEYS:
                raise ValueError(f"{path}:{line_number}: unknown parameter {key!r}")

            attribute, component = _PARAMETER_KEYS[key]
            try:
                value = cls._parse_value(attribute, text)
            except ValueError as err:
                raise ValueError(f"{path}:{line_number}: invalid value for {key}: {err}") from err

            if component is None:
                values[attribute] = value
            else:
                values[attribute][component] = value

        return cls(**{name: tuple(v) if isinstance(v, list) else v for name, v in values.items()})

    @staticmethod
    def _parse_value(attribute, text):
        if attribute == "use_donor_cell":
            return _parse_bool(text)
        if attribute == "pressure_solver":
            return text
        if attribute in ("n_cells", "maximum_number_of_iterations"):
            return int(float(text))
        return float(text)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert settings to single-row DataFrame.

        Returns
        -------
        pd.DataFrame
            Single-row DataFrame with all settings.
        """
        return pd.DataFrame([asdict(self)])
