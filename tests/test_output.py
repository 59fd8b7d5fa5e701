import h5py
import matplotlib.pyplot as plt
import numpy as np
import pytest

from output import OutputWriterHDF5, OutputWriterText
from simulation import Computation
from simulation.__main__ import main
from utils import CavityPlotter


def test_writers_create_one_file_per_step(cavity_settings, tmp_path):
    computation = Computation(
        cavity_settings,
        output_writers=[OutputWriterHDF5, OutputWriterText],
        output_dir=tmp_path,
        verbose=False,
    )
    computation.run_simulation()

    assert sorted(p.name for p in tmp_path.glob("*.h5")) == ["output_0000.h5", "output_0001.h5"]
    assert sorted(p.name for p in tmp_path.glob("*.txt")) == ["output_0000.txt", "output_0001.txt"]

    with h5py.File(tmp_path / "output_0001.h5", "r") as f:
        assert f.attrs["time"] == cavity_settings.end_time
        np.testing.assert_array_equal(f["staggered/u"][()], computation.grid.u.data)
        assert f["cell_centered/u"].shape == (4, 4)

    text = (tmp_path / "output_0000.txt").read_text()
    assert text.startswith("t: 0.01")
    for name in ("u", "v", "p", "F", "G", "rhs"):
        assert f"\n{name} (" in text


def test_text_writer_prints_top_row_first(tmp_path):
    computation = Computation(n_cells=(2, 2), verbose=False)
    computation.grid.p[0, 2] = 7.0
    writer = OutputWriterText(computation.discretization, tmp_path)
    path = writer.write_file(0.0)

    lines = path.read_text().splitlines()
    p_header = next(k for k, line in enumerate(lines) if line.startswith("p ("))
    top_row = lines[p_header + 3]
    assert top_row.startswith("   2 |")
    assert "7" in top_row


def test_save_and_plot(cavity_settings, tmp_path):
    computation = Computation(cavity_settings, verbose=False)
    computation.run_simulation()
    result = tmp_path / "run.h5"
    computation.save(result)

    with h5py.File(result, "r") as f:
        assert f.attrs["pressure_solver"] == "GaussSeidel"
        assert f.attrs["current_time"] == cavity_settings.end_time
        assert f["time_series/time"].shape == (2,)
        assert f["fields/velocity_magnitude"].shape == (16,)

    plotter = CavityPlotter(result)
    assert len(plotter.fields) == 16
    assert len(plotter.time_series) == 2

    plotter.plot_velocity_fields(output_path=tmp_path / "velocity.png")
    plotter.plot_pressure(output_path=tmp_path / "pressure.png")
    plotter.plot_velocity_magnitude(output_path=tmp_path / "magnitude.png")
    plotter.plot_time_series(output_path=tmp_path / "time_series.png")
    plt.close("all")

    for name in ("velocity", "pressure", "magnitude", "time_series"):
        assert (tmp_path / f"{name}.png").exists()


def test_plotter_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CavityPlotter(tmp_path / "missing.h5")


def test_command_line_driver(tmp_path):
    parameters = tmp_path / "cavity.txt"
    parameters.write_text(
        "nCellsX = 4\nnCellsY = 4\nphysicalSizeX = 1\nphysicalSizeY = 1\n"
        "re = 100\nendTime = 0.02\nmaximumDt = 0.01\npressureSolver = SOR\nomega = 1.5\n"
    )
    out_dir = tmp_path / "out"
    result = tmp_path / "result.h5"

    exit_code = main([str(parameters), "--output-dir", str(out_dir), "--format", "text",
                      "--save", str(result), "--quiet"])

    assert exit_code == 0
    assert len(list(out_dir.glob("*.txt"))) == 2
    assert not list(out_dir.glob("*.h5"))
    assert result.exists()


def test_command_line_rejects_unknown_solver(tmp_path):
    parameters = tmp_path / "bad.txt"
    parameters.write_text("pressureSolver = Jacobi\n")
    with pytest.raises(ValueError):
        main([str(parameters), "--no-output", "--quiet"])
