import numpy as np
import pytest

from simulation import Computation

BOTTOM = (0.1, 0.2)
TOP = (1.0, 0.3)
LEFT = (0.4, 0.5)
RIGHT = (0.6, 0.7)


@pytest.fixture
def computation():
    computation = Computation(
        n_cells=(3, 3),
        physical_size=(3.0, 3.0),
        dirichlet_bc_bottom=BOTTOM,
        dirichlet_bc_top=TOP,
        dirichlet_bc_left=LEFT,
        dirichlet_bc_right=RIGHT,
        verbose=False,
    )
    computation.apply_boundary_values()
    return computation


def test_u_top_bottom_ghosts_extrapolate(computation):
    u = computation.grid.u
    for i in range(0, 2):
        assert u[i, -1] == pytest.approx(2 * BOTTOM[0])
        assert u[i, 3] == pytest.approx(2 * TOP[0])


def test_v_top_bottom_set_directly(computation):
    v = computation.grid.v
    for i in range(0, 3):
        assert v[i, -1] == BOTTOM[1]
        assert v[i, 2] == TOP[1]


def test_side_values(computation):
    u, v = computation.grid.u, computation.grid.v
    for j in range(0, 3):
        assert u[-1, j] == LEFT[0]
        assert u[2, j] == RIGHT[0]
    for j in range(0, 2):
        assert v[-1, j] == pytest.approx(2 * LEFT[1])
        assert v[3, j] == pytest.approx(2 * RIGHT[1])


def test_corners_hold_side_values(computation):
    u, v = computation.grid.u, computation.grid.v

    assert u[-1, -1] == LEFT[0]
    assert u[-1, 3] == LEFT[0]
    assert u[2, -1] == RIGHT[0]
    assert u[2, 3] == RIGHT[0]

    # Side extrapolation through the already set top/bottom row
    assert v[-1, -1] == pytest.approx(2 * LEFT[1] - BOTTOM[1])
    assert v[3, -1] == pytest.approx(2 * RIGHT[1] - BOTTOM[1])
    assert v[-1, 2] == pytest.approx(2 * LEFT[1] - TOP[1])
    assert v[3, 2] == pytest.approx(2 * RIGHT[1] - TOP[1])


def test_flux_boundaries_copy_velocities(computation):
    grid = computation.grid
    u, v, f, g = grid.u.data, grid.v.data, grid.f.data, grid.g.data

    for edge in (np.s_[0, :], np.s_[-1, :], np.s_[:, 0], np.s_[:, -1]):
        np.testing.assert_array_equal(f[edge], u[edge])
        np.testing.assert_array_equal(g[edge], v[edge])


def test_interior_untouched(computation):
    grid = computation.grid
    assert np.all(grid.u.data[1:-1, 1:-1] == 0.0)
    assert np.all(grid.v.data[1:-1, 1:-1] == 0.0)
