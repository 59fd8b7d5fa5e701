import numpy as np
import pytest

from meshing import StaggeredGrid


@pytest.fixture
def grid():
    return StaggeredGrid((3, 2), (0.5, 1.0))


def test_index_ranges_per_field_type(grid):
    assert (grid.u_i_range, grid.u_j_range) == ((-1, 3), (-1, 3))
    assert (grid.v_i_range, grid.v_j_range) == ((-1, 4), (-1, 2))
    assert (grid.p_i_range, grid.p_j_range) == ((-1, 4), (-1, 3))


def test_field_shapes_follow_staggering(grid):
    assert grid.u.size == (4, 4)
    assert grid.f.size == (4, 4)
    assert grid.v.size == (5, 3)
    assert grid.g.size == (5, 3)
    assert grid.p.size == (5, 4)
    assert grid.rhs.size == (5, 4)


def test_interior_ranges(grid):
    assert grid.u_interior == ((0, 2), (0, 2))
    assert grid.v_interior == ((0, 3), (0, 1))
    assert grid.p_interior == ((0, 3), (0, 2))


def test_mesh_width_shared_by_all_fields(grid):
    assert grid.dx == 0.5 and grid.dy == 1.0
    for field in grid.fields().values():
        assert field.mesh_width == (0.5, 1.0)


def test_physical_positions_are_staggered(grid):
    x_u, y_u = grid.u.physical_coordinates()
    x_v, y_v = grid.v.physical_coordinates()
    x_p, y_p = grid.p.physical_coordinates()

    # u(i, j) at ((i+1) dx, (j+1/2) dy), storage index i+1
    assert x_u[1] == pytest.approx(0.5) and y_u[1] == pytest.approx(0.5)
    # v(i, j) at ((i+1/2) dx, (j+1) dy)
    assert x_v[1] == pytest.approx(0.25) and y_v[1] == pytest.approx(1.0)
    # p(i, j) at cell centres
    assert x_p[1] == pytest.approx(0.25) and y_p[1] == pytest.approx(0.5)


def test_cell_centered_values_average_faces(grid):
    grid.u.data[:] = 1.0
    grid.v.data[:] = -2.0
    grid.p.data[:] = 3.0

    u, v, p = grid.cell_centered_values()
    assert u.shape == (3, 2)
    np.testing.assert_allclose(u, 1.0)
    np.testing.assert_allclose(v, -2.0)
    np.testing.assert_allclose(p, 3.0)


def test_invalid_construction():
    with pytest.raises(ValueError):
        StaggeredGrid((0, 2), (1.0, 1.0))
    with pytest.raises(ValueError):
        StaggeredGrid((2, 2), (1.0, -1.0))
