import numpy as np
import pytest

from meshing import FieldVariable


def make_field():
    return FieldVariable("u", (-1, 4), (-1, 6), origin=(0.0, -0.25), mesh_width=(0.5, 0.5))


def test_storage_size_matches_index_range():
    field = make_field()
    assert field.size == (5, 7)
    assert field.data.shape == (5, 7)
    assert np.all(field.data == 0.0)


def test_logical_index_maps_to_offset_storage():
    field = make_field()
    field[-1, -1] = 1.5
    field[3, 5] = 2.5
    field[0, 2] = 3.5

    assert field.data[0, 0] == 1.5
    assert field.data[4, 6] == 2.5
    assert field.data[1, 3] == 3.5
    assert field.value_at(0, 2) == 3.5


@pytest.mark.parametrize("index", [(-2, 0), (4, 0), (0, -2), (0, 6)])
def test_out_of_range_access_aborts(index):
    field = make_field()
    with pytest.raises(SystemExit):
        field[index]
    with pytest.raises(SystemExit):
        field[index] = 1.0


def test_interior_index_excludes_ghost_layer():
    field = make_field()
    assert field.interior_storage_index(0, 0) == (1, 1)
    assert field.interior_storage_index(2, 4) == (3, 5)
    with pytest.raises(SystemExit):
        field.interior_storage_index(-1, 0)
    with pytest.raises(SystemExit):
        field.interior_storage_index(3, 0)


def test_max_abs_includes_ghost_cells():
    field = make_field()
    field[1, 1] = 0.5
    field[-1, 5] = -3.0
    assert field.max_abs() == 3.0


def test_interpolation_is_exact_for_linear_fields():
    field = make_field()
    x, y = field.physical_coordinates()
    X, Y = np.meshgrid(x, y, indexing="ij")
    field.data[:] = 2.0 * X - Y + 1.0

    assert np.isclose(field.interpolate_at(0.3, 0.7), 2.0 * 0.3 - 0.7 + 1.0)

    xs = np.array([0.1, 1.2, 1.9])
    ys = np.array([0.0, 1.0, 2.5])
    np.testing.assert_allclose(field.interpolate_at(xs, ys), 2.0 * xs - ys + 1.0)
