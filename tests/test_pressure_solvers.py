import numpy as np
import pytest

from fd.discretization import CentralDifferences
from fd.pressure_solvers import SOR, GaussSeidel, create_pressure_solver
from fd.pressure_solvers.kernels import apply_neumann_boundary, sor_sweep


def make_solver(kind, epsilon=1e-12, maximum_number_of_iterations=10000):
    discretization = CentralDifferences((3, 3), (1.0, 1.0))
    if kind == "SOR":
        return SOR(discretization, epsilon, maximum_number_of_iterations, omega=1.2)
    return GaussSeidel(discretization, epsilon, maximum_number_of_iterations)


SOLVERS = ["SOR", "GaussSeidel"]


@pytest.mark.parametrize("kind", SOLVERS)
def test_constant_pressure_is_a_fixed_point(kind):
    solver = make_solver(kind)
    grid = solver.discretization.grid
    grid.p.fill(2.5)
    grid.rhs.fill(0.0)

    solver.solve()

    np.testing.assert_allclose(grid.p.data, 2.5, atol=1e-12)
    assert solver.converged
    assert solver.residual < solver.epsilon


@pytest.mark.parametrize("kind", SOLVERS)
def test_converges_for_compatible_rhs(kind):
    solver = make_solver(kind)
    grid = solver.discretization.grid
    # Zero mean source/sink pair
    grid.rhs[0, 0] = 1.0
    grid.rhs[2, 2] = -1.0

    solver.solve()

    assert solver.converged
    assert solver.residual < solver.epsilon
    assert solver.iterations == len(solver.residual_history)
    assert solver.iterations < solver.maximum_number_of_iterations

    sampled = solver.residual_history[::5]
    assert len(sampled) > 2
    assert all(later < earlier for earlier, later in zip(sampled, sampled[1:]))

    # Neumann ghost layer mirrors the interior
    p = grid.p.data
    np.testing.assert_array_equal(p[0, 1:-1], p[1, 1:-1])
    np.testing.assert_array_equal(p[:, -1], p[:, -2])


@pytest.mark.parametrize("kind", SOLVERS)
def test_incompatible_rhs_stops_at_iteration_cap(kind):
    solver = make_solver(kind, epsilon=1e-5, maximum_number_of_iterations=200)
    grid = solver.discretization.grid
    grid.rhs.fill(1.0)

    solver.solve()

    assert not solver.converged
    assert solver.iterations == 200
    assert solver.residual >= 1.0 - 1e-9
    assert np.all(np.isfinite(grid.p.data))


def test_sor_with_omega_one_matches_gauss_seidel(rng):
    sor = make_solver("SOR")
    sor.omega = 1.0
    gs = make_solver("GaussSeidel")
    rhs = rng.standard_normal(sor.discretization.grid.rhs.size)
    rhs[1:-1, 1:-1] -= rhs[1:-1, 1:-1].mean()
    sor.discretization.grid.rhs.data[:] = rhs
    gs.discretization.grid.rhs.data[:] = rhs

    sor.solve()
    gs.solve()

    assert sor.iterations == gs.iterations
    np.testing.assert_allclose(sor.discretization.grid.p.data, gs.discretization.grid.p.data)


def test_sor_sweep_blends_old_and_gauss_seidel_value():
    p = np.zeros((3, 3))
    p[1, 1] = 1.0
    p[0, 1], p[2, 1] = 2.0, 4.0
    p[1, 0], p[1, 2] = 3.0, 5.0
    rhs = np.zeros((3, 3))
    rhs[1, 1] = 2.0

    # dx = 1, dy = 0.5: factor = 0.5 * 0.25 / 1.25 = 0.1
    # p_gs = 0.1 * ((4 + 2) / 1 + (5 + 3) / 0.25 - 2) = 3.6
    sor_sweep(p, rhs, 1.0, 0.5, 1.5)

    assert p[1, 1] == pytest.approx(-0.5 * 1.0 + 1.5 * 3.6)
    assert p[0, 1] == 2.0


def test_sor_single_iteration_with_over_relaxation():
    discretization = CentralDifferences((1, 1), (1.0, 0.5))
    solver = SOR(discretization, 1e-12, 1, omega=1.5)
    grid = discretization.grid
    grid.p[0, 0] = 1.0
    grid.rhs[0, 0] = 2.0

    solver.solve()

    # Neumann ghosts all equal 1 before the sweep: p_gs = 0.1 * (2 + 8 - 2) = 0.8
    assert solver.iterations == 1
    assert not solver.converged
    assert grid.p[0, 0] == pytest.approx(-0.5 * 1.0 + 1.5 * 0.8)
    np.testing.assert_allclose(grid.p.data, grid.p[0, 0])


def test_neumann_boundary_copies_adjacent_interior():
    p = np.arange(20, dtype=float).reshape(5, 4)
    apply_neumann_boundary(p)

    np.testing.assert_array_equal(p[0, 1:-1], p[1, 1:-1])
    np.testing.assert_array_equal(p[-1, 1:-1], p[-2, 1:-1])
    np.testing.assert_array_equal(p[:, 0], p[:, 1])
    np.testing.assert_array_equal(p[:, -1], p[:, -2])


def test_factory():
    discretization = CentralDifferences((2, 2), (1.0, 1.0))
    assert isinstance(create_pressure_solver("SOR", discretization, 1e-5, 10, omega=1.7), SOR)
    assert isinstance(create_pressure_solver("GaussSeidel", discretization, 1e-5, 10), GaussSeidel)
    with pytest.raises(ValueError, match="Unknown pressure solver"):
        create_pressure_solver("Jacobi", discretization, 1e-5, 10)


@pytest.mark.parametrize("omega", [0.0, 2.0])
def test_sor_rejects_invalid_omega(omega):
    with pytest.raises(ValueError):
        SOR(CentralDifferences((2, 2), (1.0, 1.0)), 1e-5, 10, omega=omega)
