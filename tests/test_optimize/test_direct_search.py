import numpy as np
import pytest

from optbox.optimize import (
    HookeJeevesOptions,
    NelderMeadOptions,
    minimize_hooke_jeeves,
    minimize_nelder_mead,
)


def test_nelder_mead_quadratic(quadratic, rng):
    fun, _, x_star = quadratic
    options = NelderMeadOptions(k_max=1000, rng=rng)
    res = minimize_nelder_mead(fun, np.array([3.0, -1.0]), options)
    assert res.success
    assert np.allclose(res.x, x_star, atol=1e-3)
    assert res.njev == 0


def test_nelder_mead_rosenbrock(rosen, rng):
    options = NelderMeadOptions(k_max=5000, sigma0=1.0, rng=rng)
    res = minimize_nelder_mead(rosen, np.array([-1.2, 1.0]), options)
    assert res.fun < 1e-4
    assert np.allclose(res.x, np.ones(2), atol=1e-2)


def test_nelder_mead_global_random_state_is_reproducible(quadratic):
    fun, _, _ = quadratic
    x0 = np.array([3.0, -1.0])
    np.random.seed(7)
    first = minimize_nelder_mead(fun, x0, NelderMeadOptions(k_max=50))
    np.random.seed(7)
    second = minimize_nelder_mead(fun, x0, NelderMeadOptions(k_max=50))
    assert np.array_equal(first.x, second.x)
    assert first.nit == second.nit


def test_nelder_mead_generator_is_reproducible(quadratic):
    fun, _, _ = quadratic
    x0 = np.array([3.0, -1.0])
    runs = [
        minimize_nelder_mead(fun, x0, NelderMeadOptions(k_max=50, rng=np.random.default_rng(3)))
        for _ in range(2)
    ]
    assert np.array_equal(runs[0].x, runs[1].x)


def test_nelder_mead_history_tracks_best_vertex(quadratic, rng):
    fun, _, _ = quadratic
    options = NelderMeadOptions(k_max=30, return_all=True, rng=rng)
    res = minimize_nelder_mead(fun, np.array([3.0, -1.0]), options)
    assert res.x_all.shape == (res.nit + 1, 2)
    # the best vertex never gets worse
    assert np.all(np.diff(res.f_all) <= 0)


def test_hooke_jeeves_quadratic_lands_on_lattice_minimum(quadratic):
    fun, _, x_star = quadratic
    res = minimize_hooke_jeeves(fun, np.array([3.0, -1.0]))
    assert res.success
    assert np.array_equal(res.x, x_star)
    assert res.fun == 0.0


def test_hooke_jeeves_rosenbrock(rosen):
    options = HookeJeevesOptions(k_max=200_000)
    res = minimize_hooke_jeeves(rosen, np.array([-5.0, 10.0]), options)
    assert res.fun < 1e-6
    assert np.allclose(res.x, np.ones(2), atol=1e-2)


def test_hooke_jeeves_step_size_termination():
    # no probe can improve on the minimizer, so only alpha changes
    res = minimize_hooke_jeeves(lambda x: float(x @ x), np.zeros(2), HookeJeevesOptions(tol=0.1))
    # 1 -> 0.5 -> 0.25 -> 0.125 -> 0.0625
    assert res.nit == 4
    assert res.success
    assert res.nfev == 1 + 4 * 4


def test_hooke_jeeves_first_improving_probe_wins_ties():
    # -e0 and +e0 give the same value; only the first probe is accepted
    res = minimize_hooke_jeeves(
        lambda x: float(-(x[0] ** 2) if abs(x[0]) <= 1 else 0.0),
        np.zeros(1),
        HookeJeevesOptions(k_max=1),
    )
    assert res.x == pytest.approx([-1.0])


def test_nelder_mead_rosenbrock_default_budget(rosen):
    res = minimize_nelder_mead(rosen, np.array([-5.0, 10.0]))
    assert np.linalg.norm(res.x - np.ones(2)) < 0.1


def test_hooke_jeeves_rosenbrock_default_budget_is_too_small(rosen):
    # coordinate probing crawls along the curved valley
    res = minimize_hooke_jeeves(rosen, np.array([-5.0, 10.0]))
    assert res.nit == 200
    assert not res.success
    assert res.fun < rosen(np.array([-5.0, 10.0]))
