"""Pytest configuration and shared fixtures for optbox tests.

This module provides:
- A deterministic numpy RNG fixture
- Shared test objectives (convex quadratic, Rosenbrock)
"""

import os

import numpy as np
import pytest


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy's global random state, which solvers use when no rng is passed."""
    np.random.seed(_seed())


@pytest.fixture
def quadratic():
    """Convex quadratic ``(x - x*)^T A (x - x*)`` with its gradient and minimizer."""
    A = np.array([[4.0, 1.0], [1.0, 3.0]])
    x_star = np.array([1.0, -2.0])

    def fun(x: np.ndarray) -> float:
        e = x - x_star
        return float(e @ A @ e)

    def grad(x: np.ndarray) -> np.ndarray:
        return 2.0 * A @ (x - x_star)

    return fun, grad, x_star


def rosenbrock(x: np.ndarray) -> float:
    return float(100.0 * (x[1] - x[0] ** 2) ** 2 + (1.0 - x[0]) ** 2)


@pytest.fixture
def rosen():
    return rosenbrock
