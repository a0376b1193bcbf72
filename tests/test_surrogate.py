"""Tests for radial basis surrogate models."""

import math

import numpy as np
import pytest

from optbox.sampling import samples_full_factorial
from optbox.surrogate import (
    Kernel,
    KernelType,
    RBFSurrogate,
    eval_surrogate,
    fit_surrogate,
    make_kernel,
    radial_basis,
)


@pytest.mark.parametrize(
    "kernel_type, sigma, r, expected",
    [
        ("linear", 1.0, 2.0, 2.0),
        ("cubic", 1.0, 2.0, 8.0),
        ("thin plate spline", 1.0, 0.0, 0.0),
        ("thin plate spline", 1.0, math.e, math.e**2),
        ("gaussian", 1.0, 0.0, 1.0),
        ("gaussian", 2.0, 2.0, math.exp(-0.5)),
        ("multiquadratic", 2.0, 0.0, 2.0),
        ("inverse multiquadratic", 2.0, 0.0, 0.5),
    ],
)
def test_kernel_values(kernel_type, sigma, r, expected):
    assert make_kernel(kernel_type, sigma)(r) == pytest.approx(expected)


def test_kernel_type_spellings():
    assert KernelType("Thin_Plate-Spline") is KernelType.THIN_PLATE_SPLINE
    assert make_kernel(KernelType.GAUSSIAN).type is KernelType.GAUSSIAN
    with pytest.raises(ValueError):
        make_kernel("polyharmonic")


def test_make_kernel_rejects_non_positive_sigma():
    with pytest.raises(ValueError):
        make_kernel("gaussian", 0.0)


def test_radial_basis():
    c = np.array([[0.0, 3.0], [0.0, 4.0]])
    psi = radial_basis(np.zeros(2), c, make_kernel("linear"))
    assert np.allclose(psi, [0.0, 5.0])


def objective(x: np.ndarray) -> float:
    return float(np.sin(x[0]) + x[1] ** 2)


@pytest.mark.parametrize("kernel_type", ["gaussian", "multiquadratic", "inverse multiquadratic"])
def test_surrogate_interpolates_samples(kernel_type):
    x = samples_full_factorial([0, 0], [2, 2], [2, 2])
    model = fit_surrogate(objective, x, kernel_type)
    assert isinstance(model, RBFSurrogate)
    for i in range(x.shape[1]):
        assert model(x[:, i]) == pytest.approx(objective(x[:, i]), abs=1e-8)


def test_surrogate_free_function_matches_model():
    x = samples_full_factorial([0, 0], [2, 2], [2, 2])
    model = fit_surrogate(objective, x, "gaussian", sigma=0.8)
    point = np.array([0.7, 1.3])
    assert eval_surrogate(model.theta, point, model.centers, model.kernel) == pytest.approx(model(point))


def test_surrogate_one_dimensional_samples():
    model = fit_surrogate(lambda x: float(x[0] ** 2), np.array([0.0, 1.0, 2.0, 3.0]), "multiquadratic")
    assert model.centers.shape == (1, 4)
    assert model(np.array([2.0])) == pytest.approx(4.0)


def test_surrogate_is_immutable():
    model = fit_surrogate(objective, samples_full_factorial([0, 0], [1, 1], [1, 1]), "gaussian")
    with pytest.raises(AttributeError):
        model.kernel = Kernel()


def test_surrogate_rejects_duplicate_samples():
    x = np.array([[0.0, 0.0, 1.0], [0.0, 0.0, 1.0]])
    with pytest.raises(np.linalg.LinAlgError):
        fit_surrogate(objective, x, "gaussian")
