"""Tests for sample statistics and multivariate normal sampling."""

import numpy as np
import pytest

from optbox.statistics import randmvn, sample_mean, sample_statistics


def test_sample_mean_of_columns():
    x = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    assert np.array_equal(sample_mean(x), np.array([2.0, 5.0]))


def test_sample_mean_of_single_vector():
    assert np.array_equal(sample_mean(np.array([1.0, 2.0])), np.array([1.0, 2.0]))


def test_sample_statistics_matches_numpy(rng):
    x = rng.normal(size=(3, 40))
    mu, sigma = sample_statistics(x)
    assert np.allclose(mu, x.mean(axis=1))
    assert np.allclose(sigma, np.cov(x))
    assert np.allclose(sigma, sigma.T)


def test_sample_statistics_needs_two_samples():
    with pytest.raises(ValueError):
        sample_statistics(np.ones((2, 1)))


def test_sample_statistics_rejects_3d_input():
    with pytest.raises(ValueError):
        sample_statistics(np.ones((2, 2, 2)))


def test_randmvn_shape_and_moments(rng):
    mu = np.array([1.0, -2.0])
    sigma = np.array([[2.0, 0.5], [0.5, 1.0]])
    x = randmvn(mu, sigma, 20_000, rng=rng)
    assert x.shape == (2, 20_000)
    m, s = sample_statistics(x)
    assert np.allclose(m, mu, atol=0.05)
    assert np.allclose(s, sigma, atol=0.1)


def test_randmvn_single_sample_default():
    assert randmvn(np.zeros(3), np.eye(3)).shape == (3, 1)


def test_randmvn_global_state_is_seedable():
    np.random.seed(11)
    first = randmvn(np.zeros(2), np.eye(2), 4)
    np.random.seed(11)
    second = randmvn(np.zeros(2), np.eye(2), 4)
    assert np.array_equal(first, second)


def test_randmvn_rejects_indefinite_covariance():
    with pytest.raises(np.linalg.LinAlgError):
        randmvn(np.zeros(2), np.array([[1.0, 2.0], [2.0, 1.0]]))


def test_randmvn_rejects_shape_mismatch():
    with pytest.raises(ValueError):
        randmvn(np.zeros(2), np.eye(3))
