"""Sample statistics and multivariate normal sampling.

Samples are stored column-wise: an array of shape ``(n, N)`` holds ``N``
points of dimension ``n``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def _as_columns(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    if x.ndim == 1:
        return x.reshape(-1, 1)
    if x.ndim != 2:
        raise ValueError(f"samples must be a 1-D or 2-D array, got shape {x.shape}")
    return x


def sample_mean(x: np.ndarray) -> np.ndarray:
    """Return the mean of the columns of ``x`` as a vector of length ``n``."""
    x = _as_columns(x)
    return x.mean(axis=1)


def sample_statistics(x: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return the sample mean and unbiased sample covariance of the columns of ``x``.

    Raises:
        ValueError: If fewer than two samples are given.
    """
    x = _as_columns(x)
    if x.shape[1] < 2:
        raise ValueError("sample covariance requires at least two samples")
    mu = x.mean(axis=1)
    centered = x - mu[:, None]
    sigma = centered @ centered.T / (x.shape[1] - 1)
    return mu, sigma


def randmvn(
    mu: np.ndarray,
    sigma: np.ndarray,
    size: int = 1,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Draw ``size`` samples of ``N(mu, sigma)`` as the columns of an ``(n, size)`` array.

    The samples are ``L z + mu`` with ``L`` the lower Cholesky factor of
    ``sigma`` and ``z`` standard normal. Without ``rng`` the draws come from
    NumPy's global random state, which callers seed with ``np.random.seed``.

    Raises:
        numpy.linalg.LinAlgError: If ``sigma`` is not positive definite.
    """
    mu = np.asarray(mu, dtype=float).reshape(-1)
    sigma = np.asarray(sigma, dtype=float)
    if sigma.shape != (mu.size, mu.size):
        raise ValueError(f"sigma shape {sigma.shape} incompatible with mean shape {mu.shape}")
    lower = np.linalg.cholesky(sigma)
    source = rng if rng is not None else np.random
    z = source.standard_normal((mu.size, size))
    return lower @ z + mu[:, None]


__all__ = ["randmvn", "sample_mean", "sample_statistics"]
