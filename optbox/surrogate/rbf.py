"""Radial basis function surrogate models.

A surrogate interpolates ``m`` exact samples of an expensive objective: the
samples are the centres, and the coefficients ``theta`` solve ``B theta = y``
with ``B[i, j] = psi(|x_i - c_j|)``. The fitted model is a plain objective
function and can be handed to any solver in :mod:`optbox.optimize`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from optbox.logging import get_logger

from .kernels import Kernel, KernelType, make_kernel

logger = get_logger(__name__)


def radial_basis(x: np.ndarray, c: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Return ``[psi(|x - c_i|) for each centre column c_i of c]``."""
    x = np.asarray(x, dtype=float).reshape(-1)
    c = np.asarray(c, dtype=float)
    distances = np.linalg.norm(c - x[:, None], axis=0)
    return np.array([kernel(r) for r in distances])


def eval_surrogate(theta: np.ndarray, x: np.ndarray, c: np.ndarray, kernel: Kernel) -> float:
    """Evaluate ``theta . radial_basis(x, c, kernel)``."""
    return float(np.dot(theta, radial_basis(x, c, kernel)))


@dataclass(frozen=True)
class RBFSurrogate:
    """A fitted radial basis surrogate; call it like the objective it replaces."""

    centers: np.ndarray
    theta: np.ndarray
    kernel: Kernel

    def __call__(self, x: np.ndarray) -> float:
        return eval_surrogate(self.theta, x, self.centers, self.kernel)


def fit_surrogate(
    f: Callable[[np.ndarray], float],
    x: np.ndarray,
    kernel_type: KernelType | str = KernelType.CUBIC,
    sigma: float = 1.0,
) -> RBFSurrogate:
    """Fit an interpolating RBF surrogate of ``f`` on the sample columns of ``x``.

    Raises:
        numpy.linalg.LinAlgError: If the design matrix is singular, e.g. when
            two samples coincide.
    """
    kernel = make_kernel(kernel_type, sigma)
    c = np.asarray(x, dtype=float)
    if c.ndim == 1:
        c = c.reshape(1, -1)
    m = c.shape[1]
    B = np.vstack([radial_basis(c[:, i], c, kernel) for i in range(m)])
    y = np.array([float(f(c[:, i])) for i in range(m)])
    theta = np.linalg.solve(B, y)
    logger.debug("fitted %s surrogate on %d samples", kernel.type.value, m)
    return RBFSurrogate(centers=c.copy(), theta=theta, kernel=kernel)


__all__ = ["RBFSurrogate", "eval_surrogate", "fit_surrogate", "radial_basis"]
