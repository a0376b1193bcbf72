"""Cross-entropy method.

A Gaussian proposal ``N(mu, Sigma)`` is sampled, the best ``m_elite`` samples
are kept and the proposal is refitted to them. The method runs for exactly
``k_max`` iterations; there is no convergence test.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from optbox.logging import get_logger
from optbox.statistics import randmvn, sample_statistics

from .core import Array, CrossEntropyOptions, Objective, OptimizeResult
from .utils import CountingObjective, Recorder

logger = get_logger(__name__)


def select_elite(samples: Array, values: Array, m_elite: int) -> tuple[Array, Array]:
    """Sort the sample columns by value and keep the first ``m_elite``.

    Returns the elite samples (columns, best first) and their values.
    """
    if not 0 < m_elite <= samples.shape[1]:
        raise ValueError(f"m_elite must lie in [1, {samples.shape[1]}], got {m_elite}")
    order = np.argsort(values, kind="stable")[:m_elite]
    return samples[:, order], np.asarray(values)[order]


def _sample(
    mu: Array, sigma: Array, m: int, rng: Optional[np.random.Generator]
) -> Optional[Array]:
    try:
        return randmvn(mu, sigma, m, rng=rng)
    except np.linalg.LinAlgError:
        logger.debug("cross-entropy: covariance not positive definite, using its diagonal")
    try:
        return randmvn(mu, np.diag(np.diag(sigma)), m, rng=rng)
    except np.linalg.LinAlgError:
        return None


def minimize_cross_entropy(
    f: Objective,
    x0: Array,
    options: Optional[CrossEntropyOptions] = None,
) -> OptimizeResult:
    """Minimize ``f`` with the cross-entropy method.

    The proposal starts at ``N(x0, sigma0^2 I)``. After each refit the new
    mean is the next iterate. If neither the covariance nor its diagonal can
    be factorized the run stops early with the current mean.
    """
    options = options or CrossEntropyOptions()
    if options.m_elite < 2:
        raise ValueError("m_elite must be at least 2 to refit a covariance")
    fun = CountingObjective(f)
    recorder = Recorder(options.return_all)

    x_curr = np.asarray(x0, dtype=float).reshape(-1).copy()
    f_curr = fun(x_curr)
    mu = x_curr
    sigma = np.diag(np.full(x_curr.size, options.sigma0**2))
    logger.debug("cross-entropy: start f=%.6g m=%d m_elite=%d", f_curr, options.m, options.m_elite)

    success = True
    message = "Completed the fixed iteration budget."
    nit = 0
    while nit < options.k_max:
        nit += 1
        recorder.record(x_curr, f_curr)
        samples = _sample(mu, sigma, options.m, options.rng)
        if samples is None:
            success = False
            message = "Proposal covariance could not be factorized."
            logger.warning("cross-entropy: degenerate covariance at iteration %d", nit)
            break
        values = np.array([fun(samples[:, i]) for i in range(options.m)])
        elite, _ = select_elite(samples, values, options.m_elite)
        mu, sigma = sample_statistics(elite)
        x_curr = mu
        f_curr = fun(x_curr)

    recorder.record(x_curr, f_curr)
    logger.debug("cross-entropy: %s nit=%d f=%.6g", message, nit, f_curr)
    return OptimizeResult(
        x=x_curr,
        fun=float(f_curr),
        nit=nit,
        success=success,
        message=message,
        nfev=fun.nfev,
        history=recorder.points,
    )


__all__ = ["minimize_cross_entropy", "select_elite"]
