"""Nelder-Mead simplex method.

Kochenderfer & Wheeler, *Algorithms for Optimization* (pp. 105-108). The
initial simplex is drawn at random from ``N(x0, sigma0^2 I)``, so two runs
from the same guess only agree when the random source is seeded.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from optbox.logging import get_logger
from optbox.statistics import randmvn, sample_mean

from .core import Array, NelderMeadOptions, Objective, OptimizeResult
from .termination import terminate_simplex
from .utils import CountingObjective, Recorder

logger = get_logger(__name__)


def minimize_nelder_mead(
    f: Objective,
    x0: Array,
    options: Optional[NelderMeadOptions] = None,
) -> OptimizeResult:
    """Minimize ``f`` with the Nelder-Mead simplex method.

    Each iteration sorts the simplex, reflects the worst vertex through the
    centroid of the others and then expands, contracts or shrinks depending
    on how the reflected point compares to the best, second-worst and worst
    vertices. The run stops when the standard deviation of the vertex values
    drops below ``options.tol``.
    """
    options = options or NelderMeadOptions()
    fun = CountingObjective(f)
    recorder = Recorder(options.return_all)
    alpha, beta, gamma = options.alpha, options.beta, options.gamma

    x0 = np.asarray(x0, dtype=float).reshape(-1)
    n = x0.size
    # vertices are the columns of S
    S = randmvn(x0, np.diag(np.full(n, options.sigma0**2)), n + 1, rng=options.rng)
    y = np.array([fun(S[:, i]) for i in range(n + 1)])
    logger.debug("nelder-mead: start n=%d best f=%.6g", n, y.min())

    success = False
    message = "Maximum iterations reached."
    nit = 0
    while nit < options.k_max:
        nit += 1
        order = np.argsort(y, kind="stable")
        S, y = S[:, order], y[order]
        recorder.record(S[:, 0], y[0])

        xl, yl = S[:, 0].copy(), y[0]
        xh, yh = S[:, -1].copy(), y[-1]
        ys = y[-2]
        xm = sample_mean(S[:, :-1])
        xr = xm + alpha * (xm - xh)
        yr = fun(xr)

        if yr < yl:
            xe = xm + beta * (xr - xm)
            ye = fun(xe)
            if ye < yr:
                S[:, -1], y[-1] = xe, ye
            else:
                S[:, -1], y[-1] = xr, yr
        elif yr >= ys:
            if yr < yh:
                xh, yh = xr, yr
                S[:, -1], y[-1] = xr, yr
            xc = xm + gamma * (xh - xm)
            yc = fun(xc)
            if yc > yh:
                for i in range(1, n + 1):
                    S[:, i] = (S[:, i] + xl) / 2.0
                    y[i] = fun(S[:, i])
            else:
                S[:, -1], y[-1] = xc, yc
        else:
            S[:, -1], y[-1] = xr, yr

        if terminate_simplex(y, options.tol):
            success = True
            message = "Simplex values converged."
            break

    i_min = int(np.argmin(y))
    x_min, f_min = S[:, i_min].copy(), float(y[i_min])
    recorder.record(x_min, f_min)
    logger.debug("nelder-mead: %s nit=%d f=%.6g", message, nit, f_min)
    return OptimizeResult(
        x=x_min,
        fun=f_min,
        nit=nit,
        success=success,
        message=message,
        nfev=fun.nfev,
        history=recorder.points,
    )


__all__ = ["minimize_nelder_mead"]
