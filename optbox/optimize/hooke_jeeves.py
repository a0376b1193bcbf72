"""Hooke-Jeeves pattern search (Kochenderfer & Wheeler, pp. 102-104)."""

from __future__ import annotations

from typing import Optional

import numpy as np

from optbox.logging import get_logger

from .core import Array, HookeJeevesOptions, Objective, OptimizeResult
from .utils import CountingObjective, Recorder, basis

logger = get_logger(__name__)


def minimize_hooke_jeeves(
    f: Objective,
    x0: Array,
    options: Optional[HookeJeevesOptions] = None,
) -> OptimizeResult:
    """Minimize ``f`` by coordinate probing with a shrinking step size.

    Every sweep probes ``x - alpha e_i`` and ``x + alpha e_i`` for each
    coordinate ``i`` around the sweep's base point ``x``. A probe that beats
    the best value found so far is accepted at once, so later probes in the
    sweep must beat it in turn. A sweep without improvement multiplies
    ``alpha`` by ``gamma``; the search ends when ``alpha < tol``.
    """
    options = options or HookeJeevesOptions()
    fun = CountingObjective(f)
    recorder = Recorder(options.return_all)
    alpha, gamma = float(options.alpha), float(options.gamma)

    x_best = np.asarray(x0, dtype=float).reshape(-1).copy()
    f_best = fun(x_best)
    n = x_best.size
    directions = [sgn * basis(i, n) for i in range(n) for sgn in (-1.0, 1.0)]
    logger.debug("hooke-jeeves: start f=%.6g alpha=%g", f_best, alpha)

    success = False
    message = "Maximum iterations reached."
    nit = 0
    while nit < options.k_max:
        nit += 1
        recorder.record(x_best, f_best)
        improved = False
        x_base = x_best
        for direction in directions:
            x_step = x_base + alpha * direction
            f_step = fun(x_step)
            if f_step < f_best:
                x_best, f_best = x_step, f_step
                improved = True
        if not improved:
            alpha *= gamma
        if alpha < options.tol:
            success = True
            message = "Step size below tolerance."
            break

    recorder.record(x_best, f_best)
    logger.debug("hooke-jeeves: %s nit=%d f=%.6g alpha=%g", message, nit, f_best, alpha)
    return OptimizeResult(
        x=x_best,
        fun=float(f_best),
        nit=nit,
        success=success,
        message=message,
        nfev=fun.nfev,
        history=recorder.points,
    )


__all__ = ["minimize_hooke_jeeves"]
