"""Gradient descent with the Barzilai-Borwein step factor."""

from __future__ import annotations

from typing import Optional

import numpy as np

from optbox.logging import get_logger

from .core import Array, BarzilaiBorweinOptions, Objective, OptimizeResult
from .termination import terminate_solver
from .utils import CountingObjective, GradientOracle, Recorder, norm

logger = get_logger(__name__)

# Offset of the second seed point from the initial guess.
_SEED_OFFSET = 1e-3


def minimize_barzilai_borwein(
    f: Objective,
    x0: Array,
    options: Optional[BarzilaiBorweinOptions] = None,
) -> OptimizeResult:
    """Minimize ``f`` by gradient descent with the Barzilai-Borwein step.

    The step factor is ``lam * |g| * |dx . dg| / |dg|^2`` where ``dx`` and
    ``dg`` are the differences between consecutive points and gradients, so
    the method is seeded with ``x0`` and ``x0 + 0.001``. When the gradient
    difference vanishes the step is undefined; the solver then stops and
    returns the last point it evaluated, with ``success=False``.

    The recorded history starts with both seed points, so it holds one entry
    more than the other gradient solvers for the same ``nit``.
    """
    options = options or BarzilaiBorweinOptions()
    fun = CountingObjective(f)
    grad = GradientOracle(fun, options.gradient)
    recorder = Recorder(options.return_all)

    x_prev = np.asarray(x0, dtype=float).reshape(-1).copy()
    x_curr = x_prev + _SEED_OFFSET
    f_prev = fun(x_prev)
    g_prev = grad(x_prev)
    f_curr = fun(x_curr)
    recorder.record(x_prev, f_prev)
    x_next, f_next = x_curr, f_curr
    logger.debug("barzilai-borwein: start f=%.6g lam=%g", f_prev, options.lam)

    success = False
    message = "Maximum iterations reached."
    nit = 0
    while nit < options.k_max:
        nit += 1
        recorder.record(x_curr, f_curr)
        g_curr = grad(x_curr)
        dg = g_curr - g_prev
        dg_norm = norm(dg)
        if dg_norm == 0.0:
            x_next, f_next = x_curr, f_curr
            message = "Gradient difference vanished; step factor undefined."
            logger.warning("barzilai-borwein: zero gradient difference at iteration %d", nit)
            break
        g_norm = norm(g_curr)
        if g_norm == 0.0:
            x_next, f_next = x_curr, f_curr
            success = True
            message = "Zero gradient; point is stationary."
            break
        d = -g_curr / g_norm
        alpha = options.lam * g_norm * abs(float(np.dot(x_curr - x_prev, dg))) / dg_norm**2
        x_next = x_curr + alpha * d
        f_next = fun(x_next)
        if terminate_solver(f_curr, f_next, options.tol, options.termination):
            success = True
            message = "Objective change below tolerance."
            break
        g_prev, x_prev = g_curr, x_curr
        x_curr, f_curr = x_next, f_next

    recorder.record(x_next, f_next)
    logger.debug("barzilai-borwein: %s nit=%d f=%.6g", message, nit, f_next)
    return OptimizeResult(
        x=x_next,
        fun=float(f_next),
        nit=nit,
        success=success,
        message=message,
        nfev=fun.nfev,
        njev=grad.njev,
        history=recorder.points,
    )


__all__ = ["minimize_barzilai_borwein"]
