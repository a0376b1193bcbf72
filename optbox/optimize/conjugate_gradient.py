"""Nonlinear conjugate gradient descent.

Kochenderfer & Wheeler, *Algorithms for Optimization* (pp. 69-74). The
first iteration is a steepest-descent step with line search; later
directions mix the negative gradient with the previous direction through the
Fletcher-Reeves or Polak-Ribiere conjugacy parameter.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from optbox.logging import get_logger

from .core import Array, BetaType, ConjugateGradientOptions, Objective, OptimizeResult
from .gradient import make_step_factor
from .line_search import line_search
from .termination import terminate_solver
from .utils import CountingObjective, GradientOracle, Recorder, norm

logger = get_logger(__name__)

# Displacement below which the first step is treated as having gone nowhere.
_ZERO_STEP = 1e-10
_PERTURBATION = 1e-3


def fletcher_reeves(g_curr: Array, g_prev: Array) -> float:
    """Fletcher-Reeves update ``|g_curr|^2 / |g_prev|^2``."""
    return float(np.dot(g_curr, g_curr) / np.dot(g_prev, g_prev))


def polak_ribiere(g_curr: Array, g_prev: Array) -> float:
    """Polak-Ribiere update ``g_curr . (g_curr - g_prev) / |g_prev|^2``."""
    return float(np.dot(g_curr, g_curr - g_prev) / np.dot(g_prev, g_prev))


_BETA: dict[BetaType, Callable[[Array, Array], float]] = {
    BetaType.FLETCHER_REEVES: fletcher_reeves,
    BetaType.POLAK_RIBIERE: polak_ribiere,
}


def minimize_conjugate_gradient(
    f: Objective,
    x0: Array,
    options: Optional[ConjugateGradientOptions] = None,
) -> OptimizeResult:
    """Minimize ``f`` with conjugate gradient descent.

    Parameters
    ----------
    f:
        Objective ``f(x) -> float``.
    x0:
        Initial guess.
    options:
        Solver options. ``beta_type`` selects the conjugacy update and
        ``step_type`` the step factor applied after the first iteration,
        which always uses a line search.

    Returns
    -------
    OptimizeResult
        Converged point, value and iteration count; ``history`` holds the
        trajectory when ``options.return_all`` is set.
    """
    options = options or ConjugateGradientOptions()
    beta_fn = _BETA[BetaType(options.beta_type)]
    step_factor = make_step_factor(options)
    fun = CountingObjective(f)
    grad = GradientOracle(fun, options.gradient)
    recorder = Recorder(options.return_all)

    x_curr = np.asarray(x0, dtype=float).reshape(-1).copy()
    f_curr = fun(x_curr)
    recorder.record(x_curr, f_curr)
    logger.debug("conjugate gradient: start f=%.6g beta=%s", f_curr, options.beta_type)

    success = False
    message = "Maximum iterations reached."
    nit = 1

    # first iteration: steepest descent
    g_prev = grad(x_curr)
    if not np.any(g_prev):
        recorder.record(x_curr, f_curr)
        return OptimizeResult(
            x=x_curr,
            fun=float(f_curr),
            nit=nit,
            success=True,
            message="Zero gradient; point is stationary.",
            nfev=fun.nfev,
            njev=grad.njev,
            history=recorder.points,
        )
    d_prev = -g_prev
    alpha = line_search(fun, x_curr, d_prev, options.line_search)
    x_next = x_curr + alpha * d_prev
    if norm(x_next - x_curr) < _ZERO_STEP:
        x_next = x_next + _PERTURBATION
    f_next = fun(x_next)
    x_curr, f_curr = x_next, f_next

    while nit < options.k_max:
        nit += 1
        recorder.record(x_curr, f_curr)
        g_curr = grad(x_curr)
        if not np.any(g_curr):
            x_next, f_next = x_curr, f_curr
            success = True
            message = "Zero gradient; point is stationary."
            break
        beta = beta_fn(g_curr, g_prev)
        d_curr = -g_curr + beta * d_prev
        alpha = step_factor(fun, x_curr, d_curr)
        x_next = x_curr + alpha * d_curr
        f_next = fun(x_next)
        if terminate_solver(f_curr, f_next, options.tol, options.termination):
            success = True
            message = "Objective change below tolerance."
            break
        g_prev, d_prev = g_curr, d_curr
        x_curr, f_curr = x_next, f_next

    recorder.record(x_next, f_next)
    logger.debug("conjugate gradient: %s nit=%d f=%.6g", message, nit, f_next)
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


__all__ = ["fletcher_reeves", "minimize_conjugate_gradient", "polak_ribiere"]
