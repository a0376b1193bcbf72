"""Gradient descent with line-search, decaying or constant step factors.

Kochenderfer & Wheeler, *Algorithms for Optimization* (pp. 69-71).
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from optbox.logging import get_logger

from .core import Array, DescentOptions, Objective, OptimizeResult, StepType
from .line_search import line_search
from .termination import terminate_solver
from .utils import CountingObjective, GradientOracle, Recorder, norm

logger = get_logger(__name__)

StepFactor = Callable[[Objective, Array, Array], float]


def make_step_factor(options: DescentOptions) -> StepFactor:
    """Resolve ``options.step_type`` into a callable ``(f, x, d) -> alpha``.

    The constant and decay strategies need ``options.alpha``; decay also needs
    ``options.gamma``. Missing values raise ``ValueError``.
    """
    step_type = StepType(options.step_type)
    if step_type is StepType.LINE_SEARCH:
        ls_options = options.line_search

        def _line_search(f: Objective, x: Array, d: Array) -> float:
            return line_search(f, x, d, ls_options)

        return _line_search

    if options.alpha is None:
        raise ValueError(f"step_type={step_type.value!r} requires options.alpha")
    if step_type is StepType.CONSTANT:
        alpha = float(options.alpha)
        return lambda f, x, d: alpha

    if options.gamma is None:
        raise ValueError("step_type='decay' requires options.gamma")
    state = {"alpha": float(options.alpha)}
    gamma = float(options.gamma)

    def _decay(f: Objective, x: Array, d: Array) -> float:
        state["alpha"] *= gamma
        return state["alpha"]

    return _decay


def minimize_gradient_descent(
    f: Objective,
    x0: Array,
    options: Optional[DescentOptions] = None,
) -> OptimizeResult:
    """Minimize ``f`` by steepest descent along the normalized negative gradient.

    Each iteration steps from ``x`` to ``x - alpha * g / |g|`` and stops once
    consecutive objective values satisfy the termination test. A zero
    gradient means ``x`` is already stationary and ends the run.
    """
    options = options or DescentOptions()
    step_factor = make_step_factor(options)
    fun = CountingObjective(f)
    grad = GradientOracle(fun, options.gradient)
    recorder = Recorder(options.return_all)

    x_curr = np.asarray(x0, dtype=float).reshape(-1).copy()
    f_curr = fun(x_curr)
    x_next, f_next = x_curr, f_curr
    success = False
    message = "Maximum iterations reached."
    logger.debug("gradient descent: start f=%.6g step_type=%s", f_curr, options.step_type)

    nit = 0
    while nit < options.k_max:
        nit += 1
        recorder.record(x_curr, f_curr)
        g_curr = grad(x_curr)
        g_norm = norm(g_curr)
        if g_norm == 0.0:
            # stationary
            x_next, f_next = x_curr, f_curr
            success = True
            message = "Zero gradient; point is stationary."
            break
        d = -g_curr / g_norm
        alpha = step_factor(fun, x_curr, d)
        x_next = x_curr + alpha * d
        f_next = fun(x_next)
        if terminate_solver(f_curr, f_next, options.tol, options.termination):
            success = True
            message = "Objective change below tolerance."
            break
        x_curr, f_curr = x_next, f_next

    recorder.record(x_next, f_next)
    logger.debug("gradient descent: %s nit=%d f=%.6g", message, nit, f_next)
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


__all__ = ["StepFactor", "make_step_factor", "minimize_gradient_descent"]
