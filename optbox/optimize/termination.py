"""Termination tests shared by the iterative solvers.

Following Kochenderfer & Wheeler, *Algorithms for Optimization* (pp. 63, 66),
the gradient-based solvers stop on the change in objective value between
consecutive iterates, measured either absolutely or relative to the current
value. Nelder-Mead instead stops on the spread of its simplex values.
"""

from __future__ import annotations

import numpy as np

from .core import Array, Termination


def terminate_solver(f_curr: float, f_next: float, tol: float, mode: Termination | str) -> bool:
    """Return True when the change from ``f_curr`` to ``f_next`` is below ``tol``.

    ``mode`` is :class:`Termination` or its string spelling; any value that is
    not RELATIVE is treated as ABSOLUTE.
    """
    delta = abs(f_curr - f_next)
    try:
        relative = Termination(mode) is Termination.RELATIVE
    except ValueError:
        relative = False
    if relative:
        with np.errstate(divide="ignore", invalid="ignore"):
            return bool(np.float64(delta) / abs(f_curr) < tol)
    return delta < tol


def terminate_simplex(values: Array, tol: float) -> bool:
    """Return True when the sample standard deviation of ``values`` is below ``tol``."""
    return float(np.std(np.asarray(values, dtype=float), ddof=1)) < tol


__all__ = ["terminate_simplex", "terminate_solver"]
