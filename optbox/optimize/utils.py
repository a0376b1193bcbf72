"""Utility helpers shared by the solvers: basis vectors, finite differences
and evaluation bookkeeping."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import Array, Gradient, Objective, ObjectivePoint


def norm(x: Array) -> float:
    """Euclidean norm of ``x`` as a Python float."""
    return float(np.linalg.norm(x))


def basis(i: int, n: int) -> Array:
    """Return the ``i``-th standard basis vector of length ``n`` (0-based)."""
    if not 0 <= i < n:
        raise ValueError(f"basis index {i} out of range for dimension {n}")
    e = np.zeros(n, dtype=float)
    e[i] = 1.0
    return e


def approx_grad(fun: Objective, x: Array, eps: float = 1e-6) -> Array:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size for finite differences.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).copy()
    grad = np.zeros_like(x, dtype=float)
    for i in range(x.size):
        ei = np.zeros_like(x)
        ei[i] = eps
        fx_plus = fun(x + ei)
        fx_minus = fun(x - ei)
        grad[i] = (fx_plus - fx_minus) / (2.0 * eps)
    return grad


class CountingObjective:
    """Wrap an objective and count its evaluations."""

    def __init__(self, fun: Objective) -> None:
        self.fun = fun
        self.nfev = 0

    def __call__(self, x: Array) -> float:
        self.nfev += 1
        return float(self.fun(x))


class GradientOracle:
    """Evaluate a user gradient, or approximate one by finite differences.

    Finite-difference evaluations go through the counting objective so that
    they show up in ``nfev``; closed-form calls are counted in ``njev``.
    """

    def __init__(self, objective: CountingObjective, gradient: Optional[Gradient] = None) -> None:
        self.objective = objective
        self.gradient = gradient
        self.njev = 0

    def __call__(self, x: Array) -> Array:
        if self.gradient is not None:
            self.njev += 1
            return np.asarray(self.gradient(x), dtype=float)
        return approx_grad(self.objective, x)


class Recorder:
    """Collect the trajectory when ``return_all`` is set; no-op otherwise."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled
        self.points: list[ObjectivePoint] = []

    def record(self, x: Array, fun: float) -> None:
        if self.enabled:
            self.points.append(ObjectivePoint(x=np.array(x, dtype=float), fun=float(fun)))


__all__ = [
    "CountingObjective",
    "GradientOracle",
    "Recorder",
    "approx_grad",
    "basis",
    "norm",
]
