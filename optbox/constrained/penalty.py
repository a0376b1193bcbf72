"""Penalty functions for constrained problems.

Constraints follow the usual convention: equality constraints ``h(x) = 0``
and inequality constraints ``g(x) <= 0``, each returning a scalar or a
vector. Either may be ``None``. A penalty ``p(x)`` is zero exactly on the
feasible set, and ``penalized(f, p, rho)`` turns a constrained problem into
an unconstrained objective for the solvers in :mod:`optbox.optimize`.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

Array = np.ndarray
Constraint = Callable[[Array], Array | float]
Penalty = Callable[[Array], float]


def _evaluate(constraint: Optional[Constraint], x: Array) -> Array:
    if constraint is None:
        return np.zeros(1)
    return np.atleast_1d(np.asarray(constraint(x), dtype=float))


def penalty_count(h: Optional[Constraint] = None, g: Optional[Constraint] = None) -> Penalty:
    """Count penalty: the number of violated constraints."""

    def p(x: Array) -> float:
        return float(np.sum(_evaluate(g, x) > 0) + np.sum(_evaluate(h, x) != 0))

    return p


def penalty_quadratic(h: Optional[Constraint] = None, g: Optional[Constraint] = None) -> Penalty:
    """Quadratic penalty ``sum(max(g, 0)^2) + sum(h^2)``."""

    def p(x: Array) -> float:
        return float(np.sum(np.maximum(_evaluate(g, x), 0.0) ** 2) + np.sum(_evaluate(h, x) ** 2))

    return p


def penalty_mixed(
    h: Optional[Constraint] = None,
    g: Optional[Constraint] = None,
    rho1: float = 1.0,
    rho2: float = 1.0,
) -> Penalty:
    """Weighted sum ``rho1 * count + rho2 * quadratic``."""
    count = penalty_count(h, g)
    quadratic = penalty_quadratic(h, g)

    def p(x: Array) -> float:
        return rho1 * count(x) + rho2 * quadratic(x)

    return p


def penalized(f: Callable[[Array], float], p: Penalty, rho: float) -> Callable[[Array], float]:
    """Return the objective ``x -> f(x) + rho * p(x)``."""

    def objective(x: Array) -> float:
        return float(f(x)) + rho * p(x)

    return objective


def check_feasibility(
    x: Array, h: Optional[Constraint] = None, g: Optional[Constraint] = None
) -> bool:
    """Return True when every ``h(x) == 0`` and every ``g(x) <= 0``."""
    return bool(np.all(_evaluate(h, x) == 0) and np.all(_evaluate(g, x) <= 0))


__all__ = [
    "check_feasibility",
    "penalized",
    "penalty_count",
    "penalty_mixed",
    "penalty_quadratic",
]
