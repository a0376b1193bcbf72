"""Exact line search by univariate minimization along a descent direction.

Kochenderfer & Wheeler, *Algorithms for Optimization* (p. 54).
"""

from __future__ import annotations

from typing import Optional

from .bracketing import bracket_minimum
from .core import Array, Objective, UnivariateOptions
from .univariate import minimize_univariate


def line_search(
    f: Objective,
    x: Array,
    d: Array,
    options: Optional[UnivariateOptions] = None,
) -> float:
    """Return the step factor ``alpha`` minimizing ``f(x + alpha * d)``.

    The minimum of ``g(alpha) = f(x + alpha * d)`` is bracketed from
    ``alpha = 0``; the bracket midpoint seeds :func:`minimize_univariate`.
    """

    def g(alpha: float) -> float:
        return f(x + alpha * d)

    a, b = bracket_minimum(g)
    alpha0 = (a + b) / 2.0
    alpha, _ = minimize_univariate(g, alpha0, options)
    return alpha


__all__ = ["line_search"]
