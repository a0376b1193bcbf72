"""Bracketing and interval-reduction routines for univariate functions.

References:
    - Kochenderfer & Wheeler, *Algorithms for Optimization* (2019),
      Algorithms 3.1 (bracket minimum), 3.3 (golden section search) and
      3.7 (bracket sign change).

Both bracketing routines assume the function has the structure they look for
(a local minimum or a sign change reachable by geometric growth). On
functions without it they would expand forever, so each loop is capped at
``max_iter`` expansions; hitting the cap logs a warning and returns the last
interval reached.
"""

from __future__ import annotations

import math
from typing import Optional

from optbox.logging import get_logger

from .core import UnivariateObjective

logger = get_logger(__name__)

PHI = (1.0 + math.sqrt(5.0)) / 2.0
MAX_EXPANSIONS = 1000


def bracket_minimum(
    f: UnivariateObjective,
    x0: float = 0.0,
    s: float = 1e-2,
    k: float = 2.0,
    max_iter: int = MAX_EXPANSIONS,
) -> tuple[float, float]:
    """Find an interval ``(a, b)``, ``a < b``, containing a local minimum of ``f``.

    Starting from ``x0`` a step ``s`` is taken downhill (the direction is
    reversed if the first step goes uphill) and the step is multiplied by
    ``k`` until the function value increases.
    """
    if k <= 1:
        raise ValueError("Expansion factor k must be greater than 1.")
    a, ya = x0, f(x0)
    b, yb = a + s, f(a + s)
    if yb > ya:
        a, b = b, a
        yb = ya
        s = -s
    c = b
    for _ in range(max_iter):
        c = b + s
        yc = f(c)
        if yc > yb:
            return (a, c) if a < c else (c, a)
        a, b, yb = b, c, yc
        s *= k
    logger.warning(
        "bracket_minimum: no increase after %d expansions; returning last interval", max_iter
    )
    return (a, c) if a < c else (c, a)


def bracket_sign_change(
    f: UnivariateObjective,
    a: float,
    b: float,
    k: float = 2.0,
    max_iter: int = MAX_EXPANSIONS,
) -> tuple[float, float]:
    """Grow ``[a, b]`` about its centre until ``f`` changes sign across it."""
    if k <= 1:
        raise ValueError("Expansion factor k must be greater than 1.")
    if a > b:
        a, b = b, a
    center = (a + b) / 2.0
    half_width = (b - a) / 2.0
    for _ in range(max_iter):
        if f(a) * f(b) <= 0:
            return a, b
        half_width *= k
        a, b = center - half_width, center + half_width
    logger.warning(
        "bracket_sign_change: no sign change after %d expansions; returning last interval",
        max_iter,
    )
    return a, b


def golden_section_search(
    f: UnivariateObjective,
    a: float,
    b: float,
    n: Optional[int] = None,
    tol: Optional[float] = None,
) -> tuple[float, float]:
    """Shrink ``[a, b]`` around a local minimizer with the golden ratio.

    ``n`` is the number of function evaluations (default 100). When only
    ``tol`` is given, ``n = ceil((b - a) / (tol * ln(phi)))``. Each iteration
    reuses the interior point of the previous one, so it costs a single new
    evaluation. The returned bracket is ordered low/high.
    """
    if n is None:
        if tol is not None:
            if tol <= 0:
                raise ValueError("tol must be positive")
            n = math.ceil(abs(b - a) / (tol * math.log(PHI)))
        else:
            n = 100
    if n < 1:
        raise ValueError("n must be at least 1")
    rho = PHI - 1.0
    d = rho * b + (1.0 - rho) * a
    yd = f(d)
    for _ in range(n - 1):
        c = rho * a + (1.0 - rho) * b
        yc = f(c)
        if yc < yd:
            b, d, yd = d, c, yc
        else:
            a, b = b, c
    return (a, b) if a < b else (b, a)


__all__ = ["PHI", "bracket_minimum", "bracket_sign_change", "golden_section_search"]
