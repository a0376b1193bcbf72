"""Univariate minimization: bracket a local minimum, then refine the bracket."""

from __future__ import annotations

from typing import Callable, Optional

from .bracketing import bracket_minimum, golden_section_search
from .core import UnivariateMethod, UnivariateObjective, UnivariateOptions

Refinement = Callable[[UnivariateObjective, float, float, UnivariateOptions], tuple[float, float]]


def _golden(f: UnivariateObjective, a: float, b: float, options: UnivariateOptions) -> tuple[float, float]:
    if options.tol is not None:
        return golden_section_search(f, a, b, tol=options.tol)
    return golden_section_search(f, a, b, n=options.n)


_REFINEMENTS: dict[UnivariateMethod, Refinement] = {
    UnivariateMethod.GOLDEN: _golden,
}


def minimize_univariate(
    f: UnivariateObjective,
    x0: float,
    options: Optional[UnivariateOptions] = None,
) -> tuple[float, float]:
    """Return ``(x_min, f_min)`` for a univariate objective.

    The minimum is first bracketed from ``x0`` and the bracket is then reduced
    with the method selected by ``options.method``. The midpoint of the final
    bracket is returned together with its objective value.

    Example
    -------
    >>> x_min, f_min = minimize_univariate(lambda x: (x - 2.0) ** 2, 0.0)
    >>> round(x_min, 6)
    2.0
    """
    options = options or UnivariateOptions()
    refine = _REFINEMENTS[UnivariateMethod(options.method)]
    a0, b0 = bracket_minimum(f, x0)
    a, b = refine(f, a0, b0, options)
    x_min = (a + b) / 2.0
    return x_min, f(x_min)


__all__ = ["minimize_univariate"]
