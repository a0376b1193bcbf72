"""Core interfaces shared across the local optimizers.

Every n-dimensional solver takes an objective, an initial guess and one of the
option dataclasses below, and returns an :class:`OptimizeResult`. Strategy
choices are closed enums; each enum also accepts the legacy string spelling
(``"abs"``, ``"line search"``, ``"Polak-Ribiere"``...) through its constructor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]
UnivariateObjective = Callable[[float], float]

K_MAX = 200
TOL = 1e-10


class _StrEnum(str, Enum):
    """Enum whose lookup is case-insensitive and accepts aliases."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace("_", " ").replace("-", " ")
            for member in cls:
                names = (member.value, member.name, *_ALIASES.get(member.value, ()))
                for name in names:
                    if name.lower().replace("_", " ").replace("-", " ") == key:
                        return member
        return None


class Termination(_StrEnum):
    """Convergence test applied to consecutive objective values."""

    ABSOLUTE = "abs"
    RELATIVE = "rel"


class StepType(_StrEnum):
    """Step-factor strategy for the gradient-based solvers."""

    LINE_SEARCH = "line search"
    DECAY = "decay"
    CONSTANT = "constant"


class BetaType(_StrEnum):
    """Conjugacy parameter update for conjugate gradient."""

    FLETCHER_REEVES = "Fletcher-Reeves"
    POLAK_RIBIERE = "Polak-Ribiere"


class UnivariateMethod(_StrEnum):
    """Interval refinement used by :func:`minimize_univariate`."""

    GOLDEN = "golden"


_ALIASES = {
    "abs": ("absolute",),
    "rel": ("relative",),
    "line search": ("linesearch",),
    "golden": ("golden section",),
}


@dataclass(frozen=True)
class ObjectivePoint:
    """A design point together with its objective value."""

    x: Array
    fun: float


@dataclass
class OptimizeResult:
    """Standard result object returned by all optimizers in this module."""

    x: Array
    fun: float
    nit: int
    success: bool
    message: str
    nfev: int = 0
    njev: int = 0
    history: List[ObjectivePoint] = field(default_factory=list)

    @property
    def x_all(self) -> Array:
        """Trajectory of design points, one row per recorded iterate."""
        if not self.history:
            return np.empty((0, np.size(self.x)))
        return np.vstack([point.x for point in self.history])

    @property
    def f_all(self) -> Array:
        """Trajectory of objective values."""
        return np.array([point.fun for point in self.history], dtype=float)


@dataclass(frozen=True)
class UnivariateOptions:
    """Options for :func:`optbox.optimize.minimize_univariate`.

    ``n`` is the maximum number of function evaluations of the refinement
    stage. When ``tol`` is given it determines ``n`` instead.
    """

    method: UnivariateMethod = UnivariateMethod.GOLDEN
    n: int = 200
    tol: Optional[float] = None


@dataclass(frozen=True)
class SolverOptions:
    """Options shared by every iterative solver."""

    k_max: int = K_MAX
    tol: float = TOL
    termination: Termination = Termination.ABSOLUTE
    return_all: bool = False


@dataclass(frozen=True)
class DescentOptions(SolverOptions):
    """Options for gradient descent.

    ``alpha`` is required for the constant and decay step types, ``gamma``
    for decay. ``gradient`` defaults to a central finite difference.
    """

    step_type: StepType = StepType.LINE_SEARCH
    alpha: Optional[float] = None
    gamma: Optional[float] = None
    gradient: Optional[Gradient] = None
    line_search: UnivariateOptions = UnivariateOptions(n=10)


@dataclass(frozen=True)
class ConjugateGradientOptions(DescentOptions):
    beta_type: BetaType = BetaType.POLAK_RIBIERE


@dataclass(frozen=True)
class BarzilaiBorweinOptions(SolverOptions):
    gradient: Optional[Gradient] = None
    lam: float = 1.0


@dataclass(frozen=True)
class NelderMeadOptions(SolverOptions):
    """Reflection (alpha), expansion (beta) and contraction (gamma) factors,
    plus the spread of the random initial simplex."""

    alpha: float = 1.0
    beta: float = 2.0
    gamma: float = 0.5
    sigma0: float = 10.0
    rng: Optional[np.random.Generator] = None


@dataclass(frozen=True)
class HookeJeevesOptions(SolverOptions):
    alpha: float = 1.0
    gamma: float = 0.5


@dataclass(frozen=True)
class CrossEntropyOptions(SolverOptions):
    """Population size ``m``, elite size ``m_elite`` and initial spread."""

    m: int = 100
    m_elite: int = 10
    sigma0: float = 10.0
    rng: Optional[np.random.Generator] = None


__all__ = [
    "Array",
    "BarzilaiBorweinOptions",
    "BetaType",
    "ConjugateGradientOptions",
    "CrossEntropyOptions",
    "DescentOptions",
    "Gradient",
    "HookeJeevesOptions",
    "K_MAX",
    "NelderMeadOptions",
    "Objective",
    "ObjectivePoint",
    "OptimizeResult",
    "SolverOptions",
    "StepType",
    "TOL",
    "Termination",
    "UnivariateMethod",
    "UnivariateObjective",
    "UnivariateOptions",
]
