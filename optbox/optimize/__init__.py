"""Local optimizers over real vector spaces.

Example
-------
>>> import numpy as np
>>> from optbox.optimize import minimize_conjugate_gradient
>>> A = np.array([[4.0, 1.0], [1.0, 3.0]])
>>> def f(x):
...     return float((x - 1.0) @ A @ (x - 1.0))
>>> res = minimize_conjugate_gradient(f, np.array([3.0, -2.0]))
>>> bool(np.allclose(res.x, np.ones(2), atol=1e-3))
True
"""

from .barzilai_borwein import minimize_barzilai_borwein
from .bracketing import bracket_minimum, bracket_sign_change, golden_section_search
from .conjugate_gradient import fletcher_reeves, minimize_conjugate_gradient, polak_ribiere
from .core import (
    K_MAX,
    TOL,
    BarzilaiBorweinOptions,
    BetaType,
    ConjugateGradientOptions,
    CrossEntropyOptions,
    DescentOptions,
    HookeJeevesOptions,
    NelderMeadOptions,
    ObjectivePoint,
    OptimizeResult,
    SolverOptions,
    StepType,
    Termination,
    UnivariateMethod,
    UnivariateOptions,
)
from .cross_entropy import minimize_cross_entropy, select_elite
from .gradient import make_step_factor, minimize_gradient_descent
from .hooke_jeeves import minimize_hooke_jeeves
from .line_search import line_search
from .nelder_mead import minimize_nelder_mead
from .termination import terminate_simplex, terminate_solver
from .univariate import minimize_univariate
from .utils import approx_grad, basis, norm

__all__ = [
    "K_MAX",
    "TOL",
    "BarzilaiBorweinOptions",
    "BetaType",
    "ConjugateGradientOptions",
    "CrossEntropyOptions",
    "DescentOptions",
    "HookeJeevesOptions",
    "NelderMeadOptions",
    "ObjectivePoint",
    "OptimizeResult",
    "SolverOptions",
    "StepType",
    "Termination",
    "UnivariateMethod",
    "UnivariateOptions",
    "approx_grad",
    "basis",
    "bracket_minimum",
    "bracket_sign_change",
    "fletcher_reeves",
    "golden_section_search",
    "line_search",
    "make_step_factor",
    "minimize_barzilai_borwein",
    "minimize_conjugate_gradient",
    "minimize_cross_entropy",
    "minimize_gradient_descent",
    "minimize_hooke_jeeves",
    "minimize_nelder_mead",
    "minimize_univariate",
    "norm",
    "polak_ribiere",
    "select_elite",
    "terminate_simplex",
    "terminate_solver",
]
