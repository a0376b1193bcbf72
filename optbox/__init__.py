"""optbox - local optimization toolbox built on NumPy."""

__version__ = "0.1.0"

# Constrained problems
from .constrained import (
    check_feasibility,
    penalized,
    penalty_count,
    penalty_mixed,
    penalty_quadratic,
)

# Solvers and their building blocks
from .optimize import (
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
    approx_grad,
    bracket_minimum,
    bracket_sign_change,
    golden_section_search,
    line_search,
    minimize_barzilai_borwein,
    minimize_conjugate_gradient,
    minimize_cross_entropy,
    minimize_gradient_descent,
    minimize_hooke_jeeves,
    minimize_nelder_mead,
    minimize_univariate,
    terminate_solver,
)
from .sampling import samples_full_factorial
from .statistics import randmvn, sample_mean, sample_statistics
from .surrogate import KernelType, RBFSurrogate, fit_surrogate, make_kernel

__all__ = [
    "__version__",
    "BarzilaiBorweinOptions",
    "BetaType",
    "ConjugateGradientOptions",
    "CrossEntropyOptions",
    "DescentOptions",
    "HookeJeevesOptions",
    "KernelType",
    "NelderMeadOptions",
    "ObjectivePoint",
    "OptimizeResult",
    "RBFSurrogate",
    "SolverOptions",
    "StepType",
    "Termination",
    "UnivariateMethod",
    "UnivariateOptions",
    "approx_grad",
    "bracket_minimum",
    "bracket_sign_change",
    "check_feasibility",
    "fit_surrogate",
    "golden_section_search",
    "line_search",
    "make_kernel",
    "minimize_barzilai_borwein",
    "minimize_conjugate_gradient",
    "minimize_cross_entropy",
    "minimize_gradient_descent",
    "minimize_hooke_jeeves",
    "minimize_nelder_mead",
    "minimize_univariate",
    "penalized",
    "penalty_count",
    "penalty_mixed",
    "penalty_quadratic",
    "randmvn",
    "sample_mean",
    "sample_statistics",
    "samples_full_factorial",
    "terminate_solver",
]
