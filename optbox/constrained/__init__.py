"""Penalty methods and feasibility checks for constrained problems."""

from .penalty import (
    check_feasibility,
    penalized,
    penalty_count,
    penalty_mixed,
    penalty_quadratic,
)

__all__ = [
    "check_feasibility",
    "penalized",
    "penalty_count",
    "penalty_mixed",
    "penalty_quadratic",
]
