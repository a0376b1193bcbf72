"""Sample statistics and multivariate normal sampling used by the stochastic solvers."""

from .core import randmvn, sample_mean, sample_statistics

__all__ = ["randmvn", "sample_mean", "sample_statistics"]
