"""Radial basis function surrogate models."""

from .kernels import Kernel, KernelType, make_kernel
from .rbf import RBFSurrogate, eval_surrogate, fit_surrogate, radial_basis

__all__ = [
    "Kernel",
    "KernelType",
    "RBFSurrogate",
    "eval_surrogate",
    "fit_surrogate",
    "make_kernel",
    "radial_basis",
]
