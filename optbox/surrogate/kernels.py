"""Radial basis kernels ``psi(r)`` for surrogate models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class KernelType(str, Enum):
    LINEAR = "linear"
    CUBIC = "cubic"
    THIN_PLATE_SPLINE = "thin plate spline"
    GAUSSIAN = "gaussian"
    MULTIQUADRATIC = "multiquadratic"
    INVERSE_MULTIQUADRATIC = "inverse multiquadratic"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace("_", " ").replace("-", " ")
            for member in cls:
                if member.value == key:
                    return member
        return None


@dataclass(frozen=True)
class Kernel:
    """A radial basis function with its shape parameter ``sigma``."""

    type: KernelType = KernelType.CUBIC
    sigma: float = 1.0

    def __call__(self, r: float) -> float:
        r = float(r)
        if self.type is KernelType.LINEAR:
            return r
        if self.type is KernelType.CUBIC:
            return r**3
        if self.type is KernelType.THIN_PLATE_SPLINE:
            # r^2 log r -> 0 as r -> 0
            return 0.0 if r == 0.0 else r**2 * float(np.log(r))
        if self.type is KernelType.GAUSSIAN:
            return float(np.exp(-(r**2) / (2.0 * self.sigma**2)))
        if self.type is KernelType.MULTIQUADRATIC:
            return float(np.sqrt(r**2 + self.sigma**2))
        return float((r**2 + self.sigma**2) ** -0.5)


def make_kernel(type: KernelType | str = KernelType.CUBIC, sigma: float = 1.0) -> Kernel:
    """Build a :class:`Kernel`; ``sigma`` is used by the Gaussian and
    (inverse) multiquadratic kernels only."""
    if sigma <= 0:
        raise ValueError("sigma must be positive")
    return Kernel(type=KernelType(type), sigma=float(sigma))


__all__ = ["Kernel", "KernelType", "make_kernel"]
