"""Full-factorial sampling plans."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def samples_full_factorial(
    x_min: Sequence[float], x_max: Sequence[float], m: Sequence[int]
) -> np.ndarray:
    """Return a full-factorial grid as the columns of an ``(n, N)`` array.

    Dimension ``i`` is split into ``m[i]`` equal intervals between
    ``x_min[i]`` and ``x_max[i]`` (``m[i] + 1`` levels), so
    ``N = prod(m + 1)``. The first coordinate varies fastest.

    Example
    -------
    >>> samples_full_factorial([0, 0], [1, 2], [1, 2]).shape
    (2, 6)
    """
    x_min = np.asarray(x_min, dtype=float).reshape(-1)
    x_max = np.asarray(x_max, dtype=float).reshape(-1)
    m = np.asarray(m, dtype=int).reshape(-1)
    if not x_min.shape == x_max.shape == m.shape:
        raise ValueError("x_min, x_max and m must have the same length")
    if np.any(m < 1):
        raise ValueError("each dimension needs at least one interval")
    levels = [np.linspace(lo, hi, k + 1) for lo, hi, k in zip(x_min, x_max, m)]
    grids = np.meshgrid(*levels, indexing="ij")
    return np.vstack([grid.ravel(order="F") for grid in grids])


__all__ = ["samples_full_factorial"]
