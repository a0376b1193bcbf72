"""Sampling plans for building surrogate models."""

from .factorial import samples_full_factorial

__all__ = ["samples_full_factorial"]
