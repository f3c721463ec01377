"""Time discretizations."""

from .discretization import TimeDiscretization

__all__ = ["TimeDiscretization"]
