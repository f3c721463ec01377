"""
Base classes for curve interpolation methods.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

import numpy as np

from curvelib.errors import ConstructionError


class Interpolator(ABC):
    """Base class for interpolation over sorted (time, value) pairs.

    Interpolators are oblivious to what the values mean: the curve hands them
    points that are already transformed into interpolation space.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            pillars: Times of the points (in years)
            values: Values at the points, in interpolation space
        """
        if len(pillars) != len(values):
            raise ConstructionError("Pillars and values must have same length")
        if len(pillars) < 1:
            raise ConstructionError("Need at least 1 point for interpolation")

        # Sort by pillars
        sorted_pairs = sorted(zip(pillars, values, strict=True))
        self.pillars = np.array([p[0] for p in sorted_pairs], dtype=float)
        self.values = np.array([p[1] for p in sorted_pairs], dtype=float)

        # Check for duplicates
        if len(np.unique(self.pillars)) != len(self.pillars):
            raise ConstructionError("Duplicate pillar times not allowed")

    @property
    def t_min(self) -> float:
        return float(self.pillars[0])

    @property
    def t_max(self) -> float:
        return float(self.pillars[-1])

    def interpolate(self, t: float) -> float:
        """Interpolate value at time t, for t_min <= t <= t_max.

        Grid times return the stored value exactly.
        """
        if len(self.pillars) == 1:
            return float(self.values[0])

        i = self._left_index(t)
        if self.pillars[i] == t:
            return float(self.values[i])
        return float(self._interpolate_between(t, min(i, len(self.pillars) - 2)))

    def interpolate_many(self, times: Sequence[float]) -> List[float]:
        """Interpolate values at multiple times."""
        return [self.interpolate(t) for t in times]

    def boundary_slopes(self) -> Tuple[float, float]:
        """Slopes of the interpolant at t_min and t_max."""
        if len(self.pillars) == 1:
            return 0.0, 0.0
        return self._boundary_slopes()

    def _left_index(self, t: float) -> int:
        """Index of the last pillar <= t, clipped to the valid segment range."""
        i = int(np.searchsorted(self.pillars, t, side="right")) - 1
        return min(max(i, 0), len(self.pillars) - 1)

    @abstractmethod
    def _interpolate_between(self, t: float, i: int) -> float:
        """Value at t strictly inside segment [pillars[i], pillars[i + 1]]."""

    @abstractmethod
    def _boundary_slopes(self) -> Tuple[float, float]:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.pillars)} points)"
