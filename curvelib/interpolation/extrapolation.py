"""
Extrapolation policies for times outside the range of curve points.
"""
from abc import ABC, abstractmethod

from .base import Interpolator


class Extrapolator(ABC):
    """Continues an interpolator beyond [t_min, t_max]."""

    def __init__(self, interpolator: Interpolator):
        self.interpolator = interpolator

    @abstractmethod
    def extrapolate(self, t: float) -> float:
        """Value at t, for t < t_min or t > t_max."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.interpolator!r})"


class ConstantExtrapolator(Extrapolator):
    """Flat extrapolation at the nearest boundary value."""

    def extrapolate(self, t: float) -> float:
        values = self.interpolator.values
        if t < self.interpolator.t_min:
            return float(values[0])
        return float(values[-1])


class LinearExtrapolator(Extrapolator):
    """Extends the interpolant along its slope at the boundary."""

    def __init__(self, interpolator: Interpolator):
        super().__init__(interpolator)
        self._left_slope, self._right_slope = interpolator.boundary_slopes()

    def extrapolate(self, t: float) -> float:
        interp = self.interpolator
        if t < interp.t_min:
            return float(interp.values[0] + self._left_slope * (t - interp.t_min))
        return float(interp.values[-1] + self._right_slope * (t - interp.t_max))
