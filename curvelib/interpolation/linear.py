"""
Linear and step interpolation methods.
"""
from typing import Tuple

from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Piecewise linear interpolation.

    Applied to LOG_OF_VALUE_PER_TIME discount factors this is linear
    interpolation of zero rates; applied to LOG_OF_VALUE it is the classic
    log-linear discount curve with piecewise constant forwards.
    """

    def _interpolate_between(self, t: float, i: int) -> float:
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        v1, v2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return v1 + weight * (v2 - v1)

    def _boundary_slopes(self) -> Tuple[float, float]:
        p, v = self.pillars, self.values
        left = (v[1] - v[0]) / (p[1] - p[0])
        right = (v[-1] - v[-2]) / (p[-1] - p[-2])
        return float(left), float(right)


class PiecewiseConstantInterpolator(Interpolator):
    """Piecewise constant (step function) interpolation.

    Holds the value of the left point until the next point.
    """

    def _interpolate_between(self, t: float, i: int) -> float:
        return self.values[i]

    def _boundary_slopes(self) -> Tuple[float, float]:
        return 0.0, 0.0
