"""
Spline interpolation methods backed by scipy piecewise polynomials.
"""
from abc import abstractmethod
from typing import Sequence, Tuple

import numpy as np
from scipy.interpolate import Akima1DInterpolator, CubicHermiteSpline, CubicSpline, PPoly

from .base import Interpolator

# Fewest points for which the spline schemes are used; smaller curves fall
# back to linear interpolation in the factory.
MIN_SPLINE_POINTS = 3


class _PolynomialInterpolator(Interpolator):
    """Interpolator delegating to a scipy ``PPoly``."""

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        super().__init__(pillars, values)
        self._poly = self._build()

    @abstractmethod
    def _build(self) -> PPoly:
        """Fit the piecewise polynomial through the pillars."""

    def _interpolate_between(self, t: float, i: int) -> float:
        return float(self._poly(t))

    def _boundary_slopes(self) -> Tuple[float, float]:
        left = self._poly(self.pillars[0], 1)
        right = self._poly(self.pillars[-1], 1)
        return float(left), float(right)


class CubicSplineInterpolator(_PolynomialInterpolator):
    """Natural cubic spline (zero second derivative at both ends)."""

    def _build(self) -> PPoly:
        return CubicSpline(self.pillars, self.values, bc_type="natural")


class AkimaInterpolator(_PolynomialInterpolator):
    """Akima spline; less prone to overshoot than the natural cubic spline."""

    def _build(self) -> PPoly:
        return Akima1DInterpolator(self.pillars, self.values)


class HarmonicSplineInterpolator(_PolynomialInterpolator):
    """Cubic Hermite spline with weighted harmonic-mean slopes.

    Preserves monotonicity of the input: a slope is set to zero wherever the
    adjacent secants change sign (Fritsch-Butland).
    """

    def _build(self) -> PPoly:
        return CubicHermiteSpline(self.pillars, self.values, self._derivatives())

    def _derivatives(self) -> np.ndarray:
        h = np.diff(self.pillars)
        secants = np.diff(self.values) / h
        d = np.zeros_like(self.values)

        for i in range(1, len(self.values) - 1):
            s0, s1 = secants[i - 1], secants[i]
            if s0 * s1 <= 0.0:
                continue
            h0, h1 = h[i - 1], h[i]
            d[i] = 3.0 * (h0 + h1) / ((2.0 * h1 + h0) / s0 + (h1 + 2.0 * h0) / s1)

        d[0] = self._end_slope(h[0], h[1], secants[0], secants[1])
        d[-1] = self._end_slope(h[-1], h[-2], secants[-1], secants[-2])
        return d

    @staticmethod
    def _end_slope(h0: float, h1: float, s0: float, s1: float) -> float:
        slope = ((2.0 * h0 + h1) * s0 - h0 * s1) / (h0 + h1)
        if np.sign(slope) != np.sign(s0):
            return 0.0
        if np.sign(s0) != np.sign(s1) and abs(slope) > abs(3.0 * s0):
            return 3.0 * s0
        return slope
