"""
Factory functions for creating interpolators and extrapolators.
"""
import logging
from typing import Sequence, Union

from .base import Interpolator
from .extrapolation import ConstantExtrapolator, Extrapolator, LinearExtrapolator
from .linear import LinearInterpolator, PiecewiseConstantInterpolator
from .spline import (
    MIN_SPLINE_POINTS,
    AkimaInterpolator,
    CubicSplineInterpolator,
    HarmonicSplineInterpolator,
)
from .types import ExtrapolationMethod, InterpolationMethod

logger = logging.getLogger(__name__)

_INTERPOLATORS = {
    InterpolationMethod.LINEAR: LinearInterpolator,
    InterpolationMethod.PIECEWISE_CONSTANT: PiecewiseConstantInterpolator,
    InterpolationMethod.CUBIC_SPLINE: CubicSplineInterpolator,
    InterpolationMethod.AKIMA: AkimaInterpolator,
    InterpolationMethod.HARMONIC_SPLINE: HarmonicSplineInterpolator,
}

_SPLINES = {
    InterpolationMethod.CUBIC_SPLINE,
    InterpolationMethod.AKIMA,
    InterpolationMethod.HARMONIC_SPLINE,
}

_EXTRAPOLATORS = {
    ExtrapolationMethod.CONSTANT: ConstantExtrapolator,
    ExtrapolationMethod.LINEAR: LinearExtrapolator,
}


def create_interpolator(method: Union[str, InterpolationMethod],
                        pillars: Sequence[float],
                        values: Sequence[float]) -> Interpolator:
    """
    Create an interpolator based on method.

    Args:
        method: Interpolation method or its name
        pillars: Time points
        values: Values to interpolate, already in interpolation space

    Returns:
        Configured interpolator
    """
    method = InterpolationMethod.parse(method)

    if method in _SPLINES and len(pillars) < MIN_SPLINE_POINTS:
        logger.debug(
            "%s needs %s points, got %s; using LINEAR",
            method.name,
            MIN_SPLINE_POINTS,
            len(pillars),
        )
        method = InterpolationMethod.LINEAR

    return _INTERPOLATORS[method](pillars, values)


def create_extrapolator(method: Union[str, ExtrapolationMethod],
                        interpolator: Interpolator) -> Extrapolator:
    """Create the extrapolator continuing ``interpolator``."""
    return _EXTRAPOLATORS[ExtrapolationMethod.parse(method)](interpolator)
