"""
Interpolation methods for curves.

Interpolators work on (time, value) pairs that an entity transform has already
mapped into interpolation space, so any scheme combines with any entity.
"""

# Base classes
from .base import Interpolator
from .entity import (
    EntityTransform,
    LogOfValuePerTimeTransform,
    LogOfValueTransform,
    ValueTransform,
    get_entity_transform,
)
from .extrapolation import ConstantExtrapolator, Extrapolator, LinearExtrapolator

# Factory
from .factory import create_extrapolator, create_interpolator

# Interpolation methods
from .linear import LinearInterpolator, PiecewiseConstantInterpolator
from .spline import (
    AkimaInterpolator,
    CubicSplineInterpolator,
    HarmonicSplineInterpolator,
)
from .types import ExtrapolationMethod, InterpolationEntity, InterpolationMethod

__all__ = [
    # Selectors
    'InterpolationMethod',
    'ExtrapolationMethod',
    'InterpolationEntity',

    # Base classes
    'Interpolator',
    'Extrapolator',
    'EntityTransform',

    # Entity transforms
    'ValueTransform',
    'LogOfValueTransform',
    'LogOfValuePerTimeTransform',
    'get_entity_transform',

    # Interpolation methods
    'LinearInterpolator',
    'PiecewiseConstantInterpolator',
    'CubicSplineInterpolator',
    'AkimaInterpolator',
    'HarmonicSplineInterpolator',

    # Extrapolation methods
    'ConstantExtrapolator',
    'LinearExtrapolator',

    # Factory
    'create_interpolator',
    'create_extrapolator',
]
