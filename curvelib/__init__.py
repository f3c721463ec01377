"""Discount curve interpolation engine.

This package turns sparse market points (discount factors, zero rates,
annualized zero rates or forward rates) into continuous discount curves.

Key modules:
- curves: point store, interpolated curves, discount curves, curve model
- interpolation: entity transforms, interpolators and extrapolators
- tenor: time discretizations
- conventions: day count conventions for date-based queries
- analytics: swap annuity
"""

__version__ = "1.0.0"

from curvelib.config import DEFAULT_CONFIG, CurveConfig
from curvelib.curves import Curve, CurveBuilder, CurveModel, CurvePoint, DiscountCurve
from curvelib.errors import (
    ConstructionError,
    CurveError,
    CurveNotFoundError,
    DomainError,
    DuplicateTimeError,
    PointNotFoundError,
)
from curvelib.interpolation import (
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)
from curvelib.tenor import TimeDiscretization

__all__ = [
    "__version__",
    # Curves
    "Curve",
    "CurveBuilder",
    "CurveModel",
    "CurvePoint",
    "DiscountCurve",
    "TimeDiscretization",
    # Selectors
    "InterpolationMethod",
    "ExtrapolationMethod",
    "InterpolationEntity",
    # Configuration
    "CurveConfig",
    "DEFAULT_CONFIG",
    # Errors
    "CurveError",
    "ConstructionError",
    "DuplicateTimeError",
    "DomainError",
    "PointNotFoundError",
    "CurveNotFoundError",
]
