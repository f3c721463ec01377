"""
Curves package.

Main APIs:
---------
    - DiscountCurve: build discount curves from discount factors, zero rates,
      annualized zero rates or forward rates, and query them
    - Curve: generic interpolated curve
    - CurveBuilder: incremental construction used by calibration
    - CurveModel: registry of named curves passed to queries
"""

from .base import Curve
from .builder import CurveBuilder
from .discount import DiscountCurve
from .helpers import (
    annualized_zero_rate_to_df,
    continuous_to_simple,
    df_to_annualized_zero_rate,
    df_to_zero_rate,
    simple_to_continuous,
    zero_rate_to_df,
)
from .model import CurveModel
from .points import CurvePoint, CurvePoints

__all__ = [
    "Curve",
    "CurveBuilder",
    "CurveModel",
    "CurvePoint",
    "CurvePoints",
    "DiscountCurve",
    # Helpers
    "df_to_zero_rate",
    "zero_rate_to_df",
    "annualized_zero_rate_to_df",
    "df_to_annualized_zero_rate",
    "simple_to_continuous",
    "continuous_to_simple",
]
