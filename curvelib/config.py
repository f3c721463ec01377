"""Default settings shared by curve construction and queries."""

from dataclasses import dataclass, replace
from typing import Optional

from curvelib.interpolation.types import (
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)


@dataclass(frozen=True)
class CurveConfig:
    """Configuration for curve construction.

    Attributes:
        interpolation_method: Scheme used between points
        extrapolation_method: Policy used outside the point range
        interpolation_entity: Space in which interpolation happens
        zero_rate_epsilon: Maturity substituted for a zero-rate query at t=0.
            ``None`` disables the substitution, so such a query raises.
        time_day_count: Day count used to turn dates into curve times
        monotonicity_tolerance: Increase in discount factor between
            consecutive points above which a warning is logged
    """

    interpolation_method: InterpolationMethod = InterpolationMethod.LINEAR
    extrapolation_method: ExtrapolationMethod = ExtrapolationMethod.CONSTANT
    interpolation_entity: InterpolationEntity = InterpolationEntity.LOG_OF_VALUE_PER_TIME
    zero_rate_epsilon: Optional[float] = 1.0e-14
    time_day_count: str = "ACT/365F"
    monotonicity_tolerance: float = 1.0e-6

    def with_overrides(self, **changes) -> "CurveConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = CurveConfig()
