"""
Discount curve implementation with interpolation support.

Stored values are discount factors. Factories convert zero rates, annualized
zero rates and forward rates into discount factors and all end in
:meth:`DiscountCurve.from_discount_factors`.
"""
import logging
import math
from datetime import date
from typing import TYPE_CHECKING, Optional, Sequence, Union

import numpy as np

from curvelib.config import CurveConfig
from curvelib.errors import ConstructionError, DomainError
from curvelib.interpolation import (
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)
from curvelib.tenor import TimeDiscretization

from .base import Curve, TimeLike
from .helpers import (
    annualized_zero_rate_to_df,
    df_to_annualized_zero_rate,
    df_to_zero_rate,
    zero_rate_to_df,
)

if TYPE_CHECKING:
    from .model import CurveModel

logger = logging.getLogger(__name__)

Method = Union[str, InterpolationMethod, None]
Extrapolation = Union[str, ExtrapolationMethod, None]
Entity = Union[str, InterpolationEntity, None]


class DiscountCurve(Curve):
    """
    Discount curve interpolating discount factors.

    The curve does not assume a discount factor of 1 at time 0: callers
    valuing at a later time divide by the discount factor at that time.
    """

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def from_discount_factors(cls,
                              name: str,
                              times: Sequence[float],
                              discount_factors: Sequence[float],
                              is_parameter: Optional[Sequence[bool]] = None,
                              interpolation_method: Method = None,
                              extrapolation_method: Extrapolation = None,
                              interpolation_entity: Entity = None,
                              reference_date: Optional[date] = None,
                              config: Optional[CurveConfig] = None) -> "DiscountCurve":
        """
        Create a discount curve from discount factors.

        Args:
            name: Curve name
            times: Pillar times in years from the reference date
            discount_factors: Discount factors at pillar times
            is_parameter: Calibration flags per point; when omitted a point
                is a parameter iff its time is positive
            interpolation_method: Defaults to LINEAR
            extrapolation_method: Defaults to CONSTANT
            interpolation_entity: Defaults to LOG_OF_VALUE_PER_TIME
            reference_date: Date of time 0 (optional)
            config: Curve defaults

        Returns:
            Discount curve
        """
        if len(times) != len(discount_factors):
            raise ConstructionError("Times and discount factors must have same length")
        if len(times) == 0:
            raise ConstructionError("Need at least 1 discount factor")
        if is_parameter is None:
            is_parameter = [t > 0 for t in times]
        elif len(is_parameter) != len(times):
            raise ConstructionError("Times and parameter flags must have same length")

        curve = cls(
            name,
            reference_date=reference_date,
            interpolation_method=interpolation_method,
            extrapolation_method=extrapolation_method,
            interpolation_entity=interpolation_entity,
            config=config,
        )
        for t, df, flag in zip(times, discount_factors, is_parameter, strict=True):
            curve._add_point(t, df, flag)

        curve._validate()
        curve._interpolant()
        logger.debug("Created %s", curve)
        return curve

    @classmethod
    def from_zero_rates(cls,
                        name: str,
                        times: Sequence[float],
                        zero_rates: Sequence[float],
                        is_parameter: Optional[Sequence[bool]] = None,
                        interpolation_method: Method = None,
                        extrapolation_method: Extrapolation = None,
                        interpolation_entity: Entity = None,
                        reference_date: Optional[date] = None,
                        config: Optional[CurveConfig] = None) -> "DiscountCurve":
        """Create a discount curve from continuously compounded zero rates."""
        if len(times) != len(zero_rates):
            raise ConstructionError("Times and zero rates must have same length")

        discount_factors = [zero_rate_to_df(r, t) for t, r in zip(times, zero_rates, strict=True)]
        return cls.from_discount_factors(
            name, times, discount_factors, is_parameter,
            interpolation_method, extrapolation_method, interpolation_entity,
            reference_date, config,
        )

    @classmethod
    def from_annualized_zero_rates(cls,
                                   name: str,
                                   times: Sequence[float],
                                   zero_rates: Sequence[float],
                                   is_parameter: Optional[Sequence[bool]] = None,
                                   interpolation_method: Method = None,
                                   extrapolation_method: Extrapolation = None,
                                   interpolation_entity: Entity = None,
                                   reference_date: Optional[date] = None,
                                   config: Optional[CurveConfig] = None) -> "DiscountCurve":
        """Create a discount curve from annually compounded zero rates."""
        if len(times) != len(zero_rates):
            raise ConstructionError("Times and zero rates must have same length")

        discount_factors = [
            annualized_zero_rate_to_df(r, t) for t, r in zip(times, zero_rates, strict=True)
        ]
        return cls.from_discount_factors(
            name, times, discount_factors, is_parameter,
            interpolation_method, extrapolation_method, interpolation_entity,
            reference_date, config,
        )

    @classmethod
    def from_forward_rates(cls,
                           name: str,
                           tenor: Union[TimeDiscretization, Sequence[float]],
                           forward_rates: Sequence[float],
                           interpolation_method: Method = None,
                           extrapolation_method: Extrapolation = None,
                           interpolation_entity: Entity = None,
                           reference_date: Optional[date] = None,
                           config: Optional[CurveConfig] = None) -> "DiscountCurve":
        """
        Create a discount curve by compounding simple forward rates.

        The curve is anchored with discount factor 1 at the tenor's first
        time; each period then divides by (1 + L_i * dt_i).

        Args:
            name: Curve name
            tenor: Time discretization t_0 < t_1 < ... < t_n
            forward_rates: One simply compounded rate per period
        """
        if not isinstance(tenor, TimeDiscretization):
            tenor = TimeDiscretization(tenor)
        if len(forward_rates) != tenor.number_of_time_steps:
            raise ConstructionError(
                f"Expected {tenor.number_of_time_steps} forward rates, got {len(forward_rates)}"
            )

        times = [tenor.get_time(0)]
        discount_factors = [1.0]
        is_parameter = [False]

        df = 1.0
        for i, rate in enumerate(forward_rates):
            growth = 1.0 + rate * tenor.get_time_step(i)
            if growth <= 0.0:
                raise DomainError(
                    f"Forward rate {rate} over period {i} gives a non-positive discount factor"
                )
            df /= growth
            t = tenor.get_time(i + 1)
            times.append(t)
            discount_factors.append(df)
            is_parameter.append(t > 0)

        return cls.from_discount_factors(
            name, times, discount_factors, is_parameter,
            interpolation_method, extrapolation_method, interpolation_entity,
            reference_date, config,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_discount_factor(self, maturity: TimeLike, model: Optional["CurveModel"] = None) -> float:
        """Get discount factor at a maturity."""
        return self.get_value(maturity, model)

    def get_zero_rate(self, maturity: TimeLike) -> float:
        """
        Get continuously compounded zero rate -ln(df(T))/T.

        At T = 0 the rate is evaluated at ``config.zero_rate_epsilon``.
        """
        t = self._zero_rate_time(maturity)
        return df_to_zero_rate(self.get_discount_factor(t), t)

    def get_zero_rates(self, maturities: Sequence[TimeLike]) -> np.ndarray:
        """Get zero rates at multiple maturities."""
        return np.array([self.get_zero_rate(m) for m in maturities], dtype=float)

    def get_annualized_zero_rate(self, maturity: TimeLike) -> float:
        """Get annually compounded zero rate df(T)^(-1/T) - 1."""
        t = self._zero_rate_time(maturity)
        return df_to_annualized_zero_rate(self.get_discount_factor(t), t)

    def get_forward_rate(self,
                         start: TimeLike,
                         end: TimeLike,
                         model: Optional["CurveModel"] = None) -> float:
        """Simply compounded forward rate (df(start)/df(end) - 1) / (end - start)."""
        t_start = self._to_time(start)
        t_end = self._to_time(end)
        if t_end <= t_start:
            raise DomainError(f"Forward period must be positive, got [{t_start}, {t_end}]")

        df_start = self.get_discount_factor(t_start, model)
        df_end = self.get_discount_factor(t_end, model)
        return (df_start / df_end - 1.0) / (t_end - t_start)

    def shift_parallel(self, shift_bp: float) -> "DiscountCurve":
        """
        Create a parallel shifted version of the curve.

        Args:
            shift_bp: Parallel shift of the zero rates in basis points

        Returns:
            New shifted curve
        """
        shift_decimal = shift_bp / 10000.0

        shifted = self._clone()
        shifted._name = f"{self.name}_shifted_{shift_bp}bp"
        for i, point in enumerate(self.points):
            if point.time != 0:
                shifted._points.set_value(i, point.value * math.exp(-shift_decimal * point.time))
        shifted._interpolant()
        return shifted

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _check_value(self, time: float, value: float) -> None:
        if value <= 0:
            raise DomainError(f"Discount factor at time {time} must be positive: {value}")

    def _validate(self) -> None:
        self._check_monotonicity()

    def _zero_rate_time(self, maturity: TimeLike) -> float:
        t = self._to_time(maturity)
        if t == 0:
            epsilon = self.config.zero_rate_epsilon
            if epsilon is None:
                raise DomainError("Zero rate at maturity 0 requested with no epsilon fallback")
            return epsilon
        return t

    def _check_monotonicity(self) -> None:
        """Warn about discount factors that increase with maturity."""
        points = self.points
        tolerance = self.config.monotonicity_tolerance
        for i in range(1, len(points)):
            increase = points[i].value - points[i - 1].value
            if points[i].time > 0 and increase > tolerance:
                logger.warning(
                    "Discount factors increasing on curve %s at time %s (increase = %.8f)",
                    self.name,
                    points[i].time,
                    increase,
                )
