"""
Base curve built from interpolation points.

A curve owns one sorted point set. Values are mapped into the interpolation
entity, interpolated or extrapolated there, and mapped back on every query.
"""

from __future__ import annotations

import copy
import logging
import math
from datetime import date, datetime
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import numpy as np

from curvelib.config import DEFAULT_CONFIG, CurveConfig
from curvelib.conventions.daycount import get_day_count_convention
from curvelib.errors import ConstructionError, DomainError
from curvelib.interpolation import (
    Extrapolator,
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
    Interpolator,
    create_extrapolator,
    create_interpolator,
    get_entity_transform,
)

from .points import CurvePoint, CurvePoints

if TYPE_CHECKING:
    from .builder import CurveBuilder
    from .model import CurveModel

logger = logging.getLogger(__name__)

TimeLike = Union[float, date, datetime]


class Curve:
    """Curve interpolating a set of points.

    The interpolation method, extrapolation method and interpolation entity
    are fixed at construction and resolved once into strategy objects.
    """

    def __init__(
        self,
        name: str,
        reference_date: Optional[date] = None,
        interpolation_method: Union[str, InterpolationMethod, None] = None,
        extrapolation_method: Union[str, ExtrapolationMethod, None] = None,
        interpolation_entity: Union[str, InterpolationEntity, None] = None,
        config: Optional[CurveConfig] = None,
    ):
        """
        Initialize an empty curve.

        Args:
            name: Curve name, used as its key in a curve model
            reference_date: Date corresponding to time 0 (optional)
            interpolation_method: Defaults to ``config.interpolation_method``
            extrapolation_method: Defaults to ``config.extrapolation_method``
            interpolation_entity: Defaults to ``config.interpolation_entity``
            config: Curve defaults; ``DEFAULT_CONFIG`` when omitted
        """
        self._config = config or DEFAULT_CONFIG
        self._name = name
        self._reference_date = reference_date
        self._interpolation_method = InterpolationMethod.parse(
            interpolation_method or self._config.interpolation_method
        )
        self._extrapolation_method = ExtrapolationMethod.parse(
            extrapolation_method or self._config.extrapolation_method
        )
        self._interpolation_entity = InterpolationEntity.parse(
            interpolation_entity or self._config.interpolation_entity
        )
        self._transform = get_entity_transform(self._interpolation_entity)
        self._time_day_count = get_day_count_convention(self._config.time_day_count)

        self._points = CurvePoints()
        self._cached: Optional[Tuple[Interpolator, Extrapolator]] = None
        self._cached_version = -1

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def reference_date(self) -> Optional[date]:
        return self._reference_date

    @property
    def interpolation_method(self) -> InterpolationMethod:
        return self._interpolation_method

    @property
    def extrapolation_method(self) -> ExtrapolationMethod:
        return self._extrapolation_method

    @property
    def interpolation_entity(self) -> InterpolationEntity:
        return self._interpolation_entity

    @property
    def config(self) -> CurveConfig:
        return self._config

    @property
    def points(self) -> Tuple[CurvePoint, ...]:
        """Read-only view of the points, sorted by time."""
        return self._points.points

    @property
    def times(self) -> List[float]:
        return self._points.times

    def get_point(self, time: float) -> CurvePoint:
        """Point at exactly ``time``; raises ``PointNotFoundError`` otherwise."""
        return self._points.get_point(time)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_value(self, time: TimeLike, model: Optional["CurveModel"] = None) -> float:
        """
        Get curve value at a time.

        Args:
            time: Time in years, or a date when the curve has a reference date
            model: Curve model for curves that resolve other curves at query
                time; ignored here

        Returns:
            Value in the curve's value space
        """
        t = self._to_time(time)
        interpolator, extrapolator = self._interpolant()

        if interpolator.t_min <= t <= interpolator.t_max:
            encoded = interpolator.interpolate(t)
        else:
            encoded = extrapolator.extrapolate(t)
        return self._transform.decode(encoded, t)

    def get_values(self, times: Sequence[TimeLike], model: Optional["CurveModel"] = None) -> np.ndarray:
        """Get curve values at multiple times."""
        return np.array([self.get_value(t, model) for t in times], dtype=float)

    # ------------------------------------------------------------------
    # Calibration
    # ------------------------------------------------------------------
    def get_parameter(self) -> np.ndarray:
        """Interpolation-space values of the points flagged as parameters."""
        points = self._points.points
        return np.array(
            [self._transform.encode(points[i].value, points[i].time)
             for i in self._points.parameter_indices()],
            dtype=float,
        )

    def get_clone_for_parameter(self, parameter: Sequence[float]) -> "Curve":
        """
        Create a copy of this curve with new parameter values.

        Args:
            parameter: Interpolation-space values, one per parameter point,
                in time order (as returned by :meth:`get_parameter`)

        Returns:
            New curve; this curve is left unchanged
        """
        indices = self._points.parameter_indices()
        if len(parameter) != len(indices):
            raise ConstructionError(
                f"Expected {len(indices)} parameter values, got {len(parameter)}"
            )

        clone = self._clone()
        points = clone._points.points
        for i, encoded in zip(indices, parameter, strict=True):
            time = points[i].time
            value = self._transform.decode(float(encoded), time)
            clone._check_value(time, value)
            clone._points.set_value(i, value)
        clone._validate()
        clone._interpolant()
        return clone

    def get_clone_builder(self) -> "CurveBuilder":
        """Builder seeded with this curve's settings and points."""
        from .builder import CurveBuilder

        return CurveBuilder(self._clone())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _add_point(self, time: float, value: float, is_parameter: bool) -> None:
        self._check_value(time, value)
        self._points.add_point(time, value, is_parameter)

    def _check_value(self, time: float, value: float) -> None:
        """Hook for subclasses that restrict the values they store."""

    def _validate(self) -> None:
        """Hook run once the point set of a new curve is complete."""

    def _clone(self) -> "Curve":
        clone = copy.copy(self)
        clone._points = self._points.copy()
        clone._cached = None
        clone._cached_version = -1
        return clone

    def _to_time(self, time: TimeLike) -> float:
        if isinstance(time, (date, datetime)):
            if self._reference_date is None:
                raise ValueError(
                    f"Curve {self._name!r} has no reference date; query by time instead"
                )
            return self._time_day_count.year_fraction(self._reference_date, time)

        t = float(time)
        if not math.isfinite(t):
            raise DomainError(f"Query time must be finite, got {time}")
        return t

    def _interpolant(self) -> Tuple[Interpolator, Extrapolator]:
        """Interpolator and extrapolator for the current point set, cached."""
        if self._cached is not None and self._cached_version == self._points.version:
            return self._cached

        if len(self._points) == 0:
            raise ConstructionError(f"Curve {self._name!r} has no points")

        times = self._points.times
        encoded = self._transform.encode_all(times, self._points.values)
        interpolator = create_interpolator(self._interpolation_method, times, encoded)
        extrapolator = create_extrapolator(self._extrapolation_method, interpolator)

        logger.debug(
            "Built %s interpolant for curve %s over %s points",
            self._interpolation_method.name,
            self._name,
            len(times),
        )
        self._cached = (interpolator, extrapolator)
        self._cached_version = self._points.version
        return self._cached

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._name}, {len(self._points)} points, "
            f"{self._interpolation_method.name}/{self._extrapolation_method.name}/"
            f"{self._interpolation_entity.name})"
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"reference_date={self._reference_date!r}, "
            f"points={list(self._points.points)!r}, "
            f"interpolation_method={self._interpolation_method.name}, "
            f"extrapolation_method={self._extrapolation_method.name}, "
            f"interpolation_entity={self._interpolation_entity.name})"
        )
