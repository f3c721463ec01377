"""Ordered storage of curve points."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass, replace
from typing import Iterator, List, Tuple

from curvelib.errors import ConstructionError, DuplicateTimeError, PointNotFoundError


@dataclass(frozen=True)
class CurvePoint:
    """Single curve point.

    ``time`` is in years from the curve's reference date and may be negative.
    ``is_parameter`` marks points a calibration may move.
    """

    time: float
    value: float
    is_parameter: bool = False


class CurvePoints:
    """Points kept sorted by time and unique by time.

    ``version`` increases on every mutation so that owners can tell when a
    cached interpolant is stale.
    """

    def __init__(self) -> None:
        self._points: List[CurvePoint] = []
        self._times: List[float] = []
        self.version = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_point(self, time: float, value: float, is_parameter: bool = False) -> CurvePoint:
        time = float(time)
        value = float(value)
        if not math.isfinite(time):
            raise ConstructionError(f"Point time must be finite, got {time}")
        if not math.isfinite(value):
            raise ConstructionError(f"Point value at time {time} must be finite, got {value}")

        idx = bisect.bisect_left(self._times, time)
        if idx < len(self._times) and self._times[idx] == time:
            raise DuplicateTimeError(time)

        point = CurvePoint(time, value, bool(is_parameter))
        self._points.insert(idx, point)
        self._times.insert(idx, time)
        self.version += 1
        return point

    def set_value(self, index: int, value: float) -> None:
        value = float(value)
        if not math.isfinite(value):
            raise ConstructionError(f"Point value must be finite, got {value}")
        self._points[index] = replace(self._points[index], value=value)
        self.version += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def index_of(self, time: float) -> int:
        """Position of the point at exactly ``time``."""
        idx = bisect.bisect_left(self._times, time)
        if idx < len(self._times) and self._times[idx] == time:
            return idx
        raise PointNotFoundError(time)

    def get_point(self, time: float) -> CurvePoint:
        return self._points[self.index_of(time)]

    def __contains__(self, time: float) -> bool:
        idx = bisect.bisect_left(self._times, time)
        return idx < len(self._times) and self._times[idx] == time

    @property
    def points(self) -> Tuple[CurvePoint, ...]:
        return tuple(self._points)

    @property
    def times(self) -> List[float]:
        return list(self._times)

    @property
    def values(self) -> List[float]:
        return [p.value for p in self._points]

    def parameter_indices(self) -> List[int]:
        return [i for i, p in enumerate(self._points) if p.is_parameter]

    def copy(self) -> "CurvePoints":
        clone = CurvePoints()
        clone._points = list(self._points)
        clone._times = list(self._times)
        return clone

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[CurvePoint]:
        return iter(tuple(self._points))
