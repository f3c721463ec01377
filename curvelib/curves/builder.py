"""Incremental construction of curves."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from curvelib.errors import ConstructionError

from .base import Curve

C = TypeVar("C", bound=Curve)

logger = logging.getLogger(__name__)


class CurveBuilder(Generic[C]):
    """Adds points to an unpublished curve and hands it out once.

    Calibration uses the builder to append or re-seed points; the resulting
    curve is immutable to valuation callers.
    """

    def __init__(self, curve: C):
        self._curve = curve
        self._built = False

    def add_point(self, time: float, value: float, is_parameter: bool = False) -> "CurveBuilder[C]":
        self._check_open()
        self._curve._add_point(time, value, is_parameter)
        return self

    def build(self) -> C:
        """Validate the point set and return the finished curve."""
        self._check_open()
        self._curve._validate()
        self._curve._interpolant()
        self._built = True
        logger.debug("Built curve %s with %s points", self._curve.name, len(self._curve.points))
        return self._curve

    def _check_open(self) -> None:
        if self._built:
            raise ConstructionError("Curve builder has already built its curve")
