"""
Selector enumerations for curve interpolation.
"""

from enum import Enum
from typing import Union

from curvelib.errors import ConstructionError


class _Selector(Enum):
    """Enum that can be resolved from its own member or a case-insensitive name."""

    @classmethod
    def parse(cls, value: Union[str, "_Selector"]):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            try:
                return cls[key]
            except KeyError:
                pass
        raise ConstructionError(
            f"Unknown {cls.__name__}: {value!r}. "
            f"Available: {[member.name for member in cls]}"
        )


class InterpolationMethod(_Selector):
    """Interpolation schemes between curve points."""

    LINEAR = "LINEAR"
    PIECEWISE_CONSTANT = "PIECEWISE_CONSTANT"
    CUBIC_SPLINE = "CUBIC_SPLINE"
    AKIMA = "AKIMA"
    HARMONIC_SPLINE = "HARMONIC_SPLINE"


class ExtrapolationMethod(_Selector):
    """Policies for queries outside the curve's time range."""

    CONSTANT = "CONSTANT"
    LINEAR = "LINEAR"


class InterpolationEntity(_Selector):
    """Space in which interpolation is performed."""

    VALUE = "VALUE"
    LOG_OF_VALUE = "LOG_OF_VALUE"
    LOG_OF_VALUE_PER_TIME = "LOG_OF_VALUE_PER_TIME"
