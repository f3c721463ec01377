"""
Transforms between stored curve values and the space they are interpolated in.

Discount curves are usually interpolated in ``LOG_OF_VALUE_PER_TIME``:
ln(df)/t is the negative continuously compounded zero rate, which is close to
linear in maturity, so linear interpolation there is far more accurate at long
maturities than interpolating discount factors directly.
"""
import math
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Union

from curvelib.errors import DomainError

from .types import InterpolationEntity

# Largest distance from 1.0 accepted for a value stored at t=0 under
# LOG_OF_VALUE_PER_TIME.
ANCHOR_TOLERANCE = 1.0e-12


def _exp(exponent: float, time: float) -> float:
    try:
        return math.exp(exponent)
    except OverflowError as exc:
        raise DomainError(f"Decoded value overflows at time {time}") from exc


class EntityTransform(ABC):
    """Pair of pure functions mapping values to and from interpolation space."""

    entity: InterpolationEntity

    @abstractmethod
    def encode(self, value: float, time: float) -> float:
        """Map a stored value at ``time`` into interpolation space."""

    @abstractmethod
    def decode(self, encoded: float, time: float) -> float:
        """Map an interpolated value at ``time`` back to value space."""

    def encode_all(self, times: Sequence[float], values: Sequence[float]) -> List[float]:
        """Encode a sorted sequence of points."""
        return [self.encode(v, t) for t, v in zip(times, values, strict=True)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ValueTransform(EntityTransform):
    """Identity transform."""

    entity = InterpolationEntity.VALUE

    def encode(self, value: float, time: float) -> float:
        return value

    def decode(self, encoded: float, time: float) -> float:
        return encoded


class LogOfValueTransform(EntityTransform):
    """Interpolates ln(value)."""

    entity = InterpolationEntity.LOG_OF_VALUE

    def encode(self, value: float, time: float) -> float:
        if not value > 0.0:
            raise DomainError(
                f"LOG_OF_VALUE requires positive values, got {value} at time {time}"
            )
        return math.log(value)

    def decode(self, encoded: float, time: float) -> float:
        return _exp(encoded, time)


class LogOfValuePerTimeTransform(EntityTransform):
    """Interpolates ln(value)/time.

    At ``time == 0`` the ratio only has a limit when the value is 1. The
    encoder accepts that anchor and returns 0.0; :meth:`encode_all` replaces it
    with the encoded value of the nearest point at non-zero time, so that the
    interpolated zero rate runs flat into the origin.
    """

    entity = InterpolationEntity.LOG_OF_VALUE_PER_TIME

    def encode(self, value: float, time: float) -> float:
        if not value > 0.0:
            raise DomainError(
                f"LOG_OF_VALUE_PER_TIME requires positive values, got {value} at time {time}"
            )
        if time == 0.0:
            if abs(value - 1.0) > ANCHOR_TOLERANCE:
                raise DomainError(
                    f"LOG_OF_VALUE_PER_TIME requires value 1.0 at time 0, got {value}"
                )
            return 0.0
        return math.log(value) / time

    def decode(self, encoded: float, time: float) -> float:
        return _exp(encoded * time, time)

    def encode_all(self, times: Sequence[float], values: Sequence[float]) -> List[float]:
        encoded = super().encode_all(times, values)
        if len(encoded) < 2:
            return encoded

        for i, t in enumerate(times):
            if t != 0.0:
                continue
            # Continuity limit: borrow the encoded value of the closest neighbour.
            neighbours = []
            if i > 0:
                neighbours.append(i - 1)
            if i + 1 < len(times):
                neighbours.append(i + 1)
            nearest = min(neighbours, key=lambda j: abs(times[j]))
            encoded[i] = encoded[nearest]
        return encoded


_TRANSFORMS: Dict[InterpolationEntity, EntityTransform] = {
    InterpolationEntity.VALUE: ValueTransform(),
    InterpolationEntity.LOG_OF_VALUE: LogOfValueTransform(),
    InterpolationEntity.LOG_OF_VALUE_PER_TIME: LogOfValuePerTimeTransform(),
}


def get_entity_transform(entity: Union[str, InterpolationEntity]) -> EntityTransform:
    """Return the transform for an interpolation entity."""
    return _TRANSFORMS[InterpolationEntity.parse(entity)]
