"""Registry of named curves passed to curve queries."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping

from curvelib.errors import ConstructionError, CurveNotFoundError

from .base import Curve
from .discount import DiscountCurve


class CurveModel:
    """Read-only mapping from curve name to curve.

    Queries accept a model so that a curve can resolve other curves by name at
    query time. Curves that need no other curve ignore it.
    """

    def __init__(self, curves: Iterable[Curve] = ()):
        self._curves: Dict[str, Curve] = {}
        for curve in curves:
            if curve.name in self._curves:
                raise ConstructionError(f"Duplicate curve name in model: {curve.name!r}")
            self._curves[curve.name] = curve

    @property
    def curves(self) -> Mapping[str, Curve]:
        return MappingProxyType(self._curves)

    def get_curve(self, name: str) -> Curve:
        try:
            return self._curves[name]
        except KeyError:
            raise CurveNotFoundError(
                f"Curve {name!r} not in model. Available: {sorted(self._curves)}"
            ) from None

    def get_discount_curve(self, name: str) -> DiscountCurve:
        curve = self.get_curve(name)
        if not isinstance(curve, DiscountCurve):
            raise TypeError(f"Curve {name!r} is a {type(curve).__name__}, not a DiscountCurve")
        return curve

    def with_curve(self, curve: Curve) -> "CurveModel":
        """Return a new model with ``curve`` added or replacing one of the same name."""
        model = CurveModel()
        model._curves = dict(self._curves)
        model._curves[curve.name] = curve
        return model

    def __contains__(self, name: object) -> bool:
        return name in self._curves

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._curves))

    def __repr__(self) -> str:
        return f"CurveModel({list(self._curves)})"
