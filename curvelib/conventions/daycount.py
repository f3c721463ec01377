"""
Day count conventions turning query dates into curve times.

A curve with a reference date accepts dates wherever it accepts times; the
time of a date is its QuantLib year fraction from the reference date.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

DateLike = Union[date, datetime]


def _ql_date(value: DateLike) -> ql.Date:
    if isinstance(value, datetime):
        value = value.date()
    return ql.Date(value.day, value.month, value.year)


@dataclass(frozen=True, eq=False)
class DayCountConvention:
    """Named QuantLib day counter."""

    name: str
    day_counter: ql.DayCounter

    def year_fraction(self, reference: DateLike, target: DateLike) -> float:
        """Curve time of ``target``; negative when it precedes ``reference``."""
        return self.day_counter.yearFraction(_ql_date(reference), _ql_date(target))

    def __str__(self) -> str:
        return self.name


ACT_360 = DayCountConvention("ACT/360", ql.Actual360())
ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
THIRTY_360E = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))
ACT_ACT = DayCountConvention("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))

_ALIASES: Dict[str, DayCountConvention] = {
    "ACTUAL/360": ACT_360,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "30/360 EUROPEAN": THIRTY_360E,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
}
DAY_COUNT_CONVENTIONS: Dict[str, DayCountConvention] = {
    **{dc.name: dc for dc in (ACT_360, ACT_365F, THIRTY_360E, ACT_ACT)},
    **_ALIASES,
}


def get_day_count_convention(name: Union[str, DayCountConvention]) -> DayCountConvention:
    """Resolve a convention from its name or an alias; instances pass through."""
    if isinstance(name, DayCountConvention):
        return name
    try:
        return DAY_COUNT_CONVENTIONS[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {sorted(DAY_COUNT_CONVENTIONS)}"
        ) from None
