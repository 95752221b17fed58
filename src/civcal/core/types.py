from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from fractions import Fraction
from typing import Any, Dict, NamedTuple, Optional, Tuple


class CivilDate(NamedTuple):
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class IsoDays:
    """Absolute day count plus a sub-day fraction that the engines never interpret."""
    days: int
    day_fraction: Fraction = Fraction(0)


@dataclass(frozen=True)
class PeriodRange:
    """A year, quarter, month or week as an inclusive pair of civil dates."""
    first: CivilDate
    last: CivilDate

    def __contains__(self, item: Any) -> bool:
        return tuple(self.first) <= tuple(item) <= tuple(self.last)


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    calendar: str
    date: CivilDate
    iso_days: int
    day_of_week: int
    day_of_year: int
    week_of_year: Tuple[int, int]
    iso_week_of_year: Tuple[int, int]
    quarter: int
    year_of_era: Tuple[int, int]
    leap_year: bool
    debug: Optional[Dict[str, Any]] = None
