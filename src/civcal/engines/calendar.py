"""
civcal.engines.calendar
-----------------------
The generic calendar. Binds one CalendarConfig to the day-count, month, week,
arithmetic and era engines so callers stop passing the configuration around.

There is one Calendar class for every variant; variants differ only in the
configuration they hold (see civcal.engines.specs).
"""

from __future__ import annotations

from datetime import date
from fractions import Fraction
from numbers import Rational
from typing import Any, Dict, Optional, Tuple

from civcal.core.config import CalendarConfig
from civcal.core.time import DAYS_IN_WEEK
from civcal.core.types import CivilDate, IsoDays, PeriodRange
from . import arithmetic, day_count, era, month as month_engine, week as week_engine


class Calendar:
    """
    Every method is a pure function of its arguments and ``self.config``, so a
    Calendar is safe to share between threads.
    """
    def __init__(self, config: CalendarConfig, name: Optional[str] = None):
        if not isinstance(config, CalendarConfig):
            raise TypeError(f"config must be a CalendarConfig, got {type(config).__name__}")
        self.config = config
        self.name = name

    def __repr__(self) -> str:
        return f"Calendar(name={self.name!r}, config={self.config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.config == other.config

    def __hash__(self) -> int:
        return hash(self.config)

    # ---------------------------------------------------------
    # Identity
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "calendar_base": self.calendar_base(), **self.config.as_dict()}

    def calendar_base(self) -> str:
        return "month"

    def cldr_calendar_type(self) -> str:
        return self.config.calendar_type

    def days_in_week(self) -> int:
        return DAYS_IN_WEEK

    def valid_date(self, year: int, month: int, day: int) -> bool:
        return month_engine.valid_date(year, month, day, self.config)

    # ---------------------------------------------------------
    # Day counts
    # ---------------------------------------------------------

    def date_to_iso_days(self, year: int, month: int, day: int) -> int:
        return day_count.date_to_iso_days(year, month, day, self.config)

    def date_from_iso_days(self, iso_days: int) -> CivilDate:
        return day_count.date_from_iso_days(iso_days, self.config)

    def naive_to_iso_days(self, year: int, month: int, day: int, day_fraction: Rational = Fraction(0)) -> IsoDays:
        return day_count.naive_to_iso_days(year, month, day, self.config, day_fraction)

    def naive_from_iso_days(self, iso_days: IsoDays) -> Tuple[CivilDate, Fraction]:
        return day_count.naive_from_iso_days(iso_days, self.config)

    def first_gregorian_day_of_year(self, year: int) -> int:
        return day_count.first_gregorian_day_of_year(year, self.config)

    def last_gregorian_day_of_year(self, year: int) -> int:
        return day_count.last_gregorian_day_of_year(year, self.config)

    def to_date(self, year: int, month: int, day: int) -> date:
        return day_count.to_date(year, month, day, self.config)

    def from_date(self, d: date) -> CivilDate:
        return day_count.from_date(d, self.config)

    def days_between(self, first: Tuple[int, int, int], second: Tuple[int, int, int]) -> int:
        return day_count.days_between(first, second, self.config)

    def convert(self, year: int, month: int, day: int, target: "Calendar") -> CivilDate:
        """The same day in another calendar, via the shared day count."""
        return target.date_from_iso_days(self.date_to_iso_days(year, month, day))

    # ---------------------------------------------------------
    # Months and years
    # ---------------------------------------------------------

    def leap_year(self, year: int) -> bool:
        return month_engine.leap_year(year, self.config)

    def days_in_month(self, year: int, month: int) -> int:
        return month_engine.days_in_month(year, month, self.config)

    def days_in_month_any_year(self, month: int) -> Optional[int]:
        return month_engine.days_in_month_any_year(month, self.config)

    def days_in_year(self, year: int) -> int:
        return month_engine.days_in_year(year, self.config)

    def months_in_year(self, year: int) -> int:
        return month_engine.months_in_year(year, self.config)

    def periods_in_year(self, year: int) -> int:
        return month_engine.periods_in_year(year, self.config)

    def month_of_year(self, year: int, month: int, day: int) -> int:
        return month_engine.month_of_year(year, month, day, self.config)

    def quarter_of_year(self, year: int, month: int, day: int) -> int:
        return month_engine.quarter_of_year(year, month, day, self.config)

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return month_engine.day_of_year(year, month, day, self.config)

    # ---------------------------------------------------------
    # Weeks
    # ---------------------------------------------------------

    def day_of_week(self, year: int, month: int, day: int) -> int:
        return week_engine.day_of_week(year, month, day, self.config)

    def iso_day_of_week(self, year: int, month: int, day: int) -> int:
        return week_engine.iso_day_of_week(year, month, day, self.config)

    def day_of_week_info(self, year: int, month: int, day: int) -> Tuple[int, int, int]:
        return week_engine.day_of_week_info(year, month, day, self.config)

    def week_of_year(self, year: int, month: int, day: int) -> Tuple[int, int]:
        return week_engine.week_of_year(year, month, day, self.config)

    def iso_week_of_year(self, year: int, month: int, day: int) -> Tuple[int, int]:
        return week_engine.iso_week_of_year(year, month, day, self.config)

    def weeks_in_year(self, year: int) -> Tuple[int, int]:
        return week_engine.weeks_in_year(year, self.config)

    def weeks_in_week_year(self, year: int) -> int:
        return week_engine.weeks_in_week_year(year, self.config)

    def long_year(self, year: int) -> bool:
        return week_engine.long_year(year, self.config)

    def week_of_month(self, year: int, month: int, day: int) -> Tuple[int, int]:
        return week_engine.week_of_month(year, month, day, self.config)

    # ---------------------------------------------------------
    # Period ranges
    # ---------------------------------------------------------

    def year(self, year: int) -> PeriodRange:
        return month_engine.year_range(year, self.config)

    def quarter(self, year: int, quarter: int) -> PeriodRange:
        return month_engine.quarter_range(year, quarter, self.config)

    def month(self, year: int, month: int) -> PeriodRange:
        return month_engine.month_range(year, month, self.config)

    def week(self, year: int, week: int) -> PeriodRange:
        return week_engine.week_range(year, week, self.config)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus(self, year: int, month: int, day: int, unit: str, amount: int, *, coerce: bool = True) -> CivilDate:
        return arithmetic.plus(year, month, day, self.config, unit, amount, coerce=coerce)

    # ---------------------------------------------------------
    # Eras and year projections
    # ---------------------------------------------------------

    def year_of_era(self, year: int, month: Optional[int] = None, day: Optional[int] = None) -> Tuple[int, int]:
        if month is not None and day is not None:
            month_engine.validate_date(year, month, day, self.config)
        return era.year_of_era(year, self.config)

    def day_of_era(self, year: int, month: int, day: int) -> Tuple[int, int]:
        return era.day_of_era(year, month, day, self.config)

    def calendar_year(self, year: int, month: int, day: int) -> int:
        return era.calendar_year(year, month, day, self.config)

    def related_gregorian_year(self, year: int, month: int, day: int) -> int:
        return era.related_gregorian_year(year, month, day, self.config)

    def extended_year(self, year: int, month: int, day: int) -> int:
        return era.extended_year(year, month, day, self.config)

    def cyclic_year(self, year: int, month: int, day: int) -> int:
        return era.cyclic_year(year, month, day, self.config)
