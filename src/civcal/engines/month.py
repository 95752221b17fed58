"""
civcal.engines.month
--------------------
Month lengths, year lengths and the leap-year predicate for month-based
calendars laid over the proleptic Gregorian month structure.

A calendar whose year starts on Gregorian month M slides every month label by
M - 1. Calendar month 1 is Gregorian month M of Gregorian year
``year + year_offset``; everything else follows from that map.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Optional, Tuple

from civcal.core.config import CalendarConfig
from civcal.core.errors import InvalidDate
from civcal.core.time import gregorian_days_in_month, is_gregorian_leap_year
from civcal.core.types import CivilDate, PeriodRange

MONTHS_IN_YEAR = 12
MONTHS_IN_QUARTER = 3
QUARTERS_IN_YEAR = 4


# ---------------------------------------------------------
# Month slide
# ---------------------------------------------------------

def to_gregorian_month(year: int, month: int, config: CalendarConfig) -> Tuple[int, int]:
    """Calendar (year, month) -> underlying Gregorian (year, month)."""
    cumul = month - 1 + config.month_slide
    return year + cumul // MONTHS_IN_YEAR + config.year_offset, cumul % MONTHS_IN_YEAR + 1


def from_gregorian_month(g_year: int, g_month: int, config: CalendarConfig) -> Tuple[int, int]:
    """Underlying Gregorian (year, month) -> calendar (year, month)."""
    cumul = g_month - 1 - config.month_slide
    return g_year + cumul // MONTHS_IN_YEAR - config.year_offset, cumul % MONTHS_IN_YEAR + 1


# ---------------------------------------------------------
# Validation
# ---------------------------------------------------------

def _require_integral(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDate(f"{name} must be an integer, got {value!r}")


def validate_month(month: int) -> None:
    _require_integral("month", month)
    if not (1 <= month <= MONTHS_IN_YEAR):
        raise InvalidDate(f"month must be in 1..{MONTHS_IN_YEAR}, got {month}")


def validate_date(year: int, month: int, day: int, config: CalendarConfig) -> None:
    _require_integral("year", year)
    _require_integral("day", day)
    validate_month(month)
    last = days_in_month(year, month, config)
    if not (1 <= day <= last):
        raise InvalidDate(f"day must be in 1..{last} for {year}-{month:02d}, got {day}")


def valid_date(year: int, month: int, day: int, config: CalendarConfig) -> bool:
    try:
        validate_date(year, month, day, config)
    except InvalidDate:
        return False
    return True


# ---------------------------------------------------------
# Lengths
# ---------------------------------------------------------

def leap_year(year: int, config: CalendarConfig) -> bool:
    """
    Gregorian rule on the year number itself for calendars starting in January.
    A slid calendar year is leap when it contains the Gregorian leap day.
    """
    if config.month_of_year == 1:
        return is_gregorian_leap_year(year)
    return days_in_year(year, config) == 366


def days_in_month(year: int, month: int, config: CalendarConfig) -> int:
    validate_month(month)
    g_year, g_month = to_gregorian_month(year, month, config)
    return gregorian_days_in_month(g_year, g_month)


def days_in_month_any_year(month: int, config: CalendarConfig) -> Optional[int]:
    """Length of ``month`` when it does not depend on the year, else None."""
    validate_month(month)
    _, g_month = to_gregorian_month(1, month, config)
    if g_month == 2:
        return None
    return gregorian_days_in_month(1, g_month)


def days_in_year(year: int, config: CalendarConfig) -> int:
    return sum(days_in_month(year, m, config) for m in range(1, MONTHS_IN_YEAR + 1))


def months_in_year(year: int, config: CalendarConfig) -> int:
    return MONTHS_IN_YEAR


def periods_in_year(year: int, config: CalendarConfig) -> int:
    """A period is a month in a month-based calendar."""
    return months_in_year(year, config)


# ---------------------------------------------------------
# Position within the year
# ---------------------------------------------------------

def month_of_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    validate_date(year, month, day, config)
    return month


def quarter_of_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    validate_date(year, month, day, config)
    return -(-month // MONTHS_IN_QUARTER)


def day_of_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    validate_date(year, month, day, config)
    return sum(days_in_month(year, m, config) for m in range(1, month)) + day


# ---------------------------------------------------------
# Period ranges
# ---------------------------------------------------------

def month_range(year: int, month: int, config: CalendarConfig) -> PeriodRange:
    last = days_in_month(year, month, config)
    return PeriodRange(CivilDate(year, month, 1), CivilDate(year, month, last))


def quarter_range(year: int, quarter: int, config: CalendarConfig) -> PeriodRange:
    if not (1 <= quarter <= QUARTERS_IN_YEAR):
        raise InvalidDate(f"quarter must be in 1..{QUARTERS_IN_YEAR}, got {quarter}")
    first_month = (quarter - 1) * MONTHS_IN_QUARTER + 1
    last_month = first_month + MONTHS_IN_QUARTER - 1
    return PeriodRange(
        month_range(year, first_month, config).first,
        month_range(year, last_month, config).last,
    )


def year_range(year: int, config: CalendarConfig) -> PeriodRange:
    return PeriodRange(
        month_range(year, 1, config).first,
        month_range(year, MONTHS_IN_YEAR, config).last,
    )
