"""
civcal.engines.day_count
------------------------
Bidirectional map between civil dates and the absolute day count (Rata Die:
0001-01-01 proleptic Gregorian is day 1).

The day count is the interchange value between calendars. A calendar converts
only to and from it, never directly to another calendar's civil date.
"""

from __future__ import annotations

from datetime import date
from fractions import Fraction
from numbers import Rational
from typing import Tuple

from civcal.core.config import CalendarConfig
from civcal.core.time import date_from_fixed, fixed_from_date, fixed_from_gregorian, gregorian_from_fixed
from civcal.core.types import CivilDate, IsoDays
from .month import MONTHS_IN_YEAR, days_in_month, from_gregorian_month, to_gregorian_month, validate_date


def date_to_iso_days(year: int, month: int, day: int, config: CalendarConfig) -> int:
    """
    Day count of a civil date. Raises InvalidDate for an out-of-range month or
    day; input dates are never clamped.
    """
    validate_date(year, month, day, config)
    g_year, g_month = to_gregorian_month(year, month, config)
    return fixed_from_gregorian(g_year, g_month, day) + config.day_shift


def date_from_iso_days(iso_days: int, config: CalendarConfig) -> CivilDate:
    """Total inverse of date_to_iso_days."""
    g_year, g_month, day = gregorian_from_fixed(iso_days - config.day_shift)
    year, month = from_gregorian_month(g_year, g_month, config)
    return CivilDate(year, month, day)


to_day_count = date_to_iso_days
from_day_count = date_from_iso_days


def _check_fraction(day_fraction: Rational) -> Fraction:
    f = Fraction(day_fraction)
    if not (0 <= f < 1):
        raise ValueError(f"day_fraction must be in [0, 1), got {day_fraction}")
    return f


def naive_to_iso_days(
    year: int,
    month: int,
    day: int,
    config: CalendarConfig,
    day_fraction: Rational = Fraction(0),
) -> IsoDays:
    return IsoDays(date_to_iso_days(year, month, day, config), _check_fraction(day_fraction))


def naive_from_iso_days(iso_days: IsoDays, config: CalendarConfig) -> Tuple[CivilDate, Fraction]:
    return date_from_iso_days(iso_days.days, config), _check_fraction(iso_days.day_fraction)


def first_gregorian_day_of_year(year: int, config: CalendarConfig) -> int:
    return date_to_iso_days(year, 1, 1, config)


def last_gregorian_day_of_year(year: int, config: CalendarConfig) -> int:
    return date_to_iso_days(year, MONTHS_IN_YEAR, days_in_month(year, MONTHS_IN_YEAR, config), config)


# ---------------------------------------------------------
# Host date bridge
# ---------------------------------------------------------

def to_date(year: int, month: int, day: int, config: CalendarConfig) -> date:
    """Civil date -> datetime.date naming the same day."""
    return date_from_fixed(date_to_iso_days(year, month, day, config))


def from_date(d: date, config: CalendarConfig) -> CivilDate:
    return date_from_iso_days(fixed_from_date(d), config)


def days_between(first: Tuple[int, int, int], second: Tuple[int, int, int], config: CalendarConfig) -> int:
    """Signed number of days from ``first`` to ``second``."""
    return date_to_iso_days(*second, config) - date_to_iso_days(*first, config)

