"""
civcal.engines.week
-------------------
Week numbering for month-based calendars.

Week 1 of a year starts on the configured first day of the week, on or before
day ``min_days_in_first_week`` of month 1. That week therefore holds at least
``min_days_in_first_week`` days of the year, and the week before it holds fewer.

Near a year boundary the week-year differs from the calendar year:
  - a date before week 1 of its year is in the last week of ``year - 1``;
  - a date on or after week 1 of ``year + 1`` is in week 1 of ``year + 1``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from civcal.core.config import CalendarConfig
from civcal.core.errors import InvalidDate
from civcal.core.time import DAYS_IN_WEEK, gregorian_from_fixed, iso_weekday, kday_on_or_before
from civcal.core.types import PeriodRange
from .day_count import date_from_iso_days, date_to_iso_days
from .month import MONTHS_IN_YEAR, days_in_year

ISO_CONFIG = CalendarConfig.iso()


# ---------------------------------------------------------
# Day of week
# ---------------------------------------------------------

def iso_day_of_week(year: int, month: int, day: int, config: CalendarConfig) -> int:
    """1 = Monday .. 7 = Sunday, whatever the calendar's first day of week."""
    return iso_weekday(date_to_iso_days(year, month, day, config))


def day_of_week(year: int, month: int, day: int, config: CalendarConfig) -> int:
    """Position in the calendar's own week: the first day of week is 1."""
    return (iso_day_of_week(year, month, day, config) - config.first_day_of_week) % DAYS_IN_WEEK + 1


def day_of_week_info(year: int, month: int, day: int, config: CalendarConfig) -> Tuple[int, int, int]:
    """(ISO day of week, first day of week, last day of week)."""
    return (
        iso_day_of_week(year, month, day, config),
        config.first_day_of_week,
        config.last_day_of_week,
    )


# ---------------------------------------------------------
# Week of year
# ---------------------------------------------------------

def first_day_of_week_one(year: int, config: CalendarConfig) -> int:
    """Day count on which week 1 of ``year`` starts."""
    anchor = date_to_iso_days(year, 1, config.min_days_in_first_week, config)
    return kday_on_or_before(anchor, config.first_day_of_week)


def week_year_of_iso_days(iso_days: int, year: int, config: CalendarConfig) -> Tuple[int, int]:
    """
    (week_year, week) of a day count that falls in calendar year ``year``.
    """
    start = first_day_of_week_one(year, config)
    if iso_days < start:
        year -= 1
        start = first_day_of_week_one(year, config)
    elif iso_days >= first_day_of_week_one(year + 1, config):
        return year + 1, 1
    return year, (iso_days - start) // DAYS_IN_WEEK + 1


def week_of_year(year: int, month: int, day: int, config: CalendarConfig) -> Tuple[int, int]:
    n = date_to_iso_days(year, month, day, config)
    return week_year_of_iso_days(n, year, config)


def iso_week_of_year(
    year: int, month: int, day: int, config: Optional[CalendarConfig] = None
) -> Tuple[int, int]:
    """
    ISO-8601 (week_year, week). Without ``config`` the date is proleptic
    Gregorian; with one, the date is read in that calendar first.
    """
    if config is not None:
        year, month, day = gregorian_from_fixed(date_to_iso_days(year, month, day, config))
    return week_of_year(year, month, day, ISO_CONFIG)


def weeks_in_year(year: int, config: CalendarConfig) -> Tuple[int, int]:
    """
    (weeks, days_in_last_week) covering the calendar year counted from its
    first day. A 365-day year is 52 weeks and 1 day, so this is always 53
    weeks with 1 (common) or 2 (leap) days in the last one. For the 52 or 53
    weeks of the week-year see weeks_in_week_year.
    """
    days = days_in_year(year, config)
    return days // DAYS_IN_WEEK + 1, days % DAYS_IN_WEEK


def weeks_in_week_year(year: int, config: CalendarConfig) -> int:
    """52 or 53: weeks between the start of week 1 of ``year`` and of ``year + 1``."""
    span = first_day_of_week_one(year + 1, config) - first_day_of_week_one(year, config)
    return span // DAYS_IN_WEEK


def long_year(year: int, config: CalendarConfig) -> bool:
    return weeks_in_week_year(year, config) == 53


def week_range(year: int, week: int, config: CalendarConfig) -> PeriodRange:
    """First and last civil dates of week ``week`` of week-year ``year``."""
    weeks = weeks_in_week_year(year, config)
    if not (1 <= week <= weeks):
        raise InvalidDate(f"week must be in 1..{weeks} for week-year {year}, got {week}")
    start = first_day_of_week_one(year, config) + (week - 1) * DAYS_IN_WEEK
    return PeriodRange(
        date_from_iso_days(start, config),
        date_from_iso_days(start + DAYS_IN_WEEK - 1, config),
    )


# ---------------------------------------------------------
# Week of month
# ---------------------------------------------------------

def _adjacent_month(year: int, month: int, step: int) -> Tuple[int, int]:
    cumul = year * MONTHS_IN_YEAR + (month - 1) + step
    return cumul // MONTHS_IN_YEAR, cumul % MONTHS_IN_YEAR + 1


def first_day_of_month_week_one(year: int, month: int, config: CalendarConfig) -> int:
    anchor = date_to_iso_days(year, month, config.min_days_in_first_week, config)
    return kday_on_or_before(anchor, config.first_day_of_week)


def week_of_month(year: int, month: int, day: int, config: CalendarConfig) -> Tuple[int, int]:
    """
    (month, week) under the week-1 rule applied to months. Leading days of a
    month can be in the last week of the previous month, trailing days in
    week 1 of the next; the returned month says which.
    """
    n = date_to_iso_days(year, month, day, config)
    start = first_day_of_month_week_one(year, month, config)
    if n < start:
        year, month = _adjacent_month(year, month, -1)
        start = first_day_of_month_week_one(year, month, config)
    else:
        next_year, next_month = _adjacent_month(year, month, 1)
        if n >= first_day_of_month_week_one(next_year, next_month, config):
            return next_month, 1
    return month, (n - start) // DAYS_IN_WEEK + 1
