from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import InvalidDate

# Rata Die of 0001-01-01 in the proleptic Gregorian calendar.
GREGORIAN_EPOCH = 1

# JDN = RD + JDN_OFFSET
JDN_OFFSET = 1721425

DAYS_IN_WEEK = 7

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_days_in_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def amod(x: int, m: int) -> int:
    """Arithmetic mod giving 1..m."""
    return ((x - 1) % m) + 1


def fixed_from_gregorian(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian date -> Rata Die (0001-01-01 is day 1).

    Closed form, no date walking. Floor division keeps year 0 and negative
    years on the same leap cycle as positive ones.
    """
    y1 = year - 1
    if month <= 2:
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = -1
    else:
        correction = -2
    return (
        GREGORIAN_EPOCH - 1
        + 365 * y1 + y1 // 4 - y1 // 100 + y1 // 400
        + (367 * month - 362) // 12
        + correction
        + day
    )


def gregorian_year_from_fixed(n: int) -> int:
    d0 = n - GREGORIAN_EPOCH
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # The last day of a 400- or 4-year cycle closes the previous year.
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def gregorian_from_fixed(n: int) -> Tuple[int, int, int]:
    """Rata Die -> proleptic Gregorian (year, month, day)."""
    year = gregorian_year_from_fixed(n)
    prior_days = n - fixed_from_gregorian(year, 1, 1)
    if n < fixed_from_gregorian(year, 3, 1):
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = n - fixed_from_gregorian(year, month, 1) + 1
    return year, month, day


def iso_weekday(n: int) -> int:
    """ISO weekday of a day count: 1 = Monday .. 7 = Sunday (RD 1 was a Monday)."""
    return amod(n, DAYS_IN_WEEK)


def kday_on_or_before(n: int, k: int) -> int:
    """Day count of the last ISO weekday ``k`` falling on or before day ``n``."""
    return n - ((n - k) % DAYS_IN_WEEK)


def kday_on_or_after(n: int, k: int) -> int:
    return kday_on_or_before(n + DAYS_IN_WEEK - 1, k)


# ============================================================
# Host date bridge (datetime.date covers years 1..9999 only)
# ============================================================

def fixed_from_date(d: date) -> int:
    return fixed_from_gregorian(d.year, d.month, d.day)


def date_from_fixed(n: int) -> date:
    y, m, day = gregorian_from_fixed(n)
    try:
        return date(y, m, day)
    except ValueError as exc:
        raise InvalidDate(f"{y:04d}-{m:02d}-{day:02d} is outside the range of datetime.date") from exc


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return fixed_from_date(d) + JDN_OFFSET


def from_jdn(jdn: int) -> date:
    """Inverse of to_jdn (Gregorian)."""
    return date_from_fixed(jdn - JDN_OFFSET)
