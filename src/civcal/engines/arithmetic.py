"""
civcal.engines.arithmetic
-------------------------
Adding a signed number of one date unit to a civil date.

Month-like units (years, quarters, months) move the month index with carry into
the year and then clamp the day to the length of the target month, so
Jan 31 + 1 month is the last day of February, never early March. Weeks and
days go through the day count, which has no invalid states.

Only single-unit increments are defined; ``plus`` is not commutative across
units, so composite increments are sequenced by the caller.
"""

from __future__ import annotations

from numbers import Integral
from typing import Dict

from civcal.core.config import CalendarConfig
from civcal.core.errors import InvalidDate
from civcal.core.time import DAYS_IN_WEEK
from civcal.core.types import CivilDate
from .day_count import date_from_iso_days, date_to_iso_days
from .month import MONTHS_IN_QUARTER, MONTHS_IN_YEAR, days_in_month, validate_date

MONTH_UNITS: Dict[str, int] = {
    "years": MONTHS_IN_YEAR,
    "quarters": MONTHS_IN_QUARTER,
    "months": 1,
}

DAY_UNITS: Dict[str, int] = {
    "weeks": DAYS_IN_WEEK,
    "days": 1,
}

UNITS = tuple(MONTH_UNITS) + tuple(DAY_UNITS)


def add_months(
    year: int, month: int, day: int, config: CalendarConfig, months: int, *, coerce: bool = True
) -> CivilDate:
    cumul = (month - 1) + months
    new_year = year + cumul // MONTHS_IN_YEAR
    new_month = cumul % MONTHS_IN_YEAR + 1
    max_day = days_in_month(new_year, new_month, config)
    if day > max_day:
        if not coerce:
            raise InvalidDate(
                f"{year}-{month:02d}-{day:02d} plus {months} month(s) has no day {day} "
                f"in {new_year}-{new_month:02d}"
            )
        day = max_day
    return CivilDate(new_year, new_month, day)


def add_days(year: int, month: int, day: int, config: CalendarConfig, days: int) -> CivilDate:
    return date_from_iso_days(date_to_iso_days(year, month, day, config) + days, config)


def plus(
    year: int,
    month: int,
    day: int,
    config: CalendarConfig,
    unit: str,
    amount: int,
    *,
    coerce: bool = True,
) -> CivilDate:
    """
    Add ``amount`` of ``unit`` (years, quarters, months, weeks, days).

    coerce: clamp an overflowing day to the end of the target month. When
            False an overflow raises InvalidDate instead.
    """
    if isinstance(amount, bool) or not isinstance(amount, Integral):
        raise TypeError(f"amount must be an integer, got {amount!r}")
    validate_date(year, month, day, config)
    amount = int(amount)

    if unit in MONTH_UNITS:
        return add_months(year, month, day, config, amount * MONTH_UNITS[unit], coerce=coerce)
    if unit in DAY_UNITS:
        return add_days(year, month, day, config, amount * DAY_UNITS[unit])
    raise ValueError(f"unit must be one of {UNITS}, got {unit!r}")
