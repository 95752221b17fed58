"""
civcal.engines.era
------------------
Era and year projections for the Gregorian rule family.

Two eras: era 1 holds years >= 1, era 0 holds years <= 0 and counts them
backwards from 1 (year 0 is era-0 year 1), so there is no year zero in
era-local numbering.
"""

from __future__ import annotations

from typing import Tuple

from civcal.core.config import CalendarConfig
from .day_count import date_to_iso_days

CURRENT_ERA = 1
PRIOR_ERA = 0


def year_of_era(year: int, config: CalendarConfig) -> Tuple[int, int]:
    if year >= 1:
        return year, CURRENT_ERA
    return 1 - year, PRIOR_ERA


def day_of_era(year: int, month: int, day: int, config: CalendarConfig) -> Tuple[int, int]:
    """Day 1 of era 1 is day 1 of year 1; day 1 of era 0 is the last day of year 0."""
    n = date_to_iso_days(year, month, day, config)
    first_of_era = date_to_iso_days(1, 1, 1, config)
    if n >= first_of_era:
        return n - first_of_era + 1, CURRENT_ERA
    return first_of_era - n, PRIOR_ERA


# Identity projections. Other rule families (lunisolar, Japanese eras) would
# derive these differently; the Gregorian family has one year number.

def calendar_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    return year


def related_gregorian_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    return year


def extended_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    return year


def cyclic_year(year: int, month: int, day: int, config: CalendarConfig) -> int:
    return year
