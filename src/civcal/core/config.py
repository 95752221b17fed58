"""
civcal.core.config
------------------
The immutable parameter set describing one calendar variant.

All fields are validated once, here. The engines take a CalendarConfig as
their last argument and trust it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Optional

from .errors import InvalidConfiguration
from .time import DAYS_IN_WEEK, amod, fixed_from_gregorian

YearNaming = Literal["beginning", "ending", "majority"]

CALENDAR_TYPES = ("gregorian",)
YEAR_NAMINGS = ("beginning", "ending", "majority")

MONDAY = 1
SUNDAY = 7


def _require_int(name: str, value: Any, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if not (lo <= value <= hi):
        raise InvalidConfiguration(f"{name} must be in {lo}..{hi}, got {value}")


@dataclass(frozen=True)
class CalendarConfig:
    """
    calendar_type:           era/leap rule family; only "gregorian" is supported.
    first_day_of_week:       ISO weekday (1=Mon .. 7=Sun) that starts a week.
    min_days_in_first_week:  week 1 is the first week holding at least this many
                             days of the year.
    month_of_year:           Gregorian month on which the calendar year starts.
    year:                    which Gregorian year names a year that straddles two.
    epoch:                   day count of day 1 of month 1 of year 1. None resolves
                             to the unshifted start: the first day of Gregorian
                             month month_of_year in year 1 + year_offset.
    """
    calendar_type: str = "gregorian"
    first_day_of_week: int = MONDAY
    min_days_in_first_week: int = 1
    month_of_year: int = 1
    year: YearNaming = "majority"
    epoch: Optional[int] = None

    def __post_init__(self) -> None:
        if self.calendar_type not in CALENDAR_TYPES:
            raise InvalidConfiguration(
                f"calendar_type must be one of {CALENDAR_TYPES}, got {self.calendar_type!r}"
            )
        _require_int("first_day_of_week", self.first_day_of_week, 1, DAYS_IN_WEEK)
        _require_int("min_days_in_first_week", self.min_days_in_first_week, 1, DAYS_IN_WEEK)
        _require_int("month_of_year", self.month_of_year, 1, 12)
        if self.year not in YEAR_NAMINGS:
            raise InvalidConfiguration(f"year must be one of {YEAR_NAMINGS}, got {self.year!r}")
        if self.epoch is None:
            object.__setattr__(self, "epoch", self.unshifted_epoch)
        elif isinstance(self.epoch, bool) or not isinstance(self.epoch, int):
            raise InvalidConfiguration(f"epoch must be an integer, got {self.epoch!r}")

    @classmethod
    def iso(cls) -> "CalendarConfig":
        """ISO-8601 weeks: Monday start, week 1 holds the year's first Thursday."""
        return cls(first_day_of_week=MONDAY, min_days_in_first_week=4)

    def replace(self, **changes: Any) -> "CalendarConfig":
        # A default epoch follows a new month_of_year or year naming.
        if "epoch" not in changes and self.epoch == self.unshifted_epoch:
            changes["epoch"] = None
        return replace(self, **changes)

    @property
    def day_of_week(self) -> int:
        """Alias of first_day_of_week used by localization callers."""
        return self.first_day_of_week

    @property
    def last_day_of_week(self) -> int:
        return amod(self.first_day_of_week + DAYS_IN_WEEK - 1, DAYS_IN_WEEK)

    @property
    def unshifted_epoch(self) -> int:
        """Day count of day 1 of year 1 when no epoch shift is applied."""
        return fixed_from_gregorian(1 + self.year_offset, self.month_of_year, 1)

    @property
    def day_shift(self) -> int:
        return self.epoch - self.unshifted_epoch

    @property
    def month_slide(self) -> int:
        return self.month_of_year - 1

    @property
    def year_offset(self) -> int:
        """
        0 when the calendar year starting in Gregorian year Y is named Y,
        -1 when it is named Y + 1.
        """
        if self.month_of_year == 1:
            return 0
        if self.year == "ending":
            return -1
        if self.year == "majority" and self.month_of_year > 6:
            return -1
        return 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "calendar_type": self.calendar_type,
            "first_day_of_week": self.first_day_of_week,
            "min_days_in_first_week": self.min_days_in_first_week,
            "month_of_year": self.month_of_year,
            "year": self.year,
            "epoch": self.epoch,
        }
