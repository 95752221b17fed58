from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol, Tuple

from ..logging import get_logger
from .config import CalendarConfig
from .types import CivilDate, PeriodRange

log = get_logger(__name__)


class CalendarProtocol(Protocol):
    """The operations every month-based calendar exposes."""
    config: CalendarConfig

    def info(self) -> Dict[str, Any]: ...
    def valid_date(self, year: int, month: int, day: int) -> bool: ...

    def date_to_iso_days(self, year: int, month: int, day: int) -> int: ...
    def date_from_iso_days(self, iso_days: int) -> CivilDate: ...
    def to_date(self, year: int, month: int, day: int) -> date: ...
    def from_date(self, d: date) -> CivilDate: ...
    def first_gregorian_day_of_year(self, year: int) -> int: ...
    def last_gregorian_day_of_year(self, year: int) -> int: ...

    def leap_year(self, year: int) -> bool: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...
    def day_of_year(self, year: int, month: int, day: int) -> int: ...
    def quarter_of_year(self, year: int, month: int, day: int) -> int: ...

    def day_of_week(self, year: int, month: int, day: int) -> int: ...
    def week_of_year(self, year: int, month: int, day: int) -> Tuple[int, int]: ...
    def iso_week_of_year(self, year: int, month: int, day: int) -> Tuple[int, int]: ...
    def weeks_in_year(self, year: int) -> Tuple[int, int]: ...
    def week_of_month(self, year: int, month: int, day: int) -> Tuple[int, int]: ...

    def plus(self, year: int, month: int, day: int, unit: str, amount: int, *, coerce: bool = True) -> CivilDate: ...

    def year_of_era(self, year: int, month: Optional[int] = None, day: Optional[int] = None) -> Tuple[int, int]: ...

    def year(self, year: int) -> PeriodRange: ...
    def quarter(self, year: int, quarter: int) -> PeriodRange: ...
    def month(self, year: int, month: int) -> PeriodRange: ...
    def week(self, year: int, week: int) -> PeriodRange: ...


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarProtocol]

    def get(self, name: str) -> CalendarProtocol:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
        log.debug("calendar.registered", name=name, overwrite=overwrite)
