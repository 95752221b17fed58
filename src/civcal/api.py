from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .core.config import CalendarConfig
from .core.engine import CalendarProtocol, CalendarRegistry
from .core.time import fixed_from_date
from .core.types import CivilDate, DayInfo
from .engines.calendar import Calendar
from .logging import get_logger

log = get_logger(__name__)
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str) -> CalendarProtocol:
    return _reg().get(name)

def make_calendar(config: CalendarConfig, *, name: Optional[str] = None) -> Calendar:
    cal = Calendar(config, name=name)
    log.debug("calendar.created", name=name, **config.as_dict())
    return cal

def register_calendar(name: str, calendar: CalendarProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

def day_info(d: date, *, calendar: str = "gregorian", debug: bool = False) -> DayInfo:
    """Every derived value of a host date, read in the named calendar."""
    cal = _reg().get(calendar)
    iso_days = fixed_from_date(d)
    y, m, day = cal.date_from_iso_days(iso_days)
    debug_out = None
    if debug:
        debug_out = {
            "config": cal.config.as_dict(),
            "first_day_of_year": cal.first_gregorian_day_of_year(y),
            "last_day_of_year": cal.last_gregorian_day_of_year(y),
            "weeks_in_year": cal.weeks_in_year(y),
            "week_of_month": cal.week_of_month(y, m, day),
        }
        log.debug("day_info.debug", calendar=calendar, date=d.isoformat(), **debug_out)
    return DayInfo(
        civil_date=d,
        calendar=calendar,
        date=CivilDate(y, m, day),
        iso_days=iso_days,
        day_of_week=cal.day_of_week(y, m, day),
        day_of_year=cal.day_of_year(y, m, day),
        week_of_year=cal.week_of_year(y, m, day),
        iso_week_of_year=cal.iso_week_of_year(y, m, day),
        quarter=cal.quarter_of_year(y, m, day),
        year_of_era=cal.year_of_era(y, m, day),
        leap_year=cal.leap_year(y),
        debug=debug_out,
    )

def convert(ymd: Tuple[int, int, int], *, source: str, target: str) -> CivilDate:
    """The same day in another registered calendar."""
    src = _reg().get(source)
    dst = _reg().get(target)
    return dst.date_from_iso_days(src.date_to_iso_days(*ymd))
