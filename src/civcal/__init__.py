"""civcal public API.

Keep this surface small: users should mostly interact with the Calendar class,
CalendarConfig and the functions re-exported here.
"""

from .logging import configure_logging, get_logger

from .api import set_registry as _set_registry
from .bootstrap import build_registry as _build_registry

_set_registry(_build_registry())

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    day_info,
    convert,
)
from .core.config import CalendarConfig
from .core.errors import CivcalError, InvalidConfiguration, InvalidDate
from .core.types import CivilDate, DayInfo, IsoDays, PeriodRange
from .engines.calendar import Calendar

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "day_info",
    "convert",
    "Calendar",
    "CalendarConfig",
    "CivcalError",
    "InvalidConfiguration",
    "InvalidDate",
    "CivilDate",
    "DayInfo",
    "IsoDays",
    "PeriodRange",
    "configure_logging",
    "get_logger",
]
