from __future__ import annotations
from civcal.core.engine import CalendarRegistry
from civcal.engines.calendar import Calendar
from civcal.engines.specs import ALL_SPECS

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, config in ALL_SPECS.items():
        calendars[name] = Calendar(config, name=name)
    return CalendarRegistry(calendars)
