# tests/test_calendar.py

import uuid
from datetime import date

import pytest

import civcal
from civcal import Calendar, CalendarConfig, InvalidDate
from civcal.engines.specs import ALL_SPECS, AU, ISO


def test_registry_lists_named_specs():
    assert set(ALL_SPECS) <= set(civcal.list_calendars())
    assert civcal.list_calendars() == sorted(civcal.list_calendars())


def test_unknown_calendar():
    with pytest.raises(KeyError, match="Unknown calendar"):
        civcal.get_calendar("no-such-calendar")


def test_register_and_overwrite():
    name = f"test-{uuid.uuid4().hex[:8]}"
    cal = civcal.make_calendar(CalendarConfig(first_day_of_week=6), name=name)
    civcal.register_calendar(name, cal)
    assert civcal.get_calendar(name) is cal
    with pytest.raises(KeyError, match="already exists"):
        civcal.register_calendar(name, cal)
    other = civcal.make_calendar(CalendarConfig(first_day_of_week=5), name=name)
    civcal.register_calendar(name, other, overwrite=True)
    assert civcal.get_calendar(name) is other


def test_calendar_info():
    info = civcal.calendar_info("au")
    assert info["month_of_year"] == 7
    assert info["year"] == "ending"
    assert info["calendar_base"] == "month"
    assert info["name"] == "au"


def test_calendar_requires_config():
    with pytest.raises(TypeError):
        Calendar({"first_day_of_week": 1})


def test_calendars_compare_by_config():
    a = Calendar(CalendarConfig.iso(), name="a")
    b = Calendar(ISO, name="b")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Calendar(AU)


def test_calendar_methods_are_deterministic():
    cal = civcal.get_calendar("uk")
    assert cal.week_of_year(2024, 5, 17) == cal.week_of_year(2024, 5, 17)
    assert cal.date_to_iso_days(2024, 5, 17) == Calendar(cal.config).date_to_iso_days(2024, 5, 17)


def test_identity_methods():
    cal = civcal.get_calendar("gregorian")
    assert cal.calendar_base() == "month"
    assert cal.cldr_calendar_type() == "gregorian"
    assert cal.days_in_week() == 7


def test_convert_between_calendars():
    greg = civcal.get_calendar("gregorian")
    au = civcal.get_calendar("au")
    assert greg.convert(2024, 7, 1, au) == (2025, 1, 1)
    assert au.convert(2025, 1, 1, greg) == (2024, 7, 1)
    assert civcal.convert((2024, 7, 1), source="gregorian", target="au") == (2025, 1, 1)


def test_facade_ranges_and_plus():
    cal = civcal.get_calendar("iso")
    assert cal.week(2020, 53).last == (2021, 1, 3)
    assert cal.quarter(2021, 1).first == (2021, 1, 1)
    assert cal.plus(2020, 1, 31, "months", 1) == (2020, 2, 29)


def test_year_of_era_validates_full_dates():
    cal = civcal.get_calendar("gregorian")
    assert cal.year_of_era(0) == (1, 0)
    assert cal.year_of_era(2024, 2, 29) == (2024, 1)
    with pytest.raises(InvalidDate):
        cal.year_of_era(2023, 2, 29)


def test_day_info():
    info = civcal.day_info(date(2021, 1, 1))
    assert info.date == (2021, 1, 1)
    assert info.iso_days == date(2021, 1, 1).toordinal()
    assert info.iso_week_of_year == (2020, 53)
    assert info.week_of_year == (2021, 1)
    assert info.day_of_week == 5
    assert info.day_of_year == 1
    assert info.quarter == 1
    assert info.year_of_era == (2021, 1)
    assert info.leap_year is False
    assert info.debug is None


def test_day_info_in_fiscal_calendar_with_debug():
    info = civcal.day_info(date(2024, 7, 1), calendar="au", debug=True)
    assert info.date == (2025, 1, 1)
    assert info.quarter == 1
    assert info.debug["config"]["month_of_year"] == 7
    assert info.debug["first_day_of_year"] == info.iso_days
