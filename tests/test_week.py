# tests/test_week.py

import random
from datetime import date, timedelta

import pytest

from civcal.core.config import CalendarConfig
from civcal.core.errors import InvalidDate
from civcal.core.time import fixed_from_gregorian
from civcal.core.types import PeriodRange
from civcal.engines.day_count import date_from_iso_days
from civcal.engines.specs import AU, GREGORIAN, ISO, US
from civcal.engines.week import (
    day_of_week,
    day_of_week_info,
    first_day_of_week_one,
    iso_day_of_week,
    iso_week_of_year,
    long_year,
    week_of_month,
    week_of_year,
    week_range,
    weeks_in_week_year,
    weeks_in_year,
)


def test_weeks_in_year_counts_from_first_day():
    assert weeks_in_year(2020, ISO) == (53, 2)
    assert weeks_in_year(2019, ISO) == (53, 1)
    assert weeks_in_year(2021, ISO) == (53, 1)
    assert weeks_in_year(2020, GREGORIAN) == (53, 2)


@pytest.mark.parametrize(
    "year,weeks",
    [(2015, 53), (2019, 52), (2020, 53), (2021, 52), (2022, 52), (2026, 53), (2004, 53)],
)
def test_weeks_in_iso_week_year(year, weeks):
    assert weeks_in_week_year(year, ISO) == weeks
    assert long_year(year, ISO) is (weeks == 53)


def test_iso_week_matches_isocalendar_exhaustive():
    d = date(2000, 1, 1)
    while d <= date(2030, 12, 31):
        iy, iw, _ = d.isocalendar()
        assert iso_week_of_year(d.year, d.month, d.day) == (iy, iw)
        d += timedelta(days=1)


def test_iso_week_matches_isocalendar_sampled():
    random.seed(42)
    lo, hi = date(1, 1, 1).toordinal(), date(2200, 12, 31).toordinal()
    for _ in range(5000):
        d = date.fromordinal(random.randint(lo, hi))
        iy, iw, _ = d.isocalendar()
        assert iso_week_of_year(d.year, d.month, d.day) == (iy, iw)
        assert week_of_year(d.year, d.month, d.day, ISO) == (iy, iw)


@pytest.mark.parametrize(
    "ymd,expected",
    [
        ((2021, 1, 1), (2020, 53)),
        ((2019, 12, 30), (2020, 1)),
        ((2008, 12, 29), (2009, 1)),
        ((2010, 1, 3), (2009, 53)),
        ((2020, 12, 31), (2020, 53)),
    ],
)
def test_iso_week_year_boundaries(ymd, expected):
    assert iso_week_of_year(*ymd) == expected


def test_iso_week_of_fiscal_date_reads_the_same_day():
    # AU 2025-01-01 is Gregorian 2024-07-01.
    assert iso_week_of_year(2025, 1, 1, AU) == date(2024, 7, 1).isocalendar()[:2]


def test_sunday_weeks():
    # 2022-01-01 is a Saturday; week 1 starts Sunday 2021-12-26.
    assert first_day_of_week_one(2022, US) == fixed_from_gregorian(2021, 12, 26)
    assert week_of_year(2022, 1, 1, US) == (2022, 1)
    assert week_of_year(2021, 12, 31, US) == (2022, 1)
    assert week_of_year(2022, 1, 2, US) == (2022, 2)


def test_min_days_one_weeks():
    # 2020-01-01 is a Wednesday; Monday-start week 1 begins 2019-12-30.
    assert week_of_year(2019, 12, 31, GREGORIAN) == (2020, 1)
    assert week_of_year(2020, 1, 6, GREGORIAN) == (2020, 2)


def test_day_of_week_rebased():
    # 2024-01-01 was a Monday, 2024-01-07 a Sunday.
    assert iso_day_of_week(2024, 1, 1, US) == 1
    assert day_of_week(2024, 1, 1, GREGORIAN) == 1
    assert day_of_week(2024, 1, 1, US) == 2
    assert day_of_week(2024, 1, 7, US) == 1
    assert day_of_week(2024, 1, 7, GREGORIAN) == 7
    assert day_of_week(2024, 1, 3, CalendarConfig(first_day_of_week=3)) == 1
    assert day_of_week_info(2024, 1, 1, US) == (1, 7, 6)


def test_week_of_month():
    assert week_of_month(2024, 1, 1, GREGORIAN) == (1, 1)
    assert week_of_month(2024, 1, 8, GREGORIAN) == (1, 2)
    # ISO rule per month: week 1 of February 2024 starts Monday 2024-01-29.
    assert week_of_month(2024, 2, 1, ISO) == (2, 1)
    assert week_of_month(2024, 1, 29, ISO) == (2, 1)
    # 2024-09-01 is a Sunday before September's week 1: fifth week of August.
    assert week_of_month(2024, 9, 1, ISO) == (8, 5)
    # Trailing December days belong to January's week 1.
    assert week_of_month(2024, 12, 30, ISO) == (1, 1)
    assert week_of_month(2025, 1, 1, ISO) == (1, 1)


def test_week_range():
    assert week_range(2020, 1, ISO) == PeriodRange((2019, 12, 30), (2020, 1, 5))
    assert week_range(2020, 53, ISO) == PeriodRange((2020, 12, 28), (2021, 1, 3))
    with pytest.raises(InvalidDate):
        week_range(2021, 53, ISO)
    with pytest.raises(InvalidDate):
        week_range(2021, 0, ISO)


def test_every_day_lies_in_its_week_range():
    for cfg in (ISO, US, AU):
        n0 = fixed_from_gregorian(2018, 12, 1)
        for n in range(n0, n0 + 800):
            ymd = date_from_iso_days(n, cfg)
            wy, wk = week_of_year(*ymd, cfg)
            assert 1 <= wk <= weeks_in_week_year(wy, cfg)
            assert ymd in week_range(wy, wk, cfg)
