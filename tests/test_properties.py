"""Hypothesis property tests over arbitrary calendar configurations."""

from __future__ import annotations

from hypothesis import event, given, settings
from hypothesis import strategies as st

from civcal.core.config import CalendarConfig
from civcal.core.time import fixed_from_gregorian
from civcal.engines.arithmetic import UNITS, plus
from civcal.engines.day_count import date_from_iso_days, date_to_iso_days
from civcal.engines.month import days_in_month, quarter_of_year, valid_date
from civcal.engines.week import day_of_week, week_of_year, week_range, weeks_in_week_year

configs = st.builds(
    CalendarConfig,
    first_day_of_week=st.integers(min_value=1, max_value=7),
    min_days_in_first_week=st.integers(min_value=1, max_value=7),
    month_of_year=st.integers(min_value=1, max_value=12),
    year=st.sampled_from(["beginning", "ending", "majority"]),
    epoch=st.one_of(st.none(), st.integers(min_value=-1000, max_value=1000)),
)

iso_days = st.integers(
    min_value=fixed_from_gregorian(-9999, 1, 1),
    max_value=fixed_from_gregorian(9999, 12, 31),
)


@given(cfg=configs, n=iso_days)
def test_day_count_roundtrip(cfg: CalendarConfig, n: int) -> None:
    ymd = date_from_iso_days(n, cfg)
    assert valid_date(*ymd, cfg)
    assert date_to_iso_days(*ymd, cfg) == n


@given(cfg=configs, n=iso_days)
def test_next_day_is_later(cfg: CalendarConfig, n: int) -> None:
    assert date_from_iso_days(n + 1, cfg) > date_from_iso_days(n, cfg)


@given(cfg=configs, n=iso_days)
def test_day_lies_in_its_week(cfg: CalendarConfig, n: int) -> None:
    ymd = date_from_iso_days(n, cfg)
    wy, wk = week_of_year(*ymd, cfg)
    event(f"weeks={weeks_in_week_year(wy, cfg)}")
    assert 1 <= wk <= weeks_in_week_year(wy, cfg)
    assert ymd in week_range(wy, wk, cfg)
    assert 1 <= day_of_week(*ymd, cfg) <= 7


@given(cfg=configs, n=iso_days)
def test_week_start_has_day_of_week_one(cfg: CalendarConfig, n: int) -> None:
    ymd = date_from_iso_days(n, cfg)
    first = week_range(*week_of_year(*ymd, cfg), cfg).first
    assert day_of_week(*first, cfg) == 1


@given(cfg=configs, n=iso_days)
def test_quarter_in_range(cfg: CalendarConfig, n: int) -> None:
    assert 1 <= quarter_of_year(*date_from_iso_days(n, cfg), cfg) <= 4


@settings(max_examples=200)
@given(
    cfg=configs,
    year=st.integers(min_value=-9999, max_value=9999),
    month=st.integers(min_value=1, max_value=12),
    day=st.integers(min_value=1, max_value=31),
    unit=st.sampled_from(UNITS),
    amount=st.integers(min_value=-5000, max_value=5000),
)
def test_plus_lands_on_valid_date(cfg, year, month, day, unit, amount):
    day = min(day, days_in_month(year, month, cfg))
    out = plus(year, month, day, cfg, unit, amount)
    event(f"unit={unit}")
    assert valid_date(*out, cfg)
    assert plus(year, month, day, cfg, unit, amount) == out


@given(cfg=configs)
def test_epoch_names_day_one_of_year_one(cfg: CalendarConfig) -> None:
    assert date_to_iso_days(1, 1, 1, cfg) == cfg.epoch
