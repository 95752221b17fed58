from __future__ import annotations

import argparse

import civcal
from civcal.core.time import DAYS_IN_WEEK, amod

_DOW_NAMES = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def dow_header(first_day_of_week: int, w: int = 4) -> str:
    days = [_DOW_NAMES[amod(first_day_of_week + i, DAYS_IN_WEEK) - 1] for i in range(DAYS_IN_WEEK)]
    return " ".join(d.ljust(w) for d in ["Wk"] + days)


def cell(text: str, w: int = 4) -> str:
    return text[:w].ljust(w)


def month_rows(calendar: str, year: int, month: int) -> list[list[str]]:
    """Week rows of one month; each row starts with its week-of-year label."""
    cal = civcal.get_calendar(calendar)
    rng = cal.month(year, month)
    first = cal.date_to_iso_days(*rng.first)
    last = cal.date_to_iso_days(*rng.last)

    rows: list[list[str]] = []
    days: list[str] = [cell("")] * (cal.day_of_week(*rng.first) - 1)
    for n in range(first, last + 1):
        y, m, d = cal.date_from_iso_days(n)
        if not rows or len(rows[-1]) == DAYS_IN_WEEK + 1:
            _, wk = cal.week_of_year(y, m, d)
            rows.append([cell(f"{wk:2d}")] + days)
            days = []
        rows[-1].append(cell(f"{d:2d}"))
    rows[-1].extend([cell("")] * (DAYS_IN_WEEK + 1 - len(rows[-1])))
    return rows


def print_month(calendar: str, year: int, month: int) -> None:
    cal = civcal.get_calendar(calendar)
    rng = cal.month(year, month)
    header = dow_header(cal.config.first_day_of_week)
    first, last = cal.date_to_iso_days(*rng.first), cal.date_to_iso_days(*rng.last)
    print(f"{calendar}  {year}-{month:02d}   (iso_days {first} .. {last})")
    print(header)
    print("-" * len(header))
    for row in month_rows(calendar, year, month):
        print(" ".join(row))
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month grid laid out from the calendar's first day of week, with week numbers."
    )
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default="gregorian", help="registered calendar name (default: gregorian)")
    args = p.parse_args(argv)

    print_month(args.calendar, args.year, args.month)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
