from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib

from civcal.logging import configure_logging, get_logger

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

log = get_logger(__name__)


def _parse_ymd(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise SystemExit(f"bad date {s!r}: {e}")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Import a diagnostics module and run its main(argv)."""
    mod = importlib.import_module(modpath)
    return int(mod.main(argv) or 0)


def cmd_day(argv: list[str]) -> int:
    import civcal

    p = argparse.ArgumentParser(prog="civcal day", description="Gregorian date -> calendar date and derived values")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    info = civcal.day_info(_parse_ymd(args.date), calendar=args.calendar, debug=args.debug)
    y, m, d = info.date
    wy, wk = info.week_of_year
    iy, iw = info.iso_week_of_year
    era_year, era = info.year_of_era

    print(f"Calendar: {info.calendar}")
    print(f"  date          = {y}-{m:02d}-{d:02d}")
    print(f"  iso_days      = {info.iso_days}")
    print(f"  day_of_week   = {info.day_of_week}")
    print(f"  day_of_year   = {info.day_of_year}")
    print(f"  quarter       = {info.quarter}")
    print(f"  week_of_year  = {wy}-W{wk:02d}")
    print(f"  iso_week      = {iy}-W{iw:02d}")
    print(f"  year_of_era   = {era_year} (era {era})")
    print(f"  leap_year     = {info.leap_year}")
    if info.debug:
        print()
        for k, v in info.debug.items():
            print(f"  {k:<17} = {v}")
    return 0


def cmd_list(argv: list[str]) -> int:
    import civcal

    p = argparse.ArgumentParser(prog="civcal list", description="List registered calendars")
    p.parse_args(argv)

    for name in civcal.list_calendars():
        info = civcal.calendar_info(name)
        print(
            f"{name:<12} first_day_of_week={info['first_day_of_week']} "
            f"min_days={info['min_days_in_first_week']} "
            f"month_of_year={info['month_of_year']} year={info['year']}"
        )
    return 0


def cmd_weeks(argv: list[str]) -> int:
    import civcal

    p = argparse.ArgumentParser(prog="civcal weeks", description="Week structure of a calendar year")
    p.add_argument("year", type=int)
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    cal = civcal.get_calendar(args.calendar)
    weeks, last_days = cal.weeks_in_year(args.year)
    rng = cal.week(args.year, 1)

    print(f"Calendar: {args.calendar}  year {args.year}")
    print(f"  days_in_year       = {cal.days_in_year(args.year)}")
    print(f"  weeks_in_year      = {weeks} (last week has {last_days} day(s))")
    print(f"  weeks_in_week_year = {cal.weeks_in_week_year(args.year)}")
    print(f"  week 1             = {tuple(rng.first)} .. {tuple(rng.last)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `civcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="civcal", description="Configurable civil calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", help="DEBUG|INFO|WARNING|ERROR")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian date -> calendar date and derived values")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--calendar", default="gregorian")
    p_day.add_argument("--debug", action="store_true")

    sub.add_parser("list", help="List registered calendars")
    sub.add_parser("weeks", help="Week structure of a calendar year")
    sub.add_parser("month", help="Print a month grid with week numbers (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    configure_logging(args.log_level)
    log.debug("cli.command", cmd=args.cmd, rest=rest)

    if args.cmd == "day":
        day_argv = [args.date, "--calendar", args.calendar]
        if args.debug:
            day_argv += ["--debug"]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "weeks":
        return cmd_weeks(rest)

    if args.cmd == "month":
        return _run_module_main("civcal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "civcal.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
