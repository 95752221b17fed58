from __future__ import annotations

import argparse
import random
from typing import List

import civcal
from civcal.core.time import fixed_from_gregorian


def parse_calendars(s: str) -> List[str]:
    # "gregorian,iso,au" -> ["gregorian", ...]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start_year: int,
    end_year: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Day count -> civil date -> day count, plus the week-year of every sampled
    day read back through week_range.
    """
    random.seed(seed)
    cal = civcal.get_calendar(calendar)
    lo = fixed_from_gregorian(start_year, 1, 1)
    hi = fixed_from_gregorian(end_year, 12, 31)
    failures = 0

    for _ in range(N):
        n0 = random.randint(lo, hi)
        ymd = cal.date_from_iso_days(n0)
        n1 = cal.date_to_iso_days(*ymd)
        week_year, week = cal.week_of_year(*ymd)
        rng = cal.week(week_year, week)

        ok = (n0 == n1) and (ymd in rng)
        if not ok:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("n0:", n0, "ymd:", ymd, "n1:", n1)
            print("week:", (week_year, week), "range:", rng)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: day count -> civil date -> day count.")
    p.add_argument("--calendars", type=str, default=",".join(civcal.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-year", type=int, default=-9999, help="First proleptic Gregorian year sampled.")
    p.add_argument("--end-year", type=int, default=9999, help="Last proleptic Gregorian year sampled.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    total_fail = 0
    for name in parse_calendars(args.calendars):
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(
            name, N=args.N, start_year=args.start_year, end_year=args.end_year,
            seed=args.seed, max_failures=args.max_failures,
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
