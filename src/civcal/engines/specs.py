from __future__ import annotations

from typing import Dict

from civcal.core.config import MONDAY, SUNDAY, CalendarConfig


# ============================================================
# CALENDAR YEAR = GREGORIAN YEAR
# ============================================================

# Weeks start on Monday, week 1 holds January 1st.
GREGORIAN = CalendarConfig(first_day_of_week=MONDAY, min_days_in_first_week=1)

# ISO-8601 week numbering over Gregorian months.
ISO = CalendarConfig.iso()

# Weeks start on Sunday, week 1 holds January 1st.
US = CalendarConfig(first_day_of_week=SUNDAY, min_days_in_first_week=1)


# ============================================================
# FISCAL YEARS (named by the Gregorian year in which they end)
# ============================================================

# April to March.
UK = CalendarConfig(
    first_day_of_week=MONDAY,
    min_days_in_first_week=4,
    month_of_year=4,
    year="ending",
)

# July to June.
AU = CalendarConfig(
    first_day_of_week=MONDAY,
    min_days_in_first_week=4,
    month_of_year=7,
    year="ending",
)

# October to September.
US_FEDERAL = CalendarConfig(
    first_day_of_week=SUNDAY,
    min_days_in_first_week=1,
    month_of_year=10,
    year="ending",
)


ALL_SPECS: Dict[str, CalendarConfig] = {
    "gregorian": GREGORIAN,
    "iso": ISO,
    "us": US,
    "uk": UK,
    "au": AU,
    "us_federal": US_FEDERAL,
}
