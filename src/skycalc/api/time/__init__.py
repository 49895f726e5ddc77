"""Time and calendar system: Julian Day, calendar instants, sidereal time and nutation."""

from skycalc.api.time.instant import CalendarInstant, from_julian_day, parse_instant, to_julian_day
from skycalc.api.time.julian import (
    calendar_date_from_jd,
    jd2000_century,
    jd2000_century_from_date,
    julian_day,
    modified_julian_day,
)
from skycalc.api.time.nutation import nutation
from skycalc.api.time.sidereal import (
    apparent_sidereal_time_greenwich,
    gmst,
    local_sidereal_time,
    mean_sidereal_time_greenwich,
)


__all__ = [
    "CalendarInstant",
    "apparent_sidereal_time_greenwich",
    "calendar_date_from_jd",
    "from_julian_day",
    "gmst",
    "jd2000_century",
    "jd2000_century_from_date",
    "julian_day",
    "local_sidereal_time",
    "mean_sidereal_time_greenwich",
    "modified_julian_day",
    "nutation",
    "parse_instant",
    "to_julian_day",
]
