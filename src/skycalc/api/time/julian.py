"""
Julian Day Arithmetic

Conversion between proleptic calendar dates and Julian Day numbers following
Meeus, Astronomical Algorithms, chapter 7. Dates before 1582-10-15 use the
Julian calendar, later dates the Gregorian calendar.
"""

from __future__ import annotations

import math

import deal

from skycalc.api.core.constants import DAYS_PER_JULIAN_CENTURY, GREGORIAN_CUTOVER_JD, J2000_JD, MJD_OFFSET


__all__ = [
    "calendar_date_from_jd",
    "hours_to_hms",
    "jd2000_century",
    "jd2000_century_from_date",
    "julian_day",
    "modified_julian_day",
]


def _is_julian_calendar(year: int, month: int, day: float) -> bool:
    """True when the date falls before the Gregorian reform of 1582-10-15."""
    return year < 1582 or (year == 1582 and (month < 10 or (month == 10 and day < 15)))


@deal.pre(lambda year, month, day: 1 <= month <= 12, message="Month must be 1-12")  # type: ignore[misc,arg-type]
@deal.pre(lambda year, month, day: 1 <= day < 32, message="Day must be in [1, 32)")  # type: ignore[misc,arg-type]
def julian_day(year: int, month: int, day: float) -> float:
    """
    Julian Day of a calendar date with a fractional day.

    Args:
        year: Astronomical year (1 BC is 0, 2 BC is -1)
        month: Month 1-12
        day: Day of month with the time of day as a fraction

    Returns:
        Julian Day number

    Example:
        >>> julian_day(2000, 1, 1.5)
        2451545.0
        >>> julian_day(-4712, 1, 1.5)
        0.0
    """
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    if _is_julian_calendar(year, month, day):
        b = 0
    else:
        a = math.floor(y / 100)
        b = 2 - a + math.floor(a / 4)

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5


def modified_julian_day(year: int, month: int, day: float) -> float:
    """Modified Julian Day of a calendar date (JD - 2400000.5)."""
    return julian_day(year, month, day) - MJD_OFFSET


def jd2000_century(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def jd2000_century_from_date(year: int, month: int, day: float) -> float:
    """Julian centuries since J2000.0 for a calendar date."""
    return jd2000_century(julian_day(year, month, day))


def calendar_date_from_jd(jd: float) -> tuple[int, int, float]:
    """
    Calendar date of a Julian Day.

    The alpha correction is applied from the first Gregorian day
    (integer JD 2299161) onwards.

    Args:
        jd: Julian Day (must not be negative)

    Returns:
        Tuple of (year, month, day) where day carries the fraction of the day

    Example:
        >>> calendar_date_from_jd(2451545.0)
        (2000, 1, 1.5)
    """
    z = math.floor(jd + 0.5)
    f = (jd + 0.5) - z

    if z >= GREGORIAN_CUTOVER_JD:
        alpha = math.floor((z - 1_867_216.25) / 36_524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    else:
        a = z

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return int(year), int(month), day


def hours_to_hms(fraction_of_day: float) -> tuple[int, int, float]:
    """
    Split a fraction of a day into hours, minutes and seconds.

    Hours and minutes are truncated; seconds keep their fraction.

    Example:
        >>> hours_to_hms(0.5)
        (12, 0, 0.0)
    """
    total_hours = fraction_of_day * 24.0
    hours = math.floor(total_hours)
    minutes = math.floor((total_hours - hours) * 60.0)
    seconds = (total_hours - hours - minutes / 60.0) * 3600.0
    return hours, minutes, seconds
