"""
Sidereal Time

Greenwich mean and apparent sidereal time (Meeus 12.4) and local sidereal
time. All results are in degrees in [0, 360).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skycalc.api.core.constants import DAYS_PER_JULIAN_CENTURY, J2000_JD
from skycalc.api.core.utils import constrain_360, cosd
from skycalc.api.time.nutation import nutation


if TYPE_CHECKING:
    from skycalc.api.time.instant import CalendarInstant


__all__ = [
    "apparent_sidereal_time_greenwich",
    "gmst",
    "local_sidereal_time",
    "mean_sidereal_time_greenwich",
]


def gmst(jd: float) -> float:
    """
    Greenwich mean sidereal time of a Julian Day.

    Args:
        jd: Julian Day (UT)

    Returns:
        Sidereal time in degrees

    Example:
        >>> round(gmst(2443825.5) / 15.0, 6)
        3.450386
    """
    days = jd - J2000_JD
    t = days / DAYS_PER_JULIAN_CENTURY
    return constrain_360(280.46061837 + 360.98564736629 * days + 0.000387933 * t * t - t * t * t / 38_710_000.0)


def mean_sidereal_time_greenwich(instant: CalendarInstant) -> float:
    """Greenwich mean sidereal time of a calendar instant, in degrees."""
    return gmst(instant.to_jd())


def apparent_sidereal_time_greenwich(instant: CalendarInstant) -> float:
    """
    Greenwich apparent sidereal time of a calendar instant.

    Adds the equation of the equinoxes, the nutation in longitude scaled by
    the cosine of the mean obliquity, to the mean sidereal time.

    Args:
        instant: Calendar instant (UT)

    Returns:
        Sidereal time in degrees
    """
    jd = instant.to_jd()
    delta_psi, _, eps0 = nutation((jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY)
    return constrain_360(gmst(jd) + delta_psi * cosd(eps0))


def local_sidereal_time(jd: float, longitude: float) -> float:
    """
    Local mean sidereal time.

    Args:
        jd: Julian Day (UT)
        longitude: Observer longitude in degrees, east positive

    Returns:
        Local sidereal time in degrees
    """
    return constrain_360(gmst(jd) + longitude)
