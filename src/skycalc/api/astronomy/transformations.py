"""
Coordinate Transformations

Equatorial (right ascension, declination) to horizontal (altitude,
azimuth) coordinates for an observer on the Earth.
"""

from __future__ import annotations

import math

import deal

from skycalc.api.core.utils import constrain_360, cosd, sind
from skycalc.api.time.instant import CalendarInstant
from skycalc.api.time.sidereal import gmst


__all__ = [
    "equatorial_to_altaz",
    "equatorial_to_altaz_jd",
    "hour_angle",
]


def hour_angle(longitude: float, ra: float, instant: CalendarInstant) -> float:
    """
    Local hour angle of an object.

    Args:
        longitude: Observer longitude in degrees, east positive
        ra: Right ascension in degrees
        instant: Calendar instant (UT)

    Returns:
        Hour angle in degrees in [0, 360)
    """
    return constrain_360(instant.to_gst() + longitude - ra)


def _rotate(latitude: float, dec: float, ha: float) -> tuple[float, float]:
    """Spherical rotation from hour angle/declination to altitude/azimuth."""
    x = -cosd(ha) * cosd(dec) * sind(latitude) + sind(dec) * cosd(latitude)
    y = -sind(ha) * cosd(dec)
    z = cosd(ha) * cosd(dec) * cosd(latitude) + sind(dec) * sind(latitude)

    altitude = math.degrees(math.atan2(z, math.hypot(x, y)))
    azimuth = constrain_360(math.degrees(math.atan2(y, x)))
    return altitude, azimuth


@deal.pre(lambda latitude, longitude, ra, dec, instant: -90 <= latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda latitude, longitude, ra, dec, instant: -90 <= dec <= 90, message="Declination must be -90 to +90")  # type: ignore[misc,arg-type]
def equatorial_to_altaz(
    latitude: float, longitude: float, ra: float, dec: float, instant: CalendarInstant
) -> tuple[float, float]:
    """
    Convert equatorial coordinates to altitude and azimuth.

    Uses the mean Greenwich sidereal time of the instant. Azimuth is
    reckoned from north through east. At the poles the azimuth is
    degenerate but finite.

    Args:
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees, east positive
        ra: Right ascension in degrees
        dec: Declination in degrees
        instant: Calendar instant (UT)

    Returns:
        Tuple of (altitude, azimuth) in degrees

    Example:
        >>> instant = CalendarInstant(1987, 4, 10, 19, 21, 0)
        >>> alt, az = equatorial_to_altaz(38.921389, -77.065556, 347.319338, -6.719892, instant)
    """
    return _rotate(latitude, dec, hour_angle(longitude, ra, instant))


@deal.pre(lambda latitude, longitude, ra, dec, jd: -90 <= latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda latitude, longitude, ra, dec, jd: -90 <= dec <= 90, message="Declination must be -90 to +90")  # type: ignore[misc,arg-type]
def equatorial_to_altaz_jd(latitude: float, longitude: float, ra: float, dec: float, jd: float) -> tuple[float, float]:
    """
    Convert equatorial coordinates to altitude and azimuth at a Julian Day.

    Same as equatorial_to_altaz() but takes the sidereal time straight from
    the Julian Day, without rounding the time to a whole second.
    """
    return _rotate(latitude, dec, constrain_360(gmst(jd) + longitude - ra))
