"""
Solar Position

Low precision geocentric apparent position of the Sun, good to about 0.01
degrees between 1950 and 2050, which is enough to time rise, set and
twilight events to the minute.
"""

from __future__ import annotations

import math

from skycalc.api.core.constants import J2000_JD, SUN_HORIZON_DEPRESSION
from skycalc.api.core.utils import cosd, sind


__all__ = [
    "sun_hour_angle",
    "sun_position",
]


def sun_position(jd: float) -> tuple[float, float]:
    """
    Right ascension and declination of the Sun.

    Mean longitude and mean anomaly are linear in the days since J2000.0;
    the equation of centre keeps its first two harmonics and the ecliptic
    latitude is taken as zero.

    Args:
        jd: Julian Day (UT)

    Returns:
        Tuple of (right_ascension, declination) in degrees, RA in [0, 360)

    Example:
        >>> ra, dec = sun_position(2451545.0)
    """
    n = jd - J2000_JD
    mean_longitude = (280.460 + 0.9856474 * n) % 360.0
    mean_anomaly = math.radians((357.528 + 0.9856003 * n) % 360.0)

    ecliptic_longitude = math.radians(
        mean_longitude + 1.915 * math.sin(mean_anomaly) + 0.020 * math.sin(2.0 * mean_anomaly)
    )
    obliquity = math.radians(23.439 - 0.0000004 * n)

    ra = math.atan2(math.cos(obliquity) * math.sin(ecliptic_longitude), math.cos(ecliptic_longitude))
    if ra < 0.0:
        ra += 2.0 * math.pi
    dec = math.asin(math.sin(obliquity) * math.sin(ecliptic_longitude))

    return math.degrees(ra), math.degrees(dec)


def sun_hour_angle(latitude: float, declination: float) -> float:
    """
    Hour angle of sunrise/sunset for a -0.83333 degree horizon.

    Where the Sun stays above or below that horizon all day the arccos
    argument leaves [-1, 1]; it is clamped, so 180 means the Sun never sets
    and 0 means it never rises.

    Args:
        latitude: Observer latitude in degrees
        declination: Solar declination in degrees

    Returns:
        Hour angle in degrees in [0, 180]
    """
    denominator = cosd(latitude) * cosd(declination)
    if denominator == 0.0:
        # Pole: the Sun circles at constant altitude
        return 180.0 if declination * latitude > 0.0 else 0.0
    ratio = (sind(SUN_HORIZON_DEPRESSION) - sind(latitude) * sind(declination)) / denominator
    return math.degrees(math.acos(max(-1.0, min(1.0, ratio))))
