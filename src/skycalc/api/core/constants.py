"""
Physical and Astronomical Constants

Constants shared by the time, position and event-finding modules.
"""

from typing import Final


__all__ = [
    "DARKNESS_GRID_POINTS",
    "DAYS_PER_JULIAN_CENTURY",
    "DEFAULT_MAX_DAYS",
    "DEGREES_PER_HOUR_ANGLE",
    "GREGORIAN_CUTOVER_JD",
    "J2000_JD",
    "MJD_OFFSET",
    "MOON_VISIBILITY_THRESHOLD",
    "NUTATION_UNIT_TO_HOURS",
    "RISE_SET_GRID_POINTS",
    "SECONDS_PER_DAY",
    "SUN_HORIZON_DEPRESSION",
]


# Epochs
J2000_JD: Final[float] = 2_451_545.0
"""Julian Day of the J2000.0 epoch (2000-01-01 12:00 TT)."""

MJD_OFFSET: Final[float] = 2_400_000.5
"""Offset between Julian Day and Modified Julian Day."""

GREGORIAN_CUTOVER_JD: Final[int] = 2_299_161
"""First integer Julian Day of the Gregorian calendar (1582-10-15)."""

DAYS_PER_JULIAN_CENTURY: Final[float] = 36_525.0
"""Days in a Julian century."""

SECONDS_PER_DAY: Final[float] = 86_400.0
"""Seconds in a civil day."""

# Angles
DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of sky rotation per hour of Right Ascension."""

NUTATION_UNIT_TO_HOURS: Final[float] = 1e4 * 3_600.0
"""Divisor taking nutation series terms (0.0001 arc-seconds) to the engine's hour unit."""

SUN_HORIZON_DEPRESSION: Final[float] = -0.833_33
"""Solar altitude at rise/set used by the hour angle estimate (refraction + semi-diameter)."""

MOON_VISIBILITY_THRESHOLD: Final[float] = 0.125
"""Lunar altitude in degrees above which moonlight spoils the darkness window."""

# Event search
RISE_SET_GRID_POINTS: Final[int] = 288
"""Samples per night for rise/set searches (5 minute resolution)."""

DARKNESS_GRID_POINTS: Final[int] = 1440
"""Samples per night for darkness windows (1 minute resolution)."""

DEFAULT_MAX_DAYS: Final[int] = 2
"""Nights tried by next/previous searches before giving up."""
