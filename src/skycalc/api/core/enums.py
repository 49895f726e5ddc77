"""
Common Enums

Enumerations used throughout the SkyCalc API.
"""

from enum import StrEnum


__all__ = [
    "Body",
    "HorizonBand",
    "SearchDirection",
    "TimeFormat",
]


class HorizonBand(StrEnum):
    """
    Altitude thresholds that define Sun rise/set and twilight events.

    Iterating the enum yields the Sun bands only, from the horizon down.
    The Moon uses a single threshold instead, +0.125 degrees
    (MOON_VISIBILITY_THRESHOLD in constants), for its rise/set search and
    for the darkness predicate, so it is not a member here.
    """

    RISE_SET = "rise_set"  # Mean refraction + solar/lunar radius
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"

    @property
    def angle(self) -> float:
        """Altitude of the band in degrees."""
        return _BAND_ANGLES[self]

    @property
    def description(self) -> str:
        """Human readable name of the band."""
        return _BAND_DESCRIPTIONS[self]


_BAND_ANGLES: dict[HorizonBand, float] = {
    HorizonBand.RISE_SET: -0.8333,
    HorizonBand.CIVIL: -6.0,
    HorizonBand.NAUTICAL: -12.0,
    HorizonBand.ASTRONOMICAL: -18.0,
}

_BAND_DESCRIPTIONS: dict[HorizonBand, str] = {
    HorizonBand.RISE_SET: "Sunrise/Sunset",
    HorizonBand.CIVIL: "Civil Twilight",
    HorizonBand.NAUTICAL: "Nautical Twilight",
    HorizonBand.ASTRONOMICAL: "Astronomical Twilight",
}


class SearchDirection(StrEnum):
    """Which crossing to report relative to the query instant."""

    NEXT = "next"
    PREVIOUS = "previous"
    NEAREST = "nearest"


class TimeFormat(StrEnum):
    """String renderings of a calendar instant."""

    JD = "jd"
    MJD = "mjd"
    UTC = "utc"  # 2024-09-13 00:00:00 UTC
    ISOT = "isot"  # RFC 3339
    HHMM = "hhmm"  # 21:05
    YYYYMMDD = "yyyymmdd"  # 2024-09-13
    SHORT = "short"  # 13-09 21:05


class Body(StrEnum):
    """Bodies the event engine can sample."""

    SUN = "sun"
    MOON = "moon"
