"""
SkyCalc - Sun, Moon and Darkness Calculator

Computes Sun and Moon positions, rise/set and twilight times and the nightly
darkness window available for deep-sky observation at a given location.

Example:
    >>> from skycalc import CalendarInstant, GeographicLocation, Darkness
    >>> location = GeographicLocation(latitude=38.92, longitude=-77.07, timezone=-5.0)
    >>> darkness = Darkness(location, CalendarInstant(2024, 3, 20))
    >>> band, window = darkness.astronomical_or_nautical_utc()
"""

from skycalc.api.astronomy.moon import moon_position_high, moon_position_low
from skycalc.api.astronomy.sun import sun_hour_angle, sun_position
from skycalc.api.astronomy.transformations import equatorial_to_altaz, hour_angle
from skycalc.api.core.enums import HorizonBand, SearchDirection, TimeFormat
from skycalc.api.core.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidCoordinateError,
    InvalidTimeError,
    ReportError,
    SkycalcError,
)
from skycalc.api.events.darkness import Darkness, DarknessWindow, darkness_utc
from skycalc.api.events.rise_set import EventResult, EventStatus, MoonEvents, SunEvents
from skycalc.api.location.observer import Environment, GeographicLocation, Observer
from skycalc.api.time.instant import CalendarInstant, from_julian_day, to_julian_day
from skycalc.api.time.nutation import nutation
from skycalc.api.time.sidereal import (
    apparent_sidereal_time_greenwich,
    local_sidereal_time,
    mean_sidereal_time_greenwich,
)


__version__ = "0.0.1"

__all__ = [
    "CalendarInstant",
    "ConfigurationError",
    "Darkness",
    "DarknessWindow",
    "Environment",
    "EventResult",
    "EventStatus",
    "GeographicLocation",
    "HorizonBand",
    "InvalidConfigurationError",
    "InvalidCoordinateError",
    "InvalidTimeError",
    "MoonEvents",
    "Observer",
    "ReportError",
    "SearchDirection",
    "SkycalcError",
    "SunEvents",
    "TimeFormat",
    "apparent_sidereal_time_greenwich",
    "darkness_utc",
    "equatorial_to_altaz",
    "from_julian_day",
    "hour_angle",
    "local_sidereal_time",
    "mean_sidereal_time_greenwich",
    "moon_position_high",
    "moon_position_low",
    "nutation",
    "sun_hour_angle",
    "sun_position",
    "to_julian_day",
]
