"""Event-finding engine: altitude grids, rise/set/twilight search and darkness windows."""

from skycalc.api.events.darkness import (
    NO_DARKNESS,
    Darkness,
    DarknessLevel,
    DarknessWindow,
    astronomical_or_nautical_utc,
    darkness_utc,
)
from skycalc.api.events.grid import AltAzSample, altaz_grid, cross_horizon, night_window, two_point_interpolation
from skycalc.api.events.rise_set import (
    EventResult,
    EventStatus,
    MoonEvents,
    SunEvents,
    find_event,
    moonrise_utc,
    moonset_utc,
    sunrise_utc,
    sunset_utc,
)


__all__ = [
    "NO_DARKNESS",
    "AltAzSample",
    "Darkness",
    "DarknessLevel",
    "DarknessWindow",
    "EventResult",
    "EventStatus",
    "MoonEvents",
    "SunEvents",
    "altaz_grid",
    "astronomical_or_nautical_utc",
    "cross_horizon",
    "darkness_utc",
    "find_event",
    "moonrise_utc",
    "moonset_utc",
    "night_window",
    "sunrise_utc",
    "sunset_utc",
    "two_point_interpolation",
]
