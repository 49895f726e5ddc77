"""
Rise, Set and Twilight Events

Finds the instant a body crosses a horizon band by sampling its altitude
over a night window and interpolating the first qualifying crossing. A
night without a crossing is classified as never rising or never setting;
that is a normal result at high latitudes, not an error.

Only the first crossing of a night is reported. Where a body crosses a
twilight threshold more than once in the same window (close to the polar
circles) the later crossings are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from skycalc.api.core.constants import DEFAULT_MAX_DAYS, MOON_VISIBILITY_THRESHOLD, RISE_SET_GRID_POINTS
from skycalc.api.core.enums import Body, HorizonBand, SearchDirection, TimeFormat
from skycalc.api.events.grid import altaz_grid, cross_horizon, night_window, two_point_interpolation
from skycalc.api.location.observer import GeographicLocation
from skycalc.api.time.instant import CalendarInstant


logger = logging.getLogger(__name__)


__all__ = [
    "NEVER_RISES_TEXT",
    "NEVER_SETS_TEXT",
    "EventResult",
    "EventStatus",
    "MoonEvents",
    "SunEvents",
    "find_event",
    "moonrise_utc",
    "moonset_utc",
    "nearest_crossing",
    "next_crossing",
    "night_crossing",
    "previous_crossing",
    "sunrise_utc",
    "sunset_utc",
]


NEVER_RISES_TEXT = "Never Rises"
NEVER_SETS_TEXT = "Never Sets"


class EventStatus(StrEnum):
    """Outcome of a rise/set search."""

    FOUND = "found"
    NEVER_RISES = "never_rises"
    NEVER_SETS = "never_sets"


@dataclass(frozen=True)
class EventResult:
    """
    Result of a rise/set search.

    Either a Julian Day (``status`` FOUND) or a terminal classification,
    in which case ``jd`` is None.
    """

    status: EventStatus
    jd: float | None = None

    @classmethod
    def found(cls, jd: float) -> EventResult:
        return cls(EventStatus.FOUND, jd)

    @classmethod
    def never(cls, rising: bool) -> EventResult:
        return cls(EventStatus.NEVER_RISES if rising else EventStatus.NEVER_SETS)

    @property
    def is_found(self) -> bool:
        return self.status is EventStatus.FOUND

    def to_local(self, timezone: float) -> EventResult:
        """Shift a found event by a timezone offset in hours."""
        if self.jd is None:
            return self
        return EventResult(self.status, self.jd + timezone / 24.0)

    def jd_or_zero(self) -> float:
        """Julian Day, or 0.0 for a degenerate result."""
        return self.jd if self.jd is not None else 0.0

    def format(self, fmt: TimeFormat | str | None = None) -> str:
        """Format the event time, or "Never Rises" / "Never Sets"."""
        match self.status:
            case EventStatus.NEVER_RISES:
                return NEVER_RISES_TEXT
            case EventStatus.NEVER_SETS:
                return NEVER_SETS_TEXT
        return CalendarInstant.from_jd(self.jd_or_zero()).format(fmt)

    def __str__(self) -> str:
        return self.format()


def night_crossing(
    body: Body,
    latitude: float,
    longitude: float,
    jd: float,
    horizon: float,
    timezone: float,
    rising: bool,
    num_points: int = RISE_SET_GRID_POINTS,
) -> EventResult:
    """
    First horizon crossing within the night containing ``jd``.

    Args:
        body: Sun or Moon
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees, east positive
        jd: Query Julian Day (UT)
        horizon: Threshold altitude in degrees
        timezone: Observer timezone offset in hours
        rising: Search for a rising (True) or setting (False) crossing
        num_points: Grid intervals across the night

    Returns:
        The interpolated crossing time in UT, or NEVER_RISES / NEVER_SETS
    """
    start, end = night_window(jd, timezone)
    grid = altaz_grid(body, latitude, longitude, start, end, num_points)
    crossings = cross_horizon(grid, horizon, rising)
    if not crossings:
        return EventResult.never(rising)
    if len(crossings) > 1:
        logger.debug(f"{len(crossings)} {body} crossings of {horizon} deg in night of JD {start:.1f}, using first")
    first = crossings[0]
    return EventResult.found(
        two_point_interpolation(first.jd_before, first.jd_after, first.altitude_before, first.altitude_after, horizon)
    )


def _stepped_crossing(
    body: Body,
    latitude: float,
    longitude: float,
    jd: float,
    horizon: float,
    timezone: float,
    rising: bool,
    max_days: int,
    step: float,
) -> EventResult:
    current = jd
    for _ in range(max_days):
        result = night_crossing(body, latitude, longitude, current, horizon, timezone, rising)
        if result.is_found:
            return result
        logger.debug(f"No {body} crossing of {horizon} deg in night of JD {current:.1f}, stepping {step:+.0f} day")
        current += step
    return EventResult.never(rising)


def next_crossing(
    body: Body,
    latitude: float,
    longitude: float,
    jd: float,
    horizon: float,
    timezone: float,
    rising: bool,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """Search the night of ``jd`` and up to ``max_days - 1`` following nights."""
    return _stepped_crossing(body, latitude, longitude, jd, horizon, timezone, rising, max_days, 1.0)


def previous_crossing(
    body: Body,
    latitude: float,
    longitude: float,
    jd: float,
    horizon: float,
    timezone: float,
    rising: bool,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """Search the night before ``jd`` and up to ``max_days - 1`` earlier nights."""
    return _stepped_crossing(body, latitude, longitude, jd - 1.0, horizon, timezone, rising, max_days, -1.0)


def nearest_crossing(
    body: Body,
    latitude: float,
    longitude: float,
    jd: float,
    horizon: float,
    timezone: float,
    rising: bool,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """
    Crossing closest in time to ``jd``.

    Runs both the next and previous searches. When both succeed the one with
    the smaller absolute time difference wins (ties go to previous); when one
    succeeds it is returned; when neither does the result of the next search
    is returned.
    """
    following = next_crossing(body, latitude, longitude, jd, horizon, timezone, rising, max_days)
    preceding = previous_crossing(body, latitude, longitude, jd, horizon, timezone, rising, max_days)

    match (following.jd, preceding.jd):
        case (float() as after, float() as before):
            return following if abs(after - jd) < abs(jd - before) else preceding
        case (float(), None):
            return following
        case (None, float()):
            return preceding
        case _:
            return following


def find_event(
    body: Body,
    latitude: float,
    longitude: float,
    jd: float,
    horizon: float,
    timezone: float,
    rising: bool,
    direction: SearchDirection = SearchDirection.NEXT,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """
    Rise or set of a body searched in the given direction.

    Args:
        body: Sun or Moon
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees, east positive
        jd: Query Julian Day (UT)
        horizon: Threshold altitude in degrees
        timezone: Observer timezone offset in hours
        rising: Search for a rising (True) or setting (False) crossing
        direction: NEXT, PREVIOUS or NEAREST
        max_days: Nights tried in each direction

    Returns:
        EventResult in UT
    """
    match direction:
        case SearchDirection.NEXT:
            search = next_crossing
        case SearchDirection.PREVIOUS:
            search = previous_crossing
        case SearchDirection.NEAREST:
            search = nearest_crossing
        case _:
            raise ValueError(f"Unknown search direction: {direction}")
    return search(body, latitude, longitude, jd, horizon, timezone, rising, max_days)


def sunrise_utc(
    latitude: float,
    longitude: float,
    jd: float,
    band: HorizonBand = HorizonBand.RISE_SET,
    timezone: float = 0.0,
    direction: SearchDirection = SearchDirection.NEXT,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """Sunrise (or morning twilight start for a twilight band) in UT."""
    return find_event(Body.SUN, latitude, longitude, jd, band.angle, timezone, True, direction, max_days)


def sunset_utc(
    latitude: float,
    longitude: float,
    jd: float,
    band: HorizonBand = HorizonBand.RISE_SET,
    timezone: float = 0.0,
    direction: SearchDirection = SearchDirection.NEXT,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """Sunset (or evening twilight end for a twilight band) in UT."""
    return find_event(Body.SUN, latitude, longitude, jd, band.angle, timezone, False, direction, max_days)


def moonrise_utc(
    latitude: float,
    longitude: float,
    jd: float,
    timezone: float = 0.0,
    direction: SearchDirection = SearchDirection.NEXT,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """Moonrise in UT for the moon visibility threshold."""
    return find_event(
        Body.MOON, latitude, longitude, jd, MOON_VISIBILITY_THRESHOLD, timezone, True, direction, max_days
    )


def moonset_utc(
    latitude: float,
    longitude: float,
    jd: float,
    timezone: float = 0.0,
    direction: SearchDirection = SearchDirection.NEXT,
    max_days: int = DEFAULT_MAX_DAYS,
) -> EventResult:
    """Moonset in UT for the moon visibility threshold."""
    return find_event(
        Body.MOON, latitude, longitude, jd, MOON_VISIBILITY_THRESHOLD, timezone, False, direction, max_days
    )


@dataclass(frozen=True)
class SunEvents:
    """
    Sun rise/set and twilight times for a location and query instant.

    Example:
        >>> location = GeographicLocation(latitude=0.0, longitude=0.0)
        >>> sun = SunEvents(location, CalendarInstant(2024, 3, 20))
        >>> sun.set_utc(band=HorizonBand.CIVIL).format("hhmm")
    """

    location: GeographicLocation
    instant: CalendarInstant
    max_days: int = DEFAULT_MAX_DAYS

    def rise_utc(
        self, direction: SearchDirection = SearchDirection.NEXT, band: HorizonBand = HorizonBand.RISE_SET
    ) -> EventResult:
        return sunrise_utc(
            self.location.latitude,
            self.location.longitude,
            self.instant.to_jd(),
            band,
            self.location.timezone,
            direction,
            self.max_days,
        )

    def set_utc(
        self, direction: SearchDirection = SearchDirection.NEXT, band: HorizonBand = HorizonBand.RISE_SET
    ) -> EventResult:
        return sunset_utc(
            self.location.latitude,
            self.location.longitude,
            self.instant.to_jd(),
            band,
            self.location.timezone,
            direction,
            self.max_days,
        )

    def rise_local(
        self, direction: SearchDirection = SearchDirection.NEXT, band: HorizonBand = HorizonBand.RISE_SET
    ) -> EventResult:
        return self.rise_utc(direction, band).to_local(self.location.timezone)

    def set_local(
        self, direction: SearchDirection = SearchDirection.NEXT, band: HorizonBand = HorizonBand.RISE_SET
    ) -> EventResult:
        return self.set_utc(direction, band).to_local(self.location.timezone)


@dataclass(frozen=True)
class MoonEvents:
    """Moon rise/set times for a location and query instant."""

    location: GeographicLocation
    instant: CalendarInstant
    max_days: int = DEFAULT_MAX_DAYS

    def rise_utc(self, direction: SearchDirection = SearchDirection.NEXT) -> EventResult:
        return moonrise_utc(
            self.location.latitude,
            self.location.longitude,
            self.instant.to_jd(),
            self.location.timezone,
            direction,
            self.max_days,
        )

    def set_utc(self, direction: SearchDirection = SearchDirection.NEXT) -> EventResult:
        return moonset_utc(
            self.location.latitude,
            self.location.longitude,
            self.instant.to_jd(),
            self.location.timezone,
            direction,
            self.max_days,
        )

    def rise_local(self, direction: SearchDirection = SearchDirection.NEXT) -> EventResult:
        return self.rise_utc(direction).to_local(self.location.timezone)

    def set_local(self, direction: SearchDirection = SearchDirection.NEXT) -> EventResult:
        return self.set_utc(direction).to_local(self.location.timezone)
