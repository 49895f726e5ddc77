"""
Darkness Windows

The darkness window of a night is the span during which the Sun is below a
twilight band and the Moon is no higher than the moon visibility threshold.
Both bodies are sampled in lockstep on a one-minute grid over the same night
window used by the rise/set search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from skycalc.api.core.constants import DARKNESS_GRID_POINTS, MOON_VISIBILITY_THRESHOLD
from skycalc.api.core.enums import HorizonBand, TimeFormat
from skycalc.api.events.grid import moon_altaz_grid, night_window, sun_altaz_grid
from skycalc.api.location.observer import GeographicLocation
from skycalc.api.time.instant import CalendarInstant


logger = logging.getLogger(__name__)


__all__ = [
    "NO_DARKNESS",
    "NO_DARKNESS_TEXT",
    "Darkness",
    "DarknessLevel",
    "DarknessWindow",
    "astronomical_or_nautical_utc",
    "darkness_utc",
]


NO_DARKNESS_TEXT = "No darkness"


class DarknessLevel(StrEnum):
    """Deepest darkness available in a night."""

    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"
    NONE = "none"


@dataclass(frozen=True)
class DarknessWindow:
    """
    Closed interval of Julian Days with darkness.

    The degenerate window (0, 0) means there is no darkness that night.
    """

    start: float = 0.0
    end: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        return self.start == 0.0 and self.end == 0.0

    @property
    def duration_hours(self) -> float:
        return (self.end - self.start) * 24.0

    def to_local(self, timezone: float) -> DarknessWindow:
        """Shift by a timezone offset in hours; the degenerate window stays (0, 0)."""
        if self.is_degenerate:
            return self
        offset = timezone / 24.0
        return DarknessWindow(self.start + offset, self.end + offset)

    def format_start(self, fmt: TimeFormat | str | None = None) -> str:
        if self.is_degenerate:
            return NO_DARKNESS_TEXT
        return CalendarInstant.from_jd(self.start).format(fmt)

    def format_end(self, fmt: TimeFormat | str | None = None) -> str:
        if self.is_degenerate:
            return NO_DARKNESS_TEXT
        return CalendarInstant.from_jd(self.end).format(fmt)


NO_DARKNESS = DarknessWindow()


def darkness_utc(
    latitude: float,
    longitude: float,
    jd: float,
    band: HorizonBand,
    timezone: float = 0.0,
    num_points: int = DARKNESS_GRID_POINTS,
) -> DarknessWindow:
    """
    Darkness window of the night containing ``jd``.

    Args:
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees, east positive
        jd: Query Julian Day (UT)
        band: Twilight band the Sun must be below
        timezone: Observer timezone offset in hours
        num_points: Grid intervals across the night

    Returns:
        DarknessWindow in UT, or NO_DARKNESS
    """
    start, end = night_window(jd, timezone)
    sun = sun_altaz_grid(latitude, longitude, start, end, num_points)
    moon = moon_altaz_grid(latitude, longitude, start, end, num_points)

    dark = [
        sun_sample.jd
        for sun_sample, moon_sample in zip(sun, moon, strict=True)
        if sun_sample.altitude <= band.angle and moon_sample.altitude <= MOON_VISIBILITY_THRESHOLD
    ]
    if not dark:
        logger.debug(f"No {band} darkness in night of JD {start:.1f}")
        return NO_DARKNESS
    return DarknessWindow(min(dark), max(dark))


def astronomical_or_nautical_utc(
    latitude: float, longitude: float, jd: float, timezone: float = 0.0
) -> tuple[DarknessLevel, DarknessWindow]:
    """
    Astronomical darkness if the night has any, otherwise nautical darkness.

    Returns:
        Tuple of (level, window); ("none", NO_DARKNESS) when neither exists
    """
    astronomical = darkness_utc(latitude, longitude, jd, HorizonBand.ASTRONOMICAL, timezone)
    if not astronomical.is_degenerate:
        return DarknessLevel.ASTRONOMICAL, astronomical
    nautical = darkness_utc(latitude, longitude, jd, HorizonBand.NAUTICAL, timezone)
    if not nautical.is_degenerate:
        return DarknessLevel.NAUTICAL, nautical
    return DarknessLevel.NONE, NO_DARKNESS


@dataclass(frozen=True)
class Darkness:
    """
    Darkness windows for a location and the night of a query instant.

    Example:
        >>> location = GeographicLocation(latitude=38.92, longitude=-77.07, timezone=-5.0)
        >>> darkness = Darkness(location, CalendarInstant(2024, 3, 20))
        >>> level, window = darkness.astronomical_or_nautical_local()
    """

    location: GeographicLocation
    instant: CalendarInstant

    def utc(self, band: HorizonBand = HorizonBand.ASTRONOMICAL) -> DarknessWindow:
        return darkness_utc(
            self.location.latitude, self.location.longitude, self.instant.to_jd(), band, self.location.timezone
        )

    def local(self, band: HorizonBand = HorizonBand.ASTRONOMICAL) -> DarknessWindow:
        return self.utc(band).to_local(self.location.timezone)

    def astronomical_or_nautical_utc(self) -> tuple[DarknessLevel, DarknessWindow]:
        return astronomical_or_nautical_utc(
            self.location.latitude, self.location.longitude, self.instant.to_jd(), self.location.timezone
        )

    def astronomical_or_nautical_local(self) -> tuple[DarknessLevel, DarknessWindow]:
        level, window = self.astronomical_or_nautical_utc()
        return level, window.to_local(self.location.timezone)
