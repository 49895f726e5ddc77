"""
Observer Description

Geographic location, ambient environment and the named observer that
aggregates them. Locations are immutable values; textual input goes through
the parse-with-fallback readers in skycalc.api.location.parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from skycalc.api.core.exceptions import InvalidCoordinateError
from skycalc.api.location.parsing import degrees_from_str, format_dms, timezone_from_str


__all__ = [
    "DEFAULT_OBSERVATORY_NAME",
    "Environment",
    "GeographicLocation",
    "Observer",
]


DEFAULT_OBSERVATORY_NAME = "My observatory"


@dataclass(frozen=True)
class GeographicLocation:
    """Observer's position on the Earth."""

    latitude: float = 0.0  # Degrees north (negative for south)
    longitude: float = 0.0  # Degrees east (negative for west)
    elevation: float = 0.0  # Meters above sea level
    timezone: float = 0.0  # Hours east of UTC, may be fractional

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidCoordinateError(f"Invalid latitude: {self.latitude} (must be -90 to 90)")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidCoordinateError(f"Invalid longitude: {self.longitude} (must be -180 to 180)")

    @classmethod
    def from_strings(
        cls, latitude: str, longitude: str, elevation: float = 0.0, timezone: str = "0"
    ) -> GeographicLocation:
        """
        Build a location from text fields.

        Unparseable or out-of-range angles become 0.0 and an unparseable
        timezone becomes UTC; each substitution is logged as a warning.

        Args:
            latitude: Decimal degrees or DMS, e.g. "69.67" or "69d40m12sN"
            longitude: Decimal degrees or DMS, e.g. "-77.07" or "77°03'56\\"W"
            elevation: Meters above sea level
            timezone: Decimal hours or +HH:MM

        Returns:
            GeographicLocation
        """
        return cls(
            latitude=degrees_from_str(latitude, -90.0, 90.0),
            longitude=degrees_from_str(longitude, -180.0, 180.0),
            elevation=float(elevation),
            timezone=timezone_from_str(timezone),
        )

    def to_string_dms(self) -> str:
        return (
            f"lat: {format_dms(self.latitude, True)}, lon: {format_dms(self.longitude, False)}, "
            f"alt: {self.elevation:.0f}m, tz: {self.timezone:.1f}"
        )


@dataclass(frozen=True)
class Environment:
    """Ambient conditions at the site, carried for reporting."""

    temperature: float = 20.0  # Celsius
    humidity: float = 50.0  # Percent relative humidity
    pressure: float = 1010.0  # hPa (mbar)

    def __str__(self) -> str:
        return f"temperature: {self.temperature:g} C, humidity: {self.humidity:g} %, pressure: {self.pressure:g} mbar"


@dataclass(frozen=True)
class Observer:
    """A named observing site with its environment."""

    name: str = DEFAULT_OBSERVATORY_NAME
    location: GeographicLocation = field(default_factory=GeographicLocation)
    environment: Environment = field(default_factory=Environment)

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    @property
    def timezone(self) -> float:
        return self.location.timezone

    def __str__(self) -> str:
        location = self.location
        return (
            f"{self.name or DEFAULT_OBSERVATORY_NAME}, lat: {location.latitude}, lon: {location.longitude}, "
            f"elevation: {location.elevation:g} m, tz: {location.timezone:3.2f} h"
        )
