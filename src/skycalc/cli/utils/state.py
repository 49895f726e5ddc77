"""
CLI State Management

Holds the options given to the main callback and resolves the observer and
query time each command works with: configuration file values, overridden
by whatever the command line provides.
"""

from pathlib import Path
from typing import Any

from skycalc.api.config import SkycalcConfig, load_config
from skycalc.api.location.observer import GeographicLocation, Observer
from skycalc.api.location.parsing import degrees_from_str, timezone_from_str
from skycalc.api.time.instant import CalendarInstant


_cli_state: dict[str, Any] = {
    "verbose": False,
    "config_path": None,
}


def set_state(**values: Any) -> None:
    """Record options from the main callback."""
    _cli_state.update(values)


def get_state(key: str) -> Any:
    return _cli_state.get(key)


def get_config() -> SkycalcConfig:
    """Load the configuration named by --config, SKYCALC_CONFIG or the default path."""
    config_path: Path | None = _cli_state.get("config_path")
    return load_config(config_path)


def resolve_site(
    date: str | None = None,
    latitude: str | None = None,
    longitude: str | None = None,
    timezone: str | None = None,
) -> tuple[Observer, CalendarInstant]:
    """
    Observer and UTC query instant for a command.

    Command-line values replace the configured ones. ``date`` is local time
    at the observer and is converted to UTC with the effective timezone.

    Args:
        date: Local date/time text
        latitude: Latitude in decimal degrees or DMS
        longitude: Longitude in decimal degrees or DMS
        timezone: Timezone offset as decimal hours or +HH:MM

    Returns:
        Tuple of (observer, instant)
    """
    config = get_config()
    configured = config.location

    location = GeographicLocation(
        latitude=degrees_from_str(latitude, -90.0, 90.0) if latitude is not None else configured.latitude,
        longitude=degrees_from_str(longitude, -180.0, 180.0) if longitude is not None else configured.longitude,
        elevation=configured.elevation,
        timezone=timezone_from_str(timezone) if timezone is not None else configured.timezone,
    )
    observer = Observer(name=config.observer.name, location=location, environment=config.environment)

    if date is None:
        instant = config.time
    else:
        instant = CalendarInstant.from_local_str(date, location.timezone)
    return observer, instant
