"""Observer location, environment and text input parsing."""

from skycalc.api.location.observer import DEFAULT_OBSERVATORY_NAME, Environment, GeographicLocation, Observer
from skycalc.api.location.parsing import (
    degrees_from_str,
    format_dms,
    format_timezone,
    parse_degrees,
    parse_dms,
    parse_timezone,
    timezone_from_str,
)


__all__ = [
    "DEFAULT_OBSERVATORY_NAME",
    "Environment",
    "GeographicLocation",
    "Observer",
    "degrees_from_str",
    "format_dms",
    "format_timezone",
    "parse_degrees",
    "parse_dms",
    "parse_timezone",
    "timezone_from_str",
]
