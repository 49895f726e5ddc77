"""
Angle and Timezone Parsing

Parse-with-fallback readers for the text fields that describe an observer:
latitude/longitude in decimal or DMS notation and timezone offsets in
decimal hours or +HH:MM. Malformed or out-of-range input resolves to 0.0
with a diagnostic instead of raising.
"""

from __future__ import annotations

import logging
import math
import re

from skycalc.api.core.types import ParseResult


logger = logging.getLogger(__name__)


__all__ = [
    "degrees_from_str",
    "format_dms",
    "format_timezone",
    "parse_degrees",
    "parse_dms",
    "parse_timezone",
    "timezone_from_str",
]


_DMS_DELIMITERS = re.compile(r"[dms°'\"\sNEWnew]+")
_HOURS_MINUTES = re.compile(r"^([+-]?)(\d{1,2}):(\d{2})$")


def _to_float(text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_dms(text: str, minimum: float, maximum: float) -> ParseResult[float]:
    """
    Parse a degrees/minutes/seconds angle such as ``38°55'17.0"N``.

    Fields are separated by any of d, m, s, °, ', ", whitespace and the
    direction letters. Up to three numeric fields are read as degrees,
    minutes and seconds; a field that is not a number counts as 0. A
    trailing S or W (or a leading minus sign) makes the angle negative;
    a trailing seconds marker "s" therefore also reads as south.

    Args:
        text: Angle text, case-insensitive
        minimum: Smallest accepted value
        maximum: Largest accepted value

    Returns:
        ParseResult with the angle in decimal degrees, or 0.0 when no
        degrees field is present or the angle is outside [minimum, maximum]
    """
    lowered = text.strip().lower()
    if not lowered:
        return ParseResult(0.0, "Empty angle, using 0.0")

    sign = 1.0
    if lowered[-1] in ("s", "w"):
        sign = -1.0
    if lowered.startswith("-"):
        sign = -sign
        lowered = lowered[1:]

    fields = [part for part in _DMS_DELIMITERS.split(lowered) if part][:3]
    if not fields or _to_float(fields[0]) is None:
        return ParseResult(0.0, f"Unparseable angle {text!r}, using 0.0")

    values = [_to_float(part) or 0.0 for part in fields] + [0.0, 0.0]
    degrees, minutes, seconds = values[:3]
    angle = sign * (abs(degrees) + minutes / 60.0 + seconds / 3_600.0)

    if angle < minimum or angle > maximum:
        return ParseResult(0.0, f"Angle {text!r} outside [{minimum}, {maximum}], using 0.0")
    return ParseResult(angle)


def parse_degrees(text: str, minimum: float, maximum: float) -> ParseResult[float]:
    """
    Parse an angle in decimal degrees, falling back to DMS notation.

    Args:
        text: Angle text, e.g. "-77.0656" or "77d03m56sW"
        minimum: Smallest accepted value
        maximum: Largest accepted value

    Returns:
        ParseResult with the angle, or 0.0 with a diagnostic
    """
    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        return parse_dms(stripped, minimum, maximum)
    if not math.isfinite(value):
        return ParseResult(0.0, f"Non-finite angle {text!r}, using 0.0")
    if value < minimum or value > maximum:
        return ParseResult(0.0, f"Angle {text!r} outside [{minimum}, {maximum}], using 0.0")
    return ParseResult(value)


def degrees_from_str(text: str, minimum: float, maximum: float) -> float:
    """Parse an angle, logging a warning when 0.0 is substituted."""
    result = parse_degrees(text, minimum, maximum)
    if result.used_default:
        logger.warning(result.diagnostic)
    return result.value


def parse_timezone(text: str) -> ParseResult[float]:
    """
    Parse a timezone offset in hours.

    Args:
        text: Decimal hours ("3.5", "-5") or hours and minutes ("+05:30", "-02:00")

    Returns:
        ParseResult with the offset in hours, or 0.0 with a diagnostic
    """
    stripped = text.strip()
    value = _to_float(stripped)
    if value is not None:
        return ParseResult(value)

    match = _HOURS_MINUTES.match(stripped)
    if match:
        sign, hours, minutes = match.groups()
        if int(hours) <= 23 and int(minutes) <= 59:
            offset = int(hours) + int(minutes) / 60.0
            return ParseResult(-offset if sign == "-" else offset)

    return ParseResult(0.0, f"Unparseable timezone {text!r}, using UTC")


def timezone_from_str(text: str) -> float:
    """Parse a timezone offset, logging a warning when UTC is substituted."""
    result = parse_timezone(text)
    if result.used_default:
        logger.warning(result.diagnostic)
    return result.value


def format_dms(angle: float, is_latitude: bool) -> str:
    """
    Format an angle as degrees, minutes and seconds with a direction letter.

    Args:
        angle: Angle in decimal degrees
        is_latitude: Use N/S (True) or E/W (False)

    Returns:
        Text such as ``38° 55' 17.0" N``

    Example:
        >>> format_dms(-77.065556, is_latitude=False)
        '77° 3\\' 56.0" W'
    """
    if is_latitude:
        direction = "N" if angle >= 0.0 else "S"
    else:
        direction = "E" if angle >= 0.0 else "W"

    tenths = round(abs(angle) * 36_000.0)
    degrees, remainder = divmod(tenths, 36_000)
    minutes, seconds_tenths = divmod(remainder, 600)
    return f"{degrees}° {minutes}' {seconds_tenths / 10.0:.1f}\" {direction}"


def format_timezone(offset: float) -> str:
    """Format a timezone offset in hours as +HH:MM."""
    sign = "-" if offset < 0 else "+"
    total_minutes = round(abs(offset) * 60.0)
    return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"
