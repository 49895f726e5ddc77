"""
Calendar Instants

Immutable calendar date/time values in UTC, their conversion to and from
Julian Day, text parsing with a "now" fallback and the string formats used
by reports.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime

import deal

from skycalc.api.core.constants import MJD_OFFSET, SECONDS_PER_DAY
from skycalc.api.core.enums import TimeFormat
from skycalc.api.core.exceptions import InvalidTimeError
from skycalc.api.core.types import ParseResult
from skycalc.api.time.julian import calendar_date_from_jd, julian_day
from skycalc.api.time.sidereal import gmst


logger = logging.getLogger(__name__)


__all__ = [
    "DATETIME_FORMATS",
    "DATE_FORMATS",
    "INVALID_FORMAT",
    "TIME_FORMATS",
    "CalendarInstant",
    "from_julian_day",
    "parse_instant",
    "to_julian_day",
]


DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%Y%m%d")
TIME_FORMATS: tuple[str, ...] = ("%H:%M:%S", "%H:%M")
DATETIME_FORMATS: tuple[str, ...] = tuple(f"{d} {t}" for d in DATE_FORMATS for t in TIME_FORMATS)

INVALID_FORMAT = "Invalid format"


@dataclass(frozen=True)
class CalendarInstant:
    """
    A proleptic calendar date and time of day in UTC.

    Years are astronomical (1 BC is year 0) and may be negative. Dates before
    1582-10-15 are read in the Julian calendar. The Julian Day and every
    other representation is derived on demand.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidTimeError(f"Invalid month: {self.month} (must be 1 to 12)")
        if not 1 <= self.day <= 31:
            raise InvalidTimeError(f"Invalid day: {self.day} (must be 1 to 31)")
        if not 0 <= self.hour <= 23:
            raise InvalidTimeError(f"Invalid hour: {self.hour} (must be 0 to 23)")
        if not 0 <= self.minute <= 59:
            raise InvalidTimeError(f"Invalid minute: {self.minute} (must be 0 to 59)")
        if not 0 <= self.second <= 59:
            raise InvalidTimeError(f"Invalid second: {self.second} (must be 0 to 59)")

    # Construction

    @classmethod
    def from_jd(cls, jd: float) -> CalendarInstant:
        """
        Build an instant from a Julian Day.

        The fraction of the day is split into hour, minute and second by
        successive multiplication and truncation, so the result never lies
        after the given Julian Day.

        Args:
            jd: Julian Day (UT)

        Returns:
            Calendar instant truncated to the whole second

        Example:
            >>> str(CalendarInstant.from_jd(2460566.5))
            '2024-09-13 00:00:00'
        """
        year, month, day_fraction = calendar_date_from_jd(jd)
        day = math.floor(day_fraction)
        f = (jd + 0.5) - math.floor(jd + 0.5)

        hour = _clamp(math.floor(f * 24.0), 23)
        f -= hour / 24.0
        minute = _clamp(math.floor(f * 1_440.0), 59)
        f -= minute / 1_440.0
        second = _clamp(math.floor(f * 86_400.0), 59)

        return cls(year, month, day, hour, minute, second)

    @classmethod
    def from_mjd(cls, mjd: float) -> CalendarInstant:
        """Build an instant from a Modified Julian Day."""
        return cls.from_jd(mjd + MJD_OFFSET)

    @classmethod
    def from_datetime(cls, value: datetime) -> CalendarInstant:
        """
        Build an instant from a datetime.

        Aware datetimes are converted to UTC; naive ones are taken as UTC.
        """
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)

    @classmethod
    def now(cls) -> CalendarInstant:
        """Current UTC time."""
        return cls.from_datetime(datetime.now(UTC))

    @classmethod
    @deal.raises(InvalidTimeError)
    def from_isot(cls, text: str) -> CalendarInstant:
        """
        Build an instant from an ISO 8601 / RFC 3339 timestamp.

        Raises:
            InvalidTimeError: If the text is not an ISO 8601 timestamp
        """
        try:
            value = datetime.fromisoformat(text.strip())
        except ValueError as e:
            raise InvalidTimeError(f"Invalid ISO 8601 timestamp: {text!r}") from e
        return cls.from_datetime(value)

    @classmethod
    def parse(cls, text: str) -> ParseResult[CalendarInstant]:
        """Parse a date/time string, falling back to now. See parse_instant()."""
        return parse_instant(text)

    @classmethod
    def from_str(cls, text: str) -> CalendarInstant:
        """
        Parse a date/time string, logging a warning when "now" is substituted.

        Args:
            text: Date, date and time, or time of day

        Returns:
            Parsed instant, or the current time if the text is not understood
        """
        result = parse_instant(text)
        if result.used_default:
            logger.warning(result.diagnostic)
        return result.value

    @classmethod
    def from_local_str(cls, text: str, timezone: float) -> CalendarInstant:
        """
        Parse local date/time text at an observer and convert it to UT.

        The substituted "now" for empty or unrecognized text is already UT and
        is returned unshifted.

        Args:
            text: Local date, date and time, or time of day
            timezone: Observer timezone offset in hours, east positive

        Returns:
            Instant in UT
        """
        result = parse_instant(text)
        if result.used_default:
            logger.warning(result.diagnostic)
            return result.value
        if not text.strip():
            return result.value
        return result.value.offset_hours(-timezone)

    # Derived representations

    def to_jd(self) -> float:
        """Julian Day of this instant."""
        fraction = (self.hour + self.minute / 60.0 + self.second / 3_600.0) / 24.0
        return julian_day(self.year, self.month, self.day + fraction)

    def to_mjd(self) -> float:
        """Modified Julian Day of this instant."""
        return self.to_jd() - MJD_OFFSET

    def to_gst(self) -> float:
        """Greenwich mean sidereal time in degrees."""
        return gmst(self.to_jd())

    def to_datetime(self) -> datetime:
        """
        Convert to an aware UTC datetime.

        Raises:
            InvalidTimeError: If the date cannot be held by datetime (years before 1)
        """
        try:
            return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, tzinfo=UTC)
        except ValueError as e:
            raise InvalidTimeError(f"{self} cannot be represented as a datetime: {e}") from e

    def offset_hours(self, hours: float) -> CalendarInstant:
        """Instant shifted by a number of hours, e.g. a timezone offset, rounded to the second."""
        return CalendarInstant.from_jd(self.to_jd() + hours / 24.0 + 0.5 / SECONDS_PER_DAY)

    # Formatting

    def format(self, fmt: TimeFormat | str | None = None) -> str:
        """
        Render the instant in one of the report formats.

        Args:
            fmt: One of jd, mjd, utc, isot, hhmm, yyyymmdd, short. None means utc.

        Returns:
            Formatted string, or "Invalid format" for an unknown format name

        Example:
            >>> CalendarInstant(2024, 9, 13, 21, 5).format("short")
            '13-09 21:05'
        """
        if fmt is None:
            fmt = TimeFormat.UTC
        try:
            selected = TimeFormat(fmt)
        except ValueError:
            return INVALID_FORMAT

        match selected:
            case TimeFormat.JD:
                return str(self.to_jd())
            case TimeFormat.MJD:
                return str(self.to_mjd())
            case TimeFormat.UTC:
                return f"{self._date_str()} {self._time_str()} UTC"
            case TimeFormat.ISOT:
                return f"{self._date_str()}T{self._time_str()}+00:00"
            case TimeFormat.HHMM:
                return f"{self.hour:02d}:{self.minute:02d}"
            case TimeFormat.YYYYMMDD:
                return self._date_str()
            case TimeFormat.SHORT:
                return f"{self.day:02d}-{self.month:02d} {self.hour:02d}:{self.minute:02d}"

    def _date_str(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def _time_str(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d} {self._time_str()}"


def _clamp(value: int, upper: int) -> int:
    """Keep a truncated clock field inside [0, upper] despite float rounding."""
    return max(0, min(upper, value))


def to_julian_day(instant: CalendarInstant) -> float:
    """Julian Day of a calendar instant."""
    return instant.to_jd()


def from_julian_day(jd: float) -> CalendarInstant:
    """Calendar instant of a Julian Day."""
    return CalendarInstant.from_jd(jd)


def parse_instant(text: str) -> ParseResult[CalendarInstant]:
    """
    Parse a date and/or time string.

    Accepted inputs, tried in order:
    - date and time: any of DATE_FORMATS followed by a space and %H:%M:%S or %H:%M
    - date only (midnight): %Y-%m-%d, %d/%m/%Y, %d-%m-%Y, %Y%m%d
    - time only: today's UTC date at that time

    Empty text means now without a diagnostic. Anything else resolves to now
    with a diagnostic.

    Args:
        text: Text to parse

    Returns:
        ParseResult holding the instant
    """
    stripped = text.strip()
    if not stripped:
        return ParseResult(CalendarInstant.now())

    for fmt in DATETIME_FORMATS + DATE_FORMATS:
        try:
            return ParseResult(CalendarInstant.from_datetime(datetime.strptime(stripped, fmt)))
        except ValueError:
            continue

    for fmt in TIME_FORMATS:
        try:
            parsed = datetime.strptime(stripped, fmt)
        except ValueError:
            continue
        today = datetime.now(UTC)
        return ParseResult(
            CalendarInstant(today.year, today.month, today.day, parsed.hour, parsed.minute, parsed.second)
        )

    return ParseResult(CalendarInstant.now(), f"Unrecognized date/time {text!r}, using current time")
