"""
Darkness Report

Plain-text summary of one night for an observer: site details, Sun and Moon
rise/set in local time, twilight bands and the deep-sky darkness windows.
"""

from __future__ import annotations

import logging
from pathlib import Path

import deal

from skycalc.api.core.constants import DEFAULT_MAX_DAYS
from skycalc.api.core.enums import HorizonBand, TimeFormat
from skycalc.api.core.exceptions import ReportError
from skycalc.api.events.darkness import Darkness, DarknessWindow
from skycalc.api.events.grid import night_window
from skycalc.api.events.rise_set import EventResult, MoonEvents, SunEvents
from skycalc.api.location.observer import Observer
from skycalc.api.location.parsing import format_dms
from skycalc.api.time.instant import CalendarInstant


logger = logging.getLogger(__name__)


__all__ = [
    "DEFAULT_REPORT_NAME",
    "darkness_report",
    "format_length",
    "write_darkness_report",
]


DEFAULT_REPORT_NAME = "skycalc.txt"
NO_LENGTH = "--:--"
RULE = "-" * 108

_SUN_ROWS: tuple[tuple[HorizonBand, str, str], ...] = (
    (HorizonBand.RISE_SET, "Sunset", "Sunrise"),
    (HorizonBand.CIVIL, "Civil Tw start", "Civil Tw end"),
    (HorizonBand.NAUTICAL, "Nautical Tw start", "Nautical Tw end"),
    (HorizonBand.ASTRONOMICAL, "Astronomical Tw start", "Astronomical Tw end"),
)


def format_length(start: float, end: float) -> str:
    """
    Length of an interval of Julian Days as HH:MM.

    Returns "--:--" for an empty or reversed interval.
    """
    if end <= start:
        return NO_LENGTH
    minutes = round((end - start) * 1_440.0)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _event_length(begin: EventResult, finish: EventResult) -> str:
    if not (begin.is_found and finish.is_found):
        return NO_LENGTH
    return format_length(begin.jd_or_zero(), finish.jd_or_zero())


def _window_text(window: DarknessWindow) -> tuple[str, str, str]:
    if window.is_degenerate:
        return "--:--", "--:--", NO_LENGTH
    return (
        window.format_start(TimeFormat.HHMM),
        window.format_end(TimeFormat.HHMM),
        format_length(window.start, window.end),
    )


def _row(left_label: str, left: str, right_label: str, right: str, length: str) -> str:
    return f"  - {left_label:<24}: {left:<11}  {right_label:<23}: {right:<11}  Length: {length}"


def _night_title(instant: CalendarInstant, timezone: float) -> str:
    start, _ = night_window(instant.to_jd(), timezone)
    evening = CalendarInstant.from_jd(start + timezone / 24.0).to_datetime()
    morning = CalendarInstant.from_jd(start + 1.0 + timezone / 24.0).to_datetime()
    return f"Darkness info for night: ({evening:%a}) {evening:%Y-%m-%d} to ({morning:%a}) {morning:%Y-%m-%d}"


def darkness_report(observer: Observer, instant: CalendarInstant, max_days: int = DEFAULT_MAX_DAYS) -> str:
    """
    Build the darkness report for the night containing ``instant``.

    Args:
        observer: Observing site
        instant: Query time (UT)
        max_days: Retry limit for the rise/set searches

    Returns:
        Report text
    """
    from skycalc import __version__

    location = observer.location
    timezone = location.timezone
    sun = SunEvents(location, instant, max_days)
    moon = MoonEvents(location, instant, max_days)
    darkness = Darkness(location, instant)

    lines = [
        RULE,
        f"SkyCalc v.{__version__}",
        RULE,
        "",
        f"Observatory: {observer.name}",
        "",
        f"  - Location    ->  {location.to_string_dms()}",
        f"  - Environment ->  pressure: {observer.environment.pressure:.0f} hPa, "
        f"temperature: {observer.environment.temperature:.0f} °C, "
        f"humidity: {observer.environment.humidity:.0f}%",
        "",
        _night_title(instant, timezone),
        "",
    ]

    for band, set_label, rise_label in _SUN_ROWS:
        sunset = sun.set_local(band=band)
        sunrise = sun.rise_local(band=band)
        lines.append(
            _row(
                set_label,
                sunset.format(TimeFormat.HHMM),
                rise_label,
                sunrise.format(TimeFormat.HHMM),
                _event_length(sunset, sunrise),
            )
        )

    moonrise = moon.rise_local()
    moonset = moon.set_local()
    lines += [
        "",
        _row(
            "Moon rise",
            moonrise.format(TimeFormat.HHMM),
            "Moon set",
            moonset.format(TimeFormat.HHMM),
            _event_length(moonrise, moonset),
        ),
        "",
    ]

    deep_sky_start, deep_sky_end, deep_sky_length = _window_text(darkness.local(HorizonBand.ASTRONOMICAL))
    narrow_start, narrow_end, narrow_length = _window_text(darkness.local(HorizonBand.NAUTICAL))
    lines += [
        _row("Deep Sky Darkness start", deep_sky_start, "Deep Sky Darkness end", deep_sky_end, deep_sky_length),
        _row("Narrow Band start", narrow_start, "Narrow Band end", narrow_end, narrow_length),
        "",
        RULE,
        "",
    ]

    logger.debug(f"Built darkness report for {observer.name} at {instant}")
    return "\n".join(lines)


@deal.raises(ReportError)
def write_darkness_report(
    path: Path, observer: Observer, instant: CalendarInstant, max_days: int = DEFAULT_MAX_DAYS
) -> Path:
    """
    Write the darkness report to a file.

    Args:
        path: Destination file; parent directories are created
        observer: Observing site
        instant: Query time (UT)
        max_days: Retry limit for the rise/set searches

    Returns:
        Path written

    Raises:
        ReportError: If the file cannot be written
    """
    text = darkness_report(observer, instant, max_days)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ReportError(f"Cannot write report to {path}: {e}") from e

    logger.info(f"Darkness report written to {path}")
    return path
