"""
Night Commands

Sun and Moon rise/set times, twilight bands and darkness windows for one
night at the configured (or given) observing site.
"""

import typer

from ...api.astronomy.moon import moon_position_high
from ...api.astronomy.transformations import equatorial_to_altaz
from ...api.core.enums import HorizonBand, SearchDirection, TimeFormat
from ...api.core.exceptions import SkycalcError
from ...api.events.darkness import Darkness
from ...api.events.rise_set import MoonEvents, SunEvents
from ...api.time.julian import jd2000_century
from ..utils.output import (
    console,
    create_table,
    format_dec,
    format_event,
    format_ra,
    format_window,
    print_error,
    print_info,
    print_site_header,
    print_warning,
)
from ..utils.state import resolve_site


DATE_HELP = "Local date/time, e.g. 2024-12-11 or '2024-12-11 21:00' (default: configured time)"
LAT_HELP = "Latitude in degrees or DMS, e.g. 69.67 or 69d40m12sN"
LON_HELP = "Longitude in degrees or DMS, east positive"
TZ_HELP = "Timezone offset in hours or +HH:MM"


def darkness(
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    lat: str | None = typer.Option(None, "--lat", help=LAT_HELP),
    lon: str | None = typer.Option(None, "--lon", help=LON_HELP),
    tz: str | None = typer.Option(None, "--tz", help=TZ_HELP),
    band: HorizonBand | None = typer.Option(None, "--band", "-b", help="Only this twilight band"),
    utc: bool = typer.Option(False, "--utc", help="Show times in UTC instead of local time"),
) -> None:
    """
    Show the darkness windows of a night.

    Darkness needs the Sun below the twilight band and the Moon below the
    horizon. Without --band all twilight bands are listed.

    Examples:
        skycalc darkness
        skycalc darkness --date 2024-12-11 --lat 69.67 --lon 19.0 --tz 1
        skycalc darkness --band nautical --utc
    """
    try:
        observer, instant = resolve_site(date, lat, lon, tz)
        night = Darkness(observer.location, instant)
        bands = [band] if band is not None else list(HorizonBand)

        print_site_header(
            "Darkness", observer.name, observer.latitude, observer.longitude, observer.timezone
        )
        table = create_table(
            f"Darkness windows ({'UTC' if utc else 'local time'})", "Band", "Start", "End", "Duration"
        )
        for current in bands:
            window = night.utc(current) if utc else night.local(current)
            table.add_row(current.description, *format_window(window))
        console.print(table)

        level, window = night.astronomical_or_nautical_utc() if utc else night.astronomical_or_nautical_local()
        if window.is_degenerate:
            print_warning("No astronomical or nautical darkness tonight")
        else:
            start, end, duration = format_window(window)
            print_info(f"Best darkness: {level} from {start} to {end} ({duration})")
    except SkycalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def sun(
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    lat: str | None = typer.Option(None, "--lat", help=LAT_HELP),
    lon: str | None = typer.Option(None, "--lon", help=LON_HELP),
    tz: str | None = typer.Option(None, "--tz", help=TZ_HELP),
    mode: SearchDirection = typer.Option(SearchDirection.NEXT, "--mode", "-m", help="Search direction"),
    utc: bool = typer.Option(False, "--utc", help="Show times in UTC instead of local time"),
) -> None:
    """
    Show sunset, sunrise and twilight times.

    Examples:
        skycalc sun
        skycalc sun --mode previous
        skycalc sun --lat 38.92 --lon -77.07 --tz -5
    """
    try:
        observer, instant = resolve_site(date, lat, lon, tz)
        events = SunEvents(observer.location, instant)

        print_site_header("Sun", observer.name, observer.latitude, observer.longitude, observer.timezone)
        table = create_table(f"Sun events, {mode} ({'UTC' if utc else 'local time'})", "Band", "Set", "Rise")
        for band in HorizonBand:
            if utc:
                set_event, rise_event = events.set_utc(mode, band), events.rise_utc(mode, band)
            else:
                set_event, rise_event = events.set_local(mode, band), events.rise_local(mode, band)
            table.add_row(band.description, format_event(set_event), format_event(rise_event))
        console.print(table)
    except SkycalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def moon(
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    lat: str | None = typer.Option(None, "--lat", help=LAT_HELP),
    lon: str | None = typer.Option(None, "--lon", help=LON_HELP),
    tz: str | None = typer.Option(None, "--tz", help=TZ_HELP),
    mode: SearchDirection = typer.Option(SearchDirection.NEXT, "--mode", "-m", help="Search direction"),
    utc: bool = typer.Option(False, "--utc", help="Show times in UTC instead of local time"),
) -> None:
    """
    Show moonrise and moonset times and the current position of the Moon.

    Examples:
        skycalc moon
        skycalc moon --mode nearest --utc
    """
    try:
        observer, instant = resolve_site(date, lat, lon, tz)
        events = MoonEvents(observer.location, instant)

        print_site_header("Moon", observer.name, observer.latitude, observer.longitude, observer.timezone)
        if utc:
            rise_event, set_event = events.rise_utc(mode), events.set_utc(mode)
        else:
            rise_event, set_event = events.rise_local(mode), events.set_local(mode)

        table = create_table(f"Moon events, {mode} ({'UTC' if utc else 'local time'})", "Event", "Time")
        table.add_row("Moonrise", format_event(rise_event, TimeFormat.SHORT))
        table.add_row("Moonset", format_event(set_event, TimeFormat.SHORT))
        console.print(table)

        ra, dec, distance = moon_position_high(jd2000_century(instant.to_jd()))
        altitude, azimuth = equatorial_to_altaz(observer.latitude, observer.longitude, ra, dec, instant)
        print_info(
            f"Moon at {format_ra(ra)}, {format_dec(dec)}: altitude {altitude:.1f}°, "
            f"azimuth {azimuth:.1f}°, distance {distance:,.0f} km"
        )
    except SkycalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
