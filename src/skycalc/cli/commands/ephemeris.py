"""
Ephemeris Commands

Apparent places of the Sun and Moon and the sidereal times at an instant.
"""

import typer

from ...api.astronomy.moon import moon_position_high
from ...api.astronomy.sun import sun_position
from ...api.astronomy.transformations import equatorial_to_altaz
from ...api.core.constants import DEGREES_PER_HOUR_ANGLE
from ...api.core.exceptions import SkycalcError
from ...api.time.julian import jd2000_century
from ...api.time.sidereal import (
    apparent_sidereal_time_greenwich,
    local_sidereal_time,
    mean_sidereal_time_greenwich,
)
from ..utils.output import console, create_table, format_dec, format_ra, print_error, print_site_header
from ..utils.state import resolve_site
from .night import DATE_HELP, LAT_HELP, LON_HELP, TZ_HELP


def position(
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    lat: str | None = typer.Option(None, "--lat", help=LAT_HELP),
    lon: str | None = typer.Option(None, "--lon", help=LON_HELP),
    tz: str | None = typer.Option(None, "--tz", help=TZ_HELP),
) -> None:
    """
    Show Sun and Moon positions and sidereal times.

    Examples:
        skycalc position
        skycalc position --date '2024-12-11 22:00' --lat 69.67 --lon 19.0 --tz 1
    """
    try:
        observer, instant = resolve_site(date, lat, lon, tz)
        jd = instant.to_jd()

        print_site_header(
            f"Positions at {instant.format('utc')}",
            observer.name,
            observer.latitude,
            observer.longitude,
            observer.timezone,
        )

        sun_ra, sun_dec = sun_position(jd)
        moon_ra, moon_dec, distance = moon_position_high(jd2000_century(jd))

        table = create_table("Sun and Moon", "Body", "Right Ascension", "Declination", "Altitude", "Azimuth")
        for name, ra, dec in (("Sun", sun_ra, sun_dec), ("Moon", moon_ra, moon_dec)):
            altitude, azimuth = equatorial_to_altaz(observer.latitude, observer.longitude, ra, dec, instant)
            table.add_row(name, format_ra(ra), format_dec(dec), f"{altitude:.2f}°", f"{azimuth:.2f}°")
        console.print(table)
        console.print(f"[dim]Moon distance: {distance:,.0f} km[/dim]\n")

        sidereal = create_table("Sidereal time", "Kind", "Degrees", "Hours")
        for kind, value in (
            ("Greenwich mean", mean_sidereal_time_greenwich(instant)),
            ("Greenwich apparent", apparent_sidereal_time_greenwich(instant)),
            ("Local mean", local_sidereal_time(jd, observer.longitude)),
        ):
            sidereal.add_row(kind, f"{value:.4f}°", f"{value / DEGREES_PER_HOUR_ANGLE:.4f}h")
        console.print(sidereal)
    except SkycalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
