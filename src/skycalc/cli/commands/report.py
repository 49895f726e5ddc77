"""
Report Command

Writes the plain-text darkness report for a night.
"""

from pathlib import Path

import typer

from ...api.core.exceptions import SkycalcError
from ...api.reports import DEFAULT_REPORT_NAME, darkness_report, write_darkness_report
from ..utils.output import console, print_error, print_success
from ..utils.state import get_config, resolve_site
from .night import DATE_HELP, LAT_HELP, LON_HELP, TZ_HELP


def report(
    output: Path | None = typer.Option(
        None, "--output", "-o", help=f"Report file (default: <output_dir>/{DEFAULT_REPORT_NAME})"
    ),
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    lat: str | None = typer.Option(None, "--lat", help=LAT_HELP),
    lon: str | None = typer.Option(None, "--lon", help=LON_HELP),
    tz: str | None = typer.Option(None, "--tz", help=TZ_HELP),
    show: bool = typer.Option(False, "--show", help="Print the report instead of writing it"),
) -> None:
    """
    Write the darkness report for a night.

    Examples:
        skycalc report
        skycalc report --output tonight.txt
        skycalc report --show --date 2024-12-11
    """
    try:
        observer, instant = resolve_site(date, lat, lon, tz)
        if show:
            console.print(darkness_report(observer, instant), highlight=False, markup=False)
            return

        path = output if output is not None else Path(get_config().others.output_dir) / DEFAULT_REPORT_NAME
        written = write_darkness_report(path, observer, instant)
        print_success(f"Report written to {written}")
    except SkycalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
