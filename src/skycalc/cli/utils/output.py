"""
CLI Output Utilities

Rich console formatting for event tables, darkness windows and positions.
"""

from rich.console import Console
from rich.table import Table

from skycalc.api.core.constants import DEGREES_PER_HOUR_ANGLE
from skycalc.api.core.enums import TimeFormat
from skycalc.api.events.darkness import DarknessWindow
from skycalc.api.events.rise_set import EventResult
from skycalc.api.location.parsing import format_timezone


# Create console with unicode detection
console = Console()

# Detect if we can safely use unicode symbols
_use_unicode = console.is_terminal and not console.legacy_windows


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    # U+2139 rather than the emoji form, which needs an emoji font
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def format_event(event: EventResult, fmt: TimeFormat = TimeFormat.SHORT) -> str:
    """Event time, or a dimmed "Never Rises" / "Never Sets"."""
    if not event.is_found:
        return f"[dim]{event.format(fmt)}[/dim]"
    return event.format(fmt)


def format_window(window: DarknessWindow, fmt: TimeFormat = TimeFormat.SHORT) -> tuple[str, str, str]:
    """
    Start, end and duration cells for a darkness window.

    Returns:
        Tuple of (start, end, duration) strings; dimmed placeholders when degenerate
    """
    if window.is_degenerate:
        return "[dim]-[/dim]", "[dim]-[/dim]", "[dim]none[/dim]"
    hours = int(window.duration_hours)
    minutes = round((window.duration_hours - hours) * 60.0)
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return window.format_start(fmt), window.format_end(fmt), f"{hours}h {minutes:02d}m"


def format_ra(ra_degrees: float) -> str:
    """
    Format Right Ascension for display.

    Args:
        ra_degrees: RA in degrees (0-360)

    Returns:
        Formatted string (e.g., "8h 58m 45.2s (134.6885°)")
    """
    ra_hours = ra_degrees / DEGREES_PER_HOUR_ANGLE
    hours = int(ra_hours)
    minutes = int((ra_hours - hours) * 60)
    seconds = ((ra_hours - hours) * 60 - minutes) * 60
    return f"{hours}h {minutes}m {seconds:.1f}s ({ra_degrees:.4f}°)"


def format_dec(dec_degrees: float) -> str:
    """
    Format Declination for display.

    Args:
        dec_degrees: Dec in degrees (-90 to +90)

    Returns:
        Formatted string (e.g., "+13° 46' 6.1" (+13.7684°)")
    """
    sign = "+" if dec_degrees >= 0 else "-"
    abs_dec = abs(dec_degrees)
    degrees = int(abs_dec)
    minutes = int((abs_dec - degrees) * 60)
    seconds = ((abs_dec - degrees) * 60 - minutes) * 60
    return f"{sign}{degrees}° {minutes}' {seconds:.1f}\" ({dec_degrees:+.4f}°)"


def print_site_header(title: str, name: str, latitude: float, longitude: float, timezone: float) -> None:
    """Print a command title with the observer it applies to."""
    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    console.print(
        f"[dim]{name}: lat {latitude:.4f}°, lon {longitude:.4f}°, tz {format_timezone(timezone)}[/dim]\n"
    )


def create_table(title: str, *columns: str) -> Table:
    """Table with the house header style; the first column is styled as a label."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for index, column in enumerate(columns):
        table.add_column(column, style="cyan" if index == 0 else "green")
    return table
