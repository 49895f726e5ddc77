"""
SkyCalc CLI - Main Application

This is the main entry point for the SkyCalc command-line interface.
"""

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from skycalc.cli.commands import config, ephemeris, night, report
from skycalc.cli.utils.groups import SortedCommandsGroup
from skycalc.cli.utils.state import set_state


# Create main app
app = typer.Typer(
    name="skycalc",
    help="Sun, Moon and darkness calculator",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
        envvar="SKYCALC_CONFIG",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    SkyCalc - Sun, Moon and Darkness Calculator

    Rise/set and twilight times, Sun and Moon positions and the darkness
    windows available for deep-sky observing.

    [bold green]Examples:[/bold green]

        skycalc darkness --lat 69.67 --lon 19.0 --tz 1
        skycalc sun --mode previous
        skycalc report --output tonight.txt

    [bold blue]Environment Variables:[/bold blue]

        SKYCALC_CONFIG - Configuration file (default: ~/.config/skycalc/skycalc.yaml)
    """
    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    set_state(verbose=verbose, config_path=config_path)

    if verbose:
        console.print("[dim]Verbose mode enabled[/dim]")
        if config_path:
            console.print(f"[dim]Using configuration: {config_path}[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from skycalc.cli import __version__

    console.print(f"[bold]SkyCalc[/bold] version [cyan]{__version__}[/cyan]")


# Night planning
app.command("darkness", rich_help_panel="Night")(night.darkness)
app.command("sun", rich_help_panel="Night")(night.sun)
app.command("moon", rich_help_panel="Night")(night.moon)
app.command("position", rich_help_panel="Night")(ephemeris.position)
app.command("report", rich_help_panel="Night")(report.report)

# Configuration
app.add_typer(
    config.app,
    name="config",
    help="Configuration file commands",
    rich_help_panel="Configuration",
)


if __name__ == "__main__":
    app()
