"""
Configuration Commands

Show the effective configuration or write a default configuration file.
"""

from pathlib import Path

import typer

from ...api.config import SkycalcConfig, get_config_path, save_config
from ...api.core.exceptions import SkycalcError
from ...api.location.parsing import format_timezone
from ..utils.groups import SortedCommandsGroup
from ..utils.output import console, create_table, print_error, print_success, print_warning
from ..utils.state import get_config, get_state


app = typer.Typer(help="Configuration file commands", cls=SortedCommandsGroup)


def _target_path() -> Path:
    config_path: Path | None = get_state("config_path")
    return config_path if config_path is not None else get_config_path()


@app.command("show")
def show() -> None:
    """Show the effective configuration."""
    try:
        config = get_config()
    except SkycalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    location = config.location
    environment = config.environment
    constraints = config.constraints
    others = config.others

    table = create_table(f"Configuration ({_target_path()})", "Setting", "Value")
    table.add_row("Observatory", config.observer.name)
    table.add_row("Latitude", f"{location.latitude:.6f}°")
    table.add_row("Longitude", f"{location.longitude:.6f}°")
    table.add_row("Elevation", f"{location.elevation:g} m")
    table.add_row("Timezone", format_timezone(location.timezone))
    table.add_row("Time (local)", str(config.time.offset_hours(location.timezone)))
    table.add_row("Environment", str(environment))
    table.add_row("Altitude range", f"{constraints.min_altitude:g}° to {constraints.max_altitude:g}°")
    table.add_row("Size range", f"{constraints.min_size:g}' to {constraints.max_size:g}'")
    table.add_row("Moon separation", f"{constraints.moon_separation:g}°")
    table.add_row("Observable fraction", f"{constraints.frac_observable_time:g}%")
    table.add_row("Max targets", str(constraints.max_targets))
    table.add_row("Use darkness", "yes" if constraints.use_darkness else "no")
    table.add_row("Target list", others.target_list)
    table.add_row("Type filter", others.type_filter or "-")
    table.add_row("Output directory", others.output_dir)
    console.print(table)


@app.command("init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a configuration file with default values."""
    path = _target_path()
    if path.exists() and not force:
        print_warning(f"{path} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        written = save_config(SkycalcConfig(), path)
    except OSError as e:
        print_error(f"Cannot write {path}: {e}")
        raise typer.Exit(code=1) from e
    print_success(f"Configuration written to {written}")
