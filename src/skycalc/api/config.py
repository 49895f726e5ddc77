"""
Configuration File

Loads and saves the YAML configuration holding the observer, the query time,
the site environment and the target-selection constraints. Missing files,
missing keys and null values resolve to defaults; a file that exists but is
not valid YAML is an error.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import deal
import yaml

from skycalc.api.core.exceptions import InvalidConfigurationError
from skycalc.api.location.observer import DEFAULT_OBSERVATORY_NAME, Environment, GeographicLocation, Observer
from skycalc.api.location.parsing import format_timezone
from skycalc.api.time.instant import CalendarInstant


logger = logging.getLogger(__name__)


__all__ = [
    "CONFIG_ENV_VAR",
    "Constraints",
    "Others",
    "SkycalcConfig",
    "config_from_dict",
    "config_to_dict",
    "get_config_path",
    "load_config",
    "save_config",
]


CONFIG_ENV_VAR = "SKYCALC_CONFIG"
CONFIG_FILE_NAME = "skycalc.yaml"


@dataclass(frozen=True)
class Constraints:
    """Target-selection constraints carried for downstream planners."""

    min_altitude: float = 20.0  # Degrees
    max_altitude: float = 80.0  # Degrees
    min_size: float = 10.0  # Arc-minutes
    max_size: float = 300.0  # Arc-minutes
    moon_separation: float = 45.0  # Degrees
    frac_observable_time: float = 50.0  # Percent
    max_targets: int = 50
    use_darkness: bool = False


@dataclass(frozen=True)
class Others:
    """Miscellaneous output settings."""

    target_list: str = "OpenNGC"
    type_filter: str = ""
    output_dir: str = "output"


@dataclass(frozen=True)
class SkycalcConfig:
    """
    Effective configuration.

    ``time`` is always UTC; the file stores it as the observer's local time.
    """

    observer: Observer = field(default_factory=Observer)
    time: CalendarInstant = field(default_factory=CalendarInstant.now)
    constraints: Constraints = field(default_factory=Constraints)
    others: Others = field(default_factory=Others)

    @property
    def location(self) -> GeographicLocation:
        return self.observer.location

    @property
    def environment(self) -> Environment:
        return self.observer.environment


def get_config_path() -> Path:
    """
    Get path to the configuration file.

    The SKYCALC_CONFIG environment variable takes precedence over the default
    ``~/.config/skycalc/skycalc.yaml``.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()

    config_dir = Path.home() / ".config" / "skycalc"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / CONFIG_FILE_NAME


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"Section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _text(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    return default if value is None else str(value)


def _number(section: dict[str, Any], key: str, default: float) -> float:
    value = section.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid value for {key}: {value!r}, using {default}")
        return default


def _flag(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "yes", "1", "on")


def _observer_from_dict(data: dict[str, Any]) -> Observer:
    observer = _section(data, "observer")
    environment = _section(data, "environment")

    location = GeographicLocation.from_strings(
        latitude=_text(observer, "latitude", "0"),
        longitude=_text(observer, "longitude", "0"),
        elevation=_number(observer, "elevation", 0.0),
        timezone=_text(observer, "timezone", "0"),
    )
    defaults = Environment()
    return Observer(
        name=_text(observer, "name", DEFAULT_OBSERVATORY_NAME),
        location=location,
        environment=Environment(
            temperature=_number(environment, "temperature", defaults.temperature),
            humidity=_number(environment, "humidity", defaults.humidity),
            pressure=_number(environment, "pressure", defaults.pressure),
        ),
    )


def _time_from_dict(data: dict[str, Any], timezone: float) -> CalendarInstant:
    value = data.get("time")
    if value is None:
        return CalendarInstant.now()
    return CalendarInstant.from_local_str(str(value), timezone)


def _constraints_from_dict(data: dict[str, Any]) -> Constraints:
    section = _section(data, "constraints")
    defaults = Constraints()
    return Constraints(
        min_altitude=_number(section, "min_altitude", defaults.min_altitude),
        max_altitude=_number(section, "max_altitude", defaults.max_altitude),
        min_size=_number(section, "min_size", defaults.min_size),
        max_size=_number(section, "max_size", defaults.max_size),
        moon_separation=_number(section, "moon_separation", defaults.moon_separation),
        frac_observable_time=_number(section, "frac_observable_time", defaults.frac_observable_time),
        max_targets=int(_number(section, "max_targets", defaults.max_targets)),
        use_darkness=_flag(section, "use_darkness", defaults.use_darkness),
    )


def _others_from_dict(data: dict[str, Any]) -> Others:
    section = _section(data, "others")
    defaults = Others()
    return Others(
        target_list=_text(section, "target_list", defaults.target_list),
        type_filter=_text(section, "type_filter", defaults.type_filter),
        output_dir=_text(section, "output_dir", defaults.output_dir),
    )


def config_from_dict(data: dict[str, Any]) -> SkycalcConfig:
    """
    Build a configuration from a parsed YAML mapping.

    Raises:
        InvalidConfigurationError: If a section is present but not a mapping
    """
    observer = _observer_from_dict(data)
    return SkycalcConfig(
        observer=observer,
        time=_time_from_dict(data, observer.timezone),
        constraints=_constraints_from_dict(data),
        others=_others_from_dict(data),
    )


def config_to_dict(config: SkycalcConfig) -> dict[str, Any]:
    """Mapping in the on-disk layout, with the time stored as local time."""
    observer = config.observer
    location = observer.location
    environment = observer.environment
    constraints = config.constraints
    others = config.others
    return {
        "observer": {
            "name": observer.name,
            "latitude": location.latitude,
            "longitude": location.longitude,
            "elevation": location.elevation,
            "timezone": format_timezone(location.timezone),
        },
        "time": str(config.time.offset_hours(location.timezone)),
        "environment": {
            "temperature": environment.temperature,
            "humidity": environment.humidity,
            "pressure": environment.pressure,
        },
        "constraints": {
            "min_altitude": constraints.min_altitude,
            "max_altitude": constraints.max_altitude,
            "min_size": constraints.min_size,
            "max_size": constraints.max_size,
            "moon_separation": constraints.moon_separation,
            "frac_observable_time": constraints.frac_observable_time,
            "max_targets": constraints.max_targets,
            "use_darkness": constraints.use_darkness,
        },
        "others": {
            "target_list": others.target_list,
            "type_filter": others.type_filter,
            "output_dir": others.output_dir,
        },
    }


@deal.raises(InvalidConfigurationError)
def load_config(path: Path | None = None) -> SkycalcConfig:
    """
    Load the configuration file.

    Args:
        path: File to read; defaults to get_config_path()

    Returns:
        Effective configuration, or defaults if the file does not exist

    Raises:
        InvalidConfigurationError: If the file is not valid YAML or has the wrong shape
    """
    config_path = path if path is not None else get_config_path()

    if not config_path.exists():
        logger.info(f"No configuration found at {config_path}, using defaults")
        return SkycalcConfig()

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Cannot parse configuration {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"Configuration {config_path} must be a mapping")

    logger.info(f"Loaded configuration from {config_path}")
    return config_from_dict(data)


def save_config(config: SkycalcConfig, path: Path | None = None) -> Path:
    """
    Write the configuration as YAML.

    Args:
        config: Configuration to save
        path: Destination; defaults to get_config_path()

    Returns:
        Path written
    """
    config_path = path if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with config_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config), f, sort_keys=False)

    logger.debug(f"Configuration saved to {config_path}")
    return config_path
