"""
Custom exception classes for SkyCalc.

Degenerate astronomical outcomes (a body that never rises, a night without
darkness) are results, not errors. The exceptions here cover programmatic
misuse and configuration/report I/O failures.
"""

from __future__ import annotations


__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    "InvalidConfigurationError",
    # Value exceptions
    "InvalidCoordinateError",
    "InvalidTimeError",
    # Report exceptions
    "ReportError",
    # Base exception
    "SkycalcError",
]


class SkycalcError(Exception):
    """
    Base exception for all SkyCalc errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all calculator-related errors.
    """

    pass


class InvalidCoordinateError(SkycalcError):
    """
    Raised when a coordinate value is outside its valid range.

    Text parsers never raise this; they substitute 0.0. It is raised when
    a location is constructed directly from numbers such as latitude 95.
    """

    pass


class InvalidTimeError(SkycalcError):
    """
    Raised when calendar fields cannot form an instant.

    This can occur when:
    - Month is outside 1-12
    - Day is outside 1-31
    - Hour, minute or second is out of range
    """

    pass


class ConfigurationError(SkycalcError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """
    Raised when a configuration file exists but cannot be used.

    This can occur when:
    - The file is not valid YAML
    - The top level is not a mapping
    - A section is not a mapping
    """

    pass


class ReportError(SkycalcError):
    """Raised when a report cannot be written to disk."""

    pass
