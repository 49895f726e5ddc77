"""
Angle Utilities

Degree-based trigonometry and angle normalization shared by the engine.
"""

from __future__ import annotations

import math


__all__ = [
    "constrain_180",
    "constrain_360",
    "cosd",
    "sind",
    "tand",
]


def sind(angle: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(math.radians(angle))


def cosd(angle: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(math.radians(angle))


def tand(angle: float) -> float:
    """Tangent of an angle given in degrees."""
    return math.tan(math.radians(angle))


def constrain_360(angle: float) -> float:
    """
    Normalize an angle to [0, 360).

    The remainder is taken twice so the result is non-negative whatever the
    sign of the input.

    Args:
        angle: Angle in degrees

    Returns:
        Equivalent angle in [0, 360)

    Example:
        >>> constrain_360(-30.0)
        330.0
    """
    result = ((math.fmod(angle, 360.0)) + 360.0) % 360.0
    # fmod of a tiny negative can round to exactly 360 after the shift
    return 0.0 if result >= 360.0 else result


def constrain_180(angle: float) -> float:
    """Normalize an angle to [0, 180)."""
    result = ((math.fmod(angle, 180.0)) + 180.0) % 180.0
    return 0.0 if result >= 180.0 else result
