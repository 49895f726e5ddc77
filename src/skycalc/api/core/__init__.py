"""Core subpackage for shared constants, enums, utilities, and exceptions."""

from skycalc.api.core.utils import (
    constrain_180,
    constrain_360,
    cosd,
    sind,
    tand,
)


__all__ = [
    "constrain_180",
    "constrain_360",
    "cosd",
    "sind",
    "tand",
]
