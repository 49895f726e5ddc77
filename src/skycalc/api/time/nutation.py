"""
Nutation and Obliquity

IAU 1980 nutation in longitude and obliquity from the 63 periodic terms of
Meeus, Astronomical Algorithms, Table 22.A, plus the mean obliquity of the
ecliptic (Meeus 22.2).

The three coefficient tables below are parallel: row i of NUTATION_ARGUMENTS
pairs with row i of NUTATION_SIN_COEFFICIENTS and NUTATION_COS_COEFFICIENTS.
"""

from __future__ import annotations

import math
from typing import Final

from skycalc.api.core.constants import NUTATION_UNIT_TO_HOURS
from skycalc.api.core.utils import constrain_360


__all__ = [
    "NUTATION_ARGUMENTS",
    "NUTATION_COS_COEFFICIENTS",
    "NUTATION_SIN_COEFFICIENTS",
    "mean_obliquity",
    "nutation",
]


# Multiples of D, M, M', F, Omega
NUTATION_ARGUMENTS: Final[tuple[tuple[int, int, int, int, int], ...]] = (
    (0, 0, 0, 0, 1),
    (-2, 0, 0, 2, 2),
    (0, 0, 0, 2, 2),
    (0, 0, 0, 0, 2),
    (0, 1, 0, 0, 0),
    (0, 0, 1, 0, 0),
    (-2, 1, 0, 2, 2),
    (0, 0, 0, 2, 1),
    (0, 0, 1, 2, 2),
    (-2, -1, 0, 2, 2),
    (-2, 0, 1, 0, 0),
    (-2, 0, 0, 2, 1),
    (0, 0, -1, 2, 2),
    (2, 0, 0, 0, 0),
    (0, 0, 1, 0, 1),
    (2, 0, -1, 2, 2),
    (0, 0, -1, 0, 1),
    (0, 0, 1, 2, 1),
    (-2, 0, 2, 0, 0),
    (0, 0, -2, 2, 1),
    (2, 0, 0, 2, 2),
    (0, 0, 2, 2, 2),
    (0, 0, 2, 0, 0),
    (-2, 0, 1, 2, 2),
    (0, 0, 0, 2, 0),
    (-2, 0, 0, 2, 0),
    (0, 0, -1, 2, 1),
    (0, 2, 0, 0, 0),
    (2, 0, -1, 0, 1),
    (-2, 2, 0, 2, 2),
    (0, 1, 0, 0, 1),
    (-2, 0, 1, 0, 1),
    (0, -1, 0, 0, 1),
    (0, 0, 2, -2, 0),
    (2, 0, -1, 2, 1),
    (2, 0, 1, 2, 2),
    (0, 1, 0, 2, 2),
    (-2, 1, 1, 0, 0),
    (0, -1, 0, 2, 2),
    (2, 0, 0, 2, 1),
    (2, 0, 1, 0, 0),
    (-2, 0, 2, 2, 2),
    (-2, 0, 1, 2, 1),
    (2, 0, -2, 0, 1),
    (2, 0, 0, 0, 1),
    (0, -1, 1, 0, 0),
    (-2, -1, 0, 2, 1),
    (-2, 0, 0, 0, 1),
    (0, 0, 2, 2, 1),
    (-2, 0, 2, 0, 1),
    (-2, 1, 0, 2, 1),
    (0, 0, 1, -2, 0),
    (-1, 0, 1, 0, 0),
    (-2, 1, 0, 0, 0),
    (1, 0, 0, 0, 0),
    (0, 0, 1, 2, 0),
    (0, 0, -2, 2, 2),
    (-1, -1, 1, 0, 0),
    (0, 1, 1, 0, 0),
    (0, -1, 1, 2, 2),
    (2, -1, -1, 2, 2),
    (0, 0, 3, 2, 2),
    (2, -1, 0, 2, 2),
)

# Nutation in longitude: (constant, T coefficient) in 0.0001"
NUTATION_SIN_COEFFICIENTS: Final[tuple[tuple[float, float], ...]] = (
    (-171996.0, -174.2),
    (-13187.0, -1.6),
    (-2274.0, -0.2),
    (2062.0, 0.2),
    (1426.0, -3.4),
    (712.0, 0.1),
    (-517.0, 1.2),
    (-386.0, -0.4),
    (-301.0, 0.0),
    (217.0, -0.5),
    (-158.0, 0.0),
    (129.0, 0.1),
    (123.0, 0.0),
    (63.0, 0.0),
    (63.0, 0.1),
    (-59.0, 0.0),
    (-58.0, -0.1),
    (-51.0, 0.0),
    (48.0, 0.0),
    (46.0, 0.0),
    (-38.0, 0.0),
    (-31.0, 0.0),
    (29.0, 0.0),
    (29.0, 0.0),
    (26.0, 0.0),
    (-22.0, 0.0),
    (21.0, 0.0),
    (17.0, -0.1),
    (16.0, 0.0),
    (-16.0, 0.1),
    (-15.0, 0.0),
    (-13.0, 0.0),
    (-12.0, 0.0),
    (11.0, 0.0),
    (-10.0, 0.0),
    (-8.0, 0.0),
    (7.0, 0.0),
    (-7.0, 0.0),
    (-7.0, 0.0),
    (-7.0, 0.0),
    (6.0, 0.0),
    (6.0, 0.0),
    (6.0, 0.0),
    (-6.0, 0.0),
    (-6.0, 0.0),
    (5.0, 0.0),
    (-5.0, 0.0),
    (-5.0, 0.0),
    (-5.0, 0.0),
    (4.0, 0.0),
    (4.0, 0.0),
    (4.0, 0.0),
    (-4.0, 0.0),
    (-4.0, 0.0),
    (-4.0, 0.0),
    (3.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
)

# Nutation in obliquity: (constant, T coefficient) in 0.0001"
NUTATION_COS_COEFFICIENTS: Final[tuple[tuple[float, float], ...]] = (
    (92025.0, 8.9),
    (5736.0, -3.1),
    (977.0, -0.5),
    (-895.0, 0.5),
    (54.0, -0.1),
    (-7.0, 0.0),
    (224.0, -0.6),
    (200.0, 0.0),
    (129.0, -0.1),
    (-95.0, 0.3),
    (0.0, 0.0),
    (-70.0, 0.0),
    (-53.0, 0.0),
    (0.0, 0.0),
    (-33.0, 0.0),
    (26.0, 0.0),
    (32.0, 0.0),
    (27.0, 0.0),
    (0.0, 0.0),
    (-24.0, 0.0),
    (16.0, 0.0),
    (13.0, 0.0),
    (0.0, 0.0),
    (-12.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (-10.0, 0.0),
    (0.0, 0.0),
    (-8.0, 0.0),
    (7.0, 0.0),
    (9.0, 0.0),
    (7.0, 0.0),
    (6.0, 0.0),
    (0.0, 0.0),
    (5.0, 0.0),
    (3.0, 0.0),
    (-3.0, 0.0),
    (0.0, 0.0),
    (3.0, 0.0),
    (3.0, 0.0),
    (0.0, 0.0),
    (-3.0, 0.0),
    (-3.0, 0.0),
    (3.0, 0.0),
    (3.0, 0.0),
    (0.0, 0.0),
    (3.0, 0.0),
    (3.0, 0.0),
    (3.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
    (0.0, 0.0),
)


def _fundamental_arguments(t: float) -> tuple[float, float, float, float, float]:
    """D, M, M', F and Omega in radians for t Julian centuries since J2000."""
    t2 = t * t
    t3 = t2 * t
    # Mean elongation of the Moon from the Sun
    d = constrain_360(297.85036 + 445_267.111480 * t - 0.0019142 * t2 + t3 / 189_474.0)
    # Mean anomaly of the Sun
    m = constrain_360(357.52772 + 35_999.050340 * t - 0.0001603 * t2 + t3 / 300_000.0)
    # Mean anomaly of the Moon
    mprime = constrain_360(134.96298 + 477_198.867398 * t + 0.0086972 * t2 + t3 / 56_250.0)
    # Moon's argument of latitude
    f = constrain_360(93.27191 + 483_202.017538 * t - 0.0036825 * t2 + t3 / 327_270.0)
    # Longitude of the ascending node of the Moon's mean orbit
    omega = constrain_360(125.04452 - 1_934.136261 * t + 0.0020708 * t2 + t3 / 450_000.0)
    return (
        math.radians(d),
        math.radians(m),
        math.radians(mprime),
        math.radians(f),
        math.radians(omega),
    )


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic in degrees (Meeus 22.2)."""
    return 23.0 + 26.0 / 60.0 + (21.448 - 46.8150 * t - 0.00059 * t * t + 0.001813 * t * t * t) / 3_600.0


def nutation(t: float) -> tuple[float, float, float]:
    """
    Nutation in longitude and obliquity with the mean obliquity.

    The series terms are in units of 0.0001 arc-second; both sums are
    divided by 10000 * 3600. The results are arc-seconds / 3600, which the
    engine calls hours; numerically they are degrees of arc.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        Tuple of (delta_psi, delta_epsilon, mean_obliquity_degrees)

    Example:
        >>> delta_psi, delta_eps, eps0 = nutation(-0.127296372348)
    """
    d, m, mprime, f, omega = _fundamental_arguments(t)

    delta_psi = 0.0
    delta_eps = 0.0
    for args, (s0, s1), (c0, c1) in zip(
        NUTATION_ARGUMENTS, NUTATION_SIN_COEFFICIENTS, NUTATION_COS_COEFFICIENTS, strict=True
    ):
        x = args[0] * d + args[1] * m + args[2] * mprime + args[3] * f + args[4] * omega
        delta_psi += (s0 + s1 * t) * math.sin(x)
        delta_eps += (c0 + c1 * t) * math.cos(x)

    return delta_psi / NUTATION_UNIT_TO_HOURS, delta_eps / NUTATION_UNIT_TO_HOURS, mean_obliquity(t)
