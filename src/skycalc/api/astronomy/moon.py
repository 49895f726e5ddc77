"""
Lunar Position

Two geocentric models of the Moon:

- moon_position_low: a seven term closed form good to roughly 0.3 degrees,
  kept for quick estimates and as a cross-check.
- moon_position_high: the periodic-term expansion of Meeus, Astronomical
  Algorithms, chapter 47 (Tables 47.A and 47.B) with the Venus, Jupiter and
  flattening corrections, nutation in longitude and the apparent obliquity.

LUNAR_LONGITUDE_ARGUMENTS, LUNAR_LATITUDE_ARGUMENTS and LUNAR_COEFFICIENTS
are parallel tables: row i of either argument table pairs with row i of the
coefficient table (longitude and distance columns with the longitude
arguments, latitude column with the latitude arguments).
"""

from __future__ import annotations

import math
from typing import Final

from skycalc.api.core.utils import constrain_360, cosd, sind, tand
from skycalc.api.time.nutation import nutation


__all__ = [
    "LUNAR_COEFFICIENTS",
    "LUNAR_LATITUDE_ARGUMENTS",
    "LUNAR_LONGITUDE_ARGUMENTS",
    "moon_position_high",
    "moon_position_low",
]


# Multiples of D, M, M', F for longitude and distance (Table 47.A)
LUNAR_LONGITUDE_ARGUMENTS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (0, 0, 1, 0),
    (2, 0, -1, 0),
    (2, 0, 0, 0),
    (0, 0, 2, 0),
    (0, 1, 0, 0),
    (0, 0, 0, 2),
    (2, 0, -2, 0),
    (2, -1, -1, 0),
    (2, 0, 1, 0),
    (2, -1, 0, 0),
    (0, 1, -1, 0),
    (1, 0, 0, 0),
    (0, 1, 1, 0),
    (2, 0, 0, -2),
    (0, 0, 1, 2),
    (0, 0, 1, -2),
    (4, 0, -1, 0),
    (0, 0, 3, 0),
    (4, 0, -2, 0),
    (2, 1, -1, 0),
    (2, 1, 0, 0),
    (1, 0, -1, 0),
    (1, 1, 0, 0),
    (2, -1, 1, 0),
    (2, 0, 2, 0),
    (4, 0, 0, 0),
    (2, 0, -3, 0),
    (0, 1, -2, 0),
    (2, 0, -1, 2),
    (2, -1, -2, 0),
    (1, 0, 1, 0),
    (2, -2, 0, 0),
    (0, 1, 2, 0),
    (0, 2, 0, 0),
    (2, -2, -1, 0),
    (2, 0, 1, -2),
    (2, 0, 0, 2),
    (4, -1, -1, 0),
    (0, 0, 2, 2),
    (3, 0, -1, 0),
    (2, 1, 1, 0),
    (4, -1, -2, 0),
    (0, 2, -1, 0),
    (2, 2, -1, 0),
    (2, 1, -2, 0),
    (2, -1, 0, -2),
    (4, 0, 1, 0),
    (0, 0, 4, 0),
    (4, -1, 0, 0),
    (1, 0, -2, 0),
    (2, 1, 0, -2),
    (0, 0, 2, -2),
    (1, 1, 1, 0),
    (3, 0, -2, 0),
    (4, 0, -3, 0),
    (2, -1, 2, 0),
    (0, 2, 1, 0),
    (1, 1, -1, 0),
    (2, 0, 3, 0),
    (2, 0, -1, -2),
)

# Multiples of D, M, M', F for latitude (Table 47.B)
LUNAR_LATITUDE_ARGUMENTS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (0, 0, 0, 1),
    (0, 0, 1, 1),
    (0, 0, 1, -1),
    (2, 0, 0, -1),
    (2, 0, -1, 1),
    (2, 0, -1, -1),
    (2, 0, 0, 1),
    (0, 0, 2, 1),
    (2, 0, 1, -1),
    (0, 0, 2, -1),
    (2, -1, 0, -1),
    (2, 0, -2, -1),
    (2, 0, 1, 1),
    (2, 1, 0, -1),
    (2, -1, -1, 1),
    (2, -1, 0, 1),
    (2, -1, -1, -1),
    (0, 1, -1, -1),
    (4, 0, -1, -1),
    (0, 1, 0, 1),
    (0, 0, 0, 3),
    (0, 1, -1, 1),
    (1, 0, 0, 1),
    (0, 1, 1, 1),
    (0, 1, 1, -1),
    (0, 1, 0, -1),
    (1, 0, 0, -1),
    (0, 0, 3, 1),
    (4, 0, 0, -1),
    (4, 0, -1, 1),
    (0, 0, 1, -3),
    (4, 0, -2, 1),
    (2, 0, 0, -3),
    (2, 0, 2, -1),
    (2, -1, 1, -1),
    (2, 0, -2, 1),
    (0, 0, 3, -1),
    (2, 0, 2, 1),
    (2, 0, -3, -1),
    (2, 1, -1, 1),
    (2, 1, 0, 1),
    (4, 0, 0, 1),
    (2, -1, 1, 1),
    (2, -2, 0, -1),
    (0, 0, 1, 3),
    (2, 1, 1, -1),
    (1, 1, 0, -1),
    (1, 1, 0, 1),
    (0, 1, -2, -1),
    (2, 1, -1, -1),
    (1, 0, 1, 1),
    (2, -1, -2, -1),
    (0, 1, 2, 1),
    (4, 0, -2, -1),
    (4, -1, -1, -1),
    (1, 0, 1, -1),
    (4, 0, 1, -1),
    (1, 0, -1, -1),
    (4, -1, 0, -1),
    (2, -2, 0, 1),
)

# Sigma l (1e-6 deg), Sigma r (1e-3 km), Sigma b (1e-6 deg)
LUNAR_COEFFICIENTS: Final[tuple[tuple[int, int, int], ...]] = (
    (6288774, -20905355, 5128122),
    (1274027, -3699111, 280602),
    (658314, -2955968, 277693),
    (213618, -569925, 173237),
    (-185116, 48888, 55413),
    (-114332, -3149, 46271),
    (58793, 246158, 32573),
    (57066, -152138, 17198),
    (53322, -170733, 9266),
    (45758, -204586, 8822),
    (-40923, -129620, 8216),
    (-34720, 108743, 4324),
    (-30383, 104755, 4200),
    (15327, 10321, -3359),
    (-12528, 0, 2463),
    (10980, 79661, 2211),
    (10675, -34782, 2065),
    (10034, -23210, -1870),
    (8548, -21636, 1828),
    (-7888, 24208, -1794),
    (-6766, 30824, -1749),
    (-5163, -8379, -1565),
    (4987, -16675, -1491),
    (4036, -12831, -1475),
    (3994, -10445, -1410),
    (3861, -11650, -1344),
    (3665, 14403, -1335),
    (-2689, -7003, 1107),
    (-2602, 0, 1021),
    (2390, 10056, 833),
    (-2348, 6322, 777),
    (2236, -9884, 671),
    (-2120, 5751, 607),
    (-2069, 0, 596),
    (2048, -4950, 491),
    (-1773, 4130, -451),
    (-1595, 0, 439),
    (1215, -3958, 422),
    (-1110, 0, 421),
    (-892, 3258, -366),
    (-810, 2616, -351),
    (759, -1897, 331),
    (-713, -2117, 315),
    (-700, 2354, 302),
    (691, 0, -283),
    (596, 0, -229),
    (549, -1423, 223),
    (537, -1117, 223),
    (520, -1571, -220),
    (-487, -1739, -220),
    (-399, 0, -185),
    (-381, -4421, 181),
    (351, 0, -177),
    (-340, 0, 176),
    (330, 0, 166),
    (327, 0, -164),
    (-323, 1165, 132),
    (299, 0, -119),
    (294, 0, 115),
    (0, 8752, 107),
)


def moon_position_low(t: float) -> tuple[float, float]:
    """
    Low precision right ascension and declination of the Moon.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        Tuple of (right_ascension, declination) in degrees, RA in [0, 360)
    """
    longitude = (
        218.32
        + 481_267.881 * t
        + 6.29 * sind(135.0 + 477_198.87 * t)
        - 1.27 * sind(259.3 - 413_335.36 * t)
        + 0.66 * sind(235.7 + 890_534.22 * t)
        + 0.21 * sind(269.9 + 954_397.74 * t)
        - 0.19 * sind(357.5 + 35_999.05 * t)
        - 0.11 * sind(186.5 + 966_404.03 * t)
    )
    latitude = (
        5.13 * sind(93.3 + 483_202.02 * t)
        + 0.28 * sind(228.2 + 960_400.89 * t)
        - 0.28 * sind(318.3 + 6_003.15 * t)
        - 0.17 * sind(217.6 - 407_332.21 * t)
    )

    # Direction cosines in the equatorial frame (obliquity ~23.44 deg)
    x = cosd(latitude) * cosd(longitude)
    y = 0.9175 * cosd(latitude) * sind(longitude) - 0.3978 * sind(latitude)
    z = 0.3978 * cosd(latitude) * sind(longitude) + 0.9175 * sind(latitude)

    ra = math.atan2(y, x)
    if ra < 0.0:
        ra += 2.0 * math.pi
    dec = math.asin(max(-1.0, min(1.0, z)))
    return math.degrees(ra), math.degrees(dec)


def moon_horizontal_parallax(t: float) -> float:
    """Low precision equatorial horizontal parallax of the Moon in degrees."""
    return (
        0.9508
        + 0.0518 * cosd(135.0 + 477_198.87 * t)
        + 0.0095 * cosd(259.3 - 413_335.36 * t)
        + 0.0078 * cosd(235.7 + 890_534.22 * t)
        + 0.0028 * cosd(269.9 + 954_397.74 * t)
    )


def _eccentricity_factor(m_multiple: int, e: float) -> float:
    """Correction for terms containing the Sun's mean anomaly once or twice."""
    match abs(m_multiple):
        case 1:
            return e
        case 2:
            return e * e
        case _:
            return 1.0


def moon_position_high(t: float) -> tuple[float, float, float]:
    """
    High precision apparent right ascension, declination and distance of the Moon.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        Tuple of (right_ascension, declination, distance_km), angles in degrees

    Example:
        >>> ra, dec, distance = moon_position_high(-0.077221081451)  # 1992-04-12 0h
    """
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t

    # Mean longitude of the Moon
    lprime = math.radians(
        constrain_360(218.3164477 + 481_267.88123421 * t - 0.0015786 * t2 + t3 / 538_841.0 - t4 / 65_194_000.0)
    )
    # Mean elongation of the Moon
    d = math.radians(
        constrain_360(297.8501921 + 445_267.1114034 * t - 0.0018819 * t2 + t3 / 545_868.0 - t4 / 113_065_000.0)
    )
    # Mean anomaly of the Sun
    m = math.radians(constrain_360(357.5291092 + 35_999.0502909 * t - 0.0001536 * t2 + t3 / 24_490_000.0))
    # Mean anomaly of the Moon
    mprime = math.radians(
        constrain_360(134.9633964 + 477_198.8675055 * t + 0.0087414 * t2 + t3 / 69_699.0 - t4 / 14_712_000.0)
    )
    # Argument of latitude of the Moon
    f = math.radians(
        constrain_360(93.2720950 + 483_202.0175233 * t - 0.0036539 * t2 - t3 / 3_526_000.0 + t4 / 863_310_000.0)
    )
    # Venus, Jupiter and flattening arguments
    a1 = math.radians(constrain_360(119.75 + 131.849 * t))
    a2 = math.radians(constrain_360(53.09 + 479_264.290 * t))
    a3 = math.radians(constrain_360(313.45 + 481_266.484 * t))

    # Decreasing eccentricity of the Earth's orbit
    e = 1.0 - 0.002516 * t - 0.0000074 * t2

    sigma_l = 0.0
    sigma_r = 0.0
    sigma_b = 0.0
    for lon_args, lat_args, (coeff_l, coeff_r, coeff_b) in zip(
        LUNAR_LONGITUDE_ARGUMENTS, LUNAR_LATITUDE_ARGUMENTS, LUNAR_COEFFICIENTS, strict=True
    ):
        x = lon_args[0] * d + lon_args[1] * m + lon_args[2] * mprime + lon_args[3] * f
        factor = _eccentricity_factor(lon_args[1], e)
        sigma_l += factor * coeff_l * math.sin(x)
        sigma_r += factor * coeff_r * math.cos(x)

        x = lat_args[0] * d + lat_args[1] * m + lat_args[2] * mprime + lat_args[3] * f
        sigma_b += _eccentricity_factor(lat_args[1], e) * coeff_b * math.sin(x)

    sigma_l += 3958.0 * math.sin(a1) + 1962.0 * math.sin(lprime - f) + 318.0 * math.sin(a2)
    sigma_b += (
        -2235.0 * math.sin(lprime)
        + 382.0 * math.sin(a3)
        + 175.0 * math.sin(a1 - f)
        + 175.0 * math.sin(a1 + f)
        + 127.0 * math.sin(lprime - mprime)
        - 115.0 * math.sin(lprime + mprime)
    )

    true_longitude = math.degrees(lprime) + sigma_l / 1e6
    true_latitude = sigma_b / 1e6
    distance = 385_000.56 + sigma_r / 1e3

    # Nutation terms are arc-seconds / 3600, so they add to degrees directly
    delta_psi, delta_eps, eps0 = nutation(t)
    apparent_longitude = true_longitude + delta_psi
    eps = math.radians(eps0 + delta_eps)

    ra = constrain_360(
        math.degrees(
            math.atan2(
                math.cos(eps) * sind(apparent_longitude) - math.sin(eps) * tand(true_latitude),
                cosd(apparent_longitude),
            )
        )
    )
    dec = math.degrees(
        math.asin(sind(true_latitude) * math.cos(eps) + math.sin(eps) * sind(apparent_longitude) * cosd(true_latitude))
    )

    return ra, dec, distance
