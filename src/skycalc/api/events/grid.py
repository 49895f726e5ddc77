"""
Altitude Grid Sampling

Samples a body's altitude and azimuth at evenly spaced instants across a
night window and scans consecutive samples for horizon crossings. Grids are
rebuilt for every query and never stored.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import NamedTuple

import deal

from skycalc.api.astronomy.moon import moon_position_high
from skycalc.api.astronomy.sun import sun_position
from skycalc.api.astronomy.transformations import equatorial_to_altaz_jd
from skycalc.api.core.enums import Body
from skycalc.api.time.julian import jd2000_century


logger = logging.getLogger(__name__)


__all__ = [
    "AltAzSample",
    "HorizonCrossing",
    "altaz_grid",
    "body_position",
    "cross_horizon",
    "moon_altaz_grid",
    "night_window",
    "sun_altaz_grid",
    "two_point_interpolation",
]


class AltAzSample(NamedTuple):
    """One row of a sampling grid."""

    jd: float
    altitude: float
    azimuth: float


class HorizonCrossing(NamedTuple):
    """Pair of consecutive samples bracketing a horizon crossing."""

    jd_before: float
    altitude_before: float
    jd_after: float
    altitude_after: float


def _moon_radec(jd: float) -> tuple[float, float]:
    ra, dec, _ = moon_position_high(jd2000_century(jd))
    return ra, dec


_POSITION_MODELS: dict[Body, Callable[[float], tuple[float, float]]] = {
    Body.SUN: sun_position,
    Body.MOON: _moon_radec,
}


def body_position(body: Body, jd: float) -> tuple[float, float]:
    """Right ascension and declination of a body at a Julian Day, in degrees."""
    return _POSITION_MODELS[body](jd)


def night_window(jd: float, timezone: float) -> tuple[float, float]:
    """
    Search window of the night containing a Julian Day.

    The window runs from local noon to the following local noon: it opens at
    floor(jd + 0.5) - timezone / 24, with the timezone east positive, and
    lasts one day.

    Args:
        jd: Query Julian Day (UT)
        timezone: Observer timezone offset in hours, east positive

    Returns:
        Tuple of (start_jd, end_jd)
    """
    start = math.floor(jd + 0.5) - timezone / 24.0
    return start, start + 1.0


@deal.pre(lambda body, latitude, longitude, jd_start, jd_end, num_points: num_points > 0, message="Grid needs at least one interval")  # type: ignore[misc,arg-type]
@deal.post(lambda result: len(result) > 1, message="Grid must contain both endpoints")
def altaz_grid(
    body: Body, latitude: float, longitude: float, jd_start: float, jd_end: float, num_points: int
) -> list[AltAzSample]:
    """
    Sample a body's altitude and azimuth across a time window.

    Args:
        body: Sun or Moon
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees, east positive
        jd_start: First sample (UT)
        jd_end: Last sample (UT)
        num_points: Number of intervals; the grid holds num_points + 1 samples

    Returns:
        Time ordered samples in UT
    """
    logger.debug(f"Sampling {body} grid: {num_points + 1} points from JD {jd_start:.5f} to {jd_end:.5f}")
    step = (jd_end - jd_start) / num_points
    grid: list[AltAzSample] = []
    for i in range(num_points + 1):
        jd = jd_start + step * i
        ra, dec = body_position(body, jd)
        altitude, azimuth = equatorial_to_altaz_jd(latitude, longitude, ra, dec, jd)
        grid.append(AltAzSample(jd, altitude, azimuth))
    return grid


def sun_altaz_grid(
    latitude: float, longitude: float, jd_start: float, jd_end: float, num_points: int
) -> list[AltAzSample]:
    """Altitude/azimuth grid of the Sun."""
    return altaz_grid(Body.SUN, latitude, longitude, jd_start, jd_end, num_points)


def moon_altaz_grid(
    latitude: float, longitude: float, jd_start: float, jd_end: float, num_points: int
) -> list[AltAzSample]:
    """Altitude/azimuth grid of the Moon (high precision model)."""
    return altaz_grid(Body.MOON, latitude, longitude, jd_start, jd_end, num_points)


def cross_horizon(grid: Sequence[AltAzSample], horizon: float, rising: bool) -> list[HorizonCrossing]:
    """
    Find consecutive sample pairs that cross a horizon altitude.

    A rising crossing needs ``previous < horizon <= current``; a setting
    crossing needs ``previous > horizon >= current``.

    Args:
        grid: Time ordered samples
        horizon: Threshold altitude in degrees
        rising: Look for rising (True) or setting (False) crossings

    Returns:
        Every qualifying bracket in time order
    """
    crossings: list[HorizonCrossing] = []
    for before, after in zip(grid, grid[1:]):
        if rising:
            crossed = before.altitude < horizon <= after.altitude
        else:
            crossed = before.altitude > horizon >= after.altitude
        if crossed:
            crossings.append(HorizonCrossing(before.jd, before.altitude, after.jd, after.altitude))
    return crossings


def two_point_interpolation(
    jd_before: float, jd_after: float, altitude_before: float, altitude_after: float, horizon: float
) -> float:
    """
    Time at which the altitude passes through the horizon.

    Linear interpolation between two samples that bracket the crossing. The
    samples must lie on opposite sides of the horizon.

    Args:
        jd_before: Julian Day before the crossing
        jd_after: Julian Day after the crossing
        altitude_before: Altitude at jd_before in degrees
        altitude_after: Altitude at jd_after in degrees
        horizon: Reference altitude in degrees

    Returns:
        Julian Day of the crossing
    """
    slope = (altitude_after - altitude_before) / (jd_after - jd_before)
    return jd_after - (altitude_after - horizon) / slope
