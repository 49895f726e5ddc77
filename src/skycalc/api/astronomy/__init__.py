"""Sun and Moon position models and coordinate transformations."""

from skycalc.api.astronomy.moon import moon_position_high, moon_position_low
from skycalc.api.astronomy.sun import sun_hour_angle, sun_position
from skycalc.api.astronomy.transformations import equatorial_to_altaz, equatorial_to_altaz_jd, hour_angle


__all__ = [
    "equatorial_to_altaz",
    "equatorial_to_altaz_jd",
    "hour_angle",
    "moon_position_high",
    "moon_position_low",
    "sun_hour_angle",
    "sun_position",
]
