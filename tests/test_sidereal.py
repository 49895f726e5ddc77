"""
Unit tests for sidereal.py

Tests mean, apparent and local sidereal time against Meeus, Astronomical
Algorithms, chapter 12.
"""

import unittest

from skycalc.api.time.instant import CalendarInstant
from skycalc.api.time.julian import julian_day
from skycalc.api.time.sidereal import (
    apparent_sidereal_time_greenwich,
    gmst,
    local_sidereal_time,
    mean_sidereal_time_greenwich,
)


class TestMeanSiderealTime(unittest.TestCase):
    """Test suite for mean sidereal time"""

    def test_gmst_raw_jd(self):
        """Test 1978-11-13 0h UT"""
        self.assertAlmostEqual(gmst(2443825.5) / 15.0, 3.450386, places=6)

    def test_gmst_of_instant(self):
        """Test that the instant form agrees with the raw Julian Day"""
        self.assertAlmostEqual(
            mean_sidereal_time_greenwich(CalendarInstant(1978, 11, 13)) / 15.0, 3.450386, places=6
        )

    def test_meeus_12a(self):
        """Test 1987-04-10 0h UT"""
        self.assertAlmostEqual(mean_sidereal_time_greenwich(CalendarInstant(1987, 4, 10)), 197.693195, places=5)

    def test_meeus_12b(self):
        """Test 1987-04-10 19:21:00 UT"""
        instant = CalendarInstant(1987, 4, 10, 19, 21, 0)
        self.assertAlmostEqual(mean_sidereal_time_greenwich(instant), 128.7378734, places=5)

    def test_range(self):
        """Test that results are normalized to [0, 360)"""
        for jd in (0.0, 2299160.5, 2451545.0, 2460566.5):
            with self.subTest(jd=jd):
                value = gmst(jd)
                self.assertGreaterEqual(value, 0.0)
                self.assertLess(value, 360.0)


class TestApparentSiderealTime(unittest.TestCase):
    """Test suite for apparent_sidereal_time_greenwich function"""

    def test_meeus_12a(self):
        """Test 1987-04-10 0h UT, corrected by the equation of the equinoxes"""
        instant = CalendarInstant(1987, 4, 10)
        self.assertAlmostEqual(apparent_sidereal_time_greenwich(instant), 197.692230, places=5)

    def test_close_to_mean(self):
        """Test that the equation of the equinoxes is at most about a second of time"""
        instant = CalendarInstant(2024, 9, 13)
        difference = apparent_sidereal_time_greenwich(instant) - mean_sidereal_time_greenwich(instant)
        self.assertLess(abs(difference), 20.0 / 3600.0)


class TestLocalSiderealTime(unittest.TestCase):
    """Test suite for local_sidereal_time function"""

    def test_washington(self):
        """Test the US Naval Observatory at 1987-04-10 19:21 UT"""
        jd = julian_day(1987, 4, 10.80625)
        self.assertAlmostEqual(local_sidereal_time(jd, -77.065555556), 51.672317688, places=5)

    def test_greenwich(self):
        """Test that zero longitude gives the Greenwich value"""
        self.assertAlmostEqual(local_sidereal_time(2451545.0, 0.0), gmst(2451545.0), places=9)


if __name__ == "__main__":
    unittest.main()
