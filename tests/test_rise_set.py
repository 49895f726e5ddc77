"""
Unit tests for rise_set.py

Tests Sun and Moon rise/set searches in every direction, twilight band
ordering, degenerate polar results and the event facades.
"""

import unittest

from skycalc.api.core.enums import Body, HorizonBand, SearchDirection
from skycalc.api.events.rise_set import (
    NEVER_RISES_TEXT,
    NEVER_SETS_TEXT,
    EventResult,
    EventStatus,
    MoonEvents,
    SunEvents,
    find_event,
    moonrise_utc,
    moonset_utc,
    night_crossing,
    sunrise_utc,
    sunset_utc,
)
from skycalc.api.location.observer import GeographicLocation
from skycalc.api.time.instant import CalendarInstant


EQUINOX_MIDNIGHT = CalendarInstant(2024, 3, 20).to_jd()
NIGHT_START = 2460390.0  # 2024-03-20 12:00 UT
NIGHT_END = 2460391.0


class TestEventResult(unittest.TestCase):
    """Test suite for EventResult value"""

    def test_found(self):
        """Test a found event"""
        result = EventResult.found(2460566.5)
        self.assertTrue(result.is_found)
        self.assertEqual(result.status, EventStatus.FOUND)
        self.assertEqual(result.format("utc"), "2024-09-13 00:00:00 UTC")

    def test_never(self):
        """Test degenerate results"""
        never_rises = EventResult.never(rising=True)
        never_sets = EventResult.never(rising=False)
        self.assertFalse(never_rises.is_found)
        self.assertIsNone(never_rises.jd)
        self.assertEqual(never_rises.jd_or_zero(), 0.0)
        self.assertEqual(never_rises.format("hhmm"), NEVER_RISES_TEXT)
        self.assertEqual(str(never_sets), NEVER_SETS_TEXT)

    def test_to_local(self):
        """Test that local time shifts found events only"""
        self.assertEqual(EventResult.found(2460566.5).to_local(-6.0).jd, 2460566.25)
        self.assertEqual(EventResult.never(rising=False).to_local(5.0), EventResult.never(rising=False))


class TestSunEquator(unittest.TestCase):
    """Test suite for Sun events at the equator on the March equinox"""

    @classmethod
    def setUpClass(cls):
        """Compute the events once for the whole suite"""
        cls.sets = [sunset_utc(0.0, 0.0, EQUINOX_MIDNIGHT, band) for band in HorizonBand]
        cls.rises = [sunrise_utc(0.0, 0.0, EQUINOX_MIDNIGHT, band) for band in HorizonBand]

    def test_all_found_in_night(self):
        """Test that every event lies inside the night window"""
        for result in self.sets + self.rises:
            with self.subTest(result=result):
                self.assertTrue(result.is_found)
                self.assertGreater(result.jd_or_zero(), NIGHT_START)
                self.assertLess(result.jd_or_zero(), NIGHT_END)

    def test_evening_order(self):
        """Test sunset before civil, nautical and astronomical dusk"""
        jds = [result.jd_or_zero() for result in self.sets]
        self.assertEqual(jds, sorted(jds))

    def test_morning_order(self):
        """Test astronomical dawn before nautical, civil dawn and sunrise"""
        jds = [result.jd_or_zero() for result in self.rises]
        self.assertEqual(jds, sorted(jds, reverse=True))

    def test_sunset_time(self):
        """Test sunset about six hours after the 12:07 UT transit"""
        expected = NIGHT_START + (6.0 + 10.7 / 60.0) / 24.0
        self.assertAlmostEqual(self.sets[0].jd_or_zero(), expected, delta=5.0 / 1_440.0)

    def test_day_length(self):
        """Test that the night lasts about twelve hours"""
        night_hours = (self.rises[0].jd_or_zero() - self.sets[0].jd_or_zero()) * 24.0
        self.assertAlmostEqual(night_hours, 11.9, delta=0.2)


class TestSearchDirections(unittest.TestCase):
    """Test suite for next, previous and nearest searches"""

    def test_previous_is_earlier(self):
        """Test that the previous sunset lies in the night before"""
        result = sunset_utc(0.0, 0.0, EQUINOX_MIDNIGHT, direction=SearchDirection.PREVIOUS)
        self.assertTrue(result.is_found)
        self.assertLess(result.jd_or_zero(), EQUINOX_MIDNIGHT)
        self.assertGreater(result.jd_or_zero(), NIGHT_START - 1.0)

    def test_nearest_picks_closer(self):
        """Test that nearest returns the sunset six hours back, not eighteen ahead"""
        nearest = sunset_utc(0.0, 0.0, EQUINOX_MIDNIGHT, direction=SearchDirection.NEAREST)
        previous = sunset_utc(0.0, 0.0, EQUINOX_MIDNIGHT, direction=SearchDirection.PREVIOUS)
        self.assertEqual(nearest, previous)

    def test_unknown_direction(self):
        """Test that an unknown direction raises ValueError"""
        with self.assertRaises(ValueError):
            find_event(Body.SUN, 0.0, 0.0, EQUINOX_MIDNIGHT, -0.8333, 0.0, True, "sideways")  # type: ignore[arg-type]


class TestMidnightSun(unittest.TestCase):
    """Test suite for Sun events north of the Arctic Circle at the June solstice"""

    def setUp(self):
        """Set up test fixtures"""
        self.jd = CalendarInstant(2024, 6, 21).to_jd()

    def test_never_sets(self):
        """Test that the Sun never sets"""
        for band in HorizonBand:
            with self.subTest(band=band):
                result = sunset_utc(70.0, 19.0, self.jd, band, timezone=1.0)
                self.assertEqual(result.status, EventStatus.NEVER_SETS)
                self.assertEqual(result.format(), NEVER_SETS_TEXT)

    def test_never_rises(self):
        """Test that no rising crossing exists either"""
        result = sunrise_utc(70.0, 19.0, self.jd, timezone=1.0, direction=SearchDirection.NEAREST)
        self.assertEqual(result.status, EventStatus.NEVER_RISES)

    def test_single_night(self):
        """Test the single-night search directly"""
        result = night_crossing(Body.SUN, 70.0, 19.0, self.jd, -0.8333, 1.0, rising=False)
        self.assertFalse(result.is_found)


class TestMoon(unittest.TestCase):
    """Test suite for Moon rise/set searches"""

    def test_found_within_two_nights(self):
        """Test that the Moon rises and sets within the search span at mid latitude"""
        jd = CalendarInstant(2024, 9, 13).to_jd()
        for result in (moonrise_utc(45.0, 10.0, jd, 1.0), moonset_utc(45.0, 10.0, jd, 1.0)):
            with self.subTest(result=result):
                self.assertTrue(result.is_found)
                self.assertGreater(result.jd_or_zero(), jd)
                self.assertLess(result.jd_or_zero(), jd + 3.0)


class TestFacades(unittest.TestCase):
    """Test suite for SunEvents and MoonEvents"""

    def setUp(self):
        """Set up test fixtures"""
        self.location = GeographicLocation(latitude=0.0, longitude=0.0, timezone=2.0)
        self.instant = CalendarInstant(2024, 3, 20)

    def test_sun_events_match_functions(self):
        """Test that the facade delegates with the location's timezone"""
        events = SunEvents(self.location, self.instant)
        expected = sunset_utc(0.0, 0.0, self.instant.to_jd(), HorizonBand.CIVIL, 2.0)
        self.assertEqual(events.set_utc(band=HorizonBand.CIVIL), expected)

    def test_sun_local_time(self):
        """Test the local shift of a sunrise"""
        events = SunEvents(self.location, self.instant)
        utc = events.rise_utc()
        local = events.rise_local()
        self.assertAlmostEqual(local.jd_or_zero() - utc.jd_or_zero(), 2.0 / 24.0, places=9)

    def test_moon_events(self):
        """Test the Moon facade"""
        events = MoonEvents(self.location, self.instant)
        utc = events.set_utc()
        local = events.set_local()
        self.assertEqual(utc, moonset_utc(0.0, 0.0, self.instant.to_jd(), 2.0))
        if utc.is_found:
            self.assertAlmostEqual(local.jd_or_zero() - utc.jd_or_zero(), 2.0 / 24.0, places=9)


if __name__ == "__main__":
    unittest.main()
