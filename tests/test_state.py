"""
Unit tests for state.py

Tests how the CLI merges the configuration file with command-line values
into an observer and a UT query instant.
"""

import shutil
import tempfile
import unittest
from pathlib import Path

from skycalc.api.time.instant import CalendarInstant
from skycalc.cli.utils.state import get_state, resolve_site, set_state


class TestResolveSite(unittest.TestCase):
    """Test suite for resolve_site function"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        set_state(config_path=Path(self.temp_dir) / "skycalc.yaml")

    def tearDown(self):
        """Clean up test fixtures"""
        set_state(config_path=None)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_command_line_overrides(self):
        """Test that command-line values replace the defaults"""
        observer, _ = resolve_site("2024-04-08", "69.67", "18.94", "+01:00")
        self.assertAlmostEqual(observer.latitude, 69.67, places=9)
        self.assertAlmostEqual(observer.longitude, 18.94, places=9)
        self.assertEqual(observer.timezone, 1.0)

    def test_local_date_to_utc(self):
        """Test that the date is local time at the observer"""
        _, instant = resolve_site("2024-04-08 21:00", "0", "0", "-5")
        self.assertEqual(instant, CalendarInstant(2024, 4, 9, 2, 0, 0))

    def test_empty_date_is_now(self):
        """Test that an empty date gives the current UT instant whatever the timezone"""
        _, instant = resolve_site("", "0", "0", "-5")
        delta_hours = abs(instant.to_jd() - CalendarInstant.now().to_jd()) * 24.0
        self.assertLess(delta_hours, 0.01)

    def test_state(self):
        """Test that options from the main callback are recorded"""
        set_state(verbose=True)
        self.assertTrue(get_state("verbose"))
        set_state(verbose=False)


if __name__ == "__main__":
    unittest.main()
