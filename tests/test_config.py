"""
Unit tests for config.py

Tests loading, defaults, error handling and saving of the YAML configuration.
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from skycalc.api.config import (
    CONFIG_ENV_VAR,
    Constraints,
    Others,
    SkycalcConfig,
    get_config_path,
    load_config,
    save_config,
)
from skycalc.api.core.exceptions import InvalidConfigurationError
from skycalc.api.location.observer import DEFAULT_OBSERVATORY_NAME, Environment, GeographicLocation, Observer
from skycalc.api.time.instant import CalendarInstant


TROMSO_CONFIG = """\
observer:
  name: Tromso observatory
  longitude: 19.0
  latitude: 69.669998
  elevation: 0
  timezone: 1

time: 2024-12-11 12:00:00 # local time

environment:
  pressure: 1020
  temperature: 25
  humidity: 45

constraints:
  min_altitude: 30
  max_altitude: 80
  min_size: 10
  max_size: 300
  moon_separation: 45
  use_darkness: true
  frac_observable_time: 50
  max_targets: 60

others:
  target_list: targets/OpenNGC
  type_filter: # e.g. Galaxy, Nebula
  output_dir: output
"""


class TestGetConfigPath(unittest.TestCase):
    """Test suite for get_config_path function"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up test fixtures"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_default_path(self):
        """Test the path under the user's config directory"""
        with patch.dict(os.environ), patch("skycalc.api.config.Path.home", return_value=Path(self.temp_dir)):
            os.environ.pop(CONFIG_ENV_VAR, None)
            path = get_config_path()
        self.assertEqual(path, Path(self.temp_dir) / ".config" / "skycalc" / "skycalc.yaml")
        self.assertTrue(path.parent.is_dir())

    def test_environment_override(self):
        """Test that SKYCALC_CONFIG takes precedence"""
        override = str(Path(self.temp_dir) / "other.yaml")
        with patch.dict(os.environ, {CONFIG_ENV_VAR: override}):
            self.assertEqual(get_config_path(), Path(override))


class TestLoadConfig(unittest.TestCase):
    """Test suite for load_config function"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.path = Path(self.temp_dir) / "skycalc.yaml"

    def tearDown(self):
        """Clean up test fixtures"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_full_file(self):
        """Test loading every section"""
        self.path.write_text(TROMSO_CONFIG)
        config = load_config(self.path)

        self.assertEqual(config.observer.name, "Tromso observatory")
        self.assertAlmostEqual(config.location.latitude, 69.669998, places=9)
        self.assertEqual(config.location.longitude, 19.0)
        self.assertEqual(config.location.timezone, 1.0)
        self.assertEqual(config.environment, Environment(temperature=25.0, humidity=45.0, pressure=1020.0))
        self.assertEqual(config.constraints.min_altitude, 30.0)
        self.assertEqual(config.constraints.max_targets, 60)
        self.assertTrue(config.constraints.use_darkness)
        self.assertEqual(config.others, Others(target_list="targets/OpenNGC", type_filter="", output_dir="output"))

    def test_time_is_converted_to_utc(self):
        """Test that the local time in the file becomes UT"""
        self.path.write_text(TROMSO_CONFIG)
        self.assertEqual(load_config(self.path).time, CalendarInstant(2024, 12, 11, 11, 0, 0))

    def test_unparseable_time_is_now(self):
        """Test that an unreadable time gives the current UT instant, not shifted by the timezone"""
        self.path.write_text("observer:\n  timezone: \"-05:00\"\ntime: soon\n")
        config = load_config(self.path)
        delta_hours = abs(config.time.to_jd() - CalendarInstant.now().to_jd()) * 24.0
        self.assertLess(delta_hours, 0.01)

    def test_missing_file(self):
        """Test that a missing file gives defaults"""
        config = load_config(self.path)
        self.assertEqual(config.observer, Observer())
        self.assertEqual(config.constraints, Constraints())
        self.assertEqual(config.others, Others())

    def test_null_values(self):
        """Test that explicit nulls fall back to defaults"""
        self.path.write_text("observer:\n  name:\n  latitude:\nenvironment:\nconstraints:\n  max_targets:\n")
        config = load_config(self.path)
        self.assertEqual(config.observer.name, DEFAULT_OBSERVATORY_NAME)
        self.assertEqual(config.location.latitude, 0.0)
        self.assertEqual(config.environment, Environment())
        self.assertEqual(config.constraints.max_targets, 50)

    def test_dms_coordinates(self):
        """Test that DMS strings are accepted"""
        self.path.write_text("observer:\n  latitude: 69d40m12sN\n  longitude: 77d03m56sW\n  timezone: '-05:00'\n")
        config = load_config(self.path)
        self.assertAlmostEqual(config.location.latitude, 69.67, places=6)
        self.assertAlmostEqual(config.location.longitude, -77.065555556, places=6)
        self.assertEqual(config.location.timezone, -5.0)

    def test_invalid_yaml(self):
        """Test that an unparseable file raises InvalidConfigurationError"""
        self.path.write_text("observer: [unclosed\n")
        with self.assertRaises(InvalidConfigurationError):
            load_config(self.path)

    def test_wrong_shape(self):
        """Test that a non-mapping document raises InvalidConfigurationError"""
        self.path.write_text("- just\n- a list\n")
        with self.assertRaises(InvalidConfigurationError):
            load_config(self.path)

    def test_wrong_section_shape(self):
        """Test that a non-mapping section raises InvalidConfigurationError"""
        self.path.write_text("observer: 42\n")
        with self.assertRaises(InvalidConfigurationError):
            load_config(self.path)

    def test_uses_config_path(self):
        """Test that the default location is read when no path is given"""
        self.path.write_text("observer:\n  name: Patched\n")
        with patch("skycalc.api.config.get_config_path", return_value=self.path):
            self.assertEqual(load_config().observer.name, "Patched")


class TestSaveConfig(unittest.TestCase):
    """Test suite for save_config function"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.path = Path(self.temp_dir) / "nested" / "skycalc.yaml"

    def tearDown(self):
        """Clean up test fixtures"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_round_trip(self):
        """Test that a saved configuration loads back unchanged"""
        config = SkycalcConfig(
            observer=Observer("Test site", GeographicLocation(38.92, -77.07, 92.0, -5.0), Environment(15.0, 70.0, 1000.0)),
            time=CalendarInstant(2024, 9, 13, 2, 0, 0),
            constraints=Constraints(min_altitude=25.0, use_darkness=True),
            others=Others(type_filter="Galaxy"),
        )
        written = save_config(config, self.path)
        self.assertEqual(written, self.path)
        self.assertEqual(load_config(self.path), config)

    def test_time_stored_as_local(self):
        """Test that the file holds local time"""
        config = SkycalcConfig(
            observer=Observer(location=GeographicLocation(timezone=-5.0)),
            time=CalendarInstant(2024, 9, 13, 2, 0, 0),
        )
        save_config(config, self.path)
        self.assertIn("2024-09-12 21:00:00", self.path.read_text())


if __name__ == "__main__":
    unittest.main()
