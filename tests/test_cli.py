"""
Unit tests for the command-line interface

Runs the typer application end to end with CliRunner against a temporary
configuration file.
"""

import shutil
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from skycalc import __version__
from skycalc.cli.main import app


SITE = ["--date", "2024-04-08", "--lat", "0", "--lon", "0", "--tz", "0"]


class TestCli(unittest.TestCase):
    """Test suite for the skycalc commands"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "skycalc.yaml"
        self.runner = CliRunner()
        self.env = {"SKYCALC_CONFIG": str(self.config_path)}

    def tearDown(self):
        """Clean up test fixtures"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def invoke(self, *args: str):
        return self.runner.invoke(app, list(args), env=self.env)

    def test_version(self):
        """Test the version command"""
        result = self.invoke("version")
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_darkness(self):
        """Test the darkness command for one night"""
        result = self.invoke("darkness", *SITE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Darkness windows", result.output)
        self.assertIn("Best darkness: astronomical", result.output)

    def test_darkness_single_band(self):
        """Test the darkness command restricted to one band"""
        result = self.invoke("darkness", *SITE, "--band", "nautical", "--utc")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Nautical Twilight", result.output)
        self.assertNotIn("Civil Twilight", result.output)

    def test_sun(self):
        """Test the sun command"""
        result = self.invoke("sun", *SITE, "--mode", "previous")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Sunrise/Sunset", result.output)

    def test_sun_midnight_sun(self):
        """Test that degenerate events are shown as text"""
        result = self.invoke("sun", "--date", "2024-06-21", "--lat", "70", "--lon", "19", "--tz", "1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Never Sets", result.output)

    def test_moon(self):
        """Test the moon command"""
        result = self.invoke("moon", *SITE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Moonrise", result.output)
        self.assertIn("Moon at", result.output)

    def test_position(self):
        """Test the position command"""
        result = self.invoke("position", *SITE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Sidereal time", result.output)

    def test_report(self):
        """Test writing a report file"""
        output = Path(self.temp_dir) / "report.txt"
        result = self.invoke("report", *SITE, "--output", str(output))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(output.exists())
        self.assertIn("Deep Sky Darkness start", output.read_text(encoding="utf-8"))

    def test_config_init_and_show(self):
        """Test writing and showing the configuration"""
        result = self.invoke("config", "init")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(self.config_path.exists())

        result = self.invoke("config", "show")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("My observatory", result.output)

    def test_config_init_refuses_overwrite(self):
        """Test that init keeps an existing file without --force"""
        self.config_path.write_text("observer:\n  name: Mine\n")
        result = self.invoke("config", "init")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Mine", self.config_path.read_text())

    def test_config_option(self):
        """Test that --config overrides the environment"""
        other = Path(self.temp_dir) / "other.yaml"
        other.write_text("observer:\n  name: Other site\n")
        result = self.runner.invoke(app, ["--config", str(other), "config", "show"], env=self.env)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Other site", result.output)

    def test_invalid_config(self):
        """Test that a broken configuration exits with an error"""
        self.config_path.write_text("observer: [unclosed\n")
        result = self.invoke("darkness", *SITE)
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main()
