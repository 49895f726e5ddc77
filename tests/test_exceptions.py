"""
Unit tests for exceptions module.

Tests the exception hierarchy.
"""

import unittest

from skycalc.api.core.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidCoordinateError,
    InvalidTimeError,
    ReportError,
    SkycalcError,
)


class TestExceptionHierarchy(unittest.TestCase):
    """Test suite for exception hierarchy"""

    def test_base_exception(self):
        """Test that SkycalcError is an Exception"""
        self.assertTrue(issubclass(SkycalcError, Exception))

    def test_all_derive_from_base(self):
        """Test that every error can be caught as SkycalcError"""
        for error in (ConfigurationError, InvalidConfigurationError, InvalidCoordinateError, InvalidTimeError, ReportError):
            with self.subTest(error=error):
                self.assertTrue(issubclass(error, SkycalcError))

    def test_invalid_configuration_is_configuration_error(self):
        """Test the configuration branch"""
        self.assertTrue(issubclass(InvalidConfigurationError, ConfigurationError))

    def test_message(self):
        """Test that the message is kept"""
        with self.assertRaises(SkycalcError) as context:
            raise InvalidTimeError("Invalid month: 13")
        self.assertEqual(str(context.exception), "Invalid month: 13")


if __name__ == "__main__":
    unittest.main()
