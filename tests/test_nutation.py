"""
Unit tests for nutation.py

Tests nutation in longitude and obliquity and the mean obliquity of the
ecliptic against Meeus, Astronomical Algorithms, example 22.a.
"""

import unittest

from skycalc.api.time.nutation import (
    NUTATION_ARGUMENTS,
    NUTATION_COS_COEFFICIENTS,
    NUTATION_SIN_COEFFICIENTS,
    mean_obliquity,
    nutation,
)


# 1987-04-10 0h TD
T_1987 = -0.127296372348


class TestNutation(unittest.TestCase):
    """Test suite for nutation function"""

    def test_meeus_example(self):
        """Test nutation for 1987-04-10"""
        delta_psi, delta_eps, eps0 = nutation(T_1987)
        self.assertAlmostEqual(delta_psi, -0.001052203, places=6)
        self.assertAlmostEqual(delta_eps, 0.002623056, places=6)
        self.assertAlmostEqual(eps0, 23.440946389, places=6)

    def test_values_are_small(self):
        """Test that nutation stays within its known amplitude"""
        for t in (-1.0, -0.5, 0.0, 0.24, 0.5):
            with self.subTest(t=t):
                delta_psi, delta_eps, _ = nutation(t)
                self.assertLess(abs(delta_psi), 20.0 / 3600.0)
                self.assertLess(abs(delta_eps), 10.0 / 3600.0)

    def test_table_sizes(self):
        """Test that the periodic term tables line up"""
        self.assertEqual(len(NUTATION_ARGUMENTS), 63)
        self.assertEqual(len(NUTATION_SIN_COEFFICIENTS), 63)
        self.assertEqual(len(NUTATION_COS_COEFFICIENTS), 63)


class TestMeanObliquity(unittest.TestCase):
    """Test suite for mean_obliquity function"""

    def test_j2000(self):
        """Test the obliquity at J2000.0"""
        self.assertAlmostEqual(mean_obliquity(0.0), 23.0 + 26.0 / 60.0 + 21.448 / 3600.0, places=9)

    def test_decreasing(self):
        """Test that the obliquity currently decreases"""
        self.assertLess(mean_obliquity(0.25), mean_obliquity(0.0))


if __name__ == "__main__":
    unittest.main()
