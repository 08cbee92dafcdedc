"""
Unit tests for types module.

Tests the value types passed between the ephemeris and the solver.
"""

import unittest
from datetime import date

from solar_twilight.api.core.types import EquatorialCoordinates, TimePair, TwilightResult


class TestTimePair(unittest.TestCase):
    """Test suite for TimePair dataclass"""

    def setUp(self):
        """Set up test fixtures"""
        self.pair = TimePair(century=0.24, ut_hour=17.25, date=date(2024, 3, 20))

    def test_at(self):
        """Test moving a pair to another hour of the same day"""
        moved = self.pair.at(5.0)
        self.assertEqual(moved.ut_hour, 5.0)
        self.assertEqual(moved.century, self.pair.century)
        self.assertEqual(moved.date, self.pair.date)
        self.assertEqual(self.pair.ut_hour, 17.25)

    def test_frozen(self):
        """Test that TimePair is frozen (immutable)"""
        with self.assertRaises(Exception):  # dataclass frozen raises FrozenInstanceError
            self.pair.ut_hour = 12.0

    def test_str(self):
        """Test string representation"""
        self.assertEqual(str(self.pair), "T=0.240000000 UT=17.2500h (2024-03-20)")


class TestEquatorialCoordinates(unittest.TestCase):
    """Test suite for EquatorialCoordinates dataclass"""

    def test_str(self):
        """Test string representation with a negative declination"""
        coords = EquatorialCoordinates(ra_degrees=198.38083, dec_degrees=-7.78507)
        self.assertEqual(str(coords), "RA 198.3808°, Dec -7.7851°")


class TestTwilightResult(unittest.TestCase):
    """Test suite for TwilightResult named tuple"""

    def test_fields(self):
        """Test field access and tuple unpacking"""
        result = TwilightResult(morning=None, evening=18.5, day_length=0.0, threshold=-6.0, date=date(2024, 1, 1))
        morning, evening, day_length, threshold, day = result
        self.assertIsNone(morning)
        self.assertEqual(evening, 18.5)
        self.assertEqual(day_length, 0.0)
        self.assertEqual(threshold, -6.0)
        self.assertEqual(day, date(2024, 1, 1))
        self.assertEqual(result._replace(morning=6.0).morning, 6.0)


if __name__ == "__main__":
    unittest.main()
