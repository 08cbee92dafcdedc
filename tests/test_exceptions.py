"""
Unit tests for exceptions module.

Tests the exception hierarchy used throughout the API.
"""

import unittest

from solar_twilight.api.core.exceptions import (
    ConfigurationError,
    ConvergenceError,
    InvalidConfigurationError,
    LocationError,
    LocationNotSetError,
    SolverError,
    TimezoneNotFoundError,
    TwilightError,
)


class TestTwilightError(unittest.TestCase):
    """Test suite for TwilightError base exception"""

    def test_twilight_error_is_exception(self):
        """Test that TwilightError is an Exception"""
        self.assertTrue(issubclass(TwilightError, Exception))

    def test_twilight_error_instantiation(self):
        """Test creating a TwilightError instance"""
        error = TwilightError("Test error message")
        self.assertEqual(str(error), "Test error message")
        self.assertIsInstance(error, Exception)

    def test_twilight_error_with_no_message(self):
        """Test creating a TwilightError with no message"""
        error = TwilightError()
        self.assertEqual(str(error), "")


class TestLocationErrors(unittest.TestCase):
    """Test suite for location exceptions"""

    def test_hierarchy(self):
        """Test that location errors share a base"""
        self.assertTrue(issubclass(LocationError, TwilightError))
        self.assertTrue(issubclass(LocationNotSetError, LocationError))
        self.assertTrue(issubclass(TimezoneNotFoundError, LocationError))

    def test_catch_as_base(self):
        """Test catching LocationNotSetError as TwilightError"""
        with self.assertRaises(TwilightError) as context:
            raise LocationNotSetError("Observer location is not configured")
        self.assertEqual(str(context.exception), "Observer location is not configured")


class TestConfigurationErrors(unittest.TestCase):
    """Test suite for configuration exceptions"""

    def test_hierarchy(self):
        """Test that configuration errors share a base"""
        self.assertTrue(issubclass(ConfigurationError, TwilightError))
        self.assertTrue(issubclass(InvalidConfigurationError, ConfigurationError))
        self.assertFalse(issubclass(InvalidConfigurationError, LocationError))


class TestSolverErrors(unittest.TestCase):
    """Test suite for solver exceptions"""

    def test_hierarchy(self):
        """Test that ConvergenceError is a solver error"""
        self.assertTrue(issubclass(SolverError, TwilightError))
        self.assertTrue(issubclass(ConvergenceError, SolverError))

    def test_instantiation(self):
        """Test creating a ConvergenceError instance"""
        error = ConvergenceError("did not converge after 64 iterations")
        self.assertIn("64 iterations", str(error))
        self.assertIsInstance(error, TwilightError)


if __name__ == "__main__":
    unittest.main()
