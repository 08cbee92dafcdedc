"""
Unit tests for report.py

Tests time formatting, report lines and the diary entry registry.
"""

import unittest
from datetime import date

from solar_twilight.api.astronomy.report import (
    DIARY_ENTRIES,
    diary_entries,
    diary_entry,
    event_line,
    format_clock_time,
    format_day_length,
    location_label,
    result_to_dict,
    sunrise_sunset_string,
    twilight_lines,
)
from solar_twilight.api.core.enums import Direction, TwilightKind
from solar_twilight.api.core.exceptions import LocationNotSetError
from solar_twilight.api.core.types import TwilightResult
from solar_twilight.api.location.observer import ObserverLocation


WASHINGTON = ObserverLocation(
    latitude=38.9, longitude=-77.0, utc_offset_minutes=-300, timezone="America/New_York", name="Washington, DC"
)
WASHINGTON_FIXED = ObserverLocation(latitude=38.9, longitude=-77.0, utc_offset_minutes=-300)
TROMSO = ObserverLocation(latitude=69.65, longitude=18.96, utc_offset_minutes=60, name="Tromsø")


def _result(morning, evening, day_length, threshold=-0.61):
    return TwilightResult(
        morning=morning, evening=evening, day_length=day_length, threshold=threshold, date=date(2024, 1, 15)
    )


class TestFormatClockTime(unittest.TestCase):
    """Test suite for format_clock_time function"""

    def test_morning(self):
        """Test a morning time on the 12-hour clock"""
        self.assertEqual(format_clock_time(6.2), "6:12am")

    def test_afternoon(self):
        """Test an afternoon time on the 12-hour clock"""
        self.assertEqual(format_clock_time(17.5), "5:30pm")

    def test_midnight_and_noon(self):
        """Test 12 o'clock on both sides"""
        self.assertEqual(format_clock_time(0.0), "12:00am")
        self.assertEqual(format_clock_time(12.0), "12:00pm")

    def test_rounds_to_minute(self):
        """Test rounding to the nearest minute, wrapping past midnight"""
        self.assertEqual(format_clock_time(6.0 + 29.6 / 3600.0), "6:00am")
        self.assertEqual(format_clock_time(23.9999), "12:00am")

    def test_twenty_four_hour(self):
        """Test the 24-hour clock"""
        self.assertEqual(format_clock_time(18.2, twelve_hour=False), "18:12")
        self.assertEqual(format_clock_time(6.2, twelve_hour=False), "06:12")


class TestFormatDayLength(unittest.TestCase):
    """Test suite for format_day_length function"""

    def test_format(self):
        """Test hours and minutes"""
        self.assertEqual(format_day_length(10.3), "10:18")
        self.assertEqual(format_day_length(9.05), "9:03")

    def test_degenerate(self):
        """Test continuous day and continuous night"""
        self.assertEqual(format_day_length(24.0), "24:00")
        self.assertEqual(format_day_length(0.0), "0:00")


class TestLocationLabel(unittest.TestCase):
    """Test suite for location_label function"""

    def test_explicit_name(self):
        """Test that an explicit name wins"""
        self.assertEqual(location_label(WASHINGTON, "Home"), "Home")

    def test_callback(self):
        """Test that a callback is called with the location"""
        label = location_label(WASHINGTON, lambda location: f"lat {location.latitude}")
        self.assertEqual(label, "lat 38.9")

    def test_location_name(self):
        """Test falling back to the location's own name"""
        self.assertEqual(location_label(WASHINGTON), "Washington, DC")

    def test_coordinates(self):
        """Test falling back to coordinates"""
        self.assertEqual(location_label(WASHINGTON_FIXED), "38.90°N, 77.00°W")


class TestEventLine(unittest.TestCase):
    """Test suite for event_line and twilight_lines functions"""

    def test_sunrise(self):
        """Test a sunrise line"""
        result = _result(6.2, 17.5, 11.3)
        self.assertEqual(event_line(result, TwilightKind.SUNRISE, Direction.MORNING), "6:12am: Sunrise")
        self.assertEqual(event_line(result, TwilightKind.SUNRISE, Direction.EVENING), "5:30pm: Sunset")

    def test_twilight(self):
        """Test twilight begin and end lines"""
        result = _result(5.0, 19.25, 14.25, threshold=-18.0)
        self.assertEqual(
            twilight_lines(result, TwilightKind.ASTRONOMICAL),
            ["5:00am: Astronomical twilight begins", "7:15pm: Astronomical twilight ends"],
        )

    def test_missing(self):
        """Test lines for missing instants"""
        result = _result(None, None, 0.0)
        self.assertEqual(event_line(result, TwilightKind.SUNRISE, Direction.MORNING), "No sunrise")
        self.assertEqual(event_line(result, TwilightKind.SUNRISE, Direction.EVENING), "No sunset")
        self.assertEqual(event_line(result, TwilightKind.CIVIL, Direction.EVENING), "No civil twilight")

    def test_twenty_four_hour(self):
        """Test lines on the 24-hour clock"""
        result = _result(5.5, 18.75, 13.25, threshold=-12.0)
        self.assertEqual(
            event_line(result, TwilightKind.NAUTICAL, Direction.EVENING, twelve_hour=False),
            "18:45: Nautical twilight ends",
        )


class TestSunriseSunsetString(unittest.TestCase):
    """Test suite for sunrise_sunset_string function"""

    def test_full_line(self):
        """Test the combined line with zone and place"""
        result = _result(6.2, 17.5, 10.3)
        self.assertEqual(
            sunrise_sunset_string(result, "Washington, DC", "EST"),
            "Sunrise 6:12am (EST), sunset 5:30pm (EST) at Washington, DC (10:18 hours daylight)",
        )

    def test_without_zone_or_place(self):
        """Test the combined line without zone or place"""
        result = _result(6.2, 17.5, 10.3)
        self.assertEqual(sunrise_sunset_string(result), "Sunrise 6:12am, sunset 5:30pm (10:18 hours daylight)")

    def test_continuous_day(self):
        """Test the combined line when the Sun never sets"""
        result = _result(None, None, 24.0)
        self.assertEqual(
            sunrise_sunset_string(result, "Tromsø", "CEST"),
            "No sunrise, no sunset at Tromsø (24:00 hours daylight)",
        )


class TestResultToDict(unittest.TestCase):
    """Test suite for result_to_dict function"""

    def test_complete(self):
        """Test converting a result with both instants"""
        data = result_to_dict(_result(6.2, 17.5, 11.3), TwilightKind.SUNRISE)
        self.assertEqual(data["kind"], "sunrise")
        self.assertEqual(data["date"], "2024-01-15")
        self.assertEqual(data["threshold"], -0.61)
        self.assertEqual(data["morning"], "06:12")
        self.assertEqual(data["evening"], "17:30")
        self.assertEqual(data["day_length"], "11:18")
        self.assertEqual(data["day_length_hours"], 11.3)

    def test_missing(self):
        """Test converting a result with missing instants"""
        data = result_to_dict(_result(None, None, 0.0))
        self.assertIsNone(data["kind"])
        self.assertIsNone(data["morning"])
        self.assertIsNone(data["evening"])
        self.assertEqual(data["day_length"], "0:00")


class TestDiaryEntries(unittest.TestCase):
    """Test suite for the diary entry registry"""

    def test_registry_order(self):
        """Test that entries are registered in chronological order"""
        self.assertEqual(
            list(DIARY_ENTRIES),
            [
                "morning_astronomical_twilight",
                "morning_nautical_twilight",
                "morning_civil_twilight",
                "sunrise",
                "sunset",
                "evening_civil_twilight",
                "evening_nautical_twilight",
                "evening_astronomical_twilight",
                "sunrise_sunset",
            ],
        )

    def test_all_entries(self):
        """Test the nine lines for Washington on the equinox"""
        lines = diary_entries(date(2024, 3, 20), WASHINGTON)

        self.assertEqual(len(lines), 9)
        self.assertTrue(lines[0].endswith(": Astronomical twilight begins"))
        self.assertTrue(lines[1].endswith(": Nautical twilight begins"))
        self.assertTrue(lines[2].endswith(": Civil twilight begins"))
        self.assertTrue(lines[3].endswith(": Sunrise"))
        self.assertTrue(lines[4].endswith(": Sunset"))
        self.assertTrue(lines[5].endswith(": Civil twilight ends"))
        self.assertTrue(lines[6].endswith(": Nautical twilight ends"))
        self.assertTrue(lines[7].endswith(": Astronomical twilight ends"))
        self.assertIn("(EDT)", lines[8])
        self.assertIn("at Washington, DC", lines[8])
        self.assertTrue(lines[8].endswith("hours daylight)"))

    def test_single_entry_matches_all(self):
        """Test that a single hook gives the same line as the full list"""
        day = date(2024, 3, 20)
        lines = diary_entries(day, WASHINGTON)
        for index, name in enumerate(DIARY_ENTRIES):
            with self.subTest(name=name):
                self.assertEqual(diary_entry(name, day, WASHINGTON), lines[index])

    def test_fixed_offset_zone_label(self):
        """Test the zone label of a location with only a fixed offset"""
        line = diary_entry("sunrise_sunset", date(2024, 3, 20), WASHINGTON_FIXED)
        self.assertIn("(UTC-05:00)", line)
        self.assertIn("at 38.90°N, 77.00°W", line)

    def test_location_name_callback(self):
        """Test a display name callback in the combined line"""
        line = diary_entry("sunrise_sunset", date(2024, 3, 20), WASHINGTON, location_name=lambda loc: "Capitol")
        self.assertIn("at Capitol", line)

    def test_polar_night(self):
        """Test lines in Tromsø at the December solstice"""
        lines = diary_entries(date(2024, 12, 21), TROMSO)
        self.assertEqual(lines[3], "No sunrise")
        self.assertEqual(lines[4], "No sunset")
        self.assertEqual(lines[8], "No sunrise, no sunset at Tromsø (0:00 hours daylight)")
        self.assertTrue(lines[2].endswith(": Civil twilight begins"))

    def test_unknown_entry(self):
        """Test that an unknown hook name raises KeyError"""
        with self.assertRaises(KeyError):
            diary_entry("moonrise", date(2024, 3, 20), WASHINGTON)

    def test_incomplete_location(self):
        """Test that a location without offset raises LocationNotSetError"""
        with self.assertRaises(LocationNotSetError):
            diary_entries(date(2024, 3, 20), ObserverLocation(latitude=38.9, longitude=-77.0))


if __name__ == "__main__":
    unittest.main()
