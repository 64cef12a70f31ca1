"""Unit tests for timecode parsing"""

import unittest
from ffinfo.timecode import parse_seconds, parse_timecode

class TestParseTimecode(unittest.TestCase):
    def test_hours_minutes_seconds(self):
        self.assertAlmostEqual(parse_timecode("01:02:03.250"), 3723.25)

    def test_minutes_seconds(self):
        self.assertAlmostEqual(parse_timecode("02:03.250"), 123.25)

    def test_seconds_only(self):
        self.assertAlmostEqual(parse_timecode("3.5"), 3.5)
        self.assertEqual(parse_timecode("42"), 42.0)

    def test_zero(self):
        self.assertEqual(parse_timecode("00:00:00"), 0)

    def test_matroska_nanosecond_duration(self):
        """DURATION tags carry nine fractional digits"""
        self.assertAlmostEqual(parse_timecode("01:42:17.134000000"), 6137.134)

    def test_single_digit_hours(self):
        self.assertAlmostEqual(parse_timecode("1:00:00.5"), 3600.5)

    def test_malformed_components_count_as_zero(self):
        self.assertEqual(parse_timecode("ab:cd:03"), 3)
        self.assertAlmostEqual(parse_timecode("01:xx:03.5"), 3603.5)

    def test_malformed_fraction_counts_as_zero(self):
        self.assertEqual(parse_timecode("00:01:05.abc"), 65)

    def test_empty_text(self):
        self.assertEqual(parse_timecode(""), 0)

    def test_fraction_only(self):
        self.assertAlmostEqual(parse_timecode(".75"), 0.75)

    def test_too_many_components_keeps_only_fraction(self):
        self.assertAlmostEqual(parse_timecode("1:02:03:04.5"), 0.5)

    def test_padded_or_underscored_components_count_as_zero(self):
        self.assertEqual(parse_timecode("1_0:05"), 5)
        self.assertAlmostEqual(parse_timecode("00: 1:05.5"), 5.5)

    def test_never_raises(self):
        for text in (":", "::", "...", "1:2:3:4:5", "-", "12:", ":30"):
            self.assertIsInstance(parse_timecode(text), float)

class TestParseSeconds(unittest.TestCase):
    def test_plain_numbers(self):
        self.assertEqual(parse_seconds("12.5"), 12.5)
        self.assertEqual(parse_seconds("-0.005000"), -0.005)
        self.assertEqual(parse_seconds("1e3"), 1000.0)

    def test_rejects_what_float_would_accept(self):
        for text in ("1_000", " 12.5", "12.5 ", "10.0\n"):
            with self.assertRaises(ValueError):
                parse_seconds(text)

    def test_rejects_non_numbers(self):
        for text in ("", "N/A", "abc"):
            with self.assertRaises(ValueError):
                parse_seconds(text)

if __name__ == "__main__":
    unittest.main()
