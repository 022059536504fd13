import sys
import os
import unittest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from utils.formatters import format_date_time, nested_get, or_na


class TestFormatters(unittest.TestCase):
    def test_date_shown_in_india_time(self):
        self.assertEqual(format_date_time("2024-01-05T09:34:00.000Z"), "Jan 05, 2024, 03:04 PM")

    def test_offset_timestamp(self):
        self.assertEqual(format_date_time("2024-03-10T23:59:00+05:30"), "Mar 10, 2024, 11:59 PM")

    def test_epoch_milliseconds(self):
        self.assertEqual(format_date_time(1704447240000), "Jan 05, 2024, 03:04 PM")
        self.assertEqual(format_date_time(1704447240000.0), "Jan 05, 2024, 03:04 PM")

    def test_bad_and_missing_dates(self):
        self.assertEqual(format_date_time("not a date"), "Invalid Date")
        self.assertEqual(format_date_time(None), "N/A")
        self.assertEqual(format_date_time("  "), "N/A")

    def test_or_na(self):
        self.assertEqual(or_na("Route 7"), "Route 7")
        self.assertEqual(or_na(1200), 1200)
        self.assertEqual(or_na(""), "N/A")
        self.assertEqual(or_na(None), "N/A")
        self.assertEqual(or_na(0), "N/A")
        self.assertEqual(or_na(float("nan")), "N/A")

    def test_nested_get(self):
        row = {"userId": {"username": "op_amit"}, "vehicleId": None}
        self.assertEqual(nested_get(row, "userId.username"), "op_amit")
        self.assertIsNone(nested_get(row, "vehicleId.vehicleType"))
        self.assertEqual(nested_get(row, "missing.key", "N/A"), "N/A")


if __name__ == '__main__':
    unittest.main()
