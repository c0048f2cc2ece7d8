"""Tests for the CalendarDate value type."""

import dataclasses
import unittest
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from persian_date_limiter.entities.calendar_date import CalendarDate, ensure_calendar_date
from persian_date_limiter.utils.exceptions import InvalidDate


class TestCalendarDateConstruction(unittest.TestCase):
    """Factories and cached Persian fields."""

    def test_from_gregorian_computes_persian_fields(self):
        nowruz = CalendarDate.from_gregorian(2013, 3, 21, "UTC")
        self.assertEqual(
            (nowruz.persian_year, nowruz.persian_month, nowruz.persian_day),
            (1392, 0, 1),
        )
        self.assertFalse(nowruz.is_leap_year)

    def test_from_persian_is_midnight_of_the_gregorian_day(self):
        value = CalendarDate.from_persian(1402, 9, 22, "UTC")
        self.assertEqual(value.to_gregorian(), date(2024, 1, 12))
        self.assertEqual(value.instant, datetime(2024, 1, 12, tzinfo=timezone.utc))

    def test_from_persian_rejects_invalid_dates(self):
        with self.assertRaises(InvalidDate):
            CalendarDate.from_persian(1402, 11, 30, "UTC")

    def test_from_millis(self):
        value = CalendarDate.from_millis(0, "UTC")
        self.assertEqual(value.short_date(), "1348/10/11")
        self.assertEqual(value.instant_millis, 0)
        self.assertEqual(CalendarDate.from_gregorian(1970, 1, 2, "UTC").instant_millis, 86400000)

    def test_naive_datetime_is_rejected(self):
        with self.assertRaises(ValueError):
            CalendarDate(datetime(2024, 1, 1))

    def test_from_datetime_reads_naive_values_in_the_given_zone(self):
        value = CalendarDate.from_datetime(datetime(2024, 1, 12, 10, 30), "Asia/Tehran")
        self.assertEqual(value.time_zone_id, "Asia/Tehran")
        self.assertEqual(value.instant.hour, 10)
        self.assertEqual(value.persian_day, 22)

    def test_ensure_calendar_date_passes_calendar_dates_through(self):
        value = CalendarDate.from_gregorian(2024, 1, 12, "UTC")
        self.assertIs(ensure_calendar_date(value), value)
        self.assertEqual(ensure_calendar_date(datetime(2024, 1, 12), "UTC"), value)

    def test_wall_clock_in_a_dst_gap_keeps_its_instant(self):
        # 02:30 does not exist in New York on 2024-03-10
        gap = datetime(2024, 3, 10, 2, 30, tzinfo=ZoneInfo("America/New_York"))
        value = CalendarDate(gap)
        self.assertIs(value.instant, gap)
        self.assertEqual(value.instant_millis, int(gap.timestamp()) * 1000)
        self.assertEqual(value.to_gregorian(), date(2024, 3, 10))

    def test_persian_fields_follow_the_wall_clock_of_the_zone(self):
        instant = CalendarDate(datetime(2024, 1, 11, 21, 0, tzinfo=timezone.utc))
        self.assertEqual(instant.persian_day, 21)
        in_tehran = instant.with_time_zone("Asia/Tehran")
        self.assertEqual(in_tehran.persian_day, 22)
        self.assertEqual(in_tehran.instant_millis, instant.instant_millis)


class TestCalendarDateParsing(unittest.TestCase):
    """Parsing textual Persian dates."""

    def test_parse_latin_and_persian_digits(self):
        expected = CalendarDate.from_persian(1402, 9, 22, "UTC")
        self.assertEqual(CalendarDate.parse("1402/10/22", time_zone="UTC"), expected)
        self.assertEqual(CalendarDate.parse("۱۴۰۲/۱۰/۲۲", time_zone="UTC"), expected)
        self.assertEqual(CalendarDate.parse("1402-10-22", delimiter="-", time_zone="UTC"), expected)

    def test_parse_rejects_malformed_text(self):
        for text in ("1402/10", "abc", "1402/x/01", "1402/13/01", "1402/12/30"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidDate):
                    CalendarDate.parse(text, time_zone="UTC")


class TestCalendarDateFormatting(unittest.TestCase):
    """Names and formatted dates."""

    def test_names(self):
        value = CalendarDate.from_persian(1402, 9, 22, "UTC")
        self.assertEqual(value.month_name, "دی")
        # 2024-01-12 is a Friday
        self.assertEqual(value.weekday_name, "جمعه")
        self.assertEqual(CalendarDate.from_millis(0, "UTC").weekday_name, "پنجشنبه")

    def test_short_and_long_dates(self):
        value = CalendarDate.from_persian(1402, 0, 5, "UTC")
        self.assertEqual(value.short_date(), "1402/01/05")
        self.assertEqual(value.short_date("-"), "1402-01-05")
        self.assertEqual(value.long_date(), f"{value.weekday_name}  05  فروردین  1402")


class TestCalendarDateArithmetic(unittest.TestCase):
    """Derived dates always carry fresh Persian fields."""

    def assertPersian(self, value, year, month, day):
        self.assertEqual((value.persian_year, value.persian_month, value.persian_day), (year, month, day))

    def test_add_days_crosses_the_new_year(self):
        self.assertPersian(CalendarDate.from_persian(1399, 11, 30, "UTC").add_days(1), 1400, 0, 1)
        self.assertPersian(CalendarDate.from_persian(1400, 0, 1, "UTC").add_days(-1), 1399, 11, 30)

    def test_add_months_clamps_the_day(self):
        self.assertPersian(CalendarDate.from_persian(1402, 5, 31, "UTC").add_months(1), 1402, 6, 30)
        self.assertPersian(CalendarDate.from_persian(1402, 0, 1, "UTC").add_months(-6), 1401, 6, 1)
        self.assertPersian(CalendarDate.from_persian(1402, 3, 10, "UTC").add_months(12), 1403, 3, 10)

    def test_add_years_clamps_esfand_thirtieth(self):
        self.assertPersian(CalendarDate.from_persian(1399, 11, 30, "UTC").add_years(1), 1400, 11, 29)

    def test_add_years_skips_year_zero(self):
        self.assertPersian(CalendarDate.from_persian(1, 0, 1, "UTC").add_years(-1), -1, 0, 1)

    def test_add_keeps_time_of_day(self):
        value = CalendarDate.from_persian(1402, 0, 1, "UTC").replace_time(8, 15)
        self.assertEqual(value.add_months(2).instant.hour, 8)
        self.assertEqual(value.add_days(3).instant.minute, 15)

    def test_trim_to_midnight(self):
        midnight = CalendarDate.from_persian(1402, 9, 22, "UTC")
        self.assertEqual(midnight.replace_time(15, 30).trim_to_midnight(), midnight)

    def test_trim_to_midnight_in_another_zone(self):
        late_utc = CalendarDate(datetime(2024, 1, 11, 21, 0, tzinfo=timezone.utc))
        trimmed = late_utc.trim_to_midnight("Asia/Tehran")
        self.assertEqual(trimmed, CalendarDate.from_gregorian(2024, 1, 12, "Asia/Tehran"))

    def test_instances_are_immutable(self):
        value = CalendarDate.from_persian(1402, 9, 22, "UTC")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            value.persian_day = 1


class TestCalendarDateComparison(unittest.TestCase):
    """Ordering by instant, equality by instant and zone."""

    def test_ordering(self):
        earlier = CalendarDate.from_gregorian(2024, 1, 10, "UTC")
        later = CalendarDate.from_gregorian(2024, 1, 11, "UTC")
        self.assertLess(earlier, later)
        self.assertGreaterEqual(later, earlier)
        self.assertEqual(sorted([later, earlier]), [earlier, later])

    def test_same_instant_in_other_zone_is_not_equal(self):
        utc = CalendarDate.from_gregorian(2024, 1, 10, "UTC")
        tehran = utc.with_time_zone("Asia/Tehran")
        self.assertNotEqual(utc, tehran)
        self.assertFalse(utc < tehran)
        self.assertFalse(tehran < utc)

    def test_same_instant_in_other_zone_orders_as_equal(self):
        utc = CalendarDate.from_gregorian(2024, 1, 10, "UTC")
        tehran = utc.with_time_zone("Asia/Tehran")
        self.assertLessEqual(utc, tehran)
        self.assertLessEqual(tehran, utc)
        self.assertGreaterEqual(utc, tehran)
        self.assertGreaterEqual(tehran, utc)
        self.assertFalse(utc > tehran)

    def test_equal_values_hash_alike(self):
        first = CalendarDate.from_gregorian(2024, 1, 10, "UTC")
        second = CalendarDate(datetime(2024, 1, 10, tzinfo=timezone.utc))
        self.assertEqual(first, second)
        self.assertEqual(len({first, second}), 1)


if __name__ == "__main__":
    unittest.main()
