import datetime
import unittest

from study_calendar.common import DaysRange, date_key, parse_date_key, shift_month


class TestDateKey(unittest.TestCase):
    def test_formats_plain_date(self):
        self.assertEqual(date_key(datetime.date(2024, 3, 5)), '2024-03-05')

    def test_is_stable_for_same_day(self):
        morning = datetime.datetime(2024, 3, 5, 0, 1)
        evening = datetime.datetime(2024, 3, 5, 23, 59)
        self.assertEqual(date_key(morning), date_key(evening))
        self.assertEqual(date_key(morning), date_key(morning.date()))

    def test_aware_datetime_uses_local_calendar_day(self):
        tokyo = datetime.timezone(datetime.timedelta(hours=9))
        just_after_midnight = datetime.datetime(2024, 3, 5, 0, 30, tzinfo=tokyo)
        self.assertEqual(date_key(just_after_midnight, tz=tokyo), '2024-03-05')
        self.assertEqual(just_after_midnight.astimezone(datetime.timezone.utc).date(), datetime.date(2024, 3, 4))

    def test_aware_datetime_is_converted_to_configured_zone(self):
        tokyo = datetime.timezone(datetime.timedelta(hours=9))
        utc_evening = datetime.datetime(2024, 3, 4, 20, 0, tzinfo=datetime.timezone.utc)
        self.assertEqual(date_key(utc_evening, tz=tokyo), '2024-03-05')

    def test_parse_is_inverse(self):
        day = datetime.date(2028, 2, 29)
        self.assertEqual(parse_date_key(date_key(day)), day)

    def test_parse_rejects_malformed_keys(self):
        with self.assertRaises(ValueError):
            parse_date_key('2024-13-01')
        with self.assertRaises(ValueError):
            parse_date_key('not a date')


class TestMonths(unittest.TestCase):
    def test_shift_month_does_not_overflow_short_months(self):
        self.assertEqual(shift_month(datetime.date(2024, 1, 31), 1), datetime.date(2024, 2, 1))

    def test_shift_month_crosses_years(self):
        self.assertEqual(shift_month(datetime.date(2024, 12, 15), 1), datetime.date(2025, 1, 1))
        self.assertEqual(shift_month(datetime.date(2024, 1, 15), -1), datetime.date(2023, 12, 1))
        self.assertEqual(shift_month(datetime.date(2024, 5, 15), -17), datetime.date(2022, 12, 1))


class TestDaysRange(unittest.TestCase):
    def test_days(self):
        days = list(DaysRange.days(datetime.date(2024, 2, 27), 4))
        self.assertEqual(days, [datetime.date(2024, 2, 27), datetime.date(2024, 2, 28),
                                datetime.date(2024, 2, 29), datetime.date(2024, 3, 1)])
        self.assertEqual(len(DaysRange.days(datetime.date(2024, 2, 27), 42)), 42)

    def test_rejects_reversed_range(self):
        with self.assertRaises(ValueError):
            DaysRange(datetime.date(2024, 4, 2), datetime.date(2024, 4, 1))


if __name__ == '__main__':
    unittest.main()
