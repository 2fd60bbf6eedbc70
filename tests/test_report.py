import unittest
import warnings
from datetime import date, datetime

from kalendar import report
from kalendar.domain import Season


class DescribeDayTests(unittest.TestCase):
    def test_easter_day(self) -> None:
        info = report.describe_day(datetime(2024, 3, 31, 15, 30))
        self.assertEqual(info.date, date(2024, 3, 31))
        self.assertEqual(info.season, Season.EASTER)
        self.assertEqual(info.kalendar_year, 2023)
        self.assertEqual(info.ordinal, "31st")
        self.assertEqual(info.holidays, frozenset())
        self.assertFalse(info.is_pascal_moon)

    def test_pascal_moon_and_holidays(self) -> None:
        self.assertTrue(report.describe_day(date(2024, 3, 25)).is_pascal_moon)
        christmas = report.describe_day("2024-12-25")
        self.assertEqual(christmas.holidays, frozenset({"Christmas Day"}))
        self.assertEqual(christmas.kalendar_year, 2024)
        self.assertEqual(christmas.ordinal, "25th")

    def test_warns_outside_exact_range(self) -> None:
        with self.assertWarns(UserWarning):
            report.describe_day(date(1850, 6, 1))
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            report.describe_day(date(2024, 6, 1))


class YearRowsTests(unittest.TestCase):
    def test_year_rows(self) -> None:
        rows = report.year_rows(2024)
        self.assertEqual(len(rows), 366)
        valentine = rows[44]
        self.assertEqual(valentine["date"], date(2024, 2, 14))
        self.assertEqual(valentine["weekday"], "Wednesday")
        self.assertEqual(valentine["season"], "Lent")
        self.assertEqual(valentine["holidays"], "Valentine's Day")
        self.assertEqual(valentine["kalendar_year"], 2023)
        self.assertEqual(sum(1 for row in rows if row["pascal_moon"]), 1)

    def test_feast_rows(self) -> None:
        rows = report.feast_rows(2024)
        self.assertEqual(len(rows), 8)
        self.assertEqual(rows[0], {"feast": "Epiphany", "date": date(2024, 1, 6), "weekday": "Saturday"})
        self.assertEqual(rows[-1]["feast"], "Christmas Day")
        easter = next(row for row in rows if row["feast"] == "Easter Day")
        self.assertEqual(easter["date"], date(2024, 3, 31))

    def test_season_rows(self) -> None:
        rows = report.season_rows(2023)
        self.assertEqual(len(rows), 7)
        self.assertEqual(sum(row["days"] for row in rows), 365)
        self.assertEqual(rows[5]["season"], "Advent")
        self.assertEqual(rows[5]["start"], date(2023, 12, 3))


class ParseRequestTests(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(report.parse_request("2024-03-31", "2024"), (date(2024, 3, 31), 2024))
        self.assertEqual(report.parse_request(), (None, None))

    def test_invalid(self) -> None:
        with self.assertRaises(report.KalendarInputError) as ctx:
            report.parse_request("2024-02-30", "abc")
        fields = [issue["field"] for issue in ctx.exception.issues]
        self.assertEqual(fields, ["date", "year"])

    def test_year_out_of_range(self) -> None:
        with self.assertRaises(report.KalendarInputError) as ctx:
            report.parse_request(year="0")
        self.assertIn("between", ctx.exception.issues[0]["message"])


if __name__ == "__main__":
    unittest.main()
