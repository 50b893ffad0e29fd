"""Test suite for schedule tables and exports."""
import os
import shutil
import sys
import tempfile
import unittest
from datetime import date

import pandas as pd

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from goldcalc.data_structures import InterestType, RatePeriod, TimePeriod
from goldcalc.reports import COLUMNS, ScheduleReportGenerator, format_time_period
from goldcalc.services.interest_service import InterestService


class TestScheduleReport(unittest.TestCase):

    def setUp(self):
        self.gen = ScheduleReportGenerator()
        self.schedule = InterestService().compute_schedule(
            100000, 12, RatePeriod.YEARLY, date(2024, 1, 15), date(2024, 3, 10), InterestType.COMPOUND
        ).unwrap()
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_dataframe_rows_and_total(self):
        df = self.gen.to_dataframe(self.schedule)

        self.assertEqual(list(df.columns), COLUMNS)
        self.assertEqual(len(df), 4)  # 3 months + TOTAL
        self.assertEqual(list(df["Month"]), ["January 2024", "February 2024", "March 2024", "TOTAL"])

        total = df.iloc[-1]
        self.assertEqual(total["Days"], 56)
        self.assertAlmostEqual(total["Monthly Interest"], self.schedule.total_interest)
        self.assertAlmostEqual(total["Total Amount"], self.schedule.total_amount)
        self.assertAlmostEqual(df["Monthly Interest"].iloc[:-1].sum(), self.schedule.total_interest, delta=1e-9)

    def test_export_csv(self):
        path = os.path.join(self.tmp_dir, "schedule.csv")
        success, msg = self.gen.export(self.schedule, path)

        self.assertTrue(success, msg)
        read_back = pd.read_csv(path)
        self.assertEqual(list(read_back.columns), COLUMNS)
        self.assertEqual(len(read_back), 4)
        self.assertEqual(read_back["Month"].iloc[-1], "TOTAL")

    def test_export_excel(self):
        path = os.path.join(self.tmp_dir, "schedule.xlsx")
        success, msg = self.gen.export(self.schedule, path)

        self.assertTrue(success, msg)
        self.assertTrue(os.path.exists(path))
        self.assertGreater(os.path.getsize(path), 0)

    def test_export_failure_reported(self):
        path = os.path.join(self.tmp_dir, "missing", "dir", "schedule.csv")
        success, msg = self.gen.export(self.schedule, path)

        self.assertFalse(success)
        self.assertIn("CSV Export Failed", msg)

    def test_export_data(self):
        data = self.gen.build_export_data(self.schedule, title="Loan 42")

        self.assertEqual(data["title"], "Loan 42")
        self.assertEqual(data["principal_amount"], 100000)
        self.assertEqual(data["interest_period"], "yearly")
        self.assertEqual(data["interest_type"], "compound")
        self.assertEqual(data["start_date"], "15 Jan 2024")
        self.assertEqual(data["end_date"], "10 Mar 2024")
        self.assertEqual(data["time_period"], "0 years, 1 month, 25 days")
        self.assertFalse(data["use_rounding"])
        self.assertEqual(len(data["monthly_breakdown"]), 3)
        self.assertEqual(data["monthly_breakdown"][1]["days_in_month"], 29)


class TestFormatTimePeriod(unittest.TestCase):

    def test_plural_and_singular(self):
        self.assertEqual(format_time_period(TimePeriod(1, 2, 1)), "1 year, 2 months, 1 day")
        self.assertEqual(format_time_period(TimePeriod(0, 0, 0)), "0 years, 0 months, 0 days")


if __name__ == '__main__':
    unittest.main()
