"""
Report module for GoldCalc.
Turns interest schedules into tables and exports them to CSV or Excel,
and builds the summary handed to external PDF renderers.
"""
import logging

import pandas as pd

from goldcalc.config import DATE_FORMAT_DISPLAY
from goldcalc.data_structures import InterestSchedule, TimePeriod

logger = logging.getLogger(__name__)

COLUMNS = ["Month", "Days", "Principal", "Monthly Interest", "Cumulative Interest", "Total Amount"]

# Excel number format with lakh/crore separators
INDIAN_NUM_FORMAT = '[>=10000000]##\\,##\\,##\\,##0.00;[>=100000]##\\,##\\,##0.00;##,##0.00'


def format_time_period(period: TimePeriod) -> str:
    """English rendering of a time period, e.g. "1 year, 2 months, 3 days"."""
    def unit(count, name):
        return f"{count} {name}" if count == 1 else f"{count} {name}s"
    return ", ".join([unit(period.years, "year"), unit(period.months, "month"), unit(period.days, "day")])


class ScheduleReportGenerator:
    def __init__(self, header_bg="#F8F6EC", total_bg="#F0F0F0"):
        self.header_bg = header_bg
        self.total_bg = total_bg

    def to_dataframe(self, schedule: InterestSchedule) -> pd.DataFrame:
        """Monthly breakdown as a DataFrame with a closing TOTAL row."""
        rows = [{
            "Month": f"{row.month_label} {row.year}",
            "Days": row.days_counted,
            "Principal": row.principal_base,
            "Monthly Interest": row.monthly_interest,
            "Cumulative Interest": row.cumulative_interest,
            "Total Amount": row.running_total,
        } for row in schedule.monthly_schedule]

        df = pd.DataFrame(rows, columns=COLUMNS)
        if df.empty:
            return df

        total_row = {
            "Month": "TOTAL",
            "Days": int(df["Days"].sum()),
            "Principal": schedule.terms.principal,
            "Monthly Interest": schedule.total_interest,
            "Cumulative Interest": schedule.total_interest,
            "Total Amount": schedule.total_amount,
        }
        return pd.concat([df, pd.DataFrame([total_row])], ignore_index=True)

    def build_export_data(self, schedule: InterestSchedule, title="Interest Calculation"):
        """Collect the values an external PDF/PNG renderer prints.

        Day-to-month rounding is not supported, so use_rounding is always
        False.
        """
        terms = schedule.terms
        return {
            "title": title,
            "principal_amount": terms.principal,
            "interest_rate": terms.rate,
            "interest_period": terms.rate_period.value,
            "start_date": schedule.start.strftime(DATE_FORMAT_DISPLAY),
            "end_date": schedule.end.strftime(DATE_FORMAT_DISPLAY),
            "time_period": format_time_period(schedule.time_period),
            "interest_type": terms.interest_type.value,
            "use_rounding": False,
            "interest_amount": schedule.total_interest,
            "total_amount": schedule.total_amount,
            "monthly_breakdown": [{
                "month": row.month_label,
                "month_number": row.month_number,
                "year": row.year,
                "days_in_month": row.days_counted,
                "monthly_interest": row.monthly_interest,
                "cumulative_interest": row.cumulative_interest,
            } for row in schedule.monthly_schedule],
        }

    def export(self, schedule: InterestSchedule, output_path: str):
        """Write the breakdown to CSV (by extension) or Excel.

        Returns:
            (success, message) tuple.
        """
        df = self.to_dataframe(schedule)
        if output_path.lower().endswith('.csv'):
            return self._export_to_csv(df, output_path)
        return self._export_to_excel(df, output_path)

    def _export_to_excel(self, df, output_path):
        """Export DataFrame to Excel with formatting."""
        try:
            with pd.ExcelWriter(output_path, engine='xlsxwriter') as writer:
                df.to_excel(writer, index=False, sheet_name='Monthly Breakdown')
                workbook = writer.book
                worksheet = writer.sheets['Monthly Breakdown']

                header_fmt = workbook.add_format({'bold': True, 'border': 1, 'bg_color': self.header_bg})
                num_fmt = workbook.add_format({'num_format': INDIAN_NUM_FORMAT})
                total_fmt = workbook.add_format({'bold': True, 'border': 1, 'num_format': INDIAN_NUM_FORMAT,
                                                 'bg_color': self.total_bg})

                for col_num, value in enumerate(df.columns.values):
                    worksheet.write(0, col_num, value, header_fmt)

                worksheet.set_column('A:A', 18)  # Month
                worksheet.set_column('B:B', 8)   # Days
                worksheet.set_column('C:F', 18, num_fmt)

                if not df.empty:
                    total_row_idx = len(df)
                    for col_num, col_name in enumerate(df.columns):
                        val = df.iloc[-1][col_name]
                        if hasattr(val, 'item'):
                            val = val.item()  # numpy scalar
                        worksheet.write(total_row_idx, col_num, val, total_fmt)

            return True, "Report generated successfully."
        except Exception as e:
            logger.exception("Excel export to %s failed", output_path)
            return False, f"Excel Export Failed: {e}"

    def _export_to_csv(self, df, output_path):
        """Export DataFrame to CSV."""
        try:
            df.to_csv(output_path, index=False)
            return True, "Report generated successfully (CSV)."
        except Exception as e:
            logger.exception("CSV export to %s failed", output_path)
            return False, f"CSV Export Failed: {e}"
