"""Interest accrual service for GoldCalc.

This service handles all date-based interest operations including:
- Rate normalization (monthly/yearly to daily)
- Elapsed time decomposition into years, months and days
- Month-by-month accrual schedules for simple and compound interest
"""
import logging
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta

from goldcalc.config import DAYS_PER_YEAR, MONTHS_PER_YEAR, MIN_INTEREST_RATE, MAX_INTEREST_RATE
from goldcalc.data_structures import (
    InterestSchedule, InterestTerms, InterestType, MonthlyAccrualRecord, RatePeriod, TimePeriod
)
from goldcalc.exceptions import GoldCalcError, InvalidRangeError
from goldcalc.result import Result
from goldcalc.validators import to_number, to_date, to_choice, check_range

logger = logging.getLogger(__name__)


def yearly_rate(rate: float, rate_period: RatePeriod) -> float:
    """Normalize a quoted rate to a yearly percentage."""
    if RatePeriod(rate_period) == RatePeriod.MONTHLY:
        return rate * MONTHS_PER_YEAR
    return rate


def daily_rate(rate: float, rate_period: RatePeriod) -> float:
    """Daily percentage on a fixed 365-day year."""
    return yearly_rate(rate, rate_period) / DAYS_PER_YEAR


def convert_rate(rate: float, from_period: RatePeriod, to_period: RatePeriod) -> float:
    """Re-quote a rate for another period with a flat x12 / /12 conversion.

    No compounding is applied, so 1% monthly becomes 12% yearly and back.
    """
    from_period = RatePeriod(from_period)
    to_period = RatePeriod(to_period)
    if from_period == to_period:
        return rate
    if to_period == RatePeriod.YEARLY:
        return rate * MONTHS_PER_YEAR
    return rate / MONTHS_PER_YEAR


def calculate_time_period(start: date, end: date) -> TimePeriod:
    """Decompose an inclusive date range into whole years, months and days.

    Both the start and the end day count, so the range is measured up to
    the day after `end`. Whole years are taken first, then whole months,
    and whatever is left is counted in days.

    Args:
        start: First day of the range.
        end: Last day of the range (>= start).

    Returns:
        TimePeriod for the range.
    """
    end_exclusive = end + timedelta(days=1)

    years = 0
    while start + relativedelta(years=years + 1) <= end_exclusive:
        years += 1

    months = 0
    while start + relativedelta(years=years, months=months + 1) <= end_exclusive:
        months += 1

    anchor = start + relativedelta(years=years, months=months)
    return TimePeriod(years=years, months=months, days=(end_exclusive - anchor).days)


class InterestService:
    """Builds interest schedules for a principal over a date range.

    The engine walks calendar months from the month containing the start
    date to the month containing the end date. Each month accrues interest
    on the days of the range that fall inside it:

        monthly_interest = base * daily_rate * days / 100

    For simple interest the base is always the original principal. For
    compound interest the base grows by each month's interest, so interest
    capitalizes once per calendar month.

    The headline totals are read back from the schedule itself.
    """

    def compute_schedule(self, principal, rate, rate_period, start, end,
                         interest_type=InterestType.SIMPLE) -> Result[InterestSchedule]:
        """Compute the interest schedule and totals.

        Args:
            principal: Amount lent (> 0).
            rate: Interest rate in percent [0, 100].
            rate_period: RatePeriod.MONTHLY or RatePeriod.YEARLY.
            start: First day of the loan (date or YYYY-MM-DD).
            end: Last day of the loan, inclusive (date or YYYY-MM-DD).
            interest_type: InterestType.SIMPLE or InterestType.COMPOUND.

        Returns:
            Result with an InterestSchedule, or a failure with error_type
            INCOMPLETE_INPUT or INVALID_RANGE.
        """
        try:
            terms = InterestTerms(
                principal=check_range(to_number(principal, 'principal'), 'principal',
                                      low=0, low_inclusive=False),
                rate=check_range(to_number(rate, 'rate'), 'rate', MIN_INTEREST_RATE, MAX_INTEREST_RATE),
                rate_period=to_choice(rate_period, RatePeriod, 'rate_period'),
                interest_type=to_choice(interest_type, InterestType, 'interest_type')
            )
            start_date = to_date(start, 'start')
            end_date = to_date(end, 'end')
            if end_date < start_date:
                raise InvalidRangeError('end', end_date.isoformat(), f">= {start_date.isoformat()}")
        except GoldCalcError as e:
            logger.debug("Interest calculation rejected: %s", e)
            return Result.fail(str(e), e.error_type)

        rows = self.build_monthly_schedule(terms, start_date, end_date)
        total_interest = sum(row.monthly_interest for row in rows)

        schedule = InterestSchedule(
            terms=terms,
            start=start_date,
            end=end_date,
            time_period=calculate_time_period(start_date, end_date),
            monthly_schedule=rows,
            total_interest=total_interest,
            total_amount=terms.principal + total_interest
        )
        logger.debug(
            "Interest %s %s%% %s from %s to %s: %d months, interest %.2f",
            terms.interest_type.value, terms.rate, terms.rate_period.value,
            start_date, end_date, len(rows), total_interest
        )
        return Result.ok(schedule)

    def build_monthly_schedule(self, terms: InterestTerms, start: date, end: date):
        """Walk the calendar months of [start, end] and accrue interest.

        Args:
            terms: Validated interest terms.
            start: First day of the range.
            end: Last day of the range (>= start).

        Returns:
            List of MonthlyAccrualRecord in chronological order.
        """
        per_day = daily_rate(terms.rate, terms.rate_period)
        compound = terms.interest_type == InterestType.COMPOUND

        rows = []
        current_principal = terms.principal
        cumulative_interest = 0.0

        cursor = start.replace(day=1)
        last_month = end.replace(day=1)

        while cursor <= last_month:
            month_end = cursor + relativedelta(months=1, days=-1)
            clipped_start = max(start, cursor)
            clipped_end = min(end, month_end)

            if clipped_end < clipped_start:
                cursor += relativedelta(months=1)
                continue

            days = min((clipped_end - clipped_start).days + 1, month_end.day)

            base = current_principal if compound else terms.principal
            monthly_interest = base * per_day * days / 100
            cumulative_interest += monthly_interest

            rows.append(MonthlyAccrualRecord(
                month_label=cursor.strftime("%B"),
                month_number=cursor.month,
                year=cursor.year,
                days_counted=days,
                principal_base=base,
                monthly_interest=monthly_interest,
                cumulative_interest=cumulative_interest,
                running_total=terms.principal + cumulative_interest
            ))

            if compound:
                current_principal += monthly_interest
            cursor += relativedelta(months=1)

        return rows
