"""GoldCalc: purity, amount and interest calculators for gold transactions."""

from goldcalc.data_structures import (
    AdjustmentKind, AlloyAdjustment, AmountBreakdown, InterestSchedule, InterestTerms,
    InterestType, Language, MiscMode, MonthlyAccrualRecord, RatePeriod, TimePeriod
)
from goldcalc.engine import GoldCalcEngine
from goldcalc.result import ErrorType, Result
from goldcalc.session_store import CalculatorSessionStore

__version__ = "1.0.0"
