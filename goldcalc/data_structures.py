from dataclasses import dataclass, field, asdict
from datetime import date
from enum import Enum
from typing import List, Dict, Any


class RatePeriod(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class InterestType(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


class MiscMode(str, Enum):
    FIXED = "amount"
    PERCENT = "percentage"


class AdjustmentKind(str, Enum):
    NO_CHANGE = "equal"
    ADD_DILUENT = "copper"
    ADD_METAL = "gold"


class Language(str, Enum):
    ENGLISH = "en"
    TAMIL = "ta"


@dataclass(frozen=True)
class InterestTerms:
    principal: float
    rate: float
    rate_period: RatePeriod
    interest_type: InterestType

    def to_dict(self) -> Dict[str, Any]:
        return {
            'principal': self.principal,
            'rate': self.rate,
            'rate_period': self.rate_period.value,
            'interest_type': self.interest_type.value,
        }


@dataclass(frozen=True)
class TimePeriod:
    """Elapsed whole years, whole months and leftover days."""
    years: int
    months: int
    days: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MonthlyAccrualRecord:
    """One calendar month of an interest schedule."""
    month_label: str
    month_number: int
    year: int
    days_counted: int
    principal_base: float
    monthly_interest: float
    cumulative_interest: float
    running_total: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class InterestSchedule:
    """Full outcome of an interest calculation.

    total_interest is always the sum of monthly_interest over
    monthly_schedule.
    """
    terms: InterestTerms
    start: date
    end: date
    time_period: TimePeriod
    monthly_schedule: List[MonthlyAccrualRecord] = field(default_factory=list)
    total_interest: float = 0.0
    total_amount: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'terms': self.terms.to_dict(),
            'start': self.start.isoformat(),
            'end': self.end.isoformat(),
            'time_period': self.time_period.to_dict(),
            'monthly_schedule': [row.to_dict() for row in self.monthly_schedule],
            'total_interest': self.total_interest,
            'total_amount': self.total_amount,
        }


@dataclass(frozen=True)
class AlloyAdjustment:
    kind: AdjustmentKind
    weight_to_add: float
    resulting_total_weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'weight_to_add': self.weight_to_add,
            'resulting_total_weight': self.resulting_total_weight,
        }


@dataclass(frozen=True)
class AmountBreakdown:
    pure_weight: float
    gold_value: float
    misc_value: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
