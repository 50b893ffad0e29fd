"""Amount calculation service for GoldCalc.

Values a gold item from its weight, purity and the 24k (pure) rate, then
adds miscellaneous charges (making/wastage) as a fixed amount or as a
percentage of the gold value.
"""
import logging
from decimal import ROUND_HALF_UP, Decimal

from goldcalc.config import MIN_PURITY, MAX_PURITY, FULL_KARAT, RATE_22K_KARAT
from goldcalc.data_structures import AmountBreakdown, MiscMode
from goldcalc.exceptions import GoldCalcError
from goldcalc.result import Result
from goldcalc.validators import to_number, to_optional_number, check_range, to_choice

logger = logging.getLogger(__name__)


def _round_to_unit(value: float) -> int:
    """Round half away from zero to a whole currency unit."""
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def rate_22k_from_24k(rate_24k):
    """Derive the 22k rate shown next to an entered 24k rate.

    Returns None when the entered rate is blank or non-numeric.
    """
    rate = _coerce_rate(rate_24k, 'rate_24k')
    if rate is None:
        return None
    return _round_to_unit(rate * RATE_22K_KARAT / FULL_KARAT)


def rate_24k_from_22k(rate_22k):
    """Derive the 24k rate from an entered 22k rate."""
    rate = _coerce_rate(rate_22k, 'rate_22k')
    if rate is None:
        return None
    return _round_to_unit(rate * FULL_KARAT / RATE_22K_KARAT)


def _coerce_rate(value, field: str):
    try:
        return to_number(value, field)
    except GoldCalcError as e:
        logger.debug("Rate conversion skipped: %s", e)
        return None


class AmountService:
    """Computes the monetary value of a gold item.

    The gold value is always the pure-metal weight times the 24k rate.
    Callers quoting a 22k rate convert it with rate_24k_from_22k first.
    """

    def compute_amount(self, weight, purity, rate_per_24k,
                       misc_mode=MiscMode.FIXED, misc_value=None) -> Result[AmountBreakdown]:
        """Compute the value breakdown for a gold item.

        Args:
            weight: Gross weight in grams.
            purity: Purity in percent [0, 100].
            rate_per_24k: Price of one gram of pure (24k) gold.
            misc_mode: MiscMode.FIXED (amount) or MiscMode.PERCENT (of gold value).
            misc_value: The fixed charge or the percentage. Blank counts as 0.

        Returns:
            Result with an AmountBreakdown, or a failure when an input is
            missing, non-numeric or negative, or when the weight is zero.
        """
        try:
            w = check_range(to_number(weight, 'weight'), 'weight', low=0, low_inclusive=False)
            p = check_range(to_number(purity, 'purity'), 'purity', MIN_PURITY, MAX_PURITY)
            rate = check_range(to_number(rate_per_24k, 'rate_per_24k'), 'rate_per_24k', low=0)
            mode = to_choice(misc_mode, MiscMode, 'misc_mode')
            misc_input = check_range(to_optional_number(misc_value, 'misc_value'), 'misc_value', low=0)
        except GoldCalcError as e:
            logger.debug("Amount calculation rejected: %s", e)
            return Result.fail(str(e), e.error_type)

        pure_weight = w * p / 100
        gold_value = pure_weight * rate

        if mode == MiscMode.FIXED:
            misc = misc_input
        else:
            misc = gold_value * misc_input / 100

        breakdown = AmountBreakdown(
            pure_weight=pure_weight,
            gold_value=gold_value,
            misc_value=misc,
            total=gold_value + misc
        )
        logger.debug("Amount for %sg @ %s%%: %s", w, p, breakdown)
        return Result.ok(breakdown)
