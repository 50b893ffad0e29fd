"""Alloy mixing service for GoldCalc.

Works out how much metal to add to a gold item so that it reaches a
target purity:
- Diluting: add base metal (copper, 0% fine) to lower the purity
- Enriching: add higher-purity gold to raise it
"""
import logging

from goldcalc.config import (
    MIN_PURITY,
    MAX_PURITY,
    DEFAULT_ADDED_METAL_PURITY,
    PURITY_EPSILON,
    FULL_KARAT,
)
from goldcalc.data_structures import AdjustmentKind, AlloyAdjustment
from goldcalc.exceptions import GoldCalcError, InfeasibleTargetError
from goldcalc.result import Result
from goldcalc.validators import to_number, check_range

logger = logging.getLogger(__name__)


def karat_to_purity(karat: float) -> float:
    """Convert a karat value to percent purity (24k = 100%)."""
    return karat * MAX_PURITY / FULL_KARAT


def purity_to_karat(purity: float) -> float:
    """Convert percent purity to karat (100% = 24k)."""
    return purity * FULL_KARAT / MAX_PURITY


class AlloyMixer:
    """Computes alloy adjustments for a target purity.

    Both directions solve the same fine-content balance. With W grams at
    purity c, adding x grams at purity a to reach purity t requires

        W*c + x*a = (W + x)*t   =>   x = W*(t - c) / (a - t)

    Diluting uses a = 0, which reduces to x = W*c/t - W.
    """

    def __init__(self, epsilon: float = PURITY_EPSILON):
        """Initialize AlloyMixer.

        Args:
            epsilon: Relative tolerance under which purities are considered
                equal and added weights are considered zero.
        """
        self.epsilon = epsilon

    @staticmethod
    def pure_content(weight: float, purity: float) -> float:
        """Grams of fine metal in `weight` grams at `purity` percent."""
        return weight * purity / 100

    def compute_adjustment(self, weight, current_purity, target_purity,
                           added_metal_purity=DEFAULT_ADDED_METAL_PURITY) -> Result[AlloyAdjustment]:
        """Determine what must be added to reach the target purity.

        Args:
            weight: Current weight in grams (> 0).
            current_purity: Current purity in percent [0, 100].
            target_purity: Desired purity in percent (0, 100].
            added_metal_purity: Purity of the gold added when enriching.
                A blank value falls back to 100%.

        Returns:
            Result with an AlloyAdjustment, or a failure with error_type
            INCOMPLETE_INPUT, INVALID_RANGE or INFEASIBLE_TARGET.
        """
        try:
            w = check_range(to_number(weight, 'weight'), 'weight', low=0, low_inclusive=False)
            current = check_range(to_number(current_purity, 'current_purity'),
                                  'current_purity', MIN_PURITY, MAX_PURITY)
            target = check_range(to_number(target_purity, 'target_purity'),
                                 'target_purity', MIN_PURITY, MAX_PURITY, low_inclusive=False)
            if added_metal_purity is None or (isinstance(added_metal_purity, str) and not added_metal_purity.strip()):
                added = float(DEFAULT_ADDED_METAL_PURITY)
            else:
                added = check_range(to_number(added_metal_purity, 'added_metal_purity'),
                                    'added_metal_purity', MIN_PURITY, MAX_PURITY)

            adjustment = self._solve(w, current, target, added)
        except GoldCalcError as e:
            logger.debug("Alloy adjustment rejected: %s", e)
            return Result.fail(str(e), e.error_type)

        logger.debug("Alloy adjustment for %sg @ %s%% -> %s%%: %s", w, current, target, adjustment)
        return Result.ok(adjustment)

    def _solve(self, weight: float, current: float, target: float, added: float) -> AlloyAdjustment:
        if self._same(target, current):
            return self._no_change(weight)

        if target < current:
            total = self.pure_content(weight, current) / (target / 100)
            return self._build(AdjustmentKind.ADD_DILUENT, weight, total - weight)

        # Metal no purer than the target can never lift the mix up to it.
        if added <= target or self._same(added, target):
            raise InfeasibleTargetError(target, added)

        to_add = weight * (target - current) / (added - target)
        return self._build(AdjustmentKind.ADD_METAL, weight, to_add)

    def _build(self, kind: AdjustmentKind, weight: float, to_add: float) -> AlloyAdjustment:
        if to_add <= self.epsilon * weight:
            return self._no_change(weight)
        return AlloyAdjustment(kind=kind, weight_to_add=to_add, resulting_total_weight=weight + to_add)

    def _same(self, a: float, b: float) -> bool:
        return abs(a - b) <= self.epsilon * max(abs(a), abs(b), 1.0)

    @staticmethod
    def _no_change(weight: float) -> AlloyAdjustment:
        return AlloyAdjustment(kind=AdjustmentKind.NO_CHANGE, weight_to_add=0.0, resulting_total_weight=weight)
