"""Calculator engine for GoldCalc.

This module provides the GoldCalcEngine class which acts as a facade over
the focused service classes in goldcalc/services/ and records the latest
inputs and results of each calculator in an injected session store.

Service Classes:
    - InterestService: Date-based simple/compound interest schedules
    - AlloyMixer: Purity adjustment by adding base metal or gold
    - AmountService: Gold value and miscellaneous charges
    - NumberFormatter: Amounts in words
"""
import logging

from goldcalc.config import SESSION_KEY_INTEREST, SESSION_KEY_PURITY, SESSION_KEY_AMOUNT, DEFAULT_ADDED_METAL_PURITY
from goldcalc.data_structures import InterestType, Language, MiscMode
from goldcalc.reports import ScheduleReportGenerator
from goldcalc.services import (
    AlloyMixer, AmountService, InterestService, NumberFormatter,
    convert_rate, rate_22k_from_24k, rate_24k_from_22k
)

logger = logging.getLogger(__name__)


class GoldCalcEngine:
    """Entry point for callers (UI, exporters) of the calculators.

    The engine itself is stateless apart from the session store it is
    given. Without a store nothing is recorded.

    Attributes:
        session: CalculatorSessionStore instance, or None.
        interest_service: InterestService instance (lazy-loaded).
        alloy_mixer: AlloyMixer instance (lazy-loaded).
        amount_service: AmountService instance (lazy-loaded).
        report_generator: ScheduleReportGenerator instance (lazy-loaded).
    """

    def __init__(self, session_store=None):
        self.session = session_store
        self._interest_service = None
        self._alloy_mixer = None
        self._amount_service = None
        self._report_generator = None

    @property
    def interest_service(self):
        """Lazy-load InterestService instance."""
        if self._interest_service is None:
            self._interest_service = InterestService()
        return self._interest_service

    @property
    def alloy_mixer(self):
        """Lazy-load AlloyMixer instance."""
        if self._alloy_mixer is None:
            self._alloy_mixer = AlloyMixer()
        return self._alloy_mixer

    @property
    def amount_service(self):
        """Lazy-load AmountService instance."""
        if self._amount_service is None:
            self._amount_service = AmountService()
        return self._amount_service

    @property
    def report_generator(self):
        """Lazy-load ScheduleReportGenerator instance."""
        if self._report_generator is None:
            self._report_generator = ScheduleReportGenerator()
        return self._report_generator

    def _record(self, key, inputs, result):
        if self.session is None:
            return
        self.session.set_calculator_data(key, {
            'inputs': inputs,
            'result': result.value.to_dict() if result.success else None,
            'error': result.error,
            'error_type': result.error_type,
        })

    # ===== INTEREST =====

    def calculate_interest(self, principal, rate, rate_period, start, end,
                           interest_type=InterestType.SIMPLE):
        """Compute an interest schedule.

        Delegates to InterestService.
        """
        result = self.interest_service.compute_schedule(
            principal, rate, rate_period, start, end, interest_type
        )
        self._record(SESSION_KEY_INTEREST, {
            'principal': principal,
            'rate': rate,
            'rate_period': rate_period,
            'start': start,
            'end': end,
            'interest_type': interest_type,
        }, result)
        return result

    def convert_rate(self, rate, from_period, to_period):
        """Re-quote a rate when the user switches between monthly and yearly."""
        return convert_rate(rate, from_period, to_period)

    def export_schedule(self, schedule, output_path):
        """Write a schedule to CSV or Excel.

        Delegates to ScheduleReportGenerator.
        """
        return self.report_generator.export(schedule, output_path)

    def export_data(self, schedule, title="Interest Calculation"):
        """Summary for external PDF/PNG renderers."""
        return self.report_generator.build_export_data(schedule, title)

    # ===== PURITY =====

    def calculate_adjustment(self, weight, current_purity, target_purity,
                             added_metal_purity=DEFAULT_ADDED_METAL_PURITY):
        """Compute the metal to add for a target purity.

        Delegates to AlloyMixer.
        """
        result = self.alloy_mixer.compute_adjustment(
            weight, current_purity, target_purity, added_metal_purity
        )
        self._record(SESSION_KEY_PURITY, {
            'weight': weight,
            'current_purity': current_purity,
            'target_purity': target_purity,
            'added_metal_purity': added_metal_purity,
        }, result)
        return result

    # ===== AMOUNT =====

    def calculate_amount(self, weight, purity, rate_per_24k, misc_mode=MiscMode.FIXED, misc_value=None):
        """Compute the value of a gold item.

        Delegates to AmountService.
        """
        result = self.amount_service.compute_amount(weight, purity, rate_per_24k, misc_mode, misc_value)
        self._record(SESSION_KEY_AMOUNT, {
            'weight': weight,
            'purity': purity,
            'rate_per_24k': rate_per_24k,
            'misc_mode': misc_mode,
            'misc_value': misc_value,
        }, result)
        return result

    def rate_22k_from_24k(self, rate_24k):
        return rate_22k_from_24k(rate_24k)

    def rate_24k_from_22k(self, rate_22k):
        return rate_24k_from_22k(rate_22k)

    # ===== FORMATTING =====

    def amount_in_words(self, amount, language=None):
        """Spell out an amount, defaulting to the session's language."""
        if language is None:
            language = self.session.language if self.session is not None else Language.ENGLISH
        return NumberFormatter(language).number_to_words(amount)

    # ===== SESSION =====

    def reset(self, key):
        """Forget the stored snapshot of one calculator."""
        if self.session is not None:
            self.session.remove_calculator_data(key)

    def reset_all(self):
        """Forget every calculator snapshot, keeping preferences."""
        if self.session is not None:
            self.session.clear_calculator_data()
