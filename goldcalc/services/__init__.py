"""Services package for GoldCalc calculators.

Each calculator is a focused, stateless service class that can be used
directly or through the GoldCalcEngine facade.
"""

from .alloy_mixer import AlloyMixer, karat_to_purity, purity_to_karat
from .amount_service import AmountService, rate_22k_from_24k, rate_24k_from_22k
from .interest_service import InterestService, calculate_time_period, convert_rate, daily_rate, yearly_rate
from .number_formatter import (
    NumberFormatter, format_currency, format_indian_number, format_weight,
    number_to_words, number_to_words_tamil
)

__all__ = ['AlloyMixer', 'AmountService', 'InterestService', 'NumberFormatter',
           'karat_to_purity', 'purity_to_karat', 'rate_22k_from_24k', 'rate_24k_from_22k',
           'calculate_time_period', 'convert_rate', 'daily_rate', 'yearly_rate',
           'format_currency', 'format_indian_number', 'format_weight',
           'number_to_words', 'number_to_words_tamil']
