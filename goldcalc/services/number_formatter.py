"""Number formatting for GoldCalc.

Renders computed amounts for display:
- Indian digit grouping (12,34,567)
- Currency and weight strings
- Amounts in words on the Indian scale (crore, lakh, thousand, hundred)
  in English and Tamil
"""
import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

from goldcalc.data_structures import Language
from goldcalc.exceptions import GoldCalcError
from goldcalc.validators import to_number

logger = logging.getLogger(__name__)

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

CURRENCY_SYMBOL = "₹"

VOCABULARIES = {
    Language.ENGLISH: {
        'ones': [
            '', 'One', 'Two', 'Three', 'Four', 'Five', 'Six', 'Seven', 'Eight', 'Nine',
            'Ten', 'Eleven', 'Twelve', 'Thirteen', 'Fourteen', 'Fifteen', 'Sixteen',
            'Seventeen', 'Eighteen', 'Nineteen'
        ],
        'tens': [
            '', '', 'Twenty', 'Thirty', 'Forty', 'Fifty', 'Sixty', 'Seventy', 'Eighty', 'Ninety'
        ],
        'hundred': 'Hundred',
        'thousand': 'Thousand',
        'lakh': 'Lakh',
        'crore': 'Crore',
        'zero': 'Zero',
        'currency': 'Rupees',
        'subunit': 'Paise',
        'and': 'and',
    },
    Language.TAMIL: {
        'ones': [
            '', 'ஒன்று', 'இரண்டு', 'மூன்று', 'நான்கு', 'ஐந்து', 'ஆறு', 'ஏழு', 'எட்டு', 'ஒன்பது',
            'பத்து', 'பதினொன்று', 'பன்னிரண்டு', 'பதின்மூன்று', 'பதினான்கு', 'பதினைந்து', 'பதினாறு',
            'பதினேழு', 'பதினெட்டு', 'பத்தொன்பது'
        ],
        'tens': [
            '', '', 'இருபது', 'முப்பது', 'நாற்பது', 'ஐம்பது', 'அறுபது', 'எழுபது', 'எண்பது', 'தொண்ணூறு'
        ],
        'hundred': 'நூறு',
        'thousand': 'ஆயிரம்',
        'lakh': 'லட்சம்',
        'crore': 'கோடி',
        'zero': 'பூஜ்யம்',
        'currency': 'ரூபாய்',
        'subunit': 'பைசா',
        'and': 'மற்றும்',
    },
}


def _to_cents_text(value: float) -> str:
    """Round to paise and render as a plain "-1234.50" string."""
    amount = Decimal(str(value))
    with localcontext() as ctx:
        # Precision must cover every integer digit plus the two decimals.
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return f"{amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"


def _coerce(value, default=None):
    try:
        return to_number(value, 'amount')
    except GoldCalcError as e:
        logger.debug("Cannot format amount: %s", e)
        return default


def group_indian_digits(digits: str) -> str:
    """Insert Indian-style separators into a string of integer digits.

    The last three digits form one group and the rest are paired from the
    right: "12345678" -> "1,23,45,678".
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)
    return ','.join(groups)


def format_indian_number(num) -> str:
    """Format a number with Indian digit grouping.

    The value is rounded to two decimals; a fractional part is kept only
    when non-zero, without trailing zeros (1234.5 -> "1,234.5").
    """
    value = _coerce(num)
    if value is None:
        return '0'

    text = _to_cents_text(value)
    sign = ''
    if text.startswith('-'):
        sign, text = '-', text[1:]

    integer_part, decimal_part = text.split('.')
    decimal_part = decimal_part.rstrip('0')

    formatted = sign + group_indian_digits(integer_part)
    if decimal_part:
        formatted += '.' + decimal_part
    return formatted


def format_currency(amount) -> str:
    """Format an amount as rupees with Indian grouping and two decimals."""
    text = _to_cents_text(_coerce(amount, 0.0))
    sign = ''
    if text.startswith('-'):
        sign, text = '-', text[1:]
    integer_part, decimal_part = text.split('.')
    return f"{sign}{CURRENCY_SYMBOL}{group_indian_digits(integer_part)}.{decimal_part}"


def format_weight(grams) -> str:
    """Format a weight in grams with three decimals; blank input renders as 0.000."""
    return f"{_coerce(grams, 0.0):.3f}"


class NumberFormatter:
    """Converts amounts to words in a selected language.

    Usage:
        formatter = NumberFormatter()
        formatter.number_to_words(1250.5)
        # 'One Thousand Two Hundred Fifty Rupees and Fifty Paise'
    """

    def __init__(self, language: Language = Language.ENGLISH):
        self.language = Language(language)

    def number_to_words(self, amount, language: Language = None) -> str:
        """Spell out an amount as rupees and paise.

        Args:
            amount: Non-negative amount; rounded to paise.
            language: Overrides the formatter's default language.

        Returns:
            The amount in words. Zero, negative and non-numeric amounts
            render as the zero literal ("Zero Rupees").
        """
        vocab = VOCABULARIES[Language(language) if language is not None else self.language]

        value = _coerce(amount, 0.0)
        if value < 0:
            value = 0.0

        rupee_text, paise_text = _to_cents_text(value).split('.')
        rupees = int(rupee_text)
        paise = int(paise_text)

        if rupees == 0:
            words = f"{vocab['zero']} {vocab['currency']}"
        else:
            words = f"{self._convert_integer(rupees, vocab)} {vocab['currency']}"

        if paise > 0:
            words += f" {vocab['and']} {self._convert_hundreds(paise, vocab)} {vocab['subunit']}"
        return words

    def number_to_words_tamil(self, amount) -> str:
        return self.number_to_words(amount, Language.TAMIL)

    def _convert_integer(self, n: int, vocab: dict) -> str:
        parts = []

        crores = n // CRORE
        if crores:
            # Crore counts past 999 are spelled with the same scale words.
            parts.append(f"{self._convert_integer(crores, vocab)} {vocab['crore']}")

        lakhs = (n % CRORE) // LAKH
        if lakhs:
            parts.append(f"{self._convert_hundreds(lakhs, vocab)} {vocab['lakh']}")

        thousands = (n % LAKH) // THOUSAND
        if thousands:
            parts.append(f"{self._convert_hundreds(thousands, vocab)} {vocab['thousand']}")

        hundreds = n % THOUSAND
        if hundreds:
            parts.append(self._convert_hundreds(hundreds, vocab))

        return ' '.join(parts)

    @staticmethod
    def _convert_hundreds(n: int, vocab: dict) -> str:
        """Spell out 0 <= n < 1000."""
        words = []
        if n >= 100:
            words.append(vocab['ones'][n // 100])
            words.append(vocab['hundred'])
            n %= 100
        if n >= 20:
            words.append(vocab['tens'][n // 10])
            n %= 10
        if n > 0:
            words.append(vocab['ones'][n])
        return ' '.join(words)


def number_to_words(amount, language: Language = Language.ENGLISH) -> str:
    return NumberFormatter(language).number_to_words(amount)


def number_to_words_tamil(amount) -> str:
    return NumberFormatter(Language.TAMIL).number_to_words(amount)
