"""Input boundary helpers for GoldCalc.

Callers hand over raw form values: numbers, numeric strings (possibly with
Indian digit grouping), blank strings or None. These helpers turn them into
floats and dates or raise the matching GoldCalcError.
"""
import math
from datetime import date, datetime

from goldcalc.config import DATE_FORMAT_INPUT, MIN_YEAR, MAX_YEAR
from goldcalc.exceptions import IncompleteInputError, InvalidRangeError


def to_number(value, field: str) -> float:
    """Coerce a raw value to a finite float.

    Raises:
        IncompleteInputError: If the value is missing, blank, non-numeric,
            NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        raise IncompleteInputError(field)

    if isinstance(value, str):
        cleaned = value.replace(',', '').strip()
        if not cleaned:
            raise IncompleteInputError(field)
        try:
            number = float(cleaned)
        except ValueError:
            raise IncompleteInputError(field, value)
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise IncompleteInputError(field, value)

    if not math.isfinite(number):
        raise IncompleteInputError(field, value)
    return number


def to_optional_number(value, field: str, default: float = 0.0) -> float:
    """Like to_number, but a missing or blank value yields the default."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return to_number(value, field)


def check_range(number: float, field: str, low: float = None, high: float = None,
                low_inclusive: bool = True, high_inclusive: bool = True) -> float:
    """Ensure a number lies within [low, high] (bounds optional).

    Returns:
        The number unchanged.

    Raises:
        InvalidRangeError: If the number falls outside the bounds.
    """
    if low is not None:
        if number < low or (number == low and not low_inclusive):
            raise InvalidRangeError(field, number, _describe_bounds(low, high, low_inclusive, high_inclusive))
    if high is not None:
        if number > high or (number == high and not high_inclusive):
            raise InvalidRangeError(field, number, _describe_bounds(low, high, low_inclusive, high_inclusive))
    return number


def _describe_bounds(low, high, low_inclusive, high_inclusive):
    if high is None:
        return f"{'>=' if low_inclusive else '>'} {low}"
    if low is None:
        return f"{'<=' if high_inclusive else '<'} {high}"
    left = '[' if low_inclusive else '('
    right = ']' if high_inclusive else ')'
    return f"{left}{low}, {high}{right}"


def to_date(value, field: str) -> date:
    """Coerce a raw value to a calendar date within the supported years.

    Accepts date, datetime (time part dropped) or a YYYY-MM-DD string.

    Raises:
        IncompleteInputError: If the value is missing or not a valid date.
        InvalidRangeError: If the year is outside MIN_YEAR..MAX_YEAR.
    """
    if value is None:
        raise IncompleteInputError(field)

    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise IncompleteInputError(field)
        try:
            parsed = datetime.strptime(text, DATE_FORMAT_INPUT).date()
        except ValueError:
            raise IncompleteInputError(field, value)
    else:
        raise IncompleteInputError(field, value)

    if parsed.year < MIN_YEAR or parsed.year > MAX_YEAR:
        raise InvalidRangeError(field, parsed.isoformat(), f"year in [{MIN_YEAR}, {MAX_YEAR}]")
    return parsed


def to_choice(value, choices, field: str):
    """Coerce a raw value to a member of an Enum class.

    Accepts a member or its value, case-insensitively for strings.

    Raises:
        IncompleteInputError: If the value is missing or blank.
        InvalidRangeError: If the value names no member.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise IncompleteInputError(field)
    if isinstance(value, choices):
        return value
    if isinstance(value, str):
        value = value.strip().lower()
    try:
        return choices(value)
    except ValueError:
        expected = ", ".join(member.value for member in choices)
        raise InvalidRangeError(field, value, f"one of {expected}")
