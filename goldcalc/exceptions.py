"""Custom exceptions for GoldCalc.

These are raised by input validation and caught at each calculator's
public boundary, where they become failed results.
"""
from goldcalc.result import ErrorType


class GoldCalcError(Exception):
    """Base exception for all GoldCalc errors."""

    error_type = None

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class IncompleteInputError(GoldCalcError):
    """Raised when a required field is missing, blank or not a number."""

    error_type = ErrorType.INCOMPLETE_INPUT

    def __init__(self, field: str, value=None):
        details = {'field': field}
        if value is not None:
            details['value'] = value
        super().__init__(f"Missing or non-numeric value for '{field}'", details)


class InvalidRangeError(GoldCalcError):
    """Raised when a value is present but outside its documented range."""

    error_type = ErrorType.INVALID_RANGE

    def __init__(self, field: str, value, expected: str):
        details = {
            'field': field,
            'value': value,
            'expected': expected
        }
        super().__init__(f"Value for '{field}' is out of range (expected {expected})", details)


class InfeasibleTargetError(GoldCalcError):
    """Raised when a target purity cannot be reached with the chosen additive."""

    error_type = ErrorType.INFEASIBLE_TARGET

    def __init__(self, target_purity: float, added_metal_purity: float):
        details = {
            'target_purity': target_purity,
            'added_metal_purity': added_metal_purity
        }
        message = (
            f"Target purity {target_purity}% cannot be reached by adding "
            f"{added_metal_purity}% metal"
        )
        super().__init__(message, details)
