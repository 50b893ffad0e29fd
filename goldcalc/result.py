"""Result pattern for calculator outputs in GoldCalc.

Calculators never raise on bad input. They return a Result that is either
a computed value object or a failure carrying the reason, so callers can
show "no result" or a specific explanation.
"""
from dataclasses import dataclass
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Represents the outcome of a calculation.

    Attributes:
        success: Whether the calculation produced a value.
        value: The computed value object on success, None on failure.
        error: Error message on failure, None on success.
        error_type: Failure category (see ErrorType).

    Usage:
        result = mixer.compute_adjustment(10, 91.6, 75)
        if result.success:
            print(result.value.weight_to_add)
        elif result.error_type == ErrorType.INFEASIBLE_TARGET:
            print("Not possible with this metal")
    """
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, value: T = None) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, error_type: str = None) -> 'Result[T]':
        """Create a failure result.

        Args:
            error: Error message describing why no value was computed.
            error_type: Failure category for programmatic handling.
        """
        return cls(success=False, error=error, error_type=error_type)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """Get the value, raising an exception if the calculation failed.

        Raises:
            ValueError: If the calculation failed.
        """
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error}")
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value or a default if the calculation failed."""
        return self.value if self.success else default


class ErrorType:
    """Standard failure categories."""
    INCOMPLETE_INPUT = "INCOMPLETE_INPUT"
    INVALID_RANGE = "INVALID_RANGE"
    INFEASIBLE_TARGET = "INFEASIBLE_TARGET"
