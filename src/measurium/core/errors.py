"""
measurium.core.errors
=====================

Exception hierarchy for measurement operations.

Every error derives from `MeasurementError` and from the built-in exception a
caller would already expect for the same situation (`ValueError` for bad
values, `TypeError` for missing or incompatible operands, `ZeroDivisionError`
for division), so generic handlers keep working.
"""

from __future__ import annotations

from typing import Any


class MeasurementError(Exception):
    """Base class for every error raised by measurium."""


class InvalidValueError(MeasurementError, ValueError):
    """A numeric value is NaN, infinite, or not a real number."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        if message is None:
            message = f"Invalid value: {value!r}. Value must be a finite number."
        super().__init__(message)


class NullOperandError(MeasurementError, TypeError):
    """A required quantity operand is missing."""

    def __init__(self, argument: str = "other") -> None:
        self.argument = argument
        super().__init__(f"Quantity operand '{argument}' cannot be None")


class NullUnitError(MeasurementError, TypeError):
    """A required unit is missing."""

    def __init__(self, argument: str = "unit") -> None:
        self.argument = argument
        super().__init__(f"Unit '{argument}' cannot be None")


class UnsupportedOperationError(MeasurementError, TypeError):
    """The unit's category does not allow the requested arithmetic."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        if message is None:
            message = f"Operation {operation} is not supported for this unit category"
        super().__init__(message)


class DivideByZeroError(MeasurementError, ZeroDivisionError):
    """The divisor of a quantity division is zero (within epsilon)."""

    def __init__(self, message: str = "Cannot divide by zero quantity") -> None:
        super().__init__(message)


class InvalidUnitError(MeasurementError, ValueError):
    """A unit outside the declared set of a category was supplied."""


class CategoryMismatchError(InvalidUnitError, TypeError):
    """Units or quantities from two different categories were combined."""

    def __init__(self, expected: type, got: type, action: str = "combine") -> None:
        self.expected = expected
        self.got = got
        super().__init__(
            f"Cannot {action} units of different categories: "
            f"'{expected.__name__}' and '{got.__name__}'"
        )


__all__ = [
    "MeasurementError",
    "InvalidValueError",
    "NullOperandError",
    "NullUnitError",
    "UnsupportedOperationError",
    "DivideByZeroError",
    "InvalidUnitError",
    "CategoryMismatchError",
]
