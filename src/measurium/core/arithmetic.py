"""
measurium.core.arithmetic
=========================

Addition, subtraction and division of quantities, implemented once for every
category.

All three operations run through `_execute`: operands are validated in a
fixed order, the unit is asked whether its category allows the operation,
both values are normalised to the base unit, and the operator is applied
there. Which unit each operand was written in never affects the result.

Results of add/subtract are converted to the target unit and then rounded to
two decimals (half away from zero). Division returns the raw base-unit ratio.
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Dict, Optional, TypeVar, cast

from measurium.core.errors import DivideByZeroError, InvalidValueError, NullOperandError, NullUnitError
from measurium.core.quantity import Quantity, require_same_category
from measurium.core.unit import Unit
from measurium.core.utils import (
    DIVISION_EPSILON,
    RESULT_DECIMALS,
    ensure_finite,
    is_finite,
    round_half_away,
)

U = TypeVar("U", bound=Unit)


class ArithmeticOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    DIVIDE = "divide"

    @property
    def requires_target(self) -> bool:
        # Division yields a plain number, so it has no result unit.
        return self is not ArithmeticOperation.DIVIDE


_OPERATORS: Dict[ArithmeticOperation, Callable[[float, float], float]] = {
    ArithmeticOperation.ADD: operator.add,
    ArithmeticOperation.SUBTRACT: operator.sub,
    ArithmeticOperation.DIVIDE: operator.truediv,
}


def validate_operands(
    left: Quantity,
    right: Optional[Quantity],
    operation: ArithmeticOperation,
    target_unit: Optional[Unit] = None,
) -> None:
    """Checks shared by every operation, in order; raises on the first failure."""
    if right is None:
        raise NullOperandError("other")
    if not isinstance(right, Quantity):
        raise TypeError(f"Cannot {operation.value} Quantity and {type(right).__name__}")
    if operation.requires_target and target_unit is None:
        raise NullUnitError("target_unit")

    require_same_category(left.unit, right.unit)
    if target_unit is not None:
        require_same_category(left.unit, target_unit)

    if not (is_finite(left.value) and is_finite(right.value)):
        raise InvalidValueError(
            (left.value, right.value), "Both quantities must have finite values"
        )

    left.unit.validate_operation_support(operation.name)


def _execute(
    operation: ArithmeticOperation,
    left: Quantity,
    right: Optional[Quantity],
    target_unit: Optional[Unit] = None,
) -> float:
    """Validate, normalise both operands to the base unit and apply `operation`."""
    validate_operands(left, right, operation, target_unit)
    other = cast(Quantity, right)

    this_base = ensure_finite(left.base_value)
    other_base = ensure_finite(other.base_value)

    if operation is ArithmeticOperation.DIVIDE and abs(other_base) < DIVISION_EPSILON:
        raise DivideByZeroError()

    result = _OPERATORS[operation](this_base, other_base)
    if not is_finite(result):
        raise InvalidValueError(
            result, f"Result of {operation.value} overflows: {left!r} and {other!r}"
        )
    return result


def _in_target(result_base: float, target_unit: U) -> Quantity[U]:
    # Rounded in the target unit, never in base-unit space.
    value = round_half_away(target_unit.from_base(result_base), RESULT_DECIMALS)
    return Quantity(value, target_unit)


# --- Instance-level operations (used by Quantity.add/subtract/divide) --------

def add(left: Quantity[U], right: Optional[Quantity[U]], target_unit: Optional[U]) -> Quantity[U]:
    result = _execute(ArithmeticOperation.ADD, left, right, target_unit)
    return _in_target(result, cast(U, target_unit))


def subtract(left: Quantity[U], right: Optional[Quantity[U]], target_unit: Optional[U]) -> Quantity[U]:
    result = _execute(ArithmeticOperation.SUBTRACT, left, right, target_unit)
    return _in_target(result, cast(U, target_unit))


def divide(left: Quantity[U], right: Optional[Quantity[U]]) -> float:
    return _execute(ArithmeticOperation.DIVIDE, left, right)


# --- Static variants ---------------------------------------------------------

def _require_operands(first: Optional[Quantity], second: Optional[Quantity]) -> Quantity:
    if first is None:
        raise NullOperandError("first")
    if second is None:
        raise NullOperandError("second")
    return first


def add_quantities(
    first: Optional[Quantity[U]], second: Optional[Quantity[U]], target_unit: Optional[U]
) -> Quantity[U]:
    """Sum of two quantities in `target_unit`."""
    return add(_require_operands(first, second), second, target_unit)


def subtract_quantities(
    first: Optional[Quantity[U]], second: Optional[Quantity[U]], target_unit: Optional[U]
) -> Quantity[U]:
    """`first - second` in `target_unit`."""
    return subtract(_require_operands(first, second), second, target_unit)


def divide_quantities(first: Optional[Quantity[U]], second: Optional[Quantity[U]]) -> float:
    return divide(_require_operands(first, second), second)


def add_values(
    first_value: float, first_unit: U, second_value: float, second_unit: U, target_unit: U
) -> Quantity[U]:
    """Build two quantities from value/unit pairs and add them into `target_unit`."""
    return add(Quantity(first_value, first_unit), Quantity(second_value, second_unit), target_unit)


def subtract_values(
    first_value: float, first_unit: U, second_value: float, second_unit: U, target_unit: U
) -> Quantity[U]:
    return subtract(Quantity(first_value, first_unit), Quantity(second_value, second_unit), target_unit)


def divide_values(first_value: float, first_unit: U, second_value: float, second_unit: U) -> float:
    return divide(Quantity(first_value, first_unit), Quantity(second_value, second_unit))


__all__ = [
    "ArithmeticOperation",
    "validate_operands",
    "add",
    "subtract",
    "divide",
    "add_quantities",
    "subtract_quantities",
    "divide_quantities",
    "add_values",
    "subtract_values",
    "divide_values",
]
