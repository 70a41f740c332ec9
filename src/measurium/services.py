"""
measurium.services
==================

A thin facade over `Quantity` for callers that work with loose inputs, such as
a console front end: values typed as text, arguments that may be missing.

The facade adds no rules of its own. Absent operands to a comparison give
False; absent operands to arithmetic raise `NullOperandError`; bad text gives
None from `create_quantity`. Everything else comes from the core.
"""
from __future__ import annotations

import logging
from typing import Optional, TypeVar

from measurium.core import arithmetic
from measurium.core.errors import NullOperandError
from measurium.core.quantity import Quantity
from measurium.core.unit import Unit
from measurium.core.utils import try_parse_float

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=Unit)


class MeasurementService:
    """Guarded entry points for conversion, comparison and arithmetic."""

    def are_quantities_equal(
        self, first: Optional[Quantity], second: Optional[Quantity]
    ) -> bool:
        if first is None or second is None:
            logger.debug("equality check with a missing operand; returning False")
            return False
        return first == second

    def convert_value(self, value: float, source_unit: U, target_unit: U) -> float:
        """Convert a bare number from `source_unit` to `target_unit`."""
        return Quantity(value, source_unit).to_value(target_unit)

    def add_quantities(
        self, first: Optional[Quantity[U]], second: Optional[Quantity[U]]
    ) -> Quantity[U]:
        """Sum in the first quantity's unit."""
        first = self._require(first, "first")
        return first.add(self._require(second, "second"))

    def add_quantities_with_target(
        self,
        first: Optional[Quantity[U]],
        second: Optional[Quantity[U]],
        target_unit: Optional[U],
    ) -> Quantity[U]:
        return arithmetic.add_quantities(
            self._require(first, "first"), self._require(second, "second"), target_unit
        )

    def subtract_quantities(
        self,
        first: Optional[Quantity[U]],
        second: Optional[Quantity[U]],
        target_unit: Optional[U] = None,
    ) -> Quantity[U]:
        first = self._require(first, "first")
        return first.subtract(self._require(second, "second"), target_unit)

    def divide_quantities(
        self, first: Optional[Quantity[U]], second: Optional[Quantity[U]]
    ) -> float:
        return arithmetic.divide_quantities(
            self._require(first, "first"), self._require(second, "second")
        )

    def create_quantity(self, text: Optional[str], unit: U) -> Optional[Quantity[U]]:
        """
        Parse `text` as a number and wrap it in a quantity of `unit`.

        Returns None when the text is blank, not a number, or not finite.
        A missing or unknown unit still raises.
        """
        value = try_parse_float(text)
        if value is None:
            logger.debug("could not parse %r as a finite number", text)
            return None
        return Quantity(value, unit)

    @staticmethod
    def _require(quantity: Optional[Quantity[U]], argument: str) -> Quantity[U]:
        if quantity is None:
            raise NullOperandError(argument)
        return quantity


__all__ = ["MeasurementService"]
