"""
measurium.core.quantity
=======================

Defines the `Quantity` class: an immutable numeric value tied to a unit of one
category.

`Quantity` is generic over its unit type, so ``Quantity[LengthUnit]`` and
``Quantity[WeightUnit]`` are different types to a static checker. At runtime
the unit's class plays the same role: conversion and arithmetic across unit
classes raise `CategoryMismatchError`, and equality across them is False.

The system supports:
- Conversion between units of the same category, through the base unit.
- Tolerant equality on base-unit values, with a hash consistent with it.
- Addition, subtraction and division, delegated to
  `measurium.core.arithmetic`, for categories that allow arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from measurium.core.errors import CategoryMismatchError, InvalidUnitError, NullUnitError
from measurium.core.unit import Unit
from measurium.core.utils import HASH_PRECISION, approx_equal, ensure_finite

U = TypeVar("U", bound=Unit)


def _resolve_unit(unit: object, argument: str = "unit") -> Unit:
    """
    Accept a unit instance or a registered symbol; reject everything else.

    A unit whose class belongs to a category in the default registry must be
    one of that category's declared units. Units of unregistered categories
    pass through unchecked.
    """
    if unit is None:
        raise NullUnitError(argument)

    from measurium.units.registry import DEFAULT_REGISTRY  # local import

    if isinstance(unit, str):
        return DEFAULT_REGISTRY.get(unit)
    if not isinstance(unit, Unit):
        raise InvalidUnitError(
            f"Expected a unit for '{argument}', got {type(unit).__name__}"
        )
    category = DEFAULT_REGISTRY.category_of(unit)
    if category is not None:
        return category.validate(unit)
    return unit


def require_same_category(expected: Unit, got: Unit, action: str = "combine") -> None:
    """Raise `CategoryMismatchError` unless both units are of the same category."""
    if type(expected) is not type(got):
        raise CategoryMismatchError(type(expected), type(got), action)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Quantity(Generic[U]):
    """
    Represents a measurement: a finite value expressed in a unit.

    Attributes
    ----------
    value : float
        The numeric value, in `unit`. Never NaN or infinite, and finite once
        converted to the base unit.
    unit : Unit
        The unit the value is expressed in. A string is resolved through the
        default category registry (``Quantity(3, "ft")``).
    """

    value: float
    unit: U

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", ensure_finite(self.value))
        object.__setattr__(self, "unit", _resolve_unit(self.unit))
        # The base value must be finite too, so equality and hashing are total.
        self.unit.to_base(self.value)

    # --- Normalisation -------------------------------------------------------

    @property
    def base_value(self) -> float:
        """The value expressed in the category's base unit."""
        return self.unit.to_base(self.value)

    @property
    def unit_type(self) -> type:
        """The unit class, i.e. the category this quantity belongs to."""
        return type(self.unit)

    def to(self, new_unit: "U | str") -> Quantity[U]:
        """Return an equivalent quantity expressed in `new_unit`."""
        target = _resolve_unit(new_unit, "new_unit")
        require_same_category(self.unit, target, "convert between")
        return Quantity(target.from_base(self.base_value), target)

    def to_value(self, new_unit: "U | str") -> float:
        """Convert to `new_unit` and return just the number."""
        return self.to(new_unit).value

    # --- Equality / hashing --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Quantity):
            return NotImplemented
        # Different categories are never equal; same category compares base values.
        return (
            type(self.unit) is type(other.unit)
            and approx_equal(self.base_value, other.base_value)
        )

    def __hash__(self) -> int:
        return hash(self.as_key())

    def as_key(self, precision: int = HASH_PRECISION) -> tuple:
        """
        Returns a hashable, discretized key for this quantity.

        `__hash__` uses this key at the default precision, which matches the
        equality tolerance. Quantities that compare equal share a key except
        when their base values straddle a rounding boundary.

        Parameters
        ----------
        precision : int, optional
            Number of decimal places of the *base-unit value* kept in the key,
            by default 6.

        Returns
        -------
        tuple
            A hashable tuple of (unit class, rounded base value).
        """
        rounded = round(self.base_value, precision)

        # -0.0 and 0.0 are equal but must not yield different keys.
        if rounded == 0.0:
            rounded = 0.0

        return (type(self.unit), rounded)

    # --- Arithmetic ----------------------------------------------------------

    def _target(self, target_unit: "Optional[U | str]") -> U:
        if target_unit is None:
            return self.unit
        return _resolve_unit(target_unit, "target_unit")  # type: ignore[return-value]

    def add(self, other: Quantity[U], target_unit: Optional[U] = None) -> Quantity[U]:
        """Sum in `target_unit` (default: this quantity's unit), rounded to 2 decimals."""
        from measurium.core import arithmetic

        return arithmetic.add(self, other, self._target(target_unit))

    def subtract(self, other: Quantity[U], target_unit: Optional[U] = None) -> Quantity[U]:
        """Difference in `target_unit` (default: this quantity's unit), rounded to 2 decimals."""
        from measurium.core import arithmetic

        return arithmetic.subtract(self, other, self._target(target_unit))

    def divide(self, other: Quantity[U]) -> float:
        """Dimensionless ratio of the two base-unit values, unrounded."""
        from measurium.core import arithmetic

        return arithmetic.divide(self, other)

    def __add__(self, other: object) -> Quantity[U]:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Quantity[U]:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __truediv__(self, other: object) -> float:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.divide(other)

    # --- Display -------------------------------------------------------------

    def __repr__(self) -> str:
        return f"{self.value:.15g} {self.unit.symbol}"

    def __str__(self) -> str:
        return repr(self)

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Quantity objects.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            Same as ``str(q)``: the value with up to 15 significant digits.
        any float format spec
            Applied to the value, the symbol is appended.

        Examples
        --------
        >>> q = Quantity(12, INCH)
        >>> f"{q}"
        '12 in'
        >>> f"{q:.2f}"
        '12.00 in'
        """
        spec = (spec or "").strip()
        if spec in ("", "native"):
            return repr(self)
        return f"{format(self.value, spec)} {self.unit.symbol}"


__all__ = ["Quantity", "require_same_category"]
