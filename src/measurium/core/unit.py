from __future__ import annotations

from dataclasses import dataclass, field
from math import isclose, isfinite
from typing import Callable, ClassVar, Protocol, runtime_checkable

from measurium.core.errors import InvalidValueError, UnsupportedOperationError
from measurium.core.utils import ensure_finite

# Sample points used to recognise an identity transform (the base unit).
_IDENTITY_PROBES = (-40.0, 0.0, 1.0, 100.0)


def _in_range(result: float, value: float, unit: "Unit") -> float:
    # A finite input can still overflow once scaled.
    if not isfinite(result):
        raise InvalidValueError(
            value, f"{value!r} {unit.symbol} overflows when converted"
        )
    return result


@runtime_checkable
class Unit(Protocol):
    name: str
    symbol: str

    # Whether add/subtract/divide make sense for this unit's category.
    supports_arithmetic: ClassVar[bool] = True

    # Value in this unit -> value in the category's base unit
    def to_base(self, value: float) -> float: ...

    # Value in the category's base unit -> value in this unit
    def from_base(self, value: float) -> float: ...

    @property
    def is_base(self) -> bool:
        """True when this unit's transform is the identity."""
        return all(
            isclose(self.to_base(x), x, rel_tol=1e-12, abs_tol=1e-12)
            for x in _IDENTITY_PROBES
        )

    def validate_operation_support(self, operation: str) -> None:
        """Raise `UnsupportedOperationError` if the category forbids `operation`."""
        if not self.supports_arithmetic:
            raise UnsupportedOperationError(
                operation,
                f"{type(self).__name__} does not support {operation} operations; "
                "only conversion and equality are available",
            )


@dataclass(frozen=True, slots=True)
class LinearUnit(Unit):
    """A unit related to its base unit by a single multiplicative factor."""

    name: str
    symbol: str
    factor: float

    def __post_init__(self) -> None:
        if not (self.factor > 0 and isfinite(self.factor)):
            raise ValueError("factor must be a positive, finite number")

    @property
    def conversion_factor(self) -> float:
        return self.factor

    def to_base(self, value: float) -> float:
        return _in_range(ensure_finite(value) * self.factor, value, self)

    def from_base(self, value: float) -> float:
        return _in_range(ensure_finite(value) / self.factor, value, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearUnit):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.name == other.name
            and self.symbol == other.symbol
            and isclose(self.factor, other.factor, rel_tol=0.0, abs_tol=1e-6)
        )

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.symbol))

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"


@dataclass(frozen=True, slots=True)
class FormulaUnit(Unit):
    """
    A unit related to its base unit by explicit to-base / from-base formulas.

    Used where no single factor exists, e.g. offset scales such as Fahrenheit.
    Equality and hashing only look at the name and symbol; two functions cannot
    be compared by value.
    """

    name: str
    symbol: str
    to_base_fn: Callable[[float], float] = field(compare=False, repr=False)
    from_base_fn: Callable[[float], float] = field(compare=False, repr=False)

    @property
    def conversion_factor(self) -> float:
        raise UnsupportedOperationError(
            "conversion_factor",
            f"{self.name} is non-linear; use to_base/from_base instead",
        )

    def to_base(self, value: float) -> float:
        return _in_range(self.to_base_fn(ensure_finite(value)), value, self)

    def from_base(self, value: float) -> float:
        return _in_range(self.from_base_fn(ensure_finite(value)), value, self)

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"


__all__ = ["Unit", "LinearUnit", "FormulaUnit"]
