"""
measurium.core.utils
====================

Numeric policy shared by units, quantities and the arithmetic engine.

Equality, hashing and rounding all read the constants below; they are not
configurable at runtime.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from math import isfinite
from numbers import Real
from typing import Any, Optional

from measurium.core.errors import InvalidValueError

# Two base-unit values closer than this compare equal.
EQUALITY_TOLERANCE: float = 1e-6

# Decimal places kept in the hash key; matches EQUALITY_TOLERANCE.
HASH_PRECISION: int = 6

# A divisor whose base-unit magnitude is below this is treated as zero.
DIVISION_EPSILON: float = 1e-9

# Decimal places kept by add/subtract results.
RESULT_DECIMALS: int = 2


def ensure_finite(value: Any) -> float:
    """Return `value` as a float, raising `InvalidValueError` unless it is a finite real."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValueError(value)
    x = float(value)
    if not isfinite(x):
        raise InvalidValueError(value)
    return x


def is_finite(value: float) -> bool:
    return isfinite(value)


def round_half_away(value: float, digits: int = RESULT_DECIMALS) -> float:
    """
    Round to `digits` decimals with ties going away from zero.

    This deliberately rounds the shortest decimal repr of `value`, not its
    binary value. The binary value of 2.675 is 2.67499999..., so `round`
    and any scale-then-round-away scheme give 2.67; this function gives 2.68
    (-2.68 for the negative), the result a reader of "2.675" expects.
    """
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Enough digits for any finite float quantized to `digits` places
        ctx.prec = 330 + digits
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    result = float(rounded)
    # Fold -0.0 so results print and hash like 0.0
    return 0.0 if result == 0.0 else result


def approx_equal(a: float, b: float, tolerance: float = EQUALITY_TOLERANCE) -> bool:
    """Absolute-tolerance comparison used for quantity equality."""
    return abs(a - b) < tolerance


def try_parse_float(text: Optional[str]) -> Optional[float]:
    """
    Parse user text into a finite float.

    Returns None for None, blank, unparsable or non-finite input; never raises.
    """
    if text is None or not text.strip():
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not isfinite(value):
        return None
    return value


__all__ = [
    "EQUALITY_TOLERANCE",
    "HASH_PRECISION",
    "DIVISION_EPSILON",
    "RESULT_DECIMALS",
    "ensure_finite",
    "is_finite",
    "round_half_away",
    "approx_equal",
    "try_parse_float",
]
