"""
measurium.units.length
======================

Length units. Feet is the base unit: every length is normalised to feet
before it is compared or combined.
"""
from __future__ import annotations

from measurium.core.unit import LinearUnit
from measurium.units.category import UnitCategory


class LengthUnit(LinearUnit):
    """A unit of length, scaled to feet."""

    __slots__ = ()


FEET = LengthUnit("feet", "ft", 1.0)
INCH = LengthUnit("inches", "in", 1.0 / 12.0)
YARD = LengthUnit("yards", "yd", 3.0)
CENTIMETER = LengthUnit("centimeters", "cm", 1.0 / (2.54 * 12.0))

LENGTH: UnitCategory[LengthUnit] = UnitCategory(
    "length",
    LengthUnit,
    (FEET, INCH, YARD, CENTIMETER),
    aliases={
        "foot": "ft",
        "inch": "in",
        "yard": "yd",
        "centimeter": "cm",
        "centimetre": "cm",
        "centimetres": "cm",
    },
)

__all__ = ["LengthUnit", "FEET", "INCH", "YARD", "CENTIMETER", "LENGTH"]
