"""Weight (mass) units, normalised through kilograms."""
from __future__ import annotations

from measurium.core.unit import LinearUnit
from measurium.units.category import UnitCategory


class WeightUnit(LinearUnit):
    """A unit of weight, scaled to kilograms."""

    __slots__ = ()


KILOGRAM = WeightUnit("kilograms", "kg", 1.0)
GRAM = WeightUnit("grams", "g", 0.001)
POUND = WeightUnit("pounds", "lb", 0.45359237)  # international avoirdupois pound

WEIGHT: UnitCategory[WeightUnit] = UnitCategory(
    "weight",
    WeightUnit,
    (KILOGRAM, GRAM, POUND),
    aliases={
        "kilogram": "kg",
        "kgs": "kg",
        "gram": "g",
        "pound": "lb",
        "lbs": "lb",
    },
)

__all__ = ["WeightUnit", "KILOGRAM", "GRAM", "POUND", "WEIGHT"]
