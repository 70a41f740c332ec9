"""Volume units, normalised through litres."""
from __future__ import annotations

from measurium.core.unit import LinearUnit
from measurium.units.category import UnitCategory


class VolumeUnit(LinearUnit):
    __slots__ = ()


LITRE = VolumeUnit("litres", "L", 1.0)
MILLILITRE = VolumeUnit("millilitres", "mL", 0.001)
GALLON = VolumeUnit("gallons", "gal", 3.78541)  # US liquid gallon

VOLUME: UnitCategory[VolumeUnit] = UnitCategory(
    "volume",
    VolumeUnit,
    (LITRE, MILLILITRE, GALLON),
    aliases={
        "litre": "L",
        "liter": "L",
        "liters": "L",
        "millilitre": "mL",
        "milliliter": "mL",
        "milliliters": "mL",
        "ml": "mL",
        "gallon": "gal",
    },
)

__all__ = ["VolumeUnit", "LITRE", "MILLILITRE", "GALLON", "VOLUME"]
