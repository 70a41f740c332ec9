"""
measurium.units.temperature
===========================

Temperature units. Celsius is the base unit.

Fahrenheit and Kelvin are offset scales, so each carries explicit formulas
instead of a factor. Absolute temperatures cannot be meaningfully added,
subtracted or divided; the category disables arithmetic and keeps conversion
and equality.
"""
from __future__ import annotations

from typing import ClassVar

from measurium.core.unit import FormulaUnit
from measurium.units.category import UnitCategory


class TemperatureUnit(FormulaUnit):
    """A temperature scale, converted through degrees Celsius."""

    __slots__ = ()

    supports_arithmetic: ClassVar[bool] = False


CELSIUS = TemperatureUnit(
    "Celsius",
    "°C",
    to_base_fn=lambda c: c,
    from_base_fn=lambda c: c,
)
FAHRENHEIT = TemperatureUnit(
    "Fahrenheit",
    "°F",
    to_base_fn=lambda f: (f - 32) * 5 / 9,
    from_base_fn=lambda c: c * 9 / 5 + 32,
)
KELVIN = TemperatureUnit(
    "Kelvin",
    "K",
    to_base_fn=lambda k: k - 273.15,
    from_base_fn=lambda c: c + 273.15,
)

TEMPERATURE: UnitCategory[TemperatureUnit] = UnitCategory(
    "temperature",
    TemperatureUnit,
    (CELSIUS, FAHRENHEIT, KELVIN),
    aliases={
        "degC": "°C",
        "deg_celsius": "°C",
        "degF": "°F",
        "deg_fahrenheit": "°F",
        "kelvins": "K",
    },
)

__all__ = ["TemperatureUnit", "CELSIUS", "FAHRENHEIT", "KELVIN", "TEMPERATURE"]
