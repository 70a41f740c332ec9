from measurium.core.unit import LinearUnit
from measurium.units.length import FEET, INCH, LengthUnit
from measurium.units.temperature import CELSIUS, TemperatureUnit
from measurium.units.volume import VolumeUnit
from measurium.units.weight import WeightUnit


def test_unit_equality_by_value():
    assert LengthUnit("feet", "ft", 1.0) == FEET
    assert hash(LengthUnit("feet", "ft", 1.0)) == hash(FEET)
    assert FEET != INCH


def test_unit_equality_tolerates_factor_float_drift():
    drifted = LengthUnit("inches", "in", 0.1 + (1.0 / 12.0 - 0.1))
    assert drifted == INCH


def test_units_of_different_categories_never_equal():
    # Same name, symbol and factor but a different category
    assert WeightUnit("x", "x", 1.0) != VolumeUnit("x", "x", 1.0)
    assert LinearUnit("feet", "ft", 1.0) != FEET


def test_unit_equality_with_other_types():
    assert LinearUnit.__eq__(FEET, "ft") is NotImplemented
    assert FEET != "ft"


def test_formula_units_compare_by_name_and_symbol():
    twin = TemperatureUnit("Celsius", "°C", lambda c: c, lambda c: c)
    assert twin == CELSIUS
    assert hash(twin) == hash(CELSIUS)
