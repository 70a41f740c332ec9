# pytest tests for measurium.units.registry and measurium.units.category
#
# These tests exercise symbol/alias lookup, category invariants, registration
# conflicts and thread-safety. They use an isolated registry instance for
# anything that mutates state.

import threading

import pytest

import measurium.units.registry as regmod
from measurium.core.errors import CategoryMismatchError, InvalidUnitError
from measurium.core.unit import LinearUnit, Unit
from measurium.units.category import UnitCategory, normalize_symbol
from measurium.units.length import CENTIMETER, FEET, INCH, LENGTH, YARD, LengthUnit
from measurium.units.registry import CategoryRegistry
from measurium.units.temperature import CELSIUS, FAHRENHEIT, KELVIN, TEMPERATURE
from measurium.units.volume import GALLON, LITRE, MILLILITRE, VOLUME
from measurium.units.weight import GRAM, KILOGRAM, POUND, WEIGHT


class _SpeedUnit(LinearUnit):
    __slots__ = ()


MPS = _SpeedUnit("metres per second", "m/s", 1.0)
KPH = _SpeedUnit("kilometres per hour", "km/h", 1 / 3.6)


def _speed(name="speed", aliases=None):
    return UnitCategory(name, _SpeedUnit, [MPS, KPH], aliases=aliases)


# ---------------------------------------------------------------------------
# Shipped categories
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("sym, unit", [
    ("ft", FEET), ("in", INCH), ("yd", YARD), ("cm", CENTIMETER),
    ("kg", KILOGRAM), ("g", GRAM), ("lb", POUND),
    ("L", LITRE), ("mL", MILLILITRE), ("gal", GALLON),
    ("°C", CELSIUS), ("°F", FAHRENHEIT), ("K", KELVIN),
])
def test_shipped_symbols_resolve(reg, sym, unit):
    u = reg.get(sym)
    assert isinstance(u, Unit)
    assert u is unit


def test_categories_registered_by_name(reg):
    assert set(reg.all()) == {"length", "weight", "volume", "temperature"}
    assert reg.category("length") is LENGTH
    assert reg.category("temperature") is TEMPERATURE


@pytest.mark.parametrize("cat, base", [
    (LENGTH, FEET), (WEIGHT, KILOGRAM), (VOLUME, LITRE), (TEMPERATURE, CELSIUS),
])
def test_each_category_has_its_base_unit(cat, base):
    assert cat.base_unit is base
    assert base.is_base
    assert sum(1 for unit in cat if unit.is_base) == 1


def test_arithmetic_capability_per_category():
    assert LENGTH.supports_arithmetic
    assert WEIGHT.supports_arithmetic
    assert VOLUME.supports_arithmetic
    assert not TEMPERATURE.supports_arithmetic


def test_category_of(reg):
    assert reg.category_of(INCH) is LENGTH
    assert reg.category_of(KELVIN) is TEMPERATURE
    assert reg.category_of(MPS) is None


def test_unknown_category_raises(reg):
    with pytest.raises(ValueError, match="Unknown unit category"):
        reg.category("speed")


# ---------------------------------------------------------------------------
# Normalization & aliases
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("alias, canonical", [
    ("feet", "ft"),
    ("Foot", "ft"),
    ("INCHES", "in"),
    ("centimetre", "cm"),
    ("kilogram", "kg"),
    ("lbs", "lb"),
    ("liter", "L"),
    ("ml", "mL"),
    ("Gallons", "gal"),
    ("celsius", "°C"),
    ("degF", "°F"),
    ("kelvin", "K"),
])
def test_aliases_map_to_canonical(reg, alias, canonical):
    assert reg.get(alias) is reg.get(canonical)


def test_symbols_are_case_sensitive(reg):
    # "KG" is neither a symbol nor an alias of anything.
    with pytest.raises(InvalidUnitError):
        reg.get("KG")


def test_surrounding_whitespace_and_ordinal_degree(reg):
    assert reg.get("  ft ") is FEET
    assert reg.get("ºC") is CELSIUS


@pytest.mark.parametrize("inp, expected", [
    ("  ft", "ft"),
    ("ºF", "°F"),
    ("", ""),
])
def test_normalize_symbol(inp, expected):
    assert normalize_symbol(inp) == expected


def test_unknown_symbol_raises(reg):
    with pytest.raises(InvalidUnitError, match="Unknown unit symbol"):
        reg.get("furlong")
    assert not reg.has("furlong")
    assert "furlong" not in reg
    assert "ft" in reg


def test_unknown_symbol_is_a_value_error(reg):
    with pytest.raises(ValueError):
        reg.get("nope")


# ---------------------------------------------------------------------------
# UnitCategory
# ---------------------------------------------------------------------------

def test_category_lookup_is_scoped():
    assert LENGTH.get("in") is INCH
    with pytest.raises(InvalidUnitError, match="Unknown length unit"):
        LENGTH.get("kg")


def test_category_membership():
    assert "yd" in LENGTH
    assert YARD in LENGTH
    assert KILOGRAM not in LENGTH
    assert len(LENGTH) == 4
    assert list(LENGTH) == [FEET, INCH, YARD, CENTIMETER]
    assert LENGTH.symbols() == ("ft", "in", "yd", "cm")


def test_category_validate():
    assert LENGTH.validate(CENTIMETER) is CENTIMETER
    with pytest.raises(InvalidUnitError, match="not a declared length unit"):
        LENGTH.validate(GRAM)
    stray = LengthUnit("chains", "ch", 66.0)
    with pytest.raises(InvalidUnitError):
        LENGTH.validate(stray)


def test_category_requires_exactly_one_base():
    with pytest.raises(ValueError, match="exactly one base unit"):
        UnitCategory("speed", _SpeedUnit, [KPH])
    with pytest.raises(ValueError, match="exactly one base unit"):
        UnitCategory("speed", _SpeedUnit, [MPS, _SpeedUnit("metres/s", "mps", 1.0)])


def test_category_rejects_empty():
    with pytest.raises(ValueError, match="at least one unit"):
        UnitCategory("speed", _SpeedUnit, [])


def test_category_rejects_foreign_unit_type():
    with pytest.raises(CategoryMismatchError):
        UnitCategory("speed", _SpeedUnit, [MPS, FEET])


def test_category_rejects_duplicate_symbol():
    with pytest.raises(ValueError, match="already exists"):
        UnitCategory("speed", _SpeedUnit, [MPS, _SpeedUnit("other", "m/s", 2.0)])


def test_category_rejects_alias_to_unknown_unit():
    with pytest.raises(InvalidUnitError, match="Cannot register alias"):
        _speed(aliases={"knot": "kn"})


def test_category_repr():
    assert repr(_speed()) == "UnitCategory('speed', base='m/s', units=['m/s', 'km/h'])"


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_register_new_category(reg):
    reg.register(_speed(aliases={"kph": "km/h"}))
    assert reg.get("km/h") is KPH
    assert reg.get("KPH") is KPH
    assert reg.category_of(MPS).name == "speed"


def test_register_duplicate_name_rejected(reg):
    with pytest.raises(ValueError, match="already exists"):
        reg.register(_speed(name="length"))


def test_register_replace_overwrites(reg):
    replacement = UnitCategory("length", LengthUnit, [FEET, INCH])
    reg.register(replacement, replace=True)
    assert reg.category("length") is replacement
    assert not reg.has("yd")


def test_register_ambiguous_spelling_rejected(reg):
    with pytest.raises(ValueError, match="already resolves"):
        reg.register(_speed(aliases={"feet": "m/s"}))


@pytest.mark.parametrize("name", ["__call__", "__init__", "_reserved_names"])
def test_register_rejects_namespace_reserved_names(reg, name):
    with pytest.raises(ValueError, match="conflicts with UnitNamespace"):
        reg.register(_speed(name=name))


def test_unregister(reg):
    reg.unregister("volume")
    assert not reg.has("gal")
    with pytest.raises(ValueError, match="Unknown unit category"):
        reg.unregister("volume")


def test_default_registry_is_bootstrapped():
    assert set(regmod.DEFAULT_REGISTRY.all()) == {"length", "weight", "volume", "temperature"}


def test_registries_are_isolated():
    first = CategoryRegistry()
    second = CategoryRegistry()
    first.register(_speed())
    assert first.has("m/s")
    assert not second.has("m/s")


# ---------------------------------------------------------------------------
# Thread-safety
# ---------------------------------------------------------------------------

def test_concurrent_lookups_return_same_unit(reg):
    found = []
    errs = []

    def worker():
        try:
            found.append(reg.get("yards"))
        except Exception as e:
            errs.append(e)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errs
    assert len(found) == 16
    assert all(u is YARD for u in found)


def test_concurrent_registration_admits_one(reg):
    ok = []
    errs = []

    def worker():
        try:
            reg.register(_speed())
            ok.append(True)
        except ValueError as e:
            errs.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ok) == 1
    assert len(errs) == 7
    assert reg.category("speed").base_unit is MPS
