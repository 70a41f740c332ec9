import pytest

import measurium.units.registry as regmod
from measurium.units.registry import UnitNamespace, _bootstrap_default_registry


@pytest.fixture()
def fresh_registry():
    return _bootstrap_default_registry()


def test__get_default_registry_returns_DEFAULT(monkeypatch, fresh_registry):
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    import measurium.units as units
    get_default = getattr(units, "_get_default_registry")

    assert get_default() is fresh_registry


def test_lazy_u_binds_to_default_registry(monkeypatch, fresh_registry):
    # Patching DEFAULT_REGISTRY is enough; `u` is resolved on every access.
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    from measurium.units import u
    assert isinstance(u, UnitNamespace)
    assert u._reg is fresh_registry

    # Sanity: attribute access flows through to the registry
    assert u.yd is fresh_registry.get("yd")


def test_unknown_module_attribute_raises_attributeerror():
    import measurium.units as units
    with pytest.raises(AttributeError):
        _ = getattr(units, "definitely_not_a_public_attr")


def test_dir_includes_u():
    import measurium.units as units
    names = dir(units)
    assert "u" in names
    assert names == sorted(names)
