# tests/conftest.py
import pytest
from measurium.units.registry import _bootstrap_default_registry


@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped CategoryRegistry for isolation per test."""
    return _bootstrap_default_registry()

@pytest.fixture()
def service():
    from measurium.services import MeasurementService
    return MeasurementService()
