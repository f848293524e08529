"""Tests for the car catalog."""

import pytest

from services.car_catalog import CarCatalog
from services.appointment_store import AppointmentStore
from utils.errors import ValidationError


def test_default_catalog():
    """The workshop starts with five brands."""
    catalog = CarCatalog()

    assert [car.brand for car in catalog.brands()] == ['Audi', 'BMW', 'Mercedes-Benz', 'Toyota', 'Volkswagen']
    assert catalog.models_for('Toyota') == ['Camry', 'Corolla', 'RAV4', 'Land Cruiser']
    assert 'BMW X5' in catalog.car_options()


def test_add_brand():
    """Brands are trimmed and unique ignoring case."""
    catalog = CarCatalog({})

    car = catalog.add_brand('  Lada ')
    assert car.brand == 'Lada'
    assert car.models == []

    with pytest.raises(ValidationError):
        catalog.add_brand('LADA')
    with pytest.raises(ValidationError):
        catalog.add_brand('   ')


def test_add_model():
    """Models are trimmed; duplicates and unknown brands are ignored."""
    catalog = CarCatalog({'Lada': ['Vesta']})

    catalog.add_model('Lada', ' Niva ')
    catalog.add_model('Lada', 'Vesta')

    assert catalog.models_for('Lada') == ['Vesta', 'Niva']
    assert catalog.add_model('Kia', 'Rio') is None

    with pytest.raises(ValidationError):
        catalog.add_model('Lada', '')


def test_remove_brand_and_model():
    """Removing absent entries is a no-op."""
    catalog = CarCatalog({'Lada': ['Vesta', 'Niva'], 'Kia': ['Rio']})

    assert catalog.remove_model('Lada', 'Niva') is True
    assert catalog.remove_model('Lada', 'Niva') is False
    assert catalog.remove_brand('Kia') is True
    assert catalog.remove_brand('Kia') is False
    assert catalog.models_for('Kia') == []
    assert [car.to_dict() for car in catalog.brands()] == [{'brand': 'Lada', 'models': ['Vesta']}]


def test_removal_does_not_touch_appointments():
    """Appointments keep a model that left the catalog."""
    catalog = CarCatalog()
    store = AppointmentStore()
    apt = store.book(date='2024-01-10', car_brand='Audi', car_model='Q7')

    catalog.remove_model('Audi', 'Q7')
    catalog.remove_brand('Audi')

    assert store.get(apt.id).car_model == 'Q7'
