"""Tests for input validation helpers."""

import pytest

from utils.errors import ValidationError
from utils.validators import (
    clean_optional,
    normalize_plate_number,
    validate_booking_fields,
    validate_date,
    validate_time
)


def test_date_validation():
    """Test date validation."""
    assert validate_date('2024-01-10') == True
    assert validate_date('2024-02-30') == False
    assert validate_date('10.01.2024') == False
    assert validate_date('2024-1-5') == False
    assert validate_date('2024-01-5') == False
    assert validate_date(None) == False


def test_time_validation():
    """Test time validation."""
    assert validate_time('09:00') == True
    assert validate_time('20:30') == True
    assert validate_time('9:00') == False
    assert validate_time('24:00') == False
    assert validate_time(930) == False


def test_plate_normalization():
    """Test plate number normalization."""
    assert normalize_plate_number('a123 bc') == 'A123BC'
    assert normalize_plate_number(' A 1 2 3\tB C ') == 'A123BC'


def test_clean_optional():
    """Empty text is unset."""
    assert clean_optional(None) is None
    assert clean_optional('') is None
    assert clean_optional('  ') is None
    assert clean_optional(' Red ') == 'Red'


def test_booking_fields():
    """Brand and model are required."""
    validate_booking_fields('BMW', 'X5')

    with pytest.raises(ValidationError, match='car_brand, car_model'):
        validate_booking_fields('', None)
