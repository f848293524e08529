"""Input validation utilities."""

import re
from datetime import datetime
from typing import Optional
from utils.errors import ValidationError


def validate_date(date_str: str) -> bool:
    """
    Validate date string.

    Args:
        date_str: Date string (YYYY-MM-DD format)

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(date_str, str) or not re.match(r'^\d{4}-\d{2}-\d{2}$', date_str):
        return False

    try:
        datetime.strptime(date_str, '%Y-%m-%d')
        return True
    except (ValueError, TypeError):
        return False


def validate_time(time_str: str) -> bool:
    """
    Validate time string.

    Args:
        time_str: Time string (HH:MM, 24-hour format)

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(time_str, str) or not re.match(r'^\d{2}:\d{2}$', time_str):
        return False

    try:
        datetime.strptime(time_str, '%H:%M')
        return True
    except ValueError:
        return False


def normalize_plate_number(plate: str) -> str:
    """
    Normalize plate number for identity comparison.

    Args:
        plate: Plate number as typed

    Returns:
        Upper-cased plate with all whitespace removed
    """
    return re.sub(r'\s+', '', plate).upper()


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Collapse empty optional text to None (unset)."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def validate_booking_fields(car_brand: str, car_model: str):
    """
    Check the fields every booking must carry.

    Args:
        car_brand: Car brand
        car_model: Car model

    Raises:
        ValidationError: if brand or model is empty
    """
    missing = []
    if not car_brand or not str(car_brand).strip():
        missing.append('car_brand')
    if not car_model or not str(car_model).strip():
        missing.append('car_model')

    if missing:
        raise ValidationError(f"Missing required booking fields: {', '.join(missing)}")
