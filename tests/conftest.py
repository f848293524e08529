"""Shared fixtures for the appointment book tests."""

import os

# Keep test runs from writing log files
os.environ.setdefault('LOG_FILE', '')

import pytest

from models.appointment import Appointment


@pytest.fixture
def make_appointment():
    """Factory for appointments with sensible defaults."""
    counter = {'n': 0}

    def _make(**fields) -> Appointment:
        counter['n'] += 1
        defaults = {
            'id': f"apt_test_{counter['n']}",
            'date': '2024-01-10',
            'time': '10:00',
            'car_brand': 'Toyota',
            'car_model': 'Camry',
        }
        defaults.update(fields)
        return Appointment(**defaults)

    return _make
