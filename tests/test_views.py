"""Tests for calendar and client list view models."""

from datetime import datetime

from layers.views import calendar_view, client_list_view
from services.appointment_store import AppointmentStore

NOW = datetime(2024, 1, 20, 12, 0)


def build_store(make_appointment):
    return AppointmentStore([
        make_appointment(id='old-miss', date='2024-01-10', plate_number='A123BC', status='missed'),
        make_appointment(id='booked', date='2024-01-22', time='10:00', plate_number='a123 bc'),
        make_appointment(id='other', date='2024-01-22', time='10:00', car_brand='Audi', car_model='A4'),
        make_appointment(id='odd', date='2024-01-22', time='10:15', car_brand='Audi', car_model='A4'),
    ])


def test_calendar_view(make_appointment):
    """Slots carry occupants and the unreliable flag."""
    view = calendar_view(build_store(make_appointment), '2024-01-22', NOW)

    assert view['heading'] == 'Понедельник, 22 января 2024'
    assert view['is_today'] is False
    assert len(view['slots']) == 23
    assert len(view['week']) == 7

    slot = next(s for s in view['slots'] if s['time'] == '10:00')
    flags = {entry['appointment'].id: entry['highlight'] for entry in slot['appointments']}
    assert flags == {'booked': 'unreliable', 'other': None}

    assert [apt.id for apt in view['off_grid']] == ['odd']


def test_calendar_view_today(make_appointment):
    """The selected day is flagged as today."""
    view = calendar_view(AppointmentStore(), '2024-01-20', NOW)

    assert view['is_today'] is True
    assert all(slot['appointments'] == [] for slot in view['slots'])


def test_client_list_view(make_appointment):
    """Clients are sorted, badged and counted."""
    rows = client_list_view(build_store(make_appointment), now=NOW)

    assert [row['client'].id for row in rows] == ['Audi|A4|Без цвета', 'A123BC']
    assert [row['reliability'] for row in rows] == ['neutral', 'unreliable']
    assert [row['active_appointments'] for row in rows] == [2, 1]


def test_client_list_view_search(make_appointment):
    """Search narrows the list."""
    rows = client_list_view(build_store(make_appointment), 'a123', NOW)

    assert [row['client'].id for row in rows] == ['A123BC']
