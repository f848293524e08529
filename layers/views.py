"""View models handed to the presentation layer.

Each builder reads one snapshot of the store and uses a single reference
time for every reliability verdict it computes, so the calendar and the
client list never disagree within a render pass.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from services.appointment_store import AppointmentStore
from tools.calendar import (
    as_date,
    bucket_by_time,
    format_full_date,
    is_today,
    off_grid_appointments,
    week_strip,
    DateLike
)
from tools.clients import (
    aggregate_clients,
    classify_reliability,
    count_active_appointments,
    index_clients,
    search_clients,
    slot_highlight,
    sort_clients_for_display
)
from utils.logger import setup_logger

logger = setup_logger(__name__)


def calendar_view(store: AppointmentStore, selected: DateLike, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the day calendar for the selected date.

    Args:
        store: Appointment store
        selected: Selected date
        now: Reference time, defaults to the current time

    Returns:
        Dictionary with heading, week strip, slots and off-grid appointments
    """
    now = now or datetime.now()
    selected_day = as_date(selected)
    snapshot = store.all()

    clients = index_clients(aggregate_clients(snapshot))
    day_appointments = [apt for apt in snapshot if apt.day == selected_day]

    slots = [
        {
            'time': time,
            'appointments': [
                {
                    'appointment': apt,
                    'highlight': slot_highlight(apt, clients, now)
                }
                for apt in appointments
            ]
        }
        for time, appointments in bucket_by_time(day_appointments).items()
    ]

    off_grid = off_grid_appointments(day_appointments)
    if off_grid:
        logger.debug(f"{len(off_grid)} appointments on {selected_day} are outside calendar slots")

    return {
        'date': selected_day.isoformat(),
        'heading': format_full_date(selected_day),
        'is_today': is_today(selected_day, now),
        'week': week_strip(selected_day, now),
        'slots': slots,
        'off_grid': off_grid
    }


def client_list_view(store: AppointmentStore, query: str = '', now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    Build the client list with reliability badges.

    Args:
        store: Appointment store
        query: Optional search text
        now: Reference time, defaults to the current time

    Returns:
        One dict per matching client, sorted by brand and model
    """
    now = now or datetime.now()
    clients = sort_clients_for_display(aggregate_clients(store.all()))

    return [
        {
            'client': client,
            'reliability': classify_reliability(client.appointments, now),
            'active_appointments': count_active_appointments(client, now)
        }
        for client in search_clients(clients, query)
    ]
