"""Client identity, aggregation and reliability derived from appointments."""

from datetime import datetime
from typing import Dict, Iterable, List, Optional
from models.appointment import Appointment
from models.client import Client
from config.constants import (
    NO_COLOR_LABEL,
    APPOINTMENT_STATUS_ARRIVED,
    APPOINTMENT_STATUS_MISSED,
    RELIABILITY_RELIABLE,
    RELIABILITY_UNRELIABLE,
    RELIABILITY_NEUTRAL
)
from utils.logger import setup_logger
from utils.validators import normalize_plate_number

logger = setup_logger(__name__)


def client_key(appointment: Appointment) -> str:
    """
    Resolve the identity key of the client an appointment belongs to.

    A plate number wins and is compared ignoring case and whitespace.
    Without one, all cars of the same brand, model and color share a
    single synthetic client.

    Args:
        appointment: Appointment

    Returns:
        Client key
    """
    if appointment.plate_number:
        plate = normalize_plate_number(appointment.plate_number)
        if plate:
            return plate

    color = appointment.color or NO_COLOR_LABEL
    return f"{appointment.car_brand}|{appointment.car_model}|{color}"


def chronological(appointment: Appointment):
    """Sort key by composed date-time; unparseable records go last."""
    starts_at = appointment.starts_at
    return (starts_at is None, starts_at or datetime.min)


def aggregate_clients(appointments: Iterable[Appointment]) -> List[Client]:
    """
    Group appointments into clients.

    Display fields of each client come from the first appointment seen for
    its key. Each client's appointments are sorted oldest first.

    Args:
        appointments: Appointments in store order

    Returns:
        List of clients, in order of first appearance
    """
    clients: Dict[str, Client] = {}

    for apt in appointments:
        key = client_key(apt)
        if key not in clients:
            clients[key] = Client(
                id=key,
                car_brand=apt.car_brand,
                car_model=apt.car_model,
                plate_number=apt.plate_number,
                color=apt.color
            )
        clients[key].appointments.append(apt)

    for client in clients.values():
        client.appointments.sort(key=chronological)

    return list(clients.values())


def index_clients(clients: Iterable[Client]) -> Dict[str, Client]:
    """Map client key to client."""
    return {client.id: client for client in clients}


def classify_reliability(appointments: Iterable[Appointment], now: datetime) -> str:
    """
    Classify a client from their appointment history.

    Only the most recent appointment that is already in the past and has a
    status counts: missed makes the client unreliable, arrived reliable.
    With no such appointment the client is neutral.

    Args:
        appointments: The client's appointments
        now: Reference time, captured once per render pass

    Returns:
        reliable, unreliable or neutral
    """
    resolved = [
        apt for apt in sorted(appointments, key=chronological)
        if apt.status and apt.starts_at is not None and apt.starts_at < now
    ]

    if not resolved:
        return RELIABILITY_NEUTRAL

    last = resolved[-1]
    return RELIABILITY_UNRELIABLE if last.status == APPOINTMENT_STATUS_MISSED else RELIABILITY_RELIABLE


def client_reliability(key: str, clients: Dict[str, Client], now: datetime) -> str:
    """
    Reliability of the client with the given key.

    Args:
        key: Client key
        clients: Clients indexed by key
        now: Reference time

    Returns:
        Verdict, neutral when no client has that key
    """
    client = clients.get(key)
    if client is None:
        return RELIABILITY_NEUTRAL
    return classify_reliability(client.appointments, now)


def slot_highlight(appointment: Appointment, clients: Dict[str, Client], now: datetime) -> Optional[str]:
    """
    Flag shown on a calendar slot occupant.

    The appointment's own status wins; otherwise an occupant whose client
    is unreliable gets flagged.

    Returns:
        arrived, missed, unreliable or None
    """
    if appointment.status in (APPOINTMENT_STATUS_ARRIVED, APPOINTMENT_STATUS_MISSED):
        return appointment.status

    if client_reliability(client_key(appointment), clients, now) == RELIABILITY_UNRELIABLE:
        return RELIABILITY_UNRELIABLE

    return None


def count_active_appointments(client: Client, now: datetime) -> int:
    """Number of the client's appointments at or after now."""
    return sum(
        1 for apt in client.appointments
        if apt.starts_at is not None and apt.starts_at >= now
    )


def search_clients(clients: List[Client], query: str) -> List[Client]:
    """
    Filter clients by brand, model, plate number or color.

    Args:
        clients: Clients to filter
        query: Case-insensitive substring; empty returns all clients

    Returns:
        Matching clients in input order
    """
    if not query:
        return list(clients)

    needle = query.lower()
    matches = []
    for client in clients:
        fields = [client.car_brand, client.car_model, client.plate_number, client.color]
        if any(field and needle in field.lower() for field in fields):
            matches.append(client)

    logger.debug(f"Client search {query!r}: {len(matches)} of {len(clients)}")
    return matches


def sort_clients_for_display(clients: Iterable[Client]) -> List[Client]:
    """Clients sorted by brand, then model."""
    return sorted(clients, key=lambda client: (client.car_brand.lower(), client.car_model.lower()))
