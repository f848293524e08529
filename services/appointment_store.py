"""Centralized appointment storage and mutation."""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional
from models.appointment import Appointment, generate_appointment_id
from config.constants import APPOINTMENT_STATUSES, DEFAULT_BOOKING_TIME
from utils.errors import ValidationError
from utils.logger import setup_logger
from utils.validators import clean_optional, validate_booking_fields, validate_date, validate_time

logger = setup_logger(__name__)

OPTIONAL_FIELDS = ('plate_number', 'color', 'notes')
EDITABLE_FIELDS = ('date', 'time', 'car_brand', 'car_model') + OPTIONAL_FIELDS


class AppointmentStore:
    """Single source of truth for appointments, kept in insertion order.

    Records are never edited through shared references: every change swaps
    in a new Appointment at the same position, so a list returned by all()
    stays a consistent snapshot.
    """

    def __init__(self, appointments: Optional[Iterable[Appointment]] = None):
        self._appointments: List[Appointment] = list(appointments or [])

    def __len__(self) -> int:
        return len(self._appointments)

    def _index_of(self, appointment_id: str) -> Optional[int]:
        for index, appointment in enumerate(self._appointments):
            if appointment.id == appointment_id:
                return index
        return None

    def add(self, appointment: Appointment) -> Appointment:
        """
        Append a new appointment.

        Args:
            appointment: Appointment to store

        Returns:
            The stored appointment

        Raises:
            ValidationError: if car brand or model is empty
        """
        validate_booking_fields(appointment.car_brand, appointment.car_model)
        self._appointments.append(appointment)
        logger.info(f"Appointment added: {appointment.id} on {appointment.date} at {appointment.time}")
        return appointment

    def book(
        self,
        date: str,
        car_brand: str,
        car_model: str,
        time: Optional[str] = None,
        plate_number: Optional[str] = None,
        color: Optional[str] = None,
        notes: Optional[str] = None
    ) -> Appointment:
        """
        Create and store a booking from form values.

        Args:
            date: Appointment date (YYYY-MM-DD)
            car_brand: Car brand
            car_model: Car model
            time: Appointment time (HH:MM), defaults to the first slot
            plate_number: Optional plate number
            color: Optional car color
            notes: Optional notes

        Returns:
            The new appointment

        Raises:
            ValidationError: if a required field is missing or malformed
        """
        validate_booking_fields(car_brand, car_model)
        time = time or DEFAULT_BOOKING_TIME

        if not validate_date(date):
            raise ValidationError(f"Invalid appointment date: {date!r}")
        if not validate_time(time):
            raise ValidationError(f"Invalid appointment time: {time!r}")

        plate_number = clean_optional(plate_number)
        appointment = Appointment(
            id=generate_appointment_id(),
            date=date,
            time=time,
            car_brand=car_brand.strip(),
            car_model=car_model.strip(),
            plate_number=plate_number.upper() if plate_number else None,
            color=clean_optional(color),
            notes=clean_optional(notes),
            status=None
        )
        return self.add(appointment)

    def update(self, appointment_id: str, patch: Dict[str, Any]) -> Optional[Appointment]:
        """
        Replace fields of an appointment.

        Empty strings clear optional fields. Unknown ids are ignored
        before the patch is looked at.

        Args:
            appointment_id: Appointment ID
            patch: Field name to new value (date, time, car_brand,
                car_model, plate_number, color, notes)

        Returns:
            Updated appointment, or None if the id is unknown

        Raises:
            ValidationError: if the patch names an unknown field or
                carries an invalid value
        """
        index = self._index_of(appointment_id)
        if index is None:
            logger.warning(f"Update ignored, appointment not found: {appointment_id}")
            return None

        unknown = [key for key in patch if key not in EDITABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        changes = dict(patch)
        for key in OPTIONAL_FIELDS:
            if key in changes:
                changes[key] = clean_optional(changes[key])
        if changes.get('plate_number'):
            changes['plate_number'] = changes['plate_number'].upper()

        if 'date' in changes and not validate_date(changes['date']):
            raise ValidationError(f"Invalid appointment date: {changes['date']!r}")
        if 'time' in changes and not validate_time(changes['time']):
            raise ValidationError(f"Invalid appointment time: {changes['time']!r}")

        updated = replace(self._appointments[index], **changes)
        validate_booking_fields(updated.car_brand, updated.car_model)
        self._appointments[index] = updated
        logger.debug(f"Appointment updated: {appointment_id}")
        return updated

    def set_status(self, appointment_id: str, status: Optional[str]) -> Optional[Appointment]:
        """
        Toggle the status of an appointment.

        Applying the status the appointment already has resets it to unset.

        Args:
            appointment_id: Appointment ID
            status: arrived, missed or None

        Returns:
            Updated appointment, or None if the id is unknown
        """
        if status is not None and status not in APPOINTMENT_STATUSES:
            raise ValidationError(f"Unknown appointment status: {status!r}")

        index = self._index_of(appointment_id)
        if index is None:
            logger.warning(f"Status change ignored, appointment not found: {appointment_id}")
            return None

        current = self._appointments[index]
        new_status = None if current.status == status else status
        updated = replace(current, status=new_status)
        self._appointments[index] = updated
        logger.debug(f"Appointment {appointment_id} status: {current.status} -> {new_status}")
        return updated

    def remove(self, appointment_id: str) -> bool:
        """
        Delete an appointment.

        Args:
            appointment_id: Appointment ID

        Returns:
            True if an appointment was removed
        """
        index = self._index_of(appointment_id)
        if index is None:
            logger.warning(f"Delete ignored, appointment not found: {appointment_id}")
            return False

        del self._appointments[index]
        logger.info(f"Appointment deleted: {appointment_id}")
        return True

    def replace_all(self, appointments: Iterable[Appointment]):
        """
        Replace the whole collection in one step.

        Args:
            appointments: New appointment list
        """
        new_appointments = list(appointments)
        self._appointments = new_appointments
        logger.info(f"Appointment store replaced: {len(new_appointments)} appointments")

    def get(self, appointment_id: str) -> Optional[Appointment]:
        """Retrieve appointment by ID."""
        index = self._index_of(appointment_id)
        return self._appointments[index] if index is not None else None

    def all(self) -> List[Appointment]:
        """Snapshot of all appointments in insertion order."""
        return list(self._appointments)

    def for_date(self, date: str) -> List[Appointment]:
        """
        Get appointments of one calendar day.

        Args:
            date: Date (YYYY-MM-DD)

        Returns:
            Appointments on that date, in insertion order
        """
        return [apt for apt in self._appointments if apt.date == date]
