"""Appointment data models."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from config.constants import APPOINTMENT_STATUSES, BACKUP_VERSION


def generate_appointment_id() -> str:
    """Generate a process-unique appointment id."""
    return f"apt_{uuid.uuid4().hex[:12]}"


def _text(value: Any) -> Optional[str]:
    """Return value if it is a string, else None."""
    return value if isinstance(value, str) else None


@dataclass
class Appointment:
    """Service appointment for one car in one calendar slot."""

    id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM (24-hour format)
    car_brand: str
    car_model: str
    plate_number: Optional[str] = None
    color: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None  # None (unset), arrived, missed

    @property
    def starts_at(self) -> Optional[datetime]:
        """Composed date and time, or None if either part does not parse."""
        try:
            return datetime.strptime(f"{self.date}T{self.time}", '%Y-%m-%dT%H:%M')
        except (ValueError, TypeError):
            return None

    @property
    def day(self) -> Optional[date]:
        """Calendar day of the appointment, ignoring time-of-day."""
        try:
            return datetime.strptime(self.date, '%Y-%m-%d').date()
        except (ValueError, TypeError):
            return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the backup file shape (unset optionals omitted)."""
        data = {
            'id': self.id,
            'date': self.date,
            'time': self.time,
            'carBrand': self.car_brand,
            'carModel': self.car_model,
        }
        if self.plate_number is not None:
            data['plateNumber'] = self.plate_number
        if self.color is not None:
            data['color'] = self.color
        if self.notes is not None:
            data['notes'] = self.notes
        data['status'] = self.status
        return data

    @classmethod
    def from_dict(cls, data: Any) -> 'Appointment':
        """
        Create Appointment from an untrusted dictionary.

        Missing or ill-typed fields are defaulted instead of failing:
        required text becomes an empty string, optionals become None and
        an unknown status is treated as unset.

        Args:
            data: Parsed JSON object (anything else is treated as empty)

        Returns:
            Appointment
        """
        if not isinstance(data, dict):
            data = {}

        status = data.get('status')
        if status not in APPOINTMENT_STATUSES:
            status = None

        return cls(
            id=_text(data.get('id')) or generate_appointment_id(),
            date=_text(data.get('date')) or '',
            time=_text(data.get('time')) or '',
            car_brand=_text(data.get('carBrand')) or '',
            car_model=_text(data.get('carModel')) or '',
            plate_number=_text(data.get('plateNumber')),
            color=_text(data.get('color')),
            notes=_text(data.get('notes')),
            status=status
        )


@dataclass
class BackupDocument:
    """Backup of current and future appointments."""

    timestamp: datetime
    appointments: List[Appointment] = field(default_factory=list)
    version: Any = BACKUP_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'version': self.version,
            'timestamp': self.timestamp.isoformat(),
            'appointments': [apt.to_dict() for apt in self.appointments]
        }
