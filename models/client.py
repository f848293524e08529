"""Client data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from models.appointment import Appointment


@dataclass
class Client:
    """Client derived from a group of appointments sharing an identity key.

    Display fields come from the first appointment seen for the key and are
    not refreshed from later appointments of the same group.
    """

    id: str
    car_brand: str
    car_model: str
    plate_number: Optional[str] = None
    color: Optional[str] = None
    appointments: List[Appointment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'carBrand': self.car_brand,
            'carModel': self.car_model,
            'plateNumber': self.plate_number,
            'color': self.color,
            'appointments': [apt.to_dict() for apt in self.appointments]
        }
