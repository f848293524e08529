"""Car catalog data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Car:
    """Catalog entry: a brand and its models in display order."""

    brand: str
    models: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'brand': self.brand,
            'models': list(self.models)
        }
