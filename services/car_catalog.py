"""Car brand and model catalog used by booking forms."""

from typing import Dict, List, Optional
from models.car import Car
from config.constants import DEFAULT_CAR_CATALOG
from utils.errors import ValidationError
from utils.logger import setup_logger

logger = setup_logger(__name__)


class CarCatalog:
    """Brands and models offered when booking.

    Changes here never touch existing appointments: an appointment whose
    model was removed keeps it.
    """

    def __init__(self, catalog: Optional[Dict[str, List[str]]] = None):
        if catalog is None:
            catalog = DEFAULT_CAR_CATALOG
        self.cars: List[Car] = [Car(brand=brand, models=list(models)) for brand, models in catalog.items()]

    def _find(self, brand: str) -> Optional[Car]:
        for car in self.cars:
            if car.brand == brand:
                return car
        return None

    def add_brand(self, brand: str) -> Car:
        """
        Add a brand with no models.

        Args:
            brand: Brand name

        Returns:
            The new catalog entry

        Raises:
            ValidationError: if the name is empty or already present (ignoring case)
        """
        brand = (brand or '').strip()
        if not brand:
            raise ValidationError("Brand name is required")

        if any(car.brand.lower() == brand.lower() for car in self.cars):
            raise ValidationError(f"Brand already exists: {brand}")

        car = Car(brand=brand)
        self.cars.append(car)
        logger.info(f"Brand added: {brand}")
        return car

    def add_model(self, brand: str, model: str) -> Optional[Car]:
        """
        Add a model to a brand.

        Duplicates and unknown brands are ignored.

        Args:
            brand: Brand name
            model: Model name

        Returns:
            The brand entry, or None if the brand is unknown

        Raises:
            ValidationError: if the model name is empty
        """
        model = (model or '').strip()
        if not model:
            raise ValidationError("Model name is required")

        car = self._find(brand)
        if car is None:
            logger.warning(f"Model not added, brand not found: {brand}")
            return None

        if model not in car.models:
            car.models.append(model)
            logger.info(f"Model added: {brand} {model}")
        return car

    def remove_brand(self, brand: str) -> bool:
        """Remove a brand and its models."""
        car = self._find(brand)
        if car is None:
            return False

        self.cars.remove(car)
        logger.info(f"Brand removed: {brand}")
        return True

    def remove_model(self, brand: str, model: str) -> bool:
        """Remove one model of a brand."""
        car = self._find(brand)
        if car is None or model not in car.models:
            return False

        car.models.remove(model)
        logger.info(f"Model removed: {brand} {model}")
        return True

    def brands(self) -> List[Car]:
        """Catalog entries sorted alphabetically by brand."""
        return sorted(self.cars, key=lambda car: car.brand.lower())

    def models_for(self, brand: str) -> List[str]:
        """Models of a brand, empty if the brand is unknown."""
        car = self._find(brand)
        return list(car.models) if car else []

    def car_options(self) -> List[str]:
        """Flat "Brand Model" strings for search widgets."""
        return [f"{car.brand} {model}" for car in self.cars for model in car.models]
