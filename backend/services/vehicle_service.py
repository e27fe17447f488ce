"""Vehicle service: forwards every operation to the repository unchanged."""
from typing import Any

from models.vehicle import Vehicle
from repositories.vehicle_repository import VehicleRepository


class VehicleService:
    """Seam between the HTTP routes and the vehicle repository."""

    def __init__(self, repository: VehicleRepository) -> None:
        self._repository = repository

    def find_all(self) -> list[Vehicle]:
        return self._repository.find_all()

    def create(self, vehicle: Vehicle) -> None:
        self._repository.create(vehicle)

    def create_multiple(self, vehicles: list[Vehicle]) -> None:
        self._repository.create_multiple(vehicles)

    def update(self, vehicle_id: int, fields: dict[str, Any]) -> None:
        self._repository.update(vehicle_id, fields)

    def update_speed(self, vehicle_id: int, speed: float) -> None:
        """Update only the max speed of a vehicle."""
        self._repository.update(vehicle_id, {"speed": speed})

    def update_fuel_type(self, vehicle_id: int, fuel_type: str) -> None:
        """Update only the fuel type of a vehicle."""
        self._repository.update(vehicle_id, {"fuel_type": fuel_type})

    def delete(self, vehicle_id: int) -> None:
        self._repository.delete(vehicle_id)

    def get_by_color_and_year(self, color: str, year: int) -> list[Vehicle]:
        return self._repository.get_by_color_and_year(color, year)

    def get_by_brand_and_year_range(self, brand: str, start_year: int, end_year: int) -> list[Vehicle]:
        return self._repository.get_by_brand_and_year_range(brand, start_year, end_year)

    def get_by_fuel_type(self, fuel_type: str) -> list[Vehicle]:
        return self._repository.get_by_fuel_type(fuel_type)

    def get_by_transmission(self, transmission: str) -> list[Vehicle]:
        return self._repository.get_by_transmission(transmission)

    def get_average_speed_by_brand(self, brand: str) -> float:
        return self._repository.get_average_speed_by_brand(brand)

    def get_average_capacity_by_brand(self, brand: str) -> float:
        return self._repository.get_average_capacity_by_brand(brand)

    def get_by_dimensions(self, bounds: dict[str, float]) -> list[Vehicle]:
        return self._repository.get_by_dimensions(bounds)

    def get_by_weight(self, bounds: dict[str, float]) -> list[Vehicle]:
        return self._repository.get_by_weight(bounds)
