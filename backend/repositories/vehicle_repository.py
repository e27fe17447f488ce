"""Vehicle repository: in-memory store with list, filter, create, update, delete."""
import logging
import threading
from typing import Any, Callable, Iterable, Optional

from models.vehicle import Vehicle
from repositories.errors import (
    InvalidFieldError,
    VehicleAlreadyExistsError,
    VehicleNotFoundByBrandError,
    VehicleNotFoundByTransmissionError,
    VehicleNotFoundError,
)
from repositories.vehicle_updates import parse_vehicle_updates

LOG = logging.getLogger(__name__)

DIMENSION_BOUND_KEYS = frozenset(
    {"min_height", "max_height", "min_length", "max_length", "min_width", "max_width"}
)
WEIGHT_BOUND_KEYS = frozenset({"min_weight", "max_weight"})


def _within(value: float, low: Optional[float], high: Optional[float]) -> bool:
    """True if value lies in [low, high]; a None bound is unconstrained."""
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _check_bound_keys(bounds: dict[str, float], allowed: frozenset[str]) -> None:
    for key in bounds:
        if key not in allowed:
            raise InvalidFieldError(key, "is not a recognized bound")


class VehicleRepository:
    """
    Owns the vehicle collection keyed by id.
    Every public method takes the lock and returns copies, never stored records.
    """

    def __init__(self, vehicles: Optional[Iterable[Vehicle]] = None) -> None:
        self._db: dict[int, Vehicle] = {}
        self._lock = threading.Lock()
        for v in vehicles or ():
            self._db[v.id] = v.copy_record()

    def _select(self, predicate: Callable[[Vehicle], bool]) -> list[Vehicle]:
        """Copies of matching records, ordered by id. Caller holds the lock."""
        return [self._db[k].copy_record() for k in sorted(self._db) if predicate(self._db[k])]

    def _brand_values(self, brand: str, attr: str) -> list[float]:
        values = [getattr(v, attr) for v in self._db.values() if v.brand == brand]
        if not values:
            raise VehicleNotFoundByBrandError(brand)
        return values

    def find_all(self) -> list[Vehicle]:
        """Return all vehicles."""
        with self._lock:
            return self._select(lambda v: True)

    def create(self, vehicle: Vehicle) -> None:
        """Store a vehicle. Raises VehicleAlreadyExistsError if the id is taken."""
        with self._lock:
            if vehicle.id in self._db:
                raise VehicleAlreadyExistsError(vehicle.id)
            self._db[vehicle.id] = vehicle.copy_record()
        LOG.info("Vehicle created id=%s", vehicle.id)

    def create_multiple(self, vehicles: list[Vehicle]) -> None:
        """Store every vehicle, or none if any id collides with the store or the batch itself."""
        with self._lock:
            seen: set[int] = set()
            for v in vehicles:
                if v.id in self._db or v.id in seen:
                    raise VehicleAlreadyExistsError(v.id)
                seen.add(v.id)
            for v in vehicles:
                self._db[v.id] = v.copy_record()
        LOG.info("Vehicles created count=%d", len(vehicles))

    def update(self, vehicle_id: int, fields: dict[str, Any]) -> None:
        """Apply a partial update. Only 'speed' and 'fuel_type' are accepted."""
        updates = parse_vehicle_updates(fields)
        with self._lock:
            vehicle = self._db.get(vehicle_id)
            if vehicle is None:
                raise VehicleNotFoundError(f"Vehicle with id {vehicle_id} not found")
            for op in updates:
                op.apply(vehicle)
        LOG.info("Vehicle updated id=%s fields=%s", vehicle_id, sorted(fields))

    def delete(self, vehicle_id: int) -> None:
        """Remove a vehicle. Raises VehicleNotFoundError if absent."""
        with self._lock:
            if vehicle_id not in self._db:
                raise VehicleNotFoundError(f"Vehicle with id {vehicle_id} not found")
            del self._db[vehicle_id]
        LOG.info("Vehicle deleted id=%s", vehicle_id)

    def get_by_color_and_year(self, color: str, year: int) -> list[Vehicle]:
        with self._lock:
            found = self._select(lambda v: v.color == color and v.fabrication_year == year)
        if not found:
            raise VehicleNotFoundError()
        return found

    def get_by_brand_and_year_range(self, brand: str, start_year: int, end_year: int) -> list[Vehicle]:
        """Vehicles of a brand fabricated in [start_year, end_year]. Caller rejects start_year > end_year."""
        with self._lock:
            found = self._select(
                lambda v: v.brand == brand and start_year <= v.fabrication_year <= end_year
            )
        if not found:
            raise VehicleNotFoundError()
        return found

    def get_by_fuel_type(self, fuel_type: str) -> list[Vehicle]:
        with self._lock:
            found = self._select(lambda v: v.fuel_type == fuel_type)
        if not found:
            raise VehicleNotFoundError()
        return found

    def get_by_transmission(self, transmission: str) -> list[Vehicle]:
        with self._lock:
            found = self._select(lambda v: v.transmission == transmission)
        if not found:
            raise VehicleNotFoundByTransmissionError(transmission)
        return found

    def get_average_speed_by_brand(self, brand: str) -> float:
        """Mean max_speed of a brand. Raises VehicleNotFoundByBrandError if none match."""
        with self._lock:
            speeds = self._brand_values(brand, "max_speed")
        return sum(speeds) / len(speeds)

    def get_average_capacity_by_brand(self, brand: str) -> float:
        """Mean capacity of a brand. Raises VehicleNotFoundByBrandError if none match."""
        with self._lock:
            capacities = self._brand_values(brand, "capacity")
        return sum(capacities) / len(capacities)

    def get_by_dimensions(self, bounds: dict[str, float]) -> list[Vehicle]:
        """
        Vehicles whose dimensions fall within the given bounds.
        Keys are min_/max_ + height, length or width; absent keys are unconstrained.
        An empty result is not an error.
        """
        _check_bound_keys(bounds, DIMENSION_BOUND_KEYS)

        def matches(v: Vehicle) -> bool:
            d = v.dimensions
            return (
                _within(d.height, bounds.get("min_height"), bounds.get("max_height"))
                and _within(d.length, bounds.get("min_length"), bounds.get("max_length"))
                and _within(d.width, bounds.get("min_width"), bounds.get("max_width"))
            )

        with self._lock:
            return self._select(matches)

    def get_by_weight(self, bounds: dict[str, float]) -> list[Vehicle]:
        """Vehicles with weight in [min_weight, max_weight]; absent keys are unconstrained."""
        _check_bound_keys(bounds, WEIGHT_BOUND_KEYS)
        low, high = bounds.get("min_weight"), bounds.get("max_weight")
        with self._lock:
            return self._select(lambda v: _within(v.weight, low, high))
