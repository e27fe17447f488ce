"""Partial update operations for vehicles.

A raw field mapping (e.g. decoded JSON) is parsed into a list of update
operations before anything is applied, so an unknown or mistyped field
rejects the whole update.
"""
import math
from typing import Any, Callable, Union

from models.vehicle import Vehicle
from repositories.errors import InvalidFieldError


class SetSpeed:
    """Set the vehicle's max speed."""

    __slots__ = ("speed",)

    def __init__(self, speed: float) -> None:
        self.speed = speed

    def apply(self, vehicle: Vehicle) -> None:
        vehicle.max_speed = self.speed

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SetSpeed) and other.speed == self.speed

    def __repr__(self) -> str:
        return f"SetSpeed({self.speed!r})"


class SetFuelType:
    """Set the vehicle's fuel type."""

    __slots__ = ("fuel_type",)

    def __init__(self, fuel_type: str) -> None:
        self.fuel_type = fuel_type

    def apply(self, vehicle: Vehicle) -> None:
        vehicle.fuel_type = self.fuel_type

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SetFuelType) and other.fuel_type == self.fuel_type

    def __repr__(self) -> str:
        return f"SetFuelType({self.fuel_type!r})"


VehicleUpdate = Union[SetSpeed, SetFuelType]


def _parse_speed(value: Any) -> SetSpeed:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFieldError("speed", "must be a number")
    try:
        speed = float(value)
    except OverflowError as e:
        raise InvalidFieldError("speed", "must be a number") from e
    if not math.isfinite(speed):
        raise InvalidFieldError("speed", "must be a finite number")
    return SetSpeed(speed)


def _parse_fuel_type(value: Any) -> SetFuelType:
    if not isinstance(value, str):
        raise InvalidFieldError("fuel_type", "must be a string")
    return SetFuelType(value)


_PARSERS: dict[str, Callable[[Any], VehicleUpdate]] = {
    "speed": _parse_speed,
    "fuel_type": _parse_fuel_type,
}


def parse_vehicle_updates(fields: dict[str, Any]) -> list[VehicleUpdate]:
    """Parse a field mapping into update operations. Raises InvalidFieldError on any bad key or value."""
    updates: list[VehicleUpdate] = []
    for key, value in fields.items():
        parser = _PARSERS.get(key)
        if parser is None:
            raise InvalidFieldError(key, "is not updatable")
        updates.append(parser(value))
    return updates
