# Schemas package
from .health import HealthResponse
from .vehicles import (
    AverageCapacityResponse,
    AverageSpeedResponse,
    FuelTypeUpdate,
    MessageResponse,
    SpeedUpdate,
    VEHICLE_REQUIRED_FIELDS,
    VehicleBody,
)

__all__ = [
    "AverageCapacityResponse",
    "AverageSpeedResponse",
    "FuelTypeUpdate",
    "HealthResponse",
    "MessageResponse",
    "SpeedUpdate",
    "VEHICLE_REQUIRED_FIELDS",
    "VehicleBody",
]
